import logging
from typing import Dict, Iterable, List, Sequence
import networkx as nx

from .models import Course, CourseGraph, Student

logger = logging.getLogger(__name__)

def build_conflict_graph(students: Iterable[Student], course_names: Sequence[str]) -> CourseGraph:
    """Build the course conflict graph for one scheduling request.

    Only names from ``course_names`` become vertices. Student mentions outside
    that universe, or blank after trimming, are dropped without error.
    """
    courses: CourseGraph = {}
    for name in course_names:
        if name and name.strip():
            name = name.strip()
            courses[name] = Course(name=name)

    n_students = 0
    for student in students:
        n_students += 1
        if not student or not student.courses:
            continue
        valid = [c.strip() for c in student.courses if c and c.strip() and c.strip() in courses]
        for i in range(len(valid)):
            for j in range(i + 1, len(valid)):
                u, v = valid[i], valid[j]
                if u != v:
                    courses[u].conflicts.add(v)
                    courses[v].conflicts.add(u)

    logger.debug("Built conflict graph: %d students, %d courses", n_students, len(courses))
    return courses

def to_networkx(courses: CourseGraph) -> nx.Graph:
    """Undirected networkx view of a course graph, with slot/color node attributes."""
    G = nx.Graph()
    for name, course in courses.items():
        G.add_node(name, slot=course.slot, color=course.color)
    for name, course in courses.items():
        for other in course.conflicts:
            G.add_edge(name, other)
    return G

def degree_table(courses: CourseGraph) -> List[Dict[str, object]]:
    """Courses by degree (desc) then name, with their sorted conflict lists."""
    rows = [{'name': name, 'degree': c.degree, 'conflicts': sorted(c.conflicts)}
            for name, c in courses.items()]
    rows.sort(key=lambda r: (-r['degree'], r['name']))
    return rows

def _dot_quote(text: str) -> str:
    return '"' + str(text).replace('\\', '\\\\').replace('"', '\\"') + '"'

def to_dot(G: nx.Graph) -> str:
    """Graphviz DOT source for a graph from to_networkx, nodes filled with their slot color."""
    lines = ["graph conflicts {", '  node [style=filled, fontcolor=white, shape=circle];']
    for n, data in G.nodes(data=True):
        label = _dot_quote(n)
        if data.get('slot'):
            label = label[:-1] + f'\\nSlot {data["slot"]}"'
        lines.append(f'  {_dot_quote(n)} [label={label}, fillcolor={_dot_quote(data.get("color") or "#64748b")}];')
    for u, v in G.edges():
        lines.append(f'  {_dot_quote(u)} -- {_dot_quote(v)};')
    lines.append("}")
    return "\n".join(lines)
