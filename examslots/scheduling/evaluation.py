import math
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple
import networkx as nx

from ..graph_build import to_networkx
from ..models import ConflictDetails, CourseGraph, ScheduleResult
from .validation import verify_solution


def conflict_pairs(courses: CourseGraph) -> List[Tuple[str, str]]:
    """Distinct unordered conflict pairs, each sorted, in sorted order."""
    pairs: Set[Tuple[str, str]] = set()
    for name, course in courses.items():
        for other in course.conflicts:
            a, b = sorted((name, other))
            pairs.add((a, b))
    return sorted(pairs)

def average_conflicts(courses: CourseGraph) -> float:
    if not courses:
        return 0.0
    total = sum(c.degree for c in courses.values())
    return round(total / len(courses), 1)

def conflict_details(courses: CourseGraph) -> ConflictDetails:
    pairs = conflict_pairs(courses)
    return ConflictDetails(total_pairs=len(pairs), conflict_pairs=pairs)


def _greedy_clique_lb(G: nx.Graph) -> int:
    """Fast lower bound on chromatic number via a greedy maximal clique.

    Picks the highest-degree node, then greedily grows a clique by repeatedly
    adding a node that is adjacent to all current clique members. Ties go to
    the smaller name so the bound is reproducible.
    """
    if G.number_of_nodes() == 0:
        return 0
    seed = min(G.nodes(), key=lambda u: (-G.degree(u), u))
    clique = {seed}
    candidates = set(G.neighbors(seed))
    while candidates:
        u = min(candidates, key=lambda v: (-G.degree(v), v))
        new_cands = {v for v in candidates if all(G.has_edge(v, w) for w in clique)}
        if u in new_cands:
            clique.add(u)
            candidates = new_cands.intersection(G.neighbors(u))
        else:
            candidates.remove(u)
    return len(clique)

def clique_lower_bound(courses: CourseGraph) -> int:
    return _greedy_clique_lb(to_networkx(courses))


@dataclass
class SlotChange:
    name: str
    standard_slot: Optional[int]
    optimized_slot: Optional[int]

@dataclass
class Comparison:
    changed: List[SlotChange] = field(default_factory=list)
    moved_count: int = 0
    standard_slots: int = 0
    optimized_slots: int = 0
    improvement_pct: int = 0

def compare_results(standard: ScheduleResult, optimized: ScheduleResult) -> Comparison:
    """Per-course slot differences between two colorings of the same courses."""
    changed: List[SlotChange] = []
    for name, course in standard.courses.items():
        opt_slot = optimized.slot_of(name)
        if course.slot != opt_slot:
            changed.append(SlotChange(name, course.slot, opt_slot))
    changed.sort(key=lambda c: (c.optimized_slot or 0, c.name))
    std, opt = standard.total_slots, optimized.total_slots
    # half-up, so -12.5 rounds to -12
    improvement = math.floor((std - opt) / std * 100 + 0.5) if std else 0
    return Comparison(
        changed=changed,
        moved_count=len(changed),
        standard_slots=std,
        optimized_slots=opt,
        improvement_pct=improvement,
    )


def summary(result: ScheduleResult) -> str:
    lb = clique_lower_bound(result.courses)
    ok = verify_solution(result.courses, result.slots)
    lines = [
        f"Algorithm: {result.algorithm or '-'}",
        f"Courses: {len(result.courses)}  Students: {len(result.students)}",
        f"Conflict pairs: {result.total_conflicts}  Avg conflicts/course: {result.average_conflicts_per_course}",
        f"Slots used: {result.total_slots}  Clique lower bound: {lb}",
        f"Valid (conflicts): {ok}",
    ]
    for slot in sorted(result.slots):
        names = result.slots[slot]
        lines.append(f"Slot {slot}: {', '.join(names)} ({len(names)} courses)")
    return "\n".join(lines) + "\n"
