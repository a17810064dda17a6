import logging
from typing import Dict, List, Optional, Sequence, Set

from ..config import slot_color
from ..models import Course, CourseGraph, ScheduleResult, Student
from ..scheduling.evaluation import average_conflicts, conflict_details
from ..scheduling.validation import ensure_valid

logger = logging.getLogger(__name__)

def copy_graph(courses: CourseGraph) -> CourseGraph:
    """Names and conflict sets only; slot and color start unset."""
    return {name: Course(name=c.name, conflicts=set(c.conflicts)) for name, c in courses.items()}

def dsatur_colors(courses: CourseGraph) -> Dict[str, int]:
    """DSATUR color per course (1-based), keyed in the order courses were colored.

    The next course is the uncolored one with the most distinct neighbor
    colors, then the highest degree, then the smallest name.
    """
    coloring: Dict[str, int] = {}
    saturation: Dict[str, Set[int]] = {u: set() for u in courses}
    degrees = {u: c.degree for u, c in courses.items()}

    while len(coloring) < len(courses):
        candidates = [u for u in courses if u not in coloring]
        u = min(candidates, key=lambda x: (-len(saturation[x]), -degrees[x], x))
        neighbor_colors = {coloring[v] for v in courses[u].conflicts if v in coloring}
        c = 1
        while c in neighbor_colors:
            c += 1
        coloring[u] = c
        for v in courses[u].conflicts:
            saturation[v].add(c)
        logger.debug("dsatur: %s (saturation %d, degree %d) -> color %d",
                     u, len(saturation[u]), degrees[u], c)
    return coloring

def dsatur_coloring(courses: CourseGraph, students: Optional[Sequence[Student]] = None) -> ScheduleResult:
    """DSATUR coloring of a private copy of ``courses``.

    The input mapping is never touched, so a greedy result built on it stays
    valid. The returned result references the copy.
    """
    work = copy_graph(courses)
    coloring = dsatur_colors(work)

    slots: Dict[int, List[str]] = {}
    for name, course in work.items():
        slot = coloring[name]
        course.slot = slot
        course.color = slot_color(slot)
        slots.setdefault(slot, []).append(name)
    slots = {s: slots[s] for s in sorted(slots)}

    details = conflict_details(work)
    result = ScheduleResult(
        courses=work,
        slots=slots,
        total_slots=len(slots),
        total_conflicts=details.total_pairs,
        students=list(students or []),
        average_conflicts_per_course=average_conflicts(work),
        conflict_details=details,
        algorithm='dsatur',
    )
    logger.info("dsatur: %d courses in %d slots, %d conflict pairs",
                len(work), result.total_slots, result.total_conflicts)
    return ensure_valid(result)
