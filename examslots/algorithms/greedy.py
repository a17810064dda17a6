import logging
from typing import Dict, List, Optional, Sequence

from ..config import slot_color
from ..models import CourseGraph, ScheduleResult, Student
from ..scheduling.evaluation import average_conflicts, conflict_details
from ..scheduling.validation import ensure_valid

logger = logging.getLogger(__name__)

def welsh_powell_order(courses: CourseGraph) -> List[str]:
    """Degree descending, ties broken by ascending name."""
    return sorted(courses, key=lambda name: (-courses[name].degree, name))

def greedy_coloring(courses: CourseGraph, students: Optional[Sequence[Student]] = None) -> ScheduleResult:
    """Welsh-Powell first-fit coloring, written into ``courses`` in place.

    The caller hands over the graph: every course's slot and color are reset
    and then overwritten, so a graph colored here should not be reused for a
    second coloring without rebuilding it. The returned result references the
    same mapping.
    """
    for course in courses.values():
        course.slot = None
        course.color = None

    order = welsh_powell_order(courses)
    details = conflict_details(courses)
    slots: Dict[int, List[str]] = {}

    for name in order:
        course = courses[name]
        slot = 1
        while any(other in course.conflicts for other in slots.get(slot, ())):
            slot += 1
        course.slot = slot
        course.color = slot_color(slot)
        slots.setdefault(slot, []).append(name)
        logger.debug("greedy: %s (degree %d) -> slot %d", name, course.degree, slot)

    result = ScheduleResult(
        courses=courses,
        slots=slots,
        total_slots=len(slots),
        total_conflicts=details.total_pairs,
        students=list(students or []),
        average_conflicts_per_course=average_conflicts(courses),
        conflict_details=details,
        algorithm='greedy',
    )
    logger.info("greedy: %d courses in %d slots, %d conflict pairs",
                len(courses), result.total_slots, result.total_conflicts)
    return ensure_valid(result)
