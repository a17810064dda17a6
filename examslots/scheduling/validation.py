import logging
from typing import Dict, List, Optional, Tuple

from ..errors import InvariantViolation
from ..models import CourseGraph, ScheduleResult

logger = logging.getLogger(__name__)

def find_slot_conflict(courses: CourseGraph, slots: Dict[int, List[str]]) -> Optional[Tuple[int, str, str]]:
    """First (slot, course, course) whose courses conflict, or None."""
    for slot, names in slots.items():
        for i in range(len(names)):
            for j in range(i + 1, len(names)):
                a, b = names[i], names[j]
                ca, cb = courses.get(a), courses.get(b)
                if (ca is not None and b in ca.conflicts) or (cb is not None and a in cb.conflicts):
                    return slot, a, b
    return None

def verify_solution(courses: CourseGraph, slots: Dict[int, List[str]]) -> bool:
    return find_slot_conflict(courses, slots) is None

def ensure_valid(result: ScheduleResult) -> ScheduleResult:
    """Raise InvariantViolation if the result puts conflicting courses together."""
    found = find_slot_conflict(result.courses, result.slots)
    if found is not None:
        slot, a, b = found
        logger.error("%s coloring is invalid: slot %d holds %s and %s", result.algorithm or 'unknown', slot, a, b)
        raise InvariantViolation(slot, a, b)
    return result
