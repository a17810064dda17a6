from dataclasses import dataclass, field
from typing import Dict, List, Set, Optional, Tuple

@dataclass(frozen=True)
class Student:
    id: str
    courses: Tuple[str, ...] = ()  # mentions in input order, may repeat

@dataclass
class Course:
    name: str
    conflicts: Set[str] = field(default_factory=set)  # adjacent course names
    slot: Optional[int] = None  # 1-based, set only by a colorer
    color: Optional[str] = None  # palette entry for the slot

    @property
    def degree(self) -> int:
        return len(self.conflicts)

# course name -> Course
CourseGraph = Dict[str, Course]

@dataclass
class ConflictDetails:
    total_pairs: int = 0
    # unordered pairs, each stored sorted
    conflict_pairs: List[Tuple[str, str]] = field(default_factory=list)

@dataclass
class ScheduleResult:
    courses: CourseGraph
    # slot number -> course names in placement order
    slots: Dict[int, List[str]] = field(default_factory=dict)
    total_slots: int = 0
    total_conflicts: int = 0
    students: List[Student] = field(default_factory=list)
    average_conflicts_per_course: float = 0.0
    conflict_details: ConflictDetails = field(default_factory=ConflictDetails)
    algorithm: str = ''

    def slot_of(self, name: str) -> Optional[int]:
        course = self.courses.get(name)
        return course.slot if course else None
