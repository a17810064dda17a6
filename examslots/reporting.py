"""Tabular views of scheduling results for the app and the CLI."""
from typing import Iterable
import pandas as pd

from .graph_build import degree_table
from .models import CourseGraph, ScheduleResult, Student
from .scheduling.evaluation import Comparison


def slots_frame(result: ScheduleResult) -> pd.DataFrame:
    rows = []
    for slot in sorted(result.slots):
        names = result.slots[slot]
        rows.append({
            "slot": slot,
            "courses": ", ".join(names),
            "count": len(names),
            "color": result.courses[names[0]].color if names else None,
        })
    return pd.DataFrame(rows, columns=["slot", "courses", "count", "color"])


def degrees_frame(courses: CourseGraph) -> pd.DataFrame:
    rows = [{**r, "conflicts": ", ".join(r["conflicts"])} for r in degree_table(courses)]
    return pd.DataFrame(rows, columns=["name", "degree", "conflicts"])


def students_frame(students: Iterable[Student]) -> pd.DataFrame:
    rows = [{"student_id": s.id, "courses": ", ".join(s.courses), "count": len(s.courses)} for s in students]
    return pd.DataFrame(rows, columns=["student_id", "courses", "count"])


def diff_frame(comparison: Comparison) -> pd.DataFrame:
    rows = [{"course": c.name, "standard_slot": c.standard_slot, "optimized_slot": c.optimized_slot}
            for c in comparison.changed]
    return pd.DataFrame(rows, columns=["course", "standard_slot", "optimized_slot"])
