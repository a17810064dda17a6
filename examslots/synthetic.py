"""Reproducible synthetic enrollments for demos and benchmarks."""
import random
from typing import List, Tuple

import numpy as np
from faker import Faker

from .models import Student

DEPARTMENTS = ["CS", "IT", "MATH", "PHYS", "CHEM", "BIO", "ECON", "FIN", "MKT", "EE", "ME", "CE", "PSY"]


def generate_students(
    n_students: int,
    n_courses: int,
    min_courses: int = 3,
    max_courses: int = 6,
    seed: int = 42,
) -> Tuple[List[Student], List[str]]:
    """Return (students, course universe).

    Course popularity follows a Zipf-like distribution so a few courses are
    taken by many students, which gives the conflict graph dense hubs.
    """
    rnd = random.Random(seed)
    rng = np.random.default_rng(seed)
    fake = Faker()
    fake.seed_instance(seed)

    course_names: List[str] = []
    seen = set()
    for cid in range(1, n_courses + 1):
        dept = rnd.choice(DEPARTMENTS)
        name = f"{dept}{100 + rnd.randrange(1, 400)}"
        if name in seen:
            name = f"{dept}{500 + cid}"
        seen.add(name)
        course_names.append(name)

    if not course_names:
        return [], []

    popularity = rng.zipf(a=1.4, size=len(course_names)).astype(float)
    popularity = popularity / popularity.sum()

    students: List[Student] = []
    for _ in range(n_students):
        k = min(rnd.randint(min_courses, max_courses), len(course_names))
        chosen = rng.choice(course_names, size=k, replace=False, p=popularity)
        students.append(Student(id=fake.unique.name(), courses=tuple(str(c) for c in chosen)))
    return students, course_names
