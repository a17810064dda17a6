import csv
import io
import logging
import os
import re
from typing import Dict, List, Tuple, Iterable, Union, IO

from .config import COURSE_ALIASES
from .models import ScheduleResult, Student

logger = logging.getLogger(__name__)

TextOrPath = Union[str, os.PathLike, IO]

# "S1: Math, Physics", "Jane Doe: Math", "S1,Math,Physics", "Student Name,Math,Physics"
_STUDENT_LINE_PATTERNS = [
    re.compile(r'^([^:,]+):\s*(.+)$'),
    re.compile(r'^(\w+),\s*(.+)$'),
    re.compile(r'^([^,]+),\s*(.+)$'),
]
_QUOTES = re.compile(r'[\'"]')
_COURSE_SEPARATORS = re.compile(r'[,\n\r]+')
_COURSES_HEADER = re.compile(r'^courses?', re.IGNORECASE)


def _open_text(src: TextOrPath):
    """Return a text-mode file handle and a flag indicating whether to close it.

    Accepts a filesystem path, a text IO object, or a BytesIO buffer.
    Ensures CSV readers get strings, not bytes.
    """
    if isinstance(src, (str, os.PathLike)):
        f = open(src, 'r', newline='', encoding='utf-8')
        return f, True
    if isinstance(src, io.BytesIO):
        src.seek(0)
        f = io.TextIOWrapper(src, encoding='utf-8', newline='')
        return f, True
    if hasattr(src, 'read'):
        if hasattr(src, 'seekable') and src.seekable():
            src.seek(0)
        return src, False
    raise TypeError("Unsupported input type; expected path or file-like object")


def _read_text(src: TextOrPath) -> str:
    f, should_close = _open_text(src)
    try:
        return f.read()
    finally:
        if should_close:
            f.close()


def normalize_course(raw: str) -> str:
    name = _QUOTES.sub('', raw)
    return COURSE_ALIASES.get(name.lower(), name)


def _unique(names: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for n in names:
        if n not in seen:
            seen.add(n)
            out.append(n)
    return out


def parse_student_data(text: str) -> List[Student]:
    """Parse one student per line; unreadable lines are logged and skipped."""
    if not text or not text.strip():
        return []
    students: List[Student] = []
    lines = [line for line in text.strip().splitlines() if line.strip()]
    for index, line in enumerate(lines):
        match = None
        for pattern in _STUDENT_LINE_PATTERNS:
            match = pattern.match(line)
            if match:
                break
        if not match:
            logger.warning('Could not parse line %d: "%s"', index + 1, line)
            continue
        sid, courses_str = match.group(1).strip(), match.group(2)
        courses = [c.strip() for c in courses_str.split(',')]
        courses = [normalize_course(c) for c in courses if c]
        courses = [c for c in courses if c]
        if sid and courses:
            students.append(Student(id=sid, courses=tuple(courses)))
            logger.debug("Parsed student %s: [%s]", sid, ', '.join(courses))
    logger.info("Total students parsed: %d", len(students))
    return students


def parse_course_list(text: str) -> List[str]:
    """Comma or newline separated course names, de-duplicated in input order.

    Spaces are kept because course names may contain them.
    """
    if not text or not text.strip():
        return []
    names = [c.strip() for c in _COURSE_SEPARATORS.split(text)]
    names = [_QUOTES.sub('', c) for c in names if c]
    return _unique(c for c in names if c)


def load_students_csv(src: TextOrPath) -> List[Student]:
    """CSV rows of ``student,course,course...``; a header mentioning "student" is skipped."""
    rows = [row for row in csv.reader(io.StringIO(_read_text(src))) if any(cell.strip() for cell in row)]
    if rows and 'student' in ','.join(rows[0]).lower():
        rows = rows[1:]
    students: List[Student] = []
    for row in rows:
        sid = row[0].strip()
        courses = [c.strip() for c in ','.join(row[1:]).split(',')]
        courses = [normalize_course(c) for c in courses if c]
        courses = [c for c in courses if c]
        if sid and courses:
            students.append(Student(id=sid, courses=tuple(courses)))
        else:
            logger.warning("Skipping CSV row without id or courses: %s", row)
    return students


def load_courses_csv(src: TextOrPath) -> List[str]:
    lines = [line.strip() for line in _read_text(src).splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        return []
    if len(lines) > 1 and _COURSES_HEADER.match(_QUOTES.sub('', lines[0])):
        lines = lines[1:]
    names: List[str] = []
    for line in lines:
        names.extend(p.strip() for p in _QUOTES.sub('', line).split(','))
    return _unique(n for n in names if n)


def load_toronto_stu(src: TextOrPath) -> Tuple[List[Student], List[str]]:
    """Return (students, course universe in first-seen order) from a Toronto .stu file."""
    students: List[Student] = []
    universe: Dict[str, None] = {}
    f, should_close = _open_text(src)
    try:
        idx = 0
        for line in f:
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            exams = line.replace('\t', ' ').split()
            students.append(Student(id=f"stu_{idx}", courses=tuple(exams)))
            idx += 1
            for ex in exams:
                universe.setdefault(ex, None)
    finally:
        if should_close:
            f.close()
    return students, list(universe)


def schedule_rows(result: ScheduleResult) -> List[Tuple[str, int, str]]:
    """(course, slot, color) by slot, then placement order within the slot."""
    rows = []
    for slot in sorted(result.slots):
        for name in result.slots[slot]:
            rows.append((name, slot, result.courses[name].color))
    return rows


def schedule_csv(result: ScheduleResult) -> str:
    buf = io.StringIO()
    w = csv.writer(buf, lineterminator='\n')
    w.writerow(['course', 'slot', 'color'])
    w.writerows(schedule_rows(result))
    return buf.getvalue()


def save_schedule_csv(path: str, result: ScheduleResult):
    with open(path, 'w', newline='') as f:
        f.write(schedule_csv(result))


def students_csv(students: Iterable[Student]) -> str:
    buf = io.StringIO()
    w = csv.writer(buf, lineterminator='\n')
    w.writerow(['student_id', 'courses'])
    for stu in students:
        w.writerow([stu.id, ', '.join(stu.courses)])
    return buf.getvalue()
