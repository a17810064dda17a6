"""
Tests for input parsing and CSV export.
"""
import csv
import io

from examslots.algorithms.greedy import greedy_coloring
from examslots.graph_build import build_conflict_graph
from examslots.io_utils import (
    load_courses_csv,
    load_students_csv,
    load_toronto_stu,
    parse_course_list,
    parse_student_data,
    save_schedule_csv,
    schedule_csv,
    students_csv,
)
from examslots.models import Student


def test_parse_student_data_formats():
    text = 'S1: Math, Physics\nS2,Physics,Chemistry\n\nJane Doe, "Biology" , Math\n'
    students = parse_student_data(text)
    assert students == [
        Student("S1", ("Math", "Physics")),
        Student("S2", ("Physics", "Chemistry")),
        Student("Jane Doe", ("Biology", "Math")),
    ]


def test_parse_student_data_aliases_and_skips():
    text = "S1: iot, Internet of Things, , Math\nnot a student line\nS3: ''"
    students = parse_student_data(text)
    assert students == [Student("S1", ("IoT", "IoT", "Math"))]


def test_parse_student_data_empty():
    assert parse_student_data("") == []
    assert parse_student_data("   \n  ") == []


def test_parse_course_list_keeps_spaces_and_dedupes():
    text = 'Math, Data Structures\n"Physics",Math\r\n , Art History'
    assert parse_course_list(text) == ["Math", "Data Structures", "Physics", "Art History"]
    assert parse_course_list("") == []


def test_load_students_csv_skips_header_and_quotes(tmp_path):
    path = tmp_path / "students.csv"
    path.write_text('student_id,courses\nS1,"Math, Physics"\nS2,Physics,Chemistry\n')
    students = load_students_csv(str(path))
    assert students == [
        Student("S1", ("Math", "Physics")),
        Student("S2", ("Physics", "Chemistry")),
    ]


def test_load_students_csv_from_bytes():
    buf = io.BytesIO(b"S1,Math,Physics\r\nS2,Chemistry\r\n")
    students = load_students_csv(buf)
    assert [s.id for s in students] == ["S1", "S2"]
    assert students[1].courses == ("Chemistry",)


def test_load_courses_csv_single_line():
    assert load_courses_csv(io.StringIO('"Math", Physics,Math')) == ["Math", "Physics"]


def test_load_courses_csv_column_with_header():
    src = io.StringIO("course\nMath\nPhysics, Chemistry\n\nMath\n")
    assert load_courses_csv(src) == ["Math", "Physics", "Chemistry"]


def test_load_toronto_stu():
    src = io.StringIO("# comment\n0001 0002\n\n0002\t0003 0001\n")
    students, universe = load_toronto_stu(src)
    assert [s.id for s in students] == ["stu_0", "stu_1"]
    assert students[1].courses == ("0002", "0003", "0001")
    assert universe == ["0001", "0002", "0003"]


def test_schedule_csv_rows(tmp_path):
    students = [Student("S1", ("Math", "Physics")), Student("S2", ("Physics", "Chemistry"))]
    result = greedy_coloring(build_conflict_graph(students, ["Math", "Physics", "Chemistry"]))
    rows = list(csv.reader(io.StringIO(schedule_csv(result))))
    assert rows[0] == ["course", "slot", "color"]
    assert [r[:2] for r in rows[1:]] == [["Physics", "1"], ["Chemistry", "2"], ["Math", "2"]]

    out = tmp_path / "schedule.csv"
    save_schedule_csv(str(out), result)
    assert out.read_text() == schedule_csv(result)


def test_students_csv_round_trip():
    students = [Student("S1", ("Math", "Physics")), Student("S2", ("Chemistry",))]
    text = students_csv(students)
    assert text.splitlines()[1] == 'S1,"Math, Physics"'
    assert load_students_csv(io.StringIO(text)) == students


def test_multi_word_student_ids_round_trip():
    students = [Student("Jane Doe", ("Math", "Physics")), Student("John Roe", ("Chemistry",))]
    assert load_students_csv(io.StringIO(students_csv(students))) == students


def test_parse_student_data_multi_word_id_with_colon():
    students = parse_student_data("Jane Doe: Math, Physics\nJohn Roe: Chemistry")
    assert students == [Student("Jane Doe", ("Math", "Physics")), Student("John Roe", ("Chemistry",))]


def test_load_students_csv_skips_rows_without_courses():
    students = load_students_csv(io.StringIO("S1,Math\nS2,\n,Physics\n"))
    assert students == [Student("S1", ("Math",))]


def test_synthetic_students_survive_csv_round_trip():
    from examslots.synthetic import generate_students

    students, _ = generate_students(15, 8, seed=11)
    assert load_students_csv(io.StringIO(students_csv(students))) == students
