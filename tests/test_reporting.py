import json

from examslots.algorithms.dsatur import dsatur_coloring
from examslots.algorithms.greedy import greedy_coloring
from examslots.config import DEFAULTS, SLOT_COLORS, load_config, slot_color
from examslots.graph_build import build_conflict_graph
from examslots.models import Student
from examslots.reporting import degrees_frame, diff_frame, slots_frame, students_frame
from examslots.scheduling.evaluation import compare_results
from examslots.synthetic import generate_students


STUDENTS = [
    Student("S1", ("Math", "Physics")),
    Student("S2", ("Physics", "Chemistry")),
]
COURSES = ["Math", "Physics", "Chemistry"]


def test_slots_frame():
    result = greedy_coloring(build_conflict_graph(STUDENTS, COURSES), STUDENTS)
    df = slots_frame(result)
    assert list(df.columns) == ["slot", "courses", "count", "color"]
    assert df["courses"].tolist() == ["Physics", "Chemistry, Math"]
    assert df["count"].tolist() == [1, 2]
    assert df["color"].tolist() == SLOT_COLORS[:2]


def test_degrees_and_students_frames():
    g = build_conflict_graph(STUDENTS, COURSES)
    df = degrees_frame(g)
    assert df.iloc[0].to_dict() == {"name": "Physics", "degree": 2, "conflicts": "Chemistry, Math"}
    sf = students_frame(STUDENTS)
    assert sf["count"].tolist() == [2, 2]


def test_diff_frame_empty_when_same_slots():
    g = build_conflict_graph(STUDENTS, COURSES)
    cmp = compare_results(greedy_coloring(g), dsatur_coloring(g))
    df = diff_frame(cmp)
    assert df.empty
    assert list(df.columns) == ["course", "standard_slot", "optimized_slot"]


def test_slot_color_cycles():
    assert slot_color(1) == SLOT_COLORS[0]
    assert slot_color(len(SLOT_COLORS) + 2) == SLOT_COLORS[1]


def test_load_config_defaults_and_overrides(tmp_path):
    assert load_config(str(tmp_path / "missing.json")) == DEFAULTS
    path = tmp_path / "examslots.json"
    path.write_text(json.dumps({"output_dir": "runs", "unknown": 1}))
    config = load_config(str(path))
    assert config["output_dir"] == "runs"
    assert config["log_level"] == DEFAULTS["log_level"]
    assert "unknown" not in config


def test_generate_students_is_reproducible():
    a_students, a_courses = generate_students(20, 10, seed=7)
    b_students, b_courses = generate_students(20, 10, seed=7)
    assert a_students == b_students
    assert a_courses == b_courses
    assert len(a_courses) == len(set(a_courses)) == 10
    assert len({s.id for s in a_students}) == 20
    for s in a_students:
        assert 3 <= len(s.courses) <= 6
        assert len(set(s.courses)) == len(s.courses)
        assert set(s.courses) <= set(a_courses)


def test_generate_students_without_courses():
    assert generate_students(5, 0) == ([], [])
