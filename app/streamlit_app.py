import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import io
import time

import streamlit as st

from examslots.io_utils import (
    load_courses_csv, load_students_csv, parse_course_list, parse_student_data,
    schedule_csv, students_csv
)
from examslots.graph_build import build_conflict_graph, to_dot, to_networkx
from examslots.algorithms.greedy import greedy_coloring
from examslots.algorithms.dsatur import dsatur_coloring
from examslots.scheduling.evaluation import clique_lower_bound, compare_results, summary
from examslots.reporting import degrees_frame, diff_frame, slots_frame, students_frame

# ---------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------
st.set_page_config(page_title="examslots – Exam Slot Scheduler", layout="wide")
st.title("examslots – Exam Slot Scheduler")

SAMPLE_STUDENTS = "S1: Math, Physics\nS2: Physics, Chemistry\nS3: Math, Biology\nS4: Chemistry, Biology, English"
SAMPLE_COURSES = "Math, Physics, Chemistry, Biology, English"

# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------
def _students_from_upload(upload):
    return load_students_csv(io.BytesIO(upload.getvalue()))

def _courses_text_from_upload(upload) -> str:
    return ", ".join(load_courses_csv(io.BytesIO(upload.getvalue())))

# ---------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------
st.subheader("Inputs")
c1, c2 = st.columns(2)
students_file = c1.file_uploader("Students CSV (student,courses...)", type=["csv"])
courses_file = c2.file_uploader("Courses CSV", type=["csv"])

if students_file is not None:
    st.session_state.uploaded_students = _students_from_upload(students_file)
else:
    st.session_state.pop("uploaded_students", None)
if courses_file is not None:
    st.session_state.courses_text = _courses_text_from_upload(courses_file)

uploaded = st.session_state.get("uploaded_students")
if uploaded:
    st.caption(f"Using {len(uploaded)} students from the uploaded CSV; the text box below is ignored.")
    st.dataframe(students_frame(uploaded), hide_index=True, use_container_width=True)

with st.form("controls"):
    students_text = st.text_area("Students (one per line, e.g. S1: Math, Physics)",
                                 SAMPLE_STUDENTS, height=180)
    courses_text = st.text_area("Courses (comma or newline separated)",
                                st.session_state.get("courses_text", SAMPLE_COURSES), height=100)
    submitted = st.form_submit_button("Generate Schedule")

if submitted:
    students = uploaded or parse_student_data(students_text)
    course_names = parse_course_list(courses_text)
    if not students or not course_names:
        st.error("Please enter at least one student and one course.")
        st.stop()
    t0 = time.perf_counter()
    courses = build_conflict_graph(students, course_names)
    st.session_state.result = greedy_coloring(courses, students)
    st.session_state.runtime = time.perf_counter() - t0

# ---------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------
result = st.session_state.get("result")
if result is not None:
    optimized = dsatur_coloring(result.courses, result.students)
    cmp = compare_results(result, optimized)

    st.subheader("Summary")
    m1, m2, m3, m4, m5 = st.columns(5)
    m1.metric("Courses", len(result.courses))
    m2.metric("Conflict pairs", result.total_conflicts)
    m3.metric("Greedy slots", cmp.standard_slots)
    m4.metric("DSATUR slots", cmp.optimized_slots)
    m5.metric("Improvement", f"{cmp.improvement_pct}%")
    st.caption(f"Avg conflicts/course: {result.average_conflicts_per_course} · "
               f"Clique lower bound: {clique_lower_bound(result.courses)} · "
               f"Greedy time: {st.session_state.get('runtime', 0.0):.3f}s")

    optimize = st.toggle("Show optimized (DSATUR) schedule", value=False)
    shown = optimized if optimize else result

    left, right = st.columns(2)
    with left:
        st.markdown(f"**Timetable – {shown.algorithm}**")
        st.dataframe(slots_frame(shown), hide_index=True, use_container_width=True)
        st.download_button("Download schedule.csv", schedule_csv(shown),
                           file_name=f"schedule_{shown.algorithm}.csv", mime="text/csv")
    with right:
        st.markdown(f"**Courses moved by DSATUR: {cmp.moved_count}**")
        st.dataframe(diff_frame(cmp), hide_index=True, use_container_width=True)

    with st.expander("Conflict graph"):
        st.graphviz_chart(to_dot(to_networkx(shown.courses)))
    with st.expander("Course degrees"):
        st.dataframe(degrees_frame(shown.courses), hide_index=True, use_container_width=True)
    with st.expander("Student enrollments"):
        st.dataframe(students_frame(result.students), hide_index=True, use_container_width=True)
        st.download_button("Export Students CSV", students_csv(result.students),
                           file_name="students.csv", mime="text/csv")
    with st.expander("Text summary"):
        st.text(summary(shown))
