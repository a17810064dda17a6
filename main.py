import argparse
import logging
import os

from examslots.config import load_config
from examslots.io_utils import (
    load_courses_csv, load_students_csv, load_toronto_stu, parse_course_list,
    parse_student_data, save_schedule_csv
)
from examslots.graph_build import build_conflict_graph
from examslots.algorithms.greedy import greedy_coloring
from examslots.algorithms.dsatur import dsatur_coloring
from examslots.scheduling.evaluation import compare_results, summary
from examslots.synthetic import generate_students


def load_inputs(args):
    """Return (students, course universe) from whichever input mode was given."""
    if args.stu:
        return load_toronto_stu(args.stu)
    if args.generate is not None:
        return generate_students(args.students_count, args.generate, seed=args.seed)
    if not (args.students and args.courses):
        raise SystemExit("Provide --students and --courses, --stu, or --generate N")
    if args.students.endswith('.csv'):
        students = load_students_csv(args.students)
    else:
        with open(args.students, 'r', encoding='utf-8') as f:
            students = parse_student_data(f.read())
    if args.courses.endswith('.csv'):
        courses = load_courses_csv(args.courses)
    else:
        with open(args.courses, 'r', encoding='utf-8') as f:
            courses = parse_course_list(f.read())
    return students, courses


def schedule_paths(results, out_schedule, output_dir):
    """One CSV path per result; an explicit path gets an algorithm suffix when several ran."""
    if out_schedule is None:
        return [os.path.join(output_dir, f"schedule_{r.algorithm}.csv") for r in results]
    if len(results) == 1:
        return [out_schedule]
    root, ext = os.path.splitext(out_schedule)
    return [f"{root}_{r.algorithm}{ext or '.csv'}" for r in results]


def main():
    p = argparse.ArgumentParser(description="examslots – exam slot scheduling by conflict-graph coloring")
    # Input modes
    p.add_argument('--students', type=str, help='Students file: "S1: Math, Physics" lines, or a .csv')
    p.add_argument('--courses', type=str, help='Course list: comma/newline separated, or a .csv')
    p.add_argument('--stu', type=str, help='Toronto .stu file (student -> list of exams)')
    p.add_argument('--generate', type=int, default=None, help='Generate synthetic data with N courses')
    p.add_argument('--students_count', type=int, default=200, help='Students to generate with --generate')
    p.add_argument('--seed', type=int, default=42)

    # Algo
    p.add_argument('--algo', type=str, default='both', choices=['greedy', 'dsatur', 'both'])

    # Output
    p.add_argument('--out_schedule', type=str, default=None,
                   help='Schedule CSV path; with --algo both, one file per algorithm '
                        '(<name>_greedy.csv, <name>_dsatur.csv). Default: <output_dir>/schedule_<algo>.csv')
    p.add_argument('--config', type=str, default=None, help='JSON config file (output_dir, log_level)')
    p.add_argument('--log-level', dest='log_level', type=str, default=None)
    args = p.parse_args()

    config = load_config(args.config)
    logging.basicConfig(
        level=(args.log_level or config['log_level']).upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    students, course_names = load_inputs(args)
    courses = build_conflict_graph(students, course_names)

    results = []
    if args.algo in ('greedy', 'both'):
        results.append(greedy_coloring(courses, students))
    if args.algo in ('dsatur', 'both'):
        results.append(dsatur_coloring(courses, students))

    for result in results:
        print(summary(result))

    if len(results) == 2:
        cmp = compare_results(results[0], results[1])
        print(f"Greedy slots: {cmp.standard_slots}  DSATUR slots: {cmp.optimized_slots}  "
              f"Improvement: {cmp.improvement_pct}%  Courses moved: {cmp.moved_count}")

    if args.out_schedule is None:
        os.makedirs(config['output_dir'], exist_ok=True)
    for result, path in zip(results, schedule_paths(results, args.out_schedule, config['output_dir'])):
        save_schedule_csv(path, result)
        print(f"Saved: {path}")


if __name__ == '__main__':
    main()
