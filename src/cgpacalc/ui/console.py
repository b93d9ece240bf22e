from __future__ import annotations

from typing import List

from cgpacalc.core.entities import Semester, Student

MENU_ITEMS = (
    "Add Semester",
    "Display Result",
    "Save to File",
    "Load from File",
    "Exit",
)


def format_menu() -> str:
    lines = ["", "--- CGPA CALCULATOR MENU ---"]
    lines.extend(f"{i}. {label}" for i, label in enumerate(MENU_ITEMS, 1))
    return "\n".join(lines)


def format_courses(semester: Semester) -> List[str]:
    return [
        f"Course {i} | Grade: {c.grade:.2f} | Credit: {c.credit:.2f}"
        for i, c in enumerate(semester.courses, 1)
    ]


def format_results(student: Student) -> str:
    lines: List[str] = []
    for i, sem in enumerate(student.semesters, 1):
        lines.append("")
        lines.append(f"Semester {i}:")
        lines.extend(format_courses(sem))
        lines.append(f"GPA: {sem.gpa():.2f}")
    lines.append("")
    lines.append(f"Final CGPA: {student.cgpa():.2f}")
    return "\n".join(lines)
