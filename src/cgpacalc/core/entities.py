from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from cgpacalc.core.gpa import Course, calc_cgpa, calc_gpa


@dataclass
class Semester:
    courses: List[Course] = field(default_factory=list)

    def add_course(self, grade: float, credit: float) -> Course:
        course = Course(grade, credit)
        self.courses.append(course)
        return course

    def gpa(self) -> float:
        return calc_gpa(self.courses)


@dataclass
class Student:
    semesters: List[Semester] = field(default_factory=list)

    def add_semester(self, semester: Semester) -> None:
        self.semesters.append(semester)

    def clear(self) -> None:
        self.semesters.clear()

    def cgpa(self) -> float:
        # Flattened over every course, not an average of semester GPAs.
        return calc_cgpa(sem.courses for sem in self.semesters)
