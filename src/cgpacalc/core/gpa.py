from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Course:
    grade: float
    credit: float


def weighted_average(pairs: Iterable[Tuple[float, float]]) -> float:
    """
    pairs: iterable of (grade, credit)
    Σ(grade * credit) / Σ(credit), or 0.0 when the credits sum to zero.
    """
    weighted = 0.0
    total_credits = 0.0
    for grade, credit in pairs:
        weighted += grade * credit
        total_credits += credit
    if total_credits == 0.0:
        return 0.0
    return weighted / total_credits


def calc_gpa(courses: Iterable[Course]) -> float:
    return weighted_average((c.grade, c.credit) for c in courses)


def calc_cgpa(semester_courses: Iterable[Iterable[Course]]) -> float:
    return weighted_average((c.grade, c.credit) for sem in semester_courses for c in sem)
