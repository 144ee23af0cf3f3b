from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable, Protocol

from cgpacalc.core.grades import lookup, performance_label


class GradedCourse(Protocol):
    grade: str
    credits: float


@dataclass(frozen=True)
class LedgerSummary:
    eligible_count: int
    total_credits: float
    current_average: float
    label: str


def is_eligible(course: GradedCourse) -> bool:
    return lookup(course.grade) is not None and course.credits > 0


def calculate_cgpa(courses: Iterable[GradedCourse]) -> float:
    """
    CGPA = Σ(grade_point * credits) / Σ(credits) over eligible courses.
    Courses with an unset or unknown grade, or without credits, are skipped.
    Sums are kept as exact fractions; only the result is converted to float.
    """
    weighted_sum = Fraction(0)
    total_credits = Fraction(0)

    for course in courses:
        if not is_eligible(course):
            continue
        credits = Fraction(course.credits)
        weighted_sum += Fraction(str(lookup(course.grade))) * credits
        total_credits += credits

    if total_credits == 0:
        return 0.0
    return float(weighted_sum / total_credits)


def summarize(courses: Iterable[GradedCourse]) -> LedgerSummary:
    courses = list(courses)
    average = calculate_cgpa(courses)
    return LedgerSummary(
        eligible_count=sum(1 for c in courses if is_eligible(c)),
        total_credits=sum((c.credits or 0) for c in courses),
        current_average=average,
        label=performance_label(average),
    )


def format_gpa(value: float, *, round_to: int = 2) -> str:
    return f"{value:.{round_to}f}"


def format_credits(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(float(value))
