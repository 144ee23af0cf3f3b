from types import MappingProxyType
from typing import Mapping, Optional, Tuple


GRADE_POINTS: Mapping[str, float] = MappingProxyType(
    {
        "A+": 4.0,
        "A": 4.0,
        "A-": 3.7,
        "B+": 3.3,
        "B": 3.0,
        "B-": 2.7,
        "C+": 2.3,
        "C": 2.0,
        "C-": 1.7,
        "D+": 1.3,
        "D": 1.0,
        "F": 0.0,
    }
)

PERFORMANCE_BANDS: Tuple[Tuple[float, str], ...] = (
    (3.7, "Excellent"),
    (3.3, "Very Good"),
    (3.0, "Good"),
    (2.7, "Satisfactory"),
    (2.0, "Needs Improvement"),
)

# Colour tiers for the headline figure, highest first.
PERFORMANCE_TIERS: Tuple[Tuple[float, str], ...] = (
    (3.5, "accent"),
    (3.0, "primary"),
    (2.5, "warning"),
)


def lookup(grade: object) -> Optional[float]:
    if not isinstance(grade, str) or not grade:
        return None
    return GRADE_POINTS.get(grade)


def grade_entries() -> Tuple[Tuple[str, float], ...]:
    return tuple(GRADE_POINTS.items())


def format_points(points: float) -> str:
    return f"{points:.1f}"


def grade_option_label(grade: str) -> str:
    points = lookup(grade)
    if points is None:
        return grade
    return f"{grade} ({format_points(points)})"


def performance_label(average: float) -> str:
    for threshold, label in PERFORMANCE_BANDS:
        if average >= threshold:
            return label
    return "Poor"


def performance_tier(average: float) -> str:
    for threshold, tier in PERFORMANCE_TIERS:
        if average >= threshold:
            return tier
    return "danger"
