from __future__ import annotations

import itertools
import logging
import math
from dataclasses import dataclass, replace
from typing import Iterator, Optional, Tuple

from cgpacalc.core.gpa import LedgerSummary, summarize


logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "grade", "credits")

ADDED_MESSAGE = "New course added!"
REMOVED_MESSAGE = "Course removed!"


@dataclass(frozen=True)
class Course:
    id: str
    name: str = ""
    grade: str = ""
    credits: float = 0.0


@dataclass(frozen=True)
class LedgerChange:
    courses: Tuple[Course, ...]
    summary: LedgerSummary
    changed: bool
    message: Optional[str] = None


def coerce_credits(value: object) -> float:
    """Normalise raw credit input to a non-negative float, 0 when unusable."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        credits = float(value.strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(credits) or credits < 0:
        return 0.0
    return credits


def _coerce_text(value: object) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class CourseLedger:
    """
    Ordered, never-empty list of courses.

    Every mutation recomputes the summary before it returns, so `summary`
    always describes `courses`.
    """

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._courses: Tuple[Course, ...] = (self._new_course(),)
        self._summary = summarize(self._courses)

    def __len__(self) -> int:
        return len(self._courses)

    def __iter__(self) -> Iterator[Course]:
        return iter(self._courses)

    @property
    def courses(self) -> Tuple[Course, ...]:
        return self._courses

    @property
    def summary(self) -> LedgerSummary:
        return self._summary

    @property
    def can_remove(self) -> bool:
        return len(self._courses) > 1

    def get(self, course_id: str) -> Optional[Course]:
        for course in self._courses:
            if course.id == course_id:
                return course
        return None

    def add(self) -> LedgerChange:
        course = self._new_course()
        logger.debug("Adding course %s", course.id)
        return self._commit(self._courses + (course,), message=ADDED_MESSAGE)

    def remove(self, course_id: str) -> LedgerChange:
        if not self.can_remove:
            logger.debug("Refusing to remove %s: last remaining course", course_id)
            return self._unchanged()

        remaining = tuple(c for c in self._courses if c.id != course_id)
        if len(remaining) == len(self._courses):
            return self._unchanged()

        logger.debug("Removing course %s", course_id)
        return self._commit(remaining, message=REMOVED_MESSAGE)

    def update(self, course_id: str, field: str, value: object) -> LedgerChange:
        if field not in EDITABLE_FIELDS:
            logger.debug("Ignoring update of unsupported field %r on course %s", field, course_id)
            return self._unchanged()

        normalised = coerce_credits(value) if field == "credits" else _coerce_text(value)

        updated = []
        found = False
        for course in self._courses:
            if course.id == course_id:
                course = replace(course, **{field: normalised})
                found = True
            updated.append(course)

        if not found:
            return self._unchanged()

        logger.debug("Updated %s of course %s", field, course_id)
        return self._commit(tuple(updated))

    def _new_course(self) -> Course:
        return Course(id=str(next(self._ids)))

    def _commit(self, courses: Tuple[Course, ...], *, message: Optional[str] = None) -> LedgerChange:
        self._courses = courses
        self._summary = summarize(courses)
        return LedgerChange(courses=courses, summary=self._summary, changed=True, message=message)

    def _unchanged(self) -> LedgerChange:
        return LedgerChange(courses=self._courses, summary=self._summary, changed=False)
