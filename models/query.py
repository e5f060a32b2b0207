# models/query.py

"""
Search and filter helpers for student records.

A search matches on ID or name (case-insensitive substring) and may be narrowed to a
single form level. Results keep the order of the input sequence; there is no ranking.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from core.validators import coerce_whole
from models.student import Student


def normalize_level_filter(level_filter: Any) -> int | None:
    """
    Converts a level filter to an int, or None when no filter is set.

    Accepts None, a blank string, or anything `coerce_whole()` reads as a whole number,
    such as 2, "2" or "2.0".

    Raises:
        ValueError: If the filter is set but is not a whole number.
    """
    if level_filter is None:
        return None

    if isinstance(level_filter, str) and not level_filter.strip():
        return None

    try:
        return coerce_whole(level_filter, "Level filter")

    except (TypeError, ValueError):
        raise ValueError(f"Invalid level filter: {level_filter!r}.") from None


def matches_term(student: Student, term: Any) -> bool:
    term = str(term).strip().lower()

    return term in student.id.lower() or term in student.name.lower()


def search_students(
    students: Iterable[Student],
    term: Any = "",
    level_filter: Any = None,
) -> list[Student]:
    level = normalize_level_filter(level_filter)
    term = "" if term is None else term

    return [
        student
        for student in students
        if matches_term(student, term)
        and (level is None or student.form == level)
    ]
