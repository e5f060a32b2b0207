# models/statistics.py

"""
Average calculations over performance records.

Every average here is a plain arithmetic mean of individual subject scores. The overall
average of a student weights each subject score in each form equally; it is not a mean
of per-form averages.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from models.performance_record import PerformanceRecord
    from models.student import Student


def form_average(record: PerformanceRecord) -> float:
    scores = record.scores

    return sum(scores) / len(scores)


def overall_average(student: Student) -> float | None:
    """
    Returns the mean of every subject score across all of a student's performance records,
    or None if the student has no records yet.
    """
    scores = [score for record in student.performance_records for score in record.scores]

    if not scores:
        return None

    return sum(scores) / len(scores)


def roster_average(students: Iterable[Student]) -> float | None:
    """
    Returns the mean of the overall averages of the given students, skipping students
    without records. None if no student has an average.
    """
    averages = [
        average
        for average in (overall_average(student) for student in students)
        if average is not None
    ]

    if not averages:
        return None

    return sum(averages) / len(averages)
