# models/performance_record.py

"""
Represents one form level's set of subject scores for a student.

Each `PerformanceRecord` stores the form level it belongs to and a mapping from every
subject of the active records configuration to a score in [0, 100]. A student holds at
most one record per form level; replacing a level's scores is handled by the owning
`Student` (see `Student.upsert_performance()`).

Includes functionality for:
- Validating a raw subject-to-score mapping as a complete, closed set
- Reading individual scores and the record's average

Notes:
- Validation is enforced via `validate_subject_scores()`, which callers run before
  constructing a record from raw input.
- Average calculations live in `models.statistics`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from core.config import RecordsConfig, Subject
from core.validators import coerce_score
from models.statistics import form_average


class PerformanceRecord:

    def __init__(self, form: int, subjects: Mapping[Subject, float]):
        self._form: int = form
        self._subjects: dict[Subject, float] = dict(subjects)

    # === properties ===

    @property
    def form(self) -> int:
        return self._form

    @property
    def subjects(self) -> dict[Subject, float]:
        return self._subjects.copy()

    @property
    def scores(self) -> list[float]:
        return list(self._subjects.values())

    @property
    def average(self) -> float:
        return form_average(self)

    def score_for(self, subject: Subject) -> float | None:
        return self._subjects.get(subject)

    # === dunder methods ===

    def __repr__(self) -> str:
        scores = ", ".join(f"{s.value}={v:g}" for s, v in self._subjects.items())
        return f"PerformanceRecord({self._form}, {scores})"

    def __str__(self) -> str:
        return f"PERFORMANCE: form: {self._form}, subjects: {len(self._subjects)}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PerformanceRecord):
            return NotImplemented

        return self._form == other._form and self._subjects == other._subjects

    # === data validators ===

    @staticmethod
    def validate_subject_scores(
        raw_scores: Mapping[Any, Any], config: RecordsConfig
    ) -> dict[Subject, float]:
        """
        Validates and normalizes a raw subject-to-score mapping against a records configuration.

        Keys may be `Subject` members or subject names in any case. The result is ordered
        like `config.subjects`.

        Args:
            raw_scores (Mapping[Any, Any]): The raw mapping of subject keys to score values.
            config (RecordsConfig): The configuration naming the required subjects.

        Returns:
            A dictionary mapping every configured `Subject` to its normalized score.

        Raises:
            ValueError:
                - If a key is not a recognized subject, or is not part of the configuration.
                - If two keys name the same subject.
                - If a configured subject is missing.
                - If a score is non-finite or outside [0, 100].
            TypeError: If a score cannot be cast to a number.
        """
        normalized: dict[Subject, Any] = {}

        for key, value in raw_scores.items():
            try:
                subject = Subject(key.strip().lower() if isinstance(key, str) else key)

            except ValueError:
                raise ValueError(f"Invalid input. Unknown subject: '{key}'.") from None

            if subject not in config.subjects:
                raise ValueError(
                    f"Invalid input. {subject.label} is not recorded in the {config.name} roster."
                )

            if subject in normalized:
                raise ValueError(f"Invalid input. Duplicate score for {subject.label}.")

            normalized[subject] = value

        missing = [s.label for s in config.subjects if s not in normalized]

        if missing:
            raise ValueError(f"Invalid input. Missing scores for: {', '.join(missing)}.")

        return {subject: coerce_score(normalized[subject]) for subject in config.subjects}
