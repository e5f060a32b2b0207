# models/student.py

"""
Represents a student registered in the roster.

Stores core identifying information such as name, gender, age, and a canonical ID, along
with the student's current form level and their performance history.

Includes functionality for:
- Normalizing the ID to its canonical (trimmed, upper-case) form
- Promoting the student to the next form level
- Adding or replacing the performance record for a form level
- Mutating individual fields via property access (the ID is read-only; the owning `Roster`
  renames a student through `_rename()` so its key stays in step)

Performance history is internally represented as a dictionary mapping form levels to
`PerformanceRecord` objects, which keeps at most one record per level.
"""

from __future__ import annotations

from core.utils import normalize_id
from models.performance_record import PerformanceRecord


class Student:

    def __init__(
        self,
        id: str,
        name: str,
        gender: str,
        age: int,
        form: int,
    ):
        self._id: str = normalize_id(id)
        self._name: str = name
        self._gender: str = gender
        self._age: int = age
        self._form: int = form
        self._performance: dict[int, PerformanceRecord] = {}

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._name = name

    @property
    def gender(self) -> str:
        return self._gender

    @gender.setter
    def gender(self, gender: str) -> None:
        self._gender = gender

    @property
    def age(self) -> int:
        return self._age

    @age.setter
    def age(self, age: int) -> None:
        self._age = age

    @property
    def form(self) -> int:
        return self._form

    @form.setter
    def form(self, form: int) -> None:
        self._form = form

    def promote(self) -> None:
        self._form += 1

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._name}, {self._gender}, {self._age}, {self._form})"

    def __str__(self) -> str:
        return f"STUDENT: {self._name} - (ID: {self._id})"

    # === data accessors ===

    # --- performance methods ---

    @property
    def performance_records(self) -> list[PerformanceRecord]:
        return [self._performance[form] for form in sorted(self._performance)]

    @property
    def performance_count(self) -> int:
        return len(self._performance)

    def record_for(self, form: int) -> PerformanceRecord | None:
        return self._performance.get(form)

    def has_record_for(self, form: int) -> bool:
        return form in self._performance

    # === data manipulators ===

    def _rename(self, id: str) -> None:
        self._id = normalize_id(id)

    # --- performance methods ---

    def upsert_performance(self, record: PerformanceRecord) -> bool:
        """
        Stores a performance record, replacing any existing record for the same form level.

        Returns:
            True if an existing record was replaced, False if the record was added.
        """
        replaced = record.form in self._performance
        self._performance[record.form] = record

        return replaced

    def clear_performance(self) -> None:
        self._performance.clear()
