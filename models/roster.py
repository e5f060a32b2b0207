# models/roster.py

"""
The Roster model is the central data object of the program and represents the "source of truth" for all student records.

Students are stored in an insertion-ordered dictionary keyed by canonical ID, and each student owns its performance records.
Callers never touch the backing dictionary directly: `students` returns a list copy, and all mutations go through the methods
below, which validate raw input, enforce the uniqueness and one-record-per-level invariants, and report a structured
`Response`. Lookups hand out the stored `Student` objects themselves; their ID is read-only, so a roster key and the ID of the
student stored under it never drift apart.

The active `RecordsConfig` fixes the subject set, form levels, and age range the roster accepts.
Every mutation is all-or-nothing and runs under a single re-entrant lock, so check-then-act sequences stay atomic if the
roster is shared between threads.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping
from typing import Any

from core.config import DEFAULT_CONFIG, RecordsConfig
from core.response import ErrorCode, Response
from core.utils import normalize_id
from core.validators import (
    coerce_age,
    coerce_level,
    coerce_required_text,
    is_complete_registration,
)
from models.performance_record import PerformanceRecord
from models.query import search_students
from models.student import Student

logger = logging.getLogger(__name__)


class DuplicateIdError(ValueError):
    """Raised when a canonical student ID is already taken by another student."""


class Roster:
    _patchable_fields = ("id", "name", "gender", "age", "form")

    def __init__(self, config: RecordsConfig = DEFAULT_CONFIG):
        self._config: RecordsConfig = config
        self._students: dict[str, Student] = {}
        self._lock = threading.RLock()

    # === properties ===

    @property
    def config(self) -> RecordsConfig:
        return self._config

    @property
    def students(self) -> list[Student]:
        with self._lock:
            return list(self._students.values())

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, id: object) -> bool:
        return isinstance(id, str) and normalize_id(id) in self._students

    def __iter__(self) -> Iterator[Student]:
        return iter(self.students)

    def __repr__(self) -> str:
        return f"Roster({self._config.name}, {len(self._students)} students)"

    # === data accessors ===

    def find_student_by_id(self, id: str) -> Response:
        """
        Finds a `Student` object by ID.

        Args:
            id (str): The student ID, in any case and with or without surrounding whitespace.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Student` object was found.
                    - False if no match is found.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no match is found.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no match is found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Student): The matched `Student` object.
                    - On failure:
                        - None

        Notes:
            - This method is read-only and does not raise.
        """
        canonical_id = normalize_id(id)
        student = self._students.get(canonical_id)

        if student is None:
            return Response.fail(
                detail=f"No student found with ID '{canonical_id}'.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        return Response.succeed(
            data={
                "record": student,
            },
        )

    def find_students_by_query(self, term: str = "", level_filter: Any = None) -> Response:
        """
        Generates a list of `Student` objects whose ID or name contains the search term, optionally narrowed to one form level.

        Args:
            term (str): A search key compared case-insensitively against student IDs and names. Blank matches every student.
            level_filter (Any): A form level (int or numeric string), or None / blank for no filter.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the search ran, even if no students matched.
                    - False if the level filter is malformed.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_INPUT` if the level filter is malformed.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict): Payload with the following keys:
                    - On success:
                        - "records" (list[Student]): The matching students in roster order (may be empty).
                    - On failure:
                        - None

        Notes:
            - This method is read-only and does not raise.
        """
        try:
            records = search_students(self.students, term, level_filter)

        except ValueError as e:
            return Response.fail(
                detail=str(e),
                error=ErrorCode.INVALID_INPUT,
            )

        return Response.succeed(
            data={
                "records": records,
            },
        )

    # === record store operations ===

    def insert(self, student: Student) -> Response:
        """
        Adds a `Student` object to the end of the roster.

        Args:
            student (Student): The `Student` object to be added.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Student` object was added.
                    - False if another student already holds the same canonical ID, if a field is invalid for the active configuration, or if unexpected errors occur.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.DUPLICATE_ID` if the ID is not unique.
                    - `ErrorCode.INVALID_INPUT` if the ID is blank, or the age or form is outside the configuration.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 409 if the ID is not unique
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The added `Student` object.
                    - On failure:
                        - None

        Notes:
            - Name, gender, age, and form are written back in their normalized form before the student is stored.
        """
        with self._lock:
            try:
                clean = self.validate_student_fields(
                    {field: getattr(student, field) for field in self._patchable_fields}
                )
                self.require_unique_id(student.id)

                for field in ("name", "gender", "age", "form"):
                    setattr(student, field, clean[field])

                self._students[student.id] = student

            except DuplicateIdError as e:
                return self._duplicate_id_failure(e)

            except (TypeError, ValueError) as e:
                return Response.fail(
                    detail=str(e),
                    error=ErrorCode.INVALID_INPUT,
                )

            except Exception as e:
                return self._unexpected_failure(e)

        return Response.succeed(
            detail=f"Student {student.id} successfully added to the roster.",
            data={
                "record": student,
            },
        )

    def update(self, old_id: str, patch: Mapping[str, Any]) -> Response:
        """
        Overwrites identity fields of an existing student in place.

        Args:
            old_id (str): The current ID of the student to update.
            patch (Mapping[str, Any]): Values keyed by any of "id", "name", "gender", "age", "form". Each value present is validated like a registration field.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was updated.
                    - False if the student cannot be found, the new ID collides with another student, or the patch names an unknown field or holds an invalid value.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if `old_id` is not in the roster.
                    - `ErrorCode.DUPLICATE_ID` if the new ID belongs to a different student.
                    - `ErrorCode.INVALID_INPUT` if the patch names an unknown field or holds an invalid value.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                    - 409 if the ID is not unique
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The updated `Student` object.

        Notes:
            - The student keeps its position in the roster and its performance history.
            - Nothing is written unless every check passes.
        """
        with self._lock:
            lookup = self.find_student_by_id(old_id)

            if not lookup.success:
                return lookup

            student: Student = lookup.data["record"]
            old_key = normalize_id(old_id)

            unknown = [key for key in patch if key not in self._patchable_fields]

            if unknown:
                return Response.fail(
                    detail=f"Cannot update unknown student fields: {', '.join(unknown)}.",
                    error=ErrorCode.INVALID_INPUT,
                )

            try:
                clean = self.validate_student_patch(patch)

            except (TypeError, ValueError) as e:
                return Response.fail(
                    detail=str(e),
                    error=ErrorCode.INVALID_INPUT,
                )

            try:
                new_id = clean.pop("id", old_key)
                self.require_unique_id(new_id, ignore=student)

                if new_id != old_key:
                    self._rekey(old_key, new_id)
                    student._rename(new_id)

                for field, value in clean.items():
                    setattr(student, field, value)

            except DuplicateIdError as e:
                return self._duplicate_id_failure(e)

            except Exception as e:
                return self._unexpected_failure(e)

        return Response.succeed(
            detail=f"Student {student.id} successfully updated.",
            data={
                "record": student,
            },
        )

    def remove(self, id: str) -> Response:
        """
        Removes a student, and with it all of the student's performance records, from the roster.

        Returns:
            Response: success with no payload, or `ErrorCode.NOT_FOUND` (404) if the ID is absent.
        """
        with self._lock:
            lookup = self.find_student_by_id(id)

            if not lookup.success:
                return lookup

            student: Student = lookup.data["record"]
            del self._students[normalize_id(id)]
            student.clear_performance()

        return Response.succeed(
            detail=f"Student {student.id} successfully removed from the roster.",
        )

    # === mutation operations ===

    def register(self, fields: Mapping[str, Any]) -> Response:
        """
        Validates raw registration fields, creates a new `Student`, and adds it to the roster.

        Args:
            fields (Mapping[str, Any]): Raw values keyed by "id", "name", "gender", "age", "form".

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was registered.
                    - False if input is incomplete or out of range, or the ID is taken.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a confirmation naming the student.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_INPUT` if a field is missing or outside its domain.
                    - `ErrorCode.DUPLICATE_ID` if the canonical ID already exists.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 409 if the ID is not unique
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The new `Student`, with no performance records.
        """
        try:
            clean = self._clean_registration(fields)

        except (TypeError, ValueError) as e:
            logger.info("Registration rejected: %s", e, extra={"error_code": "INVALID_INPUT"})
            return Response.fail(
                detail=str(e),
                error=ErrorCode.INVALID_INPUT,
            )

        student = Student(**clean)
        insert_response = self.insert(student)

        if not insert_response.success:
            logger.info(
                "Registration rejected: %s",
                insert_response.detail,
                extra={"student_id": student.id, "error_code": self._code(insert_response)},
            )
            return insert_response

        logger.info("Registered student %s", student.id, extra={"student_id": student.id})

        return Response.succeed(
            detail=f"Registered {student.name}.",
            data=insert_response.data,
        )

    def edit_student(self, old_id: str, fields: Mapping[str, Any]) -> Response:
        """
        Validates raw fields and overwrites an existing student's details, keeping its performance history.

        Args:
            old_id (str): The student's current ID.
            fields (Mapping[str, Any]): Raw values keyed by "id", "name", "gender", "age", "form".

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if the student was updated.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_INPUT` if a field is missing or outside its domain.
                    - `ErrorCode.NOT_FOUND` if `old_id` is not in the roster.
                    - `ErrorCode.DUPLICATE_ID` if the new ID belongs to a different student.
                - data (dict | None): "record" (Student) on success.

        Notes:
            - Validation matches `register()`, including the configured age range.
        """
        try:
            clean = self._clean_registration(fields)

        except (TypeError, ValueError) as e:
            logger.info("Edit rejected: %s", e, extra={"error_code": "INVALID_INPUT"})
            return Response.fail(
                detail=str(e),
                error=ErrorCode.INVALID_INPUT,
            )

        update_response = self.update(old_id, clean)

        if not update_response.success:
            logger.info(
                "Edit rejected: %s",
                update_response.detail,
                extra={"student_id": normalize_id(old_id), "error_code": self._code(update_response)},
            )
            return update_response

        student: Student = update_response.data["record"]
        logger.info("Updated student %s", student.id, extra={"student_id": student.id})

        return Response.succeed(
            detail="Student details updated.",
            data=update_response.data,
        )

    def promote(self, id: str) -> Response:
        """
        Moves a student up one form level.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was promoted.
                    - False if the student cannot be found or is already at the top level.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if the ID is absent (404).
                    - `ErrorCode.AT_MAX_LEVEL` if the student is already at the top level.
                - status_code (int | None):
                    - 200 on success and for `AT_MAX_LEVEL`, which is an informational no-op
                    - 404 if not found
                - data (dict | None): "record" (Student) on success and for `AT_MAX_LEVEL`.

        Notes:
            - Performance history is untouched.
        """
        with self._lock:
            lookup = self.find_student_by_id(id)

            if not lookup.success:
                return lookup

            student: Student = lookup.data["record"]

            if student.form >= self._config.max_level:
                logger.info(
                    "Student %s already at Form %d",
                    student.id,
                    student.form,
                    extra={"student_id": student.id, "error_code": "AT_MAX_LEVEL"},
                )
                return Response.fail(
                    detail=f"{student.name} is already in the final form (Form {student.form}).",
                    error=ErrorCode.AT_MAX_LEVEL,
                    status_code=200,
                    data={
                        "record": student,
                    },
                )

            student.promote()

        logger.info(
            "Promoted student %s to Form %d",
            student.id,
            student.form,
            extra={"student_id": student.id, "form": student.form},
        )

        return Response.succeed(
            detail=f"{student.name} promoted to Form {student.form}.",
            data={
                "record": student,
            },
        )

    def record_performance(
        self, student_id: str, form: Any, subject_scores: Mapping[Any, Any]
    ) -> Response:
        """
        Validates a set of subject scores and stores them as the student's record for one form level.

        Args:
            student_id (str): The ID of the student the scores belong to.
            form (Any): The form level the scores are for (int or numeric string).
            subject_scores (Mapping[Any, Any]): Raw scores keyed by `Subject` or subject name; every configured subject is required.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was added or replaced.
                    - False if the student cannot be found or the input is invalid.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if the student is absent. Checked before the scores.
                    - `ErrorCode.INVALID_INPUT` if the form is not a configured level, a subject is missing or unknown, or a score is invalid.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                    - 400 for invalid input
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (PerformanceRecord): The stored record.
                        - "replaced" (bool): True if a record for that form already existed.

        Notes:
            - An existing record for the same form is replaced, so the record count never grows past one per level.
        """
        with self._lock:
            lookup = self.find_student_by_id(student_id)

            if not lookup.success:
                logger.info(
                    "Results rejected: %s",
                    lookup.detail,
                    extra={"student_id": normalize_id(student_id), "error_code": "NOT_FOUND"},
                )
                return lookup

            student: Student = lookup.data["record"]

            try:
                level = coerce_level(form, self._config)
                subjects = PerformanceRecord.validate_subject_scores(
                    subject_scores, self._config
                )

            except (TypeError, ValueError) as e:
                logger.info(
                    "Results rejected: %s",
                    e,
                    extra={"student_id": student.id, "error_code": "INVALID_INPUT"},
                )
                return Response.fail(
                    detail=f"Invalid scores. {e}",
                    error=ErrorCode.INVALID_INPUT,
                )

            record = PerformanceRecord(level, subjects)
            replaced = student.upsert_performance(record)

        logger.info(
            "%s Form %d results for student %s",
            "Replaced" if replaced else "Recorded",
            level,
            student.id,
            extra={"student_id": student.id, "form": level},
        )

        return Response.succeed(
            detail="Results updated.",
            data={
                "record": record,
                "replaced": replaced,
            },
        )

    def delete_student(self, id: str) -> Response:
        """
        Removes a student and all of their performance records. Unconditional once called.
        """
        remove_response = self.remove(id)

        if not remove_response.success:
            logger.info(
                "Delete rejected: %s",
                remove_response.detail,
                extra={"student_id": normalize_id(id), "error_code": "NOT_FOUND"},
            )
            return remove_response

        logger.info("Deleted student %s", normalize_id(id), extra={"student_id": normalize_id(id)})

        return remove_response

    # === data validators ===

    def validate_student_fields(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        """
        Validates and normalizes raw student fields against the active configuration.

        Args:
            fields (Mapping[str, Any]): Raw values keyed by "id", "name", "gender", "age", "form".

        Returns:
            A dictionary of normalized values, suitable for `Student(**values)` or `update()`.

        Raises:
            TypeError: If age or form cannot be read as a number.
            ValueError: If a required field is blank or a value is outside its domain.
        """
        return {field: self._coerce_field(field, fields.get(field)) for field in self._patchable_fields}

    def validate_student_patch(self, patch: Mapping[str, Any]) -> dict[str, Any]:
        """
        Validates only the fields present in a partial update; see `validate_student_fields()`.
        """
        return {field: self._coerce_field(field, value) for field, value in patch.items()}

    def _coerce_field(self, field: str, value: Any) -> Any:
        if field == "id":
            return normalize_id(coerce_required_text(value, "Student ID"))

        if field == "age":
            return coerce_age(value, self._config)

        if field == "form":
            return coerce_level(value, self._config)

        return coerce_required_text(value, field.capitalize())

    def _clean_registration(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        if not is_complete_registration(fields, self._config):
            raise ValueError("Please complete all fields.")

        return self.validate_student_fields(fields)

    def require_unique_id(self, id: str, ignore: Student | None = None) -> None:
        """
        Validates that no other student holds the given canonical ID.

        Args:
            id (str): The ID to check. It is normalized before comparison.
            ignore (Student | None): A student allowed to hold the ID already (the one being edited).

        Raises:
            DuplicateIdError: If a different student already holds the ID.
        """
        existing = self._students.get(normalize_id(id))

        if existing is not None and existing is not ignore:
            raise DuplicateIdError(f"A student with the ID '{normalize_id(id)}' already exists.")

    # === helper methods ===

    def _rekey(self, old_id: str, new_id: str) -> None:
        # rebuilt so the student keeps its position in insertion order
        self._students = {
            (new_id if key == old_id else key): student
            for key, student in self._students.items()
        }

    @staticmethod
    def _code(response: Response) -> str | None:
        error = response.error
        return error.value if isinstance(error, ErrorCode) else error

    @staticmethod
    def _duplicate_id_failure(e: DuplicateIdError) -> Response:
        return Response.fail(
            detail=str(e),
            error=ErrorCode.DUPLICATE_ID,
            status_code=409,
        )

    @staticmethod
    def _unexpected_failure(e: Exception) -> Response:
        logger.exception("Unexpected roster error")
        return Response.fail(
            detail=f"Unexpected error: {e}",
            error=ErrorCode.INTERNAL_ERROR,
        )
