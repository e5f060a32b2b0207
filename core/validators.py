# core/validators.py

"""
Pure validation helpers for raw field values.

The `coerce_*` functions normalize a raw value (a number or the text typed into a
prompt) and raise on anything outside its domain. The `is_*` predicates wrap them
for callers that only need a yes/no answer.

Must never import from models!
"""

import math
from collections.abc import Mapping
from typing import Any

from core.config import RecordsConfig

MIN_SCORE = 0.0
MAX_SCORE = 100.0


# === coercion ===


def _coerce_finite(value: Any, field: str) -> float:
    if isinstance(value, bool) or value is None:
        raise TypeError(f"Invalid input. {field} must be a number.")

    try:
        number = float(value)

    except (TypeError, ValueError):
        raise TypeError(f"Invalid input. {field} must be a number.") from None

    except OverflowError:
        raise ValueError(f"Invalid input. {field} must be a finite number.") from None

    if not math.isfinite(number):
        raise ValueError(f"Invalid input. {field} must be a finite number.")

    return number


def coerce_whole(value: Any, field: str) -> int:
    number = _coerce_finite(value, field)

    if not number.is_integer():
        raise ValueError(f"Invalid input. {field} must be a whole number.")

    return int(number)


def coerce_score(value: Any) -> float:
    """
    Validates and normalizes a subject score.

    Accepts any input, and then:
        - Casts to float.
        - Ensures the number is finite.
        - Ensures it lies within [0, 100].

    Args:
        value (Any): The input value to validate.

    Returns:
        The normalized score (float).

    Raises:
        TypeError: If the input cannot be cast to float.
        ValueError: If the input is non-finite or out of range.
    """
    score = _coerce_finite(value, "Score")

    if not MIN_SCORE <= score <= MAX_SCORE:
        raise ValueError(
            f"Invalid input. Score must be between {MIN_SCORE:g} and {MAX_SCORE:g}."
        )

    return score


def coerce_level(value: Any, config: RecordsConfig) -> int:
    level = coerce_whole(value, "Form level")

    if not config.is_valid_level(level):
        raise ValueError(
            f"Invalid input. Form level must be between {config.min_level} and {config.max_level}."
        )

    return level


def coerce_age(value: Any, config: RecordsConfig) -> int:
    age = coerce_whole(value, "Age")

    if not config.is_valid_age(age):
        raise ValueError(
            f"Invalid input. Age must be between {config.min_age} and {config.max_age}."
        )

    return age


def coerce_required_text(value: Any, field: str) -> str:
    text = "" if value is None else str(value).strip()

    if not text:
        raise ValueError(f"Invalid input. {field} is required.")

    return text


# === predicates ===


def is_valid_score(value: Any) -> bool:
    try:
        coerce_score(value)

    except (TypeError, ValueError):
        return False

    return True


def is_valid_age(value: Any, config: RecordsConfig) -> bool:
    try:
        coerce_age(value, config)

    except (TypeError, ValueError):
        return False

    return True


def is_complete_registration(fields: Mapping[str, Any], config: RecordsConfig) -> bool:
    """
    Returns True if the name, id, and gender fields are non-empty, age is a finite whole
    number, and form is one of the configured levels.

    Age bounds are deliberately not applied here; see `is_valid_age()`.
    """
    try:
        for key in ("name", "id", "gender"):
            coerce_required_text(fields.get(key), key)

        coerce_whole(fields.get("age"), "Age")
        coerce_level(fields.get("form"), config)

    except (TypeError, ValueError):
        return False

    return True
