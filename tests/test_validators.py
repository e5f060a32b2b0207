# tests/test_validators.py

import pytest

from core.config import GENERAL_CONFIG, SCIENCE_CONFIG
from core.validators import (
    coerce_level,
    coerce_score,
    is_complete_registration,
    is_valid_age,
    is_valid_score,
)
from tests.helpers import make_fields


@pytest.mark.parametrize("value", [0, 100, "0", "100", 55.5, " 42 "])
def test_valid_scores(value):
    assert is_valid_score(value)


@pytest.mark.parametrize(
    "value",
    [101, -1, "abc", "", None, True, float("inf"), float("nan"), "-0.5", 10**400],
)
def test_invalid_scores(value):
    assert not is_valid_score(value)


def test_coerce_score_returns_float():
    assert coerce_score("87") == 87.0


def test_coerce_level_rejects_fractions_and_out_of_range():
    assert coerce_level("2", SCIENCE_CONFIG) == 2
    assert coerce_level(4.0, SCIENCE_CONFIG) == 4

    with pytest.raises(ValueError):
        coerce_level("2.5", SCIENCE_CONFIG)

    with pytest.raises(ValueError, match="between 1 and 4"):
        coerce_level(0, SCIENCE_CONFIG)


def test_is_valid_age_uses_configured_range():
    assert is_valid_age(7, SCIENCE_CONFIG)
    assert not is_valid_age(7, GENERAL_CONFIG)
    assert is_valid_age("10", GENERAL_CONFIG)
    assert not is_valid_age("ten", SCIENCE_CONFIG)


def test_complete_registration():
    assert is_complete_registration(make_fields(), SCIENCE_CONFIG)


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": ""},
        {"id": "   "},
        {"gender": ""},
        {"age": "abc"},
        {"age": None},
        {"form": "0"},
        {"form": 5},
        {"form": None},
    ],
)
def test_incomplete_registration(overrides):
    assert not is_complete_registration(make_fields(**overrides), SCIENCE_CONFIG)


def test_complete_registration_ignores_age_bounds():
    assert is_complete_registration(make_fields(age=40), GENERAL_CONFIG)


def test_oversized_integers_are_rejected():
    assert not is_valid_age(10**400, SCIENCE_CONFIG)

    with pytest.raises(ValueError, match="finite"):
        coerce_score(10**400)
