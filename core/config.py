# core/config.py

"""
Configuration constants for the student records system.

A records configuration fixes the subject set a performance record must cover,
the range of form levels a student can progress through, and the age range
accepted at registration. Two presets are provided, one per roster variant;
the active configuration is chosen when a `Roster` is created.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Subject(str, Enum):
    MATH = "math"
    PHYSICS = "physics"
    CHEMISTRY = "chemistry"
    BIOLOGY = "biology"
    ENGLISH = "english"
    SCIENCE = "science"
    SOCIAL = "social"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class RecordsConfig:
    """Subject set, level range, and optional age range in force for a roster."""

    name: str
    subjects: tuple[Subject, ...]
    min_level: int = 1
    max_level: int = 4
    min_age: int | None = None
    max_age: int | None = None

    @property
    def levels(self) -> tuple[int, ...]:
        return tuple(range(self.min_level, self.max_level + 1))

    @property
    def checks_age(self) -> bool:
        return self.min_age is not None and self.max_age is not None

    def is_valid_level(self, level: int) -> bool:
        return level in self.levels

    def is_valid_age(self, age: float) -> bool:
        if not self.checks_age:
            return True

        return self.min_age <= age <= self.max_age


# =============================================================================
# PRESETS
# =============================================================================

# Science roster: four science subjects, no age bound enforced at registration.
SCIENCE_CONFIG = RecordsConfig(
    name="science",
    subjects=(Subject.MATH, Subject.PHYSICS, Subject.CHEMISTRY, Subject.BIOLOGY),
)

# General roster: core curriculum subjects, school-age students only.
GENERAL_CONFIG = RecordsConfig(
    name="general",
    subjects=(Subject.MATH, Subject.ENGLISH, Subject.SCIENCE, Subject.SOCIAL),
    min_age=10,
    max_age=25,
)

CONFIGS: dict[str, RecordsConfig] = {
    SCIENCE_CONFIG.name: SCIENCE_CONFIG,
    GENERAL_CONFIG.name: GENERAL_CONFIG,
}

DEFAULT_CONFIG = SCIENCE_CONFIG


def get_config(name: str) -> RecordsConfig:
    """Look up a preset by name (case-insensitive). Raises KeyError if unknown."""
    key = name.strip().lower()

    if key not in CONFIGS:
        raise KeyError(f"Unknown records configuration: '{name}'.")

    return CONFIGS[key]
