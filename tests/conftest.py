# tests/conftest.py

import pytest

from core.config import GENERAL_CONFIG, SCIENCE_CONFIG, Subject
from models.performance_record import PerformanceRecord
from models.roster import Roster
from models.student import Student
from tests.helpers import make_fields


@pytest.fixture
def sample_roster():
    return Roster(SCIENCE_CONFIG)


@pytest.fixture
def general_roster():
    return Roster(GENERAL_CONFIG)


@pytest.fixture
def populated_roster(sample_roster):
    sample_roster.register(make_fields(id="a1", name="Amina Njeri", form="1"))
    sample_roster.register(make_fields(id="b2", name="Brian Otieno", form="2"))
    sample_roster.register(make_fields(id="c3", name="Cheruiyot Ka1a", form="2"))
    sample_roster.register(make_fields(id="d4", name="Dorcas Wanjiru", form="4"))
    return sample_roster


@pytest.fixture
def sample_student():
    return Student(" s001 ", "Sean Cameron", "Male", 16, 2)


@pytest.fixture
def sample_record():
    return PerformanceRecord(
        1,
        {
            Subject.MATH: 80.0,
            Subject.PHYSICS: 60.0,
            Subject.CHEMISTRY: 70.0,
            Subject.BIOLOGY: 90.0,
        },
    )


@pytest.fixture
def perfect_record():
    return PerformanceRecord(2, {subject: 100.0 for subject in SCIENCE_CONFIG.subjects})
