# tests/test_statistics.py

from models.statistics import form_average, overall_average, roster_average
from models.student import Student


def test_form_average(sample_record):
    assert form_average(sample_record) == 75.0


def test_overall_average_is_mean_of_all_scores(sample_student, sample_record, perfect_record):
    sample_student.upsert_performance(sample_record)
    sample_student.upsert_performance(perfect_record)

    assert overall_average(sample_student) == 87.5


def test_overall_average_without_records(sample_student):
    assert overall_average(sample_student) is None


def test_roster_average_skips_students_without_records(sample_record, perfect_record):
    first = Student("a", "A", "F", 14, 1)
    second = Student("b", "B", "M", 14, 2)
    third = Student("c", "C", "M", 14, 2)

    first.upsert_performance(sample_record)
    second.upsert_performance(perfect_record)

    assert roster_average([first, second, third]) == 87.5
    assert roster_average([third]) is None
    assert roster_average([]) is None
