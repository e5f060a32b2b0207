# tests/test_formatters.py

import core.formatters as formatters
import cli.model_formatters as model_formatters
from core.config import GENERAL_CONFIG, SCIENCE_CONFIG


def test_format_average():
    assert formatters.format_average(None) == "N/A"
    assert formatters.format_average(87.5) == "87.50%"
    assert formatters.format_average(100) == "100.00%"


def test_format_score():
    assert formatters.format_score(80.0) == "80"
    assert formatters.format_score(70.5) == "70.5"


def test_format_list_with_and():
    assert formatters.format_list_with_and([]) == ""
    assert formatters.format_list_with_and(["Math"]) == "Math"
    assert formatters.format_list_with_and(["Math", "English"]) == "Math and English"
    assert (
        formatters.format_list_with_and(["Math", "English", "Social"])
        == "Math, English, and Social"
    )


def test_format_banner_text():
    banner = formatters.format_banner_text("Roster", width=10)
    assert banner.splitlines() == ["=" * 10, "  Roster  ", "=" * 10]


def test_student_oneline(sample_student, sample_record):
    assert "N/A" in model_formatters.format_student_oneline(sample_student)

    sample_student.upsert_performance(sample_record)
    line = model_formatters.format_student_oneline(sample_student)

    assert line.startswith("S001")
    assert "Sean Cameron" in line
    assert "Form 2" in line
    assert line.endswith("75.00%")


def test_student_multiline(sample_student):
    text = model_formatters.format_student_multiline(sample_student)
    assert "... ID: S001" in text
    assert "... Current Level: Form 2" in text
    assert "... Overall Average: N/A" in text


def test_performance_table_empty(sample_student):
    assert (
        model_formatters.format_performance_table(sample_student, SCIENCE_CONFIG)
        == "No results recorded yet."
    )


def test_performance_table_rows_sorted_by_form(sample_student, sample_record, perfect_record):
    sample_student.upsert_performance(perfect_record)
    sample_student.upsert_performance(sample_record)

    lines = model_formatters.format_performance_table(
        sample_student, SCIENCE_CONFIG
    ).splitlines()

    assert "Chemistry" in lines[0]
    assert "Form 1" in lines[1]
    assert lines[1].rstrip().endswith("75.00%")
    assert "Form 2" in lines[2]
    assert "100.00%" in lines[2]


def test_student_details_uses_config_subjects(sample_student):
    text = model_formatters.format_student_details(sample_student, GENERAL_CONFIG)
    assert "Academic Record" in text
    assert "No results recorded yet." in text


def test_roster_summary(sample_student, sample_record):
    sample_student.upsert_performance(sample_record)
    assert (
        model_formatters.format_roster_summary([sample_student])
        == "1 student | class average: 75.00%"
    )
    assert model_formatters.format_roster_summary([]) == "0 students | class average: N/A"
