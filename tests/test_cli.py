# tests/test_cli.py

import pytest

import cli.main as main
import cli.menu_helpers as helpers
from cli.menu_helpers import MenuSignal
from cli.menus import results_menu, roster_menu, students_menu
from core.config import GENERAL_CONFIG, Subject
from tests.helpers import make_fields, science_scores


@pytest.fixture
def feed_input(monkeypatch):
    def feed(*answers):
        answers_iter = iter(answers)
        monkeypatch.setattr("builtins.input", lambda _: next(answers_iter))

    return feed


# === menu helpers ===


def test_display_menu_returns_selected_action(feed_input, capsys):
    def action():
        pass

    feed_input("7", "-1", "x", "1")

    assert helpers.display_menu("Title", [("Do it", action)]) is action
    assert capsys.readouterr().out.count("Invalid selection") == 3


def test_display_menu_zero_exits(feed_input):
    feed_input("0")
    assert helpers.display_menu("Title", []) is MenuSignal.EXIT


def test_confirm_action(feed_input):
    feed_input("maybe", "YES")
    assert helpers.confirm_action("Sure?")

    feed_input("n")
    assert not helpers.confirm_action("Sure?")


def test_prompt_variants(feed_input):
    feed_input("", "", "", "  text  ")
    assert helpers.prompt_user_input_or_cancel("?") is MenuSignal.CANCEL
    assert helpers.prompt_user_input_or_default("?") is MenuSignal.DEFAULT
    assert helpers.prompt_user_input_or_none("?") is None
    assert helpers.prompt_user_input("?") == "text"


def test_find_student_by_search_single_match(populated_roster, feed_input):
    feed_input("dorcas")
    student = helpers.find_student_by_search(populated_roster)
    assert student.id == "D4"


def test_find_student_by_search_selects_from_many(populated_roster, feed_input):
    feed_input("a1", "2")
    student = helpers.find_student_by_search(populated_roster)
    assert student.id == "C3"


def test_find_student_by_search_no_results(populated_roster, feed_input, capsys):
    feed_input("nobody")
    assert helpers.find_student_by_search(populated_roster) is MenuSignal.CANCEL
    assert "no results" in capsys.readouterr().out


def test_display_response_failure(populated_roster, capsys):
    helpers.display_response_failure(populated_roster.find_student_by_id("zz"))
    assert "[ERROR: NOT_FOUND]" in capsys.readouterr().out


# === students menu ===


def test_register_student_flow(sample_roster, feed_input, capsys):
    feed_input("a1", "Amina Njeri", "Female", "15", "1", "n")
    students_menu.register_student(sample_roster)

    assert "A1" in sample_roster
    assert "Registered Amina Njeri." in capsys.readouterr().out


def test_register_student_reports_failure(sample_roster, feed_input, capsys):
    feed_input("a1", "", "Female", "15", "1", "n")
    students_menu.register_student(sample_roster)

    assert len(sample_roster) == 0
    assert "[ERROR: INVALID_INPUT]" in capsys.readouterr().out


def test_age_prompt_mentions_range(general_roster, sample_roster):
    assert students_menu.age_prompt(general_roster) == "Enter age (10-25):"
    assert students_menu.age_prompt(sample_roster) == "Enter age:"


def test_edit_student_flow(populated_roster, feed_input):
    student = populated_roster.find_student_by_id("a1").data["record"]

    feed_input("z9", "", "", "", "3", "y")
    students_menu.edit_student(student, populated_roster)

    assert "Z9" in populated_roster
    assert student.form == 3
    assert student.name == "Amina Njeri"


def test_edit_student_without_changes(populated_roster, feed_input, capsys):
    student = populated_roster.find_student_by_id("a1").data["record"]

    feed_input("", "", "", "", "")
    students_menu.edit_student(student, populated_roster)

    assert "Returning without changes." in capsys.readouterr().out


def test_promote_flow_at_max_level(populated_roster, feed_input, capsys):
    feed_input("d4")
    students_menu.find_and_promote_student(populated_roster)

    assert "already in the final form" in capsys.readouterr().out


def test_remove_flow_requires_confirmation(populated_roster, feed_input):
    feed_input("b2", "n")
    students_menu.find_and_remove_student(populated_roster)
    assert "B2" in populated_roster

    feed_input("b2", "y")
    students_menu.find_and_remove_student(populated_roster)
    assert "B2" not in populated_roster


def test_view_students_filters(populated_roster, feed_input, capsys):
    feed_input("", "2")
    students_menu.view_students(populated_roster)

    out = capsys.readouterr().out
    assert "Brian Otieno" in out
    assert "Amina Njeri" not in out
    assert "2 students | class average: N/A" in out


def test_view_students_bad_filter(populated_roster, feed_input, capsys):
    feed_input("", "two")
    students_menu.view_students(populated_roster)

    assert "[ERROR: INVALID_INPUT]" in capsys.readouterr().out


# === results menu ===


def test_record_results_defaults_to_current_form(populated_roster, feed_input):
    student = populated_roster.find_student_by_id("b2").data["record"]

    feed_input("", "80", "60", "70", "90")
    results_menu.record_results(student, populated_roster)

    assert student.record_for(2).score_for(Subject.BIOLOGY) == 90.0


def test_record_results_replace_needs_confirmation(populated_roster, feed_input):
    populated_roster.record_performance("b2", 2, science_scores())
    student = populated_roster.find_student_by_id("b2").data["record"]

    feed_input("2", "1", "1", "1", "1", "n")
    results_menu.record_results(student, populated_roster)

    assert student.record_for(2).score_for(Subject.MATH) == 80.0


def test_record_results_invalid_score(populated_roster, feed_input, capsys):
    student = populated_roster.find_student_by_id("b2").data["record"]

    feed_input("1", "80", "60", "70", "101")
    results_menu.record_results(student, populated_roster)

    assert student.performance_count == 0
    assert "Results were not recorded." in capsys.readouterr().out


# === roster menu and start menu ===


def test_view_roster(populated_roster, capsys):
    roster_menu.view_roster(populated_roster)
    out = capsys.readouterr().out
    assert " 1. A1" in out
    assert "4 students" in out


def test_open_roster_and_describe_config():
    roster = main.open_roster(GENERAL_CONFIG)
    assert roster.config is GENERAL_CONFIG
    assert len(roster) == 0
    assert main.describe_config(GENERAL_CONFIG) == (
        "Open a general roster (Math, English, Science, and Social)"
    )


def test_exit_program():
    with pytest.raises(SystemExit):
        main.exit_program()


def test_run_cli_exits(feed_input, monkeypatch):
    monkeypatch.delenv(main.CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(main, "setup_logging", lambda *args: None)
    feed_input("0")

    with pytest.raises(SystemExit):
        main.run_cli()


def test_run_cli_full_session(feed_input, monkeypatch, capsys):
    monkeypatch.setattr(main, "setup_logging", lambda *args: None)
    monkeypatch.setenv(main.CONFIG_ENV_VAR, "general")

    fields = make_fields(id="g1", name="Grace Achieng", age="12", form="1")
    feed_input(
        "1",  # Manage Students
        "1",  # Register Student
        fields["id"],
        fields["name"],
        fields["gender"],
        fields["age"],
        fields["form"],
        "n",
        "0",  # back to Roster menu
        "3",  # View Roster
        "0",  # back to Start Menu
        "0",  # Exit
    )

    with pytest.raises(SystemExit):
        main.run_cli()

    out = capsys.readouterr().out
    assert "GENERAL ROSTER" in out
    assert "Registered Grace Achieng." in out
    assert "G1" in out


def test_run_cli_unknown_config_falls_back_to_start_menu(feed_input, monkeypatch, capsys):
    monkeypatch.setattr(main, "setup_logging", lambda *args: None)
    monkeypatch.setenv(main.CONFIG_ENV_VAR, "history")
    feed_input("0")

    with pytest.raises(SystemExit):
        main.run_cli()

    out = capsys.readouterr().out
    assert "Unknown records configuration 'history'. Choose one of: science and general." in out
    assert "STUDENT RECORDS MANAGER" in out
