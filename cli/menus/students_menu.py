# cli/menus/students_menu.py

"""
Manage Students menu for the Student Records CLI.

This module defines the full interface for managing `Student` records, including:
- Registering new students
- Editing student details (ID, name, gender, age, form level)
- Promoting students to the next form level
- Permanently removing students
- Viewing students (searchable, filterable list or a single detailed record)

All operations are routed through the `Roster` API for consistency and validation.
Control flow adheres to structured CLI menu patterns with clear terminal-level feedback.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from core.response import ErrorCode
from models.roster import Roster
from models.student import Student


def run(roster: Roster) -> None:
    """
    Top-level loop with dispatch for the Manage Students menu.

    Args:
        roster (Roster): The active `Roster`.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("Manage Students")
    options = [
        ("Register Student", register_student),
        ("Edit Student", find_and_edit_student),
        ("Promote Student", find_and_promote_student),
        ("Remove Student", find_and_remove_student),
        ("View Students", view_students),
        ("View Student Details", view_student_details),
    ]
    zero_option = "Return to Roster menu"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(roster)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    helpers.returning_to("Roster menu")


# === register student ===


def register_student(roster: Roster) -> None:
    """
    Loops a prompt to collect new student details and register them in the roster.

    Args:
        roster (Roster): The active `Roster`.

    Notes:
        - Leaving the ID blank cancels the current registration.
        - Raw input is handed to `Roster.register()`, which validates every field.
    """
    while True:
        fields = prompt_student_fields(roster)

        if fields is not None:
            roster_response = roster.register(fields)

            if not roster_response.success:
                helpers.display_response_failure(roster_response)
                print("\nThe student was not registered.")

            else:
                print(f"\n{roster_response.detail}")

        if not helpers.confirm_action(
            "Would you like to continue registering new students?"
        ):
            break

    helpers.returning_to("Manage Students menu")


def prompt_student_fields(roster: Roster) -> dict[str, str] | None:
    """
    Collects raw registration fields from the user.

    Returns:
        A dictionary of raw field values keyed by "id", "name", "gender", "age", "form", or None if the user cancels.
    """
    config = roster.config

    id_input = helpers.prompt_user_input_or_cancel(
        "Enter student ID (leave blank to cancel):"
    )

    if id_input is MenuSignal.CANCEL:
        return None
    id_input = cast(str, id_input)

    return {
        "id": id_input,
        "name": helpers.prompt_user_input("Enter full name:"),
        "gender": helpers.prompt_user_input("Enter gender:"),
        "age": helpers.prompt_user_input(age_prompt(roster)),
        "form": helpers.prompt_user_input(
            f"Enter form level ({config.min_level}-{config.max_level}):"
        ),
    }


def age_prompt(roster: Roster) -> str:
    config = roster.config

    if config.checks_age:
        return f"Enter age ({config.min_age}-{config.max_age}):"

    return "Enter age:"


# === edit student ===


def find_and_edit_student(roster: Roster) -> None:
    """
    Prompts user to search for a `Student` and then passes the result to `edit_student()`.
    """
    student = helpers.find_student_by_search(roster)

    if student is MenuSignal.CANCEL:
        return
    student = cast(Student, student)

    edit_student(student, roster)


def edit_student(student: Student, roster: Roster) -> None:
    """
    Interface for editing the details of a `Student` record.

    Args:
        student (Student): The `Student` object being edited.
        roster (Roster): The active `Roster`.

    Notes:
        - Every field is pre-filled with its current value; leaving a prompt blank keeps it.
        - The edit is dispatched through `Roster.edit_student()`, which keeps the student's performance history.
    """
    print("\nYou are editing the following student:")
    print(model_formatters.format_student_multiline(student))

    current = {
        "id": student.id,
        "name": student.name,
        "gender": student.gender,
        "age": str(student.age),
        "form": str(student.form),
    }
    labels = {
        "id": "student ID",
        "name": "full name",
        "gender": "gender",
        "age": "age",
        "form": "form level",
    }

    fields: dict[str, str] = {}

    for key, label in labels.items():
        field_input = helpers.prompt_user_input_or_default(
            f"Enter new {label} (leave blank to keep '{current[key]}'):"
        )
        fields[key] = current[key] if field_input is MenuSignal.DEFAULT else cast(str, field_input)

    if fields == current:
        helpers.returning_without_changes()
        return

    for key, label in labels.items():
        if fields[key] != current[key]:
            print(f"... {label}: {current[key]} -> {fields[key]}")

    if not helpers.confirm_make_change():
        helpers.returning_without_changes()
        return

    roster_response = roster.edit_student(student.id, fields)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print("\nStudent details were not updated.")
        helpers.returning_without_changes()
    else:
        print(f"\n{roster_response.detail}")


# === promote student ===


def find_and_promote_student(roster: Roster) -> None:
    """
    Prompts user to search for a `Student` and promotes them to the next form level.

    Notes:
        - A student already in the final form is reported, not treated as an error.
    """
    student = helpers.find_student_by_search(roster)

    if student is MenuSignal.CANCEL:
        return
    student = cast(Student, student)

    roster_response = roster.promote(student.id)

    if roster_response.success:
        print(f"\n{roster_response.detail}")

    elif roster_response.error is ErrorCode.AT_MAX_LEVEL:
        print(f"\n{roster_response.detail} No changes made.")

    else:
        helpers.display_response_failure(roster_response)
        helpers.returning_without_changes()


# === remove student ===


def find_and_remove_student(roster: Roster) -> None:
    """
    Prompts user to search for a `Student` and then passes the result to `confirm_and_remove()`.
    """
    student = helpers.find_student_by_search(roster)

    if student is MenuSignal.CANCEL:
        return
    student = cast(Student, student)

    confirm_and_remove(student, roster)


def confirm_and_remove(student: Student, roster: Roster) -> None:
    """
    Deletes the `Student` record and all of its results from the `Roster` after preview and user confirmation.
    """
    helpers.caution_banner()
    print("You are about to permanently delete the following student record:")
    print(model_formatters.format_student_multiline(student))
    print(f"\nThis will also delete {student.performance_count} recorded result(s).")

    if not helpers.confirm_action(f"Delete {student.name}? This action cannot be undone."):
        helpers.returning_without_changes()
        return

    roster_response = roster.delete_student(student.id)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print("\nStudent was not removed.")
        helpers.returning_without_changes()
    else:
        print(f"\n{roster_response.detail}")


# === view students ===


def view_students(roster: Roster) -> None:
    """
    Displays the roster, narrowed by an optional search term and form level filter.

    Notes:
        - Students are listed in registration order with their overall average.
    """
    term = helpers.prompt_user_input_or_none(
        "Search by ID or name (leave blank to show everyone):"
    )
    level_filter = helpers.prompt_user_input_or_none(
        "Filter by form level (leave blank for all forms):"
    )

    roster_response = roster.find_students_by_query(term or "", level_filter)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    students = roster_response.data["records"]

    print(f"\n{formatters.format_banner_text('Students')}")

    if not students:
        print("No students found.")
        return

    helpers.display_results(students, False, model_formatters.format_student_oneline)
    print(f"\n{model_formatters.format_roster_summary(students)}")


def view_student_details(roster: Roster) -> None:
    """
    Displays the full record of a selected `Student`, including every form's results.
    """
    student = helpers.find_student_by_search(roster)

    if student is MenuSignal.CANCEL:
        return
    student = cast(Student, student)

    print("\nYou are viewing the following student record:")
    print(model_formatters.format_student_details(student, roster.config))
