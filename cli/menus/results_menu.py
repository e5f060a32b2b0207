# cli/menus/results_menu.py

"""
Record Results menu for the Student Records CLI.

Provides the interface for entering a student's subject scores for one form level.
Entering results for a form that already has results replaces them.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from models.roster import Roster
from models.student import Student


def run(roster: Roster) -> None:
    """
    Loops a prompt to select a student and record their results.

    Args:
        roster (Roster): The active `Roster`.
    """
    print(f"\n{formatters.format_banner_text('Record Results')}")

    while True:
        student = helpers.find_student_by_search(roster)

        if student is not MenuSignal.CANCEL:
            record_results(cast(Student, student), roster)

        if not helpers.confirm_action("Would you like to record more results?"):
            break

    helpers.returning_to("Roster menu")


def record_results(student: Student, roster: Roster) -> None:
    """
    Prompts for a form level and one score per configured subject, then stores them via `Roster.record_performance()`.

    Args:
        student (Student): The student the results belong to.
        roster (Roster): The active `Roster`.

    Notes:
        - The form level defaults to the student's current level.
        - Scores are passed through raw; the roster rejects the whole entry if any score is invalid.
    """
    config = roster.config

    form_input = helpers.prompt_user_input_or_default(
        f"Enter form level ({config.min_level}-{config.max_level}, leave blank for Form {student.form}):"
    )
    form = str(student.form) if form_input is MenuSignal.DEFAULT else cast(str, form_input)

    scores = {
        subject: helpers.prompt_user_input(f"Enter {subject.label} score (0-100):")
        for subject in config.subjects
    }

    if form.strip().isdigit() and student.has_record_for(int(form)):
        print(f"\n{student.name} already has results for Form {form}. They will be replaced.")

        if not helpers.confirm_make_change():
            helpers.returning_without_changes()
            return

    roster_response = roster.record_performance(student.id, form, scores)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print("\nResults were not recorded.")
        return

    print(f"\n{roster_response.detail}")
    print(model_formatters.format_student_details(student, config))
