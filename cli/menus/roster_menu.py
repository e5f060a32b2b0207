# cli/menus/roster_menu.py

"""
Roster menu for the Student Records CLI.

Provides calls to the Manage Students and Record Results menus, and a quick view of the whole roster.
"""

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import results_menu, students_menu
from models.roster import Roster


def run(roster: Roster) -> None:
    """
    Top-level loop with dispatch for the Roster menu.

    Args:
        roster (Roster): The active `Roster`.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text(f"{roster.config.name.upper()} ROSTER")
    options = [
        ("Manage Students", lambda: students_menu.run(roster)),
        ("Record Results", lambda: results_menu.run(roster)),
        ("View Roster", lambda: view_roster(roster)),
    ]
    zero_option = "Return to Start Menu"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response()

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    helpers.returning_to("Start Menu")


def view_roster(roster: Roster) -> None:
    students = roster.students

    print(f"\n{formatters.format_banner_text('Roster')}")

    if not students:
        print("No students registered yet.")
        return

    helpers.display_results(students, True, model_formatters.format_student_oneline)
    print(f"\n{model_formatters.format_roster_summary(students)}")
