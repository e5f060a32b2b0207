# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Student Records application.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for and validating user input
- Handling user selections and confirmation flows
- Displaying standard system messages and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

from enum import Enum
from typing import Any, Callable, Iterable

import cli.model_formatters as model_formatters
import core.formatters as formatters
from core.response import Response
from models.roster import Roster
from models.student import Student


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    DEFAULT = "DEFAULT"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "cancel" or "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("Select an option: ")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            index = int(choice) - 1

            if index < 0:
                raise IndexError(index)

            # retrieves action from tuple
            return options[index][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        show_index (bool, optional): If True, prepends a numbered index to each result. Defaults to False.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


# === prompt user input methods ===


# Prompt Helpers
#
# These functions provide a consistent way to handle user input and confirmation prompts.
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - Empty string responses are overloaded for control signals:
#     - `prompt_user_input_or_cancel()` returns `MenuSignal.CANCEL` on blank input.
#     - `prompt_user_input_or_default()` returns `MenuSignal.DEFAULT`.
#     - `prompt_user_input_or_none()` returns `None`.
# - `confirm_action()` loops until the user enters a valid yes/no response.


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def confirm_make_change() -> bool:
    return confirm_action("Do you want to make this change?")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response == "" else response


def prompt_user_input_or_default(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.DEFAULT if response == "" else response


def prompt_user_input_or_none(prompt: str) -> str | None:
    response = prompt_user_input(prompt)
    return None if response == "" else response


# === finder, search, and select methods ===


def prompt_selection_from_search(
    search_results: list[Student],
    formatter: Callable[[Student], str] = model_formatters.format_student_oneline,
) -> Student | None:
    """
    Prompts the user to select a student from a set of search results.

    Args:
        search_results (list[Student]): The search result records, in roster order.
        formatter (Callable[[Student], str], optional): Function to convert each record to a display string.

    Returns:
        Student: The selected record, if chosen.
        None:
            - If the search returned no results.
            - If the user cancels with "0".

    Notes:
        - If a single result is found, it is returned automatically.
        - Otherwise, a numbered selection prompt is shown.
    """
    if not search_results:
        print("\nYour search returned no results.")
        return

    if len(search_results) == 1:
        return search_results[0]

    print(f"\nYour search returned {len(search_results)} students:")

    while True:
        display_results(search_results, True, formatter)

        choice = prompt_user_input("Select an option (0 to cancel):")

        if choice == "0":
            return

        try:
            index = int(choice) - 1

            if index < 0:
                raise IndexError(index)

            return search_results[index]

        except (ValueError, IndexError):
            print("\nInvalid selection. Please try again.")


# ---
# Failures from the `Roster` are silently handled as "no results" to maintain a smooth UX.
# ---


def search_students(roster: Roster) -> list[Student]:
    query = prompt_user_input("Search for a student by ID or name (leave blank to list all):")

    roster_response = roster.find_students_by_query(query)

    return roster_response.data["records"] if roster_response.success else []


def find_student_by_search(roster: Roster) -> Student | MenuSignal:
    """
    Prompts the user to search for and select a `Student`.

    Returns:
        - The selected `Student` if search and selection succeed.
        - `MenuSignal.CANCEL` if no match is found or the user cancels.
    """
    search_results = search_students(roster)

    student = prompt_selection_from_search(search_results)

    return MenuSignal.CANCEL if student is None else student


# === often used messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")


def returning_to(destination: str) -> None:
    print(f"\nReturning to {destination}.")


def caution_banner() -> None:
    caution_banner = formatters.format_banner_text("CAUTION!")
    print(f"\n{caution_banner}")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")
