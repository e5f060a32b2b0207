# cli/main.py

"""
Start Menu for the Student Records CLI.

Provides functions for choosing a records configuration and opening a new, empty roster.
Rosters live in memory only; closing a roster discards it.
"""

import os

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import roster_menu
from core.config import CONFIGS, RecordsConfig, get_config
from core.logging_config import setup_logging
from models.roster import Roster

CONFIG_ENV_VAR = "STUDENT_RECORDS_CONFIG"
LOG_LEVEL_ENV_VAR = "STUDENT_RECORDS_LOG_LEVEL"
LOG_FORMAT_ENV_VAR = "STUDENT_RECORDS_LOG_FORMAT"


def run_cli() -> None:
    """
    Top-level loop with dispatch for the Start menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.

    Notes:
        - If `STUDENT_RECORDS_CONFIG` names a preset, that roster opens straight away.
        - An unknown `STUDENT_RECORDS_CONFIG` value is reported and the Start menu opens instead.
    """
    setup_logging(
        os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING"),
        os.environ.get(LOG_FORMAT_ENV_VAR, "text"),
    )

    preset = os.environ.get(CONFIG_ENV_VAR)

    if preset:
        try:
            config = get_config(preset)

        except KeyError:
            presets = formatters.format_list_with_and(list(CONFIGS))
            print(f"\nUnknown records configuration '{preset}'. Choose one of: {presets}.")

        else:
            roster_menu.run(open_roster(config))

    title = formatters.format_banner_text("STUDENT RECORDS MANAGER")
    options = [
        (describe_config(config), lambda config=config: open_roster(config))
        for config in CONFIGS.values()
    ]
    zero_option = "Exit Program"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            exit_program()

        elif callable(menu_response):
            roster_menu.run(menu_response())

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def describe_config(config: RecordsConfig) -> str:
    subjects = formatters.format_list_with_and([s.label for s in config.subjects])

    return f"Open a {config.name} roster ({subjects})"


def open_roster(config: RecordsConfig) -> Roster:
    print(f"\nOpening a new {config.name} roster ...")

    return Roster(config)


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


if __name__ == "__main__":
    run_cli()
