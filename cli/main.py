# cli/main.py

"""
Start Menu for the Attendance Tracker CLI.

Loads a roster (from a JSON file or the built-in sample class), picks the reference date,
and hands the resulting `AttendanceTracker` to the Attendance Dashboard menu.
"""

import json
import logging
from typing import cast

import cli.menu_helpers as helpers
import core.attendance_store as store
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import attendance_menu
from cli.roster_utils import SAMPLE_ROSTER, load_roster, resolve_roster_path
from core.errors import DuplicateIdError
from core.settings import Settings
from models.attendance_tracker import AttendanceTracker
from models.class_section import DEFAULT_CLASS_SECTIONS
from models.student import AttendanceStatus, Student

logger = logging.getLogger(__name__)


def run_cli() -> None:
    """
    Entry point for the Attendance Tracker CLI.

    Notes:
        - Logging is configured from `ATTENDANCE_LOG_LEVEL` before any roster is loaded.
        - Invalid settings fall back to the defaults instead of aborting.
        - Ctrl-C or end of input exits cleanly through `exit_program()`.
    """
    try:
        settings = Settings.from_env()

    except ValueError as e:
        print(f"\n[ERROR: INVALID_FIELD_VALUE] {e} Falling back to WARNING.")
        settings = Settings.from_env(log_level="WARNING")

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    title = formatters.format_banner_text("ATTENDANCE TRACKER")
    print(f"\n{title}")

    try:
        tracker = create_tracker(settings)

        if tracker is not None:
            attendance_menu.run(tracker)

    except (KeyboardInterrupt, EOFError):
        print()

    exit_program()


def create_tracker(settings: Settings) -> AttendanceTracker | None:
    """
    Prompts for a roster and date, then builds an `AttendanceTracker`.

    Returns:
        AttendanceTracker: The new session if the roster loads successfully.
        None: If the user cancels.

    Notes:
        - A blank roster path falls back to `ATTENDANCE_ROSTER_PATH`, then to the sample roster.
        - A blank date uses today.
        - Rosters with duplicate student IDs are rejected and the user is prompted again.
        - An unknown `ATTENDANCE_DEFAULT_CLASS` is logged and replaced by the first class section.
    """
    selected_class = resolve_default_class(settings.default_class)

    while True:
        students = prompt_roster(settings)

        if students is MenuSignal.CANCEL:
            return None
        students = cast(list[Student], students)

        class_date = prompt_class_date()

        try:
            tracker = AttendanceTracker(
                students=students,
                date=class_date,
                on_attendance_change=log_attendance_change,
                selected_class=selected_class,
            )

        except DuplicateIdError as e:
            print(f"\n[ERROR: DUPLICATE_ID] {e}")
            continue

        except ValueError as e:
            print(f"\n[ERROR: INVALID_FIELD_VALUE] {e}")
            continue

        print(f"\n... Loaded {len(tracker.students)} students.")

        return tracker


def resolve_default_class(class_id: str | None) -> str | None:
    """
    Checks the configured default class against the available class sections.

    Returns:
        The class ID if it names a known section, otherwise None (first section).
    """
    if class_id is None:
        return None

    if any(section.id == class_id for section in DEFAULT_CLASS_SECTIONS):
        return class_id

    logger.warning(
        "Unknown default class '%s'; using the first class section instead.", class_id
    )
    return None


def prompt_roster(settings: Settings) -> list[Student] | MenuSignal:
    """
    Prompts for a roster JSON path until a readable roster is given.

    Returns:
        list[Student]: The loaded roster.
        MenuSignal.CANCEL: If the user enters "q".
    """
    while True:
        path_input = helpers.prompt_user_input_or_none(
            "Enter path to a roster JSON file (leave blank for default, 'q' to quit):"
        )

        if path_input is not None and path_input.lower() == "q":
            return MenuSignal.CANCEL

        path_input = path_input or settings.roster_path

        if path_input is None:
            print("\nUsing the sample roster.")
            return list(SAMPLE_ROSTER)

        file_path = resolve_roster_path(path_input)

        try:
            return load_roster(file_path)

        except (OSError, ValueError) as e:
            logger.warning("Could not load roster from %s: %s", file_path, e)
            print(f"\nCould not load roster from {file_path}: {e}")


def prompt_class_date() -> str | None:
    while True:
        date_input = helpers.prompt_user_input_or_none(
            "Enter the class date (YYYY-MM-DD, leave blank for today):"
        )

        if date_input is None:
            return None

        try:
            formatters.coerce_date(date_input)

        except ValueError as e:
            print(f"\n{e}")
            continue

        return date_input


def log_attendance_change(attendance: dict[str, AttendanceStatus]) -> None:
    logger.info("Attendance updated: %s", json.dumps(store.to_payload(attendance)))


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
