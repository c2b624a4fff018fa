# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Attendance Tracker.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for and validating user input
- Handling user selections and confirmation flows
- Displaying standard system messages and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

from enum import Enum
from typing import Any, Callable, Iterable, TypeVar

import cli.model_formatters as model_formatters
import core.formatters as formatters
from core.response import Response
from models.attendance_tracker import AttendanceTracker
from models.student import AttendanceStatus, Student

T = TypeVar("T")


class MenuSignal(Enum):
    CANCEL = "CANCEL"
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

        choice = prompt_user_input("Select an option:")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            # casts choice to int and adjusts for zero-index, retrieves action from tuple
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)
            return options[index][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


def display_roster(tracker: AttendanceTracker, show_index: bool = False) -> None:
    """
    Prints every student on the roster with their current status badge.

    Notes:
        - Students are listed in roster order.
        - An empty roster prints a placeholder line instead.
    """
    if not tracker.students:
        print("\nNo students available.")
        return

    print(f"\n{model_formatters.format_roster_header()}")

    display_results(
        tracker.students,
        show_index,
        lambda s: model_formatters.format_student_row(s, tracker.status_for(s.id)),
    )


def display_attendance_summary(tracker: AttendanceTracker) -> None:
    print(f"\n{formatters.format_banner_text('Attendance Dashboard')}")
    print(model_formatters.format_tracker_heading(tracker))
    print(f"\n{model_formatters.format_summary_cards(tracker.summary_cards())}")
    print(f"\n{model_formatters.format_summary_footer(tracker.aggregates)}")


# === prompt user input methods ===


# Prompt Helpers
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - Empty string responses are overloaded for control signals:
#     - `prompt_user_input_or_none()` returns `None`.
# - `confirm_action()` loops until the user enters a valid yes/no response.


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n):").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_none(prompt: str) -> str | None:
    response = prompt_user_input(prompt)
    return None if response == "" else response


# === finder and select methods ===


def prompt_selection_from_list(
    list_data: list[T],
    list_description: str,
    formatter: Callable[[T], str] = lambda x: str(x),
) -> T | None:
    """
    Prompts the user to select an item from a list.

    Args:
        list_data (list[T]): The items to choose from, displayed in the given order.
        list_description (str): A short description used in prompts and headings (e.g. "students").
        formatter (Callable[[T], str], optional): Function to convert each item to a display string. Defaults to str().

    Returns:
        T: The selected item if a valid index is chosen.
        None: If the list is empty or the user cancels with "0".
    """
    if not list_data:
        print(f"\nThere are no {list_description.lower()}.")
        return

    while True:
        print(f"\n{formatters.format_banner_text(list_description)}")

        display_results(list_data, True, formatter)

        choice = prompt_user_input("Select an option (0 to cancel):")

        if choice == "0":
            return

        try:
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)
            return list_data[index]

        except (ValueError, IndexError):
            print("\nInvalid selection. Please try again.")


def find_student_from_roster(tracker: AttendanceTracker) -> Student | MenuSignal:
    """
    Prompts the user to pick a `Student` from the roster.

    Returns:
        - The selected `Student`.
        - `MenuSignal.CANCEL` if the roster is empty or the user cancels.
    """
    student = prompt_selection_from_list(
        list(tracker.students),
        "Students",
        lambda s: model_formatters.format_student_row(s, tracker.status_for(s.id)),
    )

    return MenuSignal.CANCEL if student is None else student


def prompt_status_or_cancel(
    current: AttendanceStatus = AttendanceStatus.UNMARKED,
) -> AttendanceStatus | MenuSignal:
    """
    Prompts for Present, Absent, or Late.

    Notes:
        - The option matching `current` is labelled as an unmark action, since choosing it again clears the status.
    """
    marked_statuses = [
        AttendanceStatus.PRESENT,
        AttendanceStatus.ABSENT,
        AttendanceStatus.LATE,
    ]

    status = prompt_selection_from_list(
        marked_statuses,
        "Attendance Status",
        lambda s: f"{s.label} (unmark)" if s == current else s.label,
    )

    return MenuSignal.CANCEL if status is None else status


# === often used messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")


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
