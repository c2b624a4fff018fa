# cli/menus/attendance_menu.py

"""
Attendance Dashboard menu for the Attendance Tracker CLI.

Provides interactive workflows to view the roster, mark individual students, apply bulk
Present/Absent marks, clear the day, switch class sections, and print the current map as JSON.

Every change goes through the `AttendanceTracker` manipulators, so the host's
`on_attendance_change` callback fires exactly as it would for any other front end.
"""

import json
from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.attendance_store as store
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from models.attendance_tracker import AttendanceTracker
from models.class_section import ClassSection
from models.student import AttendanceStatus, Student


def run(tracker: AttendanceTracker) -> None:
    """
    Top-level loop with dispatch for the Attendance Dashboard menu.

    Args:
        tracker (AttendanceTracker): The active attendance session.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("ATTENDANCE DASHBOARD")
    options = [
        ("View Roster", lambda: helpers.display_roster(tracker)),
        ("Mark a Student", lambda: mark_student(tracker)),
        ("Mark All Present", lambda: mark_all(tracker, AttendanceStatus.PRESENT)),
        ("Mark All Absent", lambda: mark_all(tracker, AttendanceStatus.ABSENT)),
        ("Clear All", lambda: clear_all(tracker)),
        ("Select Class", lambda: select_class(tracker)),
        ("View Summary", lambda: helpers.display_attendance_summary(tracker)),
        ("Export Attendance as JSON", lambda: export_attendance(tracker)),
    ]
    zero_option = "Exit Program"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response()

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


# === attendance workflows ===


def mark_student(tracker: AttendanceTracker) -> None:
    """
    Prompts for a student and a status, then toggles that status.

    Notes:
        - Choosing the status the student already holds unmarks them.
        - Cancelling at either prompt returns without changes.
    """
    student = helpers.find_student_from_roster(tracker)

    if student is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    student = cast(Student, student)

    current = tracker.status_for(student.id)

    status = helpers.prompt_status_or_cancel(current)

    if status is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    status = cast(AttendanceStatus, status)

    tracker_response = tracker.toggle_status(student.id, status)

    if not tracker_response.success:
        helpers.display_response_failure(tracker_response)
        return

    updated = tracker.status_for(student.id)

    print(f"\n{model_formatters.format_student_row(student, updated)}")


def mark_all(tracker: AttendanceTracker, status: AttendanceStatus) -> None:
    tracker_response = tracker.mark_all(status)

    if not tracker_response.success:
        helpers.display_response_failure(tracker_response)
        return

    print(f"\nAll {len(tracker.students)} students marked {status.label}.")


def clear_all(tracker: AttendanceTracker) -> None:
    """
    Unmarks every student after confirmation.

    Notes:
        - Skips the confirmation prompt when nothing is marked.
    """
    if tracker.aggregates.marked == 0:
        print("\nNo attendance has been recorded yet.")
        return

    if not helpers.confirm_action("Clear attendance for every student?"):
        helpers.returning_without_changes()
        return

    tracker_response = tracker.clear_all()

    if not tracker_response.success:
        helpers.display_response_failure(tracker_response)
        return

    print("\nAll attendance cleared.")


def select_class(tracker: AttendanceTracker) -> None:
    section = helpers.prompt_selection_from_list(
        list(tracker.class_sections),
        "Class Sections",
        model_formatters.format_class_section_oneline,
    )

    if section is None:
        helpers.returning_without_changes()
        return
    section = cast(ClassSection, section)

    tracker_response = tracker.select_class(section.id)

    if not tracker_response.success:
        helpers.display_response_failure(tracker_response)
        return

    print(f"\n{tracker_response.detail}")


def export_attendance(tracker: AttendanceTracker) -> None:
    print(f"\n{json.dumps(store.to_payload(tracker.attendance), indent=2)}")
