# models/attendance_tracker.py

"""
The AttendanceTracker is the session object that hosts a day's attendance for one roster.

It holds the roster, the reference date, the selected class section, and the latest attendance
map. All map changes are computed by the pure functions in `core.attendance_store`; the tracker
stores the returned value and notifies an optional `on_attendance_change` callback with a copy
of the full map whenever it actually changes.

Manipulator methods follow the Response contract used throughout the application and never
raise for invalid input. Validation errors from the store are converted to failed Responses,
and the stored map is left untouched.
"""

from __future__ import annotations

import datetime
import logging
from typing import Any, Callable, Iterable

import core.attendance_store as store
import core.formatters as formatters
from core.attendance_store import AttendanceMap
from core.errors import AttendanceError
from core.response import ErrorCode, Response
from models.aggregates import Aggregates
from models.class_section import DEFAULT_CLASS_SECTIONS, ClassSection
from models.student import AttendanceStatus, Student

logger = logging.getLogger(__name__)

AttendanceCallback = Callable[[AttendanceMap], Any]


class AttendanceTracker:
    _summary_subtexts: dict[str, str] = {
        "Present": "Ready to learn",
        "Absent": "Follow up needed",
        "Late": "Arrivals pending",
    }

    def __init__(
        self,
        students: Iterable[Student] = (),
        date: datetime.date | str | None = None,
        on_attendance_change: AttendanceCallback | None = None,
        class_sections: Iterable[ClassSection] | None = None,
        selected_class: str | None = None,
    ):
        """
        Raises:
            DuplicateIdError: If the roster repeats a student ID.
            ValueError: If `date` is not a valid date or `selected_class` names an unknown section.
        """
        self._students: tuple[Student, ...] = tuple(students)
        self._attendance: AttendanceMap = store.initialize(self._students)
        self._date: datetime.date = formatters.coerce_date(date)
        self._class_sections: tuple[ClassSection, ...] = tuple(
            DEFAULT_CLASS_SECTIONS if class_sections is None else class_sections
        )
        self._selected_class: ClassSection | None = self._resolve_initial_class(
            selected_class
        )
        self._on_attendance_change: AttendanceCallback | None = on_attendance_change

        self._notify()

    # === properties ===

    @property
    def students(self) -> tuple[Student, ...]:
        return self._students

    @property
    def attendance(self) -> AttendanceMap:
        return dict(self._attendance)

    @property
    def aggregates(self) -> Aggregates:
        return store.compute_aggregates(self._attendance)

    @property
    def date(self) -> datetime.date:
        return self._date

    @property
    def formatted_date(self) -> str:
        return formatters.format_class_date_short(self._date)

    @property
    def day_name(self) -> str:
        return formatters.format_day_name(self._date)

    @property
    def class_sections(self) -> tuple[ClassSection, ...]:
        return self._class_sections

    @property
    def selected_class(self) -> ClassSection | None:
        return self._selected_class

    @property
    def on_attendance_change(self) -> AttendanceCallback | None:
        return self._on_attendance_change

    @on_attendance_change.setter
    def on_attendance_change(self, callback: AttendanceCallback | None) -> None:
        self._on_attendance_change = callback

    # === data accessors ===

    def status_for(self, student_id: str) -> AttendanceStatus:
        """
        Returns the current status of a student on the roster.

        Raises:
            UnknownIdError: If the student is not on the roster.
        """
        store.require_known_id(self._attendance, student_id)

        return self._attendance[student_id]

    def find_student_by_id(self, student_id: str) -> Response:
        """
        Looks up a `Student` on the current roster by ID.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if the student is on the roster.
                - error (ErrorCode | str | None): `ErrorCode.UNKNOWN_ID` if not found.
                - status_code (int | None): 200 on success, 404 if not found.
                - data (dict | None): On success, "record" (Student) and "status" (AttendanceStatus).

        Notes:
            - This method is read-only and does not raise.
        """
        for student in self._students:
            if student.id == student_id:
                return Response.succeed(
                    data={
                        "record": student,
                        "status": self._attendance[student_id],
                    },
                )

        return Response.fail(
            detail=f"No student with ID '{student_id}' is on the current roster.",
            error=ErrorCode.UNKNOWN_ID,
            status_code=404,
        )

    def summary_cards(self) -> list[dict[str, Any]]:
        """
        Builds the labelled summary figures shown above the roster.

        Returns:
            list[dict[str, Any]]: One dict per card with "label", "value", and "subtext" keys,
            in the order Marked, Present, Absent, Late.
        """
        aggregates = self.aggregates

        cards = [
            {
                "label": "Marked",
                "value": aggregates.marked,
                "subtext": f"{formatters.format_percent(aggregates.completion_percent)} complete",
            }
        ]

        for label, value in (
            ("Present", aggregates.present),
            ("Absent", aggregates.absent),
            ("Late", aggregates.late),
        ):
            cards.append(
                {
                    "label": label,
                    "value": value,
                    "subtext": self._summary_subtexts[label],
                }
            )

        return cards

    # === data manipulators ===

    def update_roster(self, students: Iterable[Student]) -> Response:
        """
        Replaces the roster and re-keys the attendance map to match it.

        Args:
            students (Iterable[Student]): The new roster.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the roster was replaced.
                    - False if the new roster repeats a student ID.
                - detail (str | None): A human-readable description of the result.
                - error (ErrorCode | str | None):
                    - `ErrorCode.DUPLICATE_ID` if the roster repeats a student ID.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "attendance" (AttendanceMap): A copy of the re-keyed map.
                        - "changed" (bool): Whether the map differs from the previous one.

        Notes:
            - Students kept on the roster keep their status; new students start unmarked.
            - On failure both the roster and the map are left unchanged.
        """
        students = tuple(students)

        try:
            reconciled = store.reconcile(self._attendance, students)

        except AttendanceError as e:
            logger.warning("Rejected roster update: %s", e)
            return Response.from_error(e)

        else:
            self._students = students

            return self._commit(reconciled, "Roster updated.")

    def set_status(self, student_id: str, status: Any) -> Response:
        """
        Sets one student's attendance status.

        Args:
            student_id (str): The ID of a student on the roster.
            status (Any): An `AttendanceStatus`, a status string, or None to unmark.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if the status was applied.
                - error (ErrorCode | str | None):
                    - `ErrorCode.UNKNOWN_ID` if the student is not on the roster.
                    - `ErrorCode.INVALID_STATUS` if the status is not recognized.
                - status_code (int | None): 200 on success, 404 for an unknown ID, 400 for an invalid status.
                - data (dict | None): On success, "attendance" (AttendanceMap) and "changed" (bool).
        """
        return self._apply(
            lambda: store.set_status(self._attendance, student_id, status),
            f"Attendance updated for student '{student_id}'.",
        )

    def toggle_status(self, student_id: str, status: Any) -> Response:
        """
        Sets one student's status, or unmarks them if they already hold it.

        Follows the same Response contract as `set_status()`.
        """
        return self._apply(
            lambda: store.toggle_status(self._attendance, student_id, status),
            f"Attendance toggled for student '{student_id}'.",
        )

    def mark_all(self, status: Any) -> Response:
        """
        Sets every student on the roster to the same status.

        Follows the same Response contract as `set_status()`, without `ErrorCode.UNKNOWN_ID`.
        """
        return self._apply(
            lambda: store.mark_all(self._students, status),
            "All students marked.",
        )

    def clear_all(self) -> Response:
        return self._apply(
            lambda: store.clear_all(self._students),
            "All attendance cleared.",
        )

    def select_class(self, class_id: str) -> Response:
        """
        Selects the class section shown alongside the roster.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if the section exists.
                - error (ErrorCode | str | None): `ErrorCode.NOT_FOUND` for an unknown section.
                - status_code (int | None): 200 on success, 404 if not found.
                - data (dict | None): On success, "record" (ClassSection).

        Notes:
            - The attendance map is not affected.
        """
        section = self._find_class_section(class_id)

        if section is None:
            return Response.fail(
                detail=f"No class section with ID '{class_id}' is available.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        self._selected_class = section

        return Response.succeed(
            detail=f"Selected {section.label}.",
            data={
                "record": section,
            },
        )

    def set_date(self, date: datetime.date | str | None) -> Response:
        """
        Changes the reference date used for display.

        Returns:
            Response: Fails with `ErrorCode.INVALID_FIELD_VALUE` if the date cannot be parsed.
            On success, data holds "record" (datetime.date).

        Notes:
            - The attendance map is not affected.
        """
        try:
            self._date = formatters.coerce_date(date)

        except (TypeError, ValueError) as e:
            return Response.fail(
                detail=str(e),
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        else:
            return Response.succeed(
                detail=f"Date set to {formatters.format_date_iso(self._date)}.",
                data={
                    "record": self._date,
                },
            )

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "date": formatters.format_date_iso(self._date),
            "class_id": self._selected_class.id if self._selected_class else None,
            "students": [student.to_dict() for student in self._students],
            "attendance": store.to_payload(self._attendance),
            "summary": self.aggregates.to_dict(),
        }

    # === helper methods ===

    def _apply(self, transition: Callable[[], AttendanceMap], detail: str) -> Response:
        try:
            updated = transition()

        except AttendanceError as e:
            logger.warning("Rejected attendance change: %s", e)
            return Response.from_error(e)

        else:
            return self._commit(updated, detail)

    def _commit(self, updated: AttendanceMap, detail: str) -> Response:
        changed = updated != self._attendance

        if changed:
            self._attendance = updated
            logger.debug(detail)
            self._notify()

        return Response.succeed(
            detail=detail if changed else "No attendance changes to apply.",
            data={
                "attendance": self.attendance,
                "changed": changed,
            },
        )

    def _notify(self) -> None:
        if self._on_attendance_change is not None:
            self._on_attendance_change(self.attendance)

    def _find_class_section(self, class_id: str) -> ClassSection | None:
        return next(
            (section for section in self._class_sections if section.id == class_id),
            None,
        )

    def _resolve_initial_class(self, class_id: str | None) -> ClassSection | None:
        if class_id is None:
            return self._class_sections[0] if self._class_sections else None

        section = self._find_class_section(class_id)

        if section is None:
            raise ValueError(f"No class section with ID '{class_id}' is available.")

        return section

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"AttendanceTracker({len(self._students)} students, {self._date.isoformat()})"
