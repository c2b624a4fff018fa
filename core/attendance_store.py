# core/attendance_store.py

"""
Pure state transitions for a single day's attendance.

An attendance map is a plain `dict[str, AttendanceStatus]` keyed by student ID, holding exactly
one entry per student on the current roster. Every function in this module takes the current
map (or the roster) and returns a brand new map; inputs are never mutated, so a host can keep
the previous value around for comparison or undo.

This enables workflows such as:
    - Building a fresh all-unmarked map when a roster is first supplied
    - Re-keying an existing map when the roster changes, keeping known values
    - Marking, toggling, or clearing statuses one student at a time or in bulk
    - Deriving counts and a completion percentage for summary displays

Mutations that name a student ID not present in the map are rejected with `UnknownIdError`
rather than silently adding an entry, so the key set of a map always matches its roster.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

from core.errors import DuplicateIdError, UnknownIdError
from models.aggregates import Aggregates
from models.student import AttendanceStatus, Student

logger = logging.getLogger(__name__)

AttendanceMap = dict[str, AttendanceStatus]


# === roster helpers ===


def roster_ids(roster: Iterable[Student]) -> list[str]:
    """
    Collects the student IDs of a roster in roster order.

    Args:
        roster (Iterable[Student]): The students supplied by the roster source.

    Returns:
        list[str]: The IDs, in the order the students were given.

    Raises:
        DuplicateIdError: If any ID appears more than once.
    """
    ids = [student.id for student in roster]

    duplicates = [
        student_id for student_id, count in Counter(ids).items() if count > 1
    ]

    if duplicates:
        raise DuplicateIdError(duplicates)

    return ids


# === map constructors ===


def initialize(roster: Iterable[Student]) -> AttendanceMap:
    """
    Creates an attendance map with every student on the roster unmarked.

    Raises:
        DuplicateIdError: If the roster repeats a student ID.
    """
    return {student_id: AttendanceStatus.UNMARKED for student_id in roster_ids(roster)}


def reconcile(previous: Mapping[str, Any], roster: Iterable[Student]) -> AttendanceMap:
    """
    Re-keys an existing attendance map against a new roster.

    Args:
        previous (Mapping[str, Any]): The current attendance map. Values may be raw status input.
        roster (Iterable[Student]): The new roster.

    Returns:
        AttendanceMap: A map keyed by exactly the new roster's IDs.

    Raises:
        DuplicateIdError: If the roster repeats a student ID.
        InvalidStatusError: If a carried-over value is not a valid status.

    Notes:
        - Students still on the roster keep their previous status.
        - Students new to the roster start unmarked.
        - Students no longer on the roster are dropped.
        - The result depends only on the ID sets, so the function is idempotent.
    """
    ids = roster_ids(roster)

    reconciled = {
        student_id: AttendanceStatus.coerce(previous.get(student_id))
        for student_id in ids
    }

    dropped = len(set(previous) - set(ids))
    if dropped:
        logger.debug("Dropped %d stale student ID(s) during reconcile.", dropped)

    return reconciled


# === mutations ===


def set_status(
    attendance: Mapping[str, AttendanceStatus],
    student_id: str,
    status: Any,
) -> AttendanceMap:
    """
    Sets one student's status.

    Args:
        attendance (Mapping[str, AttendanceStatus]): The current attendance map.
        student_id (str): The ID of the student to update.
        status (Any): The new status; `None` or `AttendanceStatus.UNMARKED` unmarks the student.

    Returns:
        AttendanceMap: A copy of the map with `student_id` set to `status`.

    Raises:
        UnknownIdError: If `student_id` is not a key of the map.
        InvalidStatusError: If `status`, or any value already in the map, is not a valid status.
    """
    require_known_id(attendance, student_id)

    updated = normalize(attendance)
    updated[student_id] = AttendanceStatus.coerce(status)

    return updated


def toggle_status(
    attendance: Mapping[str, AttendanceStatus],
    student_id: str,
    status: Any,
) -> AttendanceMap:
    """
    Sets a student's status, or unmarks the student if they already hold that status.

    Applying the same toggle twice restores a student who was unmarked or already held `status`.

    Raises:
        UnknownIdError: If `student_id` is not a key of the map.
        InvalidStatusError: If `status`, or any value already in the map, is not a valid status.
    """
    require_known_id(attendance, student_id)

    status = AttendanceStatus.coerce(status)

    if AttendanceStatus.coerce(attendance[student_id]) == status:
        return set_status(attendance, student_id, AttendanceStatus.UNMARKED)

    return set_status(attendance, student_id, status)


def mark_all(roster: Iterable[Student], status: Any) -> AttendanceMap:
    """
    Sets every student on the roster to the same status.

    Raises:
        DuplicateIdError: If the roster repeats a student ID.
        InvalidStatusError: If `status` is not a valid status.
    """
    status = AttendanceStatus.coerce(status)

    return {student_id: status for student_id in roster_ids(roster)}


def clear_all(roster: Iterable[Student]) -> AttendanceMap:
    """Unmarks every student on the roster."""
    return mark_all(roster, AttendanceStatus.UNMARKED)


# === queries ===


def compute_aggregates(attendance: Mapping[str, AttendanceStatus]) -> Aggregates:
    """
    Counts each status in a single pass over the map.

    Returns:
        Aggregates: Present, absent, and late counts, with `total` equal to the number of entries.

    Raises:
        InvalidStatusError: If any value in the map is not a valid status.
    """
    counts = Counter(AttendanceStatus.coerce(value) for value in attendance.values())

    return Aggregates(
        present=counts[AttendanceStatus.PRESENT],
        absent=counts[AttendanceStatus.ABSENT],
        late=counts[AttendanceStatus.LATE],
        total=len(attendance),
    )


def ids_with_status(
    attendance: Mapping[str, AttendanceStatus], status: Any
) -> list[str]:
    status = AttendanceStatus.coerce(status)

    return [
        student_id
        for student_id, value in normalize(attendance).items()
        if value == status
    ]


def to_payload(attendance: Mapping[str, AttendanceStatus]) -> dict[str, str | None]:
    """
    Converts a map to its JSON-compatible form.

    Returns:
        dict[str, str | None]: Status strings keyed by student ID, with unmarked students as None.
    """
    return {
        student_id: status.value if status.is_marked else None
        for student_id, status in normalize(attendance).items()
    }


# === validators ===


def normalize(attendance: Mapping[str, Any]) -> AttendanceMap:
    """
    Copies a map, converting every value to an `AttendanceStatus`.

    Raises:
        InvalidStatusError: If any value is not a valid status.
    """
    return {
        student_id: AttendanceStatus.coerce(value)
        for student_id, value in attendance.items()
    }


def require_known_id(
    attendance: Mapping[str, AttendanceStatus], student_id: str
) -> None:
    if student_id not in attendance:
        raise UnknownIdError(student_id)
