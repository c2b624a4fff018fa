# core/errors.py

"""
Exception types raised by the attendance store.

All errors derive from `AttendanceError`, which is a `ValueError` so callers that already
guard input validation with `except ValueError` keep working.
"""

from __future__ import annotations

from typing import Any, Iterable


class AttendanceError(ValueError):
    """Base class for attendance validation failures."""


class DuplicateIdError(AttendanceError):
    def __init__(self, duplicate_ids: Iterable[str]):
        self.duplicate_ids: list[str] = sorted(set(duplicate_ids))
        super().__init__(
            f"Roster contains duplicate student IDs: {', '.join(self.duplicate_ids)}."
        )


class UnknownIdError(AttendanceError):
    def __init__(self, student_id: str):
        self.student_id = student_id
        super().__init__(
            f"No student with ID '{student_id}' is on the current roster."
        )


class InvalidStatusError(AttendanceError):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Invalid attendance status: {value!r}. Expected present, absent, late, or unmarked."
        )
