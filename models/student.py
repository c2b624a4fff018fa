# models/student.py

"""
Represents a student on a class roster, and the attendance status values a student can hold.

Students are supplied by an external roster source and are never created or removed by the
attendance core. Each student carries a stable unique ID, a display name, and a roll label.
Instances are read-only once constructed.

Includes functionality for:
- Deriving avatar initials from the display name
- Serializing to and from JSON-compatible dictionaries
- Coercing raw status input (enum, string, or None) into an `AttendanceStatus`
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from core.errors import InvalidStatusError


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    UNMARKED = "unmarked"

    @property
    def label(self) -> str:
        return "Not Marked" if self is AttendanceStatus.UNMARKED else self.value.title()

    @property
    def is_marked(self) -> bool:
        return self is not AttendanceStatus.UNMARKED

    @classmethod
    def coerce(cls, value: Any) -> AttendanceStatus:
        """
        Converts raw input into an `AttendanceStatus`.

        Args:
            value (Any): An `AttendanceStatus`, a status string (case-insensitive), or None.

        Returns:
            AttendanceStatus: The matching member. None maps to `UNMARKED`.

        Raises:
            InvalidStatusError: If the value does not name a known status.
        """
        if value is None:
            return cls.UNMARKED

        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass

        raise InvalidStatusError(value)


class Student:

    def __init__(self, id: str, name: str, roll: str):
        self._id: str = Student.validate_id_input(id)
        self._name: str = name.strip()
        self._roll: str = str(roll).strip()

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def roll(self) -> str:
        return self._roll

    @property
    def initials(self) -> str:
        return "".join(part[0] for part in self._name.split()[:2])

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "name": self._name,
            "roll": self._roll,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Student:
        return cls(
            id=data["id"],
            name=data["name"],
            roll=data.get("roll", ""),
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return (self._id, self._name, self._roll) == (
            other._id,
            other._name,
            other._roll,
        )

    def __hash__(self) -> int:
        return hash((self._id, self._name, self._roll))

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._name}, {self._roll})"

    def __str__(self) -> str:
        return f"STUDENT: {self._name} - (Roll: {self._roll}, ID: {self._id})"

    # === data validators ===

    @staticmethod
    def validate_id_input(id: Any) -> str:
        """
        Validates and normalizes a Student identifier.

        Args:
            id: The raw identifier supplied by the roster source.

        Returns:
            The identifier as a string with surrounding whitespace removed.

        Raises:
            ValueError: If the identifier is missing or blank.
        """
        if id is None or str(id).strip() == "":
            raise ValueError("Invalid input. Student ID must be a non-empty value.")
        return str(id).strip()
