# models/class_section.py

"""
Class sections a teacher can switch between while taking attendance.

Selecting a section is a display concern only; it never re-keys or clears the attendance map.
"""

from __future__ import annotations


class ClassSection:

    def __init__(self, id: str, label: str):
        self._id: str = id
        self._label: str = label

    @property
    def id(self) -> str:
        return self._id

    @property
    def label(self) -> str:
        return self._label

    def to_dict(self) -> dict:
        return {"id": self._id, "label": self._label}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClassSection):
            return NotImplemented
        return (self._id, self._label) == (other._id, other._label)

    def __hash__(self) -> int:
        return hash((self._id, self._label))

    def __repr__(self) -> str:
        return f"ClassSection({self._id}, {self._label})"


DEFAULT_CLASS_SECTIONS: tuple[ClassSection, ...] = (
    ClassSection("10A", "Class 10 · Section A"),
    ClassSection("10B", "Class 10 · Section B"),
    ClassSection("11A", "Class 11 · Section A"),
)
