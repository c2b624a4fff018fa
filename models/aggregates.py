# models/aggregates.py

"""
Summary statistics derived from an attendance map.

Aggregates are never stored alongside the attendance data; they are recomputed from the
current map whenever they are needed.
"""

from __future__ import annotations


class Aggregates:

    def __init__(
        self,
        present: int = 0,
        absent: int = 0,
        late: int = 0,
        total: int = 0,
    ):
        self._present: int = present
        self._absent: int = absent
        self._late: int = late
        self._total: int = total

    # === properties ===

    @property
    def present(self) -> int:
        return self._present

    @property
    def absent(self) -> int:
        return self._absent

    @property
    def late(self) -> int:
        return self._late

    @property
    def total(self) -> int:
        return self._total

    @property
    def marked(self) -> int:
        return self._present + self._absent + self._late

    @property
    def unmarked(self) -> int:
        return self._total - self.marked

    @property
    def completion_percent(self) -> int:
        """
        Share of the roster with a recorded status, as a whole percent.

        Halves round up (2.5 -> 3), and an empty roster reports 0.
        """
        if self._total <= 0:
            return 0

        # integer form of floor(100 * marked / total + 0.5)
        return (200 * self.marked + self._total) // (2 * self._total)

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "present": self._present,
            "absent": self._absent,
            "late": self._late,
            "total": self._total,
            "marked": self.marked,
            "completion_percent": self.completion_percent,
        }

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Aggregates):
            return NotImplemented
        return self._as_tuple() == other._as_tuple()

    def __hash__(self) -> int:
        return hash(self._as_tuple())

    def __repr__(self) -> str:
        return (
            f"Aggregates(present={self._present}, absent={self._absent}, "
            f"late={self._late}, total={self._total})"
        )

    def __str__(self) -> str:
        return (
            f"Present: {self._present} | Absent: {self._absent} | Late: {self._late} "
            f"| {self.completion_percent}% of {self._total} marked"
        )

    # === helper methods ===

    def _as_tuple(self) -> tuple[int, int, int, int]:
        return (self._present, self._absent, self._late, self._total)
