# core/settings.py

"""
Environment-driven settings for the attendance tracker.

Recognized variables:
    ATTENDANCE_LOG_LEVEL      logging level name for the CLI (default WARNING)
    ATTENDANCE_DEFAULT_CLASS  class section selected at startup (default: first section)
    ATTENDANCE_ROSTER_PATH    roster JSON loaded by the CLI when no path is entered
"""

from __future__ import annotations

import logging
import os


class Settings:

    def __init__(
        self,
        log_level: str = "WARNING",
        default_class: str | None = None,
        roster_path: str | None = None,
    ):
        self._log_level: str = Settings.validate_log_level(log_level)
        self._default_class: str | None = default_class or None
        self._roster_path: str | None = roster_path or None

    @property
    def log_level(self) -> str:
        return self._log_level

    @property
    def default_class(self) -> str | None:
        return self._default_class

    @property
    def roster_path(self) -> str | None:
        return self._roster_path

    @classmethod
    def from_env(cls, log_level: str | None = None) -> Settings:
        """
        Reads settings from the environment.

        Args:
            log_level (str | None): Overrides `ATTENDANCE_LOG_LEVEL` when given.

        Raises:
            ValueError: If the log level is not a recognized logging level name.
        """
        return cls(
            log_level=log_level or os.getenv("ATTENDANCE_LOG_LEVEL", "WARNING"),
            default_class=os.getenv("ATTENDANCE_DEFAULT_CLASS"),
            roster_path=os.getenv("ATTENDANCE_ROSTER_PATH"),
        )

    @staticmethod
    def validate_log_level(level: str) -> str:
        level = level.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level: '{level}'.")
        return level
