# core/response.py

from __future__ import annotations

from enum import Enum

from core.errors import (
    AttendanceError,
    DuplicateIdError,
    InvalidStatusError,
    UnknownIdError,
)


class ErrorCode(Enum):
    # === Not Found ===
    NOT_FOUND = "NOT_FOUND"

    # the student ID is not on the current roster
    UNKNOWN_ID = "UNKNOWN_ID"

    # === Constraint Violations ===

    # the roster repeats a student ID
    DUPLICATE_ID = "DUPLICATE_ID"

    # === Validation Failures ===

    # status is not one of present, absent, late, or unmarked
    INVALID_STATUS = "INVALID_STATUS"

    # field value is out of bounds or incorrectly formatted
    INVALID_FIELD_VALUE = "INVALID_FIELD_VALUE"

    # === Internal Faults ===
    INTERNAL_ERROR = "INTERNAL_ERROR"


_ERROR_CODES: dict[type[AttendanceError], tuple[ErrorCode, int]] = {
    DuplicateIdError: (ErrorCode.DUPLICATE_ID, 400),
    UnknownIdError: (ErrorCode.UNKNOWN_ID, 404),
    InvalidStatusError: (ErrorCode.INVALID_STATUS, 400),
}


class Response:
    """
    Standard Response object for AttendanceTracker manipulator and lookup methods.

    Attributes:
        success (bool): Indicates whether the operation succeeded.
        detail (str | None): Optional human-readable explanation.
        error (ErrorCode | str | None): Optional machine-readable error identifier.
        status_code (int | None): Optional HTTP-style response code.
        data (dict): Optional payload, varies by operation.
    """

    def __init__(
        self,
        success: bool,
        detail: str | None = None,
        error: ErrorCode | str | None = None,
        status_code: int | None = None,
        data: dict | None = None,
    ):
        self._success = success
        self._detail = detail
        self._error = error
        self._status_code = status_code
        self._data = data or {}

    # === properties ===

    @property
    def success(self) -> bool:
        return self._success

    @property
    def detail(self) -> str | None:
        return self._detail

    @property
    def error(self) -> ErrorCode | str | None:
        return self._error

    @property
    def status_code(self) -> int | None:
        return self._status_code

    @property
    def data(self) -> dict:
        return self._data

    # === public classmethods ===

    @classmethod
    def succeed(
        cls,
        detail: str | None = None,
        status_code: int | None = 200,
        data: dict | None = None,
    ) -> Response:
        return cls(
            success=True,
            detail=detail,
            status_code=status_code,
            data=data,
        )

    @classmethod
    def fail(
        cls,
        detail: str | None = None,
        error: ErrorCode | str | None = None,
        status_code: int | None = 400,
        data: dict | None = None,
    ) -> Response:
        return cls(
            success=False,
            detail=detail,
            error=error,
            status_code=status_code,
            data=data,
        )

    @classmethod
    def from_error(cls, error: AttendanceError) -> Response:
        """
        Builds a failed Response from an attendance validation error.

        Args:
            error (AttendanceError): The exception raised by the attendance store.

        Returns:
            Response: A failure carrying the matching `ErrorCode` and status code. Unrecognized
            `AttendanceError` subclasses map to `ErrorCode.INVALID_FIELD_VALUE`.
        """
        error_code, status_code = _ERROR_CODES.get(
            type(error), (ErrorCode.INVALID_FIELD_VALUE, 400)
        )

        return cls.fail(
            detail=str(error),
            error=error_code,
            status_code=status_code,
        )

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "error": self.error.value if isinstance(self.error, Enum) else self.error,
            "detail": self.detail,
            "data": self.data,
            "status_code": self.status_code,
        }

    @classmethod
    def from_dict(cls, payload: dict) -> Response:
        error = payload.get("error")

        if error in ErrorCode._value2member_map_:
            error = ErrorCode(error)

        return cls(
            success=payload["success"],
            error=error,
            detail=payload.get("detail"),
            data=payload.get("data", {}),
            status_code=payload.get("status_code"),
        )

    # === dunder methods ===

    def __bool__(self) -> bool:
        return self._success

    def __str__(self) -> str:
        if self.success:
            return f"Success: {self.detail or ''}"

        error_str = (
            self.error.value if isinstance(self.error, Enum) else self.error or ""
        )
        return f"Error: {error_str}"
