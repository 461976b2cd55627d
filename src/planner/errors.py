"""
Error taxonomy for the study planner.

Every failure raised by the planner is a PlannerError carrying a
PlannerErrorKind, so callers can either catch a specific subclass or
dispatch on ``err.kind``.
"""

from __future__ import annotations

from enum import Enum


class PlannerErrorKind(str, Enum):
    """Kind of planner failure."""

    DUPLICATE_SUBJECT = "duplicate_subject"
    SUBJECT_NOT_FOUND = "subject_not_found"
    INVALID_HOURS = "invalid_hours"
    IO_ERROR = "io_error"
    INVALID_FORMAT = "invalid_format"


class PlannerError(Exception):
    """Base class for planner failures."""

    kind: PlannerErrorKind


class DuplicateSubjectError(PlannerError):
    """Raised when adding a subject whose name is already registered."""

    kind = PlannerErrorKind.DUPLICATE_SUBJECT

    def __init__(self, name: str):
        super().__init__(f"Subject already exists: {name}")
        self.name = name


class SubjectNotFoundError(PlannerError):
    """Raised when an operation needs a subject that is not registered."""

    kind = PlannerErrorKind.SUBJECT_NOT_FOUND

    def __init__(self, name: str):
        super().__init__(f"Subject not found: {name}")
        self.name = name


class InvalidHoursError(PlannerError):
    """Raised for a negative daily hours budget."""

    kind = PlannerErrorKind.INVALID_HOURS

    def __init__(self, hours: float):
        super().__init__(f"Hours must be non-negative, got {hours}")
        self.hours = hours


class StorageError(PlannerError):
    """Raised when the plan file cannot be opened for reading or writing."""

    kind = PlannerErrorKind.IO_ERROR

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class InvalidFormatError(PlannerError):
    """Raised for a malformed plan file line or an unrepresentable subject."""

    kind = PlannerErrorKind.INVALID_FORMAT

    def __init__(self, message: str, line_number: int | None = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
