"""
Error taxonomy and result type for USF operations.

Fallible operations return a ``Result`` instead of raising, so the caller
always gets the failure kind back:

    result = add_subject(doc, "Math", "数学", "张老师", "101")
    if not result.ok:
        print(result.error)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


# =============================================================================
# Errors
# =============================================================================

class USFError(Exception):
    """Base class for all USF errors."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class DecodeError(USFError):
    """Raised when a document is malformed, incomplete or of the wrong shape."""

    def __init__(self, message: str, details: Optional[list[str]] = None):
        super().__init__(message)
        self.details = details or []

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return self.message + "\n" + "\n".join(f"  - {d}" for d in self.details)


class EncodeError(USFError):
    """Raised when a document cannot be serialized."""
    pass


class SubjectAlreadyExists(USFError):
    """A subject with the same name is already in the document."""

    def __init__(self, name: str):
        super().__init__(f"Subject already exists: '{name}'")
        self.name = name


class TimetableEntryAlreadyExists(USFError):
    """An identical timetable entry is already in the document."""

    def __init__(self, day: int, week_type: str, subject_name: str, period: int):
        super().__init__(
            f"Timetable entry already exists: day={day}, week_type={week_type}, "
            f"subject='{subject_name}', period={period}"
        )
        self.day = day
        self.week_type = week_type
        self.subject_name = subject_name
        self.period = period


class USFIOError(USFError):
    """Reading or writing a document file failed."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


# =============================================================================
# Result
# =============================================================================

@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a fallible operation: either a value or an error."""
    value: Optional[T] = None
    error: Optional[USFError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the held error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: Optional[T] = None) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: USFError) -> Result[T]:
        return cls(error=error)
