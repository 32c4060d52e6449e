"""
Pydantic models for the USF timetable document.

Wire format (UTF-8 JSON):

    {
      "version": 1,
      "subjects": {"Math": {"simplified_name": "数学", "teacher": "张老师", "room": "101"}},
      "periods": [["08:00:00", "08:45:00"], ["09:00:00", "09:45:00"]],
      "timetable": [{"day": 1, "weekType": "all", "subjectName": "Math", "period": 1}]
    }

Python attributes are snake_case; wire keys are set through aliases.
Periods are referenced 1-based by timetable entries.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


CURRENT_VERSION = 1


# =============================================================================
# Enums
# =============================================================================

class WeekType(str, Enum):
    """Week-parity pattern a timetable entry applies to."""
    ALL = "all"
    EVEN = "even"
    ODD = "odd"


# =============================================================================
# Entities
# =============================================================================

class Subject(BaseModel):
    """A course with its display name, teacher and room."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    simplified_name: StrictStr = Field(alias="simplified_name", description="Short display name")
    teacher: StrictStr = Field(description="Teacher name")
    room: StrictStr = Field(description="Room label")

    def __str__(self) -> str:
        return f"{self.simplified_name} ({self.teacher}, {self.room})"


class TimetableEntry(BaseModel):
    """One scheduled occurrence of a subject."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    day: StrictInt = Field(description="Day of week")
    week_type: WeekType = Field(alias="weekType", description="Week parity")
    subject_name: StrictStr = Field(alias="subjectName", description="Key into subjects")
    period: StrictInt = Field(description="1-based index into periods")

    @property
    def key(self) -> tuple[int, WeekType, str, int]:
        """The four fields that identify an entry."""
        return (self.day, self.week_type, self.subject_name, self.period)

    def __str__(self) -> str:
        return f"day {self.day} ({self.week_type.value}) period {self.period}: {self.subject_name}"


# =============================================================================
# Document
# =============================================================================

class USFDocument(BaseModel):
    """
    A complete USF document.

    All four top-level fields are required; a document missing any of them
    does not validate. ``version`` cannot be reassigned after construction.
    """
    model_config = ConfigDict(populate_by_name=True)

    version: StrictInt = Field(frozen=True, description="Format version")
    subjects: dict[str, Subject] = Field(description="Subjects keyed by name")
    periods: list[list[StrictStr]] = Field(description="Period time labels, e.g. ['08:00:00', '08:45:00']")
    timetable: list[TimetableEntry] = Field(description="Entries in insertion order")

    @classmethod
    def empty(cls, version: int = CURRENT_VERSION) -> USFDocument:
        """Create a document with no subjects, periods or entries."""
        return cls(version=version, subjects={}, periods=[], timetable=[])

    # -------------------------------------------------------------------------
    # Lookup Methods
    # -------------------------------------------------------------------------

    def subject_exists(self, name: str) -> bool:
        """Whether a subject is stored under ``name``."""
        return name in self.subjects

    def timetable_entry_exists(
        self,
        day: int,
        week_type: WeekType,
        subject_name: str,
        period: int,
    ) -> bool:
        """Whether an entry matches all four fields exactly."""
        key = (day, week_type, subject_name, period)
        return any(entry.key == key for entry in self.timetable)

    def get_subject(self, name: str) -> Optional[Subject]:
        """Get subject by name."""
        return self.subjects.get(name)

    def get_period(self, period: int) -> Optional[list[str]]:
        """Get the time labels of a 1-based period index."""
        if 1 <= period <= len(self.periods):
            return self.periods[period - 1]
        return None

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def summary(self) -> dict[str, Any]:
        """Get a summary of the document."""
        return {
            "version": self.version,
            "subjects": len(self.subjects),
            "periods": len(self.periods),
            "timetable_entries": len(self.timetable),
            "days": len({entry.day for entry in self.timetable}),
        }


# =============================================================================
# Configuration Models
# =============================================================================

class EncodeOptions(BaseModel):
    """JSON output settings used when encoding a document."""
    model_config = ConfigDict(extra="forbid")

    indent: Optional[int] = Field(default=2, ge=0, description="Indentation (None = compact)")
    sort_keys: bool = Field(default=True, description="Sort object keys")
    ensure_ascii: bool = Field(default=False, description="Escape non-ASCII characters")
