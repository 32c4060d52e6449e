"""
Query and mutate a USF document.

Functions take the document as an explicit argument; the caller owns it.
Adds are check-then-insert: on a duplicate the document is left untouched
and a failed Result is returned.
"""

from __future__ import annotations

import logging
from typing import Union

from .data.models import Subject, TimetableEntry, USFDocument, WeekType
from .errors import Result, SubjectAlreadyExists, TimetableEntryAlreadyExists

logger = logging.getLogger(__name__)


# =============================================================================
# Queries
# =============================================================================

def subject_exists(doc: USFDocument, name: str) -> bool:
    """True iff ``name`` is a subject key."""
    return doc.subject_exists(name)


def timetable_entry_exists(
    doc: USFDocument,
    day: int,
    week_type: Union[WeekType, str],
    subject_name: str,
    period: int,
) -> bool:
    """True iff an entry matches all four fields exactly."""
    return doc.timetable_entry_exists(day, WeekType(week_type), subject_name, period)


def get_timetable(doc: USFDocument) -> list[TimetableEntry]:
    """Return the timetable entries in insertion order as a snapshot."""
    return list(doc.timetable)


def find_dangling_references(doc: USFDocument) -> list[str]:
    """
    Find timetable entries pointing at missing subjects or periods.

    References are not checked when decoding or adding entries; this is a
    separate report for callers that want referential integrity.

    Returns:
        One message per problem, empty if every reference resolves
    """
    problems = []
    for i, entry in enumerate(doc.timetable):
        if not doc.subject_exists(entry.subject_name):
            problems.append(f"Entry {i}: unknown subject '{entry.subject_name}'")
        if doc.get_period(entry.period) is None:
            problems.append(
                f"Entry {i}: period {entry.period} out of range (1-{len(doc.periods)})"
            )
    return problems


# =============================================================================
# Mutations
# =============================================================================

def add_subject(
    doc: USFDocument,
    name: str,
    simplified_name: str,
    teacher: str,
    room: str,
) -> Result[None]:
    """
    Add a subject under ``name``.

    Returns:
        Success, or SubjectAlreadyExists with the document unchanged
    """
    if doc.subject_exists(name):
        logger.debug("Refusing duplicate subject %r", name)
        return Result.failure(SubjectAlreadyExists(name))

    doc.subjects[name] = Subject(simplified_name=simplified_name, teacher=teacher, room=room)
    return Result.success()


def add_timetable_entry(
    doc: USFDocument,
    day: int,
    week_type: Union[WeekType, str],
    subject_name: str,
    period: int,
) -> Result[None]:
    """
    Append a timetable entry.

    Args:
        week_type: A WeekType or its tag; an unknown tag raises ValueError

    Returns:
        Success, or TimetableEntryAlreadyExists with the document unchanged
    """
    week_type = WeekType(week_type)
    if doc.timetable_entry_exists(day, week_type, subject_name, period):
        logger.debug(
            "Refusing duplicate timetable entry (%s, %s, %r, %s)",
            day, week_type.value, subject_name, period,
        )
        return Result.failure(
            TimetableEntryAlreadyExists(day, week_type.value, subject_name, period)
        )

    doc.timetable.append(
        TimetableEntry(day=day, week_type=week_type, subject_name=subject_name, period=period)
    )
    return Result.success()
