"""USF - a JSON schema for school timetables, with validation and editing helpers."""

from .data.models import (
    CURRENT_VERSION,
    EncodeOptions,
    Subject,
    TimetableEntry,
    USFDocument,
    WeekType,
)
from .data.codec import decode, encode, is_valid
from .errors import (
    DecodeError,
    EncodeError,
    Result,
    SubjectAlreadyExists,
    TimetableEntryAlreadyExists,
    USFError,
    USFIOError,
)
from .operations import (
    add_subject,
    add_timetable_entry,
    find_dangling_references,
    get_timetable,
    subject_exists,
    timetable_entry_exists,
)

__all__ = [
    # Models
    "CURRENT_VERSION",
    "EncodeOptions",
    "Subject",
    "TimetableEntry",
    "USFDocument",
    "WeekType",
    # Codec
    "decode",
    "encode",
    "is_valid",
    # Operations
    "add_subject",
    "add_timetable_entry",
    "find_dangling_references",
    "get_timetable",
    "subject_exists",
    "timetable_entry_exists",
    # Errors
    "DecodeError",
    "EncodeError",
    "Result",
    "SubjectAlreadyExists",
    "TimetableEntryAlreadyExists",
    "USFError",
    "USFIOError",
]
