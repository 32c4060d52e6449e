"""Document model, codec and file storage."""

from .models import (
    CURRENT_VERSION,
    EncodeOptions,
    Subject,
    TimetableEntry,
    USFDocument,
    WeekType,
)
from .codec import decode, encode, is_valid
from .storage import (
    is_valid_file,
    load_usf,
    read_file,
    save_usf,
    write_file,
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
    # Storage
    "is_valid_file",
    "load_usf",
    "read_file",
    "save_usf",
    "write_file",
]
