"""
File collaborators for USF documents.

These wrap the codec with disk I/O. I/O failures come back as a failed
Result holding a USFIOError rather than an OSError.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from ..errors import EncodeError, Result, USFIOError
from .codec import decode, encode
from .models import EncodeOptions, USFDocument

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_file(path: PathLike) -> Result[bytes]:
    """Read raw bytes from ``path``."""
    path = Path(path)
    try:
        return Result.success(path.read_bytes())
    except OSError as e:
        logger.warning("Could not read %s: %s", path, e)
        return Result.failure(USFIOError(f"Could not read {path}: {e}", str(path)))


def write_file(path: PathLike, data: bytes) -> Result[None]:
    """Write ``data`` to ``path``, creating parent directories."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as e:
        logger.warning("Could not write %s: %s", path, e)
        return Result.failure(USFIOError(f"Could not write {path}: {e}", str(path)))
    return Result.success()


def load_usf(path: PathLike) -> Result[USFDocument]:
    """Read and decode a USF file."""
    raw = read_file(path)
    if not raw.ok:
        return Result.failure(raw.error)

    result = decode(raw.value)
    if not result.ok:
        logger.debug("%s is not a valid USF document", path)
    return result


def is_valid_file(path: PathLike) -> bool:
    """Whether ``path`` can be read and decodes to a USF document."""
    return load_usf(path).ok


def save_usf(
    doc: USFDocument,
    path: PathLike,
    options: Optional[EncodeOptions] = None,
) -> Result[None]:
    """Encode ``doc`` and write it to ``path``."""
    try:
        data = encode(doc, options)
    except EncodeError as e:
        return Result.failure(e)

    result = write_file(path, data)
    if result.ok:
        logger.info("Saved USF document to %s", path)
    return result
