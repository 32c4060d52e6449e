"""Decode, encode and validate USF documents."""

from __future__ import annotations

import json
import logging
from typing import Optional, Union

from pydantic import ValidationError

from ..errors import DecodeError, EncodeError, Result
from .models import EncodeOptions, USFDocument

logger = logging.getLogger(__name__)


def _format_validation_errors(exc: ValidationError) -> list[str]:
    """Turn pydantic errors into 'location: message' lines."""
    lines = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "<document>"
        lines.append(f"{loc}: {err['msg']}")
    return lines


def decode(data: Union[bytes, str]) -> Result[USFDocument]:
    """
    Decode JSON text into a USFDocument.

    Decoding is strict: ``version``, ``subjects``, ``periods`` and
    ``timetable`` must all be present with the right types, and every
    ``weekType`` must be one of ``all``, ``even`` or ``odd``.

    Args:
        data: UTF-8 JSON as bytes or str

    Returns:
        Result holding the document, or a DecodeError
    """
    try:
        doc = USFDocument.model_validate_json(data, by_alias=True, by_name=False)
    except ValidationError as e:
        details = _format_validation_errors(e)
        logger.debug("USF decode failed with %d error(s)", len(details))
        return Result.failure(DecodeError("Invalid USF document", details))

    return Result.success(doc)


def encode(doc: USFDocument, options: Optional[EncodeOptions] = None) -> bytes:
    """
    Encode a document as UTF-8 JSON.

    Raises:
        EncodeError: If serialization fails. This does not happen for a
            document built through the model constructors.
    """
    options = options or EncodeOptions()
    try:
        payload = doc.model_dump(mode="json", by_alias=True)
        text = json.dumps(
            payload,
            indent=options.indent,
            sort_keys=options.sort_keys,
            ensure_ascii=options.ensure_ascii,
        )
    except (TypeError, ValueError) as e:
        raise EncodeError(f"Failed to encode USF document: {e}") from e

    return text.encode("utf-8")


def is_valid(data: Union[bytes, str]) -> bool:
    """Whether ``data`` decodes to a USF document."""
    return decode(data).ok
