"""Console output for USF documents."""

from .formatters import (
    DAY_ABBREV,
    DocumentFormatter,
    day_label,
    format_document,
    period_label,
)

__all__ = [
    "DAY_ABBREV",
    "DocumentFormatter",
    "day_label",
    "format_document",
    "period_label",
]
