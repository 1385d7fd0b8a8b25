"""
Domain event-date utilities (pure).

The data store keeps event dates as ISO `YYYY-MM-DD`. The dashboard works
with short labels `DD/MM/YY` (zero-padded day and month, two-digit year).
"""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})(?:[T ].*)?$")
_LABEL = re.compile(r"^(\d{2})/(\d{2})/(\d{2})$")


def today_label(today: date) -> str:
    return today.strftime("%d/%m/%y")


def to_event_label(value: Optional[str]) -> str:
    """
    Normalize a stored date into the `DD/MM/YY` label.

    Labels pass through as-is. Strings that are neither ISO dates nor labels
    are returned unchanged so free-text dates are never lost.
    """

    if not value:
        return ""

    text = str(value).strip()
    if _LABEL.match(text):
        return text

    match = _ISO_DATE.match(text)
    if not match:
        return text

    year, month, day = (int(part) for part in match.groups())
    try:
        return today_label(date(year, month, day))
    except ValueError:
        return text


def to_iso_date(label: str) -> str:
    """
    Convert a `DD/MM/YY` label to ISO `YYYY-MM-DD` (years map to 20YY).

    ISO input passes through. Raises ValueError for anything else.
    """

    text = (label or "").strip()
    if _ISO_DATE.match(text):
        return text[:10]

    match = _LABEL.match(text)
    if not match:
        raise ValueError(f"event date must be DD/MM/YY or YYYY-MM-DD, got {label!r}")

    day, month, year = (int(part) for part in match.groups())
    return date(2000 + year, month, day).isoformat()


def event_label_sort_key(label: str) -> tuple[int, str]:
    """Chronological sort key for labels; unparseable labels sort last."""

    try:
        return (0, to_iso_date(label))
    except ValueError:
        return (1, label)
