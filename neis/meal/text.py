"""Text normalization for NEIS meal fields.

The API packs several items into one field separated by ``<br/>`` and
annotates dishes with allergen codes in parentheses, e.g. ``김치찌개(5.6.9)``.
"""

from __future__ import annotations

import re
from datetime import date

from .errors import InvalidDateError
from .models import VALUE_NOT_AVAILABLE, NutritionPair

LINE_BREAK = "<br/>"

WEEKDAYS: list[str] = ["일", "월", "화", "수", "목", "금", "토"]

_ALLERGEN_RE = re.compile(r"\([^)]*\)")
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def split_list(raw_text: str) -> list[str]:
    """Split a ``<br/>``-delimited field, dropping blank entries."""
    if not raw_text:
        return []
    return [item for item in raw_text.split(LINE_BREAK) if item.strip()]


def strip_allergens(item: str) -> str:
    """Remove parenthesized annotations from a menu item."""
    return _ALLERGEN_RE.sub("", item).strip()


def split_pair(entry: str) -> NutritionPair:
    """Split a ``label:value`` nutrition entry.

    Anything other than exactly one colon keeps the whole entry as the
    label.
    """
    parts = entry.split(":")
    if len(parts) == 2:
        return NutritionPair(label=parts[0].strip(), value=parts[1].strip())
    return NutritionPair(label=entry, value=VALUE_NOT_AVAILABLE)


def parse_iso_date(iso_date: str) -> date:
    """Parse ``YYYY-MM-DD`` strictly.

    Raises:
        InvalidDateError: If the string is not a valid calendar date.
    """
    if not isinstance(iso_date, str) or not _ISO_DATE_RE.match(iso_date):
        raise InvalidDateError(str(iso_date))
    try:
        return date.fromisoformat(iso_date)
    except ValueError as e:
        raise InvalidDateError(iso_date) from e


def to_api_date(iso_date: str) -> str:
    """Convert ``YYYY-MM-DD`` to the ``YYYYMMDD`` form the API expects."""
    return parse_iso_date(iso_date).strftime("%Y%m%d")


def format_display_date(iso_date: str) -> str:
    """Format an ISO date as ``2024년 03월 15일 (금)``."""
    d = parse_iso_date(iso_date)
    # isoweekday(): Monday=1 .. Sunday=7, so % 7 gives Sunday=0
    weekday = WEEKDAYS[d.isoweekday() % 7]
    return f"{d.year}년 {d.month:02d}월 {d.day:02d}일 ({weekday})"
