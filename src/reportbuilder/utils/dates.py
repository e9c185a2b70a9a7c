"""Date formatting helpers for report periods."""

from __future__ import annotations

from datetime import date, datetime
from typing import Union

DISPLAY_DATE_FORMAT = "%d/%m/%Y"


def format_date(value: Union[date, datetime]) -> str:
    """Render ``value`` as ``dd/mm/YYYY``."""

    return value.strftime(DISPLAY_DATE_FORMAT)


def format_period(start: Union[date, datetime], end: Union[date, datetime]) -> str:
    """Render a reporting period such as ``01/01/2024 a 31/01/2024``."""

    return f"{format_date(start)} a {format_date(end)}"


def parse_date(value: Union[str, date, datetime]) -> Union[date, datetime]:
    """Coerce an ISO-8601 string to a date; ``date``/``datetime`` values pass through."""

    if isinstance(value, (date, datetime)):
        return value
    text = str(value).strip()
    try:
        if "T" in text or " " in text:
            return datetime.fromisoformat(text)
        return date.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"Invalid date value: {value!r}") from exc


def _is_aware(value: Union[date, datetime]) -> bool:
    return isinstance(value, datetime) and value.utcoffset() is not None


def is_inverted(start: Union[date, datetime], end: Union[date, datetime]) -> bool:
    """Return True when ``start`` falls after ``end``.

    Pairs that cannot be compared directly (``date`` with ``datetime``, or
    timezone-aware with naive) are compared by calendar day.
    """

    both_datetimes = isinstance(start, datetime) and isinstance(end, datetime)
    if not both_datetimes or _is_aware(start) != _is_aware(end):
        start = start.date() if isinstance(start, datetime) else start
        end = end.date() if isinstance(end, datetime) else end
    return start > end
