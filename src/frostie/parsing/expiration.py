"""Pick one expiration date out of AI, explicit-text and shelf-life candidates."""

from __future__ import annotations

import calendar
import logging
from datetime import date, datetime, timedelta
from typing import Any, Optional

from frostie.models.item import ExpirationSource, Period, Resolution

logger = logging.getLogger(__name__)


def coerce_date(value: Any) -> Optional[date]:
    """Return a calendar date for a date, datetime or ISO-8601 string; None otherwise."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def add_months(start: date, months: int) -> date:
    """Advance the month field, clamping the day to the end of the target month."""

    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def add_period(start: date, period: Period) -> Optional[date]:
    try:
        if period.unit == "day":
            return start + timedelta(days=period.amount)
        if period.unit == "week":
            return start + timedelta(weeks=period.amount)
        return add_months(start, period.amount)
    except (OverflowError, ValueError):
        return None


def _add_days(start: date, days: int) -> date:
    try:
        return start + timedelta(days=days)
    except OverflowError:
        return date.max


def resolve(
    *,
    today: date,
    shelf_life_days: int,
    default_days: int,
    ai_date: Any = None,
    explicit_date: Optional[date] = None,
    explicit_period: Optional[Period] = None,
) -> Resolution:
    """Resolve the final expiration date by fixed priority.

    1. ``ai_date`` when it parses and falls strictly after ``today``.
    2. ``explicit_date`` (or ``today`` + ``explicit_period``) strictly after ``today``.
    3. ``today`` + ``shelf_life_days``; tagged ``foodkeeper`` unless the day count equals
       ``default_days``.

    Rejected candidates are discarded, never clamped.
    """

    if ai_date is not None:
        candidate = coerce_date(ai_date)
        if candidate is not None and candidate > today:
            return Resolution(expiration_date=candidate, source=ExpirationSource.AI)
        logger.debug("Rejected AI expiration date %r (today=%s)", ai_date, today)

    explicit: Optional[date] = explicit_date
    if explicit is None and explicit_period is not None:
        explicit = add_period(today, explicit_period)
    if explicit is not None:
        if explicit > today:
            return Resolution(expiration_date=explicit, source=ExpirationSource.EXPLICIT)
        logger.debug("Rejected explicit expiration date %s (today=%s)", explicit, today)

    source = (
        ExpirationSource.FOODKEEPER
        if shelf_life_days != default_days
        else ExpirationSource.DEFAULT
    )
    return Resolution(
        expiration_date=_add_days(today, max(1, shelf_life_days)),
        source=source,
    )


__all__ = ["add_months", "add_period", "coerce_date", "resolve"]
