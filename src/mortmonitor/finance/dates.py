"""Month arithmetic for payoff and break-even dates."""

from __future__ import annotations

import calendar
import math
from datetime import date


def add_months(start: date, months: float) -> date:
    """Shift ``start`` by whole calendar months, clamping the day to month end.

    Fractional months are truncated. Non-finite month counts (the
    ``math.inf`` payoff sentinel) return ``start`` unchanged.
    """
    if not math.isfinite(months):
        return start
    total = start.year * 12 + (start.month - 1) + int(months)
    year, month_index = divmod(total, 12)
    year = min(max(year, date.min.year), date.max.year)
    month = month_index + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def months_from_today(months: float, today: date | None = None) -> date:
    """Date ``months`` months after today (or the given ``today``)."""
    return add_months(today or date.today(), months)
