"""Display formatting for calculator output.

Renders currency, percentages and the calculator's sentinels
(``math.inf`` months, ``None`` break-even) as dashboard strings.
"""

from __future__ import annotations

import math
from datetime import date

from .dates import months_from_today

INFINITY_LABEL = "∞"
NO_BREAK_EVEN_LABEL = "No break-even (no savings)"


def format_currency(value: float, decimals: int = 0) -> str:
    """Format as US dollars, e.g. ``$1,235`` or ``-$1,234.56``."""
    if math.isinf(value):
        return INFINITY_LABEL if value > 0 else f"-{INFINITY_LABEL}"
    if math.isnan(value):
        return "—"
    sign = "-" if value < 0 else ""
    text = f"{abs(value):,.{decimals}f}"
    if sign and float(text.replace(",", "")) == 0:
        sign = ""
    return f"{sign}${text}"


def format_percent(value: float, decimals: int = 3) -> str:
    """Format a percentage, dropping trailing zeros: ``6.25%``, ``6%``, ``6.13%``."""
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text}%"


def format_months(months: float) -> str:
    if math.isinf(months):
        return INFINITY_LABEL
    return f"{int(months)} mo"


def format_break_even(months: float | None, today: date | None = None) -> str:
    """Render a break-even month count with the date it lands on."""
    if months is None:
        return NO_BREAK_EVEN_LABEL
    if math.isinf(months):
        return INFINITY_LABEL
    when = months_from_today(months, today)
    return f"{int(months)} mo ({when.strftime('%b')} {when.day}, {when.year})"
