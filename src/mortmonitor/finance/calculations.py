"""Mortgage finance calculator.

Closed-form amortization formulas behind every dashboard figure:
- Monthly principal & interest payment
- Months remaining to payoff at a fixed payment
- Interest paid over a horizon (schedule walk)
- Refinance break-even period
- Loan-to-value ratio
- Remaining balance after N payments

Pure math, zero external dependencies. Rates are annual percentages
(6.25 means 6.25%). Nothing here raises: degenerate input degrades to
0, ``math.inf`` or ``None`` (break-even) so figures can be recomputed
from half-typed form values.
"""

from __future__ import annotations

import math
import re

MIN_TERM_YEARS = 0.0001
MAX_TERM_YEARS = 1000

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")


def to_number(value: object) -> float:
    """Coerce user input into a finite float.

    Strings are stripped of everything except digits, ``.`` and ``-`` and the
    longest leading number is parsed, so ``"$1,234.56"`` -> ``1234.56`` and
    ``"6.25%"`` -> ``6.25``. Anything unparseable or non-finite becomes 0.
    """
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        if isinstance(value, int | float):
            n = float(value)
        else:
            match = _LEADING_NUMBER.match(_NON_NUMERIC.sub("", str(value)))
            if not match:
                return 0.0
            n = float(match.group())
    except OverflowError:
        return 0.0
    return n if math.isfinite(n) else 0.0


def _finite(x: float) -> float:
    try:
        x = float(x)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return x if math.isfinite(x) else 0.0


def _monthly_rate(annual_rate_percent: float) -> float:
    return _finite(annual_rate_percent) / 100 / 12


def _growth_minus_one(rate: float, periods: float) -> float:
    """(1 + rate) ** periods - 1, accurate for tiny rates and saturating at inf."""
    try:
        return math.expm1(periods * math.log1p(rate))
    except OverflowError:
        return math.inf


def _ceil_months(x: float) -> int | float:
    if math.isnan(x):
        return 0
    if math.isinf(x):
        return math.inf if x > 0 else 0
    return math.ceil(x)


def monthly_payment_principal_and_interest(principal: float, annual_rate_percent: float, term_years: float) -> float:
    """Calculate the monthly P&I payment for a fully amortizing loan.

    M = P * r(1+r)^n / ((1+r)^n - 1), r = monthly rate, n = years * 12 rounded half up.

    Args:
        principal: Loan amount
        annual_rate_percent: Annual rate as a percentage (e.g., 6.25)
        term_years: Loan term in years, clamped to [0.0001, 1000]

    Returns:
        Monthly payment, or 0 for a non-positive principal or term
    """
    p = _finite(principal)
    years = min(max(_finite(term_years), MIN_TERM_YEARS), MAX_TERM_YEARS)
    r = _monthly_rate(annual_rate_percent)
    n = math.floor(years * 12 + 0.5)

    if p <= 0 or n <= 0:
        return 0.0
    if r == 0:
        return p / n
    if r <= -1:
        return 0.0

    # Same formula divided through by (1+r)^n
    discount = -_growth_minus_one(r, -n)
    if math.isinf(discount):
        return 0.0
    return p * r / discount


def remaining_months(balance: float, annual_rate_percent: float, payment: float) -> int | float:
    """Number of payments needed to clear ``balance`` at a fixed ``payment``.

    n = ceil(-ln(1 - r*B/Pmt) / ln(1 + r)). Returns ``math.inf`` when the
    payment never gets ahead of the interest.
    """
    b = _finite(balance)
    pmt = _finite(payment)
    r = _monthly_rate(annual_rate_percent)

    if b <= 0 or pmt <= 0:
        return 0
    if r == 0:
        return _ceil_months(b / pmt)
    if r <= -1:
        return 0

    interest_share = r * b / pmt
    if interest_share >= 1:
        return math.inf
    return _ceil_months(-math.log1p(-interest_share) / math.log1p(r))


def total_interest_over_months(
    principal: float,
    annual_rate_percent: float,
    total_term_months: float,
    horizon_months: float,
) -> float:
    """Interest paid during the first ``horizon_months`` of a loan.

    Walks the amortization schedule of ``principal`` over ``total_term_months``,
    stopping at the horizon or as soon as the balance is paid off.
    """
    p = _finite(principal)
    term = min(_finite(total_term_months), MAX_TERM_YEARS * 12)
    months = min(_finite(horizon_months), term)
    if p <= 0 or months <= 0:
        return 0.0

    r = _monthly_rate(annual_rate_percent)
    payment = monthly_payment_principal_and_interest(p, annual_rate_percent, term / 12)

    balance = p
    interest_paid = 0.0
    for _ in range(math.ceil(months)):
        interest = balance * r
        balance = max(0.0, balance - (payment - interest))
        interest_paid += interest
        if balance <= 0:
            break
    return interest_paid


def break_even_months(closing_costs: float, current_payment: float, new_payment: float) -> int | float | None:
    """Months of payment savings needed to recoup refinance closing costs.

    Returns ``None`` when the new payment is not lower than the current one.
    """
    savings = _finite(current_payment) - _finite(new_payment)
    if savings <= 0:
        return None
    return _ceil_months(_finite(closing_costs) / savings)


def calculate_ltv(loan_balance: float, property_value: float) -> float:
    """Loan-to-value as a percentage; 0 when the property value is 0."""
    value = _finite(property_value)
    if value == 0:
        return 0.0
    return _finite(_finite(loan_balance) / value * 100)


def calculate_remaining_balance(
    principal: float,
    annual_rate_percent: float,
    term_years: float,
    payments_made: float,
) -> float:
    """Scheduled balance after ``payments_made`` payments.

    B = P * ((1+r)^n - (1+r)^p) / ((1+r)^n - 1). ``payments_made`` is capped
    at n, so a loan past its term reports 0 rather than a negative balance. A
    negative count runs the schedule backwards and gives more than ``principal``.
    """
    p = _finite(principal)
    n = _finite(term_years) * 12
    if p <= 0 or n <= 0:
        return 0.0
    paid = min(_finite(payments_made), n)
    r = _monthly_rate(annual_rate_percent)

    if r == 0:
        return p * (1 - paid / n)
    if r <= -1:
        return 0.0

    # Numerator and denominator divided through by (1+r)^n
    remaining = -_growth_minus_one(r, paid - n)
    whole = -_growth_minus_one(r, -n)
    if whole == 0 or math.isinf(remaining) or math.isinf(whole):
        return 0.0
    return p * remaining / whole
