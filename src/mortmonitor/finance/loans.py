"""Loan figures for the details and rates dashboards.

Aggregates calculator output for one loan:
- Loan summary (P&I, months remaining, payoff date, future interest, PITI)
- Refinance comparison of a rate quote against the current loan, per term

All math is delegated to ``calculations``; this module only shapes it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date

from loguru import logger

from .calculations import (
    break_even_months,
    calculate_ltv,
    monthly_payment_principal_and_interest,
    remaining_months,
    total_interest_over_months,
)
from .dates import add_months
from .formatters import format_break_even, format_currency, format_percent

DEFAULT_CONFORMING_LIMIT = 766_550
DEFAULT_TERMS = (30, 15)


@dataclass
class LoanDetails:
    """A client's existing loan as entered on the details page.

    Attributes:
        loan_amount: Original loan amount.
        annual_rate: Annual rate as a percentage (e.g., 6.25).
        term_years: Original term in years.
        remaining_balance: Current outstanding balance.
        taxes_monthly: Escrowed property taxes per month.
        insurance_monthly: Escrowed homeowner's insurance per month.
        start_date: First payment date, if known.
    """

    loan_amount: float
    annual_rate: float
    term_years: float
    remaining_balance: float
    taxes_monthly: float = 0.0
    insurance_monthly: float = 0.0
    start_date: date | None = None

    def __post_init__(self):
        for field_name in ["loan_amount", "remaining_balance", "taxes_monthly", "insurance_monthly"]:
            if getattr(self, field_name) < 0:
                raise ValueError(f"{field_name} cannot be negative: {getattr(self, field_name)}")


@dataclass
class LoanSummary:
    """Derived figures for a loan details view."""

    monthly_payment: float  # P&I only
    months_remaining: int
    payoff_date: date
    future_interest: float
    monthly_piti: float


@dataclass
class CurrentLoan:
    """The loan being considered for refinance."""

    outstanding_principal: float
    current_rate: float  # Annual %, e.g. 6.875
    remaining_term_months: int
    property_value: float
    assumed_closing_costs: float | None = None

    def __post_init__(self):
        if self.outstanding_principal < 0:
            raise ValueError(f"Outstanding principal cannot be negative: {self.outstanding_principal}")
        if self.remaining_term_months < 0:
            raise ValueError(f"Remaining term cannot be negative: {self.remaining_term_months}")


@dataclass
class RateQuote:
    """Today's average market rate for one product."""

    rate: float  # Annual %
    closing_costs: float | None = None


@dataclass
class RefinanceComparison:
    """A refinance quote set against the current loan for one term."""

    term_years: int
    product: str
    jumbo: bool
    new_rate: float
    current_rate: float
    new_payment: float
    current_payment: float
    closing_costs: float
    break_even_months: int | float | None
    break_even_date: date | None
    new_payoff_date: date
    current_payoff_date: date
    ltv: float
    horizons: list[int] = field(default_factory=list)
    new_interest: list[float] = field(default_factory=list)
    current_interest: list[float] = field(default_factory=list)

    @property
    def monthly_delta(self) -> float:
        """New payment minus current payment (negative = savings)."""
        return self.new_payment - self.current_payment

    @property
    def monthly_savings(self) -> float:
        return self.current_payment - self.new_payment

    @property
    def rate_delta(self) -> float:
        return self.new_rate - self.current_rate

    @property
    def rate_improvement(self) -> float:
        """Percentage points the new rate is below the current rate."""
        return self.current_rate - self.new_rate

    @property
    def lifetime_interest_savings(self) -> float:
        """Interest saved over the longest horizon, net of closing costs."""
        if not self.horizons:
            return 0.0
        return self.current_interest[-1] - self.new_interest[-1] - self.closing_costs

    @property
    def payoff_shift_days(self) -> int:
        return (self.new_payoff_date - self.current_payoff_date).days

    def format_table(self) -> str:
        """Format comparison as text table."""
        kind = "Jumbo" if self.jumbo else "Fixed"
        sign = "+" if self.monthly_delta >= 0 else ""
        days = self.payoff_shift_days
        lines = []
        lines.append("=" * 60)
        lines.append(f"  {self.term_years}-Year {kind} Refinance")
        lines.append("=" * 60)
        lines.append(f"{'Today rate':<22} {format_percent(self.new_rate)}")
        lines.append(f"{'Current rate':<22} {format_percent(self.current_rate)}")
        delta_text = f"{sign}{format_currency(self.monthly_delta, 2)}"
        lines.append(f"{'New payment':<22} {format_currency(self.new_payment, 2)} ({delta_text})")
        for months, new, cur in zip(self.horizons, self.new_interest, self.current_interest, strict=True):
            delta = new - cur
            label = f"Interest ({months} mo)"
            lines.append(
                f"{label:<22} {format_currency(new, 2)} ({'+' if delta >= 0 else ''}{format_currency(delta, 2)})"
            )
        lines.append(f"{'Closing costs':<22} {format_currency(self.closing_costs, 2)}")
        lines.append(
            f"{'Final payment':<22} {self.new_payoff_date.isoformat()} "
            f"({'+' if days >= 0 else ''}{round(days / 30.4375)} months, {days / 365.25:.1f} years)"
        )
        lines.append(f"{'Break-even':<22} {_break_even_text(self)}")
        lines.append(f"{'LTV':<22} {format_percent(self.ltv, 2)}")
        lines.append("-" * 60)
        return "\n".join(lines)


def _break_even_text(comparison: RefinanceComparison) -> str:
    if comparison.break_even_months is None or comparison.break_even_date is None:
        return format_break_even(comparison.break_even_months)
    when = comparison.break_even_date
    return f"{int(comparison.break_even_months)} mo ({when.isoformat()})"


def summarize_loan(details: LoanDetails, today: date | None = None) -> LoanSummary:
    """Compute the figures shown on a loan details page.

    Months remaining use the original P&I payment against the current balance;
    an unamortizable combination shows as 0 months rather than infinity.
    """
    today = today or date.today()
    payment = monthly_payment_principal_and_interest(details.loan_amount, details.annual_rate, details.term_years)
    months = remaining_months(details.remaining_balance, details.annual_rate, payment)
    if not math.isfinite(months):
        logger.debug(f"Payment {payment:.2f} cannot amortize balance {details.remaining_balance:.2f}")
        months = 0

    if months <= 0 or payment == 0:
        future_interest = 0.0
    else:
        future_interest = max(0.0, payment * months - details.remaining_balance)

    return LoanSummary(
        monthly_payment=payment,
        months_remaining=int(months),
        payoff_date=add_months(today, months),
        future_interest=future_interest,
        monthly_piti=payment + details.taxes_monthly + details.insurance_monthly,
    )


def is_jumbo(outstanding: float, conforming_limit: float = DEFAULT_CONFORMING_LIMIT) -> bool:
    """A loan is jumbo when its balance exceeds the conforming limit."""
    return outstanding > conforming_limit


def product_key(term_years: int, jumbo: bool) -> str:
    """Rate product identifier, e.g. ``conforming_fixed_30y``."""
    return f"{'jumbo' if jumbo else 'conforming'}_fixed_{term_years}y"


def compare_refinance(
    current: CurrentLoan,
    quote: RateQuote,
    term_years: int,
    conforming_limit: float = DEFAULT_CONFORMING_LIMIT,
    horizons: list[int] | None = None,
    today: date | None = None,
    default_closing_costs: float = 0.0,
) -> RefinanceComparison:
    """Compare refinancing the current balance at ``quote`` over ``term_years``.

    Args:
        current: The existing loan
        quote: Today's rate (and average closing costs) for the product
        term_years: Term of the new loan
        conforming_limit: County single-unit conforming loan limit
        horizons: Months over which to total interest (default: life of the new loan)
        today: Reference date for payoff and break-even dates
        default_closing_costs: Used when neither quote nor loan carries closing costs

    Returns:
        RefinanceComparison for this term
    """
    today = today or date.today()
    new_term_months = term_years * 12
    horizons = list(horizons) if horizons else [new_term_months]
    jumbo = is_jumbo(current.outstanding_principal, conforming_limit)

    new_payment = monthly_payment_principal_and_interest(current.outstanding_principal, quote.rate, term_years)
    current_payment = monthly_payment_principal_and_interest(
        current.outstanding_principal, current.current_rate, current.remaining_term_months / 12
    )

    new_interest = [
        total_interest_over_months(current.outstanding_principal, quote.rate, new_term_months, m) for m in horizons
    ]
    current_interest = [
        total_interest_over_months(
            current.outstanding_principal, current.current_rate, current.remaining_term_months, m
        )
        for m in horizons
    ]

    if quote.closing_costs is not None:
        closing_costs = quote.closing_costs
    elif current.assumed_closing_costs is not None:
        closing_costs = current.assumed_closing_costs
    else:
        closing_costs = default_closing_costs

    be_months = break_even_months(closing_costs, current_payment, new_payment)
    be_date = add_months(today, be_months) if be_months is not None and math.isfinite(be_months) else None

    logger.debug(
        f"Refinance {term_years}y @ {quote.rate}%: payment {current_payment:.2f} -> {new_payment:.2f}, "
        f"break-even {be_months}"
    )

    return RefinanceComparison(
        term_years=term_years,
        product=product_key(term_years, jumbo),
        jumbo=jumbo,
        new_rate=quote.rate,
        current_rate=current.current_rate,
        new_payment=new_payment,
        current_payment=current_payment,
        closing_costs=closing_costs,
        break_even_months=be_months,
        break_even_date=be_date,
        new_payoff_date=add_months(today, new_term_months),
        current_payoff_date=add_months(today, current.remaining_term_months),
        ltv=calculate_ltv(current.outstanding_principal, current.property_value),
        horizons=horizons,
        new_interest=new_interest,
        current_interest=current_interest,
    )


def compare_terms(
    current: CurrentLoan,
    quotes: dict[int, RateQuote],
    conforming_limit: float = DEFAULT_CONFORMING_LIMIT,
    today: date | None = None,
    default_closing_costs: float = 0.0,
) -> list[RefinanceComparison]:
    """Compare every quoted term against the current loan, longest term first."""
    return [
        compare_refinance(
            current,
            quotes[term],
            term,
            conforming_limit=conforming_limit,
            today=today,
            default_closing_costs=default_closing_costs,
        )
        for term in sorted(quotes, reverse=True)
    ]
