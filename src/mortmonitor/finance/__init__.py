"""Mortgage finance: calculator, formatting, loan and refinance figures."""

from .calculations import (
    break_even_months,
    calculate_ltv,
    calculate_remaining_balance,
    monthly_payment_principal_and_interest,
    remaining_months,
    to_number,
    total_interest_over_months,
)
from .dates import add_months, months_from_today
from .formatters import format_break_even, format_currency, format_months, format_percent
from .loans import (
    CurrentLoan,
    LoanDetails,
    LoanSummary,
    RateQuote,
    RefinanceComparison,
    compare_refinance,
    compare_terms,
    is_jumbo,
    product_key,
    summarize_loan,
)

__all__ = [
    "CurrentLoan",
    "LoanDetails",
    "LoanSummary",
    "RateQuote",
    "RefinanceComparison",
    "add_months",
    "break_even_months",
    "calculate_ltv",
    "calculate_remaining_balance",
    "compare_refinance",
    "compare_terms",
    "format_break_even",
    "format_currency",
    "format_months",
    "format_percent",
    "is_jumbo",
    "monthly_payment_principal_and_interest",
    "months_from_today",
    "product_key",
    "remaining_months",
    "summarize_loan",
    "to_number",
    "total_interest_over_months",
]
