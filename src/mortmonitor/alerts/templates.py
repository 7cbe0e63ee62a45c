"""Refinance alert templates.

Each template watches one refinance figure:
- Monthly payment savings of at least $X
- Break-even within M months, or by a date
- LTV at or below X% (PMI removal)
- Market rate at least X points below the current rate
- Lifetime interest savings of at least $X
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any

from mortmonitor.core.exceptions import AlertConfigError

PMI_REMOVAL_LTV = 80.0


class AlertKind(Enum):
    """What an alert watches."""

    MONTHLY_SAVINGS = "monthly-savings"
    BREAK_EVEN = "break-even"
    PMI_REMOVAL = "pmi-removal"
    RATE_IMPROVEMENT = "rate-improvement"
    BREAK_EVEN_DATE = "break-even-date"
    INTEREST_SAVINGS = "interest-savings"


class AlertStatus(Enum):
    """Lifecycle state of a configured alert."""

    ACTIVE = "active"
    SNOOZED = "snoozed"
    SOUNDING = "sounding"


# Input key each kind is configured with
INPUT_KEYS: dict[AlertKind, str] = {
    AlertKind.MONTHLY_SAVINGS: "amount",
    AlertKind.BREAK_EVEN: "months",
    AlertKind.PMI_REMOVAL: "ltv",
    AlertKind.RATE_IMPROVEMENT: "improvement",
    AlertKind.BREAK_EVEN_DATE: "by_date",
    AlertKind.INTEREST_SAVINGS: "lifetime_savings",
}


@dataclass
class AlertTemplate:
    """A selectable alert with its default threshold."""

    kind: AlertKind
    name: str
    description: str
    default_inputs: dict[str, Any]

    @property
    def summary(self) -> str:
        return summarize_inputs(self.kind, self.default_inputs)


@dataclass
class AlertConfig:
    """An alert a client has configured on a property.

    Attributes:
        kind: Which figure the alert watches.
        inputs: Threshold keyed by the kind's input name (see ``INPUT_KEYS``).
        loan_terms: Refinance terms (years) the alert applies to; empty = all.
        status: Current lifecycle state.
        snoozed_until: When a snooze expires.
        alert_id: Caller's identifier, if any.
    """

    kind: AlertKind
    inputs: dict[str, Any]
    loan_terms: list[int] = field(default_factory=list)
    status: AlertStatus = AlertStatus.ACTIVE
    snoozed_until: datetime | None = None
    alert_id: str | None = None

    def __post_init__(self):
        try:
            self.kind = AlertKind(self.kind)
            self.status = AlertStatus(self.status)
        except ValueError as e:
            raise AlertConfigError(str(e)) from e

        key = INPUT_KEYS[self.kind]
        if key not in self.inputs:
            raise AlertConfigError(f"{self.kind.value} alert requires input '{key}'")
        value = self.inputs[key]

        if self.kind == AlertKind.BREAK_EVEN_DATE:
            if isinstance(value, str):
                try:
                    value = date.fromisoformat(value)
                except ValueError as e:
                    raise AlertConfigError(f"Invalid break-even date: {value!r}") from e
            if isinstance(value, datetime):
                value = value.date()
            if not isinstance(value, date):
                raise AlertConfigError(f"Break-even date must be a date, got {type(value).__name__}")
        else:
            if isinstance(value, bool) or not isinstance(value, int | float):
                raise AlertConfigError(f"Input '{key}' must be a number, got {value!r}")
            if value < 0:
                raise AlertConfigError(f"Input '{key}' cannot be negative: {value}")
        self.inputs = {**self.inputs, key: value}

    @property
    def threshold(self) -> Any:
        return self.inputs[INPUT_KEYS[self.kind]]

    def is_snoozed(self, now: datetime | None = None) -> bool:
        """True while a snooze is in effect."""
        if self.status != AlertStatus.SNOOZED:
            return False
        if self.snoozed_until is None:
            return True
        return (now or datetime.now()) < self.snoozed_until

    def snooze(self, until: datetime) -> None:
        self.status = AlertStatus.SNOOZED
        self.snoozed_until = until

    def summary(self) -> str:
        return summarize_inputs(self.kind, self.inputs)


def _num(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else str(value)


def summarize_inputs(kind: AlertKind, inputs: dict[str, Any]) -> str:
    """Short label for an alert's threshold, e.g. ``$150+ / mo``."""
    kind = AlertKind(kind)
    value = inputs[INPUT_KEYS[kind]]
    if kind == AlertKind.MONTHLY_SAVINGS:
        return f"${_num(value)}+ / mo"
    if kind == AlertKind.BREAK_EVEN:
        return f"{_num(value)} mo"
    if kind == AlertKind.RATE_IMPROVEMENT:
        return f"{_num(value)}% better"
    if kind == AlertKind.PMI_REMOVAL:
        return f"LTV ≤ {_num(value)}%"
    if kind == AlertKind.BREAK_EVEN_DATE:
        return f"By {value.isoformat() if isinstance(value, date) else value}"
    return f"${_num(value)}+ lifetime"


def default_templates(today: date | None = None, pmi_removal_ltv: float = PMI_REMOVAL_LTV) -> list[AlertTemplate]:
    """The alert catalogue offered during onboarding."""
    today = today or date.today()
    return [
        AlertTemplate(
            kind=AlertKind.MONTHLY_SAVINGS,
            name="Monthly Payment Savings",
            description="Alert me when I can save at least $X per month.",
            default_inputs={"amount": 150},
        ),
        AlertTemplate(
            kind=AlertKind.BREAK_EVEN,
            name="Break-Even by Months",
            description="Alert me when I break even within M months.",
            default_inputs={"months": 24},
        ),
        AlertTemplate(
            kind=AlertKind.PMI_REMOVAL,
            name="PMI Removal",
            description="Alert me when LTV reaches X%, so PMI can be removed.",
            default_inputs={"ltv": pmi_removal_ltv},
        ),
        AlertTemplate(
            kind=AlertKind.RATE_IMPROVEMENT,
            name="Better Rate than My Current Loan",
            description="Alert me when the 15 or 30 year fixed-rate is at least X% lower than my current rate.",
            default_inputs={"improvement": 0.5},
        ),
        AlertTemplate(
            kind=AlertKind.BREAK_EVEN_DATE,
            name="Break-Even by Date",
            description="Alert me if I can break even on refinance costs on or before this date.",
            default_inputs={"by_date": today},
        ),
        AlertTemplate(
            kind=AlertKind.INTEREST_SAVINGS,
            name="Total Lifetime Interest Savings",
            description="Alert me when total lifetime interest savings would be at least $X.",
            default_inputs={"lifetime_savings": 2500},
        ),
    ]
