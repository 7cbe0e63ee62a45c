"""Decide whether configured alerts are sounding for today's refinance figures."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from loguru import logger

from mortmonitor.finance.loans import RefinanceComparison

from .templates import AlertConfig, AlertKind, AlertStatus


@dataclass
class AlertResult:
    """Outcome of checking one alert against one refinance comparison."""

    alert: AlertConfig
    sounding: bool
    status: AlertStatus
    observed: Any
    threshold: Any
    term_years: int | None
    message: str


def _observe(alert: AlertConfig, comparison: RefinanceComparison) -> tuple[Any, bool]:
    """Return the figure the alert watches and whether it meets the threshold."""
    threshold = alert.threshold
    kind = alert.kind

    if kind == AlertKind.MONTHLY_SAVINGS:
        observed = comparison.monthly_savings
        return observed, observed >= threshold
    if kind == AlertKind.BREAK_EVEN:
        observed = comparison.break_even_months
        met = observed is not None and math.isfinite(observed) and observed <= threshold
        return observed, met
    if kind == AlertKind.PMI_REMOVAL:
        observed = comparison.ltv
        return observed, 0 < observed <= threshold
    if kind == AlertKind.RATE_IMPROVEMENT:
        observed = comparison.rate_improvement
        return observed, observed >= threshold
    if kind == AlertKind.BREAK_EVEN_DATE:
        observed = comparison.break_even_date
        return observed, observed is not None and observed <= threshold
    observed = comparison.lifetime_interest_savings
    return observed, observed >= threshold


def evaluate_alert(
    alert: AlertConfig,
    comparison: RefinanceComparison,
    now: datetime | None = None,
) -> AlertResult:
    """Check one alert against one refinance comparison.

    Snoozed alerts never sound until the snooze expires, and alerts limited to
    specific loan terms ignore comparisons for other terms.
    """
    now = now or datetime.now()
    observed, met = _observe(alert, comparison)
    summary = alert.summary()

    if alert.is_snoozed(now):
        return AlertResult(
            alert=alert,
            sounding=False,
            status=AlertStatus.SNOOZED,
            observed=observed,
            threshold=alert.threshold,
            term_years=comparison.term_years,
            message=f"{alert.kind.value} ({summary}) snoozed until {alert.snoozed_until}",
        )

    if alert.loan_terms and comparison.term_years not in alert.loan_terms:
        met = False

    status = AlertStatus.SOUNDING if met else AlertStatus.ACTIVE
    if met:
        logger.info(f"Alert {alert.alert_id or alert.kind.value} sounding on {comparison.term_years}y: {observed}")
    else:
        logger.debug(f"Alert {alert.alert_id or alert.kind.value} quiet on {comparison.term_years}y: {observed}")

    return AlertResult(
        alert=alert,
        sounding=met,
        status=status,
        observed=observed,
        threshold=alert.threshold,
        term_years=comparison.term_years,
        message=f"{alert.kind.value} ({summary}) {'met' if met else 'not met'} on {comparison.term_years}-year",
    )


def evaluate_alerts(
    alerts: list[AlertConfig],
    comparisons: list[RefinanceComparison],
    now: datetime | None = None,
) -> list[AlertResult]:
    """Evaluate every alert against all comparisons, one result per alert.

    The first sounding comparison wins; otherwise the first result is kept.
    Alerts that sound have their status set to ``SOUNDING``; sounding alerts
    that no longer meet their threshold fall back to ``ACTIVE``.
    """
    now = now or datetime.now()
    results = []
    for alert in alerts:
        checks = [evaluate_alert(alert, c, now) for c in comparisons]
        if not checks:
            continue
        result = next((r for r in checks if r.sounding), checks[0])
        if result.status != AlertStatus.SNOOZED:
            alert.status = result.status
            alert.snoozed_until = None
        results.append(result)
    return results
