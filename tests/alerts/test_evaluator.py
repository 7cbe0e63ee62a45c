"""Tests for mortmonitor.alerts.evaluator."""

from datetime import datetime

import pytest

from mortmonitor.alerts import AlertConfig, AlertKind, AlertStatus, evaluate_alert, evaluate_alerts

NOW = datetime(2026, 1, 1, 9, 0)


def _alert(kind, value, **kwargs):
    from mortmonitor.alerts.templates import INPUT_KEYS

    return AlertConfig(kind=kind, inputs={INPUT_KEYS[kind]: value}, **kwargs)


class TestEvaluateAlert:
    # refi_30: ~$429/mo savings, 11-month break-even (2026-12-01), 80% LTV, 1 point better rate
    @pytest.mark.parametrize(
        "kind,value,sounding",
        [
            (AlertKind.MONTHLY_SAVINGS, 150, True),
            (AlertKind.MONTHLY_SAVINGS, 500, False),
            (AlertKind.BREAK_EVEN, 24, True),
            (AlertKind.BREAK_EVEN, 6, False),
            (AlertKind.PMI_REMOVAL, 80.5, True),
            (AlertKind.PMI_REMOVAL, 75, False),
            (AlertKind.RATE_IMPROVEMENT, 0.5, True),
            (AlertKind.RATE_IMPROVEMENT, 1.5, False),
            (AlertKind.BREAK_EVEN_DATE, "2027-01-01", True),
            (AlertKind.BREAK_EVEN_DATE, "2026-06-01", False),
            (AlertKind.INTEREST_SAVINGS, 2_500, False),
        ],
    )
    def test_thresholds_on_30_year(self, refi_30, kind, value, sounding):
        result = evaluate_alert(_alert(kind, value), refi_30, now=NOW)
        assert result.sounding is sounding
        assert result.status == (AlertStatus.SOUNDING if sounding else AlertStatus.ACTIVE)
        assert result.term_years == 30

    def test_interest_savings_on_15_year(self, refi_15):
        result = evaluate_alert(_alert(AlertKind.INTEREST_SAVINGS, 2_500), refi_15, now=NOW)
        assert result.sounding
        assert result.observed > 2_500

    def test_no_break_even_never_sounds(self, refi_15):
        assert not evaluate_alert(_alert(AlertKind.BREAK_EVEN, 1_000), refi_15, now=NOW).sounding
        assert not evaluate_alert(_alert(AlertKind.BREAK_EVEN_DATE, "2099-01-01"), refi_15, now=NOW).sounding

    def test_snoozed_alert_is_silent(self, refi_30):
        alert = _alert(AlertKind.MONTHLY_SAVINGS, 150)
        alert.snooze(datetime(2026, 1, 8))
        result = evaluate_alert(alert, refi_30, now=NOW)
        assert not result.sounding
        assert result.status == AlertStatus.SNOOZED

    def test_expired_snooze_sounds(self, refi_30):
        alert = _alert(AlertKind.MONTHLY_SAVINGS, 150)
        alert.snooze(datetime(2025, 12, 1))
        assert evaluate_alert(alert, refi_30, now=NOW).sounding

    def test_loan_term_filter(self, refi_30):
        alert = _alert(AlertKind.MONTHLY_SAVINGS, 150, loan_terms=[15])
        assert not evaluate_alert(alert, refi_30, now=NOW).sounding

    def test_message(self, refi_30):
        result = evaluate_alert(_alert(AlertKind.MONTHLY_SAVINGS, 150), refi_30, now=NOW)
        assert "monthly-savings ($150+ / mo) met on 30-year" == result.message


class TestEvaluateAlerts:
    def test_one_result_per_alert(self, refi_30, refi_15):
        alerts = [_alert(AlertKind.INTEREST_SAVINGS, 2_500), _alert(AlertKind.MONTHLY_SAVINGS, 5_000)]
        results = evaluate_alerts(alerts, [refi_30, refi_15], now=NOW)

        assert len(results) == 2
        # Sounding comparison wins over the first one
        assert results[0].sounding and results[0].term_years == 15
        assert not results[1].sounding

    def test_updates_alert_status(self, refi_30):
        alert = _alert(AlertKind.MONTHLY_SAVINGS, 150)
        evaluate_alerts([alert], [refi_30], now=NOW)
        assert alert.status == AlertStatus.SOUNDING

        alert.inputs["amount"] = 5_000
        evaluate_alerts([alert], [refi_30], now=NOW)
        assert alert.status == AlertStatus.ACTIVE

    def test_snoozed_status_kept(self, refi_30):
        alert = _alert(AlertKind.MONTHLY_SAVINGS, 150)
        alert.snooze(datetime(2026, 1, 8))
        evaluate_alerts([alert], [refi_30], now=NOW)
        assert alert.status == AlertStatus.SNOOZED

    def test_no_comparisons(self):
        assert evaluate_alerts([_alert(AlertKind.BREAK_EVEN, 24)], [], now=NOW) == []
