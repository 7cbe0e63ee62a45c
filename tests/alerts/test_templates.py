"""Tests for mortmonitor.alerts.templates."""

from datetime import date, datetime

import pytest

from mortmonitor.alerts.templates import (
    AlertConfig,
    AlertKind,
    AlertStatus,
    default_templates,
    summarize_inputs,
)
from mortmonitor.core.exceptions import AlertConfigError, InputError


class TestDefaultTemplates:
    def test_one_template_per_kind(self):
        templates = default_templates(today=date(2026, 10, 19))
        assert {t.kind for t in templates} == set(AlertKind)

    def test_defaults(self):
        templates = {t.kind: t for t in default_templates(today=date(2026, 10, 19))}
        assert templates[AlertKind.MONTHLY_SAVINGS].summary == "$150+ / mo"
        assert templates[AlertKind.BREAK_EVEN].summary == "24 mo"
        assert templates[AlertKind.PMI_REMOVAL].summary == "LTV ≤ 80%"
        assert templates[AlertKind.RATE_IMPROVEMENT].summary == "0.5% better"
        assert templates[AlertKind.BREAK_EVEN_DATE].summary == "By 2026-10-19"
        assert templates[AlertKind.INTEREST_SAVINGS].summary == "$2500+ lifetime"

    def test_configured_pmi_threshold(self):
        templates = {t.kind: t for t in default_templates(pmi_removal_ltv=78)}
        assert templates[AlertKind.PMI_REMOVAL].default_inputs == {"ltv": 78}


class TestSummarizeInputs:
    def test_accepts_kind_value(self):
        assert summarize_inputs("monthly-savings", {"amount": 200}) == "$200+ / mo"

    def test_fractional(self):
        assert summarize_inputs(AlertKind.RATE_IMPROVEMENT, {"improvement": 0.25}) == "0.25% better"


class TestAlertConfig:
    def test_kind_from_string(self):
        alert = AlertConfig(kind="break-even", inputs={"months": 24})
        assert alert.kind == AlertKind.BREAK_EVEN
        assert alert.threshold == 24
        assert alert.status == AlertStatus.ACTIVE

    def test_unknown_kind(self):
        with pytest.raises(AlertConfigError):
            AlertConfig(kind="mortgage-magic", inputs={})

    def test_missing_input(self):
        with pytest.raises(AlertConfigError, match="requires input 'amount'"):
            AlertConfig(kind=AlertKind.MONTHLY_SAVINGS, inputs={"months": 3})

    def test_non_numeric_input(self):
        with pytest.raises(AlertConfigError, match="must be a number"):
            AlertConfig(kind=AlertKind.MONTHLY_SAVINGS, inputs={"amount": "lots"})

    def test_negative_input(self):
        with pytest.raises(AlertConfigError, match="cannot be negative"):
            AlertConfig(kind=AlertKind.PMI_REMOVAL, inputs={"ltv": -5})

    def test_break_even_date_parsed(self):
        alert = AlertConfig(kind=AlertKind.BREAK_EVEN_DATE, inputs={"by_date": "2027-06-30"})
        assert alert.threshold == date(2027, 6, 30)

    def test_bad_break_even_date(self):
        with pytest.raises(AlertConfigError, match="Invalid break-even date"):
            AlertConfig(kind=AlertKind.BREAK_EVEN_DATE, inputs={"by_date": "next spring"})

    def test_error_is_input_error(self):
        with pytest.raises(InputError):
            AlertConfig(kind=AlertKind.BREAK_EVEN, inputs={})


class TestSnooze:
    def test_snooze_until(self):
        alert = AlertConfig(kind=AlertKind.BREAK_EVEN, inputs={"months": 24})
        alert.snooze(datetime(2026, 2, 1))
        assert alert.status == AlertStatus.SNOOZED
        assert alert.is_snoozed(datetime(2026, 1, 15))
        assert not alert.is_snoozed(datetime(2026, 2, 2))

    def test_open_ended_snooze(self):
        alert = AlertConfig(kind=AlertKind.BREAK_EVEN, inputs={"months": 24}, status="snoozed")
        assert alert.is_snoozed(datetime(2030, 1, 1))

    def test_active_is_not_snoozed(self):
        alert = AlertConfig(kind=AlertKind.BREAK_EVEN, inputs={"months": 24})
        assert not alert.is_snoozed()
