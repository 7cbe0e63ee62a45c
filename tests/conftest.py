"""Shared test fixtures for mortmonitor."""

import os
import tempfile
from datetime import date

import pytest

from mortmonitor.finance import CurrentLoan, RateQuote, compare_refinance


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "paths": {
            "data_dir": os.path.join(tmp_dir, "data"),
            "log_dir": os.path.join(tmp_dir, "logs"),
        },
        "refinance": {
            "conforming_limit": 806_500,
            "terms": [30, 15],
        },
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def today():
    return date(2026, 1, 1)


@pytest.fixture
def current_loan():
    """$400k left at 7% with 25 years to go on a $500k home (80% LTV)."""
    return CurrentLoan(
        outstanding_principal=400_000,
        current_rate=7.0,
        remaining_term_months=300,
        property_value=500_000,
    )


@pytest.fixture
def refi_30(current_loan, today):
    return compare_refinance(current_loan, RateQuote(rate=6.0, closing_costs=4_500), 30, today=today)


@pytest.fixture
def refi_15(current_loan, today):
    return compare_refinance(current_loan, RateQuote(rate=5.5, closing_costs=4_500), 15, today=today)
