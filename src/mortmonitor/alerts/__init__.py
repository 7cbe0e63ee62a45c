"""Refinance alerts: template catalogue and threshold evaluation."""

from .evaluator import AlertResult, evaluate_alert, evaluate_alerts
from .templates import (
    PMI_REMOVAL_LTV,
    AlertConfig,
    AlertKind,
    AlertStatus,
    AlertTemplate,
    default_templates,
    summarize_inputs,
)

__all__ = [
    "PMI_REMOVAL_LTV",
    "AlertConfig",
    "AlertKind",
    "AlertResult",
    "AlertStatus",
    "AlertTemplate",
    "default_templates",
    "evaluate_alert",
    "evaluate_alerts",
    "summarize_inputs",
]
