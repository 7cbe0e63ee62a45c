"""
MortMonitor exception hierarchy.

All mortmonitor exceptions inherit from MortMonitorError, making it easy for
callers to catch library-level errors while still distinguishing specific
failure modes. The finance calculator itself never raises.
"""


class MortMonitorError(Exception):
    """Base exception class for all mortmonitor errors."""


class ConfigurationError(MortMonitorError):
    """Raised for configuration errors (missing keys, invalid values)."""


class InputError(MortMonitorError):
    """Raised when caller-supplied values cannot describe a loan or alert."""


class AlertConfigError(InputError):
    """Raised when an alert is missing or mistypes the inputs its kind needs."""
