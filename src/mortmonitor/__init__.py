"""MortMonitor: mortgage finance figures, refinance comparisons and alerts."""

__version__ = "0.1.0"
