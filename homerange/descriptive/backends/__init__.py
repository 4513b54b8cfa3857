"""Descriptive statistics backends."""

from homerange.descriptive.backends.cpu import CPUGroupSummaryBackend

__all__ = ["CPUGroupSummaryBackend"]
