"""Hypothesis test backends."""

from homerange.hypothesis.backends.cpu import CPUHypothesisBackend

__all__ = ["CPUHypothesisBackend"]
