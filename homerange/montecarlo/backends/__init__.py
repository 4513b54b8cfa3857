"""Monte Carlo compute backends."""

from homerange.montecarlo.backends.cpu import (
    CPUBootstrapBackend,
    CPUPermutationBackend,
)

__all__ = [
    "CPUBootstrapBackend",
    "CPUPermutationBackend",
]
