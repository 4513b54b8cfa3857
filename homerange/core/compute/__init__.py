"""
Shared compute infrastructure for homerange.

Procedure-specific backends live in {subpackage}/backends/. This module
only holds numeric infrastructure shared by all of them.

Submodules:
    timing: Execution timing utilities
"""

from homerange.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
