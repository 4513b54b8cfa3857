"""
Generic result container for all homerange computations.

Every procedure (group summary, bootstrap, permutation test, t-test)
returns its payload wrapped in the same Result envelope so timing,
diagnostics and warnings are reported uniformly.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (sample sizes, labels, method)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The procedure-specific parameter payload type

    Attributes:
        params: Procedure-specific estimates (replicates, p-value, etc.)
        info: Structured metadata (sample sizes, group labels, method)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=PermutationParams(observed_stat=6.0, ...),
        ...     info={'group_a': 'M', 'group_b': 'F', 'n_a': 3, 'n_b': 3},
        ...     timing={'total_seconds': 0.01, 'permutation_replicates': 0.009},
        ...     backend_name='cpu_permutation'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
