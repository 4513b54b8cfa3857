"""
Solution wrappers for Monte Carlo results.

BootstrapSolution and PermutationSolution wrap Result[P] and provide
convenient accessors and R-style summary output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from homerange.core.exceptions import ValidationError
from homerange.core.result import Result
from homerange.montecarlo._common import (
    BootParams,
    ConfidenceInterval,
    PermutationParams,
)

if TYPE_CHECKING:
    from homerange.montecarlo.design import BootstrapDesign, PermutationDesign


_CI_NAMES = {"perc": "Percentile", "norm": "Normal"}


@dataclass
class BootstrapSolution:
    """
    User-facing bootstrap results.

    Exposes the replicate distribution (t), the observed statistic (t0),
    bias, standard error, and any confidence intervals from boot_ci().
    """
    _result: Result[BootParams]
    _design: 'BootstrapDesign'

    # --- Core boot fields ---

    @property
    def t0(self) -> float:
        """Statistic on the original sample."""
        return self._result.params.t0

    @property
    def t(self) -> NDArray[np.floating[Any]]:
        """Bootstrap replicates, shape (R,)."""
        return self._result.params.t

    @property
    def R(self) -> int:
        return self._result.params.R

    @property
    def bias(self) -> float:
        """mean(t) - t0."""
        return self._result.params.bias

    @property
    def se(self) -> float:
        """Bootstrap standard error: sd(t). NaN when R == 1."""
        return self._result.params.se

    @property
    def ci(self) -> dict[str, ConfidenceInterval] | None:
        """Confidence intervals keyed by type, or None if not computed."""
        return self._result.params.ci

    @property
    def ci_conf_level(self) -> float | None:
        return self._result.params.ci_conf_level

    def interval(self, type: str = "perc") -> ConfidenceInterval:
        """
        Fetch one computed confidence interval.

        Raises:
            ValidationError: If boot_ci() has not computed that type.
        """
        if self.ci is None or type not in self.ci:
            computed = tuple(self.ci) if self.ci else ()
            raise ValidationError(
                f"No {type!r} interval on this result (computed: {computed}). "
                f"Call boot_ci(result, type={type!r}) first."
            )
        return self.ci[type]

    # --- Metadata ---

    @property
    def data(self) -> NDArray:
        """Original sample."""
        return self._design.data

    @property
    def label(self) -> str | None:
        """Group label of the sample, if it came from a Dataset."""
        return self._design.label

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Display ---

    def summary(self) -> str:
        """
        R-style print.boot output.

        Produces:
            ORDINARY NONPARAMETRIC BOOTSTRAP

            Bootstrap Statistics :
                     original           bias     std. error
                t1*  12.00000       -0.00213        0.94120
        """
        lines = ["\nORDINARY NONPARAMETRIC BOOTSTRAP\n"]

        group = f", group={self.label!r}" if self.label is not None else ""
        lines.append(f"Call: bootstrap(data, R={self.R}{group})")
        lines.append("")
        lines.append("Bootstrap Statistics :")
        lines.append(
            f"{'':>8s} {'original':>14s} {'bias':>14s} {'std. error':>14s}"
        )
        lines.append(
            f"{'t1*':>8s} {self.t0:14.5f} {self.bias:14.5f} {self.se:14.5f}"
        )

        if self.ci is not None:
            lines.append("")
            conf_pct = int(round((self.ci_conf_level or 0.95) * 100))
            for ci_type, interval in self.ci.items():
                name = _CI_NAMES.get(ci_type, ci_type)
                lines.append(
                    f"{conf_pct}% {name} CI: "
                    f"({interval.lower:.5f}, {interval.upper:.5f})"
                )

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"BootstrapSolution(R={self.R}, t0={self.t0:.4g}, "
            f"se={self.se:.4g}, backend={self.backend_name!r})"
        )


@dataclass
class PermutationSolution:
    """
    User-facing permutation test results.

    Provides observed mean difference, permutation distribution, and p-value.
    """
    _result: Result[PermutationParams]
    _design: 'PermutationDesign'

    # --- Core fields ---

    @property
    def observed_stat(self) -> float:
        """mean(group_a) - mean(group_b) on the original labels."""
        return self._result.params.observed_stat

    @property
    def perm_stats(self) -> NDArray[np.floating[Any]]:
        """Permutation null distribution, shape (R,)."""
        return self._result.params.perm_stats

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def R(self) -> int:
        return self._result.params.R

    @property
    def alternative(self) -> str:
        return self._result.params.alternative

    @property
    def group_a(self) -> str:
        return self._result.params.group_a

    @property
    def group_b(self) -> str:
        return self._result.params.group_b

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Display ---

    def summary(self) -> str:
        """Permutation test summary."""
        lines = [
            "\nPERMUTATION TEST",
            "",
            f"Statistic: mean({self.group_a}) - mean({self.group_b})",
            f"Number of permutations: {self.R}",
            f"Observed statistic: {self.observed_stat:.6g}",
            f"p-value ({self.alternative}): {self.p_value:.4g}",
            "",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"PermutationSolution(R={self.R}, "
            f"observed={self.observed_stat:.4g}, "
            f"p_value={self.p_value:.4g})"
        )
