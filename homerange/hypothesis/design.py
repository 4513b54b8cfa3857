"""
HypothesisDesign: validated inputs for the two-sample t-test.

Immutable after construction. Build through the factory classmethods.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from homerange.core.dataset import Dataset
from homerange.core.exceptions import ValidationError
from homerange.core.validation import (
    check_1d,
    check_array,
    check_conf_level,
    check_finite,
    check_min_samples,
)
from homerange.hypothesis._common import VALID_ALTERNATIVES


def _validate_alternative(alternative: str) -> str:
    """Validate and return alternative hypothesis string."""
    if alternative not in VALID_ALTERNATIVES:
        raise ValidationError(
            f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}"
        )
    return alternative


def _to_sample(
    values: ArrayLike,
    name: str,
    label: str | None,
) -> NDArray[np.floating[Any]]:
    """1D finite float64 copy with at least two values."""
    arr = check_array(values, name).astype(np.float64)
    check_1d(arr, name)
    check_finite(arr, name)
    # A sample variance needs n >= 2.
    check_min_samples(arr, 2, name, label=label)
    return arr


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for the two-sample t-test.

    Do not construct directly; use for_t_test() or for_groups().
    """
    test_type: str
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _mu: float = 0.0
    _alternative: str = "two.sided"
    _conf_level: float = 0.95
    _var_equal: bool = True
    _x_name: str = "x"
    _y_name: str = "y"

    # --- Properties ---

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self._y

    @property
    def mu(self) -> float:
        return self._mu

    @property
    def alternative(self) -> str:
        return self._alternative

    @property
    def conf_level(self) -> float:
        return self._conf_level

    @property
    def var_equal(self) -> bool:
        return self._var_equal

    @property
    def x_name(self) -> str:
        return self._x_name

    @property
    def y_name(self) -> str:
        return self._y_name

    @property
    def data_name(self) -> str:
        return f"{self._x_name} and {self._y_name}"

    # --- Factory classmethods ---

    @classmethod
    def for_t_test(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        mu: float = 0.0,
        var_equal: bool = True,
        alternative: str = "two.sided",
        conf_level: float = 0.95,
        x_name: str = "x",
        y_name: str = "y",
    ) -> HypothesisDesign:
        """
        Build design for t_test().

        Raises:
            InsufficientSampleSizeError: If x or y has fewer than 2 values.
            ValidationError: On non-finite data, bad alternative or conf_level.
        """
        alternative = _validate_alternative(alternative)
        conf_level = check_conf_level(conf_level)

        x_arr = _to_sample(x, "x", None if x_name == "x" else x_name)
        y_arr = _to_sample(y, "y", None if y_name == "y" else y_name)

        return cls(
            test_type="t_two_sample",
            _x=x_arr,
            _y=y_arr,
            _mu=float(mu),
            _alternative=alternative,
            _conf_level=conf_level,
            _var_equal=bool(var_equal),
            _x_name=x_name,
            _y_name=y_name,
        )

    @classmethod
    def for_groups(
        cls,
        dataset: Dataset,
        group_a: str,
        group_b: str,
        **kwargs: Any,
    ) -> HypothesisDesign:
        """t-test design comparing two groups of a Dataset (A minus B)."""
        group_a, group_b = str(group_a), str(group_b)
        if group_a == group_b:
            raise ValidationError(
                f"group_a and group_b must differ, both are {group_a!r}"
            )
        return cls.for_t_test(
            dataset.group(group_a),
            dataset.group(group_b),
            x_name=group_a,
            y_name=group_b,
            **kwargs,
        )
