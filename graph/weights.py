"""
Edge weight functions and their maximum sentinels.

The spanning tree algorithms seed every vertex with the largest weight
value before any relaxation. This module decides what "largest" means for a
given weight function.

Functions:
    weight_limit(weight) - Sentinel for an edge weight function
    dtype_limit(dtype)   - Sentinel for a numpy dtype
"""

from collections.abc import Mapping
from typing import Any, Generic

import numpy as np
from numpy.typing import DTypeLike

from constants import INFINITY
from localtypes import E, W, Weight


def dtype_limit(dtype: DTypeLike) -> Weight:
    """
    Largest value representable by a numpy dtype.

    Integer dtypes give `iinfo(dtype).max`, floating dtypes give `inf`.
    Any other dtype falls back to `INFINITY`.

    Edge weights must be strictly below this value: an integer edge equal
    to the dtype maximum never passes `w < sentinel` and its far endpoint
    stays unreached. Pass an explicit `infinity=` to `prim` in that case.
    """
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.integer):
        return dtype.type(np.iinfo(dtype).max)
    if np.issubdtype(dtype, np.floating):
        return dtype.type(np.inf)
    return INFINITY


def weight_limit(weight: Any) -> Weight:
    """
    Sentinel for an edge weight function.

    Uses `weight.max_value()` when the function provides one, `INFINITY`
    otherwise. `INFINITY` compares above every int, float, Fraction and
    numpy scalar, so plain functions and lambdas need nothing extra.
    """
    max_value = getattr(weight, "max_value", None)
    if callable(max_value):
        return max_value()
    return INFINITY


class MappingWeight(Generic[E, W]):
    """
    Edge weight function reading from a mapping keyed by edge.

    Example:
        >>> weight = MappingWeight({"ab": 3, "bc": 1})
        >>> weight("bc")
        1
    """

    __slots__ = ("_weights", "_max_value")

    def __init__(self, weights: Mapping[E, W], max_value: W | None = None) -> None:
        self._weights = weights
        self._max_value = max_value

    def __call__(self, edge: E) -> W:
        return self._weights[edge]

    def max_value(self) -> Weight:
        if self._max_value is None:
            return INFINITY
        return self._max_value
