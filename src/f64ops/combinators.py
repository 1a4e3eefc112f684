"""
Ready-made function values.

Index-producers map an index to a value, operators map a value (or an
index and a value) to a value, and reduce-operators fold two values into
one. None of them copy the sequences they close over.
"""

from __future__ import annotations
import math
from typing import Sequence

import numpy as np

from .types import IndexedFunc
from .utils import ieee_floats


def constant(c: float) -> IndexedFunc:
    """-> f(i) = c"""
    value = float(c)

    def _constant(i: int) -> float:
        return value

    return _constant


def coerce_int(i: int) -> float:
    return float(i)


def coerce_int_array(values: Sequence[int]) -> IndexedFunc:
    """-> f(i) = float(values[i])"""

    def _coerce(i: int) -> float:
        return float(values[i])

    return _coerce


def get(values: Sequence[float]) -> IndexedFunc:
    """-> f(i) = values[i]

    ``values`` is read lazily, so later writes to it are visible and it must
    be at least as long as any vector the producer is used against.
    """

    def _get(i: int) -> float:
        return values[i]

    return _get


# IEEE-754 semantics: 1/0 -> inf, 0/0 -> nan, never ZeroDivisionError.

def plus(vleft: float, vright: float) -> float:
    with ieee_floats():
        return float(np.float64(vleft) + vright)


def minus(vleft: float, vright: float) -> float:
    with ieee_floats():
        return float(np.float64(vleft) - vright)


def times(vleft: float, vright: float) -> float:
    with ieee_floats():
        return float(np.float64(vleft) * vright)


def div(vleft: float, vright: float) -> float:
    with ieee_floats():
        return float(np.float64(vleft) / np.float64(vright))


def neg(value: float) -> float:
    return -float(value)


# NaN wins; +0 is greater than -0 whatever the argument order.

def maximum(vleft: float, vright: float) -> float:
    a, b = float(vleft), float(vright)
    if math.isnan(a) or math.isnan(b):
        return math.nan
    if a == b == 0.0:
        return a if math.copysign(1.0, a) > 0 else b
    return a if a > b else b


def minimum(vleft: float, vright: float) -> float:
    a, b = float(vleft), float(vright)
    if math.isnan(a) or math.isnan(b):
        return math.nan
    if a == b == 0.0:
        return a if math.copysign(1.0, a) < 0 else b
    return a if a < b else b
