from __future__ import annotations
from typing import Any, Callable, List, Optional

import numpy as np

from .combinators import coerce_int, constant, maximum, minimum
from .errors import UnknownOperationError, UnknownVariantError
from .types import (
    OP_REGISTRY,
    Consumer,
    IndexedConsumer,
    IndexedFunc,
    IndexedOperator,
    OperandKind,
    Operator,
    OpSpec,
    Predicate,
    ReduceOperator,
    Variant,
    Vector,
)
from .utils import ensure_operand_length, ensure_vector, ieee_floats

###############################################################################
# 1 -- Registration
###############################################################################

def register_op(name: str, *, family: Optional[str] = None,
                variant: Optional[Variant] = None,
                operand: Optional[OperandKind] = None):
    def _wrapper(fn: Callable):
        if name in OP_REGISTRY:
            raise KeyError(f"operation '{name}' registered twice")
        OP_REGISTRY[name] = OpSpec(fn, family, variant, operand or variant or "none")
        return fn
    return _wrapper


def lookup(name: str) -> OpSpec:
    try:
        return OP_REGISTRY[name]
    except KeyError:
        raise UnknownOperationError(name) from None


def operations(family: Optional[str] = None, variant: Optional[Variant] = None) -> List[str]:
    """Sorted names of registered operations, optionally narrowed by family and variant."""
    return sorted(
        name for name, spec in OP_REGISTRY.items()
        if (family is None or spec.family == family)
        and (variant is None or spec.variant == variant)
    )

###############################################################################
# 2 -- Generic application primitives
###############################################################################

# Every loop below runs once over the vector in ascending index order and
# writes each slot right after computing it.

@register_op("apply", operand="op")
def apply(s: Vector, f: IndexedFunc) -> Vector:
    ensure_vector(s)
    with ieee_floats():
        for i in range(len(s)):
            s[i] = float(f(i))
    return s


@register_op("apply_operator", operand="op")
def apply_operator(s: Vector, f: Operator) -> Vector:
    ensure_vector(s)
    with ieee_floats():
        for i in range(len(s)):
            s[i] = float(f(float(s[i])))
    return s


@register_op("apply_indexed_operator", operand="opi")
def apply_indexed_operator(s: Vector, f: IndexedOperator) -> Vector:
    ensure_vector(s)
    with ieee_floats():
        for i in range(len(s)):
            s[i] = float(f(i, float(s[i])))
    return s


@register_op("for_each", operand="op")
def for_each(s: Vector, f: Consumer) -> Vector:
    """Feed every element to ``f`` without touching the vector."""
    ensure_vector(s)
    for i in range(len(s)):
        f(float(s[i]))
    return s


@register_op("for_each_indexed", operand="opi")
def for_each_indexed(s: Vector, f: IndexedConsumer) -> Vector:
    ensure_vector(s)
    for i in range(len(s)):
        f(i, float(s[i]))
    return s


@register_op("identity")
def identity(s: Vector) -> Vector:
    """-> s'[i] = i"""
    return apply(s, coerce_int)


@register_op("fill_scalar", operand="scalar")
def fill_scalar(s: Vector, value: float) -> Vector:
    return apply(s, constant(value))


@register_op("fill_vector", operand="vector")
def fill_vector(s: Vector, v: Vector) -> Vector:
    ensure_vector(s)
    ensure_operand_length(s, v)
    for i in range(len(s)):
        s[i] = float(v[i])
    return s


@register_op("fill_scalar_masked", operand="scalar")
def fill_scalar_masked(s: Vector, value: float, p: Predicate) -> Vector:
    ensure_vector(s)
    value = float(value)
    for i in range(len(s)):
        if p(i):
            s[i] = value
    return s


@register_op("fill_vector_masked", operand="vector")
def fill_vector_masked(s: Vector, v: Vector, p: Predicate) -> Vector:
    ensure_vector(s)
    ensure_operand_length(s, v)
    for i in range(len(s)):
        if p(i):
            s[i] = float(v[i])
    return s

###############################################################################
# 3 -- Shared elementwise loop
###############################################################################

def combine(s: Vector, rule: ReduceOperator, operand: Any, variant: Variant) -> Vector:
    """
    s'[i] = rule(s[i], rhs(i)) for every index, in place.

    ``variant`` selects where ``rhs(i)`` comes from:

    * ``"vector"`` -- ``operand[i]``; ``operand`` must be at least as long as ``s``
    * ``"scalar"`` -- ``operand`` itself
    * ``"op"``     -- ``operand(i)``
    * ``"opi"``    -- ``operand(i, s[i])``, with the value ``s[i]`` held before
      this index is rewritten

    ``rule`` receives the current element as a ``numpy.float64`` so that
    division by zero, overflow and invalid powers give inf/NaN.
    """
    ensure_vector(s)
    if variant == "vector":
        ensure_operand_length(s, operand)
        rhs = lambda i, _val: operand[i]
    elif variant == "scalar":
        value = float(operand)
        rhs = lambda _i, _val: value
    elif variant == "op":
        rhs = lambda i, _val: operand(i)
    elif variant == "opi":
        rhs = operand
    else:
        raise UnknownVariantError(f"unknown operand variant {variant!r}")

    with ieee_floats():
        for i in range(len(s)):
            val = float(s[i])
            s[i] = float(rule(np.float64(val), rhs(i, val)))
    return s

###############################################################################
# 4 -- Binary families
###############################################################################

# --- plus: s'[i] = s[i] + rhs
@register_op("plus_vector", family="plus", variant="vector")
def plus_vector(s: Vector, v1: Vector) -> Vector: return combine(s, np.add, v1, "vector")

@register_op("plus_scalar", family="plus", variant="scalar")
def plus_scalar(s: Vector, value: float) -> Vector: return combine(s, np.add, value, "scalar")

@register_op("plus_op", family="plus", variant="op")
def plus_op(s: Vector, o: IndexedFunc) -> Vector: return combine(s, np.add, o, "op")

@register_op("plus_opi", family="plus", variant="opi")
def plus_opi(s: Vector, o: IndexedOperator) -> Vector: return combine(s, np.add, o, "opi")

# --- minus: s'[i] = s[i] - rhs
@register_op("minus_vector", family="minus", variant="vector")
def minus_vector(s: Vector, v1: Vector) -> Vector: return combine(s, np.subtract, v1, "vector")

@register_op("minus_scalar", family="minus", variant="scalar")
def minus_scalar(s: Vector, value: float) -> Vector: return combine(s, np.subtract, value, "scalar")

@register_op("minus_op", family="minus", variant="op")
def minus_op(s: Vector, o: IndexedFunc) -> Vector: return combine(s, np.subtract, o, "op")

@register_op("minus_opi", family="minus", variant="opi")
def minus_opi(s: Vector, o: IndexedOperator) -> Vector: return combine(s, np.subtract, o, "opi")

# --- times: s'[i] = s[i] * rhs
@register_op("times_vector", family="times", variant="vector")
def times_vector(s: Vector, v1: Vector) -> Vector: return combine(s, np.multiply, v1, "vector")

@register_op("times_scalar", family="times", variant="scalar")
def times_scalar(s: Vector, value: float) -> Vector: return combine(s, np.multiply, value, "scalar")

@register_op("times_op", family="times", variant="op")
def times_op(s: Vector, o: IndexedFunc) -> Vector: return combine(s, np.multiply, o, "op")

@register_op("times_opi", family="times", variant="opi")
def times_opi(s: Vector, o: IndexedOperator) -> Vector: return combine(s, np.multiply, o, "opi")

# --- div: s'[i] = s[i] / rhs
@register_op("div_vector", family="div", variant="vector")
def div_vector(s: Vector, v1: Vector) -> Vector: return combine(s, np.divide, v1, "vector")

@register_op("div_scalar", family="div", variant="scalar")
def div_scalar(s: Vector, value: float) -> Vector: return combine(s, np.divide, value, "scalar")

@register_op("div_op", family="div", variant="op")
def div_op(s: Vector, o: IndexedFunc) -> Vector: return combine(s, np.divide, o, "op")

@register_op("div_opi", family="div", variant="opi")
def div_opi(s: Vector, o: IndexedOperator) -> Vector: return combine(s, np.divide, o, "opi")

# --- pow: s'[i] = s[i] ** rhs (the element is the base)
@register_op("pow_vector", family="pow", variant="vector")
def pow_vector(s: Vector, v1: Vector) -> Vector: return combine(s, np.power, v1, "vector")

@register_op("pow_scalar", family="pow", variant="scalar")
def pow_scalar(s: Vector, value: float) -> Vector: return combine(s, np.power, value, "scalar")

@register_op("pow_op", family="pow", variant="op")
def pow_op(s: Vector, o: IndexedFunc) -> Vector: return combine(s, np.power, o, "op")

@register_op("pow_opi", family="pow", variant="opi")
def pow_opi(s: Vector, o: IndexedOperator) -> Vector: return combine(s, np.power, o, "opi")

# --- max: s'[i] = max(s[i], rhs), NaN wins, +0 over -0
@register_op("max_vector", family="max", variant="vector")
def max_vector(s: Vector, v1: Vector) -> Vector: return combine(s, maximum, v1, "vector")

@register_op("max_scalar", family="max", variant="scalar")
def max_scalar(s: Vector, value: float) -> Vector: return combine(s, maximum, value, "scalar")

@register_op("max_op", family="max", variant="op")
def max_op(s: Vector, o: IndexedFunc) -> Vector: return combine(s, maximum, o, "op")

@register_op("max_opi", family="max", variant="opi")
def max_opi(s: Vector, o: IndexedOperator) -> Vector: return combine(s, maximum, o, "opi")

# --- min: s'[i] = min(s[i], rhs), NaN wins, -0 under +0
@register_op("min_vector", family="min", variant="vector")
def min_vector(s: Vector, v1: Vector) -> Vector: return combine(s, minimum, v1, "vector")

@register_op("min_scalar", family="min", variant="scalar")
def min_scalar(s: Vector, value: float) -> Vector: return combine(s, minimum, value, "scalar")

@register_op("min_op", family="min", variant="op")
def min_op(s: Vector, o: IndexedFunc) -> Vector: return combine(s, minimum, o, "op")

@register_op("min_opi", family="min", variant="opi")
def min_opi(s: Vector, o: IndexedOperator) -> Vector: return combine(s, minimum, o, "opi")

###############################################################################
# 5 -- Unary operations
###############################################################################

@register_op("negate")
def negate(s: Vector) -> Vector: return apply_operator(s, np.negative)

@register_op("absolute")
def absolute(s: Vector) -> Vector: return apply_operator(s, np.abs)

@register_op("natural_log")
def natural_log(s: Vector) -> Vector:
    """-> s'[i] = ln(s[i]); 0 gives -inf, negatives give NaN."""
    return apply_operator(s, np.log)

@register_op("natural_exp")
def natural_exp(s: Vector) -> Vector: return apply_operator(s, np.exp)


@register_op("reciprocal_scale", operand="scalar")
def reciprocal_scale(s: Vector, value: float) -> Vector:
    """-> s'[i] = value / s[i]"""
    numerator = np.float64(value)
    return apply_operator(s, lambda val: numerator / val)


@register_op("exponentiate", operand="scalar")
def exponentiate(s: Vector, base: float) -> Vector:
    """-> s'[i] = base ** s[i]"""
    b = np.float64(base)
    return apply_operator(s, lambda val: np.power(b, val))


@register_op("reverse")
def reverse(s: Vector) -> Vector:
    ensure_vector(s)
    size = len(s)
    for i in range(size // 2):
        j = size - i - 1
        s[i], s[j] = s[j], s[i]
    return s
