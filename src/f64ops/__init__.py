"""
In-place elementwise operations over vectors of doubles.

Every operation mutates the vector it is given and returns that same object,
so calls chain::

    s = np.array([1.0, 2.0, 3.0])
    negate(plus_scalar(s, 1.0))   # s is now [-2., -3., -4.]
"""

from .types import (
    FAMILIES,
    OP_REGISTRY,
    VARIANTS,
    Consumer,
    IndexedConsumer,
    IndexedFunc,
    IndexedOperator,
    Operator,
    OpSpec,
    Predicate,
    ReduceOperator,
    Variant,
    Vector,
)
from .errors import (
    ConfigError,
    F64OpsError,
    OperandLengthError,
    PreconditionError,
    UnknownOperationError,
    UnknownVariantError,
    VectorTypeError,
)
from .combinators import (
    coerce_int,
    coerce_int_array,
    constant,
    div,
    get,
    maximum,
    minimum,
    minus,
    neg,
    plus,
    times,
)
from .operators import (
    absolute,
    apply,
    apply_indexed_operator,
    apply_operator,
    combine,
    div_op,
    div_opi,
    div_scalar,
    div_vector,
    exponentiate,
    fill_scalar,
    fill_scalar_masked,
    fill_vector,
    fill_vector_masked,
    for_each,
    for_each_indexed,
    identity,
    lookup,
    max_op,
    max_opi,
    max_scalar,
    max_vector,
    min_op,
    min_opi,
    min_scalar,
    min_vector,
    minus_op,
    minus_opi,
    minus_scalar,
    minus_vector,
    natural_exp,
    natural_log,
    negate,
    operations,
    plus_op,
    plus_opi,
    plus_scalar,
    plus_vector,
    pow_op,
    pow_opi,
    pow_scalar,
    pow_vector,
    reciprocal_scale,
    reverse,
    times_op,
    times_opi,
    times_scalar,
    times_vector,
)

__all__ = [
    # function-value shapes
    "Vector", "IndexedFunc", "Operator", "IndexedOperator", "ReduceOperator",
    "Consumer", "IndexedConsumer", "Predicate", "Variant",
    "OpSpec", "OP_REGISTRY", "FAMILIES", "VARIANTS",
    # errors
    "F64OpsError", "PreconditionError", "OperandLengthError", "VectorTypeError",
    "UnknownVariantError", "UnknownOperationError", "ConfigError",
    # combinators
    "constant", "get", "coerce_int", "coerce_int_array",
    "plus", "minus", "times", "div", "neg", "maximum", "minimum",
    # primitives
    "apply", "apply_operator", "apply_indexed_operator", "for_each", "for_each_indexed",
    "identity", "fill_scalar", "fill_vector", "fill_scalar_masked", "fill_vector_masked",
    "combine", "lookup", "operations",
    # families
    "plus_vector", "plus_scalar", "plus_op", "plus_opi",
    "minus_vector", "minus_scalar", "minus_op", "minus_opi",
    "times_vector", "times_scalar", "times_op", "times_opi",
    "div_vector", "div_scalar", "div_op", "div_opi",
    "pow_vector", "pow_scalar", "pow_op", "pow_opi",
    "max_vector", "max_scalar", "max_op", "max_opi",
    "min_vector", "min_scalar", "min_op", "min_opi",
    # unary
    "negate", "absolute", "reciprocal_scale", "natural_log", "natural_exp",
    "exponentiate", "reverse",
]
