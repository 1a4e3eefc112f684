import logging

import numpy as np
import pytest

from f64ops import (
    OP_REGISTRY,
    F64OpsError,
    OperandLengthError,
    PreconditionError,
    VectorTypeError,
    fill_vector_masked,
    lookup,
    negate,
    operations,
    plus_scalar,
    plus_vector,
)

VECTOR_OPERAND_OPS = sorted(
    name for name, spec in OP_REGISTRY.items() if spec.operand == "vector"
)


def _call_with_vector_operand(name, s, v1):
    spec = lookup(name)
    if name.endswith("_masked"):
        return spec.func(s, v1, lambda i: True)
    return spec.func(s, v1)


def test_every_family_has_a_vector_variant_under_test():
    """The parametrised boundary check covers all seven families plus the fills."""
    assert set(operations(variant="vector")) <= set(VECTOR_OPERAND_OPS)
    assert len(operations(variant="vector")) == 7
    assert {"fill_vector", "fill_vector_masked"} <= set(VECTOR_OPERAND_OPS)


@pytest.mark.parametrize("name", VECTOR_OPERAND_OPS)
def test_short_operand_fails_fast(name):
    """Every vector-operand operation rejects operands shorter than the target."""
    for n in range(1, 5):
        for m in range(n):
            s = np.arange(1.0, n + 1.0)
            original = s.copy()
            with pytest.raises(OperandLengthError) as excinfo:
                _call_with_vector_operand(name, s, np.ones(m))
            assert excinfo.value.operand_length == m
            assert excinfo.value.vector_length == n
            # nothing was written before the failure
            assert np.array_equal(s, original)


def test_operand_length_error_message_and_hierarchy():
    """The error names both lengths and is a ValueError-flavoured precondition failure."""
    with pytest.raises(OperandLengthError, match=r"invalid array size 2 \(out of bounds for 3-element vector\)") as excinfo:
        plus_vector([1.0, 2.0, 3.0], [1.0, 2.0])
    err = excinfo.value
    assert isinstance(err, PreconditionError)
    assert isinstance(err, ValueError)
    assert isinstance(err, F64OpsError)


def test_masked_fill_checks_length_before_consulting_predicate():
    """The predicate is never called when the operand is too short."""
    calls = []
    with pytest.raises(OperandLengthError):
        fill_vector_masked(np.zeros(3), [1.0], lambda i: calls.append(i) or False)
    assert calls == []


@pytest.mark.parametrize(
    "bad",
    [
        np.zeros((2, 2)),
        np.zeros(3, dtype=np.int64),
        np.zeros(3, dtype=np.float32),
        np.zeros(3, dtype=np.complex128),
    ],
)
def test_non_float64_arrays_are_rejected(bad):
    """Only 1-D float64 arrays qualify as vectors."""
    with pytest.raises(VectorTypeError):
        plus_scalar(bad, 1.0)
    with pytest.raises(TypeError):
        negate(bad)


def test_rejection_is_logged_at_debug(caplog):
    """A rejected operand emits one tagged debug record on the package logger."""
    with caplog.at_level(logging.DEBUG, logger="f64ops"):
        with pytest.raises(OperandLengthError):
            plus_vector(np.zeros(4), np.zeros(1))

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelno == logging.DEBUG
    assert record.rejection == "operand_length"
    assert record.getMessage() == "operand of length 1 rejected for 4-element vector"
