import pytest

import f64ops
from f64ops import FAMILIES, OP_REGISTRY, VARIANTS, UnknownOperationError, lookup, operations
from f64ops.operators import register_op


def test_every_family_has_four_variants():
    """Each binary family is registered once per operand variant."""
    for family in FAMILIES:
        names = operations(family=family)
        assert names == sorted(f"{family}_{variant}" for variant in VARIANTS)
        for name in names:
            spec = lookup(name)
            assert spec.family == family
            assert spec.operand == spec.variant


def test_registry_matches_public_api():
    """Registered functions are the ones exported from the package."""
    for name, spec in OP_REGISTRY.items():
        assert getattr(f64ops, name) is spec.func
        assert name in f64ops.__all__


def test_unary_operations_are_registered():
    """Single-variant operations sit outside the families."""
    for name in ("negate", "absolute", "reciprocal_scale", "natural_log",
                 "natural_exp", "exponentiate", "reverse"):
        spec = lookup(name)
        assert spec.family is None
        assert spec.variant is None
    assert lookup("reciprocal_scale").operand == "scalar"
    assert lookup("reverse").operand == "none"


def test_operations_filters_by_variant():
    """Variant filtering returns one operation per family."""
    assert operations(variant="opi") == sorted(f"{f}_opi" for f in FAMILIES)


def test_lookup_unknown_name():
    """Unknown names raise a KeyError subclass."""
    with pytest.raises(UnknownOperationError):
        lookup("cross_product")
    with pytest.raises(KeyError):
        lookup("cross_product")


def test_duplicate_registration_rejected():
    """Registering an existing name twice is refused."""
    with pytest.raises(KeyError, match="registered twice"):
        @register_op("plus_vector", family="plus", variant="vector")
        def _again(s, v1):
            return s
