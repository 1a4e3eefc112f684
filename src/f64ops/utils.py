from __future__ import annotations
import logging
from typing import Sized

import numpy as np

from .errors import OperandLengthError, VectorTypeError
from .types import Vector

logger = logging.getLogger(__name__)


def ieee_floats() -> np.errstate:
    """Context in which float64 arithmetic yields inf/NaN instead of warning or raising."""
    return np.errstate(all="ignore")


def ensure_vector(s: Vector) -> Vector:
    """Reject arrays that cannot hold a mutable run of doubles.

    Lists are accepted as-is; an ``ndarray`` must be 1-D and ``float64``.
    """
    if isinstance(s, np.ndarray):
        if s.ndim != 1:
            logger.debug("rejecting %d-D array of shape %s", s.ndim, s.shape,
                         extra={"rejection": "vector_type"})
            raise VectorTypeError(f"Expected a 1-D vector, got array of shape {s.shape}")
        if s.dtype != np.float64:
            logger.debug("rejecting array of dtype %s", s.dtype, extra={"rejection": "vector_type"})
            raise VectorTypeError(f"Expected a float64 vector, got dtype {s.dtype}")
    return s


def ensure_operand_length(s: Sized, v1: Sized) -> None:
    """Fail fast when ``v1`` cannot supply a value for every index of ``s``."""
    if len(v1) < len(s):
        logger.debug("operand of length %d rejected for %d-element vector", len(v1), len(s),
                     extra={"rejection": "operand_length"})
        raise OperandLengthError(len(v1), len(s))
