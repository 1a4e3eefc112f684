from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List, Literal, Optional, Union

import numpy as np

# ---------------------------------------------------------------------------
# 1 -- Function-value shapes (and the registry they are filed in)
# ---------------------------------------------------------------------------

Vector = Union[np.ndarray, List[float]]

IndexedFunc = Callable[[int], float]
Operator = Callable[[float], float]
IndexedOperator = Callable[[int, float], float]
ReduceOperator = Callable[[float, float], float]
Consumer = Callable[[float], None]
IndexedConsumer = Callable[[int, float], None]
Predicate = Callable[[int], bool]

# Where the right-hand operand of a binary family comes from.
Variant = Literal["vector", "scalar", "op", "opi"]
OperandKind = Literal["vector", "scalar", "op", "opi", "none"]

VARIANTS: tuple[Variant, ...] = ("vector", "scalar", "op", "opi")

FAMILIES = ("plus", "minus", "times", "div", "pow", "max", "min")


@dataclass(frozen=True)
class OpSpec:
    func: Callable
    family: Optional[str]
    variant: Optional[Variant]
    operand: OperandKind = "none"


OP_REGISTRY: Dict[str, OpSpec] = {}
