class F64OpsError(Exception):
    """Base error for the f64ops package."""


class PreconditionError(F64OpsError, ValueError):
    """Raised when a caller breaks an argument contract (programmer error)."""


class OperandLengthError(PreconditionError):
    """Raised when a right-hand vector is shorter than the vector it updates."""

    def __init__(self, operand_length: int, vector_length: int) -> None:
        self.operand_length = operand_length
        self.vector_length = vector_length
        super().__init__(
            f"invalid array size {operand_length} "
            f"(out of bounds for {vector_length}-element vector)"
        )


class VectorTypeError(F64OpsError, TypeError):
    """Raised for arrays that are not one-dimensional float64 vectors."""


class UnknownVariantError(F64OpsError, ValueError):
    """Raised when ``combine`` is asked for an operand source it does not know."""


class UnknownOperationError(F64OpsError, KeyError):
    """Raised by registry lookups for names that were never registered."""


class ConfigError(F64OpsError):
    """Raised for invalid configuration values or combinations."""
