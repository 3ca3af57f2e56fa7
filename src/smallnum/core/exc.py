"""
Core exception types for smallnum.core.

These are dependency-free and may be imported by all core modules.
"""

__all__ = [
    "SmallNumError",
    "LimbDomainError",
    "InvariantViolation",
    "AliasingError",
    "ReleasedNumberError",
    "BufferSizeError",
]


class SmallNumError(Exception):
    """Base class for every error raised by smallnum."""
    pass


class LimbDomainError(SmallNumError):
    """Raised when inputs violate the limb domain or basic preconditions."""
    pass


class InvariantViolation(SmallNumError):
    """Raised when arithmetic or guards would break core invariants."""
    pass


class AliasingError(SmallNumError):
    """Raised when a result argument shares identity or storage with an operand.

    Attributes
    ----------
    operation : str
        Name of the operation that rejected the call (e.g. ``"add"``).
    """

    def __init__(self, operation: str):
        super().__init__(f"{operation}: result must not alias an operand")
        self.operation = operation


class ReleasedNumberError(SmallNumError):
    """Raised when a BigInt is used (or freed) after its storage was released."""
    pass


class BufferSizeError(SmallNumError):
    """Raised when a serialisation buffer is too small for the encoded magnitude."""

    def __init__(self, required: int, available: int):
        super().__init__(
            f"buffer too small: need {required} bytes, got {available}"
        )
        self.required = required
        self.available = available
