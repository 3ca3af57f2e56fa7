"""
SmallNum Core
=============

Unified exports for the limb-domain BigInt primitive and its operations.
All arithmetic works on 32-bit limbs with explicit carry/borrow; hex and
Python ``int`` bridges are provided *only* for I/O and display.
"""

# NOTE:
#   Layering is strictly bottom-up: constants/exc -> magnitude -> number ->
#   arith/codec -> fmt. Lower modules never import higher ones at import time.

# Limb-domain constants
from .constants import (
    LIMB_BITS,
    LIMB_BYTES,
    LIMB_BASE,
    LIMB_MASK,
)

# BigInt primitive, lifecycle and comparisons
from .number import (
    BigInt,
    copy,
    swap,
    unsigned_compare,
    compare,
)

# Arithmetic (magnitude and signed)
from .arith import (
    AddPlan,
    plan_add,
    unsigned_add,
    unsigned_subtract,
    add,
    subtract,
    multiply,
    negate,
)

# Serialisation and I/O bridges
from .codec import (
    write_bytes,
    to_bytes,
    from_bytes,
    from_hex,
    to_hex,
    from_int,
    to_int,
)

# Display helpers (non-core)
from .fmt import (
    fmt_limbs,
    fmt_bytes,
    describe,
)

# Core exceptions
from .exc import (
    SmallNumError,
    LimbDomainError,
    InvariantViolation,
    AliasingError,
    ReleasedNumberError,
    BufferSizeError,
)

__all__ = [
    # constants
    "LIMB_BITS",
    "LIMB_BYTES",
    "LIMB_BASE",
    "LIMB_MASK",
    # number
    "BigInt",
    "copy",
    "swap",
    "unsigned_compare",
    "compare",
    # arith
    "AddPlan",
    "plan_add",
    "unsigned_add",
    "unsigned_subtract",
    "add",
    "subtract",
    "multiply",
    "negate",
    # codec
    "write_bytes",
    "to_bytes",
    "from_bytes",
    "from_hex",
    "to_hex",
    "from_int",
    "to_int",
    # fmt
    "fmt_limbs",
    "fmt_bytes",
    "describe",
    # exceptions
    "SmallNumError",
    "LimbDomainError",
    "InvariantViolation",
    "AliasingError",
    "ReleasedNumberError",
    "BufferSizeError",
]
