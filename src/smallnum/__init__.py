# Top-level API for smallnum (limb-domain).
"""
Top-level API for smallnum.

Exposes the stable interface of the arbitrary-precision sign-magnitude
integer:
  - BigInt: limb storage, lifecycle, predicates, comparisons
  - add / subtract / multiply: signed arithmetic into a caller-owned result
  - to_bytes / from_bytes: big-endian magnitude serialisation

Display helpers and the full exception set live under ``smallnum.core``.
"""

from __future__ import annotations

from .core import (
    BigInt,
    copy,
    swap,
    unsigned_compare,
    compare,
    unsigned_add,
    unsigned_subtract,
    add,
    subtract,
    multiply,
    negate,
    write_bytes,
    to_bytes,
    from_bytes,
    from_hex,
    to_hex,
    from_int,
    to_int,
    SmallNumError,
    LimbDomainError,
    InvariantViolation,
    AliasingError,
    ReleasedNumberError,
    BufferSizeError,
)

__version__ = "0.1.0"

__all__ = [
    # primitive
    "BigInt",
    "copy",
    "swap",
    "unsigned_compare",
    "compare",
    # arithmetic
    "unsigned_add",
    "unsigned_subtract",
    "add",
    "subtract",
    "multiply",
    "negate",
    # serialisation / I/O
    "write_bytes",
    "to_bytes",
    "from_bytes",
    "from_hex",
    "to_hex",
    "from_int",
    "to_int",
    # exceptions
    "SmallNumError",
    "LimbDomainError",
    "InvariantViolation",
    "AliasingError",
    "ReleasedNumberError",
    "BufferSizeError",
]
