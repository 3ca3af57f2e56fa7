"""
SmallNum Core Constants (limb domain)
=====================================

Only fixed-width limb parameters live here. Every magnitude is a sequence of
unsigned 32-bit limbs, least-significant limb first.
"""

# NOTE: Limb arithmetic is always modulo LIMB_BASE; carries and borrows are the
#       only way a value crosses a limb boundary.

# ---------------------------------------------------------------------------
# Limb geometry
# ---------------------------------------------------------------------------

#: Width of one limb in bits.
LIMB_BITS: int = 32

#: Width of one limb in bytes (serialisation groups bytes by this size).
LIMB_BYTES: int = LIMB_BITS // 8

#: Number of distinct limb values (2^32).
LIMB_BASE: int = 1 << LIMB_BITS

#: Largest limb value (0xFFFFFFFF); also the mask applied after each limb op.
LIMB_MASK: int = LIMB_BASE - 1


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "LIMB_BITS",
    "LIMB_BYTES",
    "LIMB_BASE",
    "LIMB_MASK",
]
