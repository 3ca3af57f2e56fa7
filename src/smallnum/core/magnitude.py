"""
Magnitude primitives over raw limb lists (unsigned, little-endian limb order).

- Every function here works on plain ``list[int]`` limbs and knows nothing about
  signs or the BigInt wrapper; callers own canonicalisation of signs.
- Output lists are written in place and must never be the same object as an
  input list (checked by the BigInt-level wrappers).
- All limb arithmetic is modulo 2^32: a step computes the wide sum/product and
  splits it into the stored limb (``& LIMB_MASK``) and the carry (``>> LIMB_BITS``).
"""

from __future__ import annotations

from typing import List, Sequence

from .constants import LIMB_BITS, LIMB_MASK
from .exc import InvariantViolation

# Debug printing control
DEBUG_MAGNITUDE = False

def _dbg(msg: str) -> None:
    if DEBUG_MAGNITUDE:
        print(msg)


# ----------------------------
# Shape helpers
# ----------------------------

def resize(limbs: List[int], n: int) -> List[int]:
    """Grow (zero-filled) or shrink ``limbs`` in place to exactly ``n`` limbs."""
    if n <= 0:
        raise InvariantViolation(f"resize expects n>0 (n={n})")
    cur = len(limbs)
    if n > cur:
        limbs.extend([0] * (n - cur))
    elif n < cur:
        del limbs[n:]
    return limbs


def trim(limbs: List[int]) -> List[int]:
    """Drop high zero limbs in place, keeping at least one limb."""
    n = len(limbs)
    while n > 1 and limbs[n - 1] == 0:
        n -= 1
    if n < len(limbs):
        _dbg(f"trim: {len(limbs)} -> {n} limbs")
        del limbs[n:]
    return limbs


def is_canonical(limbs: Sequence[int]) -> bool:
    return len(limbs) >= 1 and (len(limbs) == 1 or limbs[-1] != 0)


# ----------------------------
# Comparison & introspection
# ----------------------------

def compare_limbs(x: Sequence[int], y: Sequence[int]) -> int:
    """Three-way compare of two canonical magnitudes (-1, 0, +1).

    A longer canonical sequence is unconditionally greater; equal lengths are
    decided by the first differing limb, most-significant first.
    """
    if len(x) != len(y):
        return 1 if len(x) > len(y) else -1
    for i in range(len(x) - 1, -1, -1):
        if x[i] != y[i]:
            return 1 if x[i] > y[i] else -1
    return 0


def bit_length_limbs(x: Sequence[int]) -> int:
    """Exact bit length of a canonical magnitude; zero has bit length 0."""
    return LIMB_BITS * (len(x) - 1) + x[-1].bit_length()


# ----------------------------
# Arithmetic (integer domain, modulo 2^32 per limb)
# ----------------------------

def add_limbs(out: List[int], x: Sequence[int], y: Sequence[int]) -> List[int]:
    """out = x + y. Canonical by construction when x and y are canonical."""
    n = max(len(x), len(y))
    resize(out, n)
    carry = 0
    for i in range(n):
        s = (x[i] if i < len(x) else 0) + (y[i] if i < len(y) else 0) + carry
        out[i] = s & LIMB_MASK
        carry = s >> LIMB_BITS
    if carry:
        # Final carry is exactly 1, so the new top limb is nonzero.
        out.append(carry)
    _dbg(f"add_limbs: n={n}, grew={bool(carry)}")
    return out


def sub_limbs(out: List[int], x: Sequence[int], y: Sequence[int]) -> List[int]:
    """out = x - y for x >= y, trimmed to canonical form."""
    if compare_limbs(x, y) < 0:
        raise InvariantViolation("unsigned subtraction underflow (x < y)")
    n = len(x)
    resize(out, n)
    borrow = 0
    for i in range(n):
        d = x[i] - (y[i] if i < len(y) else 0) - borrow
        out[i] = d & LIMB_MASK
        borrow = 1 if d < 0 else 0
    if borrow:
        raise InvariantViolation("borrow left after most significant limb")
    return trim(out)


def mul_limbs(out: List[int], x: Sequence[int], y: Sequence[int]) -> List[int]:
    """out = x * y (schoolbook), trimmed to canonical form.

    Each row i accumulates x[i]*y[j] into out[i+j]; the wide step
    ``out[i+j] + x[i]*y[j] + carry`` never exceeds 2^64 - 1, so the carry
    always fits in one limb and lands in the still-untouched out[i+len(y)].
    """
    nx, ny = len(x), len(y)
    resize(out, nx + ny)
    for k in range(nx + ny):
        out[k] = 0
    for i in range(nx):
        xi = x[i]
        if xi == 0:
            continue
        carry = 0
        for j in range(ny):
            t = out[i + j] + xi * y[j] + carry
            out[i + j] = t & LIMB_MASK
            carry = t >> LIMB_BITS
        out[i + ny] = carry
    _dbg(f"mul_limbs: {nx}x{ny} limbs")
    return trim(out)


__all__ = [
    "resize",
    "trim",
    "is_canonical",
    "compare_limbs",
    "bit_length_limbs",
    "add_limbs",
    "sub_limbs",
    "mul_limbs",
]
