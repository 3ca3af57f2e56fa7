"""
BigInt primitive: arbitrary-precision sign-magnitude integer over 32-bit limbs.

- Magnitude: list of unsigned 32-bit limbs, least-significant first.
- Canonical form: at least one limb and no high zero limb (except zero itself).
- Sign: ``negative`` flag; zero is stored non-negative by every operation that
  produces a magnitude. ``set_negative`` is the only way to flag a zero.
- Ownership: each instance owns its limb list. ``swap`` exchanges lists,
  ``copy``/``duplicate`` create independent lists, ``free`` releases the list
  and any later use raises ReleasedNumberError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .constants import LIMB_BYTES, LIMB_MASK
from .exc import AliasingError, InvariantViolation, LimbDomainError, ReleasedNumberError
from .magnitude import bit_length_limbs, compare_limbs, is_canonical, trim

# Debug printing control
DEBUG_NUMBER = False

def _dbg(msg: str) -> None:
    if DEBUG_NUMBER:
        print(msg)


def _check_limb(w: object) -> int:
    if not isinstance(w, int) or isinstance(w, bool):
        raise LimbDomainError(f"limb must be int, got {type(w).__name__}")
    if w < 0 or w > LIMB_MASK:
        raise LimbDomainError(f"limb out of range [0, 0xFFFFFFFF]: {w}")
    return w


@dataclass(eq=False)
class BigInt:
    """Arbitrary-precision integer: (-1 if negative else 1) * sum(limbs[i] * 2^(32*i))."""
    limbs: Optional[List[int]] = field(default_factory=lambda: [0])
    negative: bool = False

    def __post_init__(self):
        if self.limbs is None:
            raise LimbDomainError("BigInt requires a limb sequence")
        limbs = [_check_limb(w) for w in self.limbs]
        if not limbs:
            raise LimbDomainError("BigInt requires at least one limb")
        self.limbs = trim(limbs)
        self.negative = bool(self.negative) and not self._is_zero_limbs()

    # ------------- internal guards -------------

    def _live(self) -> List[int]:
        if self.limbs is None:
            raise ReleasedNumberError("BigInt used after free")
        return self.limbs

    def _is_zero_limbs(self) -> bool:
        limbs = self._live()
        return len(limbs) == 1 and limbs[0] == 0

    # ------------- lifecycle -------------

    @classmethod
    def new(cls) -> "BigInt":
        """Fresh canonical zero."""
        return cls()

    def init(self) -> "BigInt":
        """Reset to canonical zero with a fresh one-limb buffer.

        The previous buffer is not cleared; it stays valid only for whoever
        still references it. Also revives a freed instance.
        """
        self.limbs = [0]
        self.negative = False
        return self

    def duplicate(self) -> "BigInt":
        """Deep copy into a new instance owned by the caller."""
        return copy(BigInt(), self)

    def __copy__(self) -> "BigInt":
        return self.duplicate()

    def __deepcopy__(self, memo) -> "BigInt":
        return self.duplicate()

    def clear(self) -> None:
        """Overwrite every limb with zero in place, then reset to zero."""
        limbs = self._live()
        for i in range(len(limbs)):
            limbs[i] = 0
        del limbs[1:]
        self.negative = False

    def free(self) -> None:
        """Release limb storage; any later use (including a second free) raises."""
        self._live()
        _dbg(f"free: releasing {len(self.limbs)} limbs")
        self.limbs = None
        self.negative = False

    def clear_free(self) -> None:
        self.clear()
        self.free()

    def zero(self) -> "BigInt":
        limbs = self._live()
        del limbs[1:]
        limbs[0] = 0
        self.negative = False
        return self

    def one(self) -> "BigInt":
        limbs = self._live()
        del limbs[1:]
        limbs[0] = 1
        self.negative = False
        return self

    # ------------- predicates -------------

    @property
    def length(self) -> int:
        """Number of limbs (always >= 1 for a live instance)."""
        return len(self._live())

    def is_zero(self) -> bool:
        return self._is_zero_limbs()

    def is_one(self) -> bool:
        limbs = self._live()
        return len(limbs) == 1 and limbs[0] == 1

    def is_negative(self) -> bool:
        """Sign flag verbatim (does not inspect the magnitude)."""
        self._live()
        return self.negative

    def set_negative(self, flag: bool) -> None:
        """Set the sign flag unconditionally (a flagged zero stays flagged)."""
        self._live()
        self.negative = bool(flag)

    def is_odd(self) -> bool:
        return bool(self._live()[0] & 1)

    def is_even(self) -> bool:
        return not (self._live()[0] & 1)

    # ------------- introspection -------------

    def num_bytes(self) -> int:
        """Encoded size in bytes; always a whole number of limbs (4 * length)."""
        return LIMB_BYTES * len(self._live())

    def bit_length(self) -> int:
        """Exact bit length of the magnitude; zero has bit length 0."""
        return bit_length_limbs(self._live())

    # ------------- comparisons -------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return compare(self, other) == 0

    def __lt__(self, other: "BigInt") -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: "BigInt") -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: "BigInt") -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: "BigInt") -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return compare(self, other) >= 0

    __hash__ = None  # mutable

    # ------------- arithmetic operators (fresh results) -------------

    def __add__(self, other: "BigInt") -> "BigInt":
        from .arith import add
        if not isinstance(other, BigInt):
            return NotImplemented
        return add(BigInt(), self, other)

    def __sub__(self, other: "BigInt") -> "BigInt":
        from .arith import subtract
        if not isinstance(other, BigInt):
            return NotImplemented
        return subtract(BigInt(), self, other)

    def __mul__(self, other: "BigInt") -> "BigInt":
        from .arith import multiply
        if not isinstance(other, BigInt):
            return NotImplemented
        return multiply(BigInt(), self, other)

    def __neg__(self) -> "BigInt":
        from .arith import negate
        return negate(self)

    def __abs__(self) -> "BigInt":
        dup = self.duplicate()
        dup.negative = False
        return dup

    def __int__(self) -> int:
        from .codec import to_int
        return to_int(self)

    def __repr__(self) -> str:
        if self.limbs is None:
            return "BigInt(<freed>)"
        words = ", ".join(f"0x{w:08X}" for w in self.limbs)
        return f"BigInt(limbs=[{words}], negative={self.negative})"


# ----------------------------
# Operand guards
# ----------------------------

def _check_bigint(op: str, x: object) -> None:
    if not isinstance(x, BigInt):
        raise LimbDomainError(f"{op}: BigInt operands required, got {type(x).__name__}")


def _canonical_limbs(op: str, x: BigInt) -> List[int]:
    """Live limbs of a BigInt operand, rejecting non-canonical storage."""
    _check_bigint(op, x)
    limbs = x._live()
    if not is_canonical(limbs):
        raise InvariantViolation(f"{op}: operand is not canonical ({len(limbs)} limbs, high zero limb or empty)")
    return limbs


# ----------------------------
# Pairwise lifecycle operations
# ----------------------------

def copy(dst: BigInt, src: BigInt) -> BigInt:
    """Deep copy ``src`` (limbs and sign) into ``dst``; ``dst`` must not be ``src``."""
    if dst is src:
        raise AliasingError("copy")
    dst.limbs = list(src._live())
    dst.negative = src.negative
    return dst


def swap(a: BigInt, b: BigInt) -> None:
    """Exchange limb storage, length and sign of ``a`` and ``b`` without copying."""
    _check_bigint("swap", a)
    _check_bigint("swap", b)
    a.limbs, b.limbs = b.limbs, a.limbs
    a.negative, b.negative = b.negative, a.negative


# ----------------------------
# Comparisons
# ----------------------------

def unsigned_compare(a: BigInt, b: BigInt) -> int:
    """Compare magnitudes ignoring sign; returns -1, 0 or +1."""
    return compare_limbs(_canonical_limbs("unsigned_compare", a), _canonical_limbs("unsigned_compare", b))


def compare(a: BigInt, b: BigInt) -> int:
    """Signed comparison; returns -1, 0 or +1.

    Differing sign flags decide alone (so a flagged zero sorts below zero).
    Equal signs delegate to unsigned_compare, negated for two negatives.
    """
    _canonical_limbs("compare", a)
    _canonical_limbs("compare", b)
    if a.negative != b.negative:
        return -1 if a.negative else 1
    ordering = unsigned_compare(a, b)
    return -ordering if a.negative else ordering


__all__ = [
    "BigInt",
    "copy",
    "swap",
    "unsigned_compare",
    "compare",
]
