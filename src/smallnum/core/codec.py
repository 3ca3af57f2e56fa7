"""
Byte-string serialisation and I/O bridges for BigInt.

- Binary format: big-endian magnitude bytes, 4 bytes per limb, most-significant
  limb first. The sign is never encoded; decoded values are non-negative.
- Decoding groups bytes by 4 from the end of the input, so a leading partial
  group (1-3 bytes) becomes the top limb: limb count is ``1 + (length-1)//4``.
- Hex and Python ``int`` bridges exist for I/O, tests and display only; core
  arithmetic never goes through them.
"""

from __future__ import annotations

from typing import Optional, Union

from .constants import LIMB_BITS, LIMB_BYTES, LIMB_MASK
from .exc import BufferSizeError, LimbDomainError
from .magnitude import resize, trim
from .number import BigInt

# Debug printing control
DEBUG_CODEC = False

def _dbg(msg: str) -> None:
    if DEBUG_CODEC:
        print(msg)


BytesLike = Union[bytes, bytearray, memoryview]

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_HEX_PER_LIMB = LIMB_BYTES * 2


# ----------------------------
# Binary (big-endian bytes)
# ----------------------------

def write_bytes(num: BigInt, dst: Union[bytearray, memoryview]) -> int:
    """Write ``num.num_bytes()`` big-endian bytes into ``dst``; return the count.

    ``dst`` must be writable and at least that long; bytes past the encoded
    magnitude are left untouched.
    """
    if isinstance(dst, memoryview):
        if dst.readonly:
            raise LimbDomainError("write_bytes: destination memoryview is read-only")
    elif not isinstance(dst, bytearray):
        raise LimbDomainError(f"write_bytes: writable bytearray or memoryview required, got {type(dst).__name__}")
    limbs = num._live()
    n = LIMB_BYTES * len(limbs)
    if len(dst) < n:
        raise BufferSizeError(n, len(dst))
    off = 0
    for w in reversed(limbs):
        dst[off:off + LIMB_BYTES] = w.to_bytes(LIMB_BYTES, "big")
        off += LIMB_BYTES
    return n


def to_bytes(num: BigInt) -> bytes:
    """Big-endian magnitude bytes, length ``4 * num.length`` (sign dropped)."""
    buf = bytearray(num.num_bytes())
    write_bytes(num, buf)
    return bytes(buf)


def from_bytes(src: BytesLike, length: Optional[int] = None, result: Optional[BigInt] = None) -> BigInt:
    """Decode the first ``length`` big-endian bytes of ``src`` as an unsigned magnitude.

    When ``result`` is given it is resized and overwritten in place (and
    returned); otherwise a new BigInt is allocated. The result is canonical
    and non-negative.
    """
    if not isinstance(src, (bytes, bytearray, memoryview)):
        raise LimbDomainError(f"from_bytes: bytes-like source required, got {type(src).__name__}")
    if length is None:
        length = len(src)
    elif not isinstance(length, int) or isinstance(length, bool):
        raise LimbDomainError(f"from_bytes: length must be int, got {type(length).__name__}")
    if length <= 0:
        raise LimbDomainError(f"from_bytes: length must be > 0 (length={length})")
    if length > len(src):
        raise LimbDomainError(f"from_bytes: length {length} exceeds source of {len(src)} bytes")
    if result is None:
        result = BigInt()
    elif not isinstance(result, BigInt):
        raise LimbDomainError("from_bytes: result must be a BigInt")

    n = 1 + (length - 1) // LIMB_BYTES
    limbs = resize(result._live(), n)
    for k in range(n):
        end = length - LIMB_BYTES * k
        start = max(0, end - LIMB_BYTES)
        limbs[k] = int.from_bytes(bytes(src[start:end]), "big")
    trim(limbs)
    result.negative = False
    _dbg(f"from_bytes: {length} bytes -> {len(limbs)} limbs")
    return result


# ----------------------------
# Hex text (I/O only)
# ----------------------------

def from_hex(s: str) -> BigInt:
    """Parse ``[-][0x]HEXDIGITS`` into a BigInt (case-insensitive)."""
    if not isinstance(s, str):
        raise LimbDomainError("from_hex: str required")
    text = s.strip()
    negative = text.startswith("-")
    if negative:
        text = text[1:]
    if text[:2] in ("0x", "0X"):
        text = text[2:]
    if not text or not set(text) <= _HEX_DIGITS:
        raise LimbDomainError(f"from_hex: invalid hex literal {s!r}")

    limbs = []
    end = len(text)
    while end > 0:
        start = max(0, end - _HEX_PER_LIMB)
        limbs.append(int(text[start:end], 16))
        end = start
    return BigInt(limbs, negative)


def to_hex(num: BigInt) -> str:
    """Upper-case hex without prefix; ``-`` only for a nonzero negative value."""
    limbs = num._live()
    top = len(limbs) - 1
    digits = f"{limbs[top]:X}" + "".join(f"{limbs[i]:08X}" for i in range(top - 1, -1, -1))
    if num.negative and not num.is_zero():
        return "-" + digits
    return digits


# ----------------------------
# Python int bridges (I/O only)
# ----------------------------

def from_int(value: int) -> BigInt:
    if not isinstance(value, int) or isinstance(value, bool):
        raise LimbDomainError(f"from_int: int required, got {type(value).__name__}")
    mag = -value if value < 0 else value
    limbs = [mag & LIMB_MASK]
    mag >>= LIMB_BITS
    while mag:
        limbs.append(mag & LIMB_MASK)
        mag >>= LIMB_BITS
    return BigInt(limbs, value < 0)


def to_int(num: BigInt) -> int:
    acc = 0
    for w in reversed(num._live()):
        acc = (acc << LIMB_BITS) | w
    return -acc if num.negative else acc


__all__ = [
    "write_bytes",
    "to_bytes",
    "from_bytes",
    "from_hex",
    "to_hex",
    "from_int",
    "to_int",
]
