"""
Formatting helpers for BigInt (non-core, display only).

Renderings here are stable so they can be used in logs, test output and the
demo CLI, e.g.:
  fmt_limbs(x)  -> '{0x00000000, 0x00000001}'   (least-significant limb first)
  fmt_bytes(b)  -> '00 00 00 01 00 00 00 00'
  describe(x)   -> '+0x100000000 (2 limbs, 33 bits)'
"""

from typing import Union

from .codec import to_hex
from .exc import LimbDomainError
from .number import BigInt


def fmt_limbs(num: BigInt) -> str:
    """Limb list in storage order (least-significant first), 8 hex digits each."""
    if not isinstance(num, BigInt):
        raise LimbDomainError("fmt_limbs(): expected BigInt")
    return "{" + ", ".join(f"0x{w:08X}" for w in num._live()) + "}"


def fmt_bytes(data: Union[bytes, bytearray, memoryview], sep: str = " ") -> str:
    """Two upper-case hex digits per byte, joined by ``sep``."""
    return sep.join(f"{b:02X}" for b in bytes(data))


def describe(num: BigInt) -> str:
    """Signed hex value plus limb and bit counts, for one-line summaries."""
    if not isinstance(num, BigInt):
        raise LimbDomainError("describe(): expected BigInt")
    h = to_hex(num)
    if h.startswith("-"):
        text = "-0x" + h[1:]
    else:
        text = "+0x" + h
    return f"{text} ({num.length} limbs, {num.bit_length()} bits)"


__all__ = [
    "fmt_limbs",
    "fmt_bytes",
    "describe",
]
