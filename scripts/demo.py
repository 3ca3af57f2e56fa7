#!/usr/bin/env python3
"""Demo: limb-level arithmetic on hex operands.

Operations:
  add A B   signed addition
  sub A B   signed subtraction
  mul A B   schoolbook multiplication
  cmp A B   signed and unsigned comparison

Operands are hex literals with optional '-' and '0x' prefix, e.g.
  python scripts/demo.py add FFFFFFFF 1
  python scripts/demo.py mul 0xFFFFFFFF FEFEFEFE --bytes
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from smallnum.core import (
    BigInt,
    SmallNumError,
    add,
    compare,
    describe,
    fmt_bytes,
    fmt_limbs,
    from_hex,
    multiply,
    subtract,
    to_bytes,
    unsigned_compare,
)

OPS = {
    "add": add,
    "sub": subtract,
    "mul": multiply,
}

# ---------- pretty printers ----------

def print_operand(label: str, x: BigInt) -> None:
    print(f"{label:<6} {describe(x)}")
    print(f"{'':<6} limbs={fmt_limbs(x)}")


def print_result(title: str, res: BigInt, *, show_bytes: bool = False) -> None:
    print(f"\n=== {title} ===")
    print_operand("result", res)
    if show_bytes:
        print(f"{'':<6} bytes={fmt_bytes(to_bytes(res))}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="smallnum limb arithmetic demo")
    parser.add_argument("op", choices=sorted([*OPS.keys(), "cmp"]), help="Operation to run")
    parser.add_argument("a", help="Left operand (hex)")
    parser.add_argument("b", help="Right operand (hex)")
    parser.add_argument("--bytes", action="store_true", help="Also print the big-endian byte encoding of the result")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        a = from_hex(args.a)
        b = from_hex(args.b)
    except SmallNumError as e:
        print(f"invalid operand: {e}", file=sys.stderr)
        return 2

    print_operand("a", a)
    print_operand("b", b)

    if args.op == "cmp":
        print("\n=== Compare ===")
        print(f"compare(a, b)          = {compare(a, b):+d}")
        print(f"unsigned_compare(a, b) = {unsigned_compare(a, b):+d}")
        return 0

    res = OPS[args.op](BigInt(), a, b)
    print_result(f"{args.op}(a, b)", res, show_bytes=args.bytes)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
