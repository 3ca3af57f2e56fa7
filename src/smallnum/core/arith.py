"""
Signed arithmetic on BigInt: add, subtract, multiply.

- ``unsigned_add`` / ``unsigned_subtract`` operate on magnitudes only and always
  produce a non-negative result.
- ``add`` / ``subtract`` dispatch on the operand signs through ``plan_add``, a
  pure function of (sign_a, sign_b, unsigned_compare(|a|, |b|)).
- ``result`` must be a distinct instance with its own storage; aliasing an
  operand raises AliasingError before anything is written.
- Every operation leaves ``result`` canonical, and a zero result non-negative.

# Sign dispatch (addition; subtraction flips the sign of b first):
#    a +  b =   |a| + |b|
#   -a + -b = -(|a| + |b|)
#    a + -b =   |a| - |b|   if |a| >= |b| else -(|b| - |a|)
#   -a +  b = -(|a| - |b|)  if |a| >= |b| else   |b| - |a|
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .exc import AliasingError, LimbDomainError
from .magnitude import add_limbs, mul_limbs, sub_limbs
from .number import BigInt, _canonical_limbs, copy, unsigned_compare

# Debug printing control
DEBUG_ARITH = False

def _dbg(msg: str) -> None:
    if DEBUG_ARITH:
        print(msg)


# ----------------------------
# Guards
# ----------------------------

def _check_operands(op: str, result: BigInt, a: BigInt, b: BigInt) -> None:
    if not isinstance(result, BigInt):
        raise LimbDomainError(f"{op}: BigInt result required, got {type(result).__name__}")
    xa = _canonical_limbs(op, a)
    xb = _canonical_limbs(op, b)
    r = result._live()
    if result is a or result is b or r is xa or r is xb:
        raise AliasingError(op)


def _finish(result: BigInt, negative: bool) -> BigInt:
    result.negative = negative and not result.is_zero()
    return result


# ----------------------------
# Sign dispatch (pure)
# ----------------------------

@dataclass(frozen=True)
class AddPlan:
    """How to combine two signed operands.

    op      : "add" adds magnitudes, "sub" subtracts the smaller from the larger.
    swapped : True when |b| > |a|, i.e. the magnitude difference is |b| - |a|.
    negative: sign of the result before zero-normalisation.
    """
    op: Literal["add", "sub"]
    swapped: bool
    negative: bool


def plan_add(neg_a: bool, neg_b: bool, ucmp: int) -> AddPlan:
    """Map (sign_a, sign_b, unsigned_compare(|a|, |b|)) to an AddPlan."""
    if neg_a == neg_b:
        return AddPlan("add", False, neg_a)
    if ucmp == 0:
        return AddPlan("sub", False, False)
    if ucmp > 0:
        return AddPlan("sub", False, neg_a)
    return AddPlan("sub", True, neg_b)


# ----------------------------
# Magnitude operations
# ----------------------------

def unsigned_add(result: BigInt, a: BigInt, b: BigInt) -> BigInt:
    """result = |a| + |b| (non-negative)."""
    _check_operands("unsigned_add", result, a, b)
    add_limbs(result.limbs, a.limbs, b.limbs)
    return _finish(result, False)


def unsigned_subtract(result: BigInt, a: BigInt, b: BigInt) -> BigInt:
    """result = |a| - |b|; requires |a| >= |b| (InvariantViolation otherwise)."""
    _check_operands("unsigned_subtract", result, a, b)
    sub_limbs(result.limbs, a.limbs, b.limbs)
    return _finish(result, False)


# ----------------------------
# Signed operations
# ----------------------------

def _signed_add(op: str, result: BigInt, a: BigInt, b: BigInt, flip_b: bool) -> BigInt:
    _check_operands(op, result, a, b)
    plan = plan_add(a.negative, b.negative != flip_b, unsigned_compare(a, b))
    _dbg(f"{op}: plan={plan}")
    if plan.op == "add":
        add_limbs(result.limbs, a.limbs, b.limbs)
    elif plan.swapped:
        sub_limbs(result.limbs, b.limbs, a.limbs)
    else:
        sub_limbs(result.limbs, a.limbs, b.limbs)
    return _finish(result, plan.negative)


def add(result: BigInt, a: BigInt, b: BigInt) -> BigInt:
    """result = a + b (signed). Returns ``result``."""
    return _signed_add("add", result, a, b, False)


def subtract(result: BigInt, a: BigInt, b: BigInt) -> BigInt:
    """result = a - b (signed), i.e. a + (-b). Returns ``result``."""
    return _signed_add("subtract", result, a, b, True)


def multiply(result: BigInt, a: BigInt, b: BigInt) -> BigInt:
    """result = a * b (schoolbook); negative iff exactly one operand is negative."""
    _check_operands("multiply", result, a, b)
    mul_limbs(result.limbs, a.limbs, b.limbs)
    return _finish(result, a.negative != b.negative)


def negate(a: BigInt) -> BigInt:
    """Fresh instance holding -a (zero stays non-negative)."""
    if not isinstance(a, BigInt):
        raise LimbDomainError("negate: BigInt operand required")
    out = copy(BigInt(), a)
    return _finish(out, not a.negative)


__all__ = [
    "AddPlan",
    "plan_add",
    "unsigned_add",
    "unsigned_subtract",
    "add",
    "subtract",
    "multiply",
    "negate",
]
