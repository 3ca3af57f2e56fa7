from __future__ import annotations

import random
from typing import Callable, List

import pytest

# Import project primitives
from smallnum.core import BigInt, LIMB_MASK


# -----------------------------
# Test helpers (pure functions)
# -----------------------------


def assert_canonical(x: BigInt) -> None:
    """Canonical form: >= 1 limb, no high zero limb, zero never negative."""
    assert x.limbs is not None
    assert len(x.limbs) >= 1
    assert len(x.limbs) == 1 or x.limbs[-1] != 0
    assert all(0 <= w <= LIMB_MASK for w in x.limbs)
    if x.is_zero():
        assert x.negative is False


def random_int(rng: random.Random, max_limbs: int = 5, signed: bool = True) -> int:
    """Random integer spanning 0..max_limbs limbs, biased towards limb edges."""
    n = rng.randint(0, max_limbs)
    v = 0
    for _ in range(n):
        w = rng.choice((0, 1, LIMB_MASK, LIMB_MASK - 1, rng.getrandbits(32)))
        v = (v << 32) | w
    if signed and rng.random() < 0.5:
        v = -v
    return v


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def rng() -> random.Random:
    return random.Random(0x5EED)


@pytest.fixture()
def canonical() -> Callable[[BigInt], None]:
    return assert_canonical


@pytest.fixture()
def int_samples(rng: random.Random) -> List[int]:
    """Edge values plus a seeded random sweep, for cross-checks against int."""
    edges = [0, 1, -1, LIMB_MASK, -LIMB_MASK, LIMB_MASK + 1, (1 << 64) - 1, -(1 << 64), (1 << 96) + 7]
    return edges + [random_int(rng) for _ in range(40)]
