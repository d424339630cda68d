"""Tests for the random sources in 'src.generation.utils'."""

from __future__ import annotations

import random
import time

import pytest

from src.generation.utils import JavaRandom, default_seed, make_random


def test_java_next_int_sequence() -> None:
    """Reference values of new java.util.Random(42).nextInt()."""
    rng = JavaRandom(42)
    assert rng.next_int() == -1170105035
    assert rng.next_int() == 234785527


def test_java_seed_zero() -> None:
    assert JavaRandom(0).next_int() == -1155484576


def test_java_bounded_sequence() -> None:
    rng = JavaRandom(42)
    assert [rng.next_int(10) for _ in range(5)] == [0, 3, 8, 4, 0]


def test_java_power_of_two_bound() -> None:
    rng = JavaRandom(42)
    assert [rng.next_int(16) for _ in range(3)] == [11, 0, 10]


def test_java_randbytes_packs_ints_low_byte_first() -> None:
    first = (-1170105035) & 0xFFFFFFFF
    second = 234785527
    expected = first.to_bytes(4, "little") + second.to_bytes(4, "little")[:2]
    assert JavaRandom(42).randbytes(6) == expected


def test_java_randbytes_discards_unused_bytes() -> None:
    """A partial int still consumes a whole draw."""
    rng = JavaRandom(42)
    rng.randbytes(1)
    assert rng.next_int() == 234785527


def test_java_randint_bounds() -> None:
    rng = JavaRandom(7)
    values = {rng.randint(2, 17) for _ in range(2000)}
    assert values == set(range(2, 18))


@pytest.mark.parametrize("bound", [0, -5])
def test_java_rejects_non_positive_bound(bound: int) -> None:
    with pytest.raises(ValueError):
        JavaRandom(1).next_int(bound)


def test_java_seed_uses_low_48_bits() -> None:
    assert JavaRandom(5).randbytes(16) == JavaRandom(5 + (1 << 48)).randbytes(16)


def test_make_random() -> None:
    assert isinstance(make_random(1), random.Random)
    assert isinstance(make_random(1, legacy=True), JavaRandom)
    assert make_random(9).randbytes(8) == random.Random(9).randbytes(8)


def test_default_seed_is_milliseconds() -> None:
    before = int(time.time() * 1000)
    seed = default_seed()
    after = int(time.time() * 1000)
    assert before <= seed <= after
