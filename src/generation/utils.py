from __future__ import annotations

import random
import time


class JavaRandom:
    """
    Pseudorandom source compatible with java.util.Random.

    Reimplements the 48-bit linear congruential generator so that a seed taken
    from a file produced by the legacy Java generator reproduces that file byte
    for byte. Exposes the same 'randbytes' / 'randint' methods as random.Random,
    so either one can be handed to the record generator.
    """

    MULTIPLIER = 0x5DEECE66D
    ADDEND = 0xB
    MASK = (1 << 48) - 1

    def __init__(self, seed: int):
        self._seed = (seed ^ self.MULTIPLIER) & self.MASK

    def _next(self, bits: int) -> int:
        """Advance the generator and return the top 'bits' bits as a signed 32-bit int."""
        self._seed = (self._seed * self.MULTIPLIER + self.ADDEND) & self.MASK
        value = (self._seed >> (48 - bits)) & 0xFFFFFFFF
        return value - (1 << 32) if value & 0x80000000 else value

    def next_int(self, bound: int | None = None) -> int:
        """
        Return the next int, or one uniformly drawn from [0, bound) when a bound is given.

        :param bound: Exclusive upper bound; must be positive.
        :return: A signed 32-bit value when unbounded, otherwise a value in [0, bound).
        """
        if bound is None:
            return self._next(32)
        if bound <= 0:
            raise ValueError("bound must be positive")

        r = self._next(31)
        m = bound - 1
        if bound & m == 0:
            # Power of two: take the high bits
            return (bound * r) >> 31

        u = r
        r = u % bound
        # Reject values from the incomplete last bucket (int overflow in Java)
        while u - r + m >= 1 << 31:
            u = self._next(31)
            r = u % bound
        return r

    def randbytes(self, n: int) -> bytes:
        """Return n random bytes, four per generated int, low byte first."""
        out = bytearray()
        while len(out) < n:
            rnd = self._next(32) & 0xFFFFFFFF
            out += rnd.to_bytes(4, "little")[:n - len(out)]
        return bytes(out)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return a + self.next_int(b - a + 1)


def make_random(seed: int, legacy: bool = False):
    """
    Build the random source used for record generation.

    :param seed: Seed for the generator.
    :param legacy: Use the java.util.Random compatible generator instead of random.Random.
    :return: An object providing 'randbytes(n)' and 'randint(a, b)'.
    """
    if legacy:
        return JavaRandom(seed)
    return random.Random(seed)


def default_seed() -> int:
    """Time-derived seed (milliseconds since the epoch)."""
    return int(time.time() * 1000)
