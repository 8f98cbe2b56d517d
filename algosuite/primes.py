"""Sieve of Eratosthenes and prime lookup."""

from __future__ import annotations

from functools import lru_cache
from math import isqrt

DEFAULT_LIMIT = 20_000_000


@lru_cache(maxsize=4)
def _sieve(limit: int) -> bytes:
    flags = bytearray([1]) * limit
    flags[:2] = bytes(len(flags[:2]))
    for i in range(2, isqrt(max(limit - 1, 0)) + 1):
        if flags[i]:
            flags[i * i :: i] = bytes(len(range(i * i, limit, i)))
    return bytes(flags)


def prime_sieve(limit: int) -> list[bool]:
    """Return a list whose entry i tells whether i is prime, for 0 <= i < limit."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    return [bool(flag) for flag in _sieve(limit)]


def is_prime(n: int, limit: int = DEFAULT_LIMIT) -> bool:
    """Tell whether ``n`` is prime, using a sieve that covers numbers below ``limit``."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not 0 <= n < limit:
        raise ValueError(f"{n} is outside the sieve range [0, {limit})")
    return bool(_sieve(limit)[n])