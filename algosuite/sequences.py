"""Small sequence algorithms: Josephus problem, LIS, XOR swap and bucket sort."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def josephus(n: int, k: int) -> int:
    """Return the 1-based position that survives when every k-th of n people is removed."""
    if n < 1:
        raise ValueError("the circle must hold at least one person")
    survivor = 1
    for size in range(2, n + 1):
        survivor = (survivor + k - 1) % size + 1
    return survivor


def longest_increasing_subsequence(values: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence of ``values``."""
    lengths: list[int] = []
    for i, current in enumerate(values):
        best = max(
            (lengths[j] + 1 for j, earlier in enumerate(values[:i]) if earlier < current),
            default=1,
        )
        lengths.append(best)
    return max(lengths, default=0)


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Swap two integers with the XOR trick and return them as ``(b, a)``."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Return the values, all in the range [0, 1), sorted with one bucket per value."""
    items = list(values)
    count = len(items)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in items:
        if not 0.0 <= value < 1.0:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(count * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]