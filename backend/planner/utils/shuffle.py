"""Seeded, reproducible list shuffling.

No hidden RNG state: the same (items, seed) pair always produces the same
order, so itineraries can be rebuilt identically and tested exactly.
"""

from typing import Sequence, TypeVar

T = TypeVar("T")

# glibc-style LCG constants
_LCG_MULTIPLIER = 1103515245
_LCG_INCREMENT = 12345
_LCG_MODULUS = 2**31

# Keeps seeds of neighbouring days and pools well apart.
_DAY_STRIDE = 7919


def lcg_next(state: int) -> int:
    """Advance the linear congruential generator by one step."""
    return (_LCG_MULTIPLIER * state + _LCG_INCREMENT) % _LCG_MODULUS


def deterministic_shuffle(items: Sequence[T], seed: int) -> list[T]:
    """Return a reproducible permutation of ``items``.

    Walks the list from the end, and for each position ``i`` draws a swap
    partner in ``[0, i]`` from an LCG seeded with ``seed + i``.
    The input is never mutated.
    """
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = lcg_next(seed + i) % (i + 1)
        result[i], result[j] = result[j], result[i]
    return result


def day_seed(base_seed: int, day_number: int, salt: int = 0) -> int:
    """Seed for one pool on one day of the trip."""
    return base_seed + day_number * _DAY_STRIDE + salt
