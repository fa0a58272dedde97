from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, TypeVar

from .errors import InvalidSeedError

T = TypeVar("T")

LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280

CARD_SEED_STRIDE = 1000


def lcg_next(state: int) -> Tuple[float, int]:
    """Advance the linear congruential generator by one step.

    Returns ``(value, next_state)`` with ``value`` in [0, 1). The function holds
    no state of its own; callers thread ``next_state`` into the next call.
    """
    nxt = (state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
    return nxt / LCG_MODULUS, nxt


def check_seed(seed: Optional[int]) -> Optional[int]:
    if seed is None:
        return None
    # bool is an int subclass but never a meaningful seed
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise InvalidSeedError(f"Seed must be an integer or None, got {type(seed).__name__}")
    return seed


@dataclass
class RandomSource:
    engine: str

    def random(self) -> float:
        raise NotImplementedError

    def randrange(self, n: int) -> int:
        return int(self.random() * n)

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.randrange(len(seq))]

    def shuffle(self, seq: Sequence[T]) -> List[T]:
        """Fisher-Yates shuffle into a new list; ``seq`` is left untouched."""
        arr = list(seq)
        i = len(arr)
        while i > 0:
            j = self.randrange(i)
            i -= 1
            arr[i], arr[j] = arr[j], arr[i]
        return arr


class LcgRandomSource(RandomSource):
    def __init__(self, seed: int):
        super().__init__(engine="lcg")
        self._state = seed

    def random(self) -> float:
        value, self._state = lcg_next(self._state)
        return value


class SystemRandomSource(RandomSource):
    def __init__(self) -> None:
        super().__init__(engine="system")
        self._rng = random.SystemRandom()

    def random(self) -> float:
        return self._rng.random()

    def randrange(self, n: int) -> int:
        return self._rng.randrange(n)


def create_rng(seed: Optional[int]) -> RandomSource:
    seed = check_seed(seed)
    if seed is None:
        return SystemRandomSource()
    return LcgRandomSource(seed)


def shuffled(values: Sequence[T], seed: Optional[int] = None) -> List[T]:
    return create_rng(seed).shuffle(values)


def derive_card_seed(base_seed: Optional[int], index: int) -> Optional[int]:
    """Seed for the ``index``-th card of a batch; ``None`` stays unseeded."""
    if base_seed is None:
        return None
    return base_seed + index * CARD_SEED_STRIDE


def derive_attempt_seed(base_seed: Optional[int], attempt: int) -> Optional[int]:
    # attempt 0 keeps the caller's seed so the first layout is the canonical one
    if base_seed is None or attempt == 0:
        return base_seed
    return (base_seed * 31 + attempt * 7919) % LCG_MODULUS
