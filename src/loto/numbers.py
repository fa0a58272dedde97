from __future__ import annotations

from typing import Any, Collection, Iterable, List, NamedTuple, Optional, Sequence, Set

from .errors import NumberAlreadyCalledError, NumberOutOfRangeError
from .layout import MAX_NUMBER, MIN_NUMBER
from .rng import check_seed, create_rng, lcg_next


class Position(NamedTuple):
    row: int
    col: int


def _check_range(number: Any) -> int:
    if isinstance(number, bool) or not isinstance(number, int):
        raise NumberOutOfRangeError(number)
    if not MIN_NUMBER <= number <= MAX_NUMBER:
        raise NumberOutOfRangeError(number)
    return number


def format_number(number: int) -> str:
    return str(_check_range(number))


def get_remaining_numbers(called_numbers: Collection[int]) -> List[int]:
    called = frozenset(called_numbers)
    return [n for n in range(MIN_NUMBER, MAX_NUMBER + 1) if n not in called]


def random_call_number(remaining: Sequence[int], seed: Optional[int] = None) -> Optional[int]:
    """Pick the next number to call from ``remaining``.

    With a seed the pick is one LCG step scaled onto the list, so the same
    seed and list always give the same number. Returns None when nothing is left.
    """
    seed = check_seed(seed)
    if not remaining:
        return None
    if seed is not None:
        value, _ = lcg_next(seed)
        return remaining[int(value * len(remaining))]
    return create_rng(None).choice(remaining)


def call_number(called_numbers: Iterable[int], number: int) -> frozenset[int]:
    """Return a new called set with ``number`` added; the input is left as is."""
    _check_range(number)
    called = frozenset(called_numbers)
    if number in called:
        raise NumberAlreadyCalledError(number)
    return called | {number}


def get_card_numbers(card: Iterable[Iterable[Optional[int]]]) -> List[int]:
    return [cell for row in card for cell in row if cell is not None]


def get_player_card_numbers(cards: Iterable[Iterable[Iterable[Optional[int]]]]) -> Set[int]:
    numbers: Set[int] = set()
    for card in cards:
        numbers.update(get_card_numbers(card))
    return numbers


def find_number_position(
    card: Sequence[Sequence[Optional[int]]], number: int
) -> Optional[Position]:
    for r, row in enumerate(card):
        for c, cell in enumerate(row):
            if cell is not None and cell == number:
                return Position(row=r, col=c)
    return None


def has_number(card: Sequence[Sequence[Optional[int]]], number: int) -> bool:
    return find_number_position(card, number) is not None
