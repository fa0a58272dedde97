"""Win detection over one card or a player's ordered list of cards.

Only the row win belongs to authentic Lô Tô: all five numbers of one
horizontal row have been called. Malformed cards or rows never raise here;
they simply cannot contribute a win, so one bad card does not hide a real
win on another.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Collection, Dict, List, NamedTuple, Optional, Sequence, Tuple

from .errors import InvalidParameterError
from .layout import COLS, NUMBERS_PER_CARD, NUMBERS_PER_ROW, ROWS


class WinType(str, Enum):
    ROW = "row"
    # legacy categories, never produced by check_player_win
    TWO_ROWS = "twoRows"
    FOUR_CORNERS = "fourCorners"
    FULL_BOARD = "fullBoard"


@dataclass(frozen=True)
class WinResult:
    card_index: int
    row_indices: Tuple[int, ...]
    type: WinType = WinType.ROW
    winning_numbers: Tuple[int, ...] = ()

    def to_dict(self) -> Dict[str, object]:
        return {
            "cardIndex": self.card_index,
            "rowIndices": list(self.row_indices),
            "type": self.type.value,
            "winningNumbers": list(self.winning_numbers),
        }


@dataclass(frozen=True)
class CardWinResult:
    card_index: int
    row_index: int
    type: WinType
    winning_numbers: Tuple[int, ...]

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["type"] = self.type.value
        data["winning_numbers"] = list(self.winning_numbers)
        return data


class ClosestRow(NamedTuple):
    row_index: int
    numbers_needed: int


def _is_card(card: Any) -> bool:
    return isinstance(card, (list, tuple)) and len(card) == ROWS


def _is_row(row: Any) -> bool:
    return isinstance(row, (list, tuple)) and len(row) == COLS


def _is_number(cell: object) -> bool:
    return isinstance(cell, int) and not isinstance(cell, bool)


def _row_numbers(row: Sequence[Any]) -> List[int]:
    # junk cells (lists, strings, floats) are never numbers and never win
    return [cell for cell in row if _is_number(cell)]


def _is_complete_row(numbers: List[int]) -> bool:
    return len(numbers) == NUMBERS_PER_ROW and len(set(numbers)) == NUMBERS_PER_ROW


def get_row_numbers(card: Any, row_index: int) -> List[int]:
    if not isinstance(card, (list, tuple)) or not 0 <= row_index < len(card):
        return []
    row = card[row_index]
    if not isinstance(row, (list, tuple)):
        return []
    return _row_numbers(row)


def check_row_win(card: Any, called_numbers: Collection[int]) -> List[int]:
    """Indices of every row whose five numbers have all been called."""
    if not _is_card(card):
        return []
    called = called_numbers if isinstance(called_numbers, (set, frozenset)) else set(called_numbers)
    winning: List[int] = []
    for r, row in enumerate(card):
        if not _is_row(row):
            continue
        numbers = _row_numbers(row)
        if _is_complete_row(numbers) and all(n in called for n in numbers):
            winning.append(r)
    return winning


def check_player_win(
    cards: Sequence[Any], called_numbers: Collection[int]
) -> Optional[WinResult]:
    """First card, in the player's order, holding a completed row."""
    if not cards:
        return None
    called = frozenset(called_numbers)
    for index, card in enumerate(cards):
        rows = check_row_win(card, called)
        if rows:
            return WinResult(
                card_index=index,
                row_indices=tuple(rows),
                type=WinType.ROW,
                winning_numbers=tuple(get_row_numbers(card, rows[0])),
            )
    return None


def detect_win(cards: Sequence[Any], called_numbers: Collection[int]) -> Optional[CardWinResult]:
    result = check_player_win(cards, called_numbers)
    if result is None:
        return None
    return CardWinResult(
        card_index=result.card_index,
        row_index=result.row_indices[0],
        type=result.type,
        winning_numbers=result.winning_numbers,
    )


def detect_card_win(card: Any, called_numbers: Collection[int]) -> Optional[CardWinResult]:
    return detect_win([card], called_numbers)


def detect_all_wins(cards: Sequence[Any], called_numbers: Collection[int]) -> List[CardWinResult]:
    """Every winning row of every card, one entry per row."""
    called = frozenset(called_numbers)
    return [
        CardWinResult(
            card_index=index,
            row_index=r,
            type=WinType.ROW,
            winning_numbers=tuple(get_row_numbers(card, r)),
        )
        for index, card in enumerate(cards or [])
        for r in check_row_win(card, called)
    ]


def validate_win_claim(
    cards: Sequence[Any], card_index: int, called_numbers: Collection[int]
) -> Optional[WinResult]:
    """Check a player's claim that card ``card_index`` holds a completed row."""
    if isinstance(card_index, bool) or not isinstance(card_index, int):
        raise InvalidParameterError(f"Invalid card index: {card_index!r}")
    if not 0 <= card_index < len(cards):
        raise InvalidParameterError(f"Invalid card index: {card_index}")
    result = check_player_win([cards[card_index]], called_numbers)
    if result is None:
        return None
    return WinResult(
        card_index=card_index,
        row_indices=result.row_indices,
        type=result.type,
        winning_numbers=result.winning_numbers,
    )


def get_closest_row(card: Any, called_numbers: Collection[int]) -> Optional[ClosestRow]:
    """Row needing the fewest further calls; lowest index wins a tie."""
    if not _is_card(card):
        return None
    called = frozenset(called_numbers)
    best: Optional[ClosestRow] = None
    for r, row in enumerate(card):
        if not _is_row(row):
            continue
        numbers = _row_numbers(row)
        distinct = set(numbers)
        missing = max(0, NUMBERS_PER_ROW - len(distinct))
        needed = sum(1 for n in distinct if n not in called) + missing
        # a short or repeated row can never be completed, so it never reaches zero
        if not _is_complete_row(numbers):
            needed = max(needed, 1)
        if best is None or needed < best.numbers_needed:
            best = ClosestRow(row_index=r, numbers_needed=needed)
            if needed == 0:
                break
    return best


def numbers_needed_to_win(card: Any, called_numbers: Collection[int]) -> Optional[int]:
    """Fewest uncalled numbers in any row; 0 means won, None means no usable row."""
    closest = get_closest_row(card, called_numbers)
    return None if closest is None else closest.numbers_needed


# Legacy checks below are not part of authentic Lô Tô.


def check_two_rows(card: Any, called_numbers: Collection[int]) -> bool:
    return len(check_row_win(card, called_numbers)) >= 2


def check_four_corners(card: Any, called_numbers: Collection[int]) -> bool:
    if not _is_card(card) or not (_is_row(card[0]) and _is_row(card[-1])):
        return False
    corners = [card[0][0], card[0][-1], card[-1][0], card[-1][-1]]
    numbers = [c for c in corners if _is_number(c)]
    return bool(numbers) and all(n in called_numbers for n in numbers)


def check_full_board(card: Any, called_numbers: Collection[int]) -> bool:
    if not _is_card(card) or not all(_is_row(row) for row in card):
        return False
    numbers = [n for row in card for n in _row_numbers(row)]
    if len(numbers) != NUMBERS_PER_CARD:
        return False
    called = frozenset(called_numbers)
    return all(n in called for n in numbers)
