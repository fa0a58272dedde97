"""Layouts of the 16 printed Lô Tô cards, transcribed cell by cell.

Printed cards keep the authentic row shape (five numbers per row, column
ranges, 45 distinct numbers) but are not column-sorted, so they validate
under the default rules of ``verify.validate_card`` and not under ``strict``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple

from .errors import CardNotFoundError
from .layout import Card

FrozenCard = Tuple[Tuple[Optional[int], ...], ...]


class CardColor(str, Enum):
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    PURPLE = "purple"
    ORANGE = "orange"
    PINK = "pink"
    CYAN = "cyan"


@dataclass(frozen=True)
class CardConfig:
    id: int
    image_file: str
    color: CardColor
    name: str


_COLORS_IN_ORDER = (
    CardColor.RED,
    CardColor.BLUE,
    CardColor.GREEN,
    CardColor.YELLOW,
    CardColor.PURPLE,
    CardColor.ORANGE,
    CardColor.PINK,
    CardColor.CYAN,
)

# each colour is shared by two consecutive cards
CARD_CONFIGS: Tuple[CardConfig, ...] = tuple(
    CardConfig(
        id=card_id,
        image_file=f"{card_id:02d}.jpg",
        color=_COLORS_IN_ORDER[(card_id - 1) // 2],
        name=f"Card {card_id:02d}",
    )
    for card_id in range(1, 17)
)

_TABLE: dict[int, FrozenCard] = {
    # 01.jpg, printed card no. 20
    1: (
        (None, 19, 28, None, 46, None, 68, 75, None),
        (5, None, 26, 39, None, 58, None, 78, None),
        (None, 14, None, 37, None, 50, 69, None, 84),

        (3, None, 25, None, None, 57, 60, None, 86),
        (None, 16, None, 31, 49, None, None, 77, 89),
        (8, 17, None, None, 48, 59, None, 79, None),

        (None, 15, 20, None, 44, 52, None, 70, None),
        (4, None, None, 33, 41, None, 61, None, 83),
        (9, None, 29, 30, None, None, 62, None, 88),
    ),
    # 02.jpg, printed card no. 23
    2: (
        (None, 18, 22, None, None, 55, None, 76, 87),
        (None, 12, None, 38, 40, None, 66, None, 82),
        (1, None, 27, None, 42, None, None, 73, 85),

        (None, 10, None, 34, None, 56, 63, None, 80),
        (6, None, None, 35, 43, None, 64, 71, None),
        (None, 13, 21, None, None, 54, None, 74, 90),

        (7, None, 24, 32, None, 53, 67, None, None),
        (2, None, None, 36, 47, None, 65, 72, None),
        (None, 11, 23, None, 45, 51, None, None, 81),
    ),
    # 03.jpg, printed card no. 47
    3: (
        (None, 19, None, 32, None, 58, 64, None, 84),
        (None, 13, 20, None, 48, 55, None, 77, None),
        (2, None, 21, None, 46, None, None, 75, 82),

        (6, 18, None, 39, None, None, 62, 70, None),
        (None, None, 25, None, 41, 59, None, 74, 83),
        (None, 17, None, 38, 44, None, 60, None, 86),

        (8, None, 22, None, 47, None, 66, 72, None),
        (9, 12, None, 37, 42, None, None, None, 88),
        (None, 15, None, 36, None, 51, 68, None, 90),
    ),
    # 04.jpg, printed card no. 44
    4: (
        (5, None, 29, 30, None, 56, None, None, 80),
        (None, 10, None, 35, None, 54, 63, None, 81),
        (4, None, 26, None, 45, None, 61, 79, None),

        (3, 14, None, None, 43, 50, None, 71, None),
        (7, None, 23, 31, None, 52, None, 73, None),
        (None, 11, 28, None, 49, None, 69, None, 89),

        (None, None, 24, 34, None, 53, 67, None, 85),
        (None, None, 27, None, 40, 57, None, 76, 87),
        (1, 16, None, 33, None, None, 65, 78, None),
    ),
    # 05.jpg, printed card no. 14
    5: (
        (None, 15, 24, None, 44, None, 64, 79, None),
        (4, None, 29, 30, None, 51, None, 76, None),
        (None, 17, None, 32, None, 53, 63, None, 80),

        (7, None, 23, None, None, 56, 61, None, 85),
        (None, 11, None, 34, 42, None, None, 72, 87),
        (3, 13, None, None, 45, 54, None, 74, None),

        (None, 16, 21, None, 43, 58, None, 78, None),
        (6, None, None, 37, 40, None, 65, None, 82),
        (2, None, 22, 39, None, None, 67, None, 83),
    ),
    # 06.jpg, printed card no. 17
    6: (
        (None, 14, 28, None, None, 50, None, 75, 90),
        (None, 19, None, 31, 49, None, 68, None, 81),
        (5, None, 20, None, 47, None, None, 77, 84),

        (None, 12, None, 38, None, 55, 69, None, 89),
        (1, None, None, 36, 41, None, 66, 71, None),
        (None, 18, 26, None, None, 57, None, 70, 88),

        (8, None, 25, 33, None, 52, 62, None, None),
        (9, None, None, 35, 46, None, 60, 73, None),
        (None, 10, 27, None, 48, 59, None, None, 86),
    ),
    # 07.jpg, printed card no. 5
    7: (
        (None, 12, None, 34, 40, None, None, 75, 89),
        (8, 16, None, None, 42, 55, None, 77, None),
        (5, None, 24, 33, None, None, 67, None, 83),

        (None, 14, 27, None, None, 51, None, 78, 84),
        (None, 18, None, 38, 46, None, 63, None, 81),
        (9, None, None, None, 47, None, 66, 79, 86),

        (4, None, 28, 31, None, 57, None, 72, None),
        (None, 17, None, 36, None, 52, 64, None, 80),
        (None, 19, 23, None, 45, None, 62, 74, None),
    ),
    # 08.jpg, printed card no. 2
    8: (
        (3, 15, None, 32, None, None, 60, 71, None),
        (None, 10, 20, None, 43, 54, None, None, 85),
        (2, None, 26, 35, None, 59, None, 76, None),

        (6, None, None, 39, 49, None, 68, 73, None),
        (None, 13, 29, None, 48, 50, None, None, 88),
        (None, None, 22, 30, None, 53, 65, None, 82),

        (1, None, 25, None, None, 58, 69, None, 90),
        (7, None, 21, None, 41, 56, None, None, 87),
        (None, 11, None, 37, 44, None, 61, 70, None),
    ),
    # 09.jpg, printed card no. 8
    9: (
        (7, 16, None, 32, None, None, 66, 73, None),
        (None, 18, 29, None, 46, 55, None, None, 88),
        (2, None, 23, 34, None, 50, None, 75, None),

        (4, None, None, 30, 40, None, 61, 78, None),
        (None, 10, 27, None, 41, 56, None, None, 86),
        (None, None, 20, 39, None, 59, 60, None, 83),

        (9, None, 24, None, None, 51, 64, None, 81),
        (3, None, 28, None, 48, 53, None, None, 80),
        (None, 17, None, 37, 45, None, 63, 77, None),
    ),
    # 10.jpg, printed card no. 11
    10: (
        (None, 19, None, 35, 49, None, None, 71, 85),
        (8, 14, None, None, 47, 54, None, 74, None),
        (6, None, 25, 36, None, None, 62, None, 84),

        (None, 15, 22, None, None, 58, None, 70, 89),
        (None, 12, None, 31, 43, None, 68, None, 90),
        (1, None, None, None, 42, None, 65, 72, 87),

        (5, None, 21, 38, None, 52, None, 76, None),
        (None, 13, None, 33, None, 57, 67, None, 82),
        (None, 11, 26, None, 44, None, 69, 79, None),
    ),
    # 11.jpg, printed card no. 32
    11: (
        (None, 16, 28, None, 45, None, 68, None, 87),
        (4, None, 29, 35, None, 55, None, 73, None),
        (9, None, None, 30, None, 54, 62, None, 88),

        (1, None, 21, 33, None, 52, None, 76, None),
        (8, None, None, None, 40, 50, None, 79, 81),
        (None, 11, 20, None, 46, None, 63, None, 83),

        (None, None, 27, None, 49, 59, None, 72, 80),
        (2, 19, None, 32, 48, None, 67, None, None),
        (None, 14, 22, None, None, 57, None, 78, 90),
    ),
    # 12.jpg, printed card no. 35
    12: (
        (6, 18, None, None, 47, None, 69, None, 86),
        (None, 13, None, 31, 44, None, 61, 70, None),
        (7, None, 24, 34, None, 56, None, 71, None),

        (5, None, 23, None, 41, None, 65, 74, None),
        (None, 10, None, 37, None, 53, 60, None, 89),
        (None, 17, None, 38, 42, None, None, 75, 84),

        (None, 15, 25, None, None, 51, None, 77, 85),
        (None, 12, None, 36, 43, None, 64, None, 82),
        (3, None, 26, 39, None, 58, 66, None, None),
    ),
    # 13.jpg, printed card no. 26
    13: (
        (None, 13, 22, None, 41, None, 61, None, 86),
        (3, None, 24, 34, None, 52, None, 71, None),
        (1, None, None, 35, None, 56, 64, None, 83),

        (7, None, 23, 36, None, 53, None, 75, None),
        (5, None, None, None, 48, 59, None, 72, 84),
        (None, 14, 28, None, 42, None, 60, None, 87),

        (None, None, 26, None, 47, 50, None, 79, 89),
        (4, 10, None, 30, 49, None, 66, None, None),
        (None, 15, 25, None, None, 51, None, 76, 81),
    ),
    # 14.jpg, printed card no. 29
    14: (
        (9, 16, None, None, 46, None, 65, None, 80),
        (None, 11, None, 32, 45, None, 68, 78, None),
        (8, None, 21, 33, None, 57, None, 73, None),

        (6, None, 20, None, 43, None, 63, 77, None),
        (None, 12, None, 31, None, 54, 62, None, 85),
        (None, 19, None, 39, 40, None, None, 70, 82),

        (None, 18, 29, None, None, 58, None, 74, 90),
        (None, 17, None, 38, 44, None, 69, None, 88),
        (2, None, 27, 37, None, 55, 67, None, None),
    ),
    # 15.jpg, printed card no. 41
    15: (
        (None, 11, None, 35, None, 59, 68, None, 80),
        (None, 17, 24, None, 42, 57, None, 76, None),
        (1, None, 27, None, 48, None, None, 79, 81),

        (7, 16, None, 31, None, None, 65, 77, None),
        (None, None, 23, None, 44, 50, None, 71, 85),
        (None, 14, None, 37, 49, None, 63, None, 88),

        (3, None, 20, None, 46, None, 67, 73, None),
        (8, 12, None, 34, 45, None, None, None, 87),
        (None, 19, None, 39, None, 55, 60, None, 89),
    ),
    # 16.jpg, printed card no. 38
    16: (
        (9, None, 25, 38, None, 53, None, None, 86),
        (None, 15, None, 36, None, 51, 64, None, 90),
        (2, None, 28, None, 47, None, 66, 78, None),

        (5, 10, None, None, 41, 56, None, 72, None),
        (4, None, 22, 33, None, 54, None, 74, None),
        (None, 13, 26, None, 40, None, 61, None, 82),

        (None, None, 29, 30, None, 58, 62, None, 83),
        (None, None, 21, None, 43, 52, None, 75, 84),
        (6, 18, None, 32, None, None, 69, 70, None),
    ),
}

AUTHENTIC_CARDS: Mapping[int, FrozenCard] = MappingProxyType(_TABLE)


def _thaw(card: FrozenCard) -> Card:
    return [list(row) for row in card]


def get_authentic_card(card_id: int) -> Optional[Card]:
    """Return a fresh copy of printed card ``card_id`` (1..16), or None."""
    card = AUTHENTIC_CARDS.get(card_id)
    return None if card is None else _thaw(card)


def get_authentic_cards(card_ids: Iterable[int]) -> List[Card]:
    """Cards for ``card_ids`` in the given order; unknown ids are dropped."""
    return [_thaw(AUTHENTIC_CARDS[i]) for i in card_ids if i in AUTHENTIC_CARDS]


def get_predefined_card(card_id: int) -> Card:
    card = get_authentic_card(card_id)
    if card is None:
        raise CardNotFoundError(card_id)
    return card


def get_card_config(card_id: int) -> Optional[CardConfig]:
    return next((c for c in CARD_CONFIGS if c.id == card_id), None)


def get_cards_by_color(color: CardColor | str) -> List[CardConfig]:
    color = CardColor(color)
    return [c for c in CARD_CONFIGS if c.color is color]
