from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .errors import NumberOutOfRangeError
from .rng import RandomSource

ROWS = 9
COLS = 9
NUMBERS_PER_ROW = 5
NUMBERS_PER_COLUMN = 5
NUMBERS_PER_CARD = ROWS * NUMBERS_PER_ROW
MIN_NUMBER = 1
MAX_NUMBER = 90

Cell = Optional[int]
Card = List[List[Cell]]

# Column ranges (inclusive); the last column is the 11-wide 80..90
COL_RANGES: Tuple[Tuple[int, int], ...] = (
    (1, 9),
    (10, 19),
    (20, 29),
    (30, 39),
    (40, 49),
    (50, 59),
    (60, 69),
    (70, 79),
    (80, 90),
)


def column_range(col: int) -> Tuple[int, int]:
    return COL_RANGES[col]


def column_pool(col: int) -> List[int]:
    lo, hi = COL_RANGES[col]
    return list(range(lo, hi + 1))


def column_for_number(number: int) -> int:
    if not MIN_NUMBER <= number <= MAX_NUMBER:
        raise NumberOutOfRangeError(number)
    return min(number // 10, COLS - 1)


def build_row_layout(rng: RandomSource) -> List[List[bool]]:
    """Decide which cells of a 9x9 card hold a number.

    Each row takes the five least used columns so far, ties broken by ``rng``.
    Nine rows of five over nine columns leaves every column with exactly five.
    """
    usage = [0] * COLS
    mask = [[False] * COLS for _ in range(ROWS)]
    for row in range(ROWS):
        tiebreak = [rng.random() for _ in range(COLS)]
        order = sorted(range(COLS), key=lambda c: (usage[c], tiebreak[c]))
        for col in order[:NUMBERS_PER_ROW]:
            mask[row][col] = True
            usage[col] += 1
    return mask


def layout_column_counts(mask: Sequence[Sequence[bool]]) -> List[int]:
    return [sum(1 for row in mask if row[col]) for col in range(COLS)]


def layout_is_balanced(mask: Sequence[Sequence[bool]]) -> bool:
    if len(mask) != ROWS:
        return False
    if any(sum(1 for cell in row if cell) != NUMBERS_PER_ROW for row in mask):
        return False
    return all(
        count == NUMBERS_PER_COLUMN
        and count <= COL_RANGES[col][1] - COL_RANGES[col][0] + 1
        for col, count in enumerate(layout_column_counts(mask))
    )
