from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List, Sequence

from .layout import (
    COLS,
    COL_RANGES,
    MAX_NUMBER,
    MIN_NUMBER,
    NUMBERS_PER_CARD,
    NUMBERS_PER_COLUMN,
    NUMBERS_PER_ROW,
    ROWS,
)
from .uniqueness import cards_hash, matrix_hash


def _is_number(cell: object) -> bool:
    return isinstance(cell, int) and not isinstance(cell, bool)


def card_violations(card: Any, *, strict: bool = False) -> List[str]:
    """List every rule the card breaks; an empty list means the card is valid.

    The default checks hold for every printed card: 9x9 shape, numbers in
    1..90 and in their column range, no duplicates, five numbers per row and
    45 in total. ``strict`` adds the rules generated cards follow as well:
    five numbers per column, strictly ascending top to bottom.
    """
    if not isinstance(card, (list, tuple)) or len(card) != ROWS:
        return [f"card must have {ROWS} rows"]
    for r, row in enumerate(card):
        if not isinstance(row, (list, tuple)) or len(row) != COLS:
            return [f"row {r}: must have {COLS} cells"]

    reasons: List[str] = []
    seen: set[int] = set()
    total = 0
    for r, row in enumerate(card):
        count = 0
        for c, cell in enumerate(row):
            if cell is None:
                continue
            if not _is_number(cell) or not MIN_NUMBER <= cell <= MAX_NUMBER:
                reasons.append(f"row {r}, col {c}: {cell!r} is not a number in 1..90")
                continue
            lo, hi = COL_RANGES[c]
            if not lo <= cell <= hi:
                reasons.append(f"row {r}, col {c}: {cell} outside column range {lo}..{hi}")
            if cell in seen:
                reasons.append(f"duplicate number {cell}")
            seen.add(cell)
            count += 1
        total += count
        if count != NUMBERS_PER_ROW:
            reasons.append(f"row {r}: has {count} numbers (must be {NUMBERS_PER_ROW})")
    if total != NUMBERS_PER_CARD:
        reasons.append(f"card has {total} numbers (must be {NUMBERS_PER_CARD})")

    if strict:
        for c in range(COLS):
            col_vals = [row[c] for row in card if _is_number(row[c])]
            if len(col_vals) != NUMBERS_PER_COLUMN:
                reasons.append(
                    f"column {c}: has {len(col_vals)} numbers (must be {NUMBERS_PER_COLUMN})"
                )
            if any(b <= a for a, b in zip(col_vals, col_vals[1:])):
                reasons.append(f"column {c}: not strictly ascending")
    return reasons


def validate_card(card: Any, *, strict: bool = False) -> bool:
    return not card_violations(card, strict=strict)


def validate_multiple_cards(cards: Sequence[Any], *, strict: bool = False) -> bool:
    if not cards:
        return False
    return all(validate_card(card, strict=strict) for card in cards)


def compute_frequencies(cards: Sequence[Sequence[Sequence[Any]]]) -> Dict[int, int]:
    counts: Counter[int] = Counter()
    for card in cards:
        if not isinstance(card, (list, tuple)):
            continue
        for row in card:
            if isinstance(row, (list, tuple)):
                counts.update(x for x in row if _is_number(x))
    for x in range(MIN_NUMBER, MAX_NUMBER + 1):
        counts.setdefault(x, 0)
    return dict(sorted(counts.items()))


def check_no_identical_cards(cards: Sequence[Sequence[Sequence[Any]]]) -> bool:
    seen = set()
    for card in cards:
        h = matrix_hash(card)
        if h in seen:
            return False
        seen.add(h)
    return True


def verify(cards: Sequence[Sequence[Sequence[Any]]], *, strict: bool = False) -> Dict[str, object]:
    per_card: List[Dict[str, object]] = []
    for idx, card in enumerate(cards):
        reasons = card_violations(card, strict=strict)
        per_card.append({"index": idx, "valid": not reasons, "violations": reasons})
    return {
        "strict": strict,
        "card_count": len(cards),
        "cards": per_card,
        "ok_all_valid": bool(cards) and all(entry["valid"] for entry in per_card),
        "ok_no_identical_cards": check_no_identical_cards(cards),
        "frequencies": compute_frequencies(cards),
        "cards_hash": cards_hash(cards),
    }
