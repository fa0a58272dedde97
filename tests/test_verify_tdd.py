from __future__ import annotations

import copy

import pytest

from loto.authentic import get_authentic_card
from loto.builder import generate_card, generate_multiple_cards
from loto.verify import card_violations, validate_card, validate_multiple_cards, verify


@pytest.fixture
def card():
    return generate_card(2024)


def test_valid_generated_card(card):
    assert validate_card(card)
    assert validate_card(card, strict=True)
    assert card_violations(card, strict=True) == []


def test_rejects_wrong_row_count(card):
    assert not validate_card(card[:8])
    assert not validate_card(card + [[None] * 9])


def test_rejects_wrong_column_count(card):
    bad = copy.deepcopy(card)
    bad[3] = bad[3][:8]
    assert not validate_card(bad)


def test_rejects_zero_and_out_of_range(card):
    bad = copy.deepcopy(card)
    col = next(c for c in range(9) if bad[0][c] is not None)
    bad[0][col] = 0
    assert not validate_card(bad)
    bad[0][col] = 91
    assert not validate_card(bad)


def test_rejects_number_in_wrong_column(card):
    bad = copy.deepcopy(card)
    col = next(c for c in range(1, 9) if bad[0][c] is not None)
    # move a number into column 0, where only 1..9 belong
    bad[0][0], bad[0][col] = bad[0][col], bad[0][0]
    assert any("column range" in r for r in card_violations(bad))


def test_rejects_duplicates(card):
    bad = copy.deepcopy(card)
    c = next(c for c in range(9) if bad[0][c] is not None)
    r = next(r for r in range(1, 9) if bad[r][c] is not None)
    bad[r][c] = bad[0][c]
    assert any("duplicate" in reason for reason in card_violations(bad))


def test_rejects_row_with_wrong_number_count(card):
    bad = copy.deepcopy(card)
    col = next(c for c in range(9) if bad[0][c] is not None)
    bad[0][col] = None
    reasons = card_violations(bad)
    assert any(reason.startswith("row 0") for reason in reasons)
    assert any("44 numbers" in reason for reason in reasons)


def test_rejects_non_integer_cells(card):
    bad = copy.deepcopy(card)
    col = next(c for c in range(9) if bad[0][c] is not None)
    bad[0][col] = float(bad[0][col])
    assert not validate_card(bad)
    bad[0][col] = True
    assert not validate_card(bad)


def test_strict_rejects_unsorted_column(card):
    bad = copy.deepcopy(card)
    rows = [r for r in range(9) if bad[r][4] is not None]
    a, b = rows[0], rows[1]
    bad[a][4], bad[b][4] = bad[b][4], bad[a][4]
    assert validate_card(bad)
    assert not validate_card(bad, strict=True)
    assert "column 4: not strictly ascending" in card_violations(bad, strict=True)


def test_printed_cards_valid_only_in_default_mode():
    printed = get_authentic_card(1)
    assert validate_card(printed)
    assert not validate_card(printed, strict=True)


@pytest.mark.parametrize("junk", [None, 5, "card", [], [[None] * 9] * 9])
def test_junk_never_raises(junk):
    assert validate_card(junk) is False


def test_validate_multiple_cards():
    cards = generate_multiple_cards(3, seed=9)
    assert validate_multiple_cards(cards, strict=True)
    assert not validate_multiple_cards([])
    assert not validate_multiple_cards(cards + [cards[0][:5]])


def test_verify_report():
    cards = generate_multiple_cards(4, seed=11)
    rep = verify(cards, strict=True)
    assert rep["ok_all_valid"] is True
    assert rep["ok_no_identical_cards"] is True
    assert rep["card_count"] == 4
    assert sum(rep["frequencies"].values()) == 4 * 45
    assert str(rep["cards_hash"]).startswith("sha256:")


def test_verify_report_flags_identical_and_invalid():
    card = generate_card(3)
    rep = verify([card, card, card[:3]])
    assert rep["ok_no_identical_cards"] is False
    assert rep["ok_all_valid"] is False
    assert rep["cards"][2]["valid"] is False
