from __future__ import annotations

import copy

import pytest
from hypothesis import given, strategies as st

from loto.builder import BuildParams, CardBuilder, generate_card, generate_multiple_cards
from loto.errors import CardConstructionError, InvalidParameterError, InvalidSeedError
from loto.layout import COL_RANGES
from loto.verify import validate_card

seeds = st.integers(min_value=-(10**6), max_value=10**12)


@given(seed=seeds)
def test_generated_card_passes_strict_validation(seed):
    assert validate_card(generate_card(seed), strict=True)


def test_unseeded_card_passes_strict_validation():
    for _ in range(25):
        assert validate_card(generate_card(), strict=True)


@given(seed=seeds)
def test_same_seed_same_card(seed):
    assert generate_card(seed) == generate_card(seed)


@given(seed=seeds)
def test_card_structure(seed):
    card = generate_card(seed)
    assert len(card) == 9
    assert all(len(row) == 9 for row in card)
    for row in card:
        assert sum(1 for x in row if x is not None) == 5
        assert sum(1 for x in row if x is None) == 4
    numbers = [x for row in card for x in row if x is not None]
    assert len(numbers) == 45
    assert len(set(numbers)) == 45
    for c in range(9):
        lo, hi = COL_RANGES[c]
        col_vals = [row[c] for row in card if row[c] is not None]
        assert all(lo <= x <= hi for x in col_vals)
        assert col_vals == sorted(col_vals)
        assert len(col_vals) == 5


def test_seed_zero_is_deterministic():
    assert generate_card(0) == generate_card(0)


def test_different_seeds_usually_differ():
    cards = {str(generate_card(s)) for s in range(1, 11)}
    assert len(cards) > 1


def test_multiple_cards_use_offset_seeds():
    cards = generate_multiple_cards(3, seed=42)
    assert len(cards) == 3
    assert cards[0] == generate_card(42)
    assert cards[1] == generate_card(1042)
    assert cards[2] == generate_card(2042)
    assert cards[0] != cards[1]
    assert cards == generate_multiple_cards(3, seed=42)


def test_multiple_cards_unseeded_are_valid():
    cards = generate_multiple_cards(4)
    assert len(cards) == 4
    assert all(validate_card(card, strict=True) for card in cards)


@pytest.mark.parametrize("count", [0, -1, 1.5, "3", True, None])
def test_invalid_card_count_rejected(count):
    with pytest.raises(InvalidParameterError):
        generate_multiple_cards(count)


def test_invalid_seed_rejected():
    with pytest.raises(InvalidSeedError):
        generate_card("abc")
    with pytest.raises(InvalidSeedError):
        generate_multiple_cards(2, seed=2.5)


def test_builder_reports_metrics():
    result = CardBuilder().build(BuildParams(count=5, seed=7))
    assert len(result.cards) == 5
    assert result.metrics.attempts == [1] * 5
    assert result.metrics.attempts_per_card == 1.0
    assert result.metrics.total_time >= 0.0


def test_builder_rejects_bad_attempt_budget():
    with pytest.raises(InvalidParameterError):
        CardBuilder(max_attempts=0)


def test_builder_gives_up_after_budget(monkeypatch):
    import loto.builder as builder

    monkeypatch.setattr(builder, "_fill_card", lambda rng: [])
    with pytest.raises(CardConstructionError):
        CardBuilder(max_attempts=3).build_card(1)


def test_returned_card_is_not_shared():
    card = generate_card(5)
    snapshot = copy.deepcopy(card)
    card[0][0] = 99
    assert generate_card(5) == snapshot
