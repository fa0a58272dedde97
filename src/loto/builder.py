"""Card generator: builds 9x9 Lô Tô cards, optionally from a seed."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import CardConstructionError, InvalidParameterError
from .layout import COLS, ROWS, Card, build_row_layout, column_pool, layout_is_balanced
from .rng import RandomSource, check_seed, create_rng, derive_attempt_seed, derive_card_seed
from .verify import card_violations

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 20


def _check_positive_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidParameterError(f"{name} must be a positive integer, got {value!r}")
    return value


@dataclass
class BuildParams:
    """Parameters for card generation."""

    count: int = 1
    seed: Optional[int] = None
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    def __post_init__(self) -> None:
        _check_positive_int("Card count", self.count)
        _check_positive_int("max_attempts", self.max_attempts)
        check_seed(self.seed)


@dataclass
class BuildMetrics:
    """Metrics for card generation."""

    total_time: float = 0.0
    attempts: List[int] = field(default_factory=list)

    @property
    def attempts_per_card(self) -> float:
        return sum(self.attempts) / len(self.attempts) if self.attempts else 0.0


@dataclass
class BuildResult:
    """Result of card generation."""

    cards: List[Card]
    metrics: BuildMetrics


def _fill_card(rng: RandomSource) -> Card:
    mask = build_row_layout(rng)
    if not layout_is_balanced(mask):
        return []

    card: Card = [[None] * COLS for _ in range(ROWS)]
    for col in range(COLS):
        rows = [r for r in range(ROWS) if mask[r][col]]
        dealt = rng.shuffle(column_pool(col))[: len(rows)]
        # occupied rows stay put; only the values are reordered ascending
        for r, value in zip(rows, sorted(dealt)):
            card[r][col] = value
    return card


class CardBuilder:
    """Builds cards with bounded retries; every returned card passes strict validation."""

    def __init__(self, max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        self.max_attempts = _check_positive_int("max_attempts", max_attempts)

    def build_card(self, seed: Optional[int] = None) -> tuple[Card, int]:
        """Return ``(card, attempts_used)``."""
        seed = check_seed(seed)
        for attempt in range(self.max_attempts):
            rng = create_rng(derive_attempt_seed(seed, attempt))
            card = _fill_card(rng)
            reasons = card_violations(card, strict=True)
            if not reasons:
                return card, attempt + 1
            logger.debug("Attempt %d for seed %r rejected: %s", attempt, seed, "; ".join(reasons))
        raise CardConstructionError(
            f"Failed to build a valid card within {self.max_attempts} attempts (seed={seed!r})"
        )

    def build(self, params: BuildParams) -> BuildResult:
        start = time.perf_counter()
        metrics = BuildMetrics()
        cards: List[Card] = []
        for i in range(params.count):
            card, attempts = self.build_card(derive_card_seed(params.seed, i))
            cards.append(card)
            metrics.attempts.append(attempts)
        metrics.total_time = time.perf_counter() - start
        logger.debug(
            "Built %d card(s) in %.4fs (%.1f attempts/card)",
            len(cards),
            metrics.total_time,
            metrics.attempts_per_card,
        )
        return BuildResult(cards=cards, metrics=metrics)


def generate_card(seed: Optional[int] = None) -> Card:
    """Generate one card. The same seed always yields the same card."""
    card, _attempts = CardBuilder().build_card(seed)
    return card


def generate_multiple_cards(count: int, seed: Optional[int] = None) -> List[Card]:
    """Generate ``count`` independent cards; card ``i`` uses ``seed + i*1000``."""
    return CardBuilder().build(BuildParams(count=count, seed=seed)).cards
