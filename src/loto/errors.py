"""Exceptions raised by the Lô Tô rules engine."""

from __future__ import annotations


class LotoError(Exception):
    """Base error for the package."""


class InvalidParameterError(LotoError, ValueError):
    """A construction or lookup parameter was rejected."""


class InvalidSeedError(InvalidParameterError, TypeError):
    """Seed is not an integer."""


class NumberOutOfRangeError(LotoError, ValueError):
    """A number fell outside 1..90."""

    def __init__(self, number: object) -> None:
        super().__init__(f"Number must be between 1 and 90, got {number!r}")
        self.number = number


class NumberAlreadyCalledError(LotoError, ValueError):
    def __init__(self, number: int) -> None:
        super().__init__(f"Number already called: {number}")
        self.number = number


class CardNotFoundError(LotoError, LookupError):
    def __init__(self, card_id: object) -> None:
        super().__init__(f"Card ID {card_id!r} not found. Must be between 1 and 16")
        self.card_id = card_id


class CardConstructionError(LotoError, RuntimeError):
    """Generator could not produce a valid card within its attempt budget."""
