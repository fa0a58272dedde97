"""Rules engine for Vietnamese Lô Tô: card generation, validation and win detection."""

from .authentic import (
    AUTHENTIC_CARDS,
    CARD_CONFIGS,
    CardColor,
    CardConfig,
    get_authentic_card,
    get_authentic_cards,
    get_card_config,
    get_cards_by_color,
    get_predefined_card,
)
from .builder import BuildParams, CardBuilder, generate_card, generate_multiple_cards
from .errors import (
    CardConstructionError,
    CardNotFoundError,
    InvalidParameterError,
    InvalidSeedError,
    LotoError,
    NumberAlreadyCalledError,
    NumberOutOfRangeError,
)
from .layout import COL_RANGES, Card, Cell, column_for_number, column_range
from .numbers import (
    Position,
    call_number,
    find_number_position,
    format_number,
    get_card_numbers,
    get_player_card_numbers,
    get_remaining_numbers,
    has_number,
    random_call_number,
)
from .rng import lcg_next
from .verify import card_violations, validate_card, validate_multiple_cards
from .version import __version__
from .win import (
    CardWinResult,
    ClosestRow,
    WinResult,
    WinType,
    check_four_corners,
    check_full_board,
    check_player_win,
    check_row_win,
    check_two_rows,
    detect_all_wins,
    detect_card_win,
    detect_win,
    get_closest_row,
    get_row_numbers,
    numbers_needed_to_win,
    validate_win_claim,
)

__all__ = [
    "AUTHENTIC_CARDS",
    "CARD_CONFIGS",
    "COL_RANGES",
    "BuildParams",
    "Card",
    "CardBuilder",
    "CardColor",
    "CardConfig",
    "CardConstructionError",
    "CardNotFoundError",
    "CardWinResult",
    "Cell",
    "ClosestRow",
    "InvalidParameterError",
    "InvalidSeedError",
    "LotoError",
    "NumberAlreadyCalledError",
    "NumberOutOfRangeError",
    "Position",
    "WinResult",
    "WinType",
    "__version__",
    "call_number",
    "card_violations",
    "check_four_corners",
    "check_full_board",
    "check_player_win",
    "check_row_win",
    "check_two_rows",
    "column_for_number",
    "column_range",
    "detect_all_wins",
    "detect_card_win",
    "detect_win",
    "find_number_position",
    "format_number",
    "generate_card",
    "generate_multiple_cards",
    "get_authentic_card",
    "get_authentic_cards",
    "get_card_config",
    "get_cards_by_color",
    "get_card_numbers",
    "get_closest_row",
    "get_player_card_numbers",
    "get_predefined_card",
    "get_remaining_numbers",
    "get_row_numbers",
    "has_number",
    "lcg_next",
    "numbers_needed_to_win",
    "random_call_number",
    "validate_card",
    "validate_multiple_cards",
    "validate_win_claim",
]
