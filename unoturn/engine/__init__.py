"""Game engine for UNO."""

from unoturn.engine.card import Card, Color
from unoturn.engine.deck import DECK_SIZE, DEFAULT_SEED, create_deck
from unoturn.engine.errors import (
    InitializationError,
    InvalidPlayerCountError,
    UninitializedStateError,
    UnoError,
)
from unoturn.engine.game_state import GameState, TableView
from unoturn.engine.rules import (
    can_play,
    choose_card_index,
    init_game,
    next_player_index,
)
from unoturn.engine.turn_engine import NO_WINNER, UnoGame

__all__ = [
    "Card",
    "Color",
    "DECK_SIZE",
    "DEFAULT_SEED",
    "create_deck",
    "UnoError",
    "InvalidPlayerCountError",
    "InitializationError",
    "UninitializedStateError",
    "GameState",
    "TableView",
    "can_play",
    "choose_card_index",
    "init_game",
    "next_player_index",
    "NO_WINNER",
    "UnoGame",
]
