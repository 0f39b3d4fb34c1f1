"""Single game runner."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from unoturn.engine import DEFAULT_SEED, NO_WINNER, UnoGame

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[int]
    num_turns: int
    num_players: int
    final_state: str
    stalemate: bool = False
    truncated: bool = False  # stopped by max_turns before the game ended


class GameRunner:
    """Runs a single UNO game to completion."""

    def __init__(
        self,
        num_players: int = 2,
        seed: Optional[int] = DEFAULT_SEED,
        max_turns: int = 10_000,
        on_turn: Optional[Callable[[UnoGame], None]] = None,
    ):
        self._game = UnoGame(num_players, seed=seed)
        self._max_turns = max_turns
        self._on_turn = on_turn

    @property
    def game(self) -> UnoGame:
        return self._game

    def run(self) -> GameResult:
        """Deal (unless already dealt), play until the game is over, and return the result."""
        game = self._game
        if not game.initialized:
            game.initialize()
        num_turns = 0

        while not game.is_game_over() and num_turns < self._max_turns:
            game.play_turn()
            num_turns += 1
            if self._on_turn is not None:
                self._on_turn(game)

        over = game.is_game_over()
        winner = game.get_winner()
        if not over:
            logger.warning("Stopped after %d turns without a result", num_turns)
        else:
            logger.debug("Game over after %d turns, winner %s", num_turns, winner)

        return GameResult(
            winner=None if winner == NO_WINNER else winner,
            num_turns=num_turns,
            num_players=game.num_players,
            final_state=game.get_state(),
            stalemate=over and winner == NO_WINNER,
            truncated=not over,
        )
