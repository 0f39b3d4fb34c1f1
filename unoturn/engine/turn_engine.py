"""The UNO turn engine: deals, plays turns and reports status."""

import logging
from typing import List, Optional

from unoturn.engine.card import DRAW_TWO, REVERSE, SKIP, Card
from unoturn.engine.deck import DEFAULT_SEED
from unoturn.engine.errors import UninitializedStateError
from unoturn.engine.game_state import GameState, TableView
from unoturn.engine.rules import (
    can_play,
    check_player_count,
    choose_card_index,
    has_playable_card,
    init_game,
    next_player_index,
)

logger = logging.getLogger(__name__)

NO_WINNER = -1


class UnoGame:
    """Runs a single UNO table with a fixed playing strategy.

    Construct with the player count, call initialize() to deal, then call
    play_turn() until is_game_over() is true.
    """

    def __init__(self, num_players: int, seed: Optional[int] = DEFAULT_SEED):
        check_player_count(num_players)
        self._num_players = num_players
        self._seed = seed
        self._state: Optional[GameState] = None

    @classmethod
    def from_state(cls, state: GameState, seed: Optional[int] = DEFAULT_SEED) -> "UnoGame":
        """Create a game that continues from a copy of an already dealt state."""
        check_player_count(state.num_players)
        if len(state.hands) != state.num_players:
            raise ValueError(f"Expected {state.num_players} hands, got {len(state.hands)}")
        if not state.discard_pile:
            raise ValueError("Discard pile must not be empty")
        if not 0 <= state.current_player < state.num_players:
            raise ValueError(f"Current player out of range: {state.current_player}")
        game = cls(state.num_players, seed=seed)
        game._state = state.copy()
        return game

    @property
    def initialized(self) -> bool:
        return self._state is not None

    @property
    def num_players(self) -> int:
        return self._num_players

    @property
    def state(self) -> GameState:
        if self._state is None:
            raise UninitializedStateError()
        return self._state

    @property
    def history(self) -> List[str]:
        return list(self.state.history)

    def initialize(self) -> None:
        """Build and shuffle the deck, deal 7 cards each and turn up a starter."""
        self._state = init_game(self._num_players, seed=self._seed)
        logger.debug("Dealt %d players, starter %s", self._num_players, self._state.top_discard())

    def is_game_over(self) -> bool:
        state = self.state
        if any(not hand for hand in state.hands):
            return True
        if not state.draw_pile:
            return not has_playable_card(state.hands, state.discard_pile[-1])
        return False

    def get_winner(self) -> int:
        """Return the lowest index with an empty hand, or NO_WINNER."""
        for i, hand in enumerate(self.state.hands):
            if not hand:
                return i
        return NO_WINNER

    def view(self) -> TableView:
        return TableView.from_state(self.state)

    def get_state(self) -> str:
        return self.view().describe()

    def play_turn(self) -> None:
        """Play one turn for the current player; does nothing once the game is over."""
        if self.is_game_over():
            return

        state = self.state
        player = state.current_player
        top = state.discard_pile[-1]
        hand = state.hands[player]

        chosen = choose_card_index(hand, top)
        if chosen is not None:
            played = hand.pop(chosen)
            state.discard_pile.append(played)
            self._log(f"Player {player} played {played}")
            if len(hand) == 1:
                self._log(f"Player {player} called UNO!")
            self._apply_effect(played)
            return

        if not state.draw_pile:
            self._log(f"Player {player} passed (draw pile empty)")
            self._advance(0)
            return

        drawn = state.draw_pile.popleft()
        if can_play(drawn, top):
            state.discard_pile.append(drawn)
            self._log(f"Player {player} drew and played {drawn}")
            self._apply_effect(drawn)
        else:
            hand.append(drawn)
            self._log(f"Player {player} drew a card")
            self._advance(0)

    def _apply_effect(self, card: Card) -> None:
        state = self.state
        if card.value == SKIP:
            self._advance(1)
        elif card.value == REVERSE:
            state.clockwise = not state.clockwise
            # Two players: Reverse acts as Skip
            self._advance(1 if state.num_players == 2 else 0)
        elif card.value == DRAW_TWO:
            victim = next_player_index(state.current_player, state.num_players, state.clockwise)
            drawn = 0
            for _ in range(2):
                if not state.draw_pile:
                    break
                state.hands[victim].append(state.draw_pile.popleft())
                drawn += 1
            self._log(f"Player {victim} drew {drawn} cards (penalty)")
            self._advance(1)
        else:
            self._advance(0)

    def _advance(self, skip: int) -> None:
        state = self.state
        state.current_player = next_player_index(
            state.current_player, state.num_players, state.clockwise, skip=skip
        )

    def _log(self, event: str) -> None:
        self.state.history.append(event)
        logger.debug(event)
