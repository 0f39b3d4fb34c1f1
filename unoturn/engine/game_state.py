"""Game state for UNO."""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional, Tuple

from unoturn.engine.card import Card


@dataclass
class GameState:
    """Mutable UNO table state, owned by a single UnoGame."""

    num_players: int
    hands: List[List[Card]]  # player index -> cards, in hand order
    draw_pile: Deque[Card]  # front is drawn first
    discard_pile: List[Card]  # top is last
    current_player: int = 0
    clockwise: bool = True
    history: List[str] = field(default_factory=list)  # Log of events

    def top_discard(self) -> Optional[Card]:
        """Return the top card on the discard pile."""
        return self.discard_pile[-1] if self.discard_pile else None

    def hand_sizes(self) -> Tuple[int, ...]:
        return tuple(len(hand) for hand in self.hands)

    def total_cards(self) -> int:
        """Count every card on the table: draw pile, discard pile and hands."""
        return len(self.draw_pile) + len(self.discard_pile) + sum(self.hand_sizes())

    def copy(self) -> "GameState":
        return GameState(
            num_players=self.num_players,
            hands=[list(hand) for hand in self.hands],
            draw_pile=deque(self.draw_pile),
            discard_pile=list(self.discard_pile),
            current_player=self.current_player,
            clockwise=self.clockwise,
            history=list(self.history),
        )


@dataclass(frozen=True)
class TableView:
    """Public snapshot of the table: everything but the cards in hand."""

    current_player: int
    clockwise: bool
    top_discard: Card
    num_cards_per_player: Tuple[int, ...]
    draw_pile_size: int
    history: Tuple[str, ...]  # Recent game events

    @classmethod
    def from_state(cls, state: GameState) -> "TableView":
        top = state.top_discard()
        if top is None:
            raise ValueError("No card on discard pile")
        return cls(
            current_player=state.current_player,
            clockwise=state.clockwise,
            top_discard=top,
            num_cards_per_player=state.hand_sizes(),
            draw_pile_size=len(state.draw_pile),
            history=tuple(state.history[-10:]),  # Last 10 events
        )

    @property
    def direction(self) -> str:
        return "Clockwise" if self.clockwise else "Counter-clockwise"

    def describe(self) -> str:
        """One-line status: turn, direction, top card and hand sizes."""
        counts = ", ".join(f"P{p}:{n}" for p, n in enumerate(self.num_cards_per_player))
        return (
            f"Player {self.current_player}'s turn, Direction: {self.direction}, "
            f"Top: {self.top_discard}, Players cards: {counts}"
        )
