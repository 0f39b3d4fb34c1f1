"""UNO rules: dealing, card selection and turn order."""

from collections import deque
from typing import Deque, Iterable, List, Optional, Sequence

from unoturn.engine.card import Card
from unoturn.engine.deck import DEFAULT_SEED, create_deck
from unoturn.engine.errors import InitializationError, InvalidPlayerCountError
from unoturn.engine.game_state import GameState

MIN_PLAYERS = 2
MAX_PLAYERS = 4
HAND_SIZE = 7


def check_player_count(num_players: int) -> None:
    if not MIN_PLAYERS <= num_players <= MAX_PLAYERS:
        raise InvalidPlayerCountError(num_players)


def _take_starter(draw: Deque[Card]) -> Card:
    """Pop the first non-action card; action cards go to the bottom in order."""
    for _ in range(len(draw)):
        card = draw.popleft()
        if not card.is_action:
            return card
        draw.append(card)
    raise InitializationError("Failed to initialize discard pile: no non-action card in deck")


def init_game(num_players: int, seed: Optional[int] = DEFAULT_SEED) -> GameState:
    """Create initial game state: deal 7 cards each, one number card on discard."""
    check_player_count(num_players)

    draw = deque(create_deck(seed=seed))
    hands: List[List[Card]] = [[] for _ in range(num_players)]
    for _ in range(HAND_SIZE):
        for hand in hands:
            if draw:
                hand.append(draw.popleft())

    starter = _take_starter(draw)
    return GameState(
        num_players=num_players,
        hands=hands,
        draw_pile=draw,
        discard_pile=[starter],
        current_player=0,
        clockwise=True,
    )


def can_play(card: Card, top: Card) -> bool:
    """A card can be played on top if it matches by color or by value."""
    return card.color == top.color or card.value == top.value


def choose_card_index(hand: Sequence[Card], top: Card) -> Optional[int]:
    """Pick which card to play, first match in hand order wins.

    1. Same color as top.
    2. Same value as top.
    3. A playable action card. Always caught by 1 or 2 already; kept last.
    """
    for i, card in enumerate(hand):
        if card.color == top.color:
            return i
    for i, card in enumerate(hand):
        if card.value == top.value:
            return i
    for i, card in enumerate(hand):
        if card.is_action and can_play(card, top):
            return i
    return None


def next_player_index(
    current: int,
    num_players: int,
    clockwise: bool,
    skip: int = 0,
) -> int:
    """Step skip + 1 seats from current in the given direction."""
    step = 1 if clockwise else -1
    idx = current
    for _ in range(skip + 1):
        idx = (idx + step) % num_players
    return idx


def has_playable_card(hands: Iterable[Sequence[Card]], top: Card) -> bool:
    return any(can_play(card, top) for hand in hands for card in hand)
