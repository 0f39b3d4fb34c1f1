"""Deck creation and shuffling."""

import random
from typing import List, Optional

from unoturn.engine.card import ACTION_VALUES, NUMBER_VALUES, Card, Color

DEFAULT_SEED = 1234
CARDS_PER_COLOR = 1 + 2 * (len(NUMBER_VALUES) - 1 + len(ACTION_VALUES))
DECK_SIZE = CARDS_PER_COLOR * len(Color)


def create_deck(seed: Optional[int] = DEFAULT_SEED) -> List[Card]:
    """Create the 100-card UNO deck used by the engine.

    - 4 colors × one 0: 4 cards
    - 4 colors × two each of 1-9, Skip, Reverse, Draw Two: 96 cards
    - No wild cards

    The deck is shuffled with a Fisher-Yates shuffle seeded by ``seed``,
    so the same seed always produces the same order. ``None`` uses the
    global random state.
    """
    cards: List[Card] = []

    for color in Color:
        # One zero per color
        cards.append(Card(color=color, value="0"))
        for _ in range(2):
            for value in NUMBER_VALUES[1:] + ACTION_VALUES:
                cards.append(Card(color=color, value=value))

    if seed is not None:
        rng = random.Random(seed)
        rng.shuffle(cards)
    else:
        random.shuffle(cards)

    return cards
