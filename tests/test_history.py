"""Unit tests for game history logging."""

from collections import deque

from unoturn.engine import Card, Color, GameState, UnoGame


def _game(hands, top, draw=()):
    state = GameState(
        num_players=len(hands),
        hands=[list(h) for h in hands],
        draw_pile=deque(draw),
        discard_pile=[top],
    )
    return UnoGame.from_state(state)


def test_history_initialization():
    game = UnoGame(2)
    game.initialize()
    assert game.history == []

def test_history_records_play():
    game = _game(
        [[Card(Color.RED, "3"), Card(Color.BLUE, "1"), Card(Color.BLUE, "2")], [Card(Color.GREEN, "2")]],
        Card(Color.RED, "5"),
    )
    game.play_turn()

    assert game.history == ["Player 0 played Red 3"]

def test_history_records_uno_call():
    game = _game([[Card(Color.RED, "3"), Card(Color.BLUE, "1")], [Card(Color.GREEN, "2")]], Card(Color.RED, "5"))
    game.play_turn()

    assert game.history == ["Player 0 played Red 3", "Player 0 called UNO!"]

def test_history_records_draw():
    game = _game(
        [[Card(Color.BLUE, "1")], [Card(Color.GREEN, "2")]],
        Card(Color.RED, "5"),
        draw=[Card(Color.GREEN, "8"), Card(Color.RED, "1")],
    )
    game.play_turn()

    assert game.history[-1] == "Player 0 drew a card"

def test_history_records_draw_two_penalty():
    game = _game(
        [[Card(Color.RED, "Draw Two"), Card(Color.BLUE, "1"), Card(Color.BLUE, "4")], [Card(Color.GREEN, "2")], [Card(Color.RED, "9")]],
        Card(Color.RED, "5"),
        draw=[Card(Color.GREEN, "8")],
    )
    game.play_turn()

    assert game.history == ["Player 0 played Red Draw Two", "Player 1 drew 1 cards (penalty)"]

def test_history_persists_across_turns():
    game = _game(
        [[Card(Color.RED, "3"), Card(Color.BLUE, "1"), Card(Color.BLUE, "3")], [Card(Color.GREEN, "2"), Card(Color.YELLOW, "4")]],
        Card(Color.RED, "5"),
    )
    # Turn 1: P0 plays; turn 2: P1 has no match and the draw pile is empty
    game.play_turn()
    game.play_turn()

    assert game.history == ["Player 0 played Red 3", "Player 1 passed (draw pile empty)"]
    assert game.view().history == tuple(game.history)
