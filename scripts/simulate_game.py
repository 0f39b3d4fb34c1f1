"""Reference driver: two players, seed 1234, print every turn."""

from unoturn.engine import UnoGame


def main():
    game = UnoGame(2)  # 2 players
    game.initialize()  # fixed seed shuffle (1234)

    print(game.get_state())
    while not game.is_game_over():
        game.play_turn()
        print(game.get_state())

    print(f"Winner is Player {game.get_winner()}!")

if __name__ == "__main__":
    main()
