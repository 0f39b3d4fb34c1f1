"""Errors raised by the UNO engine."""


class UnoError(Exception):
    """Base class for engine errors."""


class InvalidPlayerCountError(UnoError, ValueError):
    """Player count outside the supported 2-4 range."""

    def __init__(self, num_players: int):
        super().__init__(f"Players must be between 2 and 4, got {num_players}")
        self.num_players = num_players


class InitializationError(UnoError, RuntimeError):
    """No valid starting discard card could be found."""


class UninitializedStateError(UnoError, RuntimeError):
    """The game was queried or played before initialize() succeeded."""

    def __init__(self, message: str = "Game has not been initialized; call initialize() first"):
        super().__init__(message)
