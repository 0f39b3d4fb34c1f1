"""Game orchestration."""

from unoturn.orchestration.game_runner import GameResult, GameRunner

__all__ = ["GameResult", "GameRunner"]
