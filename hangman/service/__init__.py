from .client import HangmanClient, HangmanAPIError, GameOutcome, play_game
from .server import GameStore, create_app

__all__ = ["HangmanClient", "HangmanAPIError", "GameOutcome", "play_game",
           "GameStore", "create_app"]
