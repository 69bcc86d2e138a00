from .game_session import GameSession
from .store import games, open_game

__all__ = ["GameSession", "games", "open_game"]
