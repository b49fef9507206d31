from fifteen.backend.engine.gameplay.events import GameListener
from fifteen.backend.engine.gameplay.game import GameFinishedError, GamePlay

__all__ = ["GameFinishedError", "GameListener", "GamePlay"]
