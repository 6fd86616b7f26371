"""
Pydantic schemas exchanged with the presentation layer.
"""

from .game_config import EngineConfig
from .move import MoveRequest, Move, Player, Position
from .state_update import BoardState, GameState, TurnResponse

__all__ = [
    "EngineConfig",
    "MoveRequest",
    "Move",
    "Player",
    "Position",
    "BoardState",
    "GameState",
    "TurnResponse",
]
