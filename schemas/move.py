"""
Pydantic schemas for moves exchanged with the presentation layer.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from engine.board import Player as EnginePlayer
from engine.move_generator import Move as EngineMove


class Player(str, Enum):
    """Player enumeration."""
    RED = "RED"
    BLUE = "BLUE"

    def to_engine(self) -> EnginePlayer:
        return EnginePlayer[self.value]

    @classmethod
    def from_engine(cls, player: EnginePlayer) -> "Player":
        return cls(player.name)


class MoveRequest(BaseModel):
    """Request to place a shape, possibly rotated or flipped by the caller."""
    player: Player
    anchor_row: int = Field(..., ge=0, description="Row of the shape's top-left corner")
    anchor_col: int = Field(..., ge=0, description="Column of the shape's top-left corner")
    shape: List[List[bool]] = Field(..., min_length=1, description="Occupied cells of the shape")
    piece_index: Optional[int] = Field(default=None, ge=0, description="Catalog index of the shape")

    class Config:
        json_schema_extra = {
            "example": {
                "player": "RED",
                "anchor_row": 0,
                "anchor_col": 0,
                "shape": [[True, True], [True, False]],
                "piece_index": 3
            }
        }

    def to_engine_move(self) -> EngineMove:
        """Build the engine move; raises InvalidShapeError for malformed shapes."""
        return EngineMove.from_shape(self.anchor_row, self.anchor_col, self.shape, self.piece_index)


class Position(BaseModel):
    """Position on the board."""
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)


class Move(BaseModel):
    """A move that was made."""
    player: Player
    anchor_row: int
    anchor_col: int
    piece_index: Optional[int] = None
    positions: List[Position] = Field(description="All positions occupied by this move")
    move_number: int = Field(description="Move number in the game")

    @classmethod
    def from_engine(cls, move: EngineMove, player: EnginePlayer, move_number: int) -> "Move":
        return cls(
            player=Player.from_engine(player),
            anchor_row=move.anchor_row,
            anchor_col=move.anchor_col,
            piece_index=move.piece_index,
            positions=[Position(row=r, col=c) for r, c in move.positions()],
            move_number=move_number,
        )
