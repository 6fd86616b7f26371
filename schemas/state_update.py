"""
Pydantic schemas for board and turn state sent to the presentation layer.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from engine.board import Board
from engine.controller import TurnResult
from engine.game import GameSession

from .move import Move, Player


class BoardState(BaseModel):
    """Current state of the game board."""
    size: int = Field(ge=5)
    cells: List[List[Optional[Player]]] = Field(description="Row-major cells, None when empty")

    class Config:
        json_schema_extra = {
            "example": {
                "size": 5,
                "cells": [
                    ["RED", None, None, None, None],
                    [None, None, None, None, None],
                    [None, None, None, None, None],
                    [None, None, None, None, None],
                    [None, None, None, None, "BLUE"]
                ]
            }
        }

    @classmethod
    def from_board(cls, board: Board) -> "BoardState":
        cells = [[Player.from_engine(cell) if cell is not None else None for cell in row]
                 for row in board.to_cells()]
        return cls(size=board.size, cells=cells)

    def to_board(self) -> Board:
        if len(self.cells) != self.size:
            raise ValueError(f"Board has {len(self.cells)} rows, expected size {self.size}")
        return Board.from_cells([[cell.to_engine() if cell is not None else None for cell in row]
                                 for row in self.cells])


class TurnResponse(BaseModel):
    """Response after an automated turn."""
    board: BoardState
    winner: Optional[Player] = None
    score: Optional[float] = Field(default=None, description="Search score of the chosen move")

    @classmethod
    def from_turn_result(cls, result: TurnResult) -> "TurnResponse":
        return cls(
            board=BoardState.from_board(result.board),
            winner=Player.from_engine(result.winner) if result.winner is not None else None,
            score=result.search.score if result.search is not None else None,
        )


class GameState(BaseModel):
    """Snapshot of a game session."""
    board: BoardState
    current_player: Player
    move_count: int = Field(ge=0)
    moves: List[Move] = Field(default_factory=list)
    legal_move_counts: Dict[str, int] = Field(default_factory=dict, description="Legal placements per player")
    game_over: bool = False
    winner: Optional[Player] = None

    @classmethod
    def from_session(cls, session: GameSession) -> "GameState":
        mobility = session.mobility()
        player = session.current_player
        return cls(
            board=BoardState.from_board(session.board),
            current_player=Player.from_engine(player),
            move_count=len(session.history),
            moves=[Move.from_engine(record.move, record.player, record.turn_number)
                   for record in session.history],
            legal_move_counts={
                player.name: mobility.player_moves,
                player.opponent.name: mobility.opponent_moves,
            },
            game_over=session.is_game_over(),
            winner=Player.from_engine(session.winner) if session.winner is not None else None,
        )
