"""
Gameplay agent protocol shared by the automated players.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Sequence, Tuple

import numpy as np

from engine.board import Board, Player
from engine.move_generator import Move


class GameplayAgentProtocol(Protocol):
    """
    Minimal contract for an automated player: given a board, the player to
    move and the validated shape catalog, return a move (or None when there is
    no legal move) and a dict of diagnostics.
    """

    def choose_move(
        self,
        board: Board,
        player: Player,
        pieces: Sequence[np.ndarray],
    ) -> Tuple[Optional[Move], Dict[str, Any]]:
        ...
