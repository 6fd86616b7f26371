"""
Mobility evaluation.

A position is scored by the difference between the number of legal
placements available to a player and to their opponent. No positional, piece
size or area weighting is applied.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from .board import Board, Player
from .move_generator import LegalMoveGenerator, Move


@dataclass
class MobilityScore:
    player_moves: int
    opponent_moves: int

    @property
    def differential(self) -> int:
        return self.player_moves - self.opponent_moves


def compute_mobility(board: Board, player: Player, pieces: Sequence[np.ndarray],
                     generator: Optional[LegalMoveGenerator] = None) -> MobilityScore:
    """Count legal placements for ``player`` and for their opponent."""
    generator = generator or LegalMoveGenerator()
    return MobilityScore(
        player_moves=generator.count_legal_moves(board, player, pieces),
        opponent_moves=generator.count_legal_moves(board, player.opponent, pieces),
    )


def evaluate_board(board: Board, player: Player, pieces: Sequence[np.ndarray],
                   generator: Optional[LegalMoveGenerator] = None) -> int:
    """Mobility differential from ``player``'s point of view; higher is better."""
    return compute_mobility(board, player, pieces, generator).differential


def suggest_moves(board: Board, player: Player, pieces: Sequence[np.ndarray],
                  generator: Optional[LegalMoveGenerator] = None) -> List[Move]:
    """
    One-ply hint: every legal move that leaves ``player`` the most legal
    placements of their own afterwards.

    Only the mover's mobility counts; the opponent's is ignored. Ties are all
    returned, in generation order. Empty when ``player`` has no legal move.
    """
    generator = generator or LegalMoveGenerator()
    best_moves: List[Move] = []
    best_count = -1
    for move in generator.iter_legal_moves(board, player, pieces):
        child = board.apply(move.positions(), player)
        count = generator.count_legal_moves(child, player, pieces)
        if count > best_count:
            best_count = count
            best_moves = [move]
        elif count == best_count:
            best_moves.append(move)
    return best_moves
