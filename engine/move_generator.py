"""
Legal move generator for the Blokus duel engine.

Enumeration order is catalog order, then row-major anchor order. The search
keeps the first of equally scored moves, so this order decides ties and must
stay fixed for reproducible play.
"""

import logging
import os
import time
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .board import Board, Player
from .legality import DEFAULT_POLICY, LegalityPolicy
from .pieces import PiecePlacement, ShapeLike, normalize_shape, shape_to_offsets

logger = logging.getLogger(__name__)

# Debug flag for move generation timing (controlled via environment variable)
MOVEGEN_DEBUG = bool(os.getenv("BLOKUS_MOVEGEN_DEBUG", ""))


@dataclass(frozen=True, eq=False)
class Move:
    """
    A placement: shape anchored with its bounding box top-left at
    (anchor_row, anchor_col).

    ``piece_index`` records which catalog entry the shape came from when the
    move was generated; it does not take part in equality. ``offsets`` are the
    shape's occupied (row, col) cells and are derived from ``shape`` when not
    supplied.
    """
    anchor_row: int
    anchor_col: int
    shape: np.ndarray
    piece_index: Optional[int] = None
    offsets: Optional[Tuple[Tuple[int, int], ...]] = field(default=None, repr=False)

    def __post_init__(self):
        shape = normalize_shape(self.shape)
        object.__setattr__(self, "shape", shape)
        if self.offsets is None:
            object.__setattr__(self, "offsets", tuple(shape_to_offsets(shape)))

    @classmethod
    def from_shape(cls, anchor_row: int, anchor_col: int, shape: ShapeLike,
                   piece_index: Optional[int] = None) -> "Move":
        return cls(anchor_row, anchor_col, normalize_shape(shape), piece_index)

    def positions(self) -> List[Tuple[int, int]]:
        """Board coordinates covered by this move."""
        return [(self.anchor_row + i, self.anchor_col + j) for i, j in self.offsets]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return (self.anchor_row == other.anchor_row
                and self.anchor_col == other.anchor_col
                and np.array_equal(self.shape, other.shape))

    def __hash__(self) -> int:
        return hash((self.anchor_row, self.anchor_col, self.shape.shape, self.shape.tobytes()))

    def __str__(self):
        height, width = self.shape.shape
        return (f"Move(piece_index={self.piece_index}, anchor=({self.anchor_row}, {self.anchor_col}), "
                f"shape={height}x{width}, cells={len(self.offsets)})")


class LegalMoveGenerator:
    """Generates all legal moves for a given board, player and shape catalog."""

    def __init__(self, policy: LegalityPolicy = DEFAULT_POLICY):
        self.policy = policy

    def iter_legal_moves(self, board: Board, player: Player,
                         pieces: Sequence[np.ndarray]) -> Iterator[Move]:
        """Yield legal moves lazily, in catalog then row-major anchor order."""
        opening = self.policy.is_opening(board, player)
        for piece_index, shape in enumerate(pieces):
            offsets = tuple(shape_to_offsets(shape))
            for anchor_row, anchor_col in PiecePlacement.get_valid_anchor_positions(board.size, shape):
                move = Move(anchor_row, anchor_col, shape, piece_index, offsets)
                if self.policy.is_legal(board, move, player, opening):
                    yield move

    def get_legal_moves(self, board: Board, player: Player,
                        pieces: Sequence[np.ndarray]) -> List[Move]:
        """
        Get all legal moves for ``player`` on ``board``.

        Args:
            board: Current board state
            player: Player to generate moves for
            pieces: Validated shape catalog (see ``validate_catalog``)

        Returns:
            List of legal moves
        """
        start = time.perf_counter()
        legal_moves = list(self.iter_legal_moves(board, player, pieces))
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        if MOVEGEN_DEBUG:
            logger.info(f"MoveGen: player={player.name}, legal_moves={len(legal_moves)}, "
                        f"pieces={len(pieces)}, elapsed_ms={elapsed_ms:.2f}")
        else:
            logger.debug(f"Legal move generation: {len(legal_moves)} moves in {elapsed_ms:.2f}ms "
                         f"for player={player.name}, pieces_checked={len(pieces)}")
        return legal_moves

    def has_legal_moves(self, board: Board, player: Player,
                        pieces: Sequence[np.ndarray]) -> bool:
        """Stops at the first legal placement found."""
        return next(self.iter_legal_moves(board, player, pieces), None) is not None

    def count_legal_moves(self, board: Board, player: Player,
                          pieces: Sequence[np.ndarray]) -> int:
        return sum(1 for _ in self.iter_legal_moves(board, player, pieces))
