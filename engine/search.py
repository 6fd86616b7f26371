"""
Minimax search with alpha-beta pruning over mobility-evaluated positions.

Scores are always from the root player's point of view. At a maximizing node
the root player moves; at a minimizing node the opponent does. A side with no
legal placement at its turn is scored as a decisive result (``WIN_SCORE``).
"""

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np

from .board import Board, Player
from .evaluation import evaluate_board
from .legality import DEFAULT_POLICY, LegalityPolicy
from .move_generator import LegalMoveGenerator, Move

logger = logging.getLogger(__name__)

WIN_SCORE = 1000
MAX_SEARCH_DEPTH = 8
INFINITY = float("inf")


@dataclass
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0
    evaluations: int = 0
    terminal_nodes: int = 0


@dataclass
class SearchResult:
    move: Optional[Move]
    score: Optional[float]
    root_scores: List[float] = field(default_factory=list)
    stats: SearchStats = field(default_factory=SearchStats)
    elapsed_ms: float = 0.0


def validate_depth(depth: int) -> int:
    if not isinstance(depth, int) or isinstance(depth, bool):
        raise ValueError(f"Search depth must be an integer, got {depth!r}")
    if depth < 1 or depth > MAX_SEARCH_DEPTH:
        raise ValueError(f"Search depth must be between 1 and {MAX_SEARCH_DEPTH}, got {depth}")
    return depth


class MinimaxSearch:
    """
    Depth-limited minimax.

    With ``prune=False`` every sibling is searched; the returned values are the
    same as with pruning, only the node counts differ.
    """

    def __init__(self, policy: LegalityPolicy = DEFAULT_POLICY, prune: bool = True):
        self.generator = LegalMoveGenerator(policy)
        self.prune = prune
        self.stats = SearchStats()

    def minimax(self, board: Board, player: Player, pieces: Sequence[np.ndarray],
                depth: int, alpha: float, beta: float, maximizing: bool) -> int:
        self.stats.nodes += 1
        if depth == 0:
            self.stats.evaluations += 1
            return evaluate_board(board, player, pieces, self.generator)

        mover = player if maximizing else player.opponent
        legal_moves = self.generator.get_legal_moves(board, mover, pieces)
        if not legal_moves:
            self.stats.terminal_nodes += 1
            return -WIN_SCORE if maximizing else WIN_SCORE

        if maximizing:
            best = -INFINITY
            for move in legal_moves:
                child = board.apply(move.positions(), mover)
                score = self.minimax(child, player, pieces, depth - 1, alpha, beta, False)
                best = max(best, score)
                alpha = max(alpha, score)
                if self.prune and beta <= alpha:
                    self.stats.cutoffs += 1
                    break
            return best

        best = INFINITY
        for move in legal_moves:
            child = board.apply(move.positions(), mover)
            score = self.minimax(child, player, pieces, depth - 1, alpha, beta, True)
            best = min(best, score)
            beta = min(beta, score)
            if self.prune and beta <= alpha:
                self.stats.cutoffs += 1
                break
        return best

    def search(self, board: Board, player: Player, pieces: Sequence[np.ndarray],
               depth: int = 2) -> SearchResult:
        """
        Score every root move and keep the first one with the highest score.

        Each root move is searched with a fresh (-inf, +inf) window, so root
        scores are exact and ties keep generation order.
        """
        validate_depth(depth)
        self.stats = SearchStats()
        start = time.perf_counter()

        root_moves = self.generator.get_legal_moves(board, player, pieces)
        best_move: Optional[Move] = None
        best_score = -INFINITY
        root_scores = []
        for move in root_moves:
            child = board.apply(move.positions(), player)
            score = self.minimax(child, player, pieces, depth - 1, -INFINITY, INFINITY, False)
            root_scores.append(score)
            if score > best_score:
                best_score = score
                best_move = move

        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.debug(f"Search: player={player.name}, depth={depth}, root_moves={len(root_moves)}, "
                     f"nodes={self.stats.nodes}, cutoffs={self.stats.cutoffs}, "
                     f"best_score={best_score if best_move is not None else None}, elapsed_ms={elapsed_ms:.2f}")
        return SearchResult(
            move=best_move,
            score=best_score if best_move is not None else None,
            root_scores=root_scores,
            stats=self.stats,
            elapsed_ms=elapsed_ms,
        )
