"""
Automated opponent: one decision per call.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .board import Board, Player
from .legality import DEFAULT_POLICY, LegalityPolicy
from .search import MinimaxSearch, SearchResult

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 2


@dataclass
class TurnResult:
    """
    Outcome of an automated turn.

    Attributes:
        board: Board after the chosen move (unchanged if no move was possible)
        winner: The opponent when the mover had no legal move, otherwise None
        search: Search details for the decision, None when no search ran
    """
    board: Board
    winner: Optional[Player] = None
    search: Optional[SearchResult] = None


def decide(board: Board, player: Player, pieces: Sequence[np.ndarray],
           depth: int = DEFAULT_DEPTH, policy: LegalityPolicy = DEFAULT_POLICY) -> TurnResult:
    """
    Pick and play a move for ``player``.

    A player without a legal placement loses: the board is returned unchanged
    and the opponent is declared winner.
    """
    search = MinimaxSearch(policy)
    if not search.generator.has_legal_moves(board, player, pieces):
        logger.info(f"{player.name} has no legal moves; {player.opponent.name} wins")
        return TurnResult(board=board, winner=player.opponent)

    result = search.search(board, player, pieces, depth)
    if result.move is None:
        logger.info(f"{player.name} found no move to play; {player.opponent.name} wins")
        return TurnResult(board=board, winner=player.opponent, search=result)

    logger.info(f"AI move: player={player.name}, {result.move}, score={result.score}, "
                f"nodes={result.stats.nodes}, elapsed_ms={result.elapsed_ms:.1f}")
    return TurnResult(
        board=board.apply(result.move.positions(), player),
        winner=None,
        search=result,
    )
