"""
Functional entry points consumed by the presentation layer.

Every function is pure: boards are never mutated and no state is kept
between calls. ``pieces`` may be nested boolean lists or numpy arrays; it is
validated on entry.
"""

from typing import List, Optional, Sequence

from .board import Board, Player
from .controller import DEFAULT_DEPTH, TurnResult, decide
from .evaluation import evaluate_board as _evaluate_board
from .legality import DEFAULT_POLICY, LegalityPolicy
from .move_generator import LegalMoveGenerator, Move
from .pieces import ShapeLike, validate_catalog
from .search import MinimaxSearch


def is_legal_move(board: Board, move: Move, player: Player,
                  policy: LegalityPolicy = DEFAULT_POLICY) -> bool:
    return policy.is_legal(board, move, player)


def generate_legal_moves(board: Board, player: Player, pieces: Sequence[ShapeLike],
                         policy: LegalityPolicy = DEFAULT_POLICY) -> List[Move]:
    return LegalMoveGenerator(policy).get_legal_moves(board, player, validate_catalog(pieces))


def apply_move(board: Board, move: Move, player: Player) -> Board:
    """Return a new board with ``move`` placed for ``player``. The move is not validated."""
    return board.apply(move.positions(), player)


def has_legal_moves(board: Board, player: Player, pieces: Sequence[ShapeLike],
                    policy: LegalityPolicy = DEFAULT_POLICY) -> bool:
    return LegalMoveGenerator(policy).has_legal_moves(board, player, validate_catalog(pieces))


def evaluate_board(board: Board, player: Player, pieces: Sequence[ShapeLike],
                   policy: LegalityPolicy = DEFAULT_POLICY) -> int:
    return _evaluate_board(board, player, validate_catalog(pieces), LegalMoveGenerator(policy))


def minimax(board: Board, player: Player, pieces: Sequence[ShapeLike], depth: int,
            alpha: float, beta: float, maximizing: bool,
            policy: LegalityPolicy = DEFAULT_POLICY) -> int:
    """Score ``board`` for ``player`` searching ``depth`` plies ahead."""
    if depth < 0:
        raise ValueError(f"Search depth must be non-negative, got {depth}")
    return MinimaxSearch(policy).minimax(
        board, player, validate_catalog(pieces), depth, alpha, beta, maximizing
    )


def find_best_move(board: Board, player: Player, pieces: Sequence[ShapeLike],
                   depth: int = DEFAULT_DEPTH,
                   policy: LegalityPolicy = DEFAULT_POLICY) -> Optional[Move]:
    """Best root move for ``player``, or None when there is none."""
    return MinimaxSearch(policy).search(board, player, validate_catalog(pieces), depth).move


def make_ai_turn(board: Board, player: Player, pieces: Sequence[ShapeLike],
                 depth: int = DEFAULT_DEPTH,
                 policy: LegalityPolicy = DEFAULT_POLICY) -> TurnResult:
    return decide(board, player, validate_catalog(pieces), depth, policy)
