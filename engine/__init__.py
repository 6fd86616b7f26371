"""
Two-player Blokus duel engine.

This package contains the core game logic:
- Board values and players
- Shape catalog validation
- Placement legality policies
- Legal move generation
- Mobility evaluation and minimax search
- The automated opponent and a game session for callers that keep state
"""

from .api import (
    apply_move,
    evaluate_board,
    find_best_move,
    generate_legal_moves,
    has_legal_moves,
    is_legal_move,
    make_ai_turn,
    minimax,
)
from .board import Board, Player, Position
from .controller import TurnResult
from .game import GameResult, GameSession, IllegalMoveError
from .legality import (
    DEFAULT_POLICY,
    PLACEMENT_POLICY,
    AdjacencyRule,
    FirstMoveRule,
    LegalityPolicy,
)
from .move_generator import LegalMoveGenerator, Move
from .pieces import InvalidShapeError, flip_shape, rotate_shape, validate_catalog
from .evaluation import suggest_moves
from .search import MAX_SEARCH_DEPTH, WIN_SCORE, MinimaxSearch

__all__ = [
    'Board', 'Player', 'Position',
    'Move', 'LegalMoveGenerator',
    'LegalityPolicy', 'AdjacencyRule', 'FirstMoveRule', 'DEFAULT_POLICY', 'PLACEMENT_POLICY',
    'InvalidShapeError', 'validate_catalog', 'rotate_shape', 'flip_shape',
    'MinimaxSearch', 'WIN_SCORE', 'MAX_SEARCH_DEPTH',
    'TurnResult', 'GameSession', 'GameResult', 'IllegalMoveError',
    'is_legal_move', 'generate_legal_moves', 'apply_move', 'has_legal_moves',
    'evaluate_board', 'minimax', 'find_best_move', 'make_ai_turn', 'suggest_moves',
]
