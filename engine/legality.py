"""
Placement legality rules.

Two rule sets have been used for this game: the search engine's (diagonal
contact only, first move decided by a globally empty board) and the human
placement rules (diagonal contact required, edge contact forbidden, each
player's first piece on any board corner). Both are expressed as a
``LegalityPolicy`` so callers choose explicitly.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

from .board import CORNER_OFFSETS, EDGE_OFFSETS, Board, Player

if TYPE_CHECKING:
    from .move_generator import Move


class AdjacencyRule(str, Enum):
    """How a non-first piece must touch the mover's existing pieces."""
    CORNER_ONLY = "corner_only"
    CORNER_NOT_EDGE = "corner_not_edge"


class FirstMoveRule(str, Enum):
    """How an opening placement is recognised and constrained."""
    # Board entirely empty; anchor must sit on the player's start corner.
    GLOBAL_START_CORNER = "global_start_corner"
    # Player owns nothing yet; some piece cell must cover any board corner.
    PER_PLAYER_ANY_CORNER = "per_player_any_corner"


@dataclass(frozen=True)
class LegalityPolicy:
    adjacency: AdjacencyRule = AdjacencyRule.CORNER_ONLY
    first_move: FirstMoveRule = FirstMoveRule.GLOBAL_START_CORNER

    def is_opening(self, board: Board, player: Player) -> bool:
        """Whether ``player``'s next placement is judged by ``first_move``."""
        if self.first_move is FirstMoveRule.GLOBAL_START_CORNER:
            return board.is_board_empty()
        return not board.has_placed(player)

    def is_legal(self, board: Board, move: "Move", player: Player,
                 opening: Optional[bool] = None) -> bool:
        """
        Check whether ``move`` may be placed by ``player`` on ``board``.

        Rules:
        1. Every occupied shape cell must land on the board
        2. No occupied shape cell may cover a non-empty board cell
        3. Opening placements follow ``first_move``
        4. Later placements follow ``adjacency``

        ``opening`` is ``is_opening(board, player)``; callers checking many
        moves against one board pass it in so the grid is scanned once.

        Illegal placements return False; nothing is raised.
        """
        size = board.size
        grid = board.grid
        player_value = player.value
        touches_corner = False
        touches_edge = False
        covers_board_corner = False
        board_corners = {(pos.row, pos.col) for pos in board.board_corners()}

        for r, c in move.positions():
            if r < 0 or r >= size or c < 0 or c >= size:
                return False
            if grid[r, c] != 0:
                return False

            if (r, c) in board_corners:
                covers_board_corner = True

            for dr, dc in CORNER_OFFSETS:
                nr, nc = r + dr, c + dc
                if 0 <= nr < size and 0 <= nc < size and grid[nr, nc] == player_value:
                    touches_corner = True

            if self.adjacency is AdjacencyRule.CORNER_NOT_EDGE:
                for dr, dc in EDGE_OFFSETS:
                    nr, nc = r + dr, c + dc
                    if 0 <= nr < size and 0 <= nc < size and grid[nr, nc] == player_value:
                        touches_edge = True

        if opening is None:
            opening = self.is_opening(board, player)
        if opening:
            if self.first_move is FirstMoveRule.GLOBAL_START_CORNER:
                corner = board.start_corner(player)
                return move.anchor_row == corner.row and move.anchor_col == corner.col
            return covers_board_corner

        if self.adjacency is AdjacencyRule.CORNER_NOT_EDGE:
            return touches_corner and not touches_edge
        return touches_corner


# Rules used by the search engine.
DEFAULT_POLICY = LegalityPolicy()

# Rules used for human placements.
PLACEMENT_POLICY = LegalityPolicy(
    adjacency=AdjacencyRule.CORNER_NOT_EDGE,
    first_move=FirstMoveRule.PER_PLAYER_ANY_CORNER,
)
