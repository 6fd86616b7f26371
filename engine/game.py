"""
Game session: the turn state an orchestrating layer keeps between calls.

The engine functions are stateless; a session threads the current board,
the player to move and the move history through them. Undo restores the
board snapshot taken before the undone move.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, TYPE_CHECKING

from .board import Board, Player
from .controller import DEFAULT_DEPTH, decide
from .evaluation import MobilityScore, compute_mobility, suggest_moves
from .legality import DEFAULT_POLICY, LegalityPolicy
from .move_generator import LegalMoveGenerator, Move
from .pieces import ShapeLike, validate_catalog
from .search import validate_depth

if TYPE_CHECKING:
    from schemas.game_config import EngineConfig

logger = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Raised when a session is asked to play a move its rules reject."""


@dataclass
class MoveRecord:
    turn_number: int
    player: Player
    move: Move
    board_before: Board
    by_ai: bool = False


@dataclass
class GameResult:
    """
    Result of a session.

    Attributes:
        winner: Winning player, None while the game is running
        cells_owned: Number of cells each player covers
    """
    winner: Optional[Player]
    cells_owned: Dict[Player, int] = field(default_factory=dict)


class GameSession:
    """
    A single two-player game.

    RED moves first. A player left without a legal placement at the start of
    their turn loses.
    """

    def __init__(self, board_size: int, pieces: Sequence[ShapeLike],
                 policy: LegalityPolicy = DEFAULT_POLICY, depth: int = DEFAULT_DEPTH):
        self.board = Board.empty(board_size)
        self.pieces = validate_catalog(pieces)
        self.policy = policy
        self.depth = validate_depth(depth)
        self.move_generator = LegalMoveGenerator(policy)
        self.current_player = Player.RED
        self.history: List[MoveRecord] = []
        self.winner: Optional[Player] = None

    @classmethod
    def from_config(cls, config: "EngineConfig", pieces: Sequence[ShapeLike]) -> "GameSession":
        return cls(config.board_size, pieces, policy=config.to_policy(), depth=config.search_depth)

    def legal_moves(self, player: Optional[Player] = None) -> List[Move]:
        player = player or self.current_player
        return self.move_generator.get_legal_moves(self.board, player, self.pieces)

    def mobility(self, player: Optional[Player] = None) -> MobilityScore:
        """Legal placement counts for ``player`` (default: player to move) and the opponent."""
        player = player or self.current_player
        return compute_mobility(self.board, player, self.pieces, self.move_generator)

    def suggest_moves(self, player: Optional[Player] = None) -> List[Move]:
        """Hint moves for ``player`` (default: player to move) that keep the most own placements open."""
        player = player or self.current_player
        return suggest_moves(self.board, player, self.pieces, self.move_generator)

    def is_game_over(self) -> bool:
        return self.winner is not None

    def play_move(self, move: Move) -> Board:
        """
        Play ``move`` for the player to move.

        Raises:
            IllegalMoveError: if the game is over or the placement is not legal
        """
        if self.is_game_over():
            raise IllegalMoveError(f"Game is over; {self.winner.name} won")
        player = self.current_player
        if not self.policy.is_legal(self.board, move, player):
            logger.debug(f"Rejected move for {player.name}: {move}")
            raise IllegalMoveError(f"Illegal placement for {player.name}: {move}")

        self._record(player, move, self.board.apply(move.positions(), player), by_ai=False)
        return self.board

    def play_ai_turn(self) -> Optional[Move]:
        """
        Let the engine choose and play a move for the player to move.

        Returns the move played, or None when the player had no legal move
        (the opponent is then declared winner).
        """
        if self.is_game_over():
            raise IllegalMoveError(f"Game is over; {self.winner.name} won")
        player = self.current_player
        result = decide(self.board, player, self.pieces, self.depth, self.policy)
        if result.winner is not None:
            self.winner = result.winner
            logger.info(f"Game over after {len(self.history)} moves: {self.winner.name} wins")
            return None

        move = result.search.move
        self._record(player, move, result.board, by_ai=True)
        return move

    def forfeit(self, player: Player) -> None:
        """End the game with ``player`` losing."""
        self.winner = player.opponent
        logger.info(f"{player.name} forfeits; {self.winner.name} wins")

    def undo(self) -> Optional[MoveRecord]:
        """Take back the last move, restoring the board and turn before it."""
        if not self.history:
            return None
        record = self.history.pop()
        self.board = record.board_before
        self.current_player = record.player
        self.winner = None
        logger.debug(f"Undid move {record.turn_number} by {record.player.name}")
        return record

    def get_result(self) -> GameResult:
        return GameResult(
            winner=self.winner,
            cells_owned={player: self.board.count_cells(player) for player in Player},
        )

    def _record(self, player: Player, move: Move, new_board: Board, by_ai: bool) -> None:
        self.history.append(MoveRecord(
            turn_number=len(self.history) + 1,
            player=player,
            move=move,
            board_before=self.board,
            by_ai=by_ai,
        ))
        self.board = new_board
        self.current_player = player.opponent

        if not self.move_generator.has_legal_moves(self.board, self.current_player, self.pieces):
            self.winner = player
            logger.info(f"{player.name} wins: no legal moves left for {self.current_player.name}")
