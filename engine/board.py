"""
Two-player Blokus board: an N x N grid of cell ownership treated as a value.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

MIN_BOARD_SIZE = 5


class Player(Enum):
    """Player enumeration."""
    RED = 1
    BLUE = 2

    @property
    def opponent(self) -> "Player":
        return Player.BLUE if self is Player.RED else Player.RED


@dataclass(frozen=True)
class Position:
    """Represents a position on the board."""
    row: int
    col: int


EDGE_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))
CORNER_OFFSETS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


class Board:
    """
    Blokus duel board.

    The grid holds:
    - 0 for an empty cell
    - Player.value (1 = RED, 2 = BLUE) for an owned cell

    A Board never changes after construction. ``apply`` returns a new board
    and the underlying numpy grid is marked read-only, so a board handed to a
    search can be shared freely between plies.
    """

    def __init__(self, size: int, grid: Optional[np.ndarray] = None):
        if size < MIN_BOARD_SIZE:
            raise ValueError(f"Board size must be at least {MIN_BOARD_SIZE}, got {size}")
        if grid is None:
            grid = np.zeros((size, size), dtype=np.int8)
        elif grid.shape != (size, size):
            raise ValueError(f"Grid shape {grid.shape} does not match board size {size}")
        else:
            grid = grid.astype(np.int8, copy=True)
        grid.flags.writeable = False
        self.size = size
        self.grid = grid

    @classmethod
    def empty(cls, size: int) -> "Board":
        return cls(size)

    @classmethod
    def from_cells(cls, cells: Sequence[Sequence[Optional[Player]]]) -> "Board":
        """Build a board from rows of ``None`` / ``Player`` cells."""
        size = len(cells)
        if any(len(row) != size for row in cells):
            raise ValueError("Board cells must form a square grid")
        grid = np.zeros((size, size), dtype=np.int8)
        for r, row in enumerate(cells):
            for c, cell in enumerate(row):
                if cell is not None:
                    grid[r, c] = Player(cell).value
        return cls(size, grid)

    def to_cells(self) -> List[List[Optional[Player]]]:
        """Rows of ``None`` / ``Player`` cells, the form the UI layer renders."""
        return [[self.get_player_at(Position(r, c)) for c in range(self.size)]
                for r in range(self.size)]

    def is_valid_position(self, pos: Position) -> bool:
        """Check if position is within board bounds."""
        return 0 <= pos.row < self.size and 0 <= pos.col < self.size

    def get_cell(self, pos: Position) -> int:
        """Get the value at a position."""
        if not self.is_valid_position(pos):
            return -1  # Invalid position
        return int(self.grid[pos.row, pos.col])

    def get_player_at(self, pos: Position) -> Optional[Player]:
        """Get the player at a position, or None if empty."""
        value = self.get_cell(pos)
        if value <= 0:
            return None
        return Player(value)

    def is_board_empty(self) -> bool:
        """True when nobody has placed anything yet."""
        return not self.grid.any()

    def has_placed(self, player: Player) -> bool:
        return bool(np.any(self.grid == player.value))

    def count_cells(self, player: Player) -> int:
        return int(np.count_nonzero(self.grid == player.value))

    def start_corner(self, player: Player) -> Position:
        """Designated starting corner used by the global first-move rule."""
        if player is Player.RED:
            return Position(0, 0)
        return Position(self.size - 1, self.size - 1)

    def board_corners(self) -> Tuple[Position, ...]:
        last = self.size - 1
        return (Position(0, 0), Position(0, last), Position(last, 0), Position(last, last))

    def apply(self, cells: Iterable[Tuple[int, int]], player: Player) -> "Board":
        """
        Return a new board with ``cells`` owned by ``player``.

        No legality check is made here; callers validate first.
        """
        grid = self.grid.copy()
        for r, c in cells:
            grid[r, c] = player.value
        return Board(self.size, grid)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash((self.size, self.grid.tobytes()))

    def __repr__(self) -> str:
        return f"Board(size={self.size}, red={self.count_cells(Player.RED)}, blue={self.count_cells(Player.BLUE)})"

    def __str__(self) -> str:
        """String representation of the board."""
        symbols = {0: ".", Player.RED.value: "R", Player.BLUE.value: "B"}
        return "\n".join(
            "".join(symbols[int(value)] for value in row) for row in self.grid
        )
