"""
Shape catalog handling: validation and normalisation of externally supplied
boolean piece matrices, plus placement helpers.

The catalog itself (which shapes exist) is provided by the caller.
"""

from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np

ShapeLike = Union[np.ndarray, Sequence[Sequence[bool]]]


class InvalidShapeError(ValueError):
    """Raised when a shape is not a non-empty rectangular boolean matrix."""


def normalize_shape(shape: ShapeLike) -> np.ndarray:
    """
    Convert a shape to a read-only 2D boolean array.

    Accepts nested lists (of bools or 0/1 ints) or numpy arrays. Ragged rows,
    empty matrices and matrices without any occupied cell are rejected.
    """
    if isinstance(shape, np.ndarray):
        if (shape.dtype == np.bool_ and shape.ndim == 2 and shape.size
                and not shape.flags.writeable and shape.any()):
            return shape  # already normalised
        array = shape
    else:
        rows = [list(row) for row in shape]
        if not rows or not rows[0]:
            raise InvalidShapeError("Shape must have at least one row and one column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise InvalidShapeError("Shape rows must all have the same length")
        array = np.array(rows)

    if array.ndim != 2:
        raise InvalidShapeError(f"Shape must be 2D, got {array.ndim} dimensions")
    if array.shape[0] == 0 or array.shape[1] == 0:
        raise InvalidShapeError("Shape must have at least one row and one column")

    normalized = array.astype(bool)
    if not normalized.any():
        raise InvalidShapeError("Shape must contain at least one occupied cell")
    normalized.flags.writeable = False
    return normalized


def validate_catalog(shapes: Iterable[ShapeLike]) -> Tuple[np.ndarray, ...]:
    """Validate every shape and return the catalog as an immutable tuple."""
    catalog = []
    for index, shape in enumerate(shapes):
        try:
            catalog.append(normalize_shape(shape))
        except InvalidShapeError as exc:
            raise InvalidShapeError(f"Invalid shape at catalog index {index}: {exc}") from exc
    return tuple(catalog)


def shape_to_offsets(shape: np.ndarray) -> List[Tuple[int, int]]:
    """
    Convert a shape array to a list of (row, col) offsets.

    Offsets are listed in row-major order.
    """
    rows, cols = np.nonzero(shape)
    return [(int(r), int(c)) for r, c in zip(rows, cols)]


def rotate_shape(shape: ShapeLike) -> np.ndarray:
    """Rotate a shape 90 degrees clockwise."""
    return normalize_shape(np.rot90(normalize_shape(shape), k=-1))


def flip_shape(shape: ShapeLike) -> np.ndarray:
    """Mirror a shape horizontally."""
    return normalize_shape(np.fliplr(normalize_shape(shape)))


class PiecePlacement:
    """Helper class for piece placement calculations."""

    @staticmethod
    def get_piece_positions(shape: np.ndarray, anchor_row: int, anchor_col: int) -> List[Tuple[int, int]]:
        """
        Get the board positions that a shape would occupy when placed at anchor position.

        Args:
            shape: 2D boolean array representing the piece
            anchor_row: Row position of the anchor (top-left of the bounding box)
            anchor_col: Column position of the anchor (top-left of the bounding box)

        Returns:
            List of (row, col) tuples representing occupied positions
        """
        return [(anchor_row + i, anchor_col + j) for i, j in shape_to_offsets(shape)]

    @staticmethod
    def get_valid_anchor_positions(board_size: int, shape: np.ndarray) -> List[Tuple[int, int]]:
        """
        All anchors where the shape's bounding box fits on the board, row-major.
        """
        height, width = shape.shape
        return [
            (row, col)
            for row in range(board_size - height + 1)
            for col in range(board_size - width + 1)
        ]
