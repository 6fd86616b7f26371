"""
Random agent that picks uniformly from legal placements.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from engine.board import Board, Player
from engine.legality import DEFAULT_POLICY, LegalityPolicy
from engine.move_generator import LegalMoveGenerator, Move


class RandomAgent:
    """
    Random agent that selects moves uniformly from legal placements.

    Serves as a baseline opponent for the minimax agent.
    """

    def __init__(self, seed: Optional[int] = None, policy: LegalityPolicy = DEFAULT_POLICY):
        """
        Initialize random agent.

        Args:
            seed: Random seed for reproducible behavior
            policy: Legality rules used to list candidate moves
        """
        self.rng = np.random.RandomState(seed)
        self.move_generator = LegalMoveGenerator(policy)

    def select_action(self, legal_moves: List[Move]) -> Optional[Move]:
        if not legal_moves:
            return None
        return legal_moves[self.rng.randint(0, len(legal_moves))]

    def choose_move(self, board: Board, player: Player,
                    pieces: Sequence[np.ndarray]) -> Tuple[Optional[Move], Dict[str, Any]]:
        legal_moves = self.move_generator.get_legal_moves(board, player, pieces)
        return self.select_action(legal_moves), {"legal_moves": len(legal_moves)}

    def get_action_info(self) -> Dict[str, Any]:
        """Get information about the agent."""
        return {
            "name": "RandomAgent",
            "type": "random",
            "description": "Selects moves uniformly from legal placements"
        }

    def set_seed(self, seed: int):
        """Set random seed for reproducible behavior."""
        self.rng = np.random.RandomState(seed)
