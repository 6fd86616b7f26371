"""
Minimax agent: the engine's automated opponent behind the gameplay protocol.
"""

from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

from engine.board import Board, Player
from engine.controller import DEFAULT_DEPTH, TurnResult, decide
from engine.legality import DEFAULT_POLICY, LegalityPolicy
from engine.move_generator import Move
from engine.search import MinimaxSearch, validate_depth


class MinimaxAgent:
    """
    Agent that searches ``depth`` plies with alpha-beta pruning and plays the
    first move with the best mobility score.
    """

    def __init__(self, depth: int = DEFAULT_DEPTH, policy: LegalityPolicy = DEFAULT_POLICY):
        """
        Initialize minimax agent.

        Args:
            depth: Search depth in plies (root move included)
            policy: Legality rules used for every generated move
        """
        self.depth = validate_depth(depth)
        self.policy = policy

    def select_action(self, board: Board, player: Player,
                      pieces: Sequence[np.ndarray]) -> Optional[Move]:
        return MinimaxSearch(self.policy).search(board, player, pieces, self.depth).move

    def choose_move(self, board: Board, player: Player,
                    pieces: Sequence[np.ndarray]) -> Tuple[Optional[Move], Dict[str, Any]]:
        result = MinimaxSearch(self.policy).search(board, player, pieces, self.depth)
        info = {
            "score": result.score,
            "root_moves": len(result.root_scores),
            "nodes": result.stats.nodes,
            "cutoffs": result.stats.cutoffs,
            "elapsed_ms": result.elapsed_ms,
        }
        return result.move, info

    def make_turn(self, board: Board, player: Player,
                  pieces: Sequence[np.ndarray]) -> TurnResult:
        return decide(board, player, pieces, self.depth, self.policy)

    def get_action_info(self) -> Dict[str, Any]:
        """Get information about the agent."""
        return {
            "name": "MinimaxAgent",
            "type": "minimax",
            "description": "Alpha-beta minimax over the mobility differential",
            "depth": self.depth,
            "adjacency_rule": self.policy.adjacency.value,
            "first_move_rule": self.policy.first_move.value,
        }
