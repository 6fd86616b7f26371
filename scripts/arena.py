"""
Arena script for running matches between the minimax agent and a random agent.
"""

import argparse
import json
import logging
import os
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from agents.gameplay_protocol import GameplayAgentProtocol
from agents.minimax_agent import MinimaxAgent
from agents.random_agent import RandomAgent
from engine.board import Player
from engine.game import GameSession
from engine.legality import AdjacencyRule, FirstMoveRule
from schemas.game_config import EngineConfig
from utils.logging_setup import create_run_directory, setup_logging

logger = logging.getLogger(__name__)

# Small demo catalog; real catalogs come from the caller.
DEMO_PIECES = [
    [[True]],
    [[True, True]],
    [[True], [True]],
    [[True, False], [True, True]],
    [[True, True, True]],
]


class ArenaMatch:
    """A single game between two agents on a fresh session."""

    def __init__(self, config: EngineConfig, pieces: List, red_name: str, red: GameplayAgentProtocol,
                 blue_name: str, blue: GameplayAgentProtocol):
        self.config = config
        self.pieces = pieces
        self.names = {Player.RED: red_name, Player.BLUE: blue_name}
        self.agents = {Player.RED: red, Player.BLUE: blue}

    def play_match(self, max_moves: int = 200) -> Dict[str, Any]:
        start_time = time.time()
        session = GameSession.from_config(self.config, self.pieces)

        while not session.is_game_over() and len(session.history) < max_moves:
            player = session.current_player
            move, info = self.agents[player].choose_move(session.board, player, session.pieces)
            if move is None:
                session.forfeit(player)
                logger.info(f"{self.names[player]} ({player.name}) has no move")
                break
            session.play_move(move)
            logger.debug(f"Move {len(session.history)}: {self.names[player]} {move} info={info}")

        result = session.get_result()
        winner = self.names[result.winner] if result.winner is not None else "unfinished"
        cells_owned = {p.name: n for p, n in result.cells_owned.items()}
        logger.info(f"Match finished: winner={winner}, moves={len(session.history)}, cells={cells_owned}")
        return {
            "red": self.names[Player.RED],
            "blue": self.names[Player.BLUE],
            "winner": winner,
            "moves_made": len(session.history),
            "cells_owned": cells_owned,
            "game_duration": time.time() - start_time,
        }


def run_matches(config: EngineConfig, rounds: int, max_moves: int, seed: Optional[int]) -> List[Dict[str, Any]]:
    policy = config.to_policy()
    minimax = MinimaxAgent(depth=config.search_depth, policy=policy)
    random_agent = RandomAgent(seed=seed, policy=policy)

    results = []
    for round_idx in range(rounds):
        # Alternate colours so each agent opens half of the games
        if round_idx % 2 == 0:
            match = ArenaMatch(config, DEMO_PIECES, "MinimaxAgent", minimax, "RandomAgent", random_agent)
        else:
            match = ArenaMatch(config, DEMO_PIECES, "RandomAgent", random_agent, "MinimaxAgent", minimax)
        results.append(match.play_match(max_moves=max_moves))
    return results


def main():
    """Main function for arena script."""
    parser = argparse.ArgumentParser(description="Blokus duel arena - minimax vs random")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML or JSON engine configuration file")
    parser.add_argument("--board-size", type=int, default=7)
    parser.add_argument("--depth", type=int, default=2)
    parser.add_argument("--rules", choices=["search", "placement"], default="placement",
                        help="Legality rule set when no config file is given")
    parser.add_argument("--rounds", type=int, default=2)
    parser.add_argument("--max-moves", type=int, default=200)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--output-dir", type=str, default=None,
                        help="Write a log file and results.json to a run directory under this path")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    run_dir = create_run_directory(Path(args.output_dir), "arena") if args.output_dir else None
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, run_dir)

    if args.config:
        config = EngineConfig.from_file(args.config)
    elif args.rules == "placement":
        config = EngineConfig(
            board_size=args.board_size,
            search_depth=args.depth,
            adjacency_rule=AdjacencyRule.CORNER_NOT_EDGE,
            first_move_rule=FirstMoveRule.PER_PLAYER_ANY_CORNER,
        )
    else:
        config = EngineConfig(board_size=args.board_size, search_depth=args.depth)
    config.log_config(logger)

    results = run_matches(config, args.rounds, args.max_moves, args.seed)

    if run_dir is not None:
        with open(run_dir / "results.json", "w") as f:
            json.dump(results, f, indent=2)
        logger.info(f"Results saved to {run_dir}")


if __name__ == "__main__":
    main()
