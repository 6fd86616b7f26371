"""
Pydantic schemas for engine configuration.
"""

import json
import logging
from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, Field

from engine.legality import AdjacencyRule, FirstMoveRule, LegalityPolicy
from engine.search import MAX_SEARCH_DEPTH

MAX_BOARD_SIZE = 1000


class EngineConfig(BaseModel):
    """Configuration for a Blokus duel game and its automated opponent."""
    board_size: int = Field(default=15, ge=5, le=MAX_BOARD_SIZE, description="Board edge length")
    search_depth: int = Field(default=2, ge=1, le=MAX_SEARCH_DEPTH, description="Minimax depth in plies")
    adjacency_rule: AdjacencyRule = Field(
        default=AdjacencyRule.CORNER_ONLY,
        description="Contact rule for pieces after a player's first",
    )
    first_move_rule: FirstMoveRule = Field(
        default=FirstMoveRule.GLOBAL_START_CORNER,
        description="How opening placements are constrained",
    )

    class Config:
        json_schema_extra = {
            "example": {
                "board_size": 15,
                "search_depth": 2,
                "adjacency_rule": "corner_only",
                "first_move_rule": "global_start_corner"
            }
        }

    def to_policy(self) -> LegalityPolicy:
        return LegalityPolicy(adjacency=self.adjacency_rule, first_move=self.first_move_rule)

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "EngineConfig":
        """Load configuration from a YAML or JSON file."""
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                config_dict = yaml.safe_load(f) or {}
            elif config_path.suffix.lower() == ".json":
                config_dict = json.load(f)
            else:
                raise ValueError(f"Unsupported config file format: {config_path.suffix}")

        return cls(**config_dict)

    def save_to_file(self, config_path: Union[str, Path]) -> None:
        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_dict = self.model_dump(mode="json")

        with open(config_path, "w") as f:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
            elif config_path.suffix.lower() == ".json":
                json.dump(config_dict, f, indent=2, sort_keys=False)
            else:
                raise ValueError(f"Unsupported config file format: {config_path.suffix}")

    def log_config(self, logger: logging.Logger) -> None:
        logger.info("=" * 60)
        logger.info("Engine Configuration")
        logger.info("=" * 60)
        logger.info(f"Board Size: {self.board_size}")
        logger.info(f"Search Depth: {self.search_depth}")
        logger.info(f"Adjacency Rule: {self.adjacency_rule.value}")
        logger.info(f"First Move Rule: {self.first_move_rule.value}")
        logger.info("=" * 60)
