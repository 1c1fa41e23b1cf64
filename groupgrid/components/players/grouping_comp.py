"""
Grouping engine - assigns a player the group of the first nearby neighbour.

Neighbours are scanned in ascending id order so results are reproducible.
Grouping is not transitive: A near B and B near C does not put A and C in
the same group unless a resolution happens to propagate it.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from groupgrid.components.players.proximity_comp import is_nearby
from groupgrid.components.players.registry_comp import PlayerRegistry
from groupgrid.helpers.dto.players_dto import Player

logger = logging.getLogger(__name__)


@dataclass
class GroupingConfig:
    """Configuration for GroupingEngine."""

    threshold: float = 0.5

    def __post_init__(self) -> None:
        if not math.isfinite(self.threshold) or self.threshold <= 0:
            raise ValueError(f"threshold must be positive and finite, got {self.threshold}")


class GroupingEngine:
    """Resolves and persists player groups against the current registry state."""

    def __init__(self, registry: PlayerRegistry, cfg: GroupingConfig | None = None):
        self.registry = registry
        self.cfg = cfg or GroupingConfig()

    @property
    def threshold(self) -> float:
        return self.cfg.threshold

    def resolve_group(self, player: Player) -> int:
        """
        Recompute the group of player and write it back.

        Adopts the group of the lowest-id other player within the threshold
        on both axes. Without such a neighbour the player falls back to its
        own id.

        Args:
            player: Shared player instance obtained from the registry

        Returns:
            The group id now stored on player
        """
        with self.registry.locked() as players:
            for other_id in sorted(players):
                if other_id == player.player_id:
                    continue
                other = players[other_id]
                if is_nearby(other.x, other.y, player.x, player.y, self.cfg.threshold):
                    player.group_id = other.group_id
                    logger.debug(
                        f"[GroupingEngine] Player {player.player_id} joined group {player.group_id} via {other_id}"
                    )
                    return player.group_id

            player.group_id = player.player_id
            return player.group_id
