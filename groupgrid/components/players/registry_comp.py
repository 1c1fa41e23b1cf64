"""
Player registry - process-lifetime, thread-safe store of players.

Two locks:
- the map lock guards the players dict and every player's group_id
- the id lock guards the issuance counter, which is independent of map contents
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from groupgrid.helpers.dto.players_dto import Player, PlayerView
from groupgrid.helpers.exceptions import CapacityExceededError, DuplicatePlayerError, PlayerNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class RegistryConfig:
    """Configuration for PlayerRegistry."""

    capacity: int = 100

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError(f"capacity must be positive, got {self.capacity}")


class PlayerRegistry:
    """
    Owns all players and issues unique ids up to a fixed capacity.

    Ids are never reused: the counter only moves forward and there is no
    removal operation.
    """

    def __init__(self, cfg: RegistryConfig | None = None):
        self.cfg = cfg or RegistryConfig()

        self._lock = threading.Lock()
        self._players: dict[int, Player] = {}

        self._id_lock = threading.Lock()
        self._next_id = 0

    @property
    def capacity(self) -> int:
        return self.cfg.capacity

    def allocate_id(self) -> int:
        """
        Issue the next unused player id.

        Returns:
            Newly issued id in [0, capacity)

        Raises:
            CapacityExceededError: If capacity ids have already been issued
        """
        with self._id_lock:
            if self._next_id >= self.cfg.capacity:
                raise CapacityExceededError(self.cfg.capacity)
            player_id = self._next_id
            self._next_id += 1
            return player_id

    def issued(self) -> int:
        """Number of ids handed out so far."""
        with self._id_lock:
            return self._next_id

    def add(self, player: Player) -> None:
        """
        Insert a player keyed by its id and reset its group to its own id.

        Raises:
            DuplicatePlayerError: If a player with that id is already stored
        """
        with self._lock:
            if player.player_id in self._players:
                raise DuplicatePlayerError(player.player_id)
            player.group_id = player.player_id
            self._players[player.player_id] = player
            logger.debug(f"[PlayerRegistry] Added player {player.player_id} at ({player.x:.3f}, {player.y:.3f})")

    def get(self, player_id: int) -> Player:
        """
        Look up a stored player.

        The returned object is the shared instance; pass it to the grouping
        engine rather than mutating it directly.

        Raises:
            PlayerNotFoundError: If no player has that id
        """
        with self._lock:
            player = self._players.get(player_id)
        if player is None:
            raise PlayerNotFoundError(player_id)
        return player

    def count(self) -> int:
        with self._lock:
            return len(self._players)

    def snapshot(self) -> list[PlayerView]:
        """Immutable copies of all players ordered by id."""
        with self._lock:
            return [self._players[pid].to_view() for pid in sorted(self._players)]

    @contextmanager
    def locked(self) -> Iterator[dict[int, Player]]:
        """
        Hold the map lock and expose the live players dict.

        Used by the grouping engine so scan-and-write happens under a single
        acquisition. Callers must not keep the dict after the block exits.
        """
        with self._lock:
            yield self._players
