"""Players service - registration and group queries.

Thin orchestration over the registry and grouping engine:
- validates caller-supplied coordinates against the surface
- draws random coordinates when none are supplied
- hands out immutable results, never the shared Player instances
"""

from __future__ import annotations

import logging

from groupgrid.components.players import CoordinateGenerator, GroupingEngine, PlayerRegistry
from groupgrid.helpers.dto.players_dto import GroupResult, Player, PlayerView, RegisterPlayerResult
from groupgrid.helpers.exceptions import CoordinatesOutOfBoundsError

logger = logging.getLogger(__name__)


class PlayersService:
    """Service for registering players and resolving their groups."""

    def __init__(
        self,
        registry: PlayerRegistry,
        grouping: GroupingEngine,
        coordinates: CoordinateGenerator,
    ):
        """Initialize players service.

        Args:
            registry: Shared player registry
            grouping: Grouping engine bound to the same registry
            coordinates: Generator used when callers do not pick a position
        """
        self.registry = registry
        self.grouping = grouping
        self.coordinates = coordinates

    def register_player(self, x: float | None = None, y: float | None = None) -> RegisterPlayerResult:
        """Register a new player.

        Coordinates are generated when both are omitted. Supplying only one
        of them is rejected.

        Raises:
            CoordinatesOutOfBoundsError: Supplied coordinates are outside the surface
            ValueError: Only one of x, y was supplied
            CapacityExceededError: Registry already issued every id
            DuplicatePlayerError: Issued id was already stored
        """
        if x is None and y is None:
            x, y = self.coordinates.next_coordinates()
        elif x is None or y is None:
            raise ValueError("x and y must be supplied together")
        else:
            surface = self.coordinates.cfg
            if not surface.contains(x, y):
                raise CoordinatesOutOfBoundsError(x, y, surface.width, surface.height)

        player_id = self.registry.allocate_id()
        player = Player(player_id=player_id, x=x, y=y)
        self.registry.add(player)

        logger.info(f"[PlayersService] Registered player {player_id} at ({x:.3f}, {y:.3f})")
        return RegisterPlayerResult(player_id=player_id, x=x, y=y, group_id=player_id)

    def get_group(self, player_id: int) -> GroupResult:
        """Resolve the current group of a player.

        Raises:
            PlayerNotFoundError: Unknown player id
        """
        player = self.registry.get(player_id)
        group_id = self.grouping.resolve_group(player)
        return GroupResult(player_id=player_id, group_id=group_id)

    def list_players(self) -> list[PlayerView]:
        """All registered players as immutable views, ordered by id."""
        return self.registry.snapshot()
