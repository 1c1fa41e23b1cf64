"""
Players domain DTOs.

Data transfer objects for player registration and group resolution.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Player:
    """
    A player stored in the registry.

    Instances held by the registry are shared; group_id is rewritten in place
    by the grouping engine and must only be mutated while the registry map
    lock is held.
    """

    player_id: int
    x: float
    y: float
    group_id: int = -1

    def to_view(self) -> PlayerView:
        return PlayerView(player_id=self.player_id, x=self.x, y=self.y, group_id=self.group_id)


@dataclass(frozen=True)
class PlayerView:
    """Immutable copy of a player handed out beyond the registry lock."""

    player_id: int
    x: float
    y: float
    group_id: int


@dataclass
class RegisterPlayerResult:
    """Result from PlayersService.register_player."""

    player_id: int
    x: float
    y: float
    group_id: int


@dataclass
class GroupResult:
    """Result from PlayersService.get_group."""

    player_id: int
    group_id: int
