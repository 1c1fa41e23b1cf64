"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class PlayerRegistryError(Exception):
    """Base class for failures reported by the player registry."""


class CapacityExceededError(PlayerRegistryError):
    """Raised when every player id up to the registry capacity has been issued."""

    def __init__(self, capacity: int):
        super().__init__(f"max players reached ({capacity})")
        self.capacity = capacity


class DuplicatePlayerError(PlayerRegistryError):
    """Raised when a player with the same id is already registered."""

    def __init__(self, player_id: int):
        super().__init__(f"player {player_id} already exists")
        self.player_id = player_id


class PlayerNotFoundError(PlayerRegistryError):
    """Raised when looking up a player id that was never registered."""

    def __init__(self, player_id: int):
        super().__init__(f"unknown player {player_id}")
        self.player_id = player_id


class CoordinatesOutOfBoundsError(ValueError):
    """Raised when caller-supplied coordinates fall outside the surface."""

    def __init__(self, x: float, y: float, width: float, height: float):
        super().__init__(f"coordinates ({x}, {y}) outside surface {width}x{height}")
        self.x = x
        self.y = y
        self.width = width
        self.height = height
