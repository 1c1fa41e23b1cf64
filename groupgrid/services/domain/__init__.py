"""Domain services."""

from .players_svc import PlayersService

__all__ = ["PlayersService"]
