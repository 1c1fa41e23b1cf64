"""Player API types - Pydantic models for registration and group endpoints.

External API contracts for player endpoints.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, model_validator

if TYPE_CHECKING:
    from groupgrid.helpers.dto.players_dto import GroupResult, PlayerView, RegisterPlayerResult


class RegisterPlayerRequest(BaseModel):
    """Request body for player registration. Omit both coordinates for a random position."""

    x: float | None = Field(None, description="X coordinate on the surface")
    y: float | None = Field(None, description="Y coordinate on the surface")

    @model_validator(mode="after")
    def _both_or_neither(self) -> RegisterPlayerRequest:
        if (self.x is None) != (self.y is None):
            raise ValueError("x and y must be supplied together")
        return self


class RegisterPlayerResponse(BaseModel):
    """Response for player registration."""

    player_id: int = Field(..., description="Newly issued player id")
    x: float = Field(..., description="X coordinate")
    y: float = Field(..., description="Y coordinate")
    group_id: int = Field(..., description="Initial group (equal to player_id)")

    @classmethod
    def from_dto(cls, dto: RegisterPlayerResult) -> RegisterPlayerResponse:
        """Convert RegisterPlayerResult DTO to Pydantic response model."""
        return cls(player_id=dto.player_id, x=dto.x, y=dto.y, group_id=dto.group_id)


class GroupResponse(BaseModel):
    """Response for group query."""

    player_id: int = Field(..., description="Queried player id")
    group_id: int = Field(..., description="Resolved group id")

    @classmethod
    def from_dto(cls, dto: GroupResult) -> GroupResponse:
        """Convert GroupResult DTO to Pydantic response model."""
        return cls(player_id=dto.player_id, group_id=dto.group_id)


class PlayerResponse(BaseModel):
    """A registered player as last resolved."""

    player_id: int
    x: float
    y: float
    group_id: int

    @classmethod
    def from_dto(cls, dto: PlayerView) -> PlayerResponse:
        return cls(player_id=dto.player_id, x=dto.x, y=dto.y, group_id=dto.group_id)


class ListPlayersResponse(BaseModel):
    """Response for player listing."""

    players: list[PlayerResponse]
    total: int

    @classmethod
    def from_dto(cls, dtos: list[PlayerView]) -> ListPlayersResponse:
        return cls(players=[PlayerResponse.from_dto(p) for p in dtos], total=len(dtos))
