"""Info API types - Pydantic models for the system info endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from groupgrid.helpers.dto.info_dto import PublicInfoResult


class SurfaceInfoResponse(BaseModel):
    width: float
    height: float


class RegistryInfoResponse(BaseModel):
    capacity: int = Field(..., description="Maximum number of player ids")
    registered: int = Field(..., description="Players currently stored")
    issued: int = Field(..., description="Player ids handed out so far")


class PublicInfoResponse(BaseModel):
    """Response for public info endpoint."""

    version: str = Field(..., description="Application version")
    surface: SurfaceInfoResponse
    registry: RegistryInfoResponse
    grouping_threshold: float = Field(..., description="Per-axis proximity threshold")

    @classmethod
    def from_dto(cls, dto: PublicInfoResult) -> PublicInfoResponse:
        """Convert PublicInfoResult DTO to Pydantic response model."""
        return cls(
            version=dto.version,
            surface=SurfaceInfoResponse(width=dto.surface.width, height=dto.surface.height),
            registry=RegistryInfoResponse(
                capacity=dto.registry.capacity,
                registered=dto.registry.registered,
                issued=dto.registry.issued,
            ),
            grouping_threshold=dto.grouping_threshold,
        )
