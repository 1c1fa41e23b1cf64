"""
FastAPI dependency injection helpers.

ARCHITECTURE:
- Endpoints should ONLY inject services, never the registry or grouping engine
- Services encapsulate all business logic
- Endpoints are thin presentation layers that call services and format responses
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException

if TYPE_CHECKING:
    from groupgrid.services.domain.players_svc import PlayersService
    from groupgrid.services.info_svc import InfoService


def get_players_service() -> PlayersService:
    """Get PlayersService instance."""
    from groupgrid.app import application

    service = application.services.get("players")
    if service is None:
        raise HTTPException(status_code=503, detail="Players service not available")
    return service  # type: ignore[no-any-return]


def get_info_service() -> InfoService:
    """Get InfoService instance."""
    from groupgrid.app import application

    service = application.services.get("info")
    if service is None:
        raise HTTPException(status_code=503, detail="Info service not available")
    return service  # type: ignore[no-any-return]
