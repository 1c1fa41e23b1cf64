"""
Public API endpoints for player registration and grouping.
Routes: /api/v1/init/player, /api/v1/group, /api/v1/players, /api/v1/info

ARCHITECTURE:
- These endpoints are thin HTTP boundaries
- All business logic is delegated to services
- Registry errors are translated into HTTP status codes here, nowhere else
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from groupgrid.helpers.exceptions import (
    CapacityExceededError,
    CoordinatesOutOfBoundsError,
    DuplicatePlayerError,
    PlayerNotFoundError,
)
from groupgrid.interfaces.api.dependencies import get_info_service, get_players_service
from groupgrid.interfaces.api.types.info_types import PublicInfoResponse
from groupgrid.interfaces.api.types.player_types import (
    GroupResponse,
    ListPlayersResponse,
    RegisterPlayerRequest,
    RegisterPlayerResponse,
)
from groupgrid.services.domain.players_svc import PlayersService
from groupgrid.services.info_svc import InfoService

# Router instance (will be included in main app under /api prefix)
router = APIRouter(prefix="/v1", tags=["public"])


# ----------------------------------------------------------------------
#  POST /init/player
# ----------------------------------------------------------------------
@router.post("/init/player", status_code=status.HTTP_201_CREATED)
async def init_player(
    request: RegisterPlayerRequest | None = None,
    players_service: PlayersService = Depends(get_players_service),
) -> RegisterPlayerResponse:
    """
    Register a new player.

    Coordinates are optional; when omitted the player is placed at a random
    position on the surface.
    """
    x = request.x if request else None
    y = request.y if request else None
    try:
        result = players_service.register_player(x=x, y=y)
    except (CapacityExceededError, DuplicatePlayerError, CoordinatesOutOfBoundsError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return RegisterPlayerResponse.from_dto(result)


# ----------------------------------------------------------------------
#  GET /group
# ----------------------------------------------------------------------
@router.get("/group")
async def get_group(
    player_id: int = Query(..., ge=0, description="Player id returned by /init/player"),
    players_service: PlayersService = Depends(get_players_service),
) -> GroupResponse:
    """Resolve the group of a player from the current positions of all players."""
    try:
        result = players_service.get_group(player_id)
    except PlayerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return GroupResponse.from_dto(result)


# ----------------------------------------------------------------------
#  GET /players
# ----------------------------------------------------------------------
@router.get("/players")
async def list_players(
    players_service: PlayersService = Depends(get_players_service),
) -> ListPlayersResponse:
    """List registered players with their last resolved group."""
    return ListPlayersResponse.from_dto(players_service.list_players())


# ----------------------------------------------------------------------
#  GET /info
# ----------------------------------------------------------------------
@router.get("/info")
async def get_info(
    info_service: InfoService = Depends(get_info_service),
) -> PublicInfoResponse:
    """Surface dimensions, registry occupancy and grouping threshold."""
    return PublicInfoResponse.from_dto(info_service.get_public_info())
