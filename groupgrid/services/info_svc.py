"""
InfoService - System information.

Provides consolidated surface, registry and grouping information for API endpoints.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from groupgrid.components.players import GroupingEngine, PlayerRegistry, SurfaceConfig
from groupgrid.helpers.dto.info_dto import PublicInfoResult, RegistryInfo, SurfaceInfo

logger = logging.getLogger(__name__)


@dataclass
class InfoConfig:
    """Configuration for InfoService."""

    version: str
    surface: SurfaceConfig


class InfoService:
    """Service for system info operations."""

    def __init__(self, cfg: InfoConfig, registry: PlayerRegistry, grouping: GroupingEngine):
        self.cfg = cfg
        self.registry = registry
        self.grouping = grouping

    def get_public_info(self) -> PublicInfoResult:
        return PublicInfoResult(
            version=self.cfg.version,
            surface=SurfaceInfo(width=self.cfg.surface.width, height=self.cfg.surface.height),
            registry=RegistryInfo(
                capacity=self.registry.capacity,
                registered=self.registry.count(),
                issued=self.registry.issued(),
            ),
            grouping_threshold=self.grouping.threshold,
        )
