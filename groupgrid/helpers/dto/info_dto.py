"""
Info domain DTOs.

Data transfer objects for the system info endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SurfaceInfo:
    """Surface dimensions players are placed on."""

    width: float
    height: float


@dataclass
class RegistryInfo:
    """Registry occupancy."""

    capacity: int
    registered: int
    issued: int


@dataclass
class PublicInfoResult:
    """Result from InfoService.get_public_info."""

    version: str
    surface: SurfaceInfo
    registry: RegistryInfo
    grouping_threshold: float
