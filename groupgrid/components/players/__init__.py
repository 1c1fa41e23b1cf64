"""
Players package.
"""

from .coordinates_comp import CoordinateGenerator, SurfaceConfig
from .grouping_comp import GroupingConfig, GroupingEngine
from .proximity_comp import is_nearby
from .registry_comp import PlayerRegistry, RegistryConfig

__all__ = [
    "CoordinateGenerator",
    "GroupingConfig",
    "GroupingEngine",
    "PlayerRegistry",
    "RegistryConfig",
    "SurfaceConfig",
    "is_nearby",
]
