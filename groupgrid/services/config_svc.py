#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from defaults, YAML, env vars
#  - Caches composed config for performance
#  - Provides reload() for runtime changes
# ======================================================================

from __future__ import annotations

import logging
import os
from typing import Any

import yaml

from groupgrid.components.players import GroupingConfig, RegistryConfig, SurfaceConfig

ENV_PREFIX = "GROUPGRID_"
ENV_CONFIG_PATH = "GROUPGRID_CONFIG_PATH"
SYSTEM_CONFIG_PATH = "/etc/groupgrid/config.yaml"


class ConfigService:
    """
    Service for loading and caching application configuration.

    Loads config from multiple sources (defaults → YAML → overrides → env),
    caches the result, and provides reload capability.
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        """
        Initialize ConfigService with empty cache.

        Args:
            overrides: Values applied after YAML and before environment variables
        """
        self._config: dict[str, Any] | None = None
        self._overrides = overrides or {}
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a single config value.

        Example:
            >>> service.get("max_players")
            100
        """
        return self.get_config().get(key, default)

    def reload(self) -> dict[str, Any]:
        """
        Force reload configuration from all sources.

        Returns:
            Newly composed config
        """
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    # ----------------------------------------------------------------------
    # Typed config slices
    # ----------------------------------------------------------------------

    def make_registry_config(self) -> RegistryConfig:
        return RegistryConfig(capacity=int(self._require("max_players")))

    def make_grouping_config(self) -> GroupingConfig:
        return GroupingConfig(threshold=float(self._require("grouping_threshold")))

    def make_surface_config(self) -> SurfaceConfig:
        cfg = self.get_config()
        seed = cfg.get("coordinate_seed")
        return SurfaceConfig(
            width=float(self._require("surface_width")),
            height=float(self._require("surface_height")),
            seed=None if seed is None else int(seed),
        )

    def _require(self, key: str) -> Any:
        """Config value that must be present and not null."""
        value = self.get_config().get(key)
        if value is None:
            raise ValueError(f"Config value '{key}' is required")
        return value

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) /etc/groupgrid/config.yaml, then ./config/config.yaml
          3) $GROUPGRID_CONFIG_PATH (if set)
          4) overrides passed to the constructor
          5) Environment variables (GROUPGRID_<KEY>)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        cfg.update(self._load_yaml(SYSTEM_CONFIG_PATH))
        cfg.update(self._load_yaml(os.path.join(os.getcwd(), "config", "config.yaml")))

        env_path = os.getenv(ENV_CONFIG_PATH)
        if env_path:
            cfg.update(self._load_yaml(env_path))

        cfg.update(self._overrides)

        self._apply_env_overrides(cfg)

        self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))
        return cfg

    def _default_config(self) -> dict[str, Any]:
        """
        Base defaults; all fields present so no KeyErrors downstream.
        """
        return {
            # Surface players are placed on
            "surface_width": 10.0,
            "surface_height": 10.0,
            "coordinate_seed": None,  # Optional: fixed seed for reproducible placement
            # Registry and grouping
            "max_players": 100,
            "grouping_threshold": 0.5,
            # API settings
            "host": "localhost",
            "port": 8080,
            "log_level": "INFO",
        }

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML mapping; returns {} if the file is missing.

        A file that exists but is not a mapping is a configuration error.
        """
        if not path or not os.path.exists(path):
            return {}
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
        self._logger.info(f"Loaded config from {path}")
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides of the form:
          GROUPGRID_MAX_PLAYERS=10
          GROUPGRID_GROUPING_THRESHOLD=0.25
          GROUPGRID_HOST=0.0.0.0

        Empty values are ignored.
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX) or k == ENV_CONFIG_PATH:
                continue
            key = k[len(ENV_PREFIX) :].lower()
            if not key or not v.strip():
                continue
            cfg[key] = _parse_env_value(v)


def _parse_env_value(value: str) -> Any:
    """Parse an environment string into bool, int, float or str."""
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if lowered in ("none", "null"):
        return None
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value
