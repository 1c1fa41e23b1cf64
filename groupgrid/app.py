"""
Application composition root and dependency injection container.

This module defines the Application class, which owns the configuration, the
player registry, the grouping engine and every service built on top of them.

Architecture:
- Application owns: config, registry, grouping engine, coordinate generator, services
- All configuration values are instance attributes (no module-level config globals)
- Services are registered via register_service() during start()
- Access services via: application.get_service("name") or application.services["name"]
- Do NOT construct the registry or services directly outside of this class (tests excepted)

The singleton instance is available as `application` at module level.
"""

from __future__ import annotations

import logging
from typing import Any

from groupgrid.__version__ import __version__
from groupgrid.components.players import CoordinateGenerator, GroupingEngine, PlayerRegistry
from groupgrid.services.config_svc import ConfigService
from groupgrid.services.domain.players_svc import PlayersService
from groupgrid.services.info_svc import InfoConfig, InfoService


# ----------------------------------------------------------------------
#  Application Class - Composition Root & DI Container
# ----------------------------------------------------------------------
class Application:
    """
    Application composition root and dependency injection container.

    The registry is created once here and passed by reference to the grouping
    engine and services; it lives as long as the Application and is never reset.

    Configuration Access:
    - Raw config is PRIVATE (_config) and used only internally in Application
    - To access config outside app.py, use: application.get_service("config").get_config()
    - Prefer using specific instance attributes (api_host, api_port, ...) over raw config
    """

    def __init__(self, config_service: ConfigService | None = None):
        """
        Initialize application with core dependencies.

        Loads configuration and creates the registry and grouping engine
        immediately. Services are registered later during start().

        Args:
            config_service: Pre-built ConfigService (defaults to a fresh one)
        """
        config_service = config_service or ConfigService()
        self._config = config_service.get_config()
        self._config_service = config_service

        # API settings
        self.api_host: str = str(self._config["host"])
        self.api_port: int = int(self._config["port"])
        self.log_level: str = str(self._config.get("log_level", "INFO"))

        # Core dependencies (owned by Application)
        self.surface_cfg = config_service.make_surface_config()
        self.registry = PlayerRegistry(config_service.make_registry_config())
        self.grouping = GroupingEngine(self.registry, config_service.make_grouping_config())
        self.coordinates = CoordinateGenerator(self.surface_cfg)

        # Services container (DI registry)
        self.services: dict[str, Any] = {}

        # State tracking
        self._running = False

    def register_service(self, name: str, service: Any) -> None:
        """
        Register a service in the DI container.

        Args:
            name: Service name for lookup
            service: Service instance
        """
        self.services[name] = service

    def get_service(self, name: str) -> Any:
        """
        Get a service from the DI container.

        Raises:
            KeyError: If service not found
        """
        if name not in self.services:
            raise KeyError(f"Service '{name}' not found. Available services: {list(self.services.keys())}")
        return self.services[name]

    def start(self) -> None:
        """
        Start the application - register all services.

        All dependencies are injected via constructors using instance attributes.
        """
        if self._running:
            logging.warning("[Application] Already running, ignoring start() call")
            return

        logging.info("[Application] Starting...")
        self.register_service("config", self._config_service)

        logging.info("[Application] Initializing PlayersService...")
        players_service = PlayersService(
            registry=self.registry,
            grouping=self.grouping,
            coordinates=self.coordinates,
        )
        self.register_service("players", players_service)

        logging.info("[Application] Initializing InfoService...")
        info_cfg = InfoConfig(version=__version__, surface=self.surface_cfg)
        info_service = InfoService(cfg=info_cfg, registry=self.registry, grouping=self.grouping)
        self.register_service("info", info_service)

        self._running = True
        logging.info(
            "[Application] Started: surface=%sx%s capacity=%d threshold=%s",
            self.surface_cfg.width,
            self.surface_cfg.height,
            self.registry.capacity,
            self.grouping.threshold,
        )

    def stop(self) -> None:
        """Stop the application. Registry contents are process-lifetime and are not persisted."""
        if not self._running:
            return

        logging.info("[Application] Shutting down...")
        self.services.clear()
        self._running = False
        logging.info("[Application] Shutdown complete")

    def is_running(self) -> bool:
        """Check if application is running."""
        return self._running


# ----------------------------------------------------------------------
#  Global application instance
# ----------------------------------------------------------------------
application = Application()
