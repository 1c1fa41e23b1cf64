#!/usr/bin/env python3
"""
groupgrid Application Starter
Initializes the Application (registry, services) then starts the API server.
"""

import logging
import signal
import sys

import uvicorn

from groupgrid.app import application
from groupgrid.helpers.logging_helper import configure_logging

# Configure logging once for the whole process
configure_logging(application.log_level)


def shutdown_handler(signum, frame):
    """Handle shutdown signals gracefully."""
    logging.info(f"Received signal {signum}, shutting down...")
    application.stop()
    sys.exit(0)


def main() -> None:
    signal.signal(signal.SIGTERM, shutdown_handler)
    signal.signal(signal.SIGINT, shutdown_handler)

    logging.info("[Application] Starting groupgrid Application...")
    application.start()

    logging.info("[API] Listening on http://%s:%d/api/v1", application.api_host, application.api_port)

    try:
        uvicorn.run(
            "groupgrid.interfaces.api.api_app:api_app",
            host=application.api_host,
            port=application.api_port,
            log_level=application.log_level.lower(),
        )
    finally:
        logging.info("API server stopped, cleaning up...")
        application.stop()


if __name__ == "__main__":
    main()
