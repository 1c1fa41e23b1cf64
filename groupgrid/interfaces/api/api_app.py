"""
FastAPI application setup and configuration.
Main entry point for the groupgrid API service.

Architecture:
- Integration API lives under /api/v1
- No bare paths that don't start with /api
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from groupgrid.__version__ import __version__
from groupgrid.helpers.logging_helper import sanitize_exception_message
from groupgrid.interfaces.api.v1 import public_if


# ----------------------------------------------------------------------
#  App lifecycle
# ----------------------------------------------------------------------
@asynccontextmanager
async def lifespan(_app_instance: FastAPI):
    """
    FastAPI lifespan context manager.

    Note: Application.start() is called by start.py BEFORE uvicorn runs.
    This lifespan is minimal - just handles cleanup on API shutdown.
    """
    from groupgrid.app import application

    logging.info("[API] FastAPI starting (Application already initialized)")

    try:
        yield
    finally:
        logging.info("[API] FastAPI shutting down...")
        application.stop()
        logging.info("[API] Shutdown complete")


# ----------------------------------------------------------------------
#  FastAPI app
# ----------------------------------------------------------------------
api_app = FastAPI(title="groupgrid", version=__version__, lifespan=lifespan)


# Global exception handler
@api_app.exception_handler(Exception)
async def exception_handler(request: Request, exc: Exception):
    logging.error(f"[API] Unhandled exception on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": sanitize_exception_message(exc, "Internal server error")})


# ----------------------------------------------------------------------
#  Routers
# ----------------------------------------------------------------------
integration_router = APIRouter(prefix="/api")
integration_router.include_router(public_if.router, tags=["Integration: Public"])
api_app.include_router(integration_router)
