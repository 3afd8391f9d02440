"""
FastAPI application: REST adapter for GitFit.

Usage:
    python run_api.py

Or directly:
    uvicorn gitfit.adapters.rest.app:app --host 0.0.0.0 --port 8000 --reload
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from gitfit import __version__
from gitfit.infrastructure.config import Settings
from gitfit.factory import ServiceFactory
from gitfit.adapters.rest.routers import auth, profile, tracking

logger = logging.getLogger(__name__)

_PROJECT_ROOT = Path(__file__).resolve().parents[4]


def create_app(
    settings: Optional[Settings] = None,
    factory: Optional[ServiceFactory] = None,
) -> FastAPI:
    """Build the API and, when a client build is configured, the SPA shell.

    ``factory`` overrides the one built from ``settings``; tests use it to
    pin the clock.
    """
    settings = settings or (factory.config if factory else Settings.from_env(project_root=_PROJECT_ROOT))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize ServiceFactory on startup."""
        service_factory = factory or ServiceFactory(settings)
        await service_factory.initialize()
        app.state.factory = service_factory
        yield
        # aiosqlite connections are per-operation; nothing to close
        app.state.factory = None

    app = FastAPI(
        title="GitFit",
        version=__version__,
        description="Food and water tracking API.",
        debug=False,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth.router)
    app.include_router(profile.router)
    app.include_router(tracking.router)

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "ok", "version": __version__}

    # Mounted last so API routes win; the client router handles the rest.
    if settings.serves_client:
        app.mount("/", StaticFiles(directory=settings.client_dist_dir, html=True), name="client")
        logger.info("Serving client build from %s", settings.client_dist_dir)

    return app


app = create_app()
