"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from floorplan.api import settings
from floorplan.api.exceptions import register_exception_handlers
from floorplan.api.routes import router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Floor Plan Engine",
        description="Geometry, validation and cost estimation for room-based floor plans",
        version="0.1.0",
    )

    # CORS for the browser editor
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(router, prefix="/api")

    return app


app = create_app()
