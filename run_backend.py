#!/usr/bin/env python3
"""Start the Floor Plan Engine API server."""

import logging

import uvicorn

from floorplan.api import settings

if __name__ == "__main__":
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(
        "floorplan.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        reload_dirs=["floorplan"],
        log_level=settings.LOG_LEVEL.lower(),
    )
