"""Error handlers mapping editing errors to JSON responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from floorplan.core.errors import (
    DuplicateRoomError, OpeningNotFoundError, RoomNotFoundError,
)
from floorplan.models import WallSide


def register_exception_handlers(app: FastAPI) -> None:
    """Register the floor plan exception handlers with the FastAPI app."""

    @app.exception_handler(RoomNotFoundError)
    async def room_not_found_handler(
        request: Request, exc: RoomNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "room_not_found",
                "details": {"room_id": exc.room_id},
            },
        )

    @app.exception_handler(OpeningNotFoundError)
    async def opening_not_found_handler(
        request: Request, exc: OpeningNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "opening_not_found",
                "details": {
                    "room_id": exc.room_id,
                    "side": WallSide(exc.side).value,
                    "index": exc.index,
                },
            },
        )

    @app.exception_handler(DuplicateRoomError)
    async def duplicate_room_handler(
        request: Request, exc: DuplicateRoomError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=409,
            content={
                "error": str(exc),
                "error_type": "duplicate_room",
                "details": {"room_id": exc.room_id},
            },
        )
