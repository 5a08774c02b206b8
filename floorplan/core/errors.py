"""Exceptions raised by floor plan editing operations.

The geometry, validation and statistics passes never raise for degenerate
plans; these cover edits that address something that is not there.
"""

from __future__ import annotations

from floorplan.models import WallSide


class FloorPlanError(Exception):
    """Base class for floor plan editing errors."""


class RoomNotFoundError(FloorPlanError):
    def __init__(self, room_id: str) -> None:
        self.room_id = room_id
        super().__init__(f"Room not found: {room_id}")


class DuplicateRoomError(FloorPlanError):
    def __init__(self, room_id: str) -> None:
        self.room_id = room_id
        super().__init__(f"Room already exists: {room_id}")


class OpeningNotFoundError(FloorPlanError):
    def __init__(self, room_id: str, side: WallSide, index: int) -> None:
        self.room_id = room_id
        self.side = side
        self.index = index
        super().__init__(
            f"No opening #{index} on the {WallSide(side).value} wall of room {room_id}"
        )
