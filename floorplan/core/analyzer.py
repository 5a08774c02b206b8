"""Plan analysis — room bounding boxes and wall segments for the validation rules."""

from __future__ import annotations

from floorplan.models import (
    Room, RoomBounds, ValidationContext, WallSegment, WallSide, WALL_SIDES,
)
from floorplan.core.defaults import resolve_wall_defaults, room_dimensions


TOLERANCE = 1.0  # plan units; lets walls touch without counting as overlap


class PlanAnalyzer:
    """Computes unscaled room bounds and wall segments, in room order."""

    def analyze(self, context: ValidationContext) -> None:
        """Run all analysis passes and populate the context."""
        rooms = context.floor_plan.floor.rooms
        context.bounds = [self._room_bounds(room) for room in rooms]
        context.segments = [
            self._wall_segment(room, bounds, side, context)
            for room, bounds in zip(rooms, context.bounds)
            for side in WALL_SIDES
        ]

    def _room_bounds(self, room: Room) -> RoomBounds:
        width, height = room_dimensions(room)
        return RoomBounds(
            id=room.id,
            name=room.display_name,
            x=room.position.x,
            y=room.position.y,
            width=width,
            height=height,
        )

    def _wall_segment(
        self, room: Room, b: RoomBounds, side: WallSide, context: ValidationContext,
    ) -> WallSegment:
        resolved = resolve_wall_defaults(room.walls.get(side), context.floor_plan.defaults)

        if side == WallSide.NORTH:
            x1, y1, x2, y2 = b.x, b.y, b.right, b.y
        elif side == WallSide.SOUTH:
            x1, y1, x2, y2 = b.x, b.bottom, b.right, b.bottom
        elif side == WallSide.EAST:
            x1, y1, x2, y2 = b.right, b.y, b.right, b.bottom
        else:
            x1, y1, x2, y2 = b.x, b.y, b.x, b.bottom

        return WallSegment(
            x1=x1, y1=y1, x2=x2, y2=y2,
            room_id=room.id,
            room_name=b.name,
            side=side,
            exists=resolved.exists,
        )
