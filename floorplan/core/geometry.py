"""Geometry calculator — turns rooms' relative wall lengths into absolute segments."""

from __future__ import annotations
import logging

from floorplan.models import (
    Defaults, FloorGeometry, FloorPlan, OpeningGeometry, Room, RoomGeometry,
    WallGeometry, WallSide, WALL_SIDES,
)
from floorplan.core.defaults import (
    DEFAULT_SCALE, resolve_opening_defaults, resolve_wall_defaults, room_dimensions,
)

logger = logging.getLogger(__name__)


def calculate_floor_geometry(floor_plan: FloorPlan) -> FloorGeometry:
    """Compute absolute, scaled geometry for every room on the floor."""
    scale = floor_plan.scale if floor_plan.scale is not None else DEFAULT_SCALE
    rooms = [
        _room_geometry(room, floor_plan.defaults, scale)
        for room in floor_plan.floor.rooms
    ]

    max_x = 0.0
    max_y = 0.0
    for r in rooms:
        max_x = max(max_x, r.x + r.width)
        max_y = max(max_y, r.y + r.height)

    logger.debug("Computed geometry for %d rooms (%sx%s)", len(rooms), max_x, max_y)
    return FloorGeometry(width=max_x, height=max_y, rooms=rooms)


def _room_geometry(room: Room, defaults: Defaults | None, scale: float) -> RoomGeometry:
    width, height = room_dimensions(room)
    return RoomGeometry(
        id=room.id,
        name=room.display_name,
        x=room.position.x * scale,
        y=room.position.y * scale,
        width=width * scale,
        height=height * scale,
        walls={
            side: _wall_geometry(room, side, width, height, defaults, scale)
            for side in WALL_SIDES
        },
    )


def _edge(x: float, y: float, width: float, height: float, side: WallSide) -> tuple[float, float, float, float]:
    """Unscaled endpoints of one room side. Horizontal sides run left to right,
    vertical sides top to bottom."""
    if side == WallSide.NORTH:
        return x, y, x + width, y
    if side == WallSide.SOUTH:
        return x, y + height, x + width, y + height
    if side == WallSide.EAST:
        return x + width, y, x + width, y + height
    return x, y, x, y + height


def _wall_geometry(
    room: Room,
    side: WallSide,
    room_width: float,
    room_height: float,
    defaults: Defaults | None,
    scale: float,
) -> WallGeometry:
    resolved = resolve_wall_defaults(room.walls.get(side), defaults)
    x, y = room.position.x, room.position.y
    x1, y1, x2, y2 = _edge(x, y, room_width, room_height, side)

    # Not clamped to the wall: an offset past the end is drawn there.
    # Order matches the wall's openings list so indexes stay addressable.
    openings: list[OpeningGeometry] = []
    for opening in resolved.openings:
        ro = resolve_opening_defaults(opening, defaults)
        if side in (WallSide.NORTH, WallSide.SOUTH):
            ox, oy = x + ro.offset, y1
        else:
            ox, oy = x1, y + ro.offset

        openings.append(OpeningGeometry(
            type=ro.type,
            x=ox * scale,
            y=oy * scale,
            width=ro.width * scale,
            height=ro.height * scale,
            from_floor=ro.from_floor * scale,
            to=ro.to,
            direction=side,
        ))

    return WallGeometry(
        x1=x1 * scale, y1=y1 * scale,
        x2=x2 * scale, y2=y2 * scale,
        length=resolved.length * scale,
        thickness=resolved.thickness * scale,
        exists=resolved.exists,
        openings=openings,
    )


def walls_overlap(w1: WallGeometry, w2: WallGeometry) -> bool:
    """True when two wall segments lie on the same line and share a stretch.

    Exact comparison, for already-resolved geometry; the validator uses a
    tolerant variant on unscaled plan units.
    """
    same_row = w1.is_horizontal and w2.is_horizontal and w1.y1 == w2.y1
    same_column = w1.is_vertical and w2.is_vertical and w1.x1 == w2.x1
    if not (same_row or same_column):
        return False

    lo1, hi1 = w1.span()
    lo2, hi2 = w2.span()
    return hi1 > lo2 and hi2 > lo1
