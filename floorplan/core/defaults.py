"""Three-tier default resolution for walls and openings.

Every attribute resolves as: explicit value on the entity, then the
matching plan-level default, then a hardcoded constant. Geometry,
validation and statistics all go through these functions so they never
disagree on a wall's effective dimensions.
"""

from __future__ import annotations

from floorplan.models import (
    Defaults, Opening, OpeningType, ResolvedOpening, ResolvedRoom,
    ResolvedWall, ResolvedWalls, Room, Wall, WALL_SIDES,
)


# Hardcoded fallbacks, in plan units (conventionally centimeters).
WALL_HEIGHT = 280.0
WALL_THICKNESS = 15.0
DOOR_WIDTH = 80.0
DOOR_HEIGHT = 210.0
WINDOW_WIDTH = 120.0
WINDOW_HEIGHT = 120.0
WINDOW_FROM_FLOOR = 100.0

DEFAULT_SCALE = 0.2


def _first(*values: float | None) -> float:
    for v in values:
        if v is not None:
            return v
    raise ValueError("no value to resolve")


def wall_height_default(defaults: Defaults | None) -> float:
    """Plan-wide wall height: plan default, then constant."""
    plan = defaults.wall.height if defaults and defaults.wall else None
    return _first(plan, WALL_HEIGHT)


def resolve_wall_defaults(wall: Wall, defaults: Defaults | None) -> ResolvedWall:
    wall_defaults = defaults.wall if defaults else None
    return ResolvedWall(
        length=_first(wall.length, 0.0),
        height=_first(wall.height, wall_defaults.height if wall_defaults else None, WALL_HEIGHT),
        thickness=_first(
            wall.thickness,
            wall_defaults.thickness if wall_defaults else None,
            WALL_THICKNESS,
        ),
        exists=wall.exists if wall.exists is not None else True,
        openings=list(wall.openings),
    )


def resolve_opening_defaults(opening: Opening, defaults: Defaults | None) -> ResolvedOpening:
    """Resolve an opening's size; doors always start at the floor unless told otherwise."""
    if opening.type == OpeningType.WINDOW:
        plan = defaults.window if defaults else None
        width = _first(opening.width, plan.width if plan else None, WINDOW_WIDTH)
        height = _first(opening.height, plan.height if plan else None, WINDOW_HEIGHT)
        from_floor = _first(
            opening.from_floor, plan.from_floor if plan else None, WINDOW_FROM_FLOOR,
        )
    else:
        plan = defaults.door if defaults else None
        width = _first(opening.width, plan.width if plan else None, DOOR_WIDTH)
        height = _first(opening.height, plan.height if plan else None, DOOR_HEIGHT)
        from_floor = _first(opening.from_floor, 0.0)

    return ResolvedOpening(
        type=opening.type,
        offset=opening.offset,
        width=width,
        height=height,
        from_floor=from_floor,
        to=opening.to,
    )


def resolve_room_defaults(room: Room, defaults: Defaults | None) -> ResolvedRoom:
    walls = {
        side.value: resolve_wall_defaults(room.walls.get(side), defaults)
        for side in WALL_SIDES
    }
    return ResolvedRoom(
        id=room.id,
        name=room.name,
        position=room.position,
        walls=ResolvedWalls(**walls),
        materials=room.materials,
    )


def room_dimensions(room: Room) -> tuple[float, float]:
    """Effective (width, height) of a room.

    Width is the longer of north/south, height the longer of east/west;
    mismatched opposite walls are tolerated.
    """
    walls = room.walls
    width = max(_first(walls.north.length, 0.0), _first(walls.south.length, 0.0))
    height = max(_first(walls.east.length, 0.0), _first(walls.west.length, 0.0))
    return width, height
