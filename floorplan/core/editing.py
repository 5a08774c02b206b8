"""Document edits by whole-object replacement.

Each operation returns a new ``FloorPlan`` and never touches the one it
was given; unchanged sub-trees are shared between the two versions.
"""

from __future__ import annotations
import logging
from typing import Any

from floorplan.models import (
    AddOpening, AddRoom, Defaults, DoorDefaults, EditAction, Floor, FloorPlan,
    Opening, RemoveOpening, RemoveRoom, Room, Unit, UpdateDefaults,
    UpdateOpening, UpdateRoom, UpdateSettings, UpdateWall, Wall, WallDefaults,
    WallSide, WindowDefaults,
)
from floorplan.core.defaults import (
    DEFAULT_SCALE, DOOR_HEIGHT, DOOR_WIDTH, WALL_HEIGHT, WALL_THICKNESS,
    WINDOW_FROM_FLOOR, WINDOW_HEIGHT, WINDOW_WIDTH,
)
from floorplan.core.errors import (
    DuplicateRoomError, OpeningNotFoundError, RoomNotFoundError,
)

logger = logging.getLogger(__name__)


def create_empty_floor_plan() -> FloorPlan:
    """A fresh plan with no rooms and the standard defaults spelled out."""
    return FloorPlan(
        version="0.3",
        unit=Unit.CM,
        scale=DEFAULT_SCALE,
        defaults=Defaults(
            wall=WallDefaults(height=WALL_HEIGHT, thickness=WALL_THICKNESS),
            door=DoorDefaults(width=DOOR_WIDTH, height=DOOR_HEIGHT),
            window=WindowDefaults(
                width=WINDOW_WIDTH, height=WINDOW_HEIGHT, from_floor=WINDOW_FROM_FLOOR,
            ),
        ),
        floor=Floor(id="terreo", name="Térreo", rooms=[], elements=[]),
    )


def _with_rooms(plan: FloorPlan, rooms: list[Room]) -> FloorPlan:
    return plan.model_copy(update={"floor": plan.floor.model_copy(update={"rooms": rooms})})


def _replace_room(plan: FloorPlan, room_id: str, new_room: Room) -> FloorPlan:
    rooms = [new_room if r.id == room_id else r for r in plan.floor.rooms]
    return _with_rooms(plan, rooms)


def _require_room(plan: FloorPlan, room_id: str) -> Room:
    room = plan.floor.get_room(room_id)
    if room is None:
        raise RoomNotFoundError(room_id)
    return room


def _with_wall(room: Room, side: WallSide, wall: Wall) -> Room:
    walls = room.walls.model_copy(update={WallSide(side).value: wall})
    return room.model_copy(update={"walls": walls})


def _validated_update(model: Any, changes: dict[str, Any]) -> Any:
    """Merge ``changes`` (wire or Python names) into ``model`` and revalidate."""
    fields = type(model).model_fields
    names = {f.alias: name for name, f in fields.items() if f.alias}
    data = model.model_dump(exclude_unset=True)
    for key, value in changes.items():
        data[names.get(key, key)] = value
    return type(model).model_validate(data)


def add_room(plan: FloorPlan, room: Room) -> FloorPlan:
    if plan.floor.get_room(room.id) is not None:
        raise DuplicateRoomError(room.id)
    logger.debug("Adding room %s", room.id)
    return _with_rooms(plan, [*plan.floor.rooms, room])


def update_room(plan: FloorPlan, room_id: str, changes: dict[str, Any]) -> FloorPlan:
    """Shallow-merge ``changes`` into a room; nested values replace wholesale."""
    room = _require_room(plan, room_id)
    new_id = changes.get("id", room_id)
    if new_id != room_id and plan.floor.get_room(new_id) is not None:
        raise DuplicateRoomError(new_id)
    return _replace_room(plan, room_id, _validated_update(room, changes))


def remove_room(plan: FloorPlan, room_id: str) -> FloorPlan:
    _require_room(plan, room_id)
    logger.debug("Removing room %s", room_id)
    return _with_rooms(plan, [r for r in plan.floor.rooms if r.id != room_id])


def update_wall(
    plan: FloorPlan, room_id: str, side: WallSide, changes: dict[str, Any],
) -> FloorPlan:
    room = _require_room(plan, room_id)
    wall = _validated_update(room.walls.get(side), changes)
    return _replace_room(plan, room_id, _with_wall(room, side, wall))


def add_opening(
    plan: FloorPlan, room_id: str, side: WallSide, opening: Opening,
) -> FloorPlan:
    room = _require_room(plan, room_id)
    wall = room.walls.get(side)
    new_wall = wall.model_copy(update={"openings": [*wall.openings, opening]})
    return _replace_room(plan, room_id, _with_wall(room, side, new_wall))


def _require_opening(room: Room, side: WallSide, index: int) -> Wall:
    wall = room.walls.get(side)
    if not 0 <= index < len(wall.openings):
        raise OpeningNotFoundError(room.id, side, index)
    return wall


def update_opening(
    plan: FloorPlan, room_id: str, side: WallSide, index: int, changes: dict[str, Any],
) -> FloorPlan:
    room = _require_room(plan, room_id)
    wall = _require_opening(room, side, index)
    openings = list(wall.openings)
    openings[index] = _validated_update(openings[index], changes)
    new_wall = wall.model_copy(update={"openings": openings})
    return _replace_room(plan, room_id, _with_wall(room, side, new_wall))


def remove_opening(plan: FloorPlan, room_id: str, side: WallSide, index: int) -> FloorPlan:
    room = _require_room(plan, room_id)
    wall = _require_opening(room, side, index)
    openings = [o for i, o in enumerate(wall.openings) if i != index]
    new_wall = wall.model_copy(update={"openings": openings})
    return _replace_room(plan, room_id, _with_wall(room, side, new_wall))


def update_defaults(plan: FloorPlan, defaults: Defaults) -> FloorPlan:
    """Replace the wall/door/window default groups that ``defaults`` sets."""
    current = plan.defaults or Defaults()
    changes = {
        group: getattr(defaults, group)
        for group in ("wall", "door", "window")
        if getattr(defaults, group) is not None
    }
    return plan.model_copy(update={"defaults": current.model_copy(update=changes)})


def update_settings(
    plan: FloorPlan, unit: Unit | None = None, scale: float | None = None,
) -> FloorPlan:
    changes: dict[str, Any] = {}
    if unit is not None:
        changes["unit"] = Unit(unit)
    if scale is not None:
        changes["scale"] = scale
    return plan.model_copy(update=changes)


def apply_action(plan: FloorPlan, action: EditAction) -> FloorPlan:
    """Apply one editing action, as sent by the editor, to a plan."""
    if isinstance(action, AddRoom):
        return add_room(plan, action.room)
    if isinstance(action, UpdateRoom):
        return update_room(plan, action.room_id, action.changes)
    if isinstance(action, RemoveRoom):
        return remove_room(plan, action.room_id)
    if isinstance(action, UpdateWall):
        return update_wall(plan, action.room_id, action.side, action.changes)
    if isinstance(action, AddOpening):
        return add_opening(plan, action.room_id, action.side, action.opening)
    if isinstance(action, UpdateOpening):
        return update_opening(
            plan, action.room_id, action.side, action.index, action.changes,
        )
    if isinstance(action, RemoveOpening):
        return remove_opening(plan, action.room_id, action.side, action.index)
    if isinstance(action, UpdateDefaults):
        return update_defaults(plan, action.defaults)
    if isinstance(action, UpdateSettings):
        return update_settings(plan, action.unit, action.scale)
    raise TypeError(f"Unknown editing action: {type(action).__name__}")
