"""Floor plan document models — plan, floor, rooms, walls, openings.

Field names are snake_case in Python and camelCase on the wire, matching
the JSON documents the browser editor saves and imports.
"""

from __future__ import annotations
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .geometry import Point2D


class PlanModel(BaseModel):
    """Base for every document model: camelCase aliases, either name accepted."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Unit(str, Enum):
    CM = "cm"
    MM = "mm"
    M = "m"


class WallSide(str, Enum):
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"


# Canonical traversal order for a room's walls.
WALL_SIDES: tuple[WallSide, ...] = (
    WallSide.NORTH, WallSide.EAST, WallSide.SOUTH, WallSide.WEST,
)


class OpeningType(str, Enum):
    DOOR = "door"
    WINDOW = "window"


class ElementType(str, Enum):
    PILLAR = "pillar"
    STAIR = "stair"
    COUNTER = "counter"
    FIXTURE = "fixture"


class StairDirection(str, Enum):
    UP_NORTH = "up-north"
    UP_SOUTH = "up-south"
    UP_EAST = "up-east"
    UP_WEST = "up-west"


class Position(Point2D):
    """Top-left corner of a room or element, in plan units."""


class Opening(PlanModel):
    """A door or window cut into a wall, placed by offset from the wall start."""
    type: OpeningType
    offset: float                      # Wall start to opening start
    width: float | None = None
    height: float | None = None
    from_floor: float | None = None  # Sill height (windows)
    to: str | None = None            # Room the opening leads to (advisory)


class Wall(PlanModel):
    """One side of a room. Every field except openings may fall back to defaults."""
    length: float | None = None
    height: float | None = None
    thickness: float | None = None
    exists: bool | None = None       # False = virtual boundary
    openings: list[Opening] = Field(default_factory=list)


class Walls(PlanModel):
    north: Wall = Field(default_factory=Wall)
    east: Wall = Field(default_factory=Wall)
    south: Wall = Field(default_factory=Wall)
    west: Wall = Field(default_factory=Wall)

    def get(self, side: WallSide) -> Wall:
        return getattr(self, WallSide(side).value)


class MaterialConfig(PlanModel):
    type: str
    color: str | None = None
    custom_texture: str | None = None  # Base64 or URL


class RoomMaterials(PlanModel):
    floor: MaterialConfig | None = None
    walls: MaterialConfig | None = None
    ceiling: MaterialConfig | None = None


class Room(PlanModel):
    """A rectangular room described by its top-left corner and four walls."""
    id: str
    name: str | None = None
    position: Position = Field(default_factory=lambda: Position(x=0, y=0))
    walls: Walls = Field(default_factory=Walls)
    materials: RoomMaterials | None = None
    has_floor: bool | None = None
    has_ceiling: bool | None = None

    @property
    def display_name(self) -> str:
        return self.name if self.name is not None else self.id


class Element(PlanModel):
    """Structural element (pillar, stair, ...) placed on the floor."""
    type: ElementType
    id: str
    position: Position
    width: float | None = None
    depth: float | None = None
    length: float | None = None        # Stairs: run length
    direction: StairDirection | None = None
    steps: int | None = None


class FurnitureItem(PlanModel):
    id: str
    type: str
    position: Position
    width: float | None = None
    depth: float | None = None
    rotation: float = 0.0
    room_id: str | None = None


class Floor(PlanModel):
    id: str = "terreo"
    name: str | None = None
    rooms: list[Room] = Field(default_factory=list)
    furniture: list[FurnitureItem] | None = None
    elements: list[Element] | None = None

    def get_room(self, room_id: str) -> Room | None:
        for room in self.rooms:
            if room.id == room_id:
                return room
        return None


class WallDefaults(PlanModel):
    height: float | None = None
    thickness: float | None = None


class DoorDefaults(PlanModel):
    width: float | None = None
    height: float | None = None


class WindowDefaults(PlanModel):
    width: float | None = None
    height: float | None = None
    from_floor: float | None = None


class Defaults(PlanModel):
    """Plan-level fallback values, the middle tier of default resolution."""
    wall: WallDefaults | None = None
    door: DoorDefaults | None = None
    window: WindowDefaults | None = None


class FloorPlan(PlanModel):
    """Root document: one floor of rooms plus plan-wide settings."""
    schema_url: str | None = Field(default=None, alias="$schema")
    version: str = "0.3"
    name: str | None = None
    unit: Unit = Unit.CM
    scale: float | None = None       # Plan units -> display units
    defaults: Defaults | None = None
    floor: Floor = Field(default_factory=Floor)

    @property
    def rooms(self) -> list[Room]:
        return self.floor.rooms


class ResolvedOpening(PlanModel):
    """Opening with every optional dimension replaced by its resolved value."""
    type: OpeningType
    offset: float
    width: float
    height: float
    from_floor: float
    to: str | None = None


class ResolvedWall(PlanModel):
    """Wall with every optional field replaced by its resolved value.

    Openings are kept as given; resolve them individually with
    ``resolve_opening_defaults``.
    """
    length: float
    height: float
    thickness: float
    exists: bool
    openings: list[Opening] = Field(default_factory=list)


class ResolvedWalls(PlanModel):
    north: ResolvedWall
    east: ResolvedWall
    south: ResolvedWall
    west: ResolvedWall

    def get(self, side: WallSide) -> ResolvedWall:
        return getattr(self, WallSide(side).value)


class ResolvedRoom(PlanModel):
    id: str
    name: str | None = None
    position: Position
    walls: ResolvedWalls
    materials: RoomMaterials | None = None
