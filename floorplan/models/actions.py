"""Editing actions — one document change each, discriminated by ``type``."""

from __future__ import annotations
from typing import Annotated, Any, Literal, Union

from pydantic import Field

from .building import Defaults, Opening, PlanModel, Room, Unit, WallSide


class AddRoom(PlanModel):
    type: Literal["add_room"] = "add_room"
    room: Room


class UpdateRoom(PlanModel):
    type: Literal["update_room"] = "update_room"
    room_id: str
    changes: dict[str, Any]


class RemoveRoom(PlanModel):
    type: Literal["remove_room"] = "remove_room"
    room_id: str


class UpdateWall(PlanModel):
    type: Literal["update_wall"] = "update_wall"
    room_id: str
    side: WallSide
    changes: dict[str, Any]


class AddOpening(PlanModel):
    type: Literal["add_opening"] = "add_opening"
    room_id: str
    side: WallSide
    opening: Opening


class UpdateOpening(PlanModel):
    type: Literal["update_opening"] = "update_opening"
    room_id: str
    side: WallSide
    index: int
    changes: dict[str, Any]


class RemoveOpening(PlanModel):
    type: Literal["remove_opening"] = "remove_opening"
    room_id: str
    side: WallSide
    index: int


class UpdateDefaults(PlanModel):
    type: Literal["update_defaults"] = "update_defaults"
    defaults: Defaults


class UpdateSettings(PlanModel):
    type: Literal["update_settings"] = "update_settings"
    unit: Unit | None = None
    scale: float | None = None


EditAction = Annotated[
    Union[
        AddRoom, UpdateRoom, RemoveRoom, UpdateWall, AddOpening,
        UpdateOpening, RemoveOpening, UpdateDefaults, UpdateSettings,
    ],
    Field(discriminator="type"),
]
