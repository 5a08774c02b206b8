"""Measurements — per-wall and per-room areas, totals and the full stats pass.

Plan lengths are taken to be centimeters whatever ``FloorPlan.unit``
says; areas are converted cm² -> m² and volumes cm³ -> m³ unconditionally.
"""

from __future__ import annotations
import logging

from floorplan.models import (
    Defaults, EstimateConfig, FloorPlan, FloorPlanStats, MaterialsEstimate,
    MeasurementsStats, Room, RoomStats, RoomType, Wall, WallSide, WallStats,
    WALL_SIDES,
)
from floorplan.core.defaults import (
    resolve_opening_defaults, resolve_wall_defaults, room_dimensions,
    wall_height_default,
)
from floorplan.core.materials import (
    calculate_electrical, calculate_flooring, calculate_masonry,
    calculate_paint, calculate_plumbing, ratio, whole,
)
from floorplan.core.budget import calculate_budget

logger = logging.getLogger(__name__)


CM2_PER_M2 = 10_000
CM3_PER_M3 = 1_000_000
CM_PER_M = 100

# Checked in order; the first category with a keyword in the id or name wins.
ROOM_TYPE_KEYWORDS: tuple[tuple[RoomType, tuple[str, ...]], ...] = (
    (RoomType.LIVING, ("sala",)),
    (RoomType.KITCHEN, ("cozinha",)),
    (RoomType.BATHROOM, ("banheiro", "wc")),
    (RoomType.BEDROOM, ("quarto", "dormit")),
    (RoomType.UTILITY, ("servico", "lavanderia")),
)


def infer_room_type(room: Room) -> RoomType:
    """Guess a room's category from keywords in its id, then its name."""
    room_id = room.id.lower()
    name = (room.name or "").lower()
    for room_type, keywords in ROOM_TYPE_KEYWORDS:
        if any(k in room_id for k in keywords) or any(k in name for k in keywords):
            return room_type
    return RoomType.DEFAULT


def brick_count(area_cm2: float, config: EstimateConfig) -> int | float:
    """Bricks to lay ``area_cm2`` of wall, waste included."""
    brick = config.brick
    unit_area = (
        (brick.width + brick.mortar_thickness)
        * (brick.height + brick.mortar_thickness)
    )
    return whole(whole(ratio(area_cm2, unit_area)) * brick.waste_factor)


def calculate_wall_stats(
    wall: Wall, side: WallSide, defaults: Defaults | None, config: EstimateConfig,
) -> WallStats:
    resolved = resolve_wall_defaults(wall, defaults)

    area_cm2 = resolved.length * resolved.height
    openings_cm2 = 0.0
    for opening in resolved.openings:
        ro = resolve_opening_defaults(opening, defaults)
        openings_cm2 += ro.width * ro.height
    net_cm2 = max(0.0, area_cm2 - openings_cm2)

    return WallStats(
        side=side,
        length=resolved.length,
        height=resolved.height,
        thickness=resolved.thickness,
        area=area_cm2 / CM2_PER_M2,
        area_without_openings=net_cm2 / CM2_PER_M2,
        openings_area=openings_cm2 / CM2_PER_M2,
        brick_count=brick_count(net_cm2, config) if resolved.exists else 0,
        exists=resolved.exists,
    )


def calculate_room_stats(
    room: Room, defaults: Defaults | None, config: EstimateConfig,
) -> RoomStats:
    width, height = room_dimensions(room)
    floor_cm2 = width * height

    walls = [
        calculate_wall_stats(room.walls.get(side), side, defaults, config)
        for side in WALL_SIDES
    ]
    built = [w for w in walls if w.exists]

    return RoomStats(
        id=room.id,
        name=room.display_name,
        type=infer_room_type(room),
        floor_area=floor_cm2 / CM2_PER_M2,
        perimeter=sum(w.length for w in built) / CM_PER_M,
        walls_area=sum(w.area for w in built),
        walls_area_without_openings=sum(w.area_without_openings for w in built),
        # Volume uses the plan-wide wall height, not per-wall overrides.
        volume=floor_cm2 * wall_height_default(defaults) / CM3_PER_M3,
        walls=walls,
        brick_count=sum(w.brick_count for w in walls),
    )


def calculate_measurements(rooms: list[RoomStats]) -> MeasurementsStats:
    return MeasurementsStats(
        total_floor_area=sum(r.floor_area for r in rooms),
        total_walls_area=sum(r.walls_area for r in rooms),
        total_walls_area_without_openings=sum(r.walls_area_without_openings for r in rooms),
        total_volume=sum(r.volume for r in rooms),
        total_perimeter=sum(r.perimeter for r in rooms),
        room_count=len(rooms),
        rooms=rooms,
    )


def calculate_floor_plan_stats(
    floor_plan: FloorPlan, config: EstimateConfig | None = None,
) -> FloorPlanStats:
    """Measurements, materials estimate and priced budget for a floor plan."""
    if config is None:
        config = EstimateConfig()

    rooms = [
        calculate_room_stats(room, floor_plan.defaults, config)
        for room in floor_plan.floor.rooms
    ]
    measurements = calculate_measurements(rooms)

    materials = MaterialsEstimate(
        masonry=calculate_masonry(measurements),
        paint=calculate_paint(measurements, config),
        flooring=calculate_flooring(measurements, config),
        electrical=calculate_electrical(rooms, config),
        plumbing=calculate_plumbing(rooms, config),
    )
    budget = calculate_budget(materials, measurements.total_floor_area, config)

    logger.debug(
        "Stats for %d rooms: %.2f m², total %.2f",
        measurements.room_count, measurements.total_floor_area, budget.total,
    )
    return FloorPlanStats(measurements=measurements, materials=materials, budget=budget)
