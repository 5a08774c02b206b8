"""Materials estimate — masonry, paint, flooring, electrical and plumbing quantities.

The coefficients here are rule-of-thumb heuristics, tuned to match the
editor's published budgets; they are not derived from the geometry beyond
areas and room counts.
"""

from __future__ import annotations
import math

from floorplan.models import (
    ElectricalMaterials, EstimateConfig, FlooringMaterials, MasonryMaterials,
    MeasurementsStats, PaintMaterials, PlumbingMaterials, RoomElectrical,
    RoomPlumbing, RoomStats,
)


MORTAR_M3_PER_1000_BRICKS = 0.25

# Internal partitions are painted on both faces but counted once per room.
PAINTABLE_WALL_FACTOR = 1.5


def whole(value: float) -> int | float:
    """Round a purchase quantity up; non-finite values pass through."""
    if math.isfinite(value):
        return math.ceil(value)
    return value


def ratio(numerator: float, divisor: float) -> float:
    """Divide the way IEEE floats do: a zero divisor gives inf or NaN, never raises."""
    if divisor == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, divisor)
    return numerator / divisor


def calculate_masonry(measurements: MeasurementsStats) -> MasonryMaterials:
    bricks = sum(r.brick_count for r in measurements.rooms)
    return MasonryMaterials(
        bricks=bricks,
        mortar=bricks / 1000 * MORTAR_M3_PER_1000_BRICKS,
    )


def calculate_paint(measurements: MeasurementsStats, config: EstimateConfig) -> PaintMaterials:
    paint = config.paint
    paintable = measurements.total_walls_area_without_openings * PAINTABLE_WALL_FACTOR
    ceiling_area = measurements.total_floor_area

    return PaintMaterials(
        paint=whole(ratio(paintable * paint.coats, paint.coverage)),
        primer=whole(ratio(paintable * paint.primer_coats, paint.primer_coverage)),
        putty=whole(ratio(paintable * (paint.putty_percentage / 100), paint.putty_coverage)),
        ceiling_paint=whole(ratio(ceiling_area * paint.coats, paint.coverage)),
        paintable_wall_area=paintable,
        ceiling_area=ceiling_area,
    )


def calculate_flooring(measurements: MeasurementsStats, config: EstimateConfig) -> FlooringMaterials:
    flooring = config.flooring
    net_area = measurements.total_floor_area
    return FlooringMaterials(
        # Tiles are sold by area, so the quantity keeps its fraction.
        tiles=net_area * flooring.waste_factor,
        grout=whole(net_area * flooring.grout_per_m2),
        adhesive=whole(net_area * flooring.adhesive_per_m2),
        net_area=net_area,
    )


def calculate_electrical(rooms: list[RoomStats], config: EstimateConfig) -> ElectricalMaterials:
    """Fixed point counts per room type; wire is a linear per-point estimate."""
    by_room: list[RoomElectrical] = []
    for room in rooms:
        points = config.electrical.for_room(room.type)
        by_room.append(RoomElectrical(
            room_name=room.name,
            outlets=points.outlets,
            switches=points.switches,
            lights=points.lights,
        ))

    outlets = sum(r.outlets for r in by_room)
    switches = sum(r.switches for r in by_room)
    lights = sum(r.lights for r in by_room)

    return ElectricalMaterials(
        outlets=outlets,
        switches=switches,
        light_points=lights,
        wire_estimate=(outlets + switches + lights) * config.electrical.wire_per_point,
        by_room=by_room,
    )


def calculate_plumbing(rooms: list[RoomStats], config: EstimateConfig) -> PlumbingMaterials:
    """Water and drain points for wet rooms; dry rooms are left out of the breakdown."""
    by_room: list[RoomPlumbing] = []
    for room in rooms:
        points = config.plumbing.for_room(room.type)
        if points is None:
            continue
        by_room.append(RoomPlumbing(
            room_name=room.name,
            cold_water=points.cold_water,
            hot_water=points.hot_water,
            drains=points.drains,
        ))

    cold = sum(r.cold_water for r in by_room)
    hot = sum(r.hot_water for r in by_room)
    drains = sum(r.drains for r in by_room)

    return PlumbingMaterials(
        cold_water_points=cold,
        hot_water_points=hot,
        drain_points=drains,
        pipe_estimate=(cold + hot + drains) * config.plumbing.pipe_per_point,
        by_room=by_room,
    )
