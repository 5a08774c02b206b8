"""Measurement, materials and budget output models.

Lengths on walls are in plan units (centimeters); areas are m², volumes m³,
perimeters and cable/pipe runs meters.
"""

from __future__ import annotations
from enum import Enum

from .building import PlanModel, WallSide
from .parameters import Count, RoomType


class WallStats(PlanModel):
    side: WallSide
    length: float
    height: float
    thickness: float
    area: float
    area_without_openings: float
    openings_area: float
    brick_count: Count
    exists: bool


class RoomStats(PlanModel):
    id: str
    name: str
    type: RoomType
    floor_area: float
    perimeter: float
    walls_area: float                    # Existing walls only
    walls_area_without_openings: float
    volume: float
    walls: list[WallStats]
    brick_count: Count


class MeasurementsStats(PlanModel):
    total_floor_area: float = 0.0
    total_walls_area: float = 0.0
    total_walls_area_without_openings: float = 0.0
    total_volume: float = 0.0
    total_perimeter: float = 0.0
    room_count: int = 0
    rooms: list[RoomStats] = []


class MasonryMaterials(PlanModel):
    bricks: Count        # units
    mortar: float        # m³


class PaintMaterials(PlanModel):
    paint: Count                # liters, walls
    primer: Count               # liters
    putty: Count                # kg
    ceiling_paint: Count        # liters
    paintable_wall_area: float  # m²
    ceiling_area: float         # m²


class FlooringMaterials(PlanModel):
    tiles: float         # m², waste included
    grout: Count         # kg
    adhesive: Count      # kg
    net_area: float      # m²


class RoomElectrical(PlanModel):
    room_name: str
    outlets: Count
    switches: Count
    lights: Count


class ElectricalMaterials(PlanModel):
    outlets: Count
    switches: Count
    light_points: Count
    wire_estimate: float     # meters
    by_room: list[RoomElectrical] = []


class RoomPlumbing(PlanModel):
    room_name: str
    cold_water: Count
    hot_water: Count
    drains: Count


class PlumbingMaterials(PlanModel):
    cold_water_points: Count
    hot_water_points: Count
    drain_points: Count
    pipe_estimate: float     # meters
    by_room: list[RoomPlumbing] = []


class MaterialsEstimate(PlanModel):
    masonry: MasonryMaterials
    paint: PaintMaterials
    flooring: FlooringMaterials
    electrical: ElectricalMaterials
    plumbing: PlumbingMaterials


class BudgetCategory(str, Enum):
    MASONRY = "masonry"
    PAINT = "paint"
    FLOORING = "flooring"
    ELECTRICAL = "electrical"
    PLUMBING = "plumbing"


class BudgetItem(PlanModel):
    category: BudgetCategory
    item: str
    quantity: float
    unit: str
    unit_price: float
    total: float


class BudgetEstimate(PlanModel):
    items: list[BudgetItem]
    subtotals: dict[BudgetCategory, float]
    total: float
    per_m2: float


class FloorPlanStats(PlanModel):
    measurements: MeasurementsStats
    materials: MaterialsEstimate
    budget: BudgetEstimate
