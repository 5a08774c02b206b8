"""Tests for measurements, materials estimate and budget."""

from __future__ import annotations

import math

import pytest

from floorplan.core.budget import calculate_budget
from floorplan.core.materials import ratio, whole
from floorplan.core.statistics import (
    brick_count, calculate_floor_plan_stats, calculate_wall_stats,
    infer_room_type,
)
from floorplan.models import (
    BudgetCategory, Defaults, ElectricalConfig, EstimateConfig, FloorPlan,
    Room, RoomType, Wall, WallDefaults, WallSide,
)

from plans import make_plan, room_data


def _brick_unit_area(config: EstimateConfig) -> float:
    brick = config.brick
    return (brick.width + brick.mortar_thickness) * (brick.height + brick.mortar_thickness)


class TestWallStats:

    def test_single_room_wall_area_and_bricks(self, single_room_plan: FloorPlan) -> None:
        """400 x 300 room, 280 walls, no openings."""
        config = EstimateConfig()
        room = calculate_floor_plan_stats(single_room_plan).measurements.rooms[0]

        expected_cm2 = (400 + 400 + 300 + 300) * 280
        assert room.walls_area_without_openings == pytest.approx(expected_cm2 / 10000)

        unit_area = _brick_unit_area(config)
        for wall in room.walls:
            net_cm2 = wall.length * wall.height
            assert wall.brick_count == math.ceil(
                math.ceil(net_cm2 / unit_area) * config.brick.waste_factor
            )

    def test_openings_are_subtracted(self) -> None:
        wall = Wall.model_validate({
            "length": 400,
            "openings": [
                {"type": "door", "offset": 50},
                {"type": "window", "offset": 200},
            ],
        })
        stats = calculate_wall_stats(wall, WallSide.NORTH, None, EstimateConfig())
        openings_cm2 = 80 * 210 + 120 * 120
        assert stats.area == 400 * 280 / 10000
        assert stats.openings_area == openings_cm2 / 10000
        assert stats.area_without_openings == (400 * 280 - openings_cm2) / 10000

    def test_net_area_never_negative(self) -> None:
        wall = Wall.model_validate({
            "length": 50,
            "openings": [{"type": "door", "offset": 0, "width": 200}],
        })
        stats = calculate_wall_stats(wall, WallSide.EAST, None, EstimateConfig())
        assert stats.area_without_openings == 0
        assert stats.brick_count == 0

    def test_virtual_wall_needs_no_bricks(self) -> None:
        wall = Wall(length=400, exists=False)
        stats = calculate_wall_stats(wall, WallSide.NORTH, None, EstimateConfig())
        assert stats.exists is False
        assert stats.area == 400 * 280 / 10000
        assert stats.brick_count == 0

    def test_uses_plan_wall_defaults(self) -> None:
        defaults = Defaults(wall=WallDefaults(height=300, thickness=20))
        stats = calculate_wall_stats(Wall(length=100), WallSide.SOUTH, defaults, EstimateConfig())
        assert stats.height == 300
        assert stats.thickness == 20
        assert stats.area == 100 * 300 / 10000

    def test_brick_count_formula(self) -> None:
        config = EstimateConfig()
        unit_area = _brick_unit_area(config)
        assert unit_area == 300
        assert brick_count(112000, config) == math.ceil(
            math.ceil(112000 / unit_area) * config.brick.waste_factor
        )
        assert brick_count(0, config) == 0

    def test_zero_brick_unit_area(self, single_room_plan: FloorPlan) -> None:
        config = EstimateConfig.model_validate({"brick": {"width": -1, "mortarThickness": 1}})
        stats = calculate_floor_plan_stats(single_room_plan, config)
        assert all(w.brick_count == math.inf for w in stats.measurements.rooms[0].walls)
        assert stats.materials.masonry.bricks == math.inf


class TestRoomStats:

    def test_single_room_measurements(self, single_room_plan: FloorPlan) -> None:
        room = calculate_floor_plan_stats(single_room_plan).measurements.rooms[0]
        assert room.floor_area == 400 * 300 / 10000
        assert room.perimeter == (400 + 300 + 400 + 300) / 100
        assert room.volume == 400 * 300 * 280 / 1_000_000
        assert room.brick_count == sum(w.brick_count for w in room.walls)
        assert [w.side for w in room.walls] == [
            WallSide.NORTH, WallSide.EAST, WallSide.SOUTH, WallSide.WEST,
        ]

    def test_virtual_walls_left_out_of_totals(self) -> None:
        plan = make_plan(room_data("r", north={"exists": False}))
        room = calculate_floor_plan_stats(plan).measurements.rooms[0]
        assert room.perimeter == (300 + 400 + 300) / 100
        built = [w for w in room.walls if w.exists]
        assert room.walls_area == sum(w.area for w in built)
        assert room.walls[0].brick_count == 0

    def test_volume_uses_plan_wall_height(self) -> None:
        """Per-wall height overrides do not change the room volume."""
        plan = make_plan(
            room_data("r", north={"height": 500}),
            defaults={"wall": {"height": 250}},
        )
        room = calculate_floor_plan_stats(plan).measurements.rooms[0]
        assert room.volume == 400 * 300 * 250 / 1_000_000
        assert room.walls[0].height == 500

    def test_zero_width_room_has_no_floor(self) -> None:
        plan = make_plan(room_data("r", north={"length": 0}, south={"length": None}))
        room = calculate_floor_plan_stats(plan).measurements.rooms[0]
        assert room.floor_area == 0
        assert room.volume == 0
        assert room.walls[0].brick_count == 0
        assert room.walls[2].brick_count == 0

    def test_totals(self) -> None:
        plan = make_plan(
            room_data("a", 0, 0, 300, 300),
            room_data("b", 300, 0, 200, 300),
        )
        measurements = calculate_floor_plan_stats(plan).measurements
        assert measurements.room_count == 2
        assert measurements.total_floor_area == sum(r.floor_area for r in measurements.rooms)
        assert measurements.total_perimeter == sum(r.perimeter for r in measurements.rooms)


class TestRoomTypes:

    @pytest.mark.parametrize("room_id, name, expected", [
        ("sala-1", None, RoomType.LIVING),
        ("r1", "Cozinha americana", RoomType.KITCHEN),
        ("wc-social", None, RoomType.BATHROOM),
        ("banheiro", "Suite", RoomType.BATHROOM),
        ("r2", "Dormitório 2", RoomType.BEDROOM),
        ("quarto", None, RoomType.BEDROOM),
        ("area-servico", None, RoomType.UTILITY),
        ("r3", "Lavanderia", RoomType.UTILITY),
        ("garage", "Garage", RoomType.DEFAULT),
    ])
    def test_keywords(self, room_id: str, name: str | None, expected: RoomType) -> None:
        assert infer_room_type(Room(id=room_id, name=name)) == expected

    def test_first_category_wins(self) -> None:
        """A living room id beats a kitchen name."""
        assert infer_room_type(Room(id="sala", name="Cozinha")) == RoomType.LIVING

    def test_legacy_config_keys(self) -> None:
        config = ElectricalConfig.model_validate({
            "byRoomType": {"sala": {"outlets": 10, "switches": 3, "lights": 4}},
        })
        assert config.for_room(RoomType.LIVING).outlets == 10
        # Falls back to the built-in default entry when the config has none
        assert config.for_room(RoomType.KITCHEN).outlets == 3


class TestMaterials:

    def test_paint_uses_wall_multiplier(self, single_room_plan: FloorPlan) -> None:
        stats = calculate_floor_plan_stats(single_room_plan)
        paint = stats.materials.paint
        walls = stats.measurements.total_walls_area_without_openings
        assert paint.paintable_wall_area == walls * 1.5
        assert paint.paint == math.ceil(walls * 1.5 * 2 / 10)
        assert paint.primer == math.ceil(walls * 1.5 * 1 / 12)
        assert paint.putty == math.ceil(walls * 1.5 * 0.7 / 3)
        assert paint.ceiling_paint == math.ceil(stats.measurements.total_floor_area * 2 / 10)

    def test_masonry(self, single_room_plan: FloorPlan) -> None:
        stats = calculate_floor_plan_stats(single_room_plan)
        masonry = stats.materials.masonry
        assert masonry.bricks == stats.measurements.rooms[0].brick_count
        assert masonry.mortar == masonry.bricks / 1000 * 0.25

    def test_flooring(self, single_room_plan: FloorPlan) -> None:
        flooring = calculate_floor_plan_stats(single_room_plan).materials.flooring
        assert flooring.net_area == 12
        assert flooring.tiles == 12 * 1.10
        assert flooring.grout == 6
        assert flooring.adhesive == 60

    def test_electrical_by_room_type(self, single_room_plan: FloorPlan) -> None:
        electrical = calculate_floor_plan_stats(single_room_plan).materials.electrical
        assert (electrical.outlets, electrical.switches, electrical.light_points) == (6, 2, 2)
        assert electrical.wire_estimate == 10 * 8
        assert electrical.by_room[0].room_name == "Sala"

    def test_plumbing_only_for_wet_rooms(self) -> None:
        plan = make_plan(
            room_data("cozinha", 0, 0),
            room_data("quarto", 400, 0),
        )
        plumbing = calculate_floor_plan_stats(plan).materials.plumbing
        assert [r.room_name for r in plumbing.by_room] == ["cozinha"]
        assert (plumbing.cold_water_points, plumbing.hot_water_points, plumbing.drain_points) == (2, 1, 2)
        assert plumbing.pipe_estimate == 5 * 3

    def test_whole_passes_nan_through(self) -> None:
        assert whole(2.1) == 3
        assert math.isnan(whole(float("nan")))

    def test_ratio_by_zero(self) -> None:
        assert ratio(6, 3) == 2
        assert ratio(5, 0) == math.inf
        assert ratio(-5, 0) == -math.inf
        assert math.isnan(ratio(0, 0))

    def test_zero_paint_coverage(self, single_room_plan: FloorPlan) -> None:
        config = EstimateConfig.model_validate({"paint": {"coverage": 0}})
        stats = calculate_floor_plan_stats(single_room_plan, config)
        assert stats.materials.paint.paint == math.inf
        assert stats.materials.paint.ceiling_paint == math.inf
        default = calculate_floor_plan_stats(single_room_plan)
        assert stats.materials.paint.primer == default.materials.paint.primer
        assert stats.budget.total == math.inf

    def test_fractional_coats(self, single_room_plan: FloorPlan) -> None:
        config = EstimateConfig.model_validate({"paint": {"coats": 1.5}})
        stats = calculate_floor_plan_stats(single_room_plan, config)
        walls = stats.measurements.total_walls_area_without_openings
        assert stats.materials.paint.paint == math.ceil(walls * 1.5 * 1.5 / 10)

    def test_fractional_point_counts(self, single_room_plan: FloorPlan) -> None:
        config = EstimateConfig.model_validate({"electrical": {"byRoomType": {
            "living": {"outlets": 5.5, "switches": 2, "lights": 2},
        }}})
        electrical = calculate_floor_plan_stats(single_room_plan, config).materials.electrical
        assert electrical.outlets == 5.5
        assert electrical.wire_estimate == (5.5 + 2 + 2) * 8


class TestBudget:

    def test_empty_plan_per_m2_is_zero(self) -> None:
        budget = calculate_floor_plan_stats(FloorPlan()).budget
        assert budget.per_m2 == 0
        assert budget.total == 0
        assert not math.isnan(budget.per_m2)

    def test_subtotals_cover_every_category(self, single_room_plan: FloorPlan) -> None:
        budget = calculate_floor_plan_stats(single_room_plan).budget
        assert set(budget.subtotals) == set(BudgetCategory)
        assert budget.subtotals[BudgetCategory.PLUMBING] == 0
        assert budget.total == pytest.approx(sum(budget.subtotals.values()))
        assert budget.per_m2 == pytest.approx(budget.total / 12)

    def test_electrical_subtotal(self, single_room_plan: FloorPlan) -> None:
        budget = calculate_floor_plan_stats(single_room_plan).budget
        assert budget.subtotals[BudgetCategory.ELECTRICAL] == 6 * 25 + 2 * 20 + 2 * 80 + 80 * 3.5

    def test_plumbing_lines_for_kitchen(self) -> None:
        budget = calculate_floor_plan_stats(make_plan(room_data("cozinha"))).budget
        plumbing = [i for i in budget.items if i.category == BudgetCategory.PLUMBING]
        assert [(i.quantity, i.unit) for i in plumbing] == [(3, "un"), (2, "un"), (15, "m")]
        assert budget.subtotals[BudgetCategory.PLUMBING] == 3 * 120 + 2 * 100 + 15 * 12

    def test_paint_bought_in_cans(self, single_room_plan: FloorPlan) -> None:
        stats = calculate_floor_plan_stats(single_room_plan)
        cans = next(i for i in stats.budget.items if i.item.startswith("Latex paint (walls)"))
        assert cans.quantity == math.ceil(stats.materials.paint.paint / 18)
        assert cans.total == cans.quantity * 280

    def test_mortar_priced_on_exact_volume(self, single_room_plan: FloorPlan) -> None:
        stats = calculate_floor_plan_stats(single_room_plan)
        mortar = next(i for i in stats.budget.items if i.item == "Laying mortar")
        assert mortar.total == stats.materials.masonry.mortar * 350
        assert mortar.quantity >= stats.materials.masonry.mortar

    def test_custom_prices(self, single_room_plan: FloorPlan) -> None:
        config = EstimateConfig.model_validate({"prices": {"brick": 2.0}})
        stats = calculate_floor_plan_stats(single_room_plan, config)
        bricks = stats.budget.items[0]
        assert bricks.unit_price == 2.0
        assert bricks.total == stats.materials.masonry.bricks * 2.0

    def test_calculate_budget_without_floor_area(self, single_room_plan: FloorPlan) -> None:
        materials = calculate_floor_plan_stats(single_room_plan).materials
        assert calculate_budget(materials, 0, EstimateConfig()).per_m2 == 0


class TestStatsPass:

    def test_deterministic(self, opening_plan: FloorPlan) -> None:
        config = EstimateConfig()
        first = calculate_floor_plan_stats(opening_plan, config)
        second = calculate_floor_plan_stats(opening_plan, config)
        assert first.model_dump_json() == second.model_dump_json()

    def test_does_not_modify_plan(self, opening_plan: FloorPlan) -> None:
        before = opening_plan.model_dump()
        calculate_floor_plan_stats(opening_plan)
        assert opening_plan.model_dump() == before

    def test_nan_lengths_do_not_raise(self) -> None:
        plan = make_plan(room_data("r", north={"length": float("nan")}))
        stats = calculate_floor_plan_stats(plan)
        assert stats.measurements.room_count == 1

    def test_unit_is_not_applied_to_areas(self) -> None:
        """Known limitation: lengths are always read as centimeters."""
        in_cm = calculate_floor_plan_stats(make_plan(room_data("r"), unit="cm"))
        in_m = calculate_floor_plan_stats(make_plan(room_data("r"), unit="m"))
        assert in_m.measurements.total_floor_area == in_cm.measurements.total_floor_area == 12
