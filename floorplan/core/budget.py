"""Budget — converts material quantities into purchasable units and prices them."""

from __future__ import annotations
import math

from floorplan.models import (
    BudgetCategory, BudgetEstimate, BudgetItem, EstimateConfig, MaterialsEstimate,
)
from floorplan.core.materials import whole


PAINT_CAN_LITERS = 18
PUTTY_SACK_KG = 25


def _round_up_tenth(value: float) -> float:
    return whole(value * 10) / 10


def _item(
    category: BudgetCategory,
    item: str,
    quantity: float,
    unit: str,
    unit_price: float,
    total: float | None = None,
) -> BudgetItem:
    """A line item; ``total`` defaults to quantity x unit price."""
    return BudgetItem(
        category=category,
        item=item,
        quantity=quantity,
        unit=unit,
        unit_price=unit_price,
        total=quantity * unit_price if total is None else total,
    )


def budget_items(materials: MaterialsEstimate, config: EstimateConfig) -> list[BudgetItem]:
    prices = config.prices
    masonry = materials.masonry
    paint = materials.paint
    flooring = materials.flooring
    electrical = materials.electrical
    plumbing = materials.plumbing

    items: list[BudgetItem] = []

    # Masonry. Mortar is listed rounded up to 0.1 m³ but priced on the exact volume.
    items.append(_item(
        BudgetCategory.MASONRY, "Ceramic bricks (6-hole)",
        masonry.bricks, "un", prices.brick,
    ))
    items.append(_item(
        BudgetCategory.MASONRY, "Laying mortar",
        _round_up_tenth(masonry.mortar), "m³", prices.mortar_m3,
        total=masonry.mortar * prices.mortar_m3,
    ))

    # Paint, bought in whole cans and sacks
    items.append(_item(
        BudgetCategory.PAINT, f"Latex paint (walls) {PAINT_CAN_LITERS}L",
        whole(paint.paint / PAINT_CAN_LITERS), "can", prices.paint_18l,
    ))
    items.append(_item(
        BudgetCategory.PAINT, f"Sealer/primer {PAINT_CAN_LITERS}L",
        whole(paint.primer / PAINT_CAN_LITERS), "can", prices.primer_18l,
    ))
    items.append(_item(
        BudgetCategory.PAINT, f"Wall putty {PUTTY_SACK_KG}kg",
        whole(paint.putty / PUTTY_SACK_KG), "sack", prices.putty_25kg,
    ))
    items.append(_item(
        BudgetCategory.PAINT, f"Latex paint (ceiling) {PAINT_CAN_LITERS}L",
        whole(paint.ceiling_paint / PAINT_CAN_LITERS), "can", prices.paint_18l,
    ))

    # Flooring. Tiles listed to 0.1 m², priced on the exact area.
    waste_pct = (config.flooring.waste_factor - 1) * 100
    if math.isfinite(waste_pct):
        waste_pct = round(waste_pct)
    items.append(_item(
        BudgetCategory.FLOORING, f"Ceramic floor tiles ({waste_pct}% waste)",
        _round_up_tenth(flooring.tiles), "m²", prices.tile_m2,
        total=flooring.tiles * prices.tile_m2,
    ))
    items.append(_item(
        BudgetCategory.FLOORING, "Grout",
        flooring.grout, "kg", prices.grout_kg,
    ))
    items.append(_item(
        BudgetCategory.FLOORING, "Tile adhesive mortar",
        flooring.adhesive, "kg", prices.tile_adhesive_kg,
    ))

    # Electrical
    items.append(_item(
        BudgetCategory.ELECTRICAL, "Outlets",
        electrical.outlets, "un", prices.outlet,
    ))
    items.append(_item(
        BudgetCategory.ELECTRICAL, "Switches",
        electrical.switches, "un", prices.switch,
    ))
    items.append(_item(
        BudgetCategory.ELECTRICAL, "Light points",
        electrical.light_points, "un", prices.light_point,
    ))
    items.append(_item(
        BudgetCategory.ELECTRICAL, "Wiring 2.5mm",
        electrical.wire_estimate, "m", prices.wire_m,
    ))

    # Plumbing lines only appear when there is something to install
    water_points = plumbing.cold_water_points + plumbing.hot_water_points
    if water_points > 0:
        items.append(_item(
            BudgetCategory.PLUMBING, "Water points",
            water_points, "un", prices.water_point,
        ))
    if plumbing.drain_points > 0:
        items.append(_item(
            BudgetCategory.PLUMBING, "Drain points",
            plumbing.drain_points, "un", prices.drain_point,
        ))
    if plumbing.pipe_estimate > 0:
        items.append(_item(
            BudgetCategory.PLUMBING, "PVC piping",
            plumbing.pipe_estimate, "m", prices.pipe_m,
        ))

    return items


def calculate_budget(
    materials: MaterialsEstimate, total_floor_area: float, config: EstimateConfig,
) -> BudgetEstimate:
    items = budget_items(materials, config)

    subtotals = {category: 0.0 for category in BudgetCategory}
    for item in items:
        subtotals[item.category] += item.total

    total = sum(subtotals.values())
    per_m2 = total / total_floor_area if total_floor_area > 0 else 0.0

    return BudgetEstimate(items=items, subtotals=subtotals, total=total, per_m2=per_m2)
