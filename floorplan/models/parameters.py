"""Estimation coefficients, price list and validation configuration."""

from __future__ import annotations
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .building import PlanModel


# Whole-number quantity in the defaults; configs saved by the editor may hold
# fractions, and NaN from malformed input is carried through as a float.
Count = int | float


class RoomType(str, Enum):
    """Coarse room category driving electrical/plumbing point estimates."""
    LIVING = "living"
    KITCHEN = "kitchen"
    BATHROOM = "bathroom"
    BEDROOM = "bedroom"
    UTILITY = "utility"
    DEFAULT = "default"


# Portuguese keys found in configs saved by the editor.
ROOM_TYPE_ALIASES: dict[str, RoomType] = {
    "sala": RoomType.LIVING,
    "cozinha": RoomType.KITCHEN,
    "banheiro": RoomType.BATHROOM,
    "quarto": RoomType.BEDROOM,
    "area-servico": RoomType.UTILITY,
}


def _normalize_room_type_keys(value: Any) -> Any:
    if not isinstance(value, dict):
        return value
    return {ROOM_TYPE_ALIASES.get(k, k): v for k, v in value.items()}


class BrickConfig(PlanModel):
    width: float = 14               # cm
    height: float = 19              # cm
    length: float = 9               # cm
    mortar_thickness: float = 1     # cm
    waste_factor: float = 1.05      # 1.05 = 5% extra


class PaintConfig(PlanModel):
    coverage: float = 10            # m² per liter
    primer_coverage: float = 12     # m² per liter
    putty_coverage: float = 3       # m² per kg
    coats: Count = 2
    primer_coats: Count = 1
    putty_percentage: float = 70    # Share of wall area getting putty (0-100)


class FlooringConfig(PlanModel):
    waste_factor: float = 1.10      # 1.10 = 10% extra
    grout_per_m2: float = 0.5       # kg per m²
    adhesive_per_m2: float = 5      # kg per m²


class RoomElectricalConfig(PlanModel):
    outlets: Count
    switches: Count
    lights: Count


class RoomPlumbingConfig(PlanModel):
    cold_water: Count
    hot_water: Count
    drains: Count


def _default_electrical() -> dict[RoomType, RoomElectricalConfig]:
    return {
        RoomType.LIVING: RoomElectricalConfig(outlets=6, switches=2, lights=2),
        RoomType.KITCHEN: RoomElectricalConfig(outlets=8, switches=2, lights=2),
        RoomType.BATHROOM: RoomElectricalConfig(outlets=2, switches=1, lights=2),
        RoomType.BEDROOM: RoomElectricalConfig(outlets=4, switches=2, lights=1),
        RoomType.UTILITY: RoomElectricalConfig(outlets=3, switches=1, lights=1),
        RoomType.DEFAULT: RoomElectricalConfig(outlets=3, switches=1, lights=1),
    }


def _default_plumbing() -> dict[RoomType, RoomPlumbingConfig]:
    return {
        RoomType.KITCHEN: RoomPlumbingConfig(cold_water=2, hot_water=1, drains=2),
        RoomType.BATHROOM: RoomPlumbingConfig(cold_water=3, hot_water=2, drains=3),
        RoomType.UTILITY: RoomPlumbingConfig(cold_water=2, hot_water=1, drains=2),
    }


class ElectricalConfig(PlanModel):
    wire_per_point: float = 8       # meters of wire per point
    by_room_type: dict[RoomType, RoomElectricalConfig] = Field(
        default_factory=_default_electrical,
    )

    @field_validator("by_room_type", mode="before")
    @classmethod
    def _accept_legacy_keys(cls, value: Any) -> Any:
        return _normalize_room_type_keys(value)

    def for_room(self, room_type: RoomType) -> RoomElectricalConfig:
        """Point counts for a room type, falling back to the default entry."""
        found = self.by_room_type.get(room_type)
        if found is None:
            found = self.by_room_type.get(RoomType.DEFAULT)
        if found is None:
            found = _default_electrical()[RoomType.DEFAULT]
        return found


class PlumbingConfig(PlanModel):
    pipe_per_point: float = 3       # meters of pipe per point
    by_room_type: dict[RoomType, RoomPlumbingConfig] = Field(
        default_factory=_default_plumbing,
    )

    @field_validator("by_room_type", mode="before")
    @classmethod
    def _accept_legacy_keys(cls, value: Any) -> Any:
        return _normalize_room_type_keys(value)

    def for_room(self, room_type: RoomType) -> RoomPlumbingConfig | None:
        """Point counts for a room type; None for dry rooms."""
        return self.by_room_type.get(room_type)


class PricesConfig(BaseModel):
    """Unit prices (BRL). Keys match the editor's saved price lists."""
    brick: float = 0.85
    mortar_m3: float = 350
    paint_18l: float = 280
    primer_18l: float = 150
    putty_25kg: float = 45
    tile_m2: float = 45
    grout_kg: float = 8
    tile_adhesive_kg: float = 1.2
    outlet: float = 25
    switch: float = 20
    light_point: float = 80
    water_point: float = 120
    drain_point: float = 100
    wire_m: float = 3.5
    pipe_m: float = 12


class EstimateConfig(PlanModel):
    """User-tunable coefficients for the materials estimate and budget."""
    brick: BrickConfig = Field(default_factory=BrickConfig)
    paint: PaintConfig = Field(default_factory=PaintConfig)
    flooring: FlooringConfig = Field(default_factory=FlooringConfig)
    electrical: ElectricalConfig = Field(default_factory=ElectricalConfig)
    plumbing: PlumbingConfig = Field(default_factory=PlumbingConfig)
    prices: PricesConfig = Field(default_factory=PricesConfig)


class ValidationConfig(BaseModel):
    """Controls which validation rules run."""
    enabled_rules: list[str] = []        # Empty = use all registered rules
    disabled_rules: list[str] = []       # Explicitly disable specific rules
