from .geometry import Point2D, Segment, Rect
from .building import (
    PlanModel, Unit, WallSide, WALL_SIDES, OpeningType, ElementType,
    StairDirection, Position, Opening, Wall, Walls, MaterialConfig,
    RoomMaterials, Room,
    Element, FurnitureItem, Floor, WallDefaults, DoorDefaults, WindowDefaults,
    Defaults, FloorPlan, ResolvedOpening, ResolvedWall, ResolvedWalls,
    ResolvedRoom,
)
from .parameters import (
    RoomType, BrickConfig, PaintConfig, FlooringConfig, RoomElectricalConfig,
    RoomPlumbingConfig, ElectricalConfig, PlumbingConfig, PricesConfig,
    EstimateConfig, ValidationConfig,
)
from .layout import OpeningGeometry, WallGeometry, RoomGeometry, FloorGeometry
from .validation import Severity, IssueType, IssueDetails, ValidationIssue
from .stats import (
    WallStats, RoomStats, MeasurementsStats, MasonryMaterials, PaintMaterials,
    FlooringMaterials, RoomElectrical, ElectricalMaterials, RoomPlumbing,
    PlumbingMaterials, MaterialsEstimate, BudgetCategory, BudgetItem,
    BudgetEstimate, FloorPlanStats,
)
from .context import RoomBounds, WallSegment, ValidationContext
from .actions import (
    AddRoom, UpdateRoom, RemoveRoom, UpdateWall, AddOpening, UpdateOpening,
    RemoveOpening, UpdateDefaults, UpdateSettings, EditAction,
)

__all__ = [
    "Point2D", "Segment", "Rect",
    "PlanModel", "Unit", "WallSide", "WALL_SIDES", "OpeningType", "ElementType",
    "StairDirection", "Position", "Opening", "Wall", "Walls",
    "MaterialConfig", "RoomMaterials", "Room", "Element", "FurnitureItem",
    "Floor", "WallDefaults", "DoorDefaults", "WindowDefaults", "Defaults",
    "FloorPlan", "ResolvedOpening", "ResolvedWall", "ResolvedWalls",
    "ResolvedRoom",
    "RoomType", "BrickConfig", "PaintConfig", "FlooringConfig",
    "RoomElectricalConfig", "RoomPlumbingConfig", "ElectricalConfig",
    "PlumbingConfig", "PricesConfig", "EstimateConfig", "ValidationConfig",
    "OpeningGeometry", "WallGeometry", "RoomGeometry", "FloorGeometry",
    "Severity", "IssueType", "IssueDetails", "ValidationIssue",
    "WallStats", "RoomStats", "MeasurementsStats", "MasonryMaterials",
    "PaintMaterials", "FlooringMaterials", "RoomElectrical",
    "ElectricalMaterials", "RoomPlumbing", "PlumbingMaterials",
    "MaterialsEstimate", "BudgetCategory", "BudgetItem", "BudgetEstimate",
    "FloorPlanStats",
    "RoomBounds", "WallSegment", "ValidationContext",
    "AddRoom", "UpdateRoom", "RemoveRoom", "UpdateWall", "AddOpening",
    "UpdateOpening", "RemoveOpening", "UpdateDefaults", "UpdateSettings",
    "EditAction",
]
