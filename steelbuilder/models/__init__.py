from .geometry import (
    Point3D, Size3D, Rotation, UV, Placement, IDENTITY, point, size, rotate,
)
from .building import (
    WallSide, RoofStyle, LeanToWallType, OpeningType, ColorSlot, SkyType,
    GroundType, ViewMode, VisibilityMode, Dimensions, Overhangs, RoofConfig,
    Colors, EnclosedWalls, WallsConfig, LeanToConfig, LeanToConfigs,
    LegacyLeanTo, Opening, Environment, InteractionState, BuildingConfig,
)
from .primitives import (
    PrimitiveRole, Layer, Material, BoxPrimitive, MeshPrimitive, ConePrimitive,
    Primitive, VisibilityFlags, GeometryStats, BuildingGeometry,
)
from .parameters import FrameParams, LeanToParams, PlacementParams, GenerationConfig
from .roof import RoofFace, RoofGeometry, FrameLayout, LeanToProfile
from .context import BuildingContext

__all__ = [
    "Point3D", "Size3D", "Rotation", "UV", "Placement", "IDENTITY", "point", "size", "rotate",
    "WallSide", "RoofStyle", "LeanToWallType", "OpeningType", "ColorSlot", "SkyType",
    "GroundType", "ViewMode", "VisibilityMode", "Dimensions", "Overhangs", "RoofConfig",
    "Colors", "EnclosedWalls", "WallsConfig", "LeanToConfig", "LeanToConfigs",
    "LegacyLeanTo", "Opening", "Environment", "InteractionState", "BuildingConfig",
    "PrimitiveRole", "Layer", "Material", "BoxPrimitive", "MeshPrimitive", "ConePrimitive",
    "Primitive", "VisibilityFlags", "GeometryStats", "BuildingGeometry",
    "FrameParams", "LeanToParams", "PlacementParams", "GenerationConfig",
    "RoofFace", "RoofGeometry", "FrameLayout", "LeanToProfile",
    "BuildingContext",
]
