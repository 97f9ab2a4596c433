"""Convert lon/lat vector features into planar vector networks."""

from .builders import build_line_string, build_polygon
from .config import Settings
from .dispatch import dispatch, is_supported
from .exceptions import (
    ConfigValidationError,
    EmptyLineError,
    EmptyRingError,
    InvalidCoordinateError,
    InvalidGeometryError,
    MalformedRingError,
    UnsupportedGeometryError,
    VectorNetworkError,
)
from .layers import build_tile, create_layers, create_object
from .models import (
    GeometryKind,
    LayerPaint,
    Region,
    Segment,
    TileAddress,
    TileDocument,
    TileFeature,
    VectorNetwork,
    Vertex,
    WindingRule,
)
from .projection import ZOOM, project, project_many, tile_bounds, to_local
from .reader import read_features

__all__ = [
    "ConfigValidationError",
    "EmptyLineError",
    "EmptyRingError",
    "GeometryKind",
    "InvalidCoordinateError",
    "InvalidGeometryError",
    "LayerPaint",
    "MalformedRingError",
    "Region",
    "Segment",
    "Settings",
    "TileAddress",
    "TileDocument",
    "TileFeature",
    "UnsupportedGeometryError",
    "VectorNetwork",
    "VectorNetworkError",
    "Vertex",
    "WindingRule",
    "ZOOM",
    "build_line_string",
    "build_polygon",
    "build_tile",
    "create_layers",
    "create_object",
    "dispatch",
    "is_supported",
    "project",
    "project_many",
    "read_features",
    "tile_bounds",
    "to_local",
]
