"""Pick the right builder for a geometry."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .builders import build_line_string, build_polygon, check_sequence
from .exceptions import UnsupportedGeometryError
from .models import Geometry, GeometryKind, VectorNetwork
from .projection import ZOOM, Coordinate

SUPPORTED_TYPES = frozenset(kind.value for kind in GeometryKind)


def is_supported(geometry_type: object) -> bool:
    return geometry_type in SUPPORTED_TYPES


def as_geometry(value: Geometry | Mapping[str, Any]) -> Geometry:
    """Accept a ``Geometry``, a GeoJSON geometry mapping or a feature mapping."""
    if isinstance(value, Geometry):
        return value
    if isinstance(value, Mapping):
        if "geometry" in value and "coordinates" not in value:
            return as_geometry(value["geometry"])
        if "type" in value:
            try:
                return Geometry.model_validate(dict(value))
            except ValidationError:
                raise UnsupportedGeometryError(value["type"]) from None
    raise UnsupportedGeometryError(type(value).__name__)


def dispatch(
    origin: Coordinate,
    geometry: Geometry | Mapping[str, Any],
    zoom: int = ZOOM,
) -> VectorNetwork | list[VectorNetwork]:
    """Convert one geometry into a network, or a list for Multi* geometries.

    Multi* parts are converted independently; grouping them is up to the
    caller.

    Raises:
        UnsupportedGeometryError: The geometry type is not one of ``GeometryKind``.
        InvalidGeometryError: The coordinates are not nested as the type requires.
    """
    geometry = as_geometry(geometry)
    if not is_supported(geometry.type):
        raise UnsupportedGeometryError(geometry.type)

    kind = GeometryKind(geometry.type)
    coordinates = geometry.coordinates or []

    if kind is GeometryKind.POLYGON:
        return build_polygon(origin, coordinates, zoom)
    if kind is GeometryKind.LINE_STRING:
        return build_line_string(origin, coordinates, zoom)

    check_sequence(coordinates, f"{kind.value} coordinates as a list of parts")
    if kind is GeometryKind.MULTI_POLYGON:
        return [build_polygon(origin, rings, zoom) for rings in coordinates]
    return [build_line_string(origin, line, zoom) for line in coordinates]
