"""Spherical web-mercator projection into pixel space, plus tile bounds.

Coordinates are scaled into the global pixel raster at a zoom level:
``x = (lng + 180) / 360 * 256 * 2**zoom``, and ``y`` from the EPSG:3857
northing computed by pyproj, measured downward from the top edge of the
world.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from functools import lru_cache

import mercantile
from pyproj import Transformer

from .exceptions import InvalidCoordinateError
from .models import BoundingBox

ZOOM = 14
TILE_SIZE = 256
EARTH_RADIUS_M = 6_378_137.0
ORIGIN_SHIFT_M = math.pi * EARTH_RADIUS_M
# Latitude where the mercator world becomes square; beyond it y diverges.
MAX_LATITUDE = 85.0511287798066

Coordinate = Sequence[float]


@lru_cache(maxsize=1)
def _transformer() -> Transformer:
    return Transformer.from_crs("EPSG:4326", "EPSG:3857", always_xy=True)


def world_size(zoom: int = ZOOM) -> int:
    """Width and height of the whole world in pixels at ``zoom``."""
    return TILE_SIZE * 2**zoom


def lng_lat(coord: Coordinate) -> tuple[float, float]:
    """Validate a coordinate and return its ``(lng, lat)``, dropping altitude."""
    try:
        lng, lat = coord[0], coord[1]
    except (TypeError, IndexError, KeyError):
        raise InvalidCoordinateError(coord, "expected at least [longitude, latitude]") from None
    for value in (lng, lat):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidCoordinateError(coord, "components must be numbers")
        if not math.isfinite(value):
            raise InvalidCoordinateError(coord, "components must be finite")
    return float(lng), float(lat)


def _round_pixel(value: float, size: int) -> float:
    return float(min(math.floor(value + 0.5), size))


def project_many(coords: Iterable[Coordinate], zoom: int = ZOOM) -> list[tuple[float, float]]:
    """Project coordinates to whole-pixel ``(x, y)`` at ``zoom``.

    Latitudes are clamped to +/-``MAX_LATITUDE`` so the poles map onto the
    world's top and bottom edges instead of infinity. Longitudes are not
    wrapped: ``x`` is linear in longitude and capped at the world's east edge.
    """
    pairs = [lng_lat(c) for c in coords]
    if not pairs:
        return []

    lngs = [lng for lng, _ in pairs]
    lats = [max(-MAX_LATITUDE, min(MAX_LATITUDE, lat)) for _, lat in pairs]
    # EPSG:3857 wraps longitude, so only the northing comes from pyproj.
    _, ys = _transformer().transform([0.0] * len(lats), lats)

    size = world_size(zoom)
    return [
        (
            _round_pixel((lng + 180) / 360 * size, size),
            # Pixel y grows southward, mercator y grows northward.
            _round_pixel((ORIGIN_SHIFT_M - y) / (2 * ORIGIN_SHIFT_M) * size, size),
        )
        for lng, y in zip(lngs, ys)
    ]


def project(coord: Coordinate, zoom: int = ZOOM) -> tuple[float, float]:
    """Project a single ``(lng, lat)`` coordinate to pixel space."""
    return project_many([coord], zoom)[0]


def to_local(
    origin: Coordinate, coords: Iterable[Coordinate], zoom: int = ZOOM
) -> list[tuple[float, float]]:
    """Project ``coords`` and express them relative to the projected ``origin``."""
    x0, y0 = project(origin, zoom)
    return [(x - x0, y - y0) for x, y in project_many(coords, zoom)]


def tile_bounds(x: int, y: int, z: int) -> BoundingBox:
    """Return the lon/lat bounds of slippy-map tile ``z/x/y``."""
    b = mercantile.bounds(x, y, z)
    return BoundingBox(west=b.west, south=b.south, east=b.east, north=b.north)


def tile_origin(bounds: BoundingBox) -> tuple[float, float]:
    """The north-west corner, which becomes local ``(0, 0)`` for a tile."""
    return bounds.west, bounds.north
