"""Build vector networks from polygon rings and line strings."""

from __future__ import annotations

from collections.abc import Sequence

from .exceptions import EmptyLineError, EmptyRingError, InvalidGeometryError, MalformedRingError
from .models import Region, Segment, VectorNetwork, Vertex, WindingRule
from .projection import ZOOM, Coordinate, lng_lat, project, project_many

MIN_RING_COORDINATES = 4
MIN_LINE_COORDINATES = 2


def check_sequence(value: object, expected: str) -> None:
    """Raise ``InvalidGeometryError`` unless ``value`` is a list-like sequence."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise InvalidGeometryError(value, expected)


def _check_ring(index: int, ring: Sequence[Coordinate]) -> None:
    check_sequence(ring, f"ring {index} as a list of coordinates")
    if len(ring) < MIN_RING_COORDINATES:
        raise EmptyRingError(index, len(ring), MIN_RING_COORDINATES)
    first, last = lng_lat(ring[0]), lng_lat(ring[-1])
    if first != last:
        raise MalformedRingError(index, ring[0], ring[-1])


def build_polygon(
    origin: Coordinate,
    rings: Sequence[Sequence[Coordinate]],
    zoom: int = ZOOM,
) -> VectorNetwork:
    """Convert polygon rings (outer first, then holes) into one network.

    Every ring becomes one loop; the closing coordinate does not create a
    vertex but a segment back to the ring's first vertex. All loops share a
    single nonzero region, so ring orientation is left to the fill rule.

    Raises:
        EmptyRingError: A ring has fewer than four coordinates.
        MalformedRingError: A ring's first and last coordinates differ.
        InvalidGeometryError: ``rings`` or a ring is not a list.
    """
    check_sequence(rings, "a list of rings")
    # Validate everything up front so a bad ring yields no partial network.
    for i, ring in enumerate(rings):
        _check_ring(i, ring)

    x0, y0 = project(origin, zoom)
    vertices: list[Vertex] = []
    segments: list[Segment] = []
    loops: list[list[int]] = []

    for ring in rings:
        first_vertex = len(vertices)
        loop: list[int] = []
        for x, y in project_many(ring[:-1], zoom):
            vertices.append(Vertex(x=x - x0, y=y - y0))
            if len(vertices) - 1 > first_vertex:
                loop.append(len(segments))
                segments.append(Segment(start=len(vertices) - 2, end=len(vertices) - 1))
        loop.append(len(segments))
        segments.append(Segment(start=len(vertices) - 1, end=first_vertex))
        loops.append(loop)

    return VectorNetwork(
        vertices=vertices,
        segments=segments,
        regions=[Region(winding_rule=WindingRule.NONZERO, loops=loops)],
    )


def build_line_string(
    origin: Coordinate,
    coords: Sequence[Coordinate],
    zoom: int = ZOOM,
) -> VectorNetwork:
    """Convert a line into an open chain of vertices and segments.

    Raises:
        EmptyLineError: The line has fewer than two coordinates.
        InvalidGeometryError: ``coords`` is not a list.
    """
    check_sequence(coords, "a line as a list of coordinates")
    if len(coords) < MIN_LINE_COORDINATES:
        raise EmptyLineError(len(coords), MIN_LINE_COORDINATES)

    x0, y0 = project(origin, zoom)
    vertices = [Vertex(x=x - x0, y=y - y0) for x, y in project_many(coords, zoom)]
    segments = [Segment(start=i - 1, end=i) for i in range(1, len(vertices))]
    return VectorNetwork(vertices=vertices, segments=segments)
