import mercantile
import pytest

ORIGIN = (30.0, 36.0)


@pytest.fixture
def origin():
    return ORIGIN


@pytest.fixture
def triangle_ring():
    return [(30.0, 36.0), (30.001, 36.0), (30.001, 36.001), (30.0, 36.0)]


@pytest.fixture
def square_with_hole():
    outer = [(30.0, 36.0), (30.01, 36.0), (30.01, 36.01), (30.0, 36.01), (30.0, 36.0)]
    hole = [(30.004, 36.004), (30.004, 36.006), (30.006, 36.006), (30.006, 36.004), (30.004, 36.004)]
    return [outer, hole]


@pytest.fixture
def tile():
    """The zoom-14 tile containing the default map center (30.4126, 36.5486)."""
    t = mercantile.tile(30.41264409674052, 36.54859925757881, 14)
    return t.x, t.y, t.z


@pytest.fixture
def tile_features(tile):
    """Rendered features inside ``tile``, topmost first, as a map would export them."""
    x, y, z = tile
    b = mercantile.bounds(x, y, z)
    w, s, e, n = b.west, b.south, b.east, b.north
    dx, dy = (e - w) / 10, (n - s) / 10

    def ring(x0, y0, x1, y1):
        return [[x0, y0], [x1, y0], [x1, y1], [x0, y1], [x0, y0]]

    return [
        {
            "type": "Feature",
            "geometry": {"type": "LineString", "coordinates": [[w + dx, s + dy], [e - dx, n - dy]]},
            "properties": {"class": "street"},
            "layer": {
                "id": "road",
                "type": "line",
                "paint": {"line-color": {"r": 1, "g": 0.5, "b": 0, "a": 0.8}, "line-width": 2, "line-opacity": 0.5},
            },
        },
        {
            "type": "Feature",
            "geometry": {"type": "Polygon", "coordinates": [ring(w + dx, s + dy, w + 3 * dx, s + 3 * dy)]},
            "properties": {},
            "layer": {"id": "water", "type": "fill", "paint": {"fill-color": {"r": 0, "g": 0, "b": 1, "a": 1}}},
        },
        {
            "type": "Feature",
            "geometry": {
                "type": "MultiPolygon",
                "coordinates": [
                    [ring(w + 4 * dx, s + 4 * dy, w + 5 * dx, s + 5 * dy)],
                    [ring(w + 6 * dx, s + 6 * dy, w + 7 * dx, s + 7 * dy)],
                ],
            },
            "properties": {},
            "layer": {"id": "water", "type": "fill", "paint": {"fill-color": "#336699"}},
        },
        {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [w + dx, s + dy]},
            "properties": {"name": "peak"},
            "layer": {"id": "poi", "type": "symbol", "paint": {}},
        },
    ]
