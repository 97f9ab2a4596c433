"""Tests for geometry dispatch."""

import pytest

from vector_network import (
    GeometryKind,
    InvalidGeometryError,
    MalformedRingError,
    UnsupportedGeometryError,
    VectorNetwork,
    dispatch,
    is_supported,
)
from vector_network.models import Geometry


class TestDispatch:
    def test_polygon(self, origin, triangle_ring):
        result = dispatch(origin, {"type": "Polygon", "coordinates": [triangle_ring]})
        assert isinstance(result, VectorNetwork)
        assert len(result.vertices) == 3

    def test_multipolygon_yields_one_network_per_part(self, origin, triangle_ring, square_with_hole):
        geometry = {"type": "MultiPolygon", "coordinates": [[triangle_ring], square_with_hole, [triangle_ring]]}
        result = dispatch(origin, geometry)
        assert isinstance(result, list)
        assert len(result) == 3
        assert [len(n.vertices) for n in result] == [3, 8, 3]
        for network in result:
            assert len(network.segments) == len(network.vertices)
            assert network.regions[0].loops[0][0] == 0

    def test_linestring(self, origin):
        result = dispatch(origin, {"type": "LineString", "coordinates": [(30.0, 36.0), (30.1, 36.1)]})
        assert isinstance(result, VectorNetwork)
        assert len(result.segments) == 1
        assert result.regions == []

    def test_multilinestring(self, origin):
        geometry = {
            "type": "MultiLineString",
            "coordinates": [[(30.0, 36.0), (30.1, 36.1)], [(30.2, 36.0), (30.3, 36.0), (30.4, 36.1)]],
        }
        result = dispatch(origin, geometry)
        assert [len(n.segments) for n in result] == [1, 2]

    def test_accepts_geometry_model(self, origin, triangle_ring):
        result = dispatch(origin, Geometry(type="Polygon", coordinates=[triangle_ring]))
        assert len(result.segments) == 3

    def test_accepts_feature_mapping(self, origin, triangle_ring):
        feature = {"type": "Feature", "geometry": {"type": "Polygon", "coordinates": [triangle_ring]}}
        result = dispatch(origin, feature)
        assert len(result.vertices) == 3

    def test_multipolygon_part_error_propagates(self, origin, triangle_ring):
        bad = [(30.0, 36.0), (30.001, 36.0), (30.001, 36.001), (30.0, 36.002)]
        with pytest.raises(MalformedRingError):
            dispatch(origin, {"type": "MultiPolygon", "coordinates": [[triangle_ring], [bad]]})


class TestUnsupported:
    @pytest.mark.parametrize("geometry_type", ["Point", "MultiPoint", "GeometryCollection", "polygon"])
    def test_rejected(self, origin, geometry_type):
        with pytest.raises(UnsupportedGeometryError) as exc_info:
            dispatch(origin, {"type": geometry_type, "coordinates": [30.0, 36.0]})
        assert exc_info.value.geometry_type == geometry_type

    def test_missing_type(self, origin):
        with pytest.raises(UnsupportedGeometryError):
            dispatch(origin, {"coordinates": []})

    def test_is_supported(self):
        assert all(is_supported(kind.value) for kind in GeometryKind)
        assert not is_supported("Point")


class TestMalformedInput:
    @pytest.mark.parametrize(
        "geometry",
        [
            {"type": "Polygon", "coordinates": 5},
            {"type": "Polygon", "coordinates": [5]},
            {"type": "LineString", "coordinates": 5},
            {"type": "MultiPolygon", "coordinates": 5},
            {"type": "MultiPolygon", "coordinates": [5]},
            {"type": "MultiLineString", "coordinates": "abc"},
        ],
    )
    def test_wrong_nesting(self, origin, geometry):
        with pytest.raises(InvalidGeometryError):
            dispatch(origin, geometry)

    def test_non_string_type(self, origin):
        with pytest.raises(UnsupportedGeometryError) as exc_info:
            dispatch(origin, {"type": 5, "coordinates": []})
        assert exc_info.value.geometry_type == 5
