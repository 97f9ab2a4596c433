"""Error taxonomy for vector network conversion.

Every error raised by the library derives from ``VectorNetworkError`` and
exposes ``to_error_dict()`` so the HTTP layer and the tile composer can
report failures with stable keys.
"""

from __future__ import annotations


class VectorNetworkError(Exception):
    """Base exception for all conversion errors."""

    default_code: str = "VECTOR_NETWORK_ERROR"

    def __init__(self, message: str = "", *, code: str = "") -> None:
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)

    def to_error_dict(self) -> dict[str, object]:
        return {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
        }


class InvalidCoordinateError(VectorNetworkError):
    """A coordinate is not a finite ``(longitude, latitude)`` pair."""

    default_code = "INVALID_COORDINATE"

    def __init__(self, coordinate: object, reason: str) -> None:
        self.coordinate = coordinate
        super().__init__(f"Invalid coordinate {coordinate!r}: {reason}")


class MalformedRingError(VectorNetworkError):
    """A polygon ring's first and last coordinates differ."""

    default_code = "MALFORMED_RING"

    def __init__(self, ring_index: int, first: object, last: object) -> None:
        self.ring_index = ring_index
        self.first = first
        self.last = last
        super().__init__(
            f"Polygon ring {ring_index} is not closed: starts at {first!r}, ends at {last!r}"
        )


class EmptyRingError(VectorNetworkError):
    """A polygon ring has too few coordinates to enclose anything."""

    default_code = "EMPTY_RING"

    def __init__(self, ring_index: int, size: int, minimum: int) -> None:
        self.ring_index = ring_index
        self.size = size
        super().__init__(
            f"Polygon ring {ring_index} has {size} coordinates, at least {minimum} required"
        )


class EmptyLineError(VectorNetworkError):
    """A line has fewer than two coordinates."""

    default_code = "EMPTY_LINE"

    def __init__(self, size: int, minimum: int) -> None:
        self.size = size
        super().__init__(f"Line has {size} coordinates, at least {minimum} required")


class UnsupportedGeometryError(VectorNetworkError):
    """Geometry type is not Polygon, MultiPolygon, LineString or MultiLineString."""

    default_code = "UNSUPPORTED_GEOMETRY"

    def __init__(self, geometry_type: object) -> None:
        self.geometry_type = geometry_type
        super().__init__(f"Unsupported geometry type: {geometry_type!r}")

    def to_error_dict(self) -> dict[str, object]:
        payload = super().to_error_dict()
        payload["geometry_type"] = self.geometry_type
        return payload


class ConfigValidationError(VectorNetworkError):
    """A configuration value is out of its valid range.

    Attributes:
        key: The environment variable that failed validation.
        value: The invalid value.
    """

    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


class InvalidGeometryError(VectorNetworkError):
    """Geometry coordinates are not nested the way the geometry type requires."""

    default_code = "INVALID_GEOMETRY"

    def __init__(self, value: object, expected: str) -> None:
        self.value = value
        super().__init__(f"Expected {expected}, got {type(value).__name__}: {value!r}")
