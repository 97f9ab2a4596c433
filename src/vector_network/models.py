"""Pydantic data models for vector networks, styling and tile documents."""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class WindingRule(str, Enum):
    NONZERO = "NONZERO"


class GeometryKind(str, Enum):
    """Geometry types the dispatcher knows how to convert."""

    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"


# ---------------------------------------------------------------------------
# Network topology
# ---------------------------------------------------------------------------


class Vertex(BaseModel):
    """A point in the origin-relative pixel frame."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class Segment(BaseModel):
    """A directed connection between two vertices of the same network."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int


class Region(BaseModel):
    """A fill area made of closed loops; each loop lists segment indices."""

    model_config = ConfigDict(frozen=True)

    winding_rule: WindingRule = Field(WindingRule.NONZERO, serialization_alias="windingRule")
    loops: list[list[int]]


class VectorNetwork(BaseModel):
    """Vertices, segments and regions produced for one geometry.

    Segments and loops reference the network's own vertex and segment lists
    by index; the validator rejects any index outside those lists.
    """

    model_config = ConfigDict(frozen=True)

    vertices: list[Vertex]
    segments: list[Segment]
    regions: list[Region] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_indices(self) -> VectorNetwork:
        num_vertices = len(self.vertices)
        for i, seg in enumerate(self.segments):
            if not (0 <= seg.start < num_vertices and 0 <= seg.end < num_vertices):
                raise ValueError(f"segment {i} references a vertex outside 0..{num_vertices - 1}")
        num_segments = len(self.segments)
        for region in self.regions:
            for loop in region.loops:
                for idx in loop:
                    if not 0 <= idx < num_segments:
                        raise ValueError(f"loop references segment {idx} outside 0..{num_segments - 1}")
        return self


# ---------------------------------------------------------------------------
# Geometry and tiles
# ---------------------------------------------------------------------------


class Geometry(BaseModel):
    """A GeoJSON-shaped geometry object."""

    model_config = ConfigDict(extra="allow")

    type: str
    coordinates: Any = None


class BoundingBox(BaseModel):
    """Geographic bounds in degrees."""

    west: float
    south: float
    east: float
    north: float


class TileAddress(BaseModel):
    x: int = Field(ge=0)
    y: int = Field(ge=0)
    z: int = Field(ge=0)

    @property
    def name(self) -> str:
        return f"{self.x}/{self.y}/{self.z}"


# ---------------------------------------------------------------------------
# Styling
# ---------------------------------------------------------------------------


class Color(BaseModel):
    """An RGBA color with channels in 0..1."""

    r: float = Field(ge=0, le=1)
    g: float = Field(ge=0, le=1)
    b: float = Field(ge=0, le=1)
    a: float = Field(1.0, ge=0, le=1)

    @model_validator(mode="before")
    @classmethod
    def _parse_hex(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        text = value.strip().lstrip("#")
        if len(text) == 3:
            text = "".join(ch * 2 for ch in text)
        if len(text) not in (6, 8):
            raise ValueError(f"unrecognised color string {value!r}")
        try:
            channels = [int(text[i:i + 2], 16) / 255 for i in range(0, len(text), 2)]
        except ValueError:
            raise ValueError(f"unrecognised color string {value!r}") from None
        return dict(zip("rgba", channels))

    def rgb(self) -> RGB:
        return RGB(r=self.r, g=self.g, b=self.b)


class RGB(BaseModel):
    r: float
    g: float
    b: float


class SolidPaint(BaseModel):
    type: Literal["SOLID"] = "SOLID"
    color: RGB
    opacity: float | None = None


class LayerPaint(BaseModel):
    """The paint properties the converter understands.

    Any other key in a style layer's paint object is ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    line_color: Color | None = Field(None, alias="line-color")
    line_width: float | None = Field(None, alias="line-width", ge=0)
    line_opacity: float | None = Field(None, alias="line-opacity", ge=0, le=1)
    fill_color: Color | None = Field(None, alias="fill-color")


class StyleLayer(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    type: str | None = None
    paint: LayerPaint = Field(default_factory=LayerPaint)

    @field_validator("paint", mode="before")
    @classmethod
    def _none_paint(cls, value: Any) -> Any:
        return {} if value is None else value


class TileFeature(BaseModel):
    """A rendered map feature: geometry plus the style layer it was drawn with."""

    model_config = ConfigDict(extra="ignore")

    geometry: Geometry
    layer: StyleLayer
    properties: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _default_layer(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("layer"):
            layer_id = data.get("sourceLayer") or data.get("source-layer") or "features"
            data = {**data, "layer": {"id": layer_id}}
        return data

    @field_validator("properties", mode="before")
    @classmethod
    def _none_properties(cls, value: Any) -> Any:
        return {} if value is None else value


# ---------------------------------------------------------------------------
# Output nodes
# ---------------------------------------------------------------------------


class VectorNode(BaseModel):
    """A drawable vector object with its network and copied styling."""

    kind: Literal["vector"] = "vector"
    network: VectorNetwork
    strokes: list[SolidPaint] = Field(default_factory=list)
    stroke_weight: float | None = None
    fills: list[SolidPaint] | None = None


class GroupNode(BaseModel):
    kind: Literal["group"] = "group"
    name: str | None = None
    children: list[VectorNode]


class MaskRectangle(BaseModel):
    name: str = "Bounds"
    width: float
    height: float
    is_mask: bool = True


class LayerGroup(BaseModel):
    name: str
    children: list[Union[VectorNode, GroupNode]]


class FeatureFailure(BaseModel):
    """A feature that was skipped because its conversion failed."""

    layer: str
    index: int
    geometry_type: str
    error: dict[str, Any]


class TileDocument(BaseModel):
    """Everything produced for one tile."""

    name: str
    tile: TileAddress
    bounds: BoundingBox
    mask: MaskRectangle
    layers: list[LayerGroup]
    skipped: list[FeatureFailure] = Field(default_factory=list)
