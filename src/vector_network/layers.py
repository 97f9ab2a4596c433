"""Compose a whole tile: group converted features by style layer and add a mask."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .config import Settings
from .dispatch import dispatch, is_supported
from .exceptions import VectorNetworkError
from .models import (
    FeatureFailure,
    GeometryKind,
    GroupNode,
    LayerGroup,
    MaskRectangle,
    TileAddress,
    TileDocument,
    TileFeature,
    VectorNode,
)
from .projection import Coordinate, project, tile_bounds, tile_origin
from .styling import line_node, polygon_node

logger = logging.getLogger(__name__)

POLYGON_KINDS = {GeometryKind.POLYGON.value, GeometryKind.MULTI_POLYGON.value}


def create_object(
    origin: Coordinate, feature: TileFeature, settings: Settings | None = None
) -> VectorNode | GroupNode:
    """Convert and style one feature; Multi* geometries become a group."""
    settings = settings or Settings()
    geometry = feature.geometry
    paint = feature.layer.paint
    make_node = polygon_node if geometry.type in POLYGON_KINDS else line_node

    result = dispatch(origin, geometry, settings.zoom)
    if isinstance(result, list):
        return GroupNode(children=[make_node(n, paint, settings.stroke_scale) for n in result])
    return make_node(result, paint, settings.stroke_scale)


def create_layers(
    origin: Coordinate,
    features: Sequence[TileFeature],
    settings: Settings | None = None,
) -> tuple[list[LayerGroup], list[FeatureFailure]]:
    """Group features by style layer id, keeping first-seen layer order.

    Unsupported geometry types are dropped. Conversion errors either abort
    (re-raised) or are collected as ``FeatureFailure`` entries, depending on
    ``settings.on_feature_error``.
    """
    settings = settings or Settings()
    grouped: dict[str, list[VectorNode | GroupNode]] = {}
    failures: list[FeatureFailure] = []

    for index, feature in enumerate(features):
        layer_id = feature.layer.id
        children = grouped.setdefault(layer_id, [])
        if not is_supported(feature.geometry.type):
            logger.debug("Skipping %s feature %d in layer %s", feature.geometry.type, index, layer_id)
            continue
        try:
            children.append(create_object(origin, feature, settings))
        except VectorNetworkError as exc:
            if settings.on_feature_error == "abort":
                raise
            logger.warning("Skipping feature %d in layer %s: %s", index, layer_id, exc)
            failures.append(
                FeatureFailure(
                    layer=layer_id,
                    index=index,
                    geometry_type=feature.geometry.type,
                    error=exc.to_error_dict(),
                )
            )

    layers = [LayerGroup(name=name, children=children) for name, children in grouped.items()]
    return layers, failures


def build_tile(
    tile: TileAddress,
    features: Sequence[TileFeature],
    settings: Settings | None = None,
) -> TileDocument:
    """Convert every feature of a tile, anchored at the tile's north-west corner.

    ``features`` come in rendered order (topmost first), so they are
    processed in reverse to stack bottom-up.
    """
    settings = settings or Settings()
    bounds = tile_bounds(tile.x, tile.y, tile.z)
    origin = tile_origin(bounds)

    start_x, start_y = project(origin, settings.zoom)
    end_x, end_y = project((bounds.east, bounds.south), settings.zoom)
    mask = MaskRectangle(width=end_x - start_x, height=end_y - start_y)

    layers, failures = create_layers(origin, list(reversed(features)), settings)
    logger.info(
        "Built tile %s: %d features, %d layers, %d skipped",
        tile.name,
        len(features),
        len(layers),
        len(failures),
    )
    return TileDocument(
        name=tile.name,
        tile=tile,
        bounds=bounds,
        mask=mask,
        layers=layers,
        skipped=failures,
    )
