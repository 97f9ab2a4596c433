"""Copy stroke and fill styling from a style layer's paint onto vector nodes."""

from __future__ import annotations

from .config import DEFAULT_STROKE_SCALE
from .models import LayerPaint, SolidPaint, VectorNetwork, VectorNode


def stroke_paints(paint: LayerPaint) -> list[SolidPaint]:
    """One solid stroke from ``line-color``; the color's alpha is dropped."""
    if paint.line_color is None:
        return []
    return [SolidPaint(color=paint.line_color.rgb(), opacity=paint.line_opacity)]


def stroke_weight(paint: LayerPaint, scale: float = DEFAULT_STROKE_SCALE) -> float | None:
    if not paint.line_width:
        return None
    return paint.line_width * scale


def fill_paints(paint: LayerPaint) -> list[SolidPaint] | None:
    """One solid fill from ``fill-color``, or ``None`` to keep the host default."""
    if paint.fill_color is None:
        return None
    return [SolidPaint(color=paint.fill_color.rgb())]


def line_node(network: VectorNetwork, paint: LayerPaint, scale: float = DEFAULT_STROKE_SCALE) -> VectorNode:
    return VectorNode(
        network=network,
        strokes=stroke_paints(paint),
        stroke_weight=stroke_weight(paint, scale),
    )


def polygon_node(network: VectorNetwork, paint: LayerPaint, scale: float = DEFAULT_STROKE_SCALE) -> VectorNode:
    return VectorNode(
        network=network,
        strokes=stroke_paints(paint),
        stroke_weight=stroke_weight(paint, scale),
        fills=fill_paints(paint),
    )
