"""FastAPI server for vector network conversion."""

from __future__ import annotations

import csv
import io
import logging
from functools import lru_cache
from typing import Annotated, Any

from fastapi import Depends, FastAPI, HTTPException, Path, Query, Request, UploadFile
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel

from .config import Settings
from .dispatch import dispatch
from .exceptions import VectorNetworkError
from .layers import build_tile
from .models import GroupNode, TileAddress, TileDocument
from .reader import read_features

logger = logging.getLogger(__name__)

app = FastAPI(title="Vector Network", version="0.1.0")

CSV_FIELDS = [
    "layer", "feature", "part", "segment",
    "start", "end",
    "start_x", "start_y", "end_x", "end_y",
]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


class ConvertRequest(BaseModel):
    origin: tuple[float, float]
    geometry: dict[str, Any]


@app.exception_handler(VectorNetworkError)
async def _vector_network_error(request: Request, exc: VectorNetworkError) -> JSONResponse:
    logger.warning("Conversion failed for %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": exc.to_error_dict()})


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/convert")
async def convert_geometry(
    body: ConvertRequest,
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Convert a single geometry relative to ``origin``.

    Multi* geometries return one network per part; single geometries return
    a one-element list.
    """
    result = dispatch(body.origin, body.geometry, settings.zoom)
    networks = result if isinstance(result, list) else [result]
    return {"networks": networks}


@app.post("/tiles/{z}/{x}/{y}")
async def convert_tile(
    file: UploadFile,
    settings: Annotated[Settings, Depends(get_settings)],
    z: Annotated[int, Path(ge=0, le=30)],
    x: Annotated[int, Path(ge=0)],
    y: Annotated[int, Path(ge=0)],
    format: str = Query("json", pattern="^(csv|json)$"),
):
    """Convert an uploaded features file for tile ``z/x/y``.

    Accepts a JSON array of rendered features or a GeoJSON FeatureCollection.
    """
    if x >= 2**z or y >= 2**z:
        raise HTTPException(status_code=400, detail=f"Tile {x}/{y} is outside zoom {z}")

    content = await file.read()
    try:
        features = read_features(content)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    document = build_tile(TileAddress(x=x, y=y, z=z), features, settings)

    if format == "csv":
        return _tile_to_csv_response(document)
    return document


def _segment_rows(document: TileDocument):
    for layer in document.layers:
        for feature_idx, child in enumerate(layer.children):
            nodes = child.children if isinstance(child, GroupNode) else [child]
            for part_idx, node in enumerate(nodes):
                vertices = node.network.vertices
                for seg_idx, seg in enumerate(node.network.segments):
                    start, end = vertices[seg.start], vertices[seg.end]
                    yield {
                        "layer": layer.name,
                        "feature": feature_idx,
                        "part": part_idx,
                        "segment": seg_idx,
                        "start": seg.start,
                        "end": seg.end,
                        "start_x": start.x,
                        "start_y": start.y,
                        "end_x": end.x,
                        "end_y": end.y,
                    }


def _tile_to_csv_response(document: TileDocument) -> StreamingResponse:
    """Stream every segment of the tile as CSV."""

    def generate():
        buf = io.StringIO()
        writer = csv.DictWriter(buf, fieldnames=CSV_FIELDS)
        writer.writeheader()
        yield buf.getvalue()
        buf.seek(0)
        buf.truncate(0)

        for row in _segment_rows(document):
            writer.writerow(row)
            yield buf.getvalue()
            buf.seek(0)
            buf.truncate(0)

    filename = document.name.replace("/", "_")
    return StreamingResponse(
        generate(),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename=tile_{filename}.csv"},
    )
