"""Feature reader: loads rendered map features from exported JSON.

Two layouts are accepted: a plain JSON array of features (as exported from
a map's rendered-feature query, each carrying its style ``layer``), or a
GeoJSON ``FeatureCollection``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, BinaryIO

from pydantic import ValidationError

from .models import TileFeature


def read_features(file: str | Path | bytes | BinaryIO) -> list[TileFeature]:
    """Read features from a path, raw bytes or a binary file object.

    Raises:
        ValueError: If the content is not JSON or not a feature list.
    """
    data = _read_bytes(file)
    try:
        document = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError(f"Features file is not valid JSON: {exc}") from exc
    return parse_features(document)


def parse_features(document: Any) -> list[TileFeature]:
    """Validate an already-decoded JSON document into features."""
    if isinstance(document, dict) and document.get("type") == "FeatureCollection":
        document = document.get("features") or []
    if not isinstance(document, list):
        raise ValueError("Expected a JSON array of features or a FeatureCollection")

    features: list[TileFeature] = []
    for i, item in enumerate(document):
        try:
            features.append(TileFeature.model_validate(item))
        except ValidationError as exc:
            raise ValueError(f"Feature {i} is invalid: {exc.errors()[0]['msg']}") from exc
    return features


def _read_bytes(file: str | Path | bytes | BinaryIO) -> bytes:
    if isinstance(file, bytes):
        return file
    if isinstance(file, (str, Path)):
        with open(file, "rb") as f:
            return f.read()
    return file.read()
