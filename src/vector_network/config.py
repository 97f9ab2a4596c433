"""Runtime settings loaded from environment variables.

``Settings.from_env()`` validates eagerly and raises
``ConfigValidationError`` on bad values so misconfiguration surfaces at
startup rather than in the middle of a tile.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .exceptions import ConfigValidationError

DEFAULT_ZOOM = 14
DEFAULT_STROKE_SCALE = 4.0
ERROR_POLICIES = ("skip", "abort")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable conversion settings.

    Attributes:
        zoom: Projection zoom level for pixel coordinates. Output coordinates
            are defined at zoom 14, so this is not read from the environment;
            override it only when constructing ``Settings`` in code.
        stroke_scale: Multiplier applied to ``line-width`` paint values.
        on_feature_error: ``"skip"`` records a failing feature and keeps going,
            ``"abort"`` lets the first error fail the whole tile.
        log_level: Root log level used by ``main.py``.
    """

    zoom: int = DEFAULT_ZOOM
    stroke_scale: float = DEFAULT_STROKE_SCALE
    on_feature_error: str = "skip"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        _validate(self)

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from ``VECTOR_NETWORK_*`` environment variables.

        Raises:
            ConfigValidationError: If a value is unparseable or out of range.
        """
        return cls(
            stroke_scale=_parse("VECTOR_NETWORK_STROKE_SCALE", str(DEFAULT_STROKE_SCALE), float),
            on_feature_error=os.getenv("VECTOR_NETWORK_ON_FEATURE_ERROR", "skip").strip().lower(),
            log_level=os.getenv("VECTOR_NETWORK_LOG_LEVEL", "INFO").strip().upper(),
        )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def _parse(key: str, default: str, kind: type):
    raw = os.getenv(key, default)
    try:
        return kind(raw)
    except ValueError:
        raise ConfigValidationError(key, raw, f"must be a valid {kind.__name__}") from None


def _validate(settings: Settings) -> None:
    if not 0 <= settings.zoom <= 30:
        raise ConfigValidationError("zoom", settings.zoom, "must be between 0 and 30")

    if settings.stroke_scale <= 0:
        raise ConfigValidationError(
            "VECTOR_NETWORK_STROKE_SCALE", settings.stroke_scale, "must be > 0"
        )

    if settings.on_feature_error not in ERROR_POLICIES:
        raise ConfigValidationError(
            "VECTOR_NETWORK_ON_FEATURE_ERROR",
            settings.on_feature_error,
            f"must be one of {', '.join(ERROR_POLICIES)}",
        )

    if settings.log_level not in LOG_LEVELS:
        raise ConfigValidationError(
            "VECTOR_NETWORK_LOG_LEVEL",
            settings.log_level,
            f"must be one of {', '.join(LOG_LEVELS)}",
        )
