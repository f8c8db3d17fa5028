"""
Option interpreter: scans a source configuration record and keeps the
recognized, well-typed tuning options for tile and shape sources.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from .geometry import CoordinateBounds, bounds_from_array
from .record import ConfigurationRecord

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class TileCoordinateSystem(str, Enum):
    """Tile addressing scheme."""

    XYZ = "xyz"
    TMS = "tms"


class TileSourceOption(str, Enum):
    COORDINATE_BOUNDS = "coordinate_bounds"
    MINIMUM_ZOOM_LEVEL = "minimum_zoom_level"
    MAXIMUM_ZOOM_LEVEL = "maximum_zoom_level"
    TILE_SIZE = "tile_size"
    TILE_COORDINATE_SYSTEM = "tile_coordinate_system"
    ATTRIBUTION = "attribution"


class ShapeSourceOption(str, Enum):
    MAXIMUM_ZOOM_LEVEL = "maximum_zoom_level"
    BUFFER = "buffer"
    SIMPLIFICATION_TOLERANCE = "simplification_tolerance"
    CLUSTERED = "clustered"
    CLUSTER_RADIUS = "cluster_radius"
    MAXIMUM_ZOOM_LEVEL_FOR_CLUSTERING = "maximum_zoom_level_for_clustering"
    CLUSTER_PROPERTIES = "cluster_properties"
    LINE_DISTANCE_METRICS = "line_distance_metrics"


# ---------------------------------------------------------------------------
# Option sets
# ---------------------------------------------------------------------------


class _OptionSet(BaseModel):
    """Option set whose explicitly set fields are the recognized options."""

    option_enum: ClassVar[type[Enum]]

    model_config = ConfigDict(frozen=True, extra="forbid")

    def as_dict(self) -> dict[Any, Any]:
        """Return only the options that were present in the record."""
        return {
            option: getattr(self, option.value)
            for option in self.option_enum
            if option.value in self.model_fields_set
        }

    def __contains__(self, option: object) -> bool:
        return option in self.as_dict()


class TileSourceOptions(_OptionSet):
    """Options for raster, vector and raster-dem tile sources."""

    option_enum: ClassVar[type[Enum]] = TileSourceOption

    coordinate_bounds: CoordinateBounds | None = Field(
        None, description="Area outside of which no tiles are requested."
    )
    minimum_zoom_level: float | None = None
    maximum_zoom_level: float | None = None
    tile_size: int | None = Field(None, description="Tile edge in pixels.")
    tile_coordinate_system: TileCoordinateSystem = Field(
        TileCoordinateSystem.XYZ,
        description="Tile addressing scheme; XYZ unless the record says 'tms'.",
    )
    attribution: str | None = Field(
        None, description="HTML attribution shown by the engine."
    )


class ShapeSourceOptions(_OptionSet):
    """Options for GeoJSON shape sources."""

    option_enum: ClassVar[type[Enum]] = ShapeSourceOption

    maximum_zoom_level: float | None = None
    buffer: float | None = None
    simplification_tolerance: float | None = None
    clustered: bool | None = None
    cluster_radius: float | None = None
    maximum_zoom_level_for_clustering: float | None = None
    cluster_properties: dict[str, list[Any]] | None = Field(
        None,
        description="Aggregated cluster properties: name -> expression array.",
    )
    line_distance_metrics: bool | None = None


# ---------------------------------------------------------------------------
# Interpreters
# ---------------------------------------------------------------------------


def _cluster_properties(record: ConfigurationRecord) -> dict[str, list[Any]] | None:
    raw = record.get_mapping("clusterProperties")
    if raw is None:
        return None
    properties: dict[str, list[Any]] = {}
    for name, expression in raw.items():
        valid = isinstance(name, str) and isinstance(expression, list)
        if not valid or not expression:
            logger.debug(
                f"Ignoring 'clusterProperties': '{name}' is not an expression array"
            )
            return None
        properties[name] = list(expression)
    return properties


def interpret_tile_options(
    properties: Mapping[str, Any] | ConfigurationRecord,
) -> TileSourceOptions:
    """Extract the tile options present and well-typed in ``properties``."""
    record = ConfigurationRecord.wrap(properties)
    options: dict[str, Any] = {}

    bounds = record.get_number_array("bounds", length=4)
    if bounds is not None:
        options["coordinate_bounds"] = bounds_from_array(bounds)
    minzoom = record.get_number("minzoom")
    if minzoom is not None:
        options["minimum_zoom_level"] = minzoom
    maxzoom = record.get_number("maxzoom")
    if maxzoom is not None:
        options["maximum_zoom_level"] = maxzoom
    tile_size = record.get_number("tileSize")
    if tile_size is not None and math.isfinite(tile_size):
        options["tile_size"] = int(tile_size)
    scheme = record.get_string("scheme")
    if scheme is not None:
        options["tile_coordinate_system"] = (
            TileCoordinateSystem.TMS if scheme == "tms" else TileCoordinateSystem.XYZ
        )
    attribution = record.get_string("attribution")
    if attribution is not None:
        options["attribution"] = attribution

    return TileSourceOptions(**options)


def interpret_shape_options(
    properties: Mapping[str, Any] | ConfigurationRecord,
) -> ShapeSourceOptions:
    """Extract the shape options present and well-typed in ``properties``."""
    record = ConfigurationRecord.wrap(properties)
    options: dict[str, Any] = {}

    numbers = {
        "maxzoom": "maximum_zoom_level",
        "buffer": "buffer",
        "tolerance": "simplification_tolerance",
        "clusterRadius": "cluster_radius",
        "clusterMaxZoom": "maximum_zoom_level_for_clustering",
    }
    for key, option in numbers.items():
        value = record.get_number(key)
        if value is not None:
            options[option] = value

    cluster = record.get_bool("cluster")
    if cluster is not None:
        options["clustered"] = cluster
    cluster_properties = _cluster_properties(record)
    if cluster_properties is not None:
        options["cluster_properties"] = cluster_properties
    line_metrics = record.get_bool("lineMetrics")
    if line_metrics is not None:
        options["line_distance_metrics"] = line_metrics

    return ShapeSourceOptions(**options)
