"""GeoJSON text codec for shape sources."""

from __future__ import annotations

import logging
import sys
from typing import Any

import geojson
import geojson.factory
from geojson.base import GeoJSON
from geojson.geometry import Geometry

from .exceptions import GeometryParseError

logger = logging.getLogger(__name__)

# Every double's exact decimal expansion ends within this many fractional
# digits, so rounding coordinates to it leaves them unchanged.
_EXACT_PRECISION = sys.float_info.mant_dig - sys.float_info.min_exp


def _to_instance(ob: dict[str, Any]) -> Any:
    """``geojson.loads`` object hook that builds geometries without rounding."""
    factory = getattr(geojson.factory, str(ob.get("type")), None)
    if isinstance(factory, type) and issubclass(factory, Geometry):
        ob = {**ob, "precision": _EXACT_PRECISION}
    return GeoJSON.to_instance(ob)


def serialize_payload(payload: Any) -> str:
    """
    Serialize an inline geometry payload to GeoJSON text.

    Raises:
        GeometryParseError: If the payload is not JSON serializable
    """
    try:
        return geojson.dumps(payload)
    except (TypeError, ValueError) as e:
        raise GeometryParseError(f"Geometry payload is not serializable: {e}") from e


def parse_shape(text: str | bytes, source_identifier: str | None = None) -> GeoJSON:
    """
    Parse UTF-8 GeoJSON text into a geometry, feature or feature collection.

    Args:
        text: GeoJSON document
        source_identifier: Used only to enrich the error context

    Returns:
        The parsed GeoJSON object

    Raises:
        GeometryParseError: If the text is not valid JSON, is not a GeoJSON
            object, or fails the GeoJSON validity checks
    """
    try:
        if isinstance(text, bytes):
            text = text.decode("utf-8")
        shape = geojson.loads(text, object_hook=_to_instance)
    except (TypeError, ValueError) as e:
        raise GeometryParseError(
            f"Invalid GeoJSON text: {e}", source_identifier=source_identifier
        ) from e

    if not isinstance(shape, GeoJSON):
        raise GeometryParseError(
            "Document is not a GeoJSON object", source_identifier=source_identifier
        )

    try:
        errors = shape.errors()
    except AttributeError:
        # a member of the collection is not a GeoJSON object
        errors = "nested member is not a GeoJSON object"
    if errors:
        raise GeometryParseError(
            f"Invalid GeoJSON {shape['type']}: {errors}",
            source_identifier=source_identifier,
            geojson_type=shape["type"],
        )

    logger.debug(f"Parsed GeoJSON {shape['type']} for '{source_identifier}'")
    return shape
