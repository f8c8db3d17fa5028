"""
geometry.py – geographic primitives
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Coordinate, bounding box and corner quadrilateral as consumed by the rendering
engine, plus the helpers that build them from GeoJSON-style positional arrays.

Values are passed through untouched: range checking of latitudes and
longitudes is the engine's concern.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import CoordinateArrayError

# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


class Coordinate(BaseModel):
    """A single geographic position."""

    latitude: float = Field(..., description="Latitude in degrees.")
    longitude: float = Field(..., description="Longitude in degrees.")

    model_config = ConfigDict(frozen=True, extra="forbid")

    def as_tuple(self) -> tuple[float, float]:
        """Return ``(latitude, longitude)``."""
        return (self.latitude, self.longitude)


class CoordinateBounds(BaseModel):
    """Rectangular area delimited by its south-west and north-east corners."""

    sw: Coordinate = Field(..., description="South-west corner.")
    ne: Coordinate = Field(..., description="North-east corner.")

    model_config = ConfigDict(frozen=True, extra="forbid")


class CoordinateQuad(BaseModel):
    """Four arbitrary corners an image is warped onto."""

    top_left: Coordinate
    top_right: Coordinate
    bottom_right: Coordinate
    bottom_left: Coordinate

    model_config = ConfigDict(frozen=True, extra="forbid")


# ---------------------------------------------------------------------------
# Positional array helpers
# ---------------------------------------------------------------------------


def _position(pair: Sequence[float]) -> Coordinate:
    # GeoJSON order: [longitude, latitude]
    return Coordinate(latitude=pair[1], longitude=pair[0])


def bounds_from_array(coordinates: Sequence[float]) -> CoordinateBounds:
    """
    Build a bounding box from ``[west, south, east, north]``.

    Args:
        coordinates: Exactly four numbers.

    Returns:
        CoordinateBounds with ``sw=(south, west)`` and ``ne=(north, east)``

    Raises:
        CoordinateArrayError: If the array does not hold exactly four values
    """
    if len(coordinates) != 4:
        raise CoordinateArrayError(
            "Bounds require [west, south, east, north]",
            expected_length=4,
            actual_length=len(coordinates),
        )
    west, south, east, north = coordinates
    return CoordinateBounds(
        sw=Coordinate(latitude=south, longitude=west),
        ne=Coordinate(latitude=north, longitude=east),
    )


def quad_from_array(coordinates: Sequence[Sequence[float]]) -> CoordinateQuad:
    """
    Build a corner quadrilateral from four ``[longitude, latitude]`` pairs.

    The input order is top-left, top-right, bottom-right, bottom-left.

    Raises:
        CoordinateArrayError: If there are not exactly four pairs of two values
    """
    if len(coordinates) != 4:
        raise CoordinateArrayError(
            "Image coordinates require four corners",
            expected_length=4,
            actual_length=len(coordinates),
        )
    for pair in coordinates:
        if len(pair) != 2:
            raise CoordinateArrayError(
                "Each corner must be a [longitude, latitude] pair",
                expected_length=2,
                actual_length=len(pair),
            )
    top_left, top_right, bottom_right, bottom_left = coordinates
    return CoordinateQuad(
        top_left=_position(top_left),
        top_right=_position(top_right),
        bottom_right=_position(bottom_right),
        bottom_left=_position(bottom_left),
    )
