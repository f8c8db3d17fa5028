"""
models.py – map source descriptors
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Typed descriptors handed to the rendering engine's source registry. Each one
carries the caller-supplied identifier, exactly one origin and the option set
that applies to its family.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Annotated, Self

from geojson.base import GeoJSON
from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    InstanceOf,
    model_validator,
)

from .geometry import CoordinateQuad
from .options import ShapeSourceOptions, TileSourceOptions
from .record import parse_url

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class SourceType(str, Enum):
    """Source variants, named after the style document's source ``type``."""

    RASTER = "raster"
    VECTOR = "vector"
    RASTER_DEM = "raster-dem"
    GEOJSON = "geojson"
    IMAGE = "image"


class InputShape(str, Enum):
    """Which of the mutually exclusive input forms a record describes."""

    REMOTE_URL = "remote_url"
    INLINE_TILES = "inline_tiles"
    INLINE_GEOMETRY = "inline_geometry"
    IMAGE_QUAD = "image_quad"
    UNRECOGNIZED = "unrecognized"


def _absolute_url(value: str) -> str:
    if parse_url(value) is None:
        raise ValueError(f"'{value}' is not an absolute URL")
    return value


# The caller's string, kept verbatim once it validates as an absolute URL.
UrlString = Annotated[str, AfterValidator(_absolute_url)]

# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------


class SourceDescriptor(BaseModel, ABC):
    """Common base of every map source descriptor."""

    identifier: str = Field(
        ..., description="Registry key; uniqueness is enforced by the engine."
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    @abstractmethod
    def origin(self) -> InputShape:
        """Input form the descriptor was built from."""


class TileSource(SourceDescriptor):
    """Tile source fed either by a TileJSON URL or by URL templates."""

    configuration_url: UrlString | None = Field(
        None, description="Remote document describing the tile set."
    )
    tile_url_templates: list[str] | None = Field(
        None, description="Inline tile URL templates, e.g. '.../{z}/{x}/{y}.png'."
    )
    options: TileSourceOptions | None = Field(
        None, description="Tile options; only used with URL templates."
    )

    @model_validator(mode="after")
    def _single_origin(self) -> Self:
        if (self.configuration_url is None) == (self.tile_url_templates is None):
            raise ValueError(
                "Exactly one of configuration_url and tile_url_templates is required"
            )
        if self.configuration_url is not None and self.options is not None:
            raise ValueError("Remote tile sources take their options from the URL")
        return self

    @property
    def origin(self) -> InputShape:
        if self.configuration_url is not None:
            return InputShape.REMOTE_URL
        return InputShape.INLINE_TILES


class RasterTileSource(TileSource):
    """Raster image tiles."""


class VectorTileSource(TileSource):
    """Vector tiles."""


class RasterDEMSource(TileSource):
    """Raster elevation (DEM) tiles."""


class ShapeSource(SourceDescriptor):
    """
    GeoJSON source, remote or inline.

    Fields are frozen like every descriptor. The geometry changes only
    through :meth:`replace_shape`, which also drops ``url``.
    """

    url: UrlString | None = Field(None, description="Remote GeoJSON document.")
    shape: InstanceOf[GeoJSON] | None = Field(
        None, description="Inline parsed GeoJSON."
    )
    options: ShapeSourceOptions = Field(default_factory=ShapeSourceOptions)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def _single_origin(self) -> Self:
        if (self.url is None) == (self.shape is None):
            raise ValueError("Exactly one of url and shape is required")
        return self

    @property
    def origin(self) -> InputShape:
        if self.url is not None:
            return InputShape.REMOTE_URL
        return InputShape.INLINE_GEOMETRY

    def replace_shape(self, shape: GeoJSON) -> None:
        """Swap in a new inline geometry; a remote source becomes inline."""
        if not isinstance(shape, GeoJSON):
            raise TypeError(f"Expected a GeoJSON object, got {type(shape).__name__}")
        # bypasses the frozen guard for this one field pair
        object.__setattr__(self, "shape", shape)
        object.__setattr__(self, "url", None)


class ImageSource(SourceDescriptor):
    """Single image warped onto four geographic corners."""

    url: UrlString
    coordinates: CoordinateQuad

    @property
    def origin(self) -> InputShape:
        return InputShape.IMAGE_QUAD
