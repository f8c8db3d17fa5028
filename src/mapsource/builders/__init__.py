"""Builders for each map source variant."""

from .image import ImageSourceBuilder
from .shape import ShapeSourceBuilder
from .tiles import (
    RasterDemSourceBuilder,
    RasterTileSourceBuilder,
    TileSourceBuilder,
    VectorTileSourceBuilder,
)

__all__ = [
    "ImageSourceBuilder",
    "RasterDemSourceBuilder",
    "RasterTileSourceBuilder",
    "ShapeSourceBuilder",
    "TileSourceBuilder",
    "VectorTileSourceBuilder",
]
