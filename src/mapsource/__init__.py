"""
mapsource

Converts loosely-typed map style source records into typed source
descriptors for the rendering engine, without performing any I/O.

Public helpers
--------------
build_source(identifier, properties, source_type) -> SourceDescriptor | None
    Dispatches on the source type ("raster", "vector", "raster-dem",
    "geojson", "image") using the default converter.
add_shape_properties(properties, source) -> bool
    Replaces the geometry of an existing ShapeSource in place.
"""

from .converter import (
    SourcePropertyConverter,
    add_shape_properties,
    build_image_source,
    build_raster_dem_source,
    build_raster_tile_source,
    build_shape_source,
    build_source,
    build_vector_tile_source,
    get_default_converter,
)
from .exceptions import CoordinateArrayError, GeometryParseError, MapSourceError
from .geometry import (
    Coordinate,
    CoordinateBounds,
    CoordinateQuad,
    bounds_from_array,
    quad_from_array,
)
from .models import (
    ImageSource,
    InputShape,
    RasterDEMSource,
    RasterTileSource,
    ShapeSource,
    SourceDescriptor,
    SourceType,
    TileSource,
    VectorTileSource,
)
from .options import (
    ShapeSourceOption,
    ShapeSourceOptions,
    TileCoordinateSystem,
    TileSourceOption,
    TileSourceOptions,
    interpret_shape_options,
    interpret_tile_options,
)
from .record import ConfigurationRecord

__all__ = [
    "ConfigurationRecord",
    "Coordinate",
    "CoordinateArrayError",
    "CoordinateBounds",
    "CoordinateQuad",
    "GeometryParseError",
    "ImageSource",
    "InputShape",
    "MapSourceError",
    "RasterDEMSource",
    "RasterTileSource",
    "ShapeSource",
    "ShapeSourceOption",
    "ShapeSourceOptions",
    "SourceDescriptor",
    "SourcePropertyConverter",
    "SourceType",
    "TileCoordinateSystem",
    "TileSource",
    "TileSourceOption",
    "TileSourceOptions",
    "VectorTileSource",
    "add_shape_properties",
    "bounds_from_array",
    "build_image_source",
    "build_raster_dem_source",
    "build_raster_tile_source",
    "build_shape_source",
    "build_source",
    "build_vector_tile_source",
    "get_default_converter",
    "interpret_shape_options",
    "interpret_tile_options",
    "quad_from_array",
]
