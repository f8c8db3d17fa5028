"""Source type registry and the public conversion entry points."""

import logging
from collections.abc import Mapping
from typing import Any

from .builders import (
    ImageSourceBuilder,
    RasterDemSourceBuilder,
    RasterTileSourceBuilder,
    ShapeSourceBuilder,
    VectorTileSourceBuilder,
)
from .core.protocols import SourceBuilder
from .models import (
    ImageSource,
    RasterDEMSource,
    RasterTileSource,
    ShapeSource,
    SourceDescriptor,
    SourceType,
    VectorTileSource,
)

logger = logging.getLogger(__name__)


class SourcePropertyConverter:
    """
    Dispatches a source configuration record to the builder registered for
    its source type.

    The built-in builders for every SourceType are registered on creation;
    register_builder() adds or replaces one.
    """

    def __init__(self) -> None:
        self._logger = logger.getChild(self.__class__.__name__)
        self._builders: dict[SourceType, SourceBuilder] = {}
        self._shape_builder = ShapeSourceBuilder()

        self.register_builder(SourceType.RASTER, RasterTileSourceBuilder())
        self.register_builder(SourceType.VECTOR, VectorTileSourceBuilder())
        self.register_builder(SourceType.RASTER_DEM, RasterDemSourceBuilder())
        self.register_builder(SourceType.GEOJSON, self._shape_builder)
        self.register_builder(SourceType.IMAGE, ImageSourceBuilder())

    # --- Registry ---

    def register_builder(
        self, source_type: SourceType | str, builder: SourceBuilder
    ) -> None:
        """
        Registers a builder for a source type.

        Raises:
            ValueError: If source_type is not a known SourceType value
        """
        source_type = SourceType(source_type)
        if source_type in self._builders:
            self._logger.warning(
                f"Overwriting builder for source type: '{source_type.value}'"
            )
        self._logger.info(
            f"Registering builder '{builder.__class__.__name__}' "
            f"for type '{source_type.value}'"
        )
        self._builders[source_type] = builder

    def get_registered_builders(self) -> dict[SourceType, SourceBuilder]:
        """Returns the dictionary of registered builders."""
        return self._builders

    # --- Dispatch ---

    def build_source(
        self,
        identifier: str,
        properties: Mapping[str, Any],
        source_type: SourceType | str,
    ) -> SourceDescriptor | None:
        """
        Build the descriptor for ``identifier`` using the builder registered
        for ``source_type``.

        Returns None for unknown source types and for records none of the
        builder's construction paths accept.
        """
        try:
            resolved_type = SourceType(source_type)
        except ValueError:
            self._logger.warning(
                f"Unknown source type '{source_type}' for source '{identifier}'. "
                "Skipping."
            )
            return None

        builder = self._builders.get(resolved_type)
        if builder is None:
            self._logger.warning(
                f"No builder registered for source type: '{resolved_type.value}'. "
                "Skipping."
            )
            return None

        if not builder.can_build(properties):
            self._logger.warning(
                f"The builder for '{resolved_type.value}' cannot handle "
                f"the configuration of '{identifier}'. Skipping."
            )
            return None

        try:
            return builder.build(identifier, properties)
        except Exception as e:
            self._logger.error(
                f"Critical failure while building source '{identifier}': {e}",
                exc_info=True,
            )
            raise

    def build_raster_tile_source(
        self, identifier: str, properties: Mapping[str, Any]
    ) -> RasterTileSource | None:
        return self.build_source(identifier, properties, SourceType.RASTER)

    def build_vector_tile_source(
        self, identifier: str, properties: Mapping[str, Any]
    ) -> VectorTileSource | None:
        return self.build_source(identifier, properties, SourceType.VECTOR)

    def build_raster_dem_source(
        self, identifier: str, properties: Mapping[str, Any]
    ) -> RasterDEMSource | None:
        return self.build_source(identifier, properties, SourceType.RASTER_DEM)

    def build_shape_source(
        self, identifier: str, properties: Mapping[str, Any]
    ) -> ShapeSource | None:
        return self.build_source(identifier, properties, SourceType.GEOJSON)

    def build_image_source(
        self, identifier: str, properties: Mapping[str, Any]
    ) -> ImageSource | None:
        return self.build_source(identifier, properties, SourceType.IMAGE)

    def add_shape_properties(
        self, properties: Mapping[str, Any], source: ShapeSource
    ) -> bool:
        """Replace the geometry of ``source`` from string ``data``; see
        ShapeSourceBuilder.update_shape()."""
        return self._shape_builder.update_shape(source, properties)


# Default converter instance
_default_converter = SourcePropertyConverter()


def get_default_converter() -> SourcePropertyConverter:
    """Get the default converter instance."""
    return _default_converter


def build_source(
    identifier: str, properties: Mapping[str, Any], source_type: SourceType | str
) -> SourceDescriptor | None:
    return _default_converter.build_source(identifier, properties, source_type)


def build_raster_tile_source(
    identifier: str, properties: Mapping[str, Any]
) -> RasterTileSource | None:
    return _default_converter.build_raster_tile_source(identifier, properties)


def build_vector_tile_source(
    identifier: str, properties: Mapping[str, Any]
) -> VectorTileSource | None:
    return _default_converter.build_vector_tile_source(identifier, properties)


def build_raster_dem_source(
    identifier: str, properties: Mapping[str, Any]
) -> RasterDEMSource | None:
    return _default_converter.build_raster_dem_source(identifier, properties)


def build_shape_source(
    identifier: str, properties: Mapping[str, Any]
) -> ShapeSource | None:
    return _default_converter.build_shape_source(identifier, properties)


def build_image_source(
    identifier: str, properties: Mapping[str, Any]
) -> ImageSource | None:
    return _default_converter.build_image_source(identifier, properties)


def add_shape_properties(properties: Mapping[str, Any], source: ShapeSource) -> bool:
    return _default_converter.add_shape_properties(properties, source)
