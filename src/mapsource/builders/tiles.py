from ..core.base_builder import BaseSourceBuilder
from ..models import (
    InputShape,
    RasterDEMSource,
    RasterTileSource,
    TileSource,
    VectorTileSource,
)
from ..options import interpret_tile_options
from ..record import ConfigurationRecord


class TileSourceBuilder(BaseSourceBuilder):
    """
    Build a tiled source from either a TileJSON ``url`` or inline ``tiles``.

    The ``url`` wins whenever it is a valid absolute URL; tile options are
    only interpreted for the inline form.
    """

    descriptor_type: type[TileSource] = TileSource

    def resolve_input_shape(self, record: ConfigurationRecord) -> InputShape:
        if record.get_url("url") is not None:
            return InputShape.REMOTE_URL
        if record.get_string_array("tiles") is not None:
            return InputShape.INLINE_TILES
        return InputShape.UNRECOGNIZED

    def _build(
        self, identifier: str, record: ConfigurationRecord, shape: InputShape
    ) -> TileSource | None:
        if shape is InputShape.REMOTE_URL:
            return self.descriptor_type(
                identifier=identifier, configuration_url=record.get_url("url")
            )
        if shape is InputShape.INLINE_TILES:
            return self.descriptor_type(
                identifier=identifier,
                tile_url_templates=record.get_string_array("tiles"),
                options=interpret_tile_options(record),
            )
        return None


class RasterTileSourceBuilder(TileSourceBuilder):
    descriptor_type = RasterTileSource


class VectorTileSourceBuilder(TileSourceBuilder):
    descriptor_type = VectorTileSource


class RasterDemSourceBuilder(TileSourceBuilder):
    descriptor_type = RasterDEMSource
