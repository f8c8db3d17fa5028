from collections.abc import Mapping
from typing import Any

from ..core.base_builder import BaseSourceBuilder
from ..exceptions import GeometryParseError
from ..models import InputShape, ShapeSource
from ..options import interpret_shape_options
from ..record import ConfigurationRecord, parse_url
from ..shapes import parse_shape, serialize_payload


class ShapeSourceBuilder(BaseSourceBuilder):
    """
    Build a GeoJSON source from ``data``.

    ``data`` is either a URL string pointing at a GeoJSON document, or an
    inline payload: a GeoJSON object, or a string of GeoJSON text. Shape
    options are interpreted for both forms. A payload that does not parse as
    GeoJSON yields no source at all.
    """

    def resolve_input_shape(self, record: ConfigurationRecord) -> InputShape:
        data = record.get("data")
        if data is None:
            return InputShape.UNRECOGNIZED
        if isinstance(data, str) and parse_url(data) is not None:
            return InputShape.REMOTE_URL
        return InputShape.INLINE_GEOMETRY

    def _build(
        self, identifier: str, record: ConfigurationRecord, shape: InputShape
    ) -> ShapeSource | None:
        options = interpret_shape_options(record)

        if shape is InputShape.REMOTE_URL:
            return ShapeSource(
                identifier=identifier, url=parse_url(record["data"]), options=options
            )

        if shape is InputShape.INLINE_GEOMETRY:
            data = record["data"]
            try:
                text = data if isinstance(data, str) else serialize_payload(data)
                geometry = parse_shape(text, source_identifier=identifier)
            except GeometryParseError as e:
                self._logger.warning(f"Skipping shape source '{identifier}': {e}")
                return None
            return ShapeSource(identifier=identifier, shape=geometry, options=options)

        return None

    def update_shape(self, source: ShapeSource, properties: Mapping[str, Any]) -> bool:
        """
        Replace the geometry of an existing shape source from ``data`` text.

        Only string ``data`` is considered. On a parse failure the source keeps
        its current geometry.

        Returns:
            True if the geometry was replaced, False otherwise
        """
        text = ConfigurationRecord.wrap(properties).get_string("data")
        if text is None:
            return False
        try:
            geometry = parse_shape(text, source_identifier=source.identifier)
        except GeometryParseError as e:
            self._logger.warning(
                f"Keeping current shape of '{source.identifier}': {e}"
            )
            return False

        source.replace_shape(geometry)
        self._logger.debug(f"Replaced shape of source '{source.identifier}'")
        return True
