"""Unit tests for BaseSourceBuilder abstract class."""

from __future__ import annotations

import logging

import pytest

from mapsource.core.base_builder import BaseSourceBuilder
from mapsource.models import InputShape, RasterTileSource, SourceDescriptor
from mapsource.record import ConfigurationRecord

TILES = ["https://example.com/{z}/{x}/{y}.png"]

# -------------------- Fakes / helpers --------------------


class RecordingBuilder(BaseSourceBuilder):
    """Builder that recognizes records with a 'name' string."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, InputShape]] = []

    def resolve_input_shape(self, record: ConfigurationRecord) -> InputShape:
        if record.get_string("name") is not None:
            return InputShape.REMOTE_URL
        return InputShape.UNRECOGNIZED

    def _build(
        self, identifier: str, record: ConfigurationRecord, shape: InputShape
    ) -> SourceDescriptor | None:
        self.calls.append((identifier, shape))
        return RasterTileSource(identifier=identifier, tile_url_templates=TILES)


# --------------------------- Tests ---------------------------


class TestTemplateMethod:
    def test_recognized_shape_is_delegated(self) -> None:
        b = RecordingBuilder()
        src = b.build("a", {"name": "x"})
        assert isinstance(src, SourceDescriptor)
        assert src.identifier == "a"
        assert b.calls == [("a", InputShape.REMOTE_URL)]

    def test_unrecognized_shape_short_circuits(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG)
        b = RecordingBuilder()
        assert b.build("a", {"name": 1}) is None
        assert b.calls == []
        assert any("no recognized input form" in r.message for r in caplog.records)

    def test_can_build(self) -> None:
        b = RecordingBuilder()
        assert b.can_build({"name": "x"}) is True
        assert b.can_build({}) is False

    def test_accepts_configuration_record(self) -> None:
        b = RecordingBuilder()
        assert b.build("a", ConfigurationRecord({"name": "x"})) is not None

    def test_cannot_instantiate_abstract_base(self) -> None:
        with pytest.raises(TypeError):
            BaseSourceBuilder()  # type: ignore[abstract]
