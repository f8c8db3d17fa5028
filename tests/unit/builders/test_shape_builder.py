from __future__ import annotations

import json
import logging

import geojson
import pytest

from mapsource.builders.shape import ShapeSourceBuilder
from mapsource.models import InputShape, ShapeSource
from mapsource.options import ShapeSourceOption

POINTS = {
    "type": "FeatureCollection",
    "features": [
        {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [-77.03, 38.91]},
            "properties": {"title": "Washington"},
        },
        {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [-122.41, 37.77]},
            "properties": {"title": "San Francisco"},
        },
    ],
}

LINE = {"type": "LineString", "coordinates": [[0.0, 0.0], [10.0, 10.0]]}

WHITE_HOUSE = {"type": "Point", "coordinates": [-77.0365298, 38.8976763]}


class TestRemoteData:
    def test_url_string(self) -> None:
        src = ShapeSourceBuilder().build(
            "earthquakes",
            {"data": "https://example.com/earthquakes.geojson", "cluster": True},
        )
        assert isinstance(src, ShapeSource)
        assert src.origin is InputShape.REMOTE_URL
        assert str(src.url) == "https://example.com/earthquakes.geojson"
        assert src.shape is None
        # options are computed for remote data too
        assert src.options.as_dict() == {ShapeSourceOption.CLUSTERED: True}


class TestInlineData:
    def test_object_payload_with_clustering(self) -> None:
        src = ShapeSourceBuilder().build(
            "points", {"data": POINTS, "cluster": True, "clusterRadius": 40}
        )
        assert src.origin is InputShape.INLINE_GEOMETRY
        assert src.url is None
        assert src.options.as_dict() == {"clustered": True, "cluster_radius": 40}
        assert isinstance(src.shape, geojson.FeatureCollection)
        assert src.shape == POINTS

    def test_geojson_text_payload(self) -> None:
        src = ShapeSourceBuilder().build("line", {"data": json.dumps(LINE)})
        assert src.origin is InputShape.INLINE_GEOMETRY
        assert src.shape == LINE

    def test_coordinates_are_not_rounded(self) -> None:
        src = ShapeSourceBuilder().build("point", {"data": WHITE_HOUSE})
        assert src.shape == WHITE_HOUSE

    def test_payload_is_not_mutated(self) -> None:
        payload = json.loads(json.dumps(POINTS))
        ShapeSourceBuilder().build("points", {"data": payload})
        assert payload == POINTS

    @pytest.mark.parametrize(
        "data",
        [
            {"type": "Point", "coordinates": [1]},
            {"type": "Polygon", "coordinates": [[[0, 0], [1, 1]]]},
            {"no": "type"},
            "not geojson",
            [1, 2, 3],
            42,
        ],
    )
    def test_malformed_payload_yields_none(
        self, data, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING)
        assert ShapeSourceBuilder().build("bad", {"data": data}) is None
        assert any("Skipping shape source 'bad'" in r.message for r in caplog.records)

    def test_unserializable_payload_yields_none(self) -> None:
        assert ShapeSourceBuilder().build("bad", {"data": {"x": {1, 2}}}) is None


class TestUnrecognized:
    @pytest.mark.parametrize("properties", [{}, {"data": None}, {"cluster": True}])
    def test_missing_data(self, properties) -> None:
        builder = ShapeSourceBuilder()
        assert builder.can_build(properties) is False
        assert builder.build("s", properties) is None


class TestUpdateShape:
    def _inline_source(self) -> ShapeSource:
        src = ShapeSourceBuilder().build("s", {"data": POINTS})
        assert src is not None
        return src

    def test_replaces_geometry(self) -> None:
        src = self._inline_source()
        updated = ShapeSourceBuilder().update_shape(src, {"data": json.dumps(LINE)})
        assert updated is True
        assert src.shape == LINE

    def test_replacement_keeps_full_precision(self) -> None:
        src = self._inline_source()
        builder = ShapeSourceBuilder()
        assert builder.update_shape(src, {"data": json.dumps(WHITE_HOUSE)}) is True
        assert src.shape == WHITE_HOUSE

    def test_malformed_text_keeps_prior_geometry(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING)
        src = self._inline_source()
        before = src.shape
        builder = ShapeSourceBuilder()
        assert builder.update_shape(src, {"data": "{broken"}) is False
        assert builder.update_shape(src, {"data": "{broken"}) is False
        assert src.shape is before
        assert any("Keeping current shape" in r.message for r in caplog.records)

    @pytest.mark.parametrize("properties", [{}, {"data": POINTS}, {"data": 1}])
    def test_non_string_data_is_ignored(self, properties) -> None:
        src = self._inline_source()
        before = src.shape
        assert ShapeSourceBuilder().update_shape(src, properties) is False
        assert src.shape is before

    def test_remote_source_switches_to_inline(self) -> None:
        src = ShapeSourceBuilder().build(
            "s", {"data": "https://example.com/data.geojson"}
        )
        assert ShapeSourceBuilder().update_shape(src, {"data": json.dumps(LINE)})
        assert src.url is None
        assert src.origin is InputShape.INLINE_GEOMETRY

    def test_options_are_untouched(self) -> None:
        src = ShapeSourceBuilder().build("s", {"data": POINTS, "buffer": 32})
        ShapeSourceBuilder().update_shape(
            src, {"data": json.dumps(LINE), "buffer": 64}
        )
        assert src.options.buffer == 32.0
