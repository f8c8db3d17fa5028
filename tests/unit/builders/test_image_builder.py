from __future__ import annotations

import pytest

from mapsource.builders.image import ImageSourceBuilder
from mapsource.models import ImageSource, InputShape

CORNERS = [[0, 1], [2, 3], [4, 5], [6, 7]]


class TestImageSourceBuilder:
    def test_url_and_coordinates(self) -> None:
        src = ImageSourceBuilder().build(
            "radar",
            {"url": "https://example.com/radar.gif", "coordinates": CORNERS},
        )
        assert isinstance(src, ImageSource)
        assert src.identifier == "radar"
        assert src.origin is InputShape.IMAGE_QUAD
        assert str(src.url) == "https://example.com/radar.gif"
        quad = src.coordinates
        assert quad.top_left.as_tuple() == (1, 0)
        assert quad.top_right.as_tuple() == (3, 2)
        assert quad.bottom_right.as_tuple() == (5, 4)
        assert quad.bottom_left.as_tuple() == (7, 6)

    def test_extra_keys_are_ignored(self) -> None:
        src = ImageSourceBuilder().build(
            "radar",
            {
                "url": "https://example.com/radar.gif",
                "coordinates": CORNERS,
                "tiles": ["https://example.com/{z}/{x}/{y}.png"],
            },
        )
        assert src is not None

    @pytest.mark.parametrize(
        "properties",
        [
            {},
            {"url": "https://example.com/radar.gif"},
            {"coordinates": CORNERS},
            {"url": "not a url", "coordinates": CORNERS},
            {"url": "https://example.com/radar.gif", "coordinates": CORNERS[:3]},
            {
                "url": "https://example.com/radar.gif",
                "coordinates": [[0, 1], [2, 3], [4, 5], [6]],
            },
            {
                "url": "https://example.com/radar.gif",
                "coordinates": [[0, 1], [2, 3], [4, 5], ["6", "7"]],
            },
            {
                "url": "https://example.com/radar.gif",
                "coordinates": [[10**400, 0], [2, 3], [4, 5], [6, 7]],
            },
        ],
    )
    def test_missing_or_malformed_inputs_yield_none(self, properties) -> None:
        builder = ImageSourceBuilder()
        assert builder.can_build(properties) is False
        assert builder.build("radar", properties) is None
