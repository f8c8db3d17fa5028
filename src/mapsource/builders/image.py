from ..core.base_builder import BaseSourceBuilder
from ..geometry import quad_from_array
from ..models import ImageSource, InputShape
from ..record import ConfigurationRecord


class ImageSourceBuilder(BaseSourceBuilder):
    """Build an image source; ``url`` and four ``coordinates`` are both required."""

    def resolve_input_shape(self, record: ConfigurationRecord) -> InputShape:
        url = record.get_url("url")
        corners = record.get_coordinate_pairs("coordinates", count=4)
        if url is not None and corners is not None:
            return InputShape.IMAGE_QUAD
        return InputShape.UNRECOGNIZED

    def _build(
        self, identifier: str, record: ConfigurationRecord, shape: InputShape
    ) -> ImageSource | None:
        if shape is not InputShape.IMAGE_QUAD:
            return None
        return ImageSource(
            identifier=identifier,
            url=record.get_url("url"),
            coordinates=quad_from_array(
                record.get_coordinate_pairs("coordinates", count=4)
            ),
        )
