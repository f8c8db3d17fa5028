from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..models import InputShape, SourceDescriptor
    from ..record import ConfigurationRecord


class SourceBuilder(Protocol):
    """Defines the contract for building one source variant from a record."""

    def resolve_input_shape(self, record: "ConfigurationRecord") -> "InputShape":
        """
        Decide which input form the record describes.

        Args:
            record: The source configuration record

        Returns:
            The recognized InputShape, or InputShape.UNRECOGNIZED
        """
        ...

    def can_build(self, properties: Mapping[str, Any]) -> bool:
        """
        Checks whether this builder recognizes the record's input form.

        Args:
            properties: Source configuration record

        Returns:
            True if a descriptor can be attempted, False otherwise.
        """

        ...

    def build(
        self, identifier: str, properties: Mapping[str, Any]
    ) -> "SourceDescriptor | None":
        """
        Build the descriptor, or None when no construction path matches
        or the payload is malformed.
        """
        ...
