import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from ..models import InputShape, SourceDescriptor
from ..record import ConfigurationRecord

from .protocols import SourceBuilder

logger = logging.getLogger(__name__)


class BaseSourceBuilder(SourceBuilder, ABC):
    """
    Base class for source builders.

    Resolves the record's input shape once and hands the recognized shape to
    the variant-specific construction step, keeping the precedence rules of
    each variant in one place.

    Subclasses must implement:
    - resolve_input_shape(): which input form the record describes
    - _build(): construction of the descriptor for a recognized shape
    """

    def __init__(self) -> None:
        self._logger = logger.getChild(self.__class__.__name__)

    def can_build(self, properties: Mapping[str, Any]) -> bool:
        record = ConfigurationRecord.wrap(properties)
        return self.resolve_input_shape(record) is not InputShape.UNRECOGNIZED

    def build(
        self, identifier: str, properties: Mapping[str, Any]
    ) -> SourceDescriptor | None:
        """
        Template method: resolve the input shape, then delegate.

        Returns None when the record matches no construction path.
        """
        record = ConfigurationRecord.wrap(properties)
        shape = self.resolve_input_shape(record)
        if shape is InputShape.UNRECOGNIZED:
            self._logger.debug(
                f"Source '{identifier}' has no recognized input form. Skipping."
            )
            return None

        self._logger.debug(f"Building source '{identifier}' from {shape.value}")
        return self._build(identifier, record, shape)

    @abstractmethod
    def resolve_input_shape(self, record: ConfigurationRecord) -> InputShape:
        pass

    @abstractmethod
    def _build(
        self, identifier: str, record: ConfigurationRecord, shape: InputShape
    ) -> SourceDescriptor | None:
        """
        Variant-specific construction for a recognized input shape.

        Args:
            identifier: Caller-supplied source identifier
            record: The wrapped configuration record
            shape: The shape returned by resolve_input_shape()
        """
        pass
