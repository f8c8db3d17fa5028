"""Builder contract and shared dispatch logic."""

from .base_builder import BaseSourceBuilder
from .protocols import SourceBuilder

__all__ = ["BaseSourceBuilder", "SourceBuilder"]
