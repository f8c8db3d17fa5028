"""
Map Source Exception Classes

Typed exceptions raised at the coercion boundaries of the converter. The public
builders never let them escape: they turn into an absent result instead.
"""

from typing import Any


class MapSourceError(Exception):
    """Base exception for all map source conversion errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg


class GeometryParseError(MapSourceError):
    """Raised when geometry text cannot be parsed into a GeoJSON object."""

    def __init__(
        self,
        message: str,
        source_identifier: str | None = None,
        geojson_type: str | None = None,
    ) -> None:
        context = {}
        if source_identifier:
            context["source_identifier"] = source_identifier
        if geojson_type:
            context["geojson_type"] = geojson_type
        super().__init__(message, "GEOMETRY_PARSE_ERROR", context)

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for fixing the geometry payload."""
        if "geojson_type" in self.context:
            return (
                f"Check the coordinates of the '{self.context['geojson_type']}' "
                "object against the GeoJSON specification"
            )
        return "Ensure 'data' is a GeoJSON geometry, feature or feature collection"


class CoordinateArrayError(MapSourceError, ValueError):
    """Raised when a positional coordinate array has the wrong shape."""

    def __init__(
        self,
        message: str,
        expected_length: int | None = None,
        actual_length: int | None = None,
    ) -> None:
        context: dict[str, Any] = {}
        if expected_length is not None:
            context["expected_length"] = expected_length
        if actual_length is not None:
            context["actual_length"] = actual_length
        super().__init__(message, "COORDINATE_ARRAY_ERROR", context)
