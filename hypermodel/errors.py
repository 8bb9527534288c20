"""Error hierarchy for building and rendering hypermedia models.

Builders never raise; everything here surfaces from link expansion, link
lookup or a renderer refusing a model shape.
"""

from __future__ import annotations

from typing import Any, Optional


class HypermediaError(Exception):
    """Base exception for all hypermodel errors."""

    code = "HYPERMEDIA_ERROR"
    http_status = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        """Convert to the JSON error envelope used by the HTTP adapter."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
            }
        }


class ExpansionError(HypermediaError):
    """A link template could not be expanded with the given values."""

    code = "EXPANSION_FAILED"

    def __init__(self, message: str, template: Optional[str] = None) -> None:
        super().__init__(message)
        self.template = template


class StructuralMismatchError(HypermediaError):
    """A renderer's format cannot express the shape of the given model."""

    code = "STRUCTURAL_MISMATCH"
    http_status = 406

    def __init__(self, message: str, media_type: Optional[str] = None) -> None:
        super().__init__(message)
        self.media_type = media_type

    def to_response(self) -> dict[str, Any]:
        response = super().to_response()
        if self.media_type:
            response["error"]["media_type"] = self.media_type
        return response


class MissingLinkError(HypermediaError):
    """A required link relation is absent from a model."""

    code = "MISSING_LINK"

    def __init__(self, relation: Any) -> None:
        super().__init__(f"No link with relation '{relation}' found")
        self.relation = relation


class UnsupportedMediaTypeError(HypermediaError):
    """No renderer is registered for the requested media type."""

    code = "UNSUPPORTED_MEDIA_TYPE"
    http_status = 406
