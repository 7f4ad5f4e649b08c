"""Source map content types and the asset types they annotate."""

from __future__ import annotations

from enum import Enum

from .exceptions import UnsupportedContentTypeError


SCRIPT_CONTENT_TYPE = "application/javascript"
STYLESHEET_CONTENT_TYPE = "text/css"


class SourceMapKind(Enum):
    """Recognised source map media types paired with their companion type."""

    SCRIPT = ("application/js-sourcemap+json", SCRIPT_CONTENT_TYPE)
    STYLESHEET = ("application/css-sourcemap+json", STYLESHEET_CONTENT_TYPE)

    def __init__(self, content_type: str, accept: str) -> None:
        self.content_type = content_type
        self.accept = accept

    @classmethod
    def from_content_type(cls, content_type: str | None) -> SourceMapKind:
        """Return the kind declared by ``content_type`` or fail fast."""
        for kind in cls:
            if kind.content_type == content_type:
                return kind
        raise UnsupportedContentTypeError(content_type)

    @classmethod
    def for_companion(cls, accept: str) -> SourceMapKind:
        """Return the kind whose maps annotate assets of type ``accept``."""
        for kind in cls:
            if kind.accept == accept:
                return kind
        raise UnsupportedContentTypeError(accept)


__all__ = [
    "SCRIPT_CONTENT_TYPE",
    "STYLESHEET_CONTENT_TYPE",
    "SourceMapKind",
]
