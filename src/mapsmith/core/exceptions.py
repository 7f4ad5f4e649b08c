"""Exception hierarchy for the source map post-processing pipeline."""

from __future__ import annotations


class SourceMapProcessingError(RuntimeError):
    """Base exception for source map processing failures."""


class UnsupportedContentTypeError(SourceMapProcessingError):
    """Raised when a request declares a content type that is not a source map."""

    def __init__(self, content_type: str | None) -> None:
        self.content_type = content_type
        super().__init__(f"Unsupported source map content type: {content_type!r}")


class AssetResolutionError(SourceMapProcessingError):
    """Raised when an asset path cannot be resolved by the environment."""

    def __init__(self, path: str, *, accept: str | None = None, reason: str | None = None) -> None:
        self.path = path
        self.accept = accept
        message = f"Unable to resolve asset '{path}'"
        if accept:
            message += f" (accept: {accept})"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class SourceMapEncodingError(SourceMapProcessingError):
    """Raised when a mapping sequence cannot be serialized or decoded."""


class ConfigurationError(SourceMapProcessingError):
    """Raised when an environment configuration cannot be loaded."""


__all__ = [
    "AssetResolutionError",
    "ConfigurationError",
    "SourceMapEncodingError",
    "SourceMapProcessingError",
    "UnsupportedContentTypeError",
]
