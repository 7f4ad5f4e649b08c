"""Core source map processing primitives."""

from __future__ import annotations

from .content_types import SCRIPT_CONTENT_TYPE, STYLESHEET_CONTENT_TYPE, SourceMapKind
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .environment import AssetEnvironment, AssetLoader, AssetResolver, PathContext, SourceMapEncoder
from .exceptions import (
    AssetResolutionError,
    ConfigurationError,
    SourceMapEncodingError,
    SourceMapProcessingError,
    UnsupportedContentTypeError,
)
from .fingerprint import compute_fingerprint, fingerprint_path, strip_fingerprint
from .links import collect_links
from .models import Asset, ProcessRequest, ProcessResult
from .processor import SourceMapProcessor, process_source_map
from .rewriter import rewrite_sources


__all__ = [
    "SCRIPT_CONTENT_TYPE",
    "STYLESHEET_CONTENT_TYPE",
    "Asset",
    "AssetEnvironment",
    "AssetLoader",
    "AssetResolutionError",
    "AssetResolver",
    "ConfigurationError",
    "DiagnosticEmitter",
    "LoggingEmitter",
    "NullEmitter",
    "PathContext",
    "ProcessRequest",
    "ProcessResult",
    "SourceMapEncoder",
    "SourceMapEncodingError",
    "SourceMapKind",
    "SourceMapProcessingError",
    "SourceMapProcessor",
    "UnsupportedContentTypeError",
    "collect_links",
    "compute_fingerprint",
    "fingerprint_path",
    "process_source_map",
    "rewrite_sources",
    "strip_fingerprint",
]
