"""Primary public API for mapsmith."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from mapsmith.adapters import FileAssetURI, FileSystemEnvironment
from mapsmith.core import (
    Asset,
    AssetEnvironment,
    AssetResolutionError,
    ProcessRequest,
    ProcessResult,
    SourceMapEncodingError,
    SourceMapKind,
    SourceMapProcessingError,
    SourceMapProcessor,
    UnsupportedContentTypeError,
    collect_links,
    process_source_map,
    rewrite_sources,
    strip_fingerprint,
)
from mapsmith.core.config import EnvironmentConfig, load_config


try:
    __version__ = _pkg_version("mapsmith")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "Asset",
    "AssetEnvironment",
    "AssetResolutionError",
    "EnvironmentConfig",
    "FileAssetURI",
    "FileSystemEnvironment",
    "ProcessRequest",
    "ProcessResult",
    "SourceMapEncodingError",
    "SourceMapKind",
    "SourceMapProcessingError",
    "SourceMapProcessor",
    "UnsupportedContentTypeError",
    "__version__",
    "collect_links",
    "load_config",
    "process_source_map",
    "rewrite_sources",
    "strip_fingerprint",
]
