"""Capability interfaces the host build system provides to the processor."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .models import AssetURI, SourceMap


if TYPE_CHECKING:  # pragma: no cover - typing only
    from .models import Asset, ProcessRequest


@runtime_checkable
class AssetResolver(Protocol):
    """Turn a logical path into an asset identifier."""

    def resolve(self, path: str, *, accept: str | None = None) -> AssetURI: ...


@runtime_checkable
class AssetLoader(Protocol):
    """Load an asset previously returned by a resolver."""

    def load(self, uri: AssetURI) -> Asset: ...


@runtime_checkable
class PathContext(Protocol):
    """Per-invocation formatter producing public asset paths."""

    def asset_path(self, path: str) -> str: ...


@runtime_checkable
class SourceMapEncoder(Protocol):
    """Serialize mapping records into the source map wire format."""

    def encode_source_map(self, source_map: SourceMap, *, filename: str) -> str: ...


@runtime_checkable
class AssetEnvironment(AssetResolver, AssetLoader, SourceMapEncoder, Protocol):
    """Bundle of collaborators consumed by the processor."""

    def context_for(self, request: ProcessRequest) -> PathContext: ...


__all__ = [
    "AssetEnvironment",
    "AssetLoader",
    "AssetResolver",
    "PathContext",
    "SourceMapEncoder",
]
