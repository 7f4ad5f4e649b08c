"""Data model shared by the source map processing stages."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias


if TYPE_CHECKING:  # pragma: no cover - typing only
    from .environment import AssetEnvironment


MappingRecord: TypeAlias = Mapping[str, Any]
SourceMap: TypeAlias = Sequence[MappingRecord]
AssetURI: TypeAlias = Hashable
LinkSet: TypeAlias = frozenset


@dataclass(slots=True, frozen=True)
class Asset:
    """Loaded asset as returned by an environment."""

    uri: AssetURI
    logical_path: str
    content_type: str | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict)

    @property
    def source_map(self) -> SourceMap:
        """Return the raw mapping records attached to the asset."""
        return self.metadata.get("map") or ()


@dataclass(slots=True)
class ProcessRequest:
    """Input handed to the processor by the host build system."""

    content_type: str
    filename: str
    environment: AssetEnvironment
    metadata: Mapping[str, Any] = field(default_factory=dict)

    @property
    def links(self) -> Iterable[AssetURI]:
        """Return the links already declared for the artefact."""
        return self.metadata.get("links") or ()


@dataclass(slots=True, frozen=True)
class ProcessResult:
    """Serialized source map together with the dependencies it relies on."""

    data: str
    links: frozenset[AssetURI] = frozenset()


__all__ = [
    "Asset",
    "AssetURI",
    "LinkSet",
    "MappingRecord",
    "ProcessRequest",
    "ProcessResult",
    "SourceMap",
]
