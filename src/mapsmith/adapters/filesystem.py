"""Asset environment backed by load paths on the local filesystem."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import mimetypes
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from mapsmith.core.config import EnvironmentConfig
from mapsmith.core.content_types import (
    SCRIPT_CONTENT_TYPE,
    STYLESHEET_CONTENT_TYPE,
    SourceMapKind,
)
from mapsmith.core.exceptions import AssetResolutionError
from mapsmith.core.fingerprint import compute_fingerprint, fingerprint_path, strip_fingerprint
from mapsmith.core.models import Asset, SourceMap

from .encoding import decode_source_map, encode_source_map


if TYPE_CHECKING:  # pragma: no cover - typing only
    from mapsmith.core.models import ProcessRequest


logger = logging.getLogger(__name__)

_EXTENSION_TYPES = {
    ".js": SCRIPT_CONTENT_TYPE,
    ".mjs": SCRIPT_CONTENT_TYPE,
    ".css": STYLESHEET_CONTENT_TYPE,
}


def content_type_for(path: str | Path) -> str | None:
    """Infer the content type of an asset from its file name."""
    candidate = PurePosixPath(str(path))
    if candidate.suffix == ".map":
        companion = _EXTENSION_TYPES.get(PurePosixPath(candidate.stem).suffix)
        if companion is not None:
            return SourceMapKind.for_companion(companion).content_type
    suffix_type = _EXTENSION_TYPES.get(candidate.suffix)
    if suffix_type is not None:
        return suffix_type
    guessed, _ = mimetypes.guess_type(candidate.name)
    return guessed


@dataclass(slots=True, frozen=True)
class FileAssetURI:
    """Identifier of an asset located on disk.

    ``logical_path`` records the load-path relative name the asset was found
    under; it does not take part in equality.
    """

    path: Path
    content_type: str | None = None
    logical_path: str | None = field(default=None, compare=False)

    def __str__(self) -> str:
        uri = self.path.as_uri()
        return f"{uri}?type={self.content_type}" if self.content_type else uri


class FileSystemEnvironment:
    """Resolve, load and publish assets found under configured load paths."""

    def __init__(self, config: EnvironmentConfig | None = None) -> None:
        self.config = config or EnvironmentConfig()
        self._load_paths = self.config.load_paths()

    @property
    def load_paths(self) -> list[Path]:
        return list(self._load_paths)

    def _locate(self, path: str) -> tuple[str, Path] | None:
        candidate = Path(path)
        if candidate.is_absolute():
            resolved = candidate.resolve()
            for base in self._load_paths:
                if resolved.is_relative_to(base) and resolved.is_file():
                    return resolved.relative_to(base).as_posix(), resolved
            return None
        for base in self._load_paths:
            resolved = (base / candidate).resolve()
            if resolved.is_relative_to(base) and resolved.is_file():
                return resolved.relative_to(base).as_posix(), resolved
        return None

    def unpublish(self, path: str) -> str | None:
        """Return the logical path behind a public path, or ``None``."""
        public_root = f"{self.config.prefix}/"
        if not path.startswith(public_root):
            return None
        logical = path[len(public_root) :]
        if self.config.digest_public_paths:
            logical, _ = strip_fingerprint(logical)
        return logical

    def resolve(self, path: str, *, accept: str | None = None) -> FileAssetURI:
        located = self._locate(path)
        if located is None:
            logical = self.unpublish(path)
            if logical is not None:
                located = self._locate(logical)
        if located is None:
            raise AssetResolutionError(path, accept=accept, reason="not found in load paths")
        logical_path, resolved = located
        content_type = content_type_for(resolved)
        if accept is not None and content_type != accept:
            raise AssetResolutionError(
                path, accept=accept, reason=f"found {content_type or 'unknown type'}"
            )
        uri = FileAssetURI(path=resolved, content_type=content_type, logical_path=logical_path)
        logger.debug("Resolved %s to %s", path, uri)
        return uri

    def logical_path(self, uri: FileAssetURI) -> str:
        """Return the load-path relative name of ``uri``."""
        if uri.logical_path is not None:
            return uri.logical_path
        for base in self._load_paths:
            if uri.path.is_relative_to(base):
                return uri.path.relative_to(base).as_posix()
        raise AssetResolutionError(str(uri.path), reason="outside of load paths")

    def load(self, uri: FileAssetURI) -> Asset:
        logical_path = self.logical_path(uri)
        try:
            content = uri.path.read_bytes()
        except OSError as exc:
            raise AssetResolutionError(logical_path, reason=str(exc)) from exc

        metadata: dict[str, object] = {"digest": compute_fingerprint(content)}
        sidecar = uri.path.with_name(uri.path.name + self.config.map_suffix)
        if sidecar.is_file():
            metadata["map"] = decode_source_map(sidecar.read_text(encoding="utf-8"))
            logger.debug("Loaded source map %s", sidecar)
        return Asset(
            uri=uri,
            logical_path=logical_path,
            content_type=uri.content_type,
            metadata=metadata,
        )

    def context_for(self, request: ProcessRequest | None = None) -> PublicPathContext:
        return PublicPathContext(self)

    def encode_source_map(self, source_map: SourceMap, *, filename: str) -> str:
        return encode_source_map(source_map, filename=filename)


class PublicPathContext:
    """Format logical asset paths as public URLs.

    Digests are computed once per logical path for the lifetime of the
    context.
    """

    def __init__(self, environment: FileSystemEnvironment) -> None:
        self.environment = environment
        self.prefix = environment.config.prefix
        self.digest = environment.config.digest_public_paths
        self._digests: dict[str, str] = {}

    def _digest_for(self, logical: str) -> str:
        digest = self._digests.get(logical)
        if digest is None:
            asset = self.environment.load(self.environment.resolve(logical))
            digest = self._digests[logical] = str(asset.metadata["digest"])
        return digest

    def asset_path(self, path: str) -> str:
        logical = self.environment.unpublish(path)
        if logical is None:
            logical = path.lstrip("/")
        if self.digest:
            logical = fingerprint_path(logical, self._digest_for(logical))
        return f"{self.prefix}/{logical}"


__all__ = [
    "FileAssetURI",
    "FileSystemEnvironment",
    "PublicPathContext",
    "content_type_for",
]
