"""Concrete collaborators for running the processor outside a host build system."""

from __future__ import annotations

from .encoding import decode_source_map, encode_source_map
from .filesystem import FileAssetURI, FileSystemEnvironment, PublicPathContext, content_type_for


__all__ = [
    "FileAssetURI",
    "FileSystemEnvironment",
    "PublicPathContext",
    "content_type_for",
    "decode_source_map",
    "encode_source_map",
]
