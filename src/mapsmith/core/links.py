"""Dependency discovery for source maps."""

from __future__ import annotations

from collections.abc import Callable, Iterable
import logging

from .fingerprint import strip_fingerprint
from .models import AssetURI, SourceMap


logger = logging.getLogger(__name__)

Resolve = Callable[[str], AssetURI]


def distinct_sources(source_map: SourceMap) -> list[str]:
    """Return the unique, non-null ``source`` values in first-seen order."""
    seen: dict[str, None] = {}
    for record in source_map:
        source = record.get("source")
        if source is not None:
            seen.setdefault(source, None)
    return list(seen)


def collect_links(
    existing_links: Iterable[AssetURI],
    source_map: SourceMap,
    resolve: Resolve,
) -> frozenset[AssetURI]:
    """Return ``existing_links`` extended with every asset ``source_map`` refers to.

    Each distinct source is stripped of its fingerprint and resolved once.
    Resolution failures propagate since they indicate a stale source map.
    """
    links = set(existing_links)
    for source in distinct_sources(source_map):
        bare_path, fingerprint = strip_fingerprint(source)
        if fingerprint is not None:
            logger.debug("Stripped fingerprint %s from %s", fingerprint, source)
        links.add(resolve(bare_path))
    return frozenset(links)


__all__ = ["collect_links", "distinct_sources"]
