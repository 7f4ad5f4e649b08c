"""Assemble public source maps for fingerprinted scripts and stylesheets."""

from __future__ import annotations

import logging

from .content_types import SourceMapKind
from .diagnostics import DiagnosticEmitter, NullEmitter
from .fingerprint import strip_fingerprint
from .links import collect_links
from .models import ProcessRequest, ProcessResult, SourceMap
from .rewriter import rewrite_sources


logger = logging.getLogger(__name__)


class SourceMapProcessor:
    """Rewrite a subject asset's source map and compute its link set.

    The processor holds no state between invocations; the environment carried
    by each request supplies resolution, loading, path formatting and
    encoding.
    """

    def __init__(self, *, emitter: DiagnosticEmitter | None = None) -> None:
        self.emitter = emitter or NullEmitter()

    def process(self, request: ProcessRequest) -> ProcessResult:
        kind = SourceMapKind.from_content_type(request.content_type)
        env = request.environment

        uri = env.resolve(request.filename, accept=kind.accept)
        asset = env.load(uri)
        raw_map = asset.source_map
        if not asset.metadata.get("map"):
            self.emitter.warning(f"No source map recorded for {asset.logical_path}")
        logger.debug(
            "Processing %s source map for %s (%d mappings)",
            kind.name.lower(),
            asset.logical_path,
            len(raw_map),
        )

        seed = frozenset(request.links)
        links = collect_links(seed, raw_map, env.resolve)
        self.emitter.event(
            "source_map_links",
            {
                "filename": request.filename,
                "links": len(links),
                "added": len(links - seed),
            },
        )

        context = env.context_for(request)
        rewritten = rewrite_sources(raw_map, context.asset_path)
        self.emitter.event(
            "source_map_rewritten",
            {
                "filename": request.filename,
                "records": len(rewritten),
                "fingerprinted": _count_fingerprinted(raw_map),
            },
        )

        data = env.encode_source_map(
            rewritten, filename=context.asset_path(asset.logical_path)
        )
        return ProcessResult(data=data, links=links)

    __call__ = process


def _count_fingerprinted(raw_map: SourceMap) -> int:
    count = 0
    for record in raw_map:
        source = record.get("source")
        if source is not None and strip_fingerprint(source)[1] is not None:
            count += 1
    return count


def process_source_map(
    request: ProcessRequest, *, emitter: DiagnosticEmitter | None = None
) -> ProcessResult:
    """Run a one-off :class:`SourceMapProcessor` over ``request``."""
    return SourceMapProcessor(emitter=emitter).process(request)


__all__ = ["SourceMapProcessor", "process_source_map"]
