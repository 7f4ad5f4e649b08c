"""Rewrite mapping records so they point at public asset paths."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .fingerprint import strip_fingerprint
from .models import SourceMap


Canonicalize = Callable[[str], str]


def rewrite_sources(
    source_map: SourceMap,
    canonicalize: Canonicalize,
) -> tuple[dict[str, Any], ...]:
    """Return a copy of ``source_map`` whose ``source`` fields are canonical.

    Records keep their order and every other key is copied as is. The input
    sequence and its records are left untouched.
    """
    rewritten: list[dict[str, Any]] = []
    for record in source_map:
        source = record.get("source")
        if source is None:
            # Unmapped segments carry no source to canonicalize.
            rewritten.append(dict(record))
            continue
        bare_path, _ = strip_fingerprint(source)
        rewritten.append({**record, "source": canonicalize(bare_path)})
    return tuple(rewritten)


__all__ = ["rewrite_sources"]
