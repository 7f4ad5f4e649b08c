"""Conversion between source map v3 JSON and mapping record sequences.

Records are plain mappings with the keys ``source``, ``generated``,
``original`` and, optionally, ``name``. Positions are ``(line, column)``
pairs with 1-based lines and 0-based columns.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
import json
from typing import Any

from mapsmith.core.exceptions import SourceMapEncodingError
from mapsmith.core.models import SourceMap

from .vlq import decode_vlq, encode_vlq


SOURCE_MAP_VERSION = 3


def _position(record: Mapping[str, Any], key: str) -> tuple[int, int]:
    value = record.get(key)
    if (
        not isinstance(value, Sequence)
        or isinstance(value, str)
        or len(value) != 2
        or not all(isinstance(item, int) for item in value)
    ):
        raise SourceMapEncodingError(f"Mapping record has an invalid '{key}' position: {value!r}")
    line, column = value
    if line < 1 or column < 0:
        raise SourceMapEncodingError(f"Mapping record has an out of range '{key}' position: {value!r}")
    return line, column


def _index(values: list[str], lookup: dict[str, int], value: str) -> int:
    index = lookup.get(value)
    if index is None:
        index = lookup[value] = len(values)
        values.append(value)
    return index


def encode_mappings(source_map: SourceMap) -> tuple[str, list[str], list[str]]:
    """Return the VLQ ``mappings`` string with its ``sources`` and ``names`` tables."""
    sources: list[str] = []
    names: list[str] = []
    source_lookup: dict[str, int] = {}
    name_lookup: dict[str, int] = {}

    lines: list[list[str]] = [[]]
    previous_column = previous_source = previous_line = previous_original_column = 0
    previous_name = 0

    for record in source_map:
        line, column = _position(record, "generated")
        if line < len(lines):
            raise SourceMapEncodingError(
                f"Mapping records are not ordered by generated line (line {line})"
            )
        while len(lines) < line:
            lines.append([])
            previous_column = 0

        values = [column - previous_column]
        previous_column = column

        source = record.get("source")
        if source is not None:
            source_index = _index(sources, source_lookup, source)
            original_line, original_column = _position(record, "original")
            values.extend(
                [
                    source_index - previous_source,
                    (original_line - 1) - previous_line,
                    original_column - previous_original_column,
                ]
            )
            previous_source = source_index
            previous_line = original_line - 1
            previous_original_column = original_column

            name = record.get("name")
            if name is not None:
                name_index = _index(names, name_lookup, name)
                values.append(name_index - previous_name)
                previous_name = name_index

        lines[-1].append(encode_vlq(values))

    mappings = ";".join(",".join(segments) for segments in lines)
    return mappings, sources, names


def encode_source_map(source_map: SourceMap, *, filename: str) -> str:
    """Serialize mapping records into a source map v3 JSON document."""
    mappings, sources, names = encode_mappings(source_map)
    payload = {
        "version": SOURCE_MAP_VERSION,
        "file": filename,
        "mappings": mappings,
        "sources": sources,
        "names": names,
    }
    return json.dumps(payload)


def decode_source_map(payload: str | bytes | Mapping[str, Any]) -> tuple[dict[str, Any], ...]:
    """Expand a source map v3 document into mapping records.

    Segments without a source are dropped since they map to nothing. Segments
    with any field count other than 1, 4 or 5 are rejected.
    """
    if isinstance(payload, Mapping):
        data = payload
    else:
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise SourceMapEncodingError(f"Source map is not valid JSON: {exc}") from exc
    if not isinstance(data, Mapping):
        raise SourceMapEncodingError("Source map must be a JSON object.")
    if "sections" in data:
        raise SourceMapEncodingError("Indexed source maps are not supported.")
    if data.get("version") != SOURCE_MAP_VERSION:
        raise SourceMapEncodingError(f"Unsupported source map version: {data.get('version')!r}")

    root = data.get("sourceRoot") or ""
    sources = [
        f"{root.rstrip('/')}/{source}" if root and source is not None else source
        for source in data.get("sources") or []
    ]
    names = list(data.get("names") or [])

    records: list[dict[str, Any]] = []
    source_index = original_line = original_column = name_index = 0
    try:
        for line_number, line in enumerate(str(data.get("mappings", "")).split(";"), start=1):
            column = 0
            for segment in line.split(","):
                if not segment:
                    continue
                values = decode_vlq(segment)
                column += values[0]
                if len(values) == 1:
                    continue
                if len(values) not in (4, 5):
                    raise ValueError(f"segment {segment!r} has {len(values)} fields")
                source_index += values[1]
                original_line += values[2]
                original_column += values[3]
                record: dict[str, Any] = {
                    "source": sources[source_index],
                    "generated": (line_number, column),
                    "original": (original_line + 1, original_column),
                }
                if len(values) > 4:
                    name_index += values[4]
                    record["name"] = names[name_index]
                records.append(record)
    except (ValueError, IndexError) as exc:
        raise SourceMapEncodingError(f"Malformed source map mappings: {exc}") from exc
    return tuple(records)


__all__ = [
    "SOURCE_MAP_VERSION",
    "decode_source_map",
    "encode_mappings",
    "encode_source_map",
]
