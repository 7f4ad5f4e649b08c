import json

import pytest

from mapsmith.adapters.encoding import decode_source_map, encode_mappings, encode_source_map
from mapsmith.core.exceptions import SourceMapEncodingError


RECORDS = (
    {"source": "a.js", "generated": (1, 0), "original": (1, 0)},
    {"source": "b.js", "generated": (1, 4), "original": (2, 3), "name": "foo"},
    {"source": "a.js", "generated": (3, 2), "original": (5, 0)},
)


def test_encode_mappings_uses_relative_offsets() -> None:
    mappings, sources, names = encode_mappings(RECORDS)
    assert mappings == "AAAA,ICCGA;;EDGH"
    assert sources == ["a.js", "b.js"]
    assert names == ["foo"]


def test_encode_source_map_document() -> None:
    payload = json.loads(encode_source_map(RECORDS, filename="/assets/app.js"))
    assert payload == {
        "version": 3,
        "file": "/assets/app.js",
        "mappings": "AAAA,ICCGA;;EDGH",
        "sources": ["a.js", "b.js"],
        "names": ["foo"],
    }


def test_decode_restores_records() -> None:
    assert decode_source_map(encode_source_map(RECORDS, filename="app.js")) == RECORDS


def test_decode_applies_source_root() -> None:
    records = decode_source_map(
        {"version": 3, "sourceRoot": "src/", "sources": ["a.js"], "names": [], "mappings": "AAAA"}
    )
    assert records[0]["source"] == "src/a.js"


def test_decode_skips_segments_without_source() -> None:
    records = decode_source_map({"version": 3, "sources": ["a.js"], "mappings": "A,CAAA"})
    assert records == ({"source": "a.js", "generated": (1, 1), "original": (1, 0)},)


def test_encode_keeps_records_without_source_as_columns() -> None:
    mappings, sources, _ = encode_mappings([{"generated": (1, 3)}])
    assert mappings == "G"
    assert sources == []


def test_encode_empty_map() -> None:
    assert json.loads(encode_source_map([], filename="x.css"))["mappings"] == ""


def test_encode_rejects_unordered_lines() -> None:
    records = [
        {"source": "a.js", "generated": (2, 0), "original": (1, 0)},
        {"source": "a.js", "generated": (1, 0), "original": (1, 0)},
    ]
    with pytest.raises(SourceMapEncodingError, match="not ordered"):
        encode_mappings(records)


@pytest.mark.parametrize(
    "record",
    [
        {"source": "a.js", "original": (1, 0)},
        {"source": "a.js", "generated": (0, 0), "original": (1, 0)},
        {"source": "a.js", "generated": "1:0", "original": (1, 0)},
        {"source": "a.js", "generated": (1, 0)},
    ],
)
def test_encode_rejects_malformed_records(record: dict) -> None:
    with pytest.raises(SourceMapEncodingError):
        encode_mappings([record])


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ("{not json", "not valid JSON"),
        ("[]", "JSON object"),
        ('{"version": 2, "mappings": ""}', "version"),
        ('{"version": 3, "sections": []}', "Indexed"),
        ('{"version": 3, "sources": [], "mappings": "AAAA"}', "Malformed"),
        ('{"version": 3, "sources": ["a.js"], "mappings": "A*AA"}', "Malformed"),
        ('{"version": 3, "sources": ["a.js"], "mappings": "AA"}', "2 fields"),
        ('{"version": 3, "sources": ["a.js"], "mappings": "AAAA,AAA"}', "3 fields"),
    ],
)
def test_decode_rejects_invalid_documents(payload: str, message: str) -> None:
    with pytest.raises(SourceMapEncodingError, match=message):
        decode_source_map(payload)
