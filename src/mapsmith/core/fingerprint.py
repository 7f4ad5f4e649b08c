"""Helpers for the content fingerprint convention used by built assets.

Built artefacts carry a hex digest right before their final extension, for
instance ``app-ab12cd3.js`` for the logical asset ``app.js``. Source maps
generated from such artefacts point at the fingerprinted names, so every
reference has to be stripped back to its logical identity before it can be
resolved or published.
"""

from __future__ import annotations

from functools import lru_cache
import hashlib
import re


FINGERPRINT_PATTERN = re.compile(r"-([0-9a-f]{7,128})\.[^.]+\Z")


@lru_cache(maxsize=4096)
def strip_fingerprint(path: str) -> tuple[str, str | None]:
    """Return ``path`` without its trailing fingerprint and the fingerprint itself.

    Paths without a fingerprint are returned unchanged together with ``None``.
    Only the segment directly preceding the final extension is considered, so
    digest-looking directory names are left alone.
    """
    match = FINGERPRINT_PATTERN.search(path)
    if match is None:
        return path, None
    start, end = match.span(1)
    # Drop the leading dash together with the digest.
    return path[: start - 1] + path[end:], match.group(1)


def fingerprint_path(path: str, digest: str) -> str:
    """Insert ``digest`` before the final extension of ``path``."""
    head, sep, name = path.rpartition("/")
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        fingerprinted = f"{name}-{digest}"
    else:
        fingerprinted = f"{stem}-{digest}.{extension}"
    return f"{head}{sep}{fingerprinted}"


def compute_fingerprint(content: bytes) -> str:
    """Return the hex digest used to fingerprint ``content``."""
    return hashlib.sha256(content).hexdigest()


__all__ = [
    "FINGERPRINT_PATTERN",
    "compute_fingerprint",
    "fingerprint_path",
    "strip_fingerprint",
]
