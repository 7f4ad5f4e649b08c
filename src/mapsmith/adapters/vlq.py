"""Base64 VLQ codec used by the source map ``mappings`` field."""

from __future__ import annotations

from collections.abc import Iterable


B64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
B64_VALUES = {char: index for index, char in enumerate(B64_ALPHABET)}

# Each base64 digit holds 5 value bits plus a continuation bit.
_SHIFT = 5
_MASK = (1 << _SHIFT) - 1
_CONTINUATION = 1 << _SHIFT


def encode_vlq(values: Iterable[int]) -> str:
    """Encode a sequence of signed integers as a VLQ segment."""
    digits: list[str] = []
    for value in values:
        remaining = (-value << 1) | 1 if value < 0 else value << 1
        while True:
            digit = remaining & _MASK
            remaining >>= _SHIFT
            if remaining:
                digit |= _CONTINUATION
            digits.append(B64_ALPHABET[digit])
            if not remaining:
                break
    return "".join(digits)


def decode_vlq(segment: str) -> list[int]:
    """Decode a VLQ segment into signed integers.

    Raises ``ValueError`` on characters outside the base64 alphabet or on a
    truncated trailing value.
    """
    values: list[int] = []
    current, shift = 0, 0
    for char in segment:
        try:
            digit = B64_VALUES[char]
        except KeyError as exc:
            raise ValueError(f"Invalid base64 VLQ character {char!r}") from exc
        current += (digit & _MASK) << shift
        shift += _SHIFT
        if not digit & _CONTINUATION:
            value, sign = current >> 1, current & 1
            values.append(-value if sign else value)
            current, shift = 0, 0
    if shift:
        raise ValueError(f"Truncated VLQ segment {segment!r}")
    return values


__all__ = ["B64_ALPHABET", "decode_vlq", "encode_vlq"]
