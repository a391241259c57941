from __future__ import annotations

import ebcdic  # noqa: F401  (registers the cp1047 codec)

from ncpass_tli.errors import (
    EncodingError,
    LengthOverflowError,
    RangeError,
    TruncatedMessageError,
)

LEGACY_ENCODING = "cp1047"

MAX_FIELD_LENGTH = 0xFFFF
LENGTH_PREFIX_SIZE = 2

# A zero-length parameter: just the 2-byte length, no payload.
EMPTY_PARAMETER = b"\x00\x00"


def encode_text(text: str) -> bytes:
    try:
        return text.encode(LEGACY_ENCODING)
    except UnicodeEncodeError as exc:
        raise EncodingError(
            f"character {text[exc.start:exc.end]!r} at position {exc.start} has no {LEGACY_ENCODING} mapping"
        ) from exc


def decode_text(data: bytes, start: int, length: int) -> str:
    """
    Decode ``length`` bytes of cp1047 text starting at ``start``.

    Raises RangeError when the range runs past the end of ``data``.
    """
    if start < 0 or length < 0 or start + length > len(data):
        raise RangeError(
            f"text range {start}..{start + length} is outside a {len(data)}-byte buffer"
        )
    try:
        return bytes(data[start : start + length]).decode(LEGACY_ENCODING)
    except UnicodeDecodeError as exc:
        raise EncodingError(
            f"byte 0x{exc.object[exc.start]:02X} at offset {start + exc.start} has no {LEGACY_ENCODING} mapping"
        ) from exc


def encode_uint16_be(value: int) -> bytes:
    if not 0 <= value <= MAX_FIELD_LENGTH:
        raise LengthOverflowError(f"{value} does not fit in an unsigned 16-bit field")
    return bytes(((value >> 8) & 0xFF, value & 0xFF))


def read_uint16_be(high: int, low: int) -> int:
    # Mask each byte first: a signed byte >= 0x80 must not sign-extend into the high half.
    return ((high & 0xFF) << 8) | (low & 0xFF)


def read_uint16_at(data: bytes, offset: int) -> int:
    if offset < 0 or offset + 2 > len(data):
        raise RangeError(
            f"16-bit field at offset {offset} is outside a {len(data)}-byte buffer"
        )
    return read_uint16_be(data[offset], data[offset + 1])


def encode_parameter(text: str) -> bytes:
    """
    Encode ``text`` as a TLI parameter: 2-byte big-endian length + cp1047 bytes.

    Example: ``encode_parameter("HELLO") == b"\\x00\\x05\\xc8\\xc5\\xd3\\xd3\\xd6"``
    """
    payload = encode_text(text)
    if len(payload) > MAX_FIELD_LENGTH:
        raise LengthOverflowError(
            f"parameter is {len(payload)} bytes, the length field holds at most {MAX_FIELD_LENGTH}"
        )
    return encode_uint16_be(len(payload)) + payload


def encode_uint16_parameter(value: int) -> bytes:
    """A parameter carrying one 16-bit integer, e.g. token type 11 -> ``00 02 00 0B``."""
    return encode_uint16_be(2) + encode_uint16_be(value)


def wrap_frame(payload: bytes) -> bytes:
    """Prefix ``payload`` with the total frame length (the 2 prefix bytes included)."""
    total = len(payload) + LENGTH_PREFIX_SIZE
    if total > MAX_FIELD_LENGTH:
        raise LengthOverflowError(
            f"frame is {total} bytes, the length prefix holds at most {MAX_FIELD_LENGTH}"
        )
    return encode_uint16_be(total) + payload


def read_parameter(data: bytes, offset: int, field: str) -> tuple[str | None, int]:
    """
    Read one length-prefixed text parameter at ``offset``.

    Returns ``(value, next_offset)``. A declared length of 0 yields ``None``
    and moves the cursor past the 2 length bytes only.
    """
    length = read_uint16_at(data, offset)
    offset += LENGTH_PREFIX_SIZE
    if length == 0:
        return None, offset
    if offset + length > len(data):
        raise TruncatedMessageError(
            f"{field} declares {length} bytes at offset {offset}, only {len(data) - offset} remain"
        )
    return decode_text(data, offset, length), offset + length


__all__ = [
    "LEGACY_ENCODING",
    "MAX_FIELD_LENGTH",
    "LENGTH_PREFIX_SIZE",
    "EMPTY_PARAMETER",
    "encode_text",
    "decode_text",
    "encode_uint16_be",
    "read_uint16_be",
    "read_uint16_at",
    "encode_parameter",
    "encode_uint16_parameter",
    "wrap_frame",
    "read_parameter",
]
