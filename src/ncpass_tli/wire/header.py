"""
Header shared by every NCPASS TLI message.

Outbound (12 bytes, the frame length is added by the caller)::

    +--------+----------------+--------------+
    | "OS"   | transaction id | process code |
    | 2 B    | 6 B            | 4 B "SE0n"   |
    +--------+----------------+--------------+

Inbound responses are decoded including the 2-byte frame length, 14 bytes total.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ncpass_tli.errors import TruncatedMessageError
from ncpass_tli.wire.params import decode_text, encode_text, read_uint16_at

logger = logging.getLogger(__name__)

HEADER_MARKER = "OS"
PROCESS_CODE_PREFIX = "SE0"

PROCESS_CODE_HANDSHAKE = 0
PROCESS_CODE_AUTH_REQUEST = 3

TRANSACTION_ID_SIZE = 6
PROCESS_CODE_SIZE = 4
DECODED_HEADER_SIZE = 14


@dataclass(frozen=True, slots=True)
class HeaderFields:
    length: int
    marker: str
    transaction_id: str
    process_code: str


def format_process_code(process_code: int) -> str:
    if process_code < 0:
        raise ValueError(f"process code must be non-negative, got {process_code}")
    if process_code >= 10:
        # "SE0" + two digits is 5 bytes; the server only defines single-digit codes.
        logger.warning(
            "Process code %d widens the header process field to %d bytes",
            process_code,
            len(PROCESS_CODE_PREFIX) + len(str(process_code)),
        )
    return f"{PROCESS_CODE_PREFIX}{process_code}"


def encode_header(transaction_id: str, process_code: int) -> bytes:
    return (
        encode_text(HEADER_MARKER)
        + encode_text(transaction_id)
        + encode_text(format_process_code(process_code))
    )


def decode_header(data: bytes) -> tuple[HeaderFields, int]:
    """
    Decode the 14-byte response header.

    The length prefix is reported as-is; it is not checked against ``len(data)``.
    Returns ``(fields, bytes_consumed)``.
    """
    if len(data) < DECODED_HEADER_SIZE:
        raise TruncatedMessageError(
            f"header needs {DECODED_HEADER_SIZE} bytes, got {len(data)}"
        )

    cursor = 0
    length = read_uint16_at(data, cursor)
    cursor += 2
    marker = decode_text(data, cursor, len(HEADER_MARKER))
    cursor += len(HEADER_MARKER)
    transaction_id = decode_text(data, cursor, TRANSACTION_ID_SIZE)
    cursor += TRANSACTION_ID_SIZE
    process_code = decode_text(data, cursor, PROCESS_CODE_SIZE)
    cursor += PROCESS_CODE_SIZE

    fields = HeaderFields(
        length=length,
        marker=marker,
        transaction_id=transaction_id,
        process_code=process_code,
    )
    return fields, cursor
