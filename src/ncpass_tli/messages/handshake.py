"""
Handshake request and response.

Request layout after the frame length::

    header(SE00) | app id | system id | password (unused, 00 00) | direction id

The response carries the same four parameters as seen by the server:
system id, CPU id, password and direction id, each possibly empty.
"""

from __future__ import annotations

from ncpass_tli.config.schema import DEFAULT_PROFILE, RequestProfile
from ncpass_tli.messages.fields import HandshakeFields
from ncpass_tli.wire.header import PROCESS_CODE_HANDSHAKE, decode_header, encode_header
from ncpass_tli.wire.params import EMPTY_PARAMETER, encode_parameter, read_parameter, wrap_frame


def build_handshake(
    transaction_id: str,
    app_id: str,
    *,
    profile: RequestProfile = DEFAULT_PROFILE,
) -> bytes:
    payload = b"".join(
        (
            encode_header(transaction_id, PROCESS_CODE_HANDSHAKE),
            encode_parameter(app_id),
            encode_parameter(profile.system_id),
            EMPTY_PARAMETER,  # password for the host exit, not used
            encode_parameter(profile.direction_id),
        )
    )
    return wrap_frame(payload)


def decode_handshake_response(data: bytes) -> HandshakeFields:
    header, cursor = decode_header(data)

    system_id, cursor = read_parameter(data, cursor, "SystemID")
    cpu_id, cursor = read_parameter(data, cursor, "CPUID")
    password, cursor = read_parameter(data, cursor, "Password")
    direction_id, cursor = read_parameter(data, cursor, "DirectionID")

    return HandshakeFields(
        header=header,
        system_id=system_id,
        cpu_id=cpu_id,
        password=password,
        direction_id=direction_id,
        bytes_processed=cursor,
    )


__all__ = ["build_handshake", "decode_handshake_response"]
