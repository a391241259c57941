"""
Authentication request and response.

The request is a fixed sequence of positional fields; unused fields are sent
as zero-length parameters (``00 00``) and must stay in place because the host
parses by position.
"""

from __future__ import annotations

from ncpass_tli.config.schema import DEFAULT_PROFILE, RequestProfile
from ncpass_tli.messages.fields import AuthResponseFields
from ncpass_tli.wire.header import PROCESS_CODE_AUTH_REQUEST, decode_header, encode_header
from ncpass_tli.wire.params import (
    EMPTY_PARAMETER,
    LENGTH_PREFIX_SIZE,
    encode_parameter,
    encode_uint16_parameter,
    read_parameter,
    read_uint16_at,
    wrap_frame,
)
from ncpass_tli.wire.tables import authentication_label, validation_label

# Trailing byte after the last parameter of every request.
REQUEST_TERMINATOR = b"\x00"


def build_auth_request(
    transaction_id: str,
    user_id: str,
    token_code: str,
    *,
    profile: RequestProfile = DEFAULT_PROFILE,
) -> bytes:
    payload = b"".join(
        (
            encode_header(transaction_id, PROCESS_CODE_AUTH_REQUEST),
            encode_parameter(user_id),
            EMPTY_PARAMETER,  # remote user
            EMPTY_PARAMETER,  # current password
            EMPTY_PARAMETER,  # token challenge
            encode_parameter(token_code),
            EMPTY_PARAMETER,  # token serial number
            encode_uint16_parameter(profile.token_type),
            EMPTY_PARAMETER,  # new token challenge
            EMPTY_PARAMETER,  # new token response
            EMPTY_PARAMETER,  # supplementary PIN
            encode_parameter(profile.requestor_id),
            encode_parameter(profile.terminal_id),
            EMPTY_PARAMETER,  # target
            encode_parameter(profile.target_supplementary),
            REQUEST_TERMINATOR,
        )
    )
    return wrap_frame(payload)


def _read_result_code(data: bytes, cursor: int) -> tuple[int | None, int]:
    """
    A result code is a length field followed, when non-zero, by a 16-bit value.

    The value is always read as 2 bytes regardless of the declared length.
    """
    declared = read_uint16_at(data, cursor)
    cursor += LENGTH_PREFIX_SIZE
    if declared == 0:
        return None, cursor
    return read_uint16_at(data, cursor), cursor + 2


def decode_auth_response(data: bytes) -> AuthResponseFields:
    header, cursor = decode_header(data)

    validation_code, cursor = _read_result_code(data, cursor)
    authentication_code, cursor = _read_result_code(data, cursor)

    message, cursor = read_parameter(data, cursor, "Message")
    if message is None:
        # the host pads an empty Message with one extra byte
        cursor += 1

    host_user_id, cursor = read_parameter(data, cursor, "HostUserID")
    remote_user_id, cursor = read_parameter(data, cursor, "RemoteUserID")

    return AuthResponseFields(
        header=header,
        validation_result_code=validation_code,
        validation_result=None if validation_code is None else validation_label(validation_code),
        authentication_result_code=authentication_code,
        authentication_result=None if authentication_code is None else authentication_label(authentication_code),
        message=message,
        host_user_id=host_user_id,
        remote_user_id=remote_user_id,
        bytes_processed=cursor,
    )


__all__ = ["REQUEST_TERMINATOR", "build_auth_request", "decode_auth_response"]
