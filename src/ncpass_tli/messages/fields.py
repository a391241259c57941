from __future__ import annotations

from dataclasses import dataclass

import orjson

from ncpass_tli.wire.header import HeaderFields


def _header_fields(header: HeaderFields) -> dict[str, str]:
    return {
        "length": str(header.length),
        "OS": header.marker,
        "transactionid": header.transaction_id,
        "processcode": header.process_code,
    }


def _put_if_present(fields: dict[str, str], key: str, value: object | None) -> None:
    if value is not None:
        fields[key] = str(value)


@dataclass(frozen=True, slots=True)
class HandshakeFields:
    """
    Decoded handshake response.

    Optional members are None when the server sent a zero-length field.
    """

    header: HeaderFields
    system_id: str | None
    cpu_id: str | None
    password: str | None
    direction_id: str | None
    bytes_processed: int

    def has_trailing_data(self, total: int) -> bool:
        return total > self.bytes_processed

    def as_fields(self) -> dict[str, str]:
        fields = _header_fields(self.header)
        _put_if_present(fields, "SystemID", self.system_id)
        _put_if_present(fields, "CPUID", self.cpu_id)
        _put_if_present(fields, "Password", self.password)
        _put_if_present(fields, "DirectionID", self.direction_id)
        fields["bytesprocessed"] = str(self.bytes_processed)
        return fields

    def to_json(self) -> bytes:
        return orjson.dumps(self.as_fields())


@dataclass(frozen=True, slots=True)
class AuthResponseFields:
    """
    Decoded authentication response.

    Result codes come with their labels; both are None when the server
    omitted the code.
    """

    header: HeaderFields
    validation_result_code: int | None
    validation_result: str | None
    authentication_result_code: int | None
    authentication_result: str | None
    message: str | None
    host_user_id: str | None
    remote_user_id: str | None
    bytes_processed: int

    @property
    def validated(self) -> bool:
        return self.validation_result_code == 0

    @property
    def authenticated(self) -> bool:
        return self.authentication_result_code == 0

    def has_trailing_data(self, total: int) -> bool:
        return total > self.bytes_processed

    def as_fields(self) -> dict[str, str]:
        fields = _header_fields(self.header)
        _put_if_present(fields, "ValidationResultCode", self.validation_result_code)
        _put_if_present(fields, "ValidationResult", self.validation_result)
        _put_if_present(fields, "AuthenticationResultCode", self.authentication_result_code)
        _put_if_present(fields, "AuthenticationResult", self.authentication_result)
        _put_if_present(fields, "Message", self.message)
        _put_if_present(fields, "HostUserID", self.host_user_id)
        _put_if_present(fields, "RemoteUserID", self.remote_user_id)
        fields["bytesprocessed"] = str(self.bytes_processed)
        return fields

    def to_json(self) -> bytes:
        return orjson.dumps(self.as_fields())


__all__ = ["HeaderFields", "HandshakeFields", "AuthResponseFields"]
