from __future__ import annotations

import enum
import logging
import re
import secrets
from dataclasses import dataclass

from ncpass_tli.config.schema import DEFAULT_PROFILE, RequestProfile
from ncpass_tli.messages.auth import build_auth_request, decode_auth_response
from ncpass_tli.messages.fields import AuthResponseFields, HandshakeFields
from ncpass_tli.messages.handshake import build_handshake, decode_handshake_response

logger = logging.getLogger(__name__)

_TRANSACTION_ID_RE = re.compile(r"[0-9]{6}")


# -------------------------------
# Requests
# -------------------------------


@dataclass(frozen=True, slots=True)
class HandshakeRequest:
    app_id: str


@dataclass(frozen=True, slots=True)
class AuthRequest:
    user_id: str
    token_code: str

    def __repr__(self) -> str:
        # keep one-time codes out of logs and tracebacks
        return f"AuthRequest(user_id={self.user_id!r}, token_code='***')"


Request = HandshakeRequest | AuthRequest
DecodedResponse = HandshakeFields | AuthResponseFields


class MessageKind(str, enum.Enum):
    HANDSHAKE = "handshake"
    AUTH = "auth"


def new_transaction_id() -> str:
    """Six zero-padded decimal digits from a CSPRNG."""
    return f"{secrets.randbelow(1_000_000):06d}"


# -------------------------------
# Codec
# -------------------------------


class NCPassCodec:
    """
    Session-scoped encoder/decoder for the NCPASS TLI interface.

    One instance per authentication attempt: the transaction id is fixed at
    construction and ties the handshake, the request and their responses
    together. The codec does no I/O; the caller owns the connection.
    """

    def __init__(
        self,
        *,
        transaction_id: str | None = None,
        profile: RequestProfile | None = None,
    ) -> None:
        if transaction_id is None:
            transaction_id = new_transaction_id()
        elif _TRANSACTION_ID_RE.fullmatch(transaction_id) is None:
            raise ValueError(f"transaction id must be exactly 6 decimal digits, got {transaction_id!r}")

        self._transaction_id = transaction_id
        self.profile = profile or DEFAULT_PROFILE

        logger.debug("NCPASS session created transaction_id=%s", self._transaction_id)

    @property
    def transaction_id(self) -> str:
        return self._transaction_id

    def __repr__(self) -> str:
        return f"NCPassCodec(transaction_id={self._transaction_id!r})"

    # -------------------------------
    # Encoding
    # -------------------------------

    def build_handshake(self, app_id: str) -> bytes:
        frame = build_handshake(self._transaction_id, app_id, profile=self.profile)
        logger.debug(
            "Built handshake frame (%d bytes) transaction_id=%s app_id=%s",
            len(frame),
            self._transaction_id,
            app_id,
        )
        return frame

    def build_auth_request(self, user_id: str, token_code: str) -> bytes:
        frame = build_auth_request(self._transaction_id, user_id, token_code, profile=self.profile)
        logger.debug(
            "Built authentication request (%d bytes) transaction_id=%s user_id=%s",
            len(frame),
            self._transaction_id,
            user_id,
        )
        return frame

    def encode(self, request: Request) -> bytes:
        if isinstance(request, HandshakeRequest):
            return self.build_handshake(request.app_id)
        if isinstance(request, AuthRequest):
            return self.build_auth_request(request.user_id, request.token_code)
        raise TypeError(f"Unsupported request type: {type(request).__name__}")

    # -------------------------------
    # Decoding
    # -------------------------------

    def decode_handshake_response(self, data: bytes) -> HandshakeFields:
        fields = decode_handshake_response(data)
        self._log_decoded(MessageKind.HANDSHAKE, fields, len(data))
        return fields

    def decode_auth_response(self, data: bytes) -> AuthResponseFields:
        fields = decode_auth_response(data)
        self._log_decoded(MessageKind.AUTH, fields, len(data))
        return fields

    def decode(self, data: bytes, kind: MessageKind | str) -> DecodedResponse:
        kind = MessageKind(kind)
        if kind is MessageKind.HANDSHAKE:
            return self.decode_handshake_response(data)
        return self.decode_auth_response(data)

    def correlates(self, fields: DecodedResponse) -> bool:
        return fields.header.transaction_id == self._transaction_id

    def _log_decoded(self, kind: MessageKind, fields: DecodedResponse, total: int) -> None:
        logger.debug(
            "Decoded %s response (%d of %d bytes) transaction_id=%s",
            kind.value,
            fields.bytes_processed,
            total,
            fields.header.transaction_id,
        )
        if not self.correlates(fields):
            logger.warning(
                "%s response transaction id %r does not match session %r",
                kind.value,
                fields.header.transaction_id,
                self._transaction_id,
            )
        if fields.has_trailing_data(total):
            logger.warning(
                "%s response has %d unparsed trailing bytes",
                kind.value,
                total - fields.bytes_processed,
            )


__all__ = [
    "HandshakeRequest",
    "AuthRequest",
    "Request",
    "DecodedResponse",
    "MessageKind",
    "new_transaction_id",
    "NCPassCodec",
]
