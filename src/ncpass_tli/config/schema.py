from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ncpass_tli.errors import EncodingError
from ncpass_tli.wire.params import MAX_FIELD_LENGTH, encode_text

# ---------------------------------------------------------------------------
# Token types
# ---------------------------------------------------------------------------

TOKEN_TYPE_STANDARD_HARDWARE = 11


# ---------------------------------------------------------------------------
# Request profile
# ---------------------------------------------------------------------------


class RequestProfile(BaseModel):
    """
    Fixed values sent in every handshake and authentication request.

    The defaults are what the NCPASS TLI interface expects from a web
    terminal; override them only if the host is configured differently.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    system_id: str = Field(default="NCTLI", description="System id sent in the handshake.")
    direction_id: str = Field(default="1", description="Direction id sent in the handshake.")
    requestor_id: str = Field(default="TCP", description="Requestor id sent in authentication requests.")
    terminal_id: str = Field(default="WEBTERM", description="Terminal/node name sent in authentication requests.")
    target_supplementary: str = Field(
        default="TLI", description="Supplementary target sent in authentication requests."
    )
    token_type: int = Field(
        default=TOKEN_TYPE_STANDARD_HARDWARE,
        ge=0,
        le=MAX_FIELD_LENGTH,
        description="Token type code (11 = standard hardware token).",
    )

    @field_validator("system_id", "direction_id", "requestor_id", "terminal_id", "target_supplementary")
    @classmethod
    def _ensure_encodable(cls, value: str) -> str:
        try:
            encoded = encode_text(value)
        except EncodingError as exc:
            raise ValueError(str(exc)) from exc
        if len(encoded) > MAX_FIELD_LENGTH:
            raise ValueError(f"value is {len(encoded)} bytes, at most {MAX_FIELD_LENGTH} fit in a parameter")
        return value


DEFAULT_PROFILE = RequestProfile()


__all__ = [
    "TOKEN_TYPE_STANDARD_HARDWARE",
    "RequestProfile",
    "DEFAULT_PROFILE",
    "ValidationError",
]
