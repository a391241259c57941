from __future__ import annotations


class NCPassProtocolError(Exception):
    """Base class for every NCPASS TLI wire error."""


class EncodingError(NCPassProtocolError):
    """Text or bytes with no mapping in the cp1047 code page."""


class LengthOverflowError(NCPassProtocolError):
    """A value does not fit in a 16-bit length field."""


class TruncatedMessageError(NCPassProtocolError):
    """The buffer ends before the header or a declared field does."""


class RangeError(NCPassProtocolError):
    """A decode cursor ran past the end of the supplied buffer."""


__all__ = [
    "NCPassProtocolError",
    "EncodingError",
    "LengthOverflowError",
    "TruncatedMessageError",
    "RangeError",
]
