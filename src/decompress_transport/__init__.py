from __future__ import annotations

__all__ = [
    "UNKNOWN_CONTENT_LENGTH",
    "AsyncCascadeByteStream",
    "AsyncDecompressTransport",
    "CascadeByteStream",
    "CloseError",
    "DecoderInitError",
    "DecompressError",
    "DecompressTransport",
    "UnsupportedEncodingError",
    "content_length",
    "get_available_encodings",
    "is_uncompressed",
    "parse_content_encoding",
    "resolve_decoding_plan",
]

from ._encoding import (
    get_available_encodings,
    parse_content_encoding,
    resolve_decoding_plan,
)
from ._stream import AsyncCascadeByteStream, CascadeByteStream
from ._transport_async import AsyncDecompressTransport
from ._transport_shared import UNKNOWN_CONTENT_LENGTH, content_length, is_uncompressed
from ._transport_sync import DecompressTransport
from .errors import (
    CloseError,
    DecoderInitError,
    DecompressError,
    UnsupportedEncodingError,
)
