from __future__ import annotations

from typing import TYPE_CHECKING

from ._encoding import resolve_decoding_plan
from .errors import UnsupportedEncodingError

if TYPE_CHECKING:
    import httpx

UNKNOWN_CONTENT_LENGTH = -1

_EXTENSION_UNCOMPRESSED = "uncompressed"
_EXTENSION_CONTENT_LENGTH = "content_length"


def resolve_response_plan(response: httpx.Response) -> list[str]:
    encoding = response.headers.get("content-encoding")
    if not encoding:
        return []
    try:
        return resolve_decoding_plan(encoding)
    except UnsupportedEncodingError as e:
        raise UnsupportedEncodingError(e.encoding, response) from None


def mark_decompressed(
    response: httpx.Response, stream: httpx.SyncByteStream | httpx.AsyncByteStream
) -> None:
    # The headers describe the encoded body, which the caller never sees.
    response.stream = stream
    response.extensions[_EXTENSION_UNCOMPRESSED] = True
    response.extensions[_EXTENSION_CONTENT_LENGTH] = UNKNOWN_CONTENT_LENGTH
    response.headers.pop("content-encoding", None)
    response.headers.pop("content-length", None)


def is_uncompressed(response: httpx.Response) -> bool:
    """Returns whether the response body was sent compressed and has been
    decompressed by this package.
    """
    return bool(response.extensions.get(_EXTENSION_UNCOMPRESSED, False))


def content_length(response: httpx.Response) -> int:
    """Returns the declared length of the response body, or -1 if unknown.

    Decompressed responses always report -1 since the plaintext length is not
    known until the body has been read.
    """
    if (length := response.extensions.get(_EXTENSION_CONTENT_LENGTH)) is not None:
        return length
    try:
        return int(response.headers["content-length"])
    except (KeyError, ValueError):
        return UNKNOWN_CONTENT_LENGTH
