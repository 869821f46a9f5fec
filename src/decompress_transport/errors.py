from __future__ import annotations

__all__ = [
    "CloseError",
    "DecoderInitError",
    "DecompressError",
    "UnsupportedEncodingError",
]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    import httpx


class DecompressError(Exception):
    """Base class for errors raised while decompressing a response.

    Errors from the inner transport and from reading a corrupt body are not
    wrapped and do not derive from this class.
    """


class UnsupportedEncodingError(DecompressError):
    """The response declares a content coding that cannot be decoded.

    The original response is returned untouched so callers can still consume
    the raw body, for example to log it or to retry without compression.
    """

    def __init__(self, encoding: str, original: httpx.Response | None = None) -> None:
        """Creates a new UnsupportedEncodingError.

        Args:
            encoding: The unrecognized token from the Content-Encoding header.
            original: The response as returned by the inner transport.
        """
        super().__init__(f"decompress: unsupported content encoding '{encoding}'")
        self.encoding = encoding
        self.original = original


class DecoderInitError(DecompressError):
    """A recognized decoder rejected the response body when it was created."""

    def __init__(self, encoding: str, message: str) -> None:
        super().__init__(f"decompress: create {encoding} reader: {message}")
        self.encoding = encoding


class CloseError(DecompressError):
    """Both a decoder and the stream beneath it failed to close."""

    def __init__(self, errors: Sequence[BaseException]) -> None:
        super().__init__(": ".join(str(e) for e in errors))
        self.errors = tuple(errors)
