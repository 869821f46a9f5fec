from __future__ import annotations

import contextlib
import functools

import httpx

from ._encoding import create_decoder
from ._stream import CascadeByteStream
from ._transport_shared import mark_decompressed, resolve_response_plan


@functools.cache
def _default_transport() -> httpx.HTTPTransport:
    return httpx.HTTPTransport()


class DecompressTransport(httpx.BaseTransport):
    """An httpx transport that decompresses response bodies according to the
    Content-Encoding header before returning them.

    Supported encodings are gzip, deflate, br and identity, in any combination.
    If any other encoding is present, UnsupportedEncodingError is raised with
    the original response attached.
    """

    def __init__(self, wrap: httpx.BaseTransport | None = None) -> None:
        """Creates a new DecompressTransport.

        Args:
            wrap: The transport that executes requests. It is not closed along
                with this transport, so it can be shared. If unset, a shared
                default httpx.HTTPTransport is used.
        """
        self._wrap = wrap

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        transport = self._wrap or _default_transport()
        response = transport.handle_request(request)

        plan = resolve_response_plan(response)
        if not plan:
            return response

        stream = response.stream
        if not isinstance(stream, httpx.SyncByteStream):
            msg = "Attempted to decompress an async response stream."
            raise TypeError(msg)
        try:
            for encoding in plan:
                stream = CascadeByteStream.open(create_decoder(encoding), stream)
        except Exception:
            with contextlib.suppress(Exception):
                response.close()
            raise
        mark_decompressed(response, stream)
        return response
