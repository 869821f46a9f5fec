from __future__ import annotations

import contextlib

import httpx

from ._encoding import create_decoder
from ._stream import AsyncCascadeByteStream
from ._transport_shared import mark_decompressed, resolve_response_plan


class AsyncDecompressTransport(httpx.AsyncBaseTransport):
    """An asynchronous httpx transport that decompresses response bodies
    according to the Content-Encoding header before returning them.
    """

    def __init__(self, wrap: httpx.AsyncBaseTransport | None = None) -> None:
        """Creates a new AsyncDecompressTransport.

        Args:
            wrap: The transport that executes requests. It is not closed along
                with this transport, so it can be shared. If unset, a new
                httpx.AsyncHTTPTransport owned by this transport is used.
        """
        if wrap is not None:
            self._wrap = wrap
            self._owns_wrap = False
        else:
            # Pooled connections are bound to an event loop, so the default
            # cannot be shared across transports.
            self._wrap = httpx.AsyncHTTPTransport()
            self._owns_wrap = True

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        response = await self._wrap.handle_async_request(request)

        plan = resolve_response_plan(response)
        if not plan:
            return response

        stream = response.stream
        if not isinstance(stream, httpx.AsyncByteStream):
            msg = "Attempted to decompress a sync response stream."
            raise TypeError(msg)
        try:
            for encoding in plan:
                stream = await AsyncCascadeByteStream.open(
                    create_decoder(encoding), stream
                )
        except Exception:
            with contextlib.suppress(Exception):
                await response.aclose()
            raise
        mark_decompressed(response, stream)
        return response

    async def aclose(self) -> None:
        if self._owns_wrap:
            await self._wrap.aclose()
