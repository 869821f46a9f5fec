from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from .errors import CloseError, DecoderInitError

if TYPE_CHECKING:
    import sys
    from collections.abc import AsyncIterator, Iterator

    from .decoders import Decoder

    if sys.version_info >= (3, 11):
        from typing import Self
    else:
        from typing_extensions import Self
else:
    Self = "Self"


class CascadeByteStream(httpx.SyncByteStream):
    """A body stream that decodes the stream beneath it.

    Layers nest, so a response sent with several codings is read through a
    chain of CascadeByteStream ending at the raw body. Closing the outermost
    layer closes every layer down to the raw body.
    """

    def __init__(
        self,
        decoder: Decoder,
        cascade: httpx.SyncByteStream,
        chunks: Iterator[bytes],
        prefix: bytes = b"",
    ) -> None:
        self._decoder = decoder
        self._cascade = cascade
        self._chunks = chunks
        self._prefix = prefix
        self._closed = False

    @classmethod
    def open(cls, decoder: Decoder, cascade: httpx.SyncByteStream) -> Self:
        """Creates a layer decoding cascade, validating the decoder's header
        against the first bytes of the stream. Any failure while reading or
        validating those bytes is raised as DecoderInitError.
        """
        chunks = iter(cascade)
        prefix = b""
        if decoder.header_size:
            buffer = bytearray()
            try:
                for chunk in chunks:
                    buffer.extend(chunk)
                    if len(buffer) >= decoder.header_size:
                        break
                prefix = bytes(buffer)
                decoder.validate_header(prefix)
            except Exception as e:
                raise DecoderInitError(decoder.name(), str(e)) from e
        return cls(decoder, cascade, chunks, prefix)

    def __iter__(self) -> Iterator[bytes]:
        if self._prefix:
            data, self._prefix = self._prefix, b""
            if out := self._decoder.decompress(data):
                yield out
        for chunk in self._chunks:
            if out := self._decoder.decompress(chunk):
                yield out
        if out := self._decoder.flush():
            yield out

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        errors: list[Exception] = []
        try:
            self._decoder.close()
        except Exception as e:
            errors.append(e)
        try:
            self._cascade.close()
        except Exception as e:
            errors.append(e)
        _raise_close_errors(errors)


class AsyncCascadeByteStream(httpx.AsyncByteStream):
    """Async counterpart of CascadeByteStream."""

    def __init__(
        self,
        decoder: Decoder,
        cascade: httpx.AsyncByteStream,
        chunks: AsyncIterator[bytes],
        prefix: bytes = b"",
    ) -> None:
        self._decoder = decoder
        self._cascade = cascade
        self._chunks = chunks
        self._prefix = prefix
        self._closed = False

    @classmethod
    async def open(cls, decoder: Decoder, cascade: httpx.AsyncByteStream) -> Self:
        chunks = cascade.__aiter__()
        prefix = b""
        if decoder.header_size:
            buffer = bytearray()
            try:
                async for chunk in chunks:
                    buffer.extend(chunk)
                    if len(buffer) >= decoder.header_size:
                        break
                prefix = bytes(buffer)
                decoder.validate_header(prefix)
            except Exception as e:
                raise DecoderInitError(decoder.name(), str(e)) from e
        return cls(decoder, cascade, chunks, prefix)

    async def __aiter__(self) -> AsyncIterator[bytes]:
        if self._prefix:
            data, self._prefix = self._prefix, b""
            if out := self._decoder.decompress(data):
                yield out
        async for chunk in self._chunks:
            if out := self._decoder.decompress(chunk):
                yield out
        if out := self._decoder.flush():
            yield out

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        errors: list[Exception] = []
        try:
            self._decoder.close()
        except Exception as e:
            errors.append(e)
        try:
            await self._cascade.aclose()
        except Exception as e:
            errors.append(e)
        _raise_close_errors(errors)


def _raise_close_errors(errors: list[Exception]) -> None:
    if len(errors) > 1:
        raise CloseError(errors)
    if errors:
        raise errors[0]
