from __future__ import annotations

__all__ = ["DeflateDecoder"]

import zlib

from . import Decoder


class DeflateDecoder(Decoder):
    """Decoder implementation for raw deflate data (RFC 1951)."""

    header_size = 0

    def __init__(self) -> None:
        self._obj: zlib._Decompress | None = zlib.decompressobj(-zlib.MAX_WBITS)

    def name(self) -> str:
        return "deflate"

    def validate_header(self, prefix: bytes) -> None:
        pass

    def decompress(self, data: bytes) -> bytes:
        return self._decompressor().decompress(data)

    def flush(self) -> bytes:
        obj = self._decompressor()
        ret = obj.flush()
        if not obj.eof:
            msg = "Compressed file ended before the end-of-stream marker was reached"
            raise EOFError(msg)
        return ret

    def close(self) -> None:
        self._obj = None

    def _decompressor(self) -> zlib._Decompress:
        if self._obj is None:
            msg = "I/O operation on closed decoder"
            raise ValueError(msg)
        return self._obj
