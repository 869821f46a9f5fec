from __future__ import annotations

__all__ = ["BrotliDecoder"]

import brotli

from . import Decoder


class BrotliDecoder(Decoder):
    """Decoder implementation using Brotli."""

    header_size = 0

    def __init__(self) -> None:
        self._obj: brotli.Decompressor | None = brotli.Decompressor()

    def name(self) -> str:
        return "br"

    def validate_header(self, prefix: bytes) -> None:
        pass

    def decompress(self, data: bytes) -> bytes:
        return self._decompressor().process(data)

    def flush(self) -> bytes:
        if not self._decompressor().is_finished():
            msg = "Compressed file ended before the end-of-stream marker was reached"
            raise EOFError(msg)
        return b""

    def close(self) -> None:
        self._obj = None

    def _decompressor(self) -> brotli.Decompressor:
        if self._obj is None:
            msg = "I/O operation on closed decoder"
            raise ValueError(msg)
        return self._obj
