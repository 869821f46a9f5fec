from __future__ import annotations

__all__ = ["GzipDecoder"]

import gzip
import zlib

from . import Decoder

_GZIP_MAGIC = b"\x1f\x8b"
_DEFLATED = 8


class GzipDecoder(Decoder):
    """Decoder implementation for gzip, including bodies with several members."""

    header_size = 10

    def __init__(self) -> None:
        self._obj: zlib._Decompress | None = zlib.decompressobj(16 + zlib.MAX_WBITS)

    def name(self) -> str:
        return "gzip"

    def validate_header(self, prefix: bytes) -> None:
        if len(prefix) < self.header_size:
            msg = "Compressed file ended before the end-of-stream marker was reached"
            raise EOFError(msg)
        if prefix[:2] != _GZIP_MAGIC:
            msg = f"Not a gzipped file ({prefix[:2]!r})"
            raise gzip.BadGzipFile(msg)
        if prefix[2] != _DEFLATED:
            msg = "Unknown compression method"
            raise gzip.BadGzipFile(msg)

    def decompress(self, data: bytes) -> bytes:
        obj = self._decompressor()
        ret = bytearray()
        while data:
            ret += obj.decompress(data)
            data = obj.unused_data
            if data:
                # Concatenated members decode as one stream.
                obj = self._obj = zlib.decompressobj(16 + zlib.MAX_WBITS)
        return bytes(ret)

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
