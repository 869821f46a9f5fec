from __future__ import annotations

__all__ = ["Decoder"]


from typing import Protocol


class Decoder(Protocol):
    """Protocol for incremental content decoders.

    A decoder is fed the encoded body chunk by chunk and returns whatever
    plaintext is available so far. We provide implementations for

    - gzip (decompress_transport.decoders.gzip.GzipDecoder)
    - deflate (decompress_transport.decoders.deflate.DeflateDecoder) - raw deflate without zlib framing
    - br (decompress_transport.decoders.brotli.BrotliDecoder)
    """

    header_size: int
    """Number of leading bytes that must be validated before decoding starts.
    Zero if the format has no header worth checking up front.
    """

    def name(self) -> str:
        """Returns the content coding token this decoder handles."""
        ...

    def validate_header(self, prefix: bytes) -> None:
        """Check the first header_size bytes of the body, raising if they
        cannot start a valid stream. prefix may be shorter than header_size
        if the body ended early.
        """
        ...

    def decompress(self, data: bytes) -> bytes:
        """Decompress the next chunk of the body."""
        ...

    def flush(self) -> bytes:
        """Return any remaining output once the body is exhausted. Raises
        EOFError if the body ended before the end-of-stream marker.
        """
        ...

    def close(self) -> None:
        """Release the decompressor."""
        ...
