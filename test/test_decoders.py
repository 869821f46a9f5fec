from __future__ import annotations

import gzip
import zlib

import brotli
import pytest

from decompress_transport import CascadeByteStream, DecoderInitError
from decompress_transport.decoders.brotli import BrotliDecoder
from decompress_transport.decoders.deflate import DeflateDecoder
from decompress_transport.decoders.gzip import GzipDecoder

from ._util import ChunkedStream, brotli_bytes, deflate_bytes, gzip_bytes

_plaintext = bytes(range(256)) * 64


def _decode(decoder, body: bytes, chunk_size: int = 7) -> bytes:
    return b"".join(CascadeByteStream.open(decoder, ChunkedStream(body, chunk_size)))


@pytest.mark.parametrize(
    ("decoder", "body"),
    [
        pytest.param(GzipDecoder(), gzip_bytes(_plaintext), id="gzip"),
        pytest.param(DeflateDecoder(), deflate_bytes(_plaintext), id="deflate"),
        pytest.param(BrotliDecoder(), brotli_bytes(_plaintext), id="br"),
    ],
)
def test_decode(decoder, body: bytes) -> None:
    assert _decode(decoder, body) == _plaintext


def test_names() -> None:
    assert GzipDecoder().name() == "gzip"
    assert DeflateDecoder().name() == "deflate"
    assert BrotliDecoder().name() == "br"


def test_gzip_multiple_members() -> None:
    body = gzip_bytes(b"foo") + gzip_bytes(b"bar") + gzip_bytes(b"baz")
    assert _decode(GzipDecoder(), body, chunk_size=len(body)) == b"foobarbaz"
    assert _decode(GzipDecoder(), body, chunk_size=3) == b"foobarbaz"


def test_gzip_bad_magic() -> None:
    with pytest.raises(DecoderInitError) as exc_info:
        _decode(GzipDecoder(), b"\x00\x01" + gzip_bytes(b"foo")[2:])
    assert isinstance(exc_info.value.__cause__, gzip.BadGzipFile)


def test_gzip_unknown_method() -> None:
    body = bytearray(gzip_bytes(b"foo"))
    body[2] = 7
    with pytest.raises(DecoderInitError, match="Unknown compression method"):
        _decode(GzipDecoder(), bytes(body))


def test_gzip_short_header() -> None:
    with pytest.raises(DecoderInitError) as exc_info:
        _decode(GzipDecoder(), b"\x1f\x8b\x08")
    assert isinstance(exc_info.value.__cause__, EOFError)


@pytest.mark.parametrize(
    ("decoder", "body"),
    [
        pytest.param(GzipDecoder(), gzip_bytes(_plaintext)[:-4], id="gzip"),
        pytest.param(
            DeflateDecoder(),
            deflate_bytes(_plaintext)[: len(deflate_bytes(_plaintext)) // 2],
            id="deflate",
        ),
        pytest.param(
            BrotliDecoder(),
            brotli_bytes(_plaintext)[: len(brotli_bytes(_plaintext)) // 2],
            id="br",
        ),
    ],
)
def test_truncated(decoder, body: bytes) -> None:
    with pytest.raises(EOFError):
        _decode(decoder, body)


@pytest.mark.parametrize(
    ("decoder", "body", "error"),
    [
        pytest.param(
            GzipDecoder(),
            gzip_bytes(b"foo")[:10] + b"\xff" * 16,
            zlib.error,
            id="gzip",
        ),
        pytest.param(DeflateDecoder(), b"\xff" * 16, zlib.error, id="deflate"),
        # Metadata block with the reserved bit set.
        pytest.param(BrotliDecoder(), b"\x1c\x00\x00\x00", brotli.error, id="br"),
    ],
)
def test_corrupt_data(decoder, body: bytes, error: type[Exception]) -> None:
    stream = CascadeByteStream.open(decoder, ChunkedStream(body))
    with pytest.raises(error):
        b"".join(stream)


def test_decoder_closed() -> None:
    decoder = DeflateDecoder()
    decoder.close()
    with pytest.raises(ValueError, match="closed decoder"):
        decoder.decompress(b"\x00")
