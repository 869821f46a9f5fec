from __future__ import annotations

from typing import TYPE_CHECKING

from .decoders.brotli import BrotliDecoder
from .decoders.deflate import DeflateDecoder
from .decoders.gzip import GzipDecoder
from .errors import UnsupportedEncodingError

if TYPE_CHECKING:
    from collections.abc import Callable

    from .decoders import Decoder

_decoders: dict[str, Callable[[], Decoder]] = {
    "gzip": GzipDecoder,
    "deflate": DeflateDecoder,
    "br": BrotliDecoder,
}
_noop_encodings = frozenset(("identity", ""))


def get_available_encodings() -> tuple[str, ...]:
    return tuple(_decoders)


def parse_content_encoding(value: str) -> list[str]:
    """Split a Content-Encoding value into its tokens, in header order."""
    return [token.strip() for token in value.split(",")]


def resolve_decoding_plan(value: str) -> list[str]:
    """Returns the names of the decoders to apply to a body sent with the given
    Content-Encoding, in the order they must be applied.

    Codings are listed in the order the sender applied them, so the rightmost
    one is undone first. identity and empty tokens are skipped. Every token is
    checked before anything is decoded.
    """
    plan: list[str] = []
    for token in reversed(parse_content_encoding(value)):
        encoding = token.lower()
        if encoding in _noop_encodings:
            continue
        if encoding not in _decoders:
            raise UnsupportedEncodingError(token)
        plan.append(encoding)
    return plan


def create_decoder(encoding: str) -> Decoder:
    return _decoders[encoding]()
