"""
Opt-in decoding of bodies delivered with a Content-Encoding still applied.

Supports gzip, deflate, and brotli (br) encodings.
"""

from __future__ import annotations

import gzip
import zlib
from collections.abc import Callable

import brotli


def _inflate(body: bytes) -> bytes:
    # Servers send both raw and zlib-wrapped deflate.
    try:
        return zlib.decompress(body, -zlib.MAX_WBITS)
    except zlib.error:
        return zlib.decompress(body)


_DECODERS: dict[str, tuple[Callable[[bytes], bytes], tuple[type[Exception], ...]]] = {
    "gzip": (gzip.decompress, (OSError, EOFError, zlib.error)),
    "x-gzip": (gzip.decompress, (OSError, EOFError, zlib.error)),
    "deflate": (_inflate, (zlib.error,)),
    "br": (brotli.decompress, (brotli.error,)),
    "identity": (bytes, ()),
}


def decode_body(body: bytes, content_encoding: str | None) -> bytes:
    """
    Undo the encodings named in a Content-Encoding header.

    Encodings are listed in the order they were applied, so they are
    undone last to first. An unknown encoding or a payload that fails to
    decode stops the walk and the bytes decoded so far are returned.

    Args:
        body: Body bytes as delivered by the fetcher
        content_encoding: Value of the Content-Encoding header, if any
    """
    if not content_encoding or not body:
        return body

    for name in reversed(content_encoding.lower().split(",")):
        entry = _DECODERS.get(name.strip())
        if entry is None:
            return body
        decoder, failures = entry
        try:
            body = decoder(body)
        except failures:
            return body
    return body
