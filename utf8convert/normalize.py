"""
Byte-to-UTF-8 normalization.

Responsibilities:
- classify the charset label
- dispatch to the UTF-16, single-byte table or codec fallback decoder
- hand back a fresh result, never touching the caller's bytes
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from .buffer import OutputBuffer
from .classify import classify_label
from .external import CODEC_TRANSCODER, CodecTranscoder
from .models import ConversionResult, Route
from .single_byte import TABLES, decode_single_byte
from .utf16 import decode_utf16

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def _byte_view(data: BytesLike) -> memoryview:
    try:
        view = memoryview(data)
        if view.format != "B" or view.ndim != 1:
            view = view.cast("B")
    except TypeError:
        raise TypeError(f"data must be contiguous bytes, not {type(data).__name__}") from None
    with view:
        return view.toreadonly()


def normalize(
    data: BytesLike,
    charset: Optional[str],
    transcoder: Optional[CodecTranscoder] = CODEC_TRANSCODER,
) -> ConversionResult:
    """
    Convert ``data`` labelled ``charset`` to UTF-8.

    ``changed=False`` in the result means the original bytes are the answer:
    the label says UTF-8/ASCII or nothing at all, no converter exists for it,
    or a UTF-16 input is too short to hold a single unit. Pass
    ``transcoder=None`` to disable the codec fallback entirely.

    Malformed input never raises; what can be decoded is returned.
    """
    route, endian = classify_label(charset)
    if route is Route.ALREADY_UTF8:
        return ConversionResult(changed=False, route=route)

    out = OutputBuffer()
    with _byte_view(data) as view:
        logger.debug("Converting %d bytes labelled %r via %s", len(view), charset, route.value)
        if route is Route.UTF16:
            converted = decode_utf16(view, endian, out)
        elif route is Route.EXTERNAL:
            converted = transcoder is not None and transcoder.convert(charset, view, out)
        else:
            decode_single_byte(view, TABLES[route], out)
            converted = True

    if not converted:
        return ConversionResult(changed=False, route=route)
    return ConversionResult(changed=True, data=out.getvalue(), route=route)


def to_utf8(data: BytesLike, charset: Optional[str]) -> bytes:
    """Return ``data`` as UTF-8, or unchanged when no conversion applies."""
    result = normalize(data, charset)
    if result.changed:
        return result.data
    return bytes(data)
