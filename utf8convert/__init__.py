"""Normalize charset-labelled bytes to UTF-8."""

from .classify import classify_label
from .external import CODEC_TRANSCODER, CodecTranscoder
from .models import Classification, ConversionResult, Endian, Route
from .normalize import normalize, to_utf8

__all__ = [
    "CODEC_TRANSCODER",
    "Classification",
    "CodecTranscoder",
    "ConversionResult",
    "Endian",
    "Route",
    "classify_label",
    "normalize",
    "to_utf8",
]
