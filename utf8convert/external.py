"""
Fallback conversion through Python's codec registry.

Any label without a built-in decoder is handed to ``codecs``. A label the
registry does not know, or one naming a bytes-to-bytes codec such as
``base64``, means no conversion is available and the caller keeps its
original bytes.
"""

from __future__ import annotations

import codecs
import logging
from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator, Optional

from .buffer import OutputBuffer
from .rules import CHUNK_SIZE, OUTPUT_ENCODING

logger = logging.getLogger(__name__)

# Text codecs report undecodable input with UnicodeError or a plain ValueError.
_STOP_ERRORS = (UnicodeError, ValueError)


@lru_cache(maxsize=128)
def lookup_text_codec(label: str) -> Optional[codecs.CodecInfo]:
    try:
        info = codecs.lookup(label)
    except (LookupError, ValueError):
        return None
    # Same check bytes.decode() applies to reject non-text codecs.
    if not getattr(info, "_is_text_encoding", True):
        return None
    return info


class CodecTranscoder:
    """Converts named charsets to UTF-8 using incremental codec decoders."""

    def __init__(self, chunk_size: int = CHUNK_SIZE) -> None:
        self.chunk_size = chunk_size

    @contextmanager
    def open(self, label: str) -> Iterator[Optional[codecs.IncrementalDecoder]]:
        """Yield a decoder for ``label``, or None if it can't be converted."""
        info = lookup_text_codec(label)
        if info is None:
            logger.debug("No codec available for charset %r", label)
            yield None
            return
        decoder = info.incrementaldecoder("strict")
        try:
            yield decoder
        finally:
            decoder.reset()

    def convert(self, label: str, data: bytes, out: OutputBuffer) -> bool:
        """
        Decode ``data`` as ``label`` and append the UTF-8 result to ``out``.

        Returns False when no converter exists for ``label``. Decoding stops at
        the first invalid byte sequence; whatever was decoded before it is
        kept and the remaining input is dropped.
        """
        with self.open(label) as decoder:
            if decoder is None:
                return False
            size = len(data)
            for start in range(0, size, self.chunk_size):
                chunk = bytes(data[start:start + self.chunk_size])
                final = start + self.chunk_size >= size
                state = decoder.getstate()
                try:
                    text = decoder.decode(chunk, final)
                except _STOP_ERRORS as exc:
                    # Rewind to the state after the previous chunk so shift
                    # state, byte order and buffered bytes carry over.
                    decoder.setstate(state)
                    text = self._decode_prefix(decoder, chunk)
                    out.extend(text.encode(OUTPUT_ENCODING, "surrogatepass"))
                    logger.debug(
                        "Stopped converting %r in bytes %d-%d: %s",
                        label, start, start + len(chunk), exc,
                    )
                    break
                out.extend(text.encode(OUTPUT_ENCODING, "surrogatepass"))
        return True

    @staticmethod
    def _decode_prefix(decoder: codecs.IncrementalDecoder, chunk: bytes) -> str:
        """Feed ``chunk`` one byte at a time until the decoder rejects one."""
        parts = []
        for i in range(len(chunk)):
            try:
                parts.append(decoder.decode(chunk[i:i + 1], False))
            except _STOP_ERRORS:
                break
        return "".join(parts)


CODEC_TRANSCODER = CodecTranscoder()
