from __future__ import annotations

from typing import List

from .rules import CHUNK_SIZE, ENCODE_HEADROOM, OUTPUT_ENCODING


def encode_codepoint(code_point: int) -> bytes:
    # Lone surrogates are written in their 3-byte form rather than rejected.
    return chr(code_point).encode(OUTPUT_ENCODING, "surrogatepass")


class OutputBuffer:
    """
    Append-only UTF-8 accumulator.

    Codepoints are encoded into a bounded chunk which is moved to the list of
    finished parts whenever fewer than ENCODE_HEADROOM bytes remain.
    """

    def __init__(self, chunk_size: int = CHUNK_SIZE) -> None:
        if chunk_size <= ENCODE_HEADROOM:
            raise ValueError(f"chunk_size must exceed {ENCODE_HEADROOM}")
        self._chunk_size = chunk_size
        self._chunk = bytearray()
        self._parts: List[bytes] = []

    def push(self, code_point: int) -> None:
        self._chunk += encode_codepoint(code_point)
        if len(self._chunk) >= self._chunk_size - ENCODE_HEADROOM:
            self.flush()

    def extend(self, encoded: bytes) -> None:
        """Append bytes that are already UTF-8."""
        if encoded:
            self.flush()
            self._parts.append(bytes(encoded))

    def flush(self) -> None:
        if self._chunk:
            self._parts.append(bytes(self._chunk))
            self._chunk = bytearray()

    def getvalue(self) -> bytes:
        self.flush()
        return b"".join(self._parts)

    def __len__(self) -> int:
        return sum(len(part) for part in self._parts) + len(self._chunk)
