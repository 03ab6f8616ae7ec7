"""
UTF-16 and UCS-2 decoding.

UCS-2 is handled as UTF-16: an unmarked stream is assumed to be big-endian,
and surrogate pairs are combined whichever label was used.
"""

from __future__ import annotations

import logging
from typing import Tuple

from .buffer import OutputBuffer
from .models import Endian

logger = logging.getLogger(__name__)

BOM_BE = b"\xfe\xff"
BOM_LE = b"\xff\xfe"


def _is_high_surrogate(unit: int) -> bool:
    return 0xD800 <= unit <= 0xDBFF


def _is_low_surrogate(unit: int) -> bool:
    return 0xDC00 <= unit <= 0xDFFF


def detect_byte_order(data: bytes) -> Tuple[bool, int]:
    """Return ``(big_endian, offset)`` chosen by a leading byte-order mark."""
    head = bytes(data[:2])
    if head == BOM_BE:
        return True, 2
    if head == BOM_LE:
        return False, 2
    return True, 0


def decode_utf16(data: bytes, endian: Endian, out: OutputBuffer) -> bool:
    """
    Decode UTF-16 ``data`` into ``out``.

    Returns False when there is nothing to decode (fewer than two bytes).
    Truncated input is not an error: an odd trailing byte is dropped and a
    high surrogate in the last unit ends decoding.
    """
    if len(data) < 2:
        return False

    if endian is Endian.NONE:
        big_endian, pos = detect_byte_order(data)
    else:
        big_endian, pos = endian is Endian.BIG, 0

    end = len(data)
    if end & 1:
        logger.debug("Dropping odd trailing byte of UTF-16 input")
        end -= 1

    def read_unit(i: int) -> int:
        if big_endian:
            return (data[i] << 8) | data[i + 1]
        return (data[i + 1] << 8) | data[i]

    while pos != end:
        code_point = read_unit(pos)
        pos += 2
        if _is_high_surrogate(code_point):
            if pos == end:
                logger.debug("UTF-16 input ends in a high surrogate")
                break
            low = read_unit(pos)
            pos += 2
            if _is_low_surrogate(low):
                code_point = 0x10000 + ((code_point & 0x3FF) << 10) + (low & 0x3FF)
        out.push(code_point)
    return True
