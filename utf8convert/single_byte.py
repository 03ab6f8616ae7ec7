"""
Table-driven decoding for windows-1252 and iso-8859-15.

Both charsets map byte values straight to codepoints except inside one small
contiguous range, which is remapped through a fixed table.
"""

from __future__ import annotations

from typing import NamedTuple, Tuple

from .buffer import OutputBuffer
from .models import Route


class ByteTable(NamedTuple):
    first: int
    code_points: Tuple[int, ...]

    def lookup(self, byte: int) -> int:
        index = byte - self.first
        if 0 <= index < len(self.code_points):
            return self.code_points[index]
        return byte


# 0x80-0x9F: C1 controls in iso-8859-1, printable characters in windows-1252.
# The five positions windows-1252 leaves unassigned keep their C1 value.
CP1252 = ByteTable(0x80, (
    0x20AC, 0x0081, 0x201A, 0x0192, 0x201E, 0x2026, 0x2020, 0x2021,
    0x02C6, 0x2030, 0x0160, 0x2039, 0x0152, 0x008D, 0x017D, 0x008F,
    0x0090, 0x2018, 0x2019, 0x201C, 0x201D, 0x2022, 0x2013, 0x2014,
    0x02DC, 0x2122, 0x0161, 0x203A, 0x0153, 0x009D, 0x017E, 0x0178,
))

# 0xA4-0xBE: the only range where iso-8859-15 departs from iso-8859-1.
ISO_8859_15 = ByteTable(0xA4, (
    0x20AC, 0x00A5, 0x0160, 0x00A7, 0x0161, 0x00A9, 0x00AA, 0x00AB,
    0x00AC, 0x00AD, 0x00AE, 0x00AF, 0x00B0, 0x00B1, 0x00B2, 0x00B3,
    0x017D, 0x00B5, 0x00B6, 0x00B7, 0x017E, 0x00B9, 0x00BA, 0x00BB,
    0x0152, 0x0153, 0x0178,
))

TABLES = {
    Route.WINDOWS_1252: CP1252,
    Route.ISO_8859_15: ISO_8859_15,
}


def decode_single_byte(data: bytes, table: ByteTable, out: OutputBuffer) -> None:
    for byte in data:
        out.push(table.lookup(byte))
