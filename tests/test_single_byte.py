import pytest

from utf8convert import normalize
from utf8convert.buffer import OutputBuffer
from utf8convert.single_byte import CP1252, ISO_8859_15, decode_single_byte

# Positions windows-1252 leaves unassigned; Python's cp1252 codec rejects them.
CP1252_UNDEFINED = (0x81, 0x8D, 0x8F, 0x90, 0x9D)


def test_table_sizes():
    assert (CP1252.first, len(CP1252.code_points)) == (0x80, 32)
    assert (ISO_8859_15.first, len(ISO_8859_15.code_points)) == (0xA4, 27)


def test_windows_1252_exceptional_byte():
    assert CP1252.lookup(0x80) == 0x20AC
    assert CP1252.lookup(0x41) == 0x41
    assert normalize(b"\x80", "windows-1252").text == "€"


def test_iso_8859_15_exceptional_byte():
    assert ISO_8859_15.lookup(0xA4) == 0x20AC
    assert ISO_8859_15.lookup(0x41) == 0x41
    assert normalize(b"\xa4", "ISO-8859-15").text == "€"


def test_windows_1252_matches_codec():
    data = bytes(b for b in range(256) if b not in CP1252_UNDEFINED)
    assert normalize(data, "cp1252").text == data.decode("cp1252")


@pytest.mark.parametrize("byte", CP1252_UNDEFINED)
def test_windows_1252_unassigned_bytes_keep_control_value(byte):
    assert normalize(bytes([byte]), "cp1252").text == chr(byte)


def test_iso_8859_15_matches_codec():
    data = bytes(range(256))
    assert normalize(data, "iso8859-15").text == data.decode("iso8859_15")


def test_latin1_label_uses_windows_1252():
    result = normalize(b"caf\xe9 \x93quoted\x94", "ISO-8859-1")
    assert result.text == "café “quoted”"


def test_decode_into_buffer():
    out = OutputBuffer(chunk_size=8)
    decode_single_byte(b"\x80" * 10, CP1252, out)
    assert out.getvalue() == "€".encode("utf-8") * 10


def test_empty_input_is_converted():
    result = normalize(b"", "windows-1252")
    assert result.changed
    assert result.data == b""
