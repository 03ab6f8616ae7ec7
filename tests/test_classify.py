import pytest

from utf8convert import Classification, Endian, Route, classify_label


@pytest.mark.parametrize("label", ["utf-8", "UTF8", "Utf-8", "us-ascii", "US-ASCII", "", None])
def test_already_utf8(label):
    assert classify_label(label) == Classification(Route.ALREADY_UTF8)


@pytest.mark.parametrize(
    "label, endian",
    [
        ("UTF-16", Endian.NONE),
        ("utf_16", Endian.NONE),
        ("UTF 16", Endian.NONE),
        ("utf16", Endian.NONE),
        ("UTF-16BE", Endian.BIG),
        ("utf16be", Endian.BIG),
        ("UTF-16le", Endian.LITTLE),
        ("ucs-2", Endian.NONE),
        ("UCS2", Endian.NONE),
        ("ucs-2BE", Endian.BIG),
        ("UCS_2LE", Endian.LITTLE),
    ],
)
def test_utf16_family(label, endian):
    assert classify_label(label) == Classification(Route.UTF16, endian)


@pytest.mark.parametrize(
    "label",
    ["windows-1252", "WINDOWS-1252", "windows_1252", "windows 1252", "windows1252",
     "cp1252", "CP1252", "cp_1252", "cp-1252"],
)
def test_windows_1252(label):
    assert classify_label(label).route is Route.WINDOWS_1252


@pytest.mark.parametrize(
    "label",
    ["iso-8859-1", "ISO-8859-1", "iso8859-1", "ISO_8859_1", "iso 8859 1", "iso88591", "8859-1"],
)
def test_latin1_treated_as_windows_1252(label):
    assert classify_label(label).route is Route.WINDOWS_1252


@pytest.mark.parametrize("label", ["iso-8859-15", "ISO8859-15", "iso_8859_15", "8859-15"])
def test_iso_8859_15(label):
    assert classify_label(label).route is Route.ISO_8859_15


@pytest.mark.parametrize(
    "label",
    [
        "shift_jis",
        "latin1",
        "utf-16-le",  # qualifier after a separator is not recognised
        "UTF-16X",
        "utf-32",
        "utf-1",
        "ucs-4",
        "cp1251",
        "cp850",
        "windows-1252x",
        "iso-8859-2",
        "iso-8859-10",
        "iso-8859-150",
        "iso-8859-1x",
        "koi8-r",
    ],
)
def test_external(label):
    assert classify_label(label) == Classification(Route.EXTERNAL)


def test_separators_are_interchangeable():
    routes = {classify_label(label) for label in ("windows-1252", "CP1252", "cp_1252")}
    assert len(routes) == 1


def test_non_string_label():
    with pytest.raises(TypeError):
        classify_label(b"utf-16")
