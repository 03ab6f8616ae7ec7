"""
Charset label classification.

Labels are matched structurally rather than looked up in an alias table:
family names are case-insensitive and may be separated from their number by
one of ``-``, ``_`` or a space. Anything that is not recognised is routed to
the external codec fallback instead of being rejected.
"""

from __future__ import annotations

from typing import Optional

from .models import Classification, Endian, Route
from .rules import LABEL_SEPARATORS, UTF8_LABELS


_EXTERNAL = Classification(Route.EXTERNAL)


def _strip_prefix(label: str, prefix: str) -> Optional[str]:
    if label[:len(prefix)].lower() == prefix:
        return label[len(prefix):]
    return None


def _skip_separator(rest: str) -> str:
    if rest[:1] and rest[0] in LABEL_SEPARATORS:
        return rest[1:]
    return rest


def _classify_utf16(suffix: str) -> Classification:
    if not suffix:
        return Classification(Route.UTF16, Endian.NONE)
    lowered = suffix.lower()
    if lowered == "be":
        return Classification(Route.UTF16, Endian.BIG)
    if lowered == "le":
        return Classification(Route.UTF16, Endian.LITTLE)
    return _EXTERNAL


def _classify_single_byte(label: str) -> Classification:
    rest = _strip_prefix(label, "windows")
    if rest is None:
        rest = _strip_prefix(label, "cp")
    if rest is not None:
        if _skip_separator(rest) == "1252":
            return Classification(Route.WINDOWS_1252)
        return _EXTERNAL

    rest = _strip_prefix(label, "iso")
    rest = label if rest is None else _skip_separator(rest)
    if not rest.startswith("8859"):
        return _EXTERNAL
    rest = _skip_separator(rest[4:])
    if not rest.startswith("1"):
        return _EXTERNAL
    if rest == "1":
        # iso-8859-1 differs from windows-1252 only in the C1 control range,
        # and mislabelled windows-1252 content is common.
        return Classification(Route.WINDOWS_1252)
    if rest == "15":
        return Classification(Route.ISO_8859_15)
    return _EXTERNAL


def classify_label(label: Optional[str]) -> Classification:
    """Pick the conversion route for a charset label.

    Args:
        label: Charset label as supplied by the caller. ``None`` and ``""``
            mean nobody knows the charset.

    Returns:
        The route to take, with the endianness hint for UTF-16/UCS-2 labels.
    """
    if not label:
        return Classification(Route.ALREADY_UTF8)
    if not isinstance(label, str):
        raise TypeError(f"charset label must be str, not {type(label).__name__}")
    if label.lower() in UTF8_LABELS:
        return Classification(Route.ALREADY_UTF8)

    rest = _strip_prefix(label, "utf")
    if rest is not None:
        rest = _skip_separator(rest)
        if not rest.startswith("16"):
            return _EXTERNAL
        return _classify_utf16(rest[2:])

    rest = _strip_prefix(label, "ucs")
    if rest is not None:
        rest = _skip_separator(rest)
        if not rest.startswith("2"):
            return _EXTERNAL
        return _classify_utf16(rest[1:])

    return _classify_single_byte(label)
