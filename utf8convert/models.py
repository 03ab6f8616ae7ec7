from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from .rules import OUTPUT_ENCODING


class Route(str, Enum):
    ALREADY_UTF8 = "already_utf8"
    UTF16 = "utf16"
    WINDOWS_1252 = "windows_1252"
    ISO_8859_15 = "iso_8859_15"
    EXTERNAL = "external"


class Endian(str, Enum):
    NONE = "none"  # decided by byte-order mark, big-endian without one
    BIG = "big"
    LITTLE = "little"


class Classification(NamedTuple):
    route: Route
    endian: Endian = Endian.NONE


class ConversionResult(BaseModel):
    """
    Outcome of a single normalization.

    When ``changed`` is False the caller keeps its original bytes and ``data``
    is empty. When True, ``data`` is the complete UTF-8 output (possibly empty).
    """

    model_config = ConfigDict(frozen=True)

    changed: bool
    data: bytes = b""
    route: Route = Route.ALREADY_UTF8

    @property
    def text(self) -> str:
        return self.data.decode(OUTPUT_ENCODING, "surrogatepass")


class NormalizeResponse(BaseModel):
    changed: bool
    route: Route
    charset: str = Field(default="", examples=["windows-1252"])
    detected: bool = False
    sha256: str
    encoding: str = Field(default=OUTPUT_ENCODING)
    content_b64: str


class HealthResponse(BaseModel):
    ok: bool = True
