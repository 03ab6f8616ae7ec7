from __future__ import annotations

import base64
import hashlib
from typing import Optional

from charset_normalizer import from_bytes
from fastapi import FastAPI, File, Form, HTTPException, UploadFile

from .models import HealthResponse, NormalizeResponse
from .normalize import normalize
from .rules import MAX_LABEL_LENGTH

app = FastAPI(
    title="utf8convert",
    description="Charset-labelled bytes to UTF-8 for document ingestion pipelines",
    version="0.1.0",
)


def _sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def detect_charset(raw: bytes) -> str:
    """Best-effort charset label for unlabelled input, "" if nothing fits."""
    match = from_bytes(raw).best()
    if match is None:
        return ""
    return match.encoding


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/normalize", response_model=NormalizeResponse)
async def normalize_upload(
    file: UploadFile = File(...),
    charset: Optional[str] = Form(None),
):
    if charset is not None and len(charset) > MAX_LABEL_LENGTH:
        raise HTTPException(
            status_code=422,
            detail=f"charset label longer than {MAX_LABEL_LENGTH} characters",
        )

    raw = await file.read()
    detected = charset is None
    if detected:
        charset = detect_charset(raw)

    result = normalize(raw, charset)
    content = result.data if result.changed else raw
    return {
        "changed": result.changed,
        "route": result.route,
        "charset": charset,
        "detected": detected,
        "sha256": _sha256_hex(content),
        "content_b64": base64.b64encode(content).decode("ascii"),
    }
