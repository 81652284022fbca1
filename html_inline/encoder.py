"""Base64 data URI encoding for binary resources."""

from __future__ import annotations

import base64

FALLBACK_MIME_TYPE = "image"
MIME_TYPES = {
    "svg": "image/svg+xml",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/jpeg",
}


def mime_type_for(extension: str) -> str:
    """Look up the MIME type for a bare file extension (no leading dot)."""
    return MIME_TYPES.get(extension, FALLBACK_MIME_TYPE)


def to_data_uri(extension: str, data: bytes) -> str:
    """Encode ``data`` as a data URI; consumers rely on the space after the comma."""
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type_for(extension)};base64, {payload}"
