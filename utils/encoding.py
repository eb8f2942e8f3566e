from __future__ import annotations

import base64
from typing import Tuple


def encode_base64(data: bytes) -> str:
    """Standard base64 (with padding) as ASCII text."""
    return base64.b64encode(data).decode("ascii")


def to_data_uri(mime_type: str, b64: str) -> str:
    """Build `data:<mime>;base64,<payload>` from an already-encoded payload."""
    return f"data:{mime_type};base64,{b64}"


def parse_data_uri(uri: str) -> Tuple[str, bytes]:
    """
    Split a base64 data URI back into (mime_type, raw bytes).

    The service never decodes its own responses; this is for Python clients
    that consume the `image` field of `/analyze`.

    Raises:
        ValueError: if `uri` is not a base64 data URI.
    """
    if not uri.startswith("data:") or "," not in uri:
        raise ValueError("not a data URI")

    header, payload = uri[len("data:"):].split(",", 1)
    if not header.endswith(";base64"):
        raise ValueError("data URI is not base64-encoded")

    return header[: -len(";base64")], base64.b64decode(payload)
