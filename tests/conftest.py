from __future__ import annotations

import pytest

# Smallest valid PNG: 1x1 transparent pixel
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d49484452000000010000000108060000001f15c489"
    "0000000d49444154789c6360000002000001e221bc330000000049454e44ae426082"
)


class FakeProvider:
    """Records calls and either returns `text` or raises `exc`."""

    def __init__(self, text="A healthy Monstera deliciosa.", exc=None):
        self.text = text
        self.exc = exc
        self.calls = []

    def analyze(self, prompt, mime_type, data):
        self.calls.append((prompt, mime_type, data))
        if self.exc is not None:
            raise self.exc
        return self.text


@pytest.fixture
def png_bytes():
    return PNG_BYTES


@pytest.fixture
def upload_file(tmp_path, png_bytes):
    path = tmp_path / "upload.png"
    path.write_bytes(png_bytes)
    return path
