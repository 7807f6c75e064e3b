"""Decoding of raw archive member names, with Japanese (Shift_JIS) support."""

from __future__ import annotations

import unicodedata
from pathlib import Path

_ALLOWED_CONTROLS = frozenset("\n\r\t")


def _has_control_characters(text: str) -> bool:
    return any(
        unicodedata.category(char) == "Cc" and char not in _ALLOWED_CONTROLS
        for char in text
    )


def decode_filename(raw_bytes: bytes) -> str:
    """Decode a file name as UTF-8, then Shift_JIS, then lossy UTF-8."""
    try:
        text = raw_bytes.decode("utf-8")
    except UnicodeDecodeError:
        pass
    else:
        if not _has_control_characters(text):
            return text

    try:
        return raw_bytes.decode("cp932")
    except UnicodeDecodeError:
        return raw_bytes.decode("utf-8", errors="replace")


def decode_filename_as_path(raw_bytes: bytes) -> Path:
    """Decode a raw file name and return it as a path."""
    return Path(decode_filename(raw_bytes))