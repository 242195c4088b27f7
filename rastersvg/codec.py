"""Base64 helpers."""

from __future__ import annotations

import base64
import string

_ALPHABET = frozenset(string.ascii_letters + string.digits + "+/")


def base64_encode(data: bytes) -> str:
    """Encode bytes as padded standard base64 text."""
    return base64.b64encode(bytes(data)).decode("ascii")


def base64_decode(text: str) -> bytes:
    """Decode base64 text, stopping at padding or the first foreign character.

    Missing padding is tolerated.
    """
    chars = []
    for ch in text:
        if ch not in _ALPHABET:
            break
        chars.append(ch)
    if len(chars) % 4 == 1:
        chars.pop()
    body = "".join(chars)
    body += "=" * (-len(body) % 4)
    return base64.b64decode(body)