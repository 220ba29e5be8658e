"""Content hashing helpers."""

from __future__ import annotations

import hashlib

__all__ = ["md5_hex"]


def md5_hex(text: str) -> str:
    """Return the lowercase hex MD5 digest of ``text`` encoded as UTF-8.

    MD5 is used as a content fingerprint only, never for security.
    """

    return hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()
