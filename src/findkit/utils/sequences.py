"""Small helpers over sequences of strings."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["string_in_list"]


def string_in_list(s: str, items: Iterable[str]) -> bool:
    """Return ``True`` when ``s`` equals one of ``items``."""

    return any(s == item for item in items)
