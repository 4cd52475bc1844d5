"""Natural ("human") ordering for service names."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")

_CHUNK_PATTERN = re.compile(r"(\d+)")


def natural_key(text: str) -> tuple[tuple[int, int | str], ...]:
    """Split text into digit and non-digit chunks so ``svc2`` sorts before ``svc10``."""
    key: list[tuple[int, int | str]] = []
    for chunk in _CHUNK_PATTERN.split(text):
        if not chunk:
            continue
        if chunk.isdigit():
            key.append((0, int(chunk)))
        else:
            key.append((1, chunk))
    return tuple(key)


def natural_sorted(items: Iterable[T], key: Callable[[T], str]) -> list[T]:
    """Return items ordered by natural comparison of ``key(item)``."""
    return sorted(items, key=lambda item: (natural_key(key(item)), key(item)))


__all__ = ["natural_key", "natural_sorted"]
