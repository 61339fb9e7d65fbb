"""Common utility functions shared across the library."""

import re
from typing import Hashable, Iterable, List, Set, TypeVar


T = TypeVar("T", bound=Hashable)


def unique_preserve_order(items: Iterable[T]) -> List[T]:
    """Return unique items while preserving order."""
    seen: Set[T] = set()
    ordered: List[T] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            ordered.append(item)
    return ordered


def sanitize_filename(name: str) -> str:
    """Sanitize a string for use as a filename.

    Replaces path separators and other problematic characters with underscores.
    """
    return re.sub(r'[/\\:*?"<>|]', '_', name)
