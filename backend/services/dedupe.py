"""Case-insensitive, order-preserving uniqueness filter."""

from typing import Iterable, Optional


def dedupe_case_insensitive(items: Iterable[Optional[str]]) -> list[str]:
    """Drop blanks and case-insensitive repeats, keeping first-seen order.

    The key is the trimmed, lower-cased item; the value kept is the first
    trimmed original, so "Docker" seen before "docker" wins.
    """
    seen: dict[str, str] = {}
    for item in items:
        if item is None:
            continue
        trimmed = item.strip()
        if not trimmed:
            continue
        key = trimmed.lower()
        if key not in seen:
            seen[key] = trimmed
    return list(seen.values())
