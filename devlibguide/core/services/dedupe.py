"""
Duplicate resolver — one record per case-insensitive library name.

Raw tables sometimes list the same library twice (e.g. two version
strings).  Collapsing goes through an insertion-ordered dict, overwriting
in place: the *last* occurrence wins, but it sits where the name was
*first* seen.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from devlibguide.core.models import LibraryRecord


def dedupe(records: Iterable[LibraryRecord]) -> list[LibraryRecord]:
    """Collapse records sharing a lowercased name, last write wins."""
    unique: dict[str, LibraryRecord] = {}
    for record in records:
        # Plain assignment keeps the key's original slot in the dict
        unique[record.key] = record
    return list(unique.values())


def find_duplicates(records: Iterable[LibraryRecord]) -> dict[str, int]:
    """Lowercased names that appear more than once, with their counts."""
    counts = Counter(record.key for record in records)
    return {name: n for name, n in counts.items() if n > 1}
