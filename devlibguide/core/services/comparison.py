"""
Library comparison — tag overlap between up to three libraries of one language.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from devlibguide.core.models import LibraryRecord
from devlibguide.core.services.catalog_store import LanguageCatalog
from devlibguide.core.services.dedupe import dedupe

MAX_COMPARED = 3


class ComparisonError(Exception):
    """Raised when a comparison request cannot be honoured."""


@dataclass
class ComparisonResult:
    """Selected libraries and how many of them carry each tag."""

    language: str
    libraries: list[LibraryRecord] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    tag_counts: list[tuple[str, int]] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "language": self.language,
            "libraries": [lib.to_dict() for lib in self.libraries],
            "missing": self.missing,
            "tags": self.tags,
            "tag_counts": [{"tag": tag, "count": count} for tag, count in self.tag_counts],
        }


def compare_libraries(catalog: LanguageCatalog, language: str, names: list[str]) -> ComparisonResult:
    """Compare libraries by exact name within one language.

    Tags are collected in first-seen order; ``tag_counts`` is sorted by
    count, highest first, keeping that order among equal counts.

    Raises:
        ComparisonError: If more than ``MAX_COMPARED`` names are given.
    """
    if len(names) > MAX_COMPARED:
        raise ComparisonError(f"At most {MAX_COMPARED} libraries can be compared, got {len(names)}")

    by_name = {record.name: record for record in dedupe(catalog.get_catalog(language))}
    result = ComparisonResult(language=language)

    for name in names:
        record = by_name.get(name)
        if record is None:
            result.missing.append(name)
        elif record not in result.libraries:
            result.libraries.append(record)

    for record in result.libraries:
        for tag in record.tags:
            if tag not in result.tags:
                result.tags.append(tag)

    counts = [(tag, sum(1 for lib in result.libraries if tag in lib.tags)) for tag in result.tags]
    result.tag_counts = sorted(counts, key=lambda item: item[1], reverse=True)
    return result
