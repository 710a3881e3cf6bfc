"""
Filter engine — the visible subset of every language's catalog.

Each call is a pure function of the catalog and one ``FilterQuery``.

Modes:
    pass-through — search, language and category all empty: every
                   language gets its de-duplicated list unchanged.
    filtered     — otherwise: every language's de-duplicated list keeps
                   the records matching both the search term and the
                   category.

The language filter never removes other languages from the result.  It
only tells the caller which tab to show; each tab is filtered on its own.
"""

from __future__ import annotations

from typing import Iterable

from devlibguide.core.models import FilterQuery, LibraryRecord
from devlibguide.core.services.catalog_store import LanguageCatalog
from devlibguide.core.services.dedupe import dedupe


def matches_search(record: LibraryRecord, term: str) -> bool:
    """Case-insensitive substring match on name, description or any tag."""
    if not term:
        return True
    needle = term.lower()
    return (
        needle in record.name.lower()
        or needle in record.description.lower()
        or any(needle in tag.lower() for tag in record.tags)
    )


def matches_category(record: LibraryRecord, category: str) -> bool:
    """Some tag equals the category or contains it, ignoring case."""
    if not category:
        return True
    needle = category.lower()
    return any(tag.lower() == needle or needle in tag.lower() for tag in record.tags)


def filter_records(records: Iterable[LibraryRecord], query: FilterQuery) -> list[LibraryRecord]:
    """Records matching both search and category, in input order."""
    return [
        record
        for record in records
        if matches_search(record, query.search_term)
        and matches_category(record, query.category_filter)
    ]


def filter_catalogs(
    catalog: LanguageCatalog,
    query: FilterQuery | None = None,
) -> dict[str, list[LibraryRecord]]:
    """De-duplicate and filter every language of ``catalog``.

    Returns:
        Language key → surviving records, in catalog language order.
    """
    query = query or FilterQuery()
    unique = {language: dedupe(records) for language, records in catalog.items()}

    if not query.is_active:
        return unique

    return {language: filter_records(records, query) for language, records in unique.items()}
