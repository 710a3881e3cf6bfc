"""
Search use case — filter the catalog for one query and report the result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from devlibguide.core.config.loader import ConfigError
from devlibguide.core.context import load_context
from devlibguide.core.models import CatalogError, FilterQuery, LibraryRecord, TaxonomyError
from devlibguide.core.services.catalog_browser import CatalogBrowser


@dataclass
class SearchResult:
    """Per-language matches for one query."""

    query: FilterQuery = field(default_factory=FilterQuery)
    active_tab: str = ""
    libraries: dict[str, list[LibraryRecord]] = field(default_factory=dict)
    error: str | None = None

    @property
    def total(self) -> int:
        return sum(len(records) for records in self.libraries.values())

    def to_dict(self) -> dict:
        return {
            "query": self.query.to_dict(),
            "active_filters": self.query.is_active,
            "active_tab": self.active_tab,
            "total": self.total,
            "libraries": {
                language: [record.to_dict() for record in records]
                for language, records in self.libraries.items()
            },
            "error": self.error,
        }


def run_search(
    search_term: str = "",
    language: str = "",
    category: str = "",
    config_path: Path | None = None,
) -> SearchResult:
    """Search every language's catalog.

    Args:
        search_term: Free-text term matched against name, description, tags.
        language: Language tab to report as active (does not exclude others).
        category: Category tag filter.
        config_path: Optional explicit path to devlibguide.yml.

    Returns:
        SearchResult; ``error`` is set instead of raising on load failures.
    """
    query = FilterQuery(search_term=search_term, language_filter=language, category_filter=category)
    result = SearchResult(query=query)

    try:
        context = load_context(config_path)
    except (ConfigError, CatalogError, TaxonomyError) as e:
        result.error = str(e)
        return result

    browser = CatalogBrowser(context.catalog, query)
    result.active_tab = browser.active_tab
    result.libraries = browser.results
    return result
