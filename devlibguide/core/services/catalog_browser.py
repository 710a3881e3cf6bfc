"""
Catalog browser — the stateful side of the search section.

Holds the current ``FilterQuery`` and the selected language tab for one
session, and recomputes the filtered view whenever one of the three
input callbacks fires.  Recomputation is a pure function of the query,
so the view always reflects the latest event.
"""

from __future__ import annotations

import logging

from devlibguide.core.models import FilterQuery, LibraryRecord
from devlibguide.core.services.catalog_filter import filter_catalogs
from devlibguide.core.services.catalog_store import LanguageCatalog

logger = logging.getLogger(__name__)


class CatalogBrowser:
    """Search / language / category state over an injected catalog."""

    def __init__(self, catalog: LanguageCatalog, query: FilterQuery | None = None) -> None:
        self.catalog = catalog
        self.query = query or FilterQuery()
        self._selected_tab = catalog.languages[0] if catalog.languages else ""
        self._results: dict[str, list[LibraryRecord]] = {}
        self._recompute()

    # ── Input callbacks ──────────────────────────────────────────

    def on_search(self, term: str | None) -> None:
        self._update(search_term=term or "")

    def on_language_filter(self, language: str | None) -> None:
        self._update(language_filter=language or "")

    def on_category_filter(self, category: str | None) -> None:
        self._update(category_filter=category or "")

    def select_tab(self, language: str) -> None:
        """Switch the displayed tab.  Unknown languages are ignored."""
        if language in self.catalog:
            self._selected_tab = language
        else:
            logger.debug("Ignoring tab selection for unknown language '%s'", language)

    # ── View ─────────────────────────────────────────────────────

    @property
    def active_filters(self) -> bool:
        return self.query.is_active

    @property
    def active_tab(self) -> str:
        """The language filter if it names a known tab, else the selected tab."""
        if self.query.language_filter in self.catalog:
            return self.query.language_filter
        return self._selected_tab

    @property
    def results(self) -> dict[str, list[LibraryRecord]]:
        return self._results

    @property
    def visible(self) -> list[LibraryRecord]:
        """Records shown on the active tab."""
        return self._results.get(self.active_tab, [])

    def to_dict(self) -> dict:
        return {
            "query": self.query.to_dict(),
            "active_filters": self.active_filters,
            "active_tab": self.active_tab,
            "libraries": {
                language: [record.to_dict() for record in records]
                for language, records in self._results.items()
            },
        }

    # ── Internals ────────────────────────────────────────────────

    def _update(self, **changes: str) -> None:
        self.query = self.query.model_copy(update=changes)
        self._recompute()

    def _recompute(self) -> None:
        self._results = filter_catalogs(self.catalog, self.query)
        logger.debug(
            "Filtered catalog for %s: %d visible on '%s'",
            self.query.to_dict(), len(self.visible), self.active_tab,
        )
