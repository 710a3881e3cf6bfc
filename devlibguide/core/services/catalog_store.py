"""
Library record store — per-language catalogs, read-only after build.

``build_catalog()`` turns the registry's raw JSON tables into a
``LanguageCatalog`` once at startup.  The catalog is then passed
explicitly to the filter engine, the browser and the web layer; nothing
reads it through a module global.

Tags are checked against the taxonomy while building, but an unknown tag
never rejects a record: the shipped tables mix taxonomy tags with free
strings ("Async", "Runtime", …) and are kept as they are.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from pydantic import ValidationError

from devlibguide.core.data import DataRegistry
from devlibguide.core.models import CatalogError, LibraryRecord, TagTaxonomy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TagIssue:
    """A library tag that is not part of the taxonomy."""

    language: str
    library: str
    tag: str

    def to_dict(self) -> dict:
        return {"language": self.language, "library": self.library, "tag": self.tag}


class LanguageCatalog:
    """Ordered, immutable mapping of language key → library records.

    Lookups for an unsupported key return an empty tuple instead of
    raising, so callers can index any user-supplied language.
    """

    def __init__(self, tables: Mapping[str, Iterable[LibraryRecord]]) -> None:
        self._tables: Mapping[str, tuple[LibraryRecord, ...]] = MappingProxyType(
            {key: tuple(records) for key, records in tables.items()}
        )

    @property
    def languages(self) -> tuple[str, ...]:
        return tuple(self._tables)

    def get_catalog(self, language: str | None) -> tuple[LibraryRecord, ...]:
        """Records for ``language`` in table order; unknown → empty."""
        if not language:
            return ()
        return self._tables.get(language, ())

    def items(self) -> Iterator[tuple[str, tuple[LibraryRecord, ...]]]:
        return iter(self._tables.items())

    def __contains__(self, language: object) -> bool:
        return language in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tables)

    def total_records(self) -> int:
        return sum(len(records) for records in self._tables.values())


def parse_records(language: str, rows: list[dict]) -> list[LibraryRecord]:
    """Validate raw rows into LibraryRecords.

    Raises:
        CatalogError: With the language and row index of the first bad row.
    """
    records: list[LibraryRecord] = []
    for index, row in enumerate(rows):
        try:
            records.append(LibraryRecord.model_validate(row))
        except ValidationError as e:
            raise CatalogError(f"Invalid {language} library at index {index}: {e}") from e
    return records


def check_tags(catalog: LanguageCatalog, taxonomy: TagTaxonomy) -> list[TagIssue]:
    """List every (language, library, tag) whose tag is outside the taxonomy."""
    known = set(taxonomy.all_tags())
    issues: list[TagIssue] = []
    for language, records in catalog.items():
        for record in records:
            for tag in record.tags:
                if tag not in known:
                    issues.append(TagIssue(language=language, library=record.name, tag=tag))
    return issues


def build_catalog(
    registry: DataRegistry,
    languages: Iterable[str] | None = None,
    warn_unknown_tags: bool = False,
) -> LanguageCatalog:
    """Build the catalog from the registry's library tables.

    Args:
        registry: Source of the raw JSON tables and the taxonomy.
        languages: Language keys to include, in order.  Defaults to the
            registry's language list.
        warn_unknown_tags: Log each unknown tag at WARNING instead of DEBUG.

    Returns:
        An immutable LanguageCatalog.

    Raises:
        CatalogError: If a table row fails validation.
    """
    keys = list(languages) if languages is not None else registry.language_keys()

    tables = {key: parse_records(key, registry.library_table(key)) for key in keys}
    catalog = LanguageCatalog(tables)

    issues = check_tags(catalog, registry.tag_taxonomy)
    level = logging.WARNING if warn_unknown_tags else logging.DEBUG
    for issue in issues:
        logger.log(level, "Unknown tag '%s' on %s library '%s'", issue.tag, issue.language, issue.library)

    logger.info(
        "Built catalog: %d languages, %d libraries, %d tags outside the taxonomy",
        len(catalog), catalog.total_records(), len(issues),
    )
    return catalog
