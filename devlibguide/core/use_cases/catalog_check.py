"""
Catalog check use case — report tags outside the taxonomy and duplicate names.

Both findings are warnings: the catalog still loads and serves as-is.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from devlibguide.core.config.loader import ConfigError
from devlibguide.core.context import load_context
from devlibguide.core.models import CatalogError, TaxonomyError
from devlibguide.core.services.catalog_store import TagIssue, check_tags
from devlibguide.core.services.dedupe import find_duplicates


@dataclass
class CatalogCheckResult:
    """Result of checking the catalog against the taxonomy."""

    valid: bool = False
    library_counts: dict[str, int] = field(default_factory=dict)
    unknown_tags: list[TagIssue] = field(default_factory=list)
    duplicates: dict[str, dict[str, int]] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    @property
    def warning_count(self) -> int:
        return len(self.unknown_tags) + sum(len(d) for d in self.duplicates.values())

    def distinct_unknown_tags(self) -> list[str]:
        return sorted({issue.tag for issue in self.unknown_tags})

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "library_counts": self.library_counts,
            "unknown_tags": [issue.to_dict() for issue in self.unknown_tags],
            "distinct_unknown_tags": self.distinct_unknown_tags(),
            "duplicates": self.duplicates,
            "errors": self.errors,
        }


def check_catalog(config_path: Path | None = None) -> CatalogCheckResult:
    """Load the catalog and collect its warnings.

    Args:
        config_path: Optional explicit path to devlibguide.yml.

    Returns:
        CatalogCheckResult; ``valid`` is False only when loading failed.
    """
    result = CatalogCheckResult()

    try:
        context = load_context(config_path)
    except (ConfigError, CatalogError, TaxonomyError) as e:
        result.errors.append(str(e))
        return result

    for language, records in context.catalog.items():
        result.library_counts[language] = len(records)
        dupes = find_duplicates(records)
        if dupes:
            result.duplicates[language] = dupes

    result.unknown_tags = check_tags(context.catalog, context.registry.tag_taxonomy)
    result.valid = True
    return result
