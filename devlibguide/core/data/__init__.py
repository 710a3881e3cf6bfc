"""
Central data registry for the static catalogs.

Loads the JSON catalogs from ``devlibguide/core/data/catalogs/`` once at
first access and caches them for the lifetime of the registry.  Everything
downstream (CLI, Web) builds its read-only views from this single source
of truth.

Usage::

    from devlibguide.core.data import DataRegistry

    registry = DataRegistry()
    taxonomy = registry.tag_taxonomy          # TagTaxonomy
    rows = registry.library_table("python")   # list[dict]
    snippets = registry.examples["React"]     # list[CodeExample]

A file that is present but unreadable, not JSON, or holding an entry
that fails validation raises ``CatalogError`` naming the file.
"""

from __future__ import annotations

import json
import logging
from functools import cached_property
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from devlibguide.core.models import (
    CatalogError,
    CodeExample,
    LanguageInfo,
    Problem,
    TagTaxonomy,
    Tutorial,
)

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "catalogs"

_M = TypeVar("_M", bound=BaseModel)


def _load_json(path: Path, default: list | dict) -> list | dict:
    """Load a JSON file; a missing file yields ``default``."""
    if not path.exists():
        logger.warning("Data file not found: %s", path)
        return default
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise CatalogError(f"Cannot load {path}: {e}") from e


def _validate_list(model: type[_M], data: object, path: Path) -> list[_M]:
    if not isinstance(data, list):
        raise CatalogError(f"Expected a JSON list in {path}, got {type(data).__name__}")
    try:
        return [model.model_validate(item) for item in data]
    except ValidationError as e:
        raise CatalogError(f"Invalid entry in {path}: {e}") from e


class DataRegistry:
    """Registry for all static data catalogs.

    Each property lazily loads its JSON file on first access and caches
    the result for the lifetime of the instance.  Create one instance
    per process (store it on the Flask app, or build one per CLI run).

    Args:
        data_dir: Optional override for the catalogs directory.  Files
            missing from the override are *not* looked up in the packaged
            defaults.
    """

    def __init__(self, data_dir: Path | None = None) -> None:
        self.data_dir = Path(data_dir) if data_dir else _DATA_DIR

    # ── Taxonomy ─────────────────────────────────────────────────

    @cached_property
    def tag_taxonomy(self) -> TagTaxonomy:
        """The five tag families (functional, feature, …)."""
        data = _load_json(self.data_dir / "tag_taxonomy.json", {})
        taxonomy = TagTaxonomy.from_mapping(data)
        logger.debug("Loaded tag taxonomy with %d tags", len(taxonomy.all_tags()))
        return taxonomy

    # ── Languages ────────────────────────────────────────────────

    @cached_property
    def languages(self) -> list[LanguageInfo]:
        """Supported language tabs in display order."""
        path = self.data_dir / "languages.json"
        result = _validate_list(LanguageInfo, _load_json(path, []), path)
        logger.debug("Loaded %d language definitions", len(result))
        return result

    def language_keys(self) -> list[str]:
        return [lang.key for lang in self.languages]

    # ── Library tables ───────────────────────────────────────────

    def library_table(self, language: str) -> list[dict]:
        """Raw library rows for one language, in file order.

        Not cached: callers build a ``LanguageCatalog`` once and keep it.
        A missing table is an empty list.  Rows are validated by the
        catalog builder, not here.
        """
        path = self.data_dir / "libraries" / f"{language}.json"
        if not path.exists():
            logger.warning("No library table for language '%s' (%s)", language, path)
            return []
        data = _load_json(path, [])
        if not isinstance(data, list):
            raise CatalogError(f"Expected a JSON list in {path}, got {type(data).__name__}")
        logger.debug("Loaded %d %s library rows", len(data), language)
        return data

    # ── Practice problems ────────────────────────────────────────

    @cached_property
    def problems(self) -> list[Problem]:
        """Practice-ground problems, in listing order."""
        path = self.data_dir / "problems.json"
        result = _validate_list(Problem, _load_json(path, []), path)
        logger.debug("Loaded %d practice problems", len(result))
        return result

    # ── Learning material ────────────────────────────────────────

    @cached_property
    def tutorials(self) -> list[Tutorial]:
        """Tutorials, in listing order."""
        path = self.data_dir / "tutorials.json"
        result = _validate_list(Tutorial, _load_json(path, []), path)
        logger.debug("Loaded %d tutorials", len(result))
        return result

    @cached_property
    def examples(self) -> dict[str, list[CodeExample]]:
        """Code examples keyed by exact library name."""
        path = self.data_dir / "examples.json"
        data = _load_json(path, {})
        if not isinstance(data, dict):
            raise CatalogError(f"Expected a JSON object in {path}, got {type(data).__name__}")
        result = {name: _validate_list(CodeExample, items, path) for name, items in data.items()}
        logger.debug("Loaded code examples for %d libraries", len(result))
        return result


# ── Module-level singleton ───────────────────────────────────────

_registry: DataRegistry | None = None


def get_registry() -> DataRegistry:
    """Return the process-level DataRegistry for the packaged catalogs.

    Creates the instance on first call; subsequent calls return the
    same object.
    """
    global _registry  # noqa: PLW0603
    if _registry is None:
        _registry = DataRegistry()
    return _registry
