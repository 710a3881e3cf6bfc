"""
Application context — config, registry and catalog built once per process.

The CLI builds one per invocation; the web app builds one in
``create_app`` and keeps it in ``app.extensions``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from devlibguide.core.config.loader import AppConfig, load_config
from devlibguide.core.data import DataRegistry, get_registry
from devlibguide.core.services.catalog_store import LanguageCatalog, build_catalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContext:
    config: AppConfig
    registry: DataRegistry
    catalog: LanguageCatalog


def registry_for(config: AppConfig) -> DataRegistry:
    """The packaged registry, or one rooted at the configured data_dir."""
    return DataRegistry(config.data_dir) if config.data_dir else get_registry()


def build_context(config: AppConfig) -> AppContext:
    """Build registry and catalog for an already-loaded config."""
    registry = registry_for(config)
    catalog = build_catalog(
        registry,
        languages=config.languages,
        warn_unknown_tags=config.warn_unknown_tags,
    )
    return AppContext(config=config, registry=registry, catalog=catalog)


def load_context(config_path: Path | None = None) -> AppContext:
    """Load config (explicit path or upward search) and build the context.

    Raises:
        ConfigError: If the config file is invalid.
        CatalogError: If a library table is malformed.
        TaxonomyError: If the taxonomy file is malformed.
    """
    return build_context(load_config(config_path))
