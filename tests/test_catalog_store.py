"""
Tests for the library record store — lookups, building, tag checks.
"""

import json
import logging
from pathlib import Path

import pytest

from devlibguide.core.data import DataRegistry
from devlibguide.core.models import CatalogError
from devlibguide.core.services.catalog_store import (
    LanguageCatalog,
    TagIssue,
    build_catalog,
    check_tags,
    parse_records,
)


class TestLanguageCatalog:
    def test_get_known_language(self, small_catalog, python_records):
        assert small_catalog.get_catalog("python") == tuple(python_records)

    def test_unknown_language_is_empty(self, small_catalog):
        assert small_catalog.get_catalog("cobol") == ()

    @pytest.mark.parametrize("key", ["", None])
    def test_blank_language_is_empty(self, small_catalog, key):
        assert small_catalog.get_catalog(key) == ()

    def test_languages_in_order(self, small_catalog):
        assert small_catalog.languages == ("python", "javascript", "c")

    def test_membership_and_len(self, small_catalog):
        assert "python" in small_catalog
        assert "rust" not in small_catalog
        assert len(small_catalog) == 3

    def test_tables_are_read_only(self, small_catalog):
        with pytest.raises(TypeError):
            small_catalog._tables["rust"] = ()  # type: ignore[index]

    def test_source_list_changes_do_not_leak(self, python_records):
        catalog = LanguageCatalog({"python": python_records})
        python_records.clear()
        assert len(catalog.get_catalog("python")) == 6

    def test_total_records(self, small_catalog):
        assert small_catalog.total_records() == 10


class TestParseRecords:
    def test_bad_row_names_language_and_index(self):
        rows = [
            {"name": "ok", "description": "fine"},
            {"name": "", "description": "no name"},
        ]
        with pytest.raises(CatalogError, match="python library at index 1"):
            parse_records("python", rows)


class TestBuildCatalog:
    def test_packaged_languages(self, registry):
        catalog = build_catalog(registry)
        assert catalog.languages == ("c", "cpp", "java", "javascript", "python", "rust", "swift")
        assert len(catalog.get_catalog("python")) == 42
        assert catalog.get_catalog("rust")[0].name == "tokio"

    def test_language_subset(self, registry):
        catalog = build_catalog(registry, languages=["python", "c"])
        assert catalog.languages == ("python", "c")

    def test_missing_table_is_empty(self, data_dir: Path):
        catalog = build_catalog(DataRegistry(data_dir))
        assert catalog.languages == ("python", "rust")
        assert catalog.get_catalog("rust") == ()

    def test_malformed_table_raises(self, data_dir: Path):
        (data_dir / "libraries" / "python.json").write_text(json.dumps([{"name": "x"}]))
        with pytest.raises(CatalogError):
            build_catalog(DataRegistry(data_dir))

    def test_unknown_tags_do_not_block_loading(self, registry):
        catalog = build_catalog(registry, languages=["rust"])
        assert catalog.get_catalog("rust")[0].tags[0] == "Async"

    def test_unknown_tags_logged_at_warning_when_asked(self, registry, caplog):
        with caplog.at_level(logging.WARNING, logger="devlibguide.core.services.catalog_store"):
            build_catalog(registry, languages=["rust"], warn_unknown_tags=True)
        assert "Unknown tag 'Async' on rust library 'tokio'" in caplog.text

    def test_unknown_tags_quiet_by_default(self, registry, caplog):
        with caplog.at_level(logging.WARNING, logger="devlibguide.core.services.catalog_store"):
            build_catalog(registry, languages=["rust"])
        assert "Unknown tag" not in caplog.text


class TestCheckTags:
    def test_reports_tags_outside_taxonomy(self, registry):
        catalog = build_catalog(registry, languages=["rust"])
        issues = check_tags(catalog, registry.tag_taxonomy)
        assert TagIssue(language="rust", library="tokio", tag="Async") in issues
        assert TagIssue(language="rust", library="tokio", tag="Runtime") in issues
        assert all(issue.tag != "Networking" for issue in issues)

    def test_clean_catalog(self, registry, make_record):
        catalog = LanguageCatalog({"c": [make_record("zlib", tags=["Data Processing", "Performance"])]})
        assert check_tags(catalog, registry.tag_taxonomy) == []

    def test_to_dict(self):
        issue = TagIssue(language="rust", library="serde", tag="YAML")
        assert issue.to_dict() == {"language": "rust", "library": "serde", "tag": "YAML"}
