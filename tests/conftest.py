"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from devlibguide.core.data import DataRegistry, get_registry
from devlibguide.core.models import LibraryRecord
from devlibguide.core.services.catalog_store import LanguageCatalog

PACKAGED_CATALOGS = Path(__file__).parent.parent / "devlibguide" / "core" / "data" / "catalogs"


def _make_record(name: str, version: str = "1.0", tags: list[str] | None = None, **extra) -> LibraryRecord:
    """Build a LibraryRecord with sensible defaults for the fields a test ignores."""
    return LibraryRecord(
        name=name,
        version=version,
        description=extra.pop("description", f"{name} library"),
        tags=tags or [],
        compatibility=extra.pop("compatibility", "Any"),
        documentation_url=extra.pop("documentation_url", f"https://example.org/{name.lower()}"),
    )


@pytest.fixture
def make_record():
    """Factory for LibraryRecords."""
    return _make_record


@pytest.fixture
def python_records() -> list[LibraryRecord]:
    """Python table with 'Requests' listed twice (positions 0 and 5)."""
    return [
        _make_record("Requests", "2.28.0", ["HTTP Client", "Networking"],
                     description="HTTP for humans"),
        _make_record("NumPy", "1.26.1", ["Mathematics"],
                     description="Fundamental package for scientific computing"),
        _make_record("Flask", "3.0", ["Web Framework", "Backend"],
                     description="Lightweight WSGI web application framework"),
        _make_record("json", "Python Standard Library", ["Standard Library", "JSON", "Serialization"],
                     description="Encoder and decoder for JSON data"),
        _make_record("Django", "5.0", ["Web Framework", "ORM"],
                     description="High-level web framework"),
        _make_record("requests", "2.31.0", ["HTTP Client", "Networking"],
                     description="HTTP for humans"),
    ]


@pytest.fixture
def javascript_records() -> list[LibraryRecord]:
    return [
        _make_record("JSON", "ES5", ["Standard Library", "Serialization"],
                     description="Parse and stringify JavaScript Object Notation"),
        _make_record("Axios", "1.6", ["HTTP Client", "Networking"],
                     description="Promise based HTTP client; transforms JSON data automatically"),
        _make_record("Express.js", "4.18", ["Web Framework", "Backend"],
                     description="Minimal web framework for Node.js"),
        _make_record("React", "18.2", ["UI", "Frontend"],
                     description="Library for building user interfaces"),
    ]


@pytest.fixture
def small_catalog(python_records, javascript_records) -> LanguageCatalog:
    return LanguageCatalog({
        "python": python_records,
        "javascript": javascript_records,
        "c": [],
    })


@pytest.fixture
def registry() -> DataRegistry:
    """The registry over the packaged catalogs."""
    return get_registry()


@pytest.fixture
def data_dir(tmp_path: Path, python_records) -> Path:
    """A catalogs directory with the packaged taxonomy, problems and tutorials
    plus a tiny python table."""
    root = tmp_path / "catalogs"
    (root / "libraries").mkdir(parents=True)
    for name in ("tag_taxonomy.json", "problems.json", "tutorials.json", "examples.json"):
        shutil.copy(PACKAGED_CATALOGS / name, root / name)
    (root / "languages.json").write_text(json.dumps([
        {"key": "python", "label": "Python"},
        {"key": "rust", "label": "Rust"},
    ]))
    (root / "libraries" / "python.json").write_text(
        json.dumps([r.to_dict() for r in python_records])
    )
    return root
