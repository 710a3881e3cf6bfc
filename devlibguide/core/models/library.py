"""
Library model — one entry in a language's catalog.

Records are loaded from ``catalogs/libraries/<language>.json`` and never
mutated afterwards.  The case-insensitive ``name`` is the natural key
within one language.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CatalogError(Exception):
    """Raised when a catalog file is unreadable or holds a malformed entry."""


class LibraryRecord(BaseModel):
    """A library listed under one programming language."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str = ""            # "Standard Library", "2.31.0", "1.26.1 (2023)", …
    description: str
    tags: tuple[str, ...] = Field(default_factory=tuple)
    compatibility: str = ""
    documentation_url: str = ""

    @field_validator("name", "description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @property
    def key(self) -> str:
        """De-duplication key (lowercased name)."""
        return self.name.lower()

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "tags": list(self.tags),
            "compatibility": self.compatibility,
            "documentation_url": self.documentation_url,
        }


class LanguageInfo(BaseModel):
    """Display metadata for a supported language tab."""

    model_config = ConfigDict(frozen=True)

    key: str                     # c, cpp, java, javascript, python, rust, swift
    label: str                   # C, C++, Java, …
    description: str = ""
    highlights: tuple[str, ...] = Field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "label": self.label,
            "description": self.description,
            "highlights": list(self.highlights),
        }
