"""
Tag taxonomy — the closed vocabulary of category tags.

Five families, concatenated in a fixed order, make up the allowed tag
set.  The taxonomy is built once from ``catalogs/tag_taxonomy.json`` and
is immutable afterwards.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Family names in concatenation order
FAMILY_NAMES: tuple[str, ...] = (
    "functional",
    "feature",
    "library_type",
    "domain",
    "infrastructure",
)


class TaxonomyError(Exception):
    """Raised when the taxonomy definition is malformed."""


class TagTaxonomy(BaseModel):
    """The five tag families.

    ``all_tags()`` is the flat, order-preserving union used both for
    membership tests and for populating category selectors.  A tag listed
    in two families appears once, at its first position.
    """

    model_config = ConfigDict(frozen=True)

    functional: tuple[str, ...] = Field(default_factory=tuple)
    feature: tuple[str, ...] = Field(default_factory=tuple)
    library_type: tuple[str, ...] = Field(default_factory=tuple)
    domain: tuple[str, ...] = Field(default_factory=tuple)
    infrastructure: tuple[str, ...] = Field(default_factory=tuple)

    @classmethod
    def from_mapping(cls, data: dict) -> TagTaxonomy:
        """Build from a ``{family: [tags]}`` mapping, rejecting unknown families."""
        if not isinstance(data, dict):
            raise TaxonomyError(f"Expected a mapping of families, got {type(data).__name__}")

        unknown = sorted(set(data) - set(FAMILY_NAMES))
        if unknown:
            raise TaxonomyError(f"Unknown tag families: {', '.join(unknown)}")

        missing = [name for name in FAMILY_NAMES if name not in data]
        if missing:
            raise TaxonomyError(f"Missing tag families: {', '.join(missing)}")

        try:
            return cls.model_validate(data)
        except Exception as e:
            raise TaxonomyError(f"Invalid tag taxonomy: {e}") from e

    def families(self) -> dict[str, tuple[str, ...]]:
        return {name: getattr(self, name) for name in FAMILY_NAMES}

    def all_tags(self) -> tuple[str, ...]:
        seen: set[str] = set()
        tags: list[str] = []
        for family in self.families().values():
            for tag in family:
                if tag not in seen:
                    seen.add(tag)
                    tags.append(tag)
        return tuple(tags)

    def is_known(self, tag: str) -> bool:
        """Whether ``tag`` belongs to any family (exact match)."""
        return tag in self.all_tags()

    def family_of(self, tag: str) -> str | None:
        """Name of the first family listing ``tag``, or None."""
        for name, family in self.families().items():
            if tag in family:
                return name
        return None

    def to_dict(self) -> dict:
        return {name: list(tags) for name, tags in self.families().items()}
