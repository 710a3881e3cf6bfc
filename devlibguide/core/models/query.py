"""
Filter query — one user interaction with the catalog filters.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class FilterQuery(BaseModel):
    """Search term plus language and category selectors.

    An empty string means "all".  Absent values (None) are treated the
    same way, so callers can pass raw request arguments through.
    """

    model_config = ConfigDict(frozen=True)

    search_term: str = ""
    language_filter: str = ""
    category_filter: str = ""

    @field_validator("search_term", "language_filter", "category_filter", mode="before")
    @classmethod
    def _none_is_empty(cls, value: object) -> object:
        return "" if value is None else value

    @property
    def is_active(self) -> bool:
        """True unless all three filters are empty."""
        return bool(self.search_term or self.language_filter or self.category_filter)

    def to_dict(self) -> dict:
        return {
            "search_term": self.search_term,
            "language_filter": self.language_filter,
            "category_filter": self.category_filter,
        }
