"""
Learning material — tutorials and per-library code examples.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CodeExample(BaseModel):
    """An integration snippet shown on a library's card."""

    model_config = ConfigDict(frozen=True)

    library_name: str
    language: str                # display label: "JavaScript", "C++", …
    title: str
    description: str = ""
    code: str
    difficulty: str = "beginner"
    author: str = ""


class Tutorial(BaseModel):
    """A long-form guide for one library.  ``content`` is markdown."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    slug: str
    language: str
    library_name: str = ""
    difficulty: str = "beginner"  # beginner, intermediate, advanced
    author: str = ""
    publish_date: str = ""
    last_updated: str = ""
    content: str = ""
    tags: tuple[str, ...] = Field(default_factory=tuple)
    read_time: int = 0           # minutes
    code_examples: tuple[str, ...] = Field(default_factory=tuple)
    related_tutorials: tuple[str, ...] = Field(default_factory=tuple)

    def summary(self) -> dict:
        """Listing entry without the body."""
        return {
            "slug": self.slug,
            "title": self.title,
            "language": self.language,
            "library_name": self.library_name,
            "difficulty": self.difficulty,
            "tags": list(self.tags),
            "read_time": self.read_time,
        }
