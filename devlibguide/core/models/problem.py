"""
Practice problem model — the problems listed on the practice ground.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class TestCase(BaseModel):
    """An input/expected-output pair.  Hidden cases are not shown to users."""

    __test__ = False  # keep pytest from collecting this class

    input: str
    output: str
    hidden: bool = False


class Problem(BaseModel):
    """A practice problem with starter code per language label."""

    id: str
    title: str
    description: str = ""
    difficulty: str = "easy"     # easy, medium, hard
    category: str = ""
    constraints: str = ""
    example_inputs: list[str] = Field(default_factory=list)
    example_outputs: list[str] = Field(default_factory=list)
    starter_code: dict[str, str] = Field(default_factory=dict)
    test_cases: list[TestCase] = Field(default_factory=list)

    def summary(self) -> dict:
        """Minimal listing entry."""
        return {
            "id": self.id,
            "title": self.title,
            "difficulty": self.difficulty,
            "category": self.category,
        }
