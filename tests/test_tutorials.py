"""
Tests for the tutorial finder and code example lookup.
"""

import pytest

from devlibguide.core.models import CodeExample, Tutorial
from devlibguide.core.services.tutorials import (
    examples_for,
    filter_tutorials,
    get_tutorial,
    tutorial_languages,
)


@pytest.fixture
def tutorials() -> list[Tutorial]:
    return [
        Tutorial(id=1, title="Custom Hooks", slug="react-hooks", language="JavaScript",
                 difficulty="intermediate", content="Fetch data with useEffect.",
                 tags=["React", "Hooks"]),
        Tutorial(id=2, title="NumPy Arrays", slug="numpy-arrays", language="Python",
                 difficulty="beginner", content="Vectorised maths.",
                 tags=["NumPy", "Data Analysis"]),
        Tutorial(id=3, title="Async Rust", slug="tokio", language="Rust",
                 difficulty="advanced", content="Spawning tasks with FETCH loops.",
                 tags=["Tokio", "Concurrency"]),
    ]


class TestFilterTutorials:
    def test_no_filters(self, tutorials):
        assert filter_tutorials(tutorials) == tutorials

    def test_all_sentinel_and_empty_disable(self, tutorials):
        assert len(filter_tutorials(tutorials, "", "all", "all")) == 3
        assert len(filter_tutorials(tutorials, None, "", None)) == 3

    def test_search_title_content_and_tags(self, tutorials):
        assert [t.slug for t in filter_tutorials(tutorials, "fetch")] == ["react-hooks", "tokio"]
        assert [t.slug for t in filter_tutorials(tutorials, "data analysis")] == ["numpy-arrays"]
        assert [t.slug for t in filter_tutorials(tutorials, "ASYNC")] == ["tokio"]

    def test_language_is_exact(self, tutorials):
        assert [t.slug for t in filter_tutorials(tutorials, language="Python")] == ["numpy-arrays"]
        assert filter_tutorials(tutorials, language="python") == []

    def test_difficulty_is_exact(self, tutorials):
        assert [t.slug for t in filter_tutorials(tutorials, difficulty="advanced")] == ["tokio"]

    def test_filters_combine(self, tutorials):
        assert filter_tutorials(tutorials, "fetch", language="Rust", difficulty="beginner") == []

    def test_packaged_tutorials(self, registry):
        found = filter_tutorials(registry.tutorials, "hook")
        assert [t.library_name for t in found] == ["React"]


class TestLookup:
    def test_get_tutorial(self, tutorials):
        assert get_tutorial(tutorials, "tokio").title == "Async Rust"
        assert get_tutorial(tutorials, "nope") is None

    def test_languages_first_seen(self, tutorials):
        assert tutorial_languages(tutorials) == ["JavaScript", "Python", "Rust"]

    def test_examples_for(self):
        snippet = CodeExample(library_name="React", language="JavaScript", title="Counter", code="x")
        examples = {"React": [snippet]}
        assert examples_for(examples, "React") == [snippet]
        assert examples_for(examples, "react") == []
