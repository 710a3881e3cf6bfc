"""
Tutorial finder — search, language and difficulty filters over the
tutorial list, plus per-library code example lookup.

Filters combine with AND.  An empty value or ``"all"`` disables a filter.
Language and difficulty compare exactly; the search term is a
case-insensitive substring of the title, the content or any tag.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from devlibguide.core.models import CodeExample, Tutorial

ANY = "all"


def _active(value: str | None) -> bool:
    return bool(value) and value != ANY


def matches_search(tutorial: Tutorial, term: str) -> bool:
    if not term:
        return True
    needle = term.lower()
    return (
        needle in tutorial.title.lower()
        or needle in tutorial.content.lower()
        or any(needle in tag.lower() for tag in tutorial.tags)
    )


def filter_tutorials(
    tutorials: Iterable[Tutorial],
    search_term: str | None = "",
    language: str | None = ANY,
    difficulty: str | None = ANY,
) -> list[Tutorial]:
    """Tutorials passing every active filter, in listing order."""
    results = [t for t in tutorials if matches_search(t, search_term or "")]
    if _active(language):
        results = [t for t in results if t.language == language]
    if _active(difficulty):
        results = [t for t in results if t.difficulty == difficulty]
    return results


def get_tutorial(tutorials: Iterable[Tutorial], slug: str) -> Tutorial | None:
    return next((t for t in tutorials if t.slug == slug), None)


def tutorial_languages(tutorials: Iterable[Tutorial]) -> list[str]:
    """Distinct language labels in first-seen order (the language selector)."""
    return list(dict.fromkeys(t.language for t in tutorials))


def examples_for(examples: Mapping[str, list[CodeExample]], library_name: str) -> list[CodeExample]:
    """Code examples for one library; names match exactly, unknown → []."""
    return list(examples.get(library_name, []))
