"""
API routes — library catalog, taxonomy and comparison endpoints.

All endpoints return JSON.  Grouped under the /api/ prefix.
"""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request

from devlibguide.core.context import AppContext
from devlibguide.core.models import FilterQuery
from devlibguide.core.services.catalog_browser import CatalogBrowser
from devlibguide.core.services.comparison import ComparisonError, compare_libraries
from devlibguide.core.services.dedupe import dedupe
from devlibguide.core.services.tutorials import examples_for

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _context() -> AppContext:
    return current_app.extensions["devlibguide"]


# ── Libraries ────────────────────────────────────────────────────────


@api_bp.route("/libraries")
def api_libraries():  # type: ignore[no-untyped-def]
    """Filtered catalogs for every language.

    Query args: ``search`` (alias ``q``), ``language``, ``category``.
    """
    query = FilterQuery(
        search_term=request.args.get("search", request.args.get("q")),
        language_filter=request.args.get("language"),
        category_filter=request.args.get("category"),
    )
    browser = CatalogBrowser(_context().catalog, query)
    return jsonify(browser.to_dict())


@api_bp.route("/libraries/<language>")
def api_libraries_for_language(language: str):  # type: ignore[no-untyped-def]
    """De-duplicated catalog for one language (unknown → empty list)."""
    catalog = _context().catalog
    records = dedupe(catalog.get_catalog(language))
    return jsonify({
        "message": "Success",
        "language": language,
        "supported": language in catalog,
        "libraries": [r.to_dict() for r in records],
    })


@api_bp.route("/libraries/<name>/examples")
def api_library_examples(name: str):  # type: ignore[no-untyped-def]
    """Integration snippets for one library (exact name, unknown → [])."""
    examples = examples_for(_context().registry.examples, name)
    return jsonify({
        "message": "Success",
        "name": name,
        "examples": [e.model_dump() for e in examples],
    })


# Placeholder detail endpoints: the directory has no per-library history yet.

def _placeholder(kind: str, empty: list | dict):  # type: ignore[no-untyped-def]
    def view(name: str):  # type: ignore[no-untyped-def]
        logger.debug("Placeholder %s requested for '%s'", kind, name)
        return jsonify({"message": "Success", "name": name, kind: empty})

    view.__name__ = f"api_library_{kind}"
    return view


for _kind, _empty in (("versions", []), ("analytics", {}), ("health", {})):
    api_bp.add_url_rule(f"/libraries/<name>/{_kind}", view_func=_placeholder(_kind, _empty))


# ── Metadata ─────────────────────────────────────────────────────────


@api_bp.route("/languages")
def api_languages():  # type: ignore[no-untyped-def]
    """Supported languages with display metadata and library counts."""
    ctx = _context()
    return jsonify({
        "languages": [
            {**lang.to_dict(), "library_count": len(dedupe(ctx.catalog.get_catalog(lang.key)))}
            for lang in ctx.registry.languages
            if lang.key in ctx.catalog
        ],
    })


@api_bp.route("/taxonomy")
def api_taxonomy():  # type: ignore[no-untyped-def]
    """Tag families plus the flat tag list for category selectors."""
    taxonomy = _context().registry.tag_taxonomy
    return jsonify({
        "families": taxonomy.to_dict(),
        "all_tags": list(taxonomy.all_tags()),
    })


# ── Comparison ───────────────────────────────────────────────────────


@api_bp.route("/compare")
def api_compare():  # type: ignore[no-untyped-def]
    """Compare up to three libraries: ``?language=python&names=Flask,Django``."""
    language = request.args.get("language", "")
    names = [n.strip() for n in request.args.get("names", "").split(",") if n.strip()]
    if not language:
        return jsonify({"error": "Missing 'language' parameter"}), 400

    try:
        result = compare_libraries(_context().catalog, language, names)
    except ComparisonError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify(result.to_dict())
