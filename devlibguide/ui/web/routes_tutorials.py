"""
Tutorial routes — filtered listing and full tutorial by slug.
"""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from devlibguide.core.services import tutorials as tutorial_ops

tutorials_bp = Blueprint("tutorials", __name__)


def _tutorials():  # type: ignore[no-untyped-def]
    return current_app.extensions["devlibguide"].registry.tutorials


@tutorials_bp.route("/tutorials")
def api_tutorials():  # type: ignore[no-untyped-def]
    """Query args: ``search`` (alias ``q``), ``language``, ``difficulty``."""
    everything = _tutorials()
    results = tutorial_ops.filter_tutorials(
        everything,
        search_term=request.args.get("search", request.args.get("q", "")),
        language=request.args.get("language", tutorial_ops.ANY),
        difficulty=request.args.get("difficulty", tutorial_ops.ANY),
    )
    return jsonify({
        "languages": tutorial_ops.tutorial_languages(everything),
        "tutorials": [t.summary() for t in results],
    })


@tutorials_bp.route("/tutorials/<slug>")
def api_tutorial(slug: str):  # type: ignore[no-untyped-def]
    tutorial = tutorial_ops.get_tutorial(_tutorials(), slug)
    if tutorial is None:
        return jsonify({"error": "Tutorial not found"}), 404
    return jsonify(tutorial.model_dump())
