"""
Practice-ground routes — problem listing, detail and simulated validation.
"""

from __future__ import annotations

import logging
import random

from flask import Blueprint, current_app, jsonify, request

from devlibguide.core.services import problems as problem_ops

logger = logging.getLogger(__name__)

problems_bp = Blueprint("problems", __name__)


def _problems():  # type: ignore[no-untyped-def]
    return current_app.extensions["devlibguide"].registry.problems


def _rng() -> random.Random:
    # Tests pin results by storing a seeded Random under this key
    return current_app.config.get("VALIDATION_RNG") or random.Random()


@problems_bp.route("/problems")
def api_problems():  # type: ignore[no-untyped-def]
    return jsonify({"problems": problem_ops.list_problems(_problems())})


@problems_bp.route("/problems/<problem_id>")
def api_problem(problem_id: str):  # type: ignore[no-untyped-def]
    problem = problem_ops.get_problem(_problems(), problem_id)
    if problem is None:
        return jsonify({"error": "Problem not found"}), 404
    return jsonify(problem.model_dump())


@problems_bp.route("/problems/<problem_id>/validate", methods=["POST"])
def api_validate(problem_id: str):  # type: ignore[no-untyped-def]
    """Simulate running a submitted solution against the problem's tests."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Expected a JSON object with code and language"}), 400
    code = data.get("code", "")
    language = data.get("language", "")
    if not code or not language:
        return jsonify({"error": "Missing code or language parameter"}), 400

    problem = problem_ops.get_problem(_problems(), problem_id)
    if problem is None:
        return jsonify({"error": "Problem not found"}), 404

    report = problem_ops.validate_solution(problem, code, language, rng=_rng())
    return jsonify(report.to_dict())


@problems_bp.route("/embed-info")
def api_embed_info():  # type: ignore[no-untyped-def]
    return jsonify(problem_ops.embed_info(_problems(), current_app.config["BASE_URL"]))
