"""
Web server — Flask app factory.

Creates the Flask application serving the library directory's JSON API.
The catalog is built once here and handed to the blueprints through
``app.extensions``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Flask, jsonify

from devlibguide.core.config.loader import AppConfig, load_config
from devlibguide.core.context import AppContext, build_context
from devlibguide.core.models import CatalogError, TaxonomyError

logger = logging.getLogger(__name__)

EXTENSION_KEY = "devlibguide"


def create_app(
    config_path: Path | None = None,
    config: AppConfig | None = None,
    context: AppContext | None = None,
) -> Flask:
    """Create and configure the Flask application.

    Args:
        config_path: Path to devlibguide.yml (searched upward if omitted).
        config: Already-loaded config; takes precedence over ``config_path``.
        context: Prebuilt context (tests inject small catalogs this way).

    Returns:
        Configured Flask application.
    """
    app = Flask(__name__)

    if context is None:
        if config is None:
            config = load_config(config_path)
        context = build_context(config)

    app.config["CONFIG_PATH"] = str(config_path) if config_path else None
    app.config["BASE_URL"] = context.config.server.base_url
    app.json.sort_keys = False
    app.extensions[EXTENSION_KEY] = context

    from devlibguide.ui.web.routes_api import api_bp
    from devlibguide.ui.web.routes_problems import problems_bp
    from devlibguide.ui.web.routes_tutorials import tutorials_bp

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(problems_bp, url_prefix="/api")
    app.register_blueprint(tutorials_bp, url_prefix="/api")

    @app.errorhandler(CatalogError)
    @app.errorhandler(TaxonomyError)
    def _catalog_error(e: Exception):  # type: ignore[no-untyped-def]
        # Catalogs other than the library tables load on first request
        logger.error("Catalog failure: %s", e)
        return jsonify({"error": str(e)}), 500

    logger.info(
        "Web app created (%d languages, %d libraries)",
        len(context.catalog), context.catalog.total_records(),
    )
    return app


def run_server(
    app: Flask,
    host: str = "127.0.0.1",
    port: int = 5000,
    debug: bool = False,
) -> None:
    """Run the Flask development server."""
    logger.info("Starting web server on %s:%d", host, port)
    app.run(host=host, port=port, debug=debug, use_reloader=False)
