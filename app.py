#!/usr/bin/env python3
"""
Cotizador SHACMAN — Application Entry Point
Creates Flask app and registers the quote Blueprint.
"""

import os
import logging
from flask import Flask

from logging_config import setup_logging


def create_app(testing=False):
    """Application factory."""
    setup_logging()

    app = Flask(__name__)
    app.secret_key = os.environ.get("SECRET_KEY", "cotizador-shacman-dev")
    app.config["TESTING"] = testing
    app.json.ensure_ascii = False

    # Register the quote blueprint (all routes)
    from cotizador.api.dashboard import bp
    app.register_blueprint(bp)

    # ── Security headers ─────────────────────────────────────────────────────
    from cotizador.core.security import init_security
    init_security(app)

    # ── Runtime self-test — missing spec PDFs, paths, routes ──────────────────
    from cotizador.core.startup_checks import run_startup_checks
    checks = run_startup_checks(app)
    if checks["failed"] > 0:
        logging.getLogger("cotizador").error(
            "STARTUP: %d checks FAILED — review logs", checks["failed"])

    return app


# For gunicorn: gunicorn app:app
app = create_app()

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    app.run(host="0.0.0.0", port=port, debug=False)
