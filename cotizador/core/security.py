"""
Security Headers Middleware
===========================
Adds hardening headers to every response. Generated quotes are
per-request downloads, so nothing is cacheable by default.
"""

import logging

log = logging.getLogger("cotizador.security")


def add_security_headers(response):
    """Add security headers to every response."""
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "SAMEORIGIN"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    if not response.headers.get("Cache-Control"):
        response.headers["Cache-Control"] = "no-store"
    return response


def init_security(app):
    """Initialize security middleware on the Flask app."""
    app.after_request(add_security_headers)
    log.info("Security middleware initialized: security headers")
