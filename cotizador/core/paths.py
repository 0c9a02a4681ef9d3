"""
cotizador/core/paths.py — Centralized Path Configuration

Single source of truth for directory paths across the application.
Every module imports from here instead of computing its own SPEC_DIR.

Technical-spec PDFs ("fichas técnicas") ship with the deployment under
static/pdfs/. COTIZADOR_SPEC_DIR overrides the location.
"""

import os
import logging

log = logging.getLogger("cotizador.paths")

# ── Project Root ──────────────────────────────────────────────────────────────
_THIS_FILE = os.path.abspath(__file__)
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(_THIS_FILE)))

_DEFAULT_SPEC_DIR = os.path.join(PROJECT_ROOT, "static", "pdfs")


def _resolve_spec_dir() -> str:
    """Spec PDF directory. Priority: COTIZADOR_SPEC_DIR env → static/pdfs."""
    env_dir = os.environ.get("COTIZADOR_SPEC_DIR", "")
    if env_dir:
        if not os.path.isdir(env_dir):
            log.warning("COTIZADOR_SPEC_DIR=%s does not exist", env_dir)
        return env_dir
    return _DEFAULT_SPEC_DIR


SPEC_DIR = _resolve_spec_dir()
LOG_DIR = os.environ.get("COTIZADOR_LOG_DIR", os.path.join(PROJECT_ROOT, "logs"))


def spec_path(filename: str, spec_dir: str = None) -> str:
    """Absolute path of a spec PDF. The filename is used as-is (case and accents matter)."""
    return os.path.join(spec_dir or SPEC_DIR, filename)


def validate_paths() -> dict:
    """Runtime validation — call at app startup to catch path issues early.

    Returns:
        {"ok": bool, "errors": [str], "warnings": [str], "resolved": {name: path}}
    """
    result = {"ok": True, "errors": [], "warnings": [], "resolved": {}}

    checks = {
        "PROJECT_ROOT": (PROJECT_ROOT, True),
        "SPEC_DIR": (SPEC_DIR, True),
        "LOG_DIR": (LOG_DIR, False),
    }

    for name, (path, required) in checks.items():
        result["resolved"][name] = path
        if not os.path.isdir(path):
            if required:
                result["errors"].append(f"{name} not found: {path}")
                result["ok"] = False
            else:
                result["warnings"].append(f"{name} not found: {path}")

    return result
