"""
cotizador/core/startup_checks.py — Runtime Self-Test on App Boot

Runs automatically when the app starts:

  1. Path resolution — SPEC_DIR exists
  2. Spec PDFs — every catalog entry has its ficha técnica on disk
  3. Route integrity — the quote endpoint is registered

A missing spec PDF is only a warning: quotes for that model are still
generated, just without the technical-spec pages.
"""

import logging

log = logging.getLogger("cotizador.startup")


def run_startup_checks(app=None) -> dict:
    """Run all startup validation checks. Call from app.py after blueprint registration.

    Returns:
        {"passed": int, "failed": int, "warnings": int, "details": [...]}
    """
    results = {"passed": 0, "failed": 0, "warnings": 0, "details": []}

    def _pass(msg):
        results["passed"] += 1
        results["details"].append(("PASS", msg))
        log.info("%s", msg)

    def _fail(msg):
        results["failed"] += 1
        results["details"].append(("FAIL", msg))
        log.error("STARTUP CHECK FAILED: %s", msg)

    def _warn(msg):
        results["warnings"] += 1
        results["details"].append(("WARN", msg))
        log.warning("%s", msg)

    # ── 1. Path Validation ────────────────────────────────────────────────────
    from cotizador.core import paths
    path_result = paths.validate_paths()
    if path_result["ok"]:
        _pass(f"All paths valid (SPEC_DIR={paths.SPEC_DIR})")
    else:
        for err in path_result["errors"]:
            _fail(err)
    for warn in path_result.get("warnings", []):
        _warn(warn)

    # ── 2. Spec PDFs ──────────────────────────────────────────────────────────
    from cotizador.core.catalog import CATALOG, missing_spec_files
    missing = missing_spec_files(CATALOG)
    for fname in missing:
        _warn(f"Spec PDF missing: {fname} (quotes will contain the summary page only)")
    if not missing:
        _pass(f"All {len(CATALOG)} spec PDFs present")

    # ── 3. Route Integrity ────────────────────────────────────────────────────
    if app is not None:
        rules = {r.rule for r in app.url_map.iter_rules()}
        for rule in ("/", "/api/generate-pdf"):
            if rule in rules:
                _pass(f"Route registered: {rule}")
            else:
                _fail(f"Route missing: {rule}")

    log.info("Startup checks: %d passed, %d failed, %d warnings",
             results["passed"], results["failed"], results["warnings"])
    return results
