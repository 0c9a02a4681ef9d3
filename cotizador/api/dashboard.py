"""
Cotizador SHACMAN — Routes
Quote form page + PDF assembly endpoint. No sessions, no persistence:
every request is priced and assembled from the static catalog.
"""
import time
import logging

from flask import Blueprint, Response, jsonify, render_template_string, request

from cotizador.core.catalog import CATALOG, catalog_as_json, missing_spec_files
from cotizador.forms.formatting import format_price
from cotizador.forms.quote_generator import generate_quote_pdf
from cotizador.forms.quote_request import (
    TRANSMISSIONS, QuoteValidationError, UnknownModelError, parse_quote_request,
)
from cotizador.api.templates import BASE_CSS, PAGE_FORM

log = logging.getLogger("cotizador.api")

bp = Blueprint("cotizador", __name__)

ERR_UNKNOWN_MODEL = "Modelo no encontrado"
ERR_GENERATION = "Error al generar el PDF"


# ── Request-level structured logging ────────────────────────────────────────
@bp.before_app_request
def _log_request_start():
    request._start_time = time.time()


@bp.after_app_request
def _log_request_end(response):
    if hasattr(request, "_start_time"):
        duration_ms = round((time.time() - request._start_time) * 1000, 1)
        # Skip health spam
        if request.path != "/api/health":
            log.info("%s %s → %d (%.0fms)",
                     request.method, request.path, response.status_code, duration_ms,
                     extra={"route": request.path, "method": request.method,
                            "status": response.status_code, "duration_ms": duration_ms})
    return response


# ═══════════════════════════════════════════════════════════════════════════════
# FORM
# ═══════════════════════════════════════════════════════════════════════════════

@bp.route("/")
def home():
    models = [dict(row, price_label=format_price(row["price"]))
              for row in catalog_as_json(CATALOG)]
    return render_template_string(PAGE_FORM, css=BASE_CSS, models=models,
                                  transmissions=TRANSMISSIONS)


# ═══════════════════════════════════════════════════════════════════════════════
# API
# ═══════════════════════════════════════════════════════════════════════════════

@bp.route("/api/generate-pdf", methods=["POST"])
def api_generate_pdf():
    """Assemble the quote PDF: up to 2 spec pages + summary page."""
    payload = request.get_json(silent=True)
    try:
        quote = parse_quote_request(payload)
        result = generate_quote_pdf(quote, CATALOG)
    except UnknownModelError as e:
        log.info("Rejected quote: unknown model %r", e.model_id)
        return jsonify({"error": ERR_UNKNOWN_MODEL}), 400
    except QuoteValidationError as e:
        log.info("Rejected quote: %s", e)
        return jsonify({"error": str(e), "fields": e.fields}), 400
    except Exception:
        log.exception("Error generating PDF")
        return jsonify({"error": ERR_GENERATION}), 500

    return Response(
        result["pdf_bytes"],
        mimetype="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{result["filename"]}"'},
    )


@bp.route("/api/models")
def api_models():
    """Catalog with spec-file availability."""
    return jsonify(catalog_as_json(CATALOG))


@bp.route("/api/health")
def api_health():
    missing = missing_spec_files(CATALOG)
    return jsonify({"ok": True, "models": len(CATALOG), "spec_files_missing": missing})
