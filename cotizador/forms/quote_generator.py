"""
SHACMAN Quote PDF Generator
================================
Assembles the quotation handed to the client:

  1. resolve      — modelo → catalog entry (unknown id is a client error)
  2. spec pages   — first 2 pages of the model's ficha técnica (optional)
  3. summary page — A4 page with client, vehicle and pricing details
  4. serialize    — spec pages + summary page → PDF bytes
  5. name         — "Cotizacion Shacman - <model> - <client> - <date>.pdf"

A missing or unreadable ficha técnica is not fatal: the quote then holds
only the summary page.
"""

import io
import logging
from datetime import date

from pypdf import PdfReader, PdfWriter
from reportlab.lib.colors import Color
from reportlab.pdfgen import canvas

from cotizador.core import paths
from cotizador.core.catalog import CATALOG
from cotizador.forms.formatting import (
    format_price, format_percent, format_units, format_date, filename_date,
    clean_filename_part, wrap_text,
)
from cotizador.forms.quote_request import UnknownModelError, compute_totals

log = logging.getLogger("cotizador.quote_gen")

# ═══════════════════════════════════════════════════════════════════════════════
# PAGE LAYOUT — A4 portrait, points
# ═══════════════════════════════════════════════════════════════════════════════
PAGE_SIZE = (595.28, 841.89)
MAX_SPEC_PAGES = 2

ML          = 50     # left margin
LABEL_X     = 50
CLIENT_VAL_X  = 150
VEHICLE_VAL_X = 200
LINE_H      = 25
FOOTER_Y    = 50

FONT      = "Helvetica"
FONT_BOLD = "Helvetica-Bold"

BLACK = Color(0, 0, 0)
RULE  = Color(0.2, 0.2, 0.2)
RED   = Color(0.8, 0, 0)
GREEN = Color(0, 0.6, 0)
MUTED = Color(0.5, 0.5, 0.5)

TITLE = "COTIZACIÓN SHACMAN MÉXICO"
PLACEHOLDER = "N/A"
FILENAME_FALLBACK_CLIENT = "Cliente"


# ═══════════════════════════════════════════════════════════════════════════════
# PIPELINE STAGES
# ═══════════════════════════════════════════════════════════════════════════════

def resolve_model(model_id: str, catalog=CATALOG):
    """Exact id match against the catalog. Raises UnknownModelError."""
    truck = catalog.get(model_id)
    if truck is None:
        raise UnknownModelError(model_id)
    return truck


def load_spec_pages(truck, spec_dir: str = None) -> list:
    """First min(2, n) pages of the model's ficha técnica, in order.

    Any failure reading or parsing the file is logged and yields [] so the
    quote can still be produced with just the summary page.
    """
    path = paths.spec_path(truck.pdf, spec_dir)
    try:
        with open(path, "rb") as f:
            reader = PdfReader(io.BytesIO(f.read()))
        count = min(MAX_SPEC_PAGES, len(reader.pages))
        pages = [reader.pages[i] for i in range(count)]
    except Exception as e:
        log.warning("Error loading spec PDF %s: %s", truck.pdf, e)
        return []
    log.debug("Loaded %d spec page(s) from %s", len(pages), truck.pdf)
    return pages


def render_summary_page(quote, truck, today: date = None) -> bytes:
    """Draw the one-page quotation summary. Returns a standalone 1-page PDF."""
    today = today or date.today()
    totals = compute_totals(quote, truck)

    W, H = PAGE_SIZE
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=PAGE_SIZE)

    def text(x, y, txt, font=FONT, size=12, color=BLACK):
        c.setFont(font, size)
        c.setFillColor(color)
        c.drawString(x, y, str(txt) if txt is not None else "")

    # ── Header ────────────────────────────────────────────────────────────────
    text(ML, H - 80, TITLE, FONT_BOLD, 24)

    c.setStrokeColor(RULE)
    c.setLineWidth(2)
    c.line(ML, H - 100, W - ML, H - 100)

    # ── Client information ────────────────────────────────────────────────────
    y = H - 140
    text(ML, y, "INFORMACIÓN DEL CLIENTE", FONT_BOLD, 16)
    y -= 30

    client_rows = [
        ("Vendedor:", quote.seller),
        ("Cliente:", quote.client),
        ("Empresa:", quote.company or PLACEHOLDER),
    ]
    for label, value in client_rows:
        text(LABEL_X, y, label, FONT_BOLD, 12)
        text(CLIENT_VAL_X, y, value, FONT, 12)
        y -= LINE_H

    # ── Vehicle information ───────────────────────────────────────────────────
    y -= 20
    text(ML, y, "INFORMACIÓN DEL VEHÍCULO", FONT_BOLD, 16)
    y -= 30

    # (label, value, kind) — kind: None | "discount" | "total"
    vehicle_rows = [
        ("Modelo:", truck.name, None),
        ("Transmisión:", quote.transmission_label, None),
        ("Precio Unitario:", format_price(truck.price), None),
        ("Cantidad:", format_units(quote.quantity), None),
        ("Subtotal:", format_price(totals["subtotal"]), None),
    ]
    if quote.discount > 0:
        vehicle_rows.append((f"Descuento ({format_percent(quote.discount)}%):",
                             "-" + format_price(totals["discount_amount"]), "discount"))
    vehicle_rows.append(("TOTAL:", format_price(totals["total"]), "total"))

    for label, value, kind in vehicle_rows:
        size = 14 if kind == "total" else 12
        label_color = RED if kind == "discount" else BLACK
        value_color = {"discount": RED, "total": GREEN}.get(kind, BLACK)
        text(LABEL_X, y, label, FONT_BOLD, size, label_color)
        text(VEHICLE_VAL_X, y, value, FONT_BOLD if kind == "total" else FONT, size, value_color)
        y -= 30 if kind == "total" else LINE_H

    # ── Notes ─────────────────────────────────────────────────────────────────
    if quote.notes:
        y -= 20
        text(ML, y, "NOTAS ADICIONALES", FONT_BOLD, 16)
        y -= 30
        for line in wrap_text(quote.notes, FONT, 12, W - 2 * ML):
            text(ML, y, line, FONT, 12)
            y -= LINE_H

    # ── Footer (fixed position) ───────────────────────────────────────────────
    text(ML, FOOTER_Y, f"Fecha de cotización: {format_date(today)}", FONT, 10, MUTED)

    c.showPage()
    c.save()
    return buf.getvalue()


def build_filename(truck, client: str, today: date = None) -> str:
    """Download name: brand-less model, ASCII-only client name, d-m-yyyy date."""
    today = today or date.today()
    clean_client = clean_filename_part(client) or FILENAME_FALLBACK_CLIENT
    return (f"Cotizacion Shacman - {truck.short_name} - "
            f"{clean_client} - {filename_date(today)}.pdf")


def serialize(spec_pages: list, summary_pdf: bytes, truck=None) -> bytes:
    """Spec pages followed by the summary page, written to a new document."""
    writer = PdfWriter()
    for page in spec_pages:
        writer.add_page(page)
    writer.add_page(PdfReader(io.BytesIO(summary_pdf)).pages[0])
    if truck is not None:
        writer.add_metadata({
            "/Title": f"Cotización {truck.name}",
            "/Author": "SHACMAN México",
        })
    out = io.BytesIO()
    writer.write(out)
    return out.getvalue()


# ═══════════════════════════════════════════════════════════════════════════════
# ENTRY POINT
# ═══════════════════════════════════════════════════════════════════════════════

def generate_quote_pdf(quote, catalog=CATALOG, spec_dir: str = None,
                       today: date = None) -> dict:
    """Build the full quotation for a validated QuoteRequest.

    Raises UnknownModelError for an unknown modelo; any other exception
    propagates (no partial document is ever returned).

    Returns:
        {"ok": True, "pdf_bytes": bytes, "filename": str, "page_count": int,
         "spec_pages": int, "model": str, "client": str,
         "subtotal": .., "discount_amount": .., "total": ..}
    """
    today = today or date.today()
    truck = resolve_model(quote.model_id, catalog)

    log.info("Generating quote: model=%s client=%s qty=%d discount=%s%%",
             truck.id, quote.client[:40], quote.quantity, format_percent(quote.discount))

    spec_pages = load_spec_pages(truck, spec_dir)
    summary_pdf = render_summary_page(quote, truck, today)
    pdf_bytes = serialize(spec_pages, summary_pdf, truck)
    filename = build_filename(truck, quote.client, today)
    totals = compute_totals(quote, truck)

    result = {
        "ok": True,
        "pdf_bytes": pdf_bytes,
        "filename": filename,
        "page_count": len(spec_pages) + 1,
        "spec_pages": len(spec_pages),
        "model": truck.id,
        "client": quote.client,
        **totals,
    }
    log.info("Quote generated: %s total, %d page(s), %d bytes → %s",
             format_price(result["total"]), result["page_count"], len(pdf_bytes), filename)
    return result
