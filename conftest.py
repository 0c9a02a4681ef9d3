"""
Shared pytest fixtures for the SHACMAN quotation test suite.

Spec PDFs are generated on the fly with reportlab into a per-test
directory that replaces SPEC_DIR, so no real fichas técnicas are needed.
"""
import os
import tempfile

import pytest

# Log files go to a throwaway dir, set before cotizador.core.paths is imported
os.environ.setdefault("COTIZADOR_LOG_DIR", tempfile.mkdtemp(prefix="cotizador-logs-"))


# ── Spec directory (per-test isolation) ───────────────────────────────────────

@pytest.fixture
def spec_dir(tmp_path, monkeypatch):
    """Empty spec PDF directory wired in as SPEC_DIR."""
    from cotizador.core import paths
    d = tmp_path / "pdfs"
    d.mkdir()
    monkeypatch.setattr(paths, "SPEC_DIR", str(d))
    return str(d)


def _write_pdf(path, pages):
    from reportlab.lib.pagesizes import A4
    from reportlab.pdfgen import canvas
    c = canvas.Canvas(path, pagesize=A4)
    for i in range(pages):
        c.setFont("Helvetica", 14)
        c.drawString(72, 760, f"Ficha tecnica pagina {i + 1}")
        c.showPage()
    c.save()


@pytest.fixture
def make_spec_pdf(spec_dir):
    """Factory: write an N-page spec PDF named after a catalog entry."""
    def _make(filename, pages=3):
        path = os.path.join(spec_dir, filename)
        _write_pdf(path, pages)
        return path
    return _make


@pytest.fixture
def all_spec_pdfs(make_spec_pdf):
    """Every catalog entry's spec PDF present (3 pages each)."""
    from cotizador.core.catalog import CATALOG
    return [make_spec_pdf(m.pdf, 3) for m in CATALOG.values()]


# ── Flask test client ─────────────────────────────────────────────────────────

@pytest.fixture
def app(spec_dir):
    """Create Flask app configured for testing."""
    from app import create_app
    return create_app(testing=True)


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


# ── Sample data factories ─────────────────────────────────────────────────────

@pytest.fixture
def sample_payload():
    """Scenario A: 2 × L5000 with 10% discount."""
    return {
        "vendedor": "Ana",
        "cliente": "José Pérez",
        "empresa": "",
        "modelo": "L5000",
        "transmision": "",
        "cantidad": 2,
        "descuento": 10,
        "notas": "",
    }


@pytest.fixture
def full_payload(sample_payload):
    """Every optional field filled in."""
    return dict(sample_payload,
                empresa="Transportes del Norte",
                transmision="automatica",
                notas="Entrega en Monterrey. Incluye capacitación para operadores.")
