"""
es-MX formatting helpers shared by the summary page, the filename and the
form preview (the JavaScript in templates.py mirrors these rules).
"""
import re
import unicodedata
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from reportlab.lib.utils import simpleSplit

_CENT = Decimal("0.01")


def format_price(amount) -> str:
    """MXN currency like Intl.NumberFormat("es-MX", minimumFractionDigits: 0).

    Cents are rounded half away from zero on the shortest decimal form of
    the amount, the way the browser preview rounds.

    >>> format_price(1500000)
    '$1,500,000'
    >>> format_price(150000.5)
    '$150,000.5'
    """
    cents = Decimal(repr(float(amount))).quantize(_CENT, rounding=ROUND_HALF_UP)
    s = f"{cents:,.2f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s.startswith("-"):
        return f"-${s[1:]}"
    return f"${s}"


def format_percent(value) -> str:
    """10.0 → "10", 12.5 → "12.5"."""
    value = float(value)
    if value == int(value):
        return str(int(value))
    return repr(value)


def format_units(quantity: int) -> str:
    return f"{quantity} unidad{'' if quantity == 1 else 'es'}"


def format_date(today: date) -> str:
    """d/m/yyyy without zero padding, as toLocaleDateString("es-MX")."""
    return f"{today.day}/{today.month}/{today.year}"


def filename_date(today: date) -> str:
    return format_date(today).replace("/", "-")


_NOT_FILENAME_SAFE = re.compile(r"[^a-zA-Z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")


def clean_filename_part(text: str) -> str:
    """Strip accents and anything outside [A-Za-z0-9 space -]; collapse spaces.

    "José  Pérez & Hijos" → "Jose Perez Hijos"
    """
    decomposed = unicodedata.normalize("NFD", text or "")
    no_marks = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    ascii_only = _NOT_FILENAME_SAFE.sub("", no_marks)
    return _WHITESPACE.sub(" ", ascii_only).strip()


def wrap_text(text: str, font: str, size: float, max_width: float) -> list:
    """Word wrap measured with the PDF font metrics (reportlab simpleSplit).

    A word wider than max_width on its own stays alone on its line. Newlines
    start a new paragraph; blank lines are kept as empty strings.
    """
    lines = []
    for paragraph in (text or "").split("\n"):
        lines.extend(simpleSplit(paragraph, font, size, max_width) or [""])
    # Trailing blank lines carry nothing to draw
    while lines and not lines[-1]:
        lines.pop()
    return lines
