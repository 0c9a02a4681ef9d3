"""
Tests for cotizador/forms/formatting.py: es-MX money/date/percent formatting,
filename cleaning and greedy word wrap.
"""
from datetime import date

import pytest
from reportlab.pdfbase.pdfmetrics import stringWidth

from cotizador.forms.formatting import (
    clean_filename_part, filename_date, format_date, format_percent,
    format_price, format_units, wrap_text,
)

FONT = "Helvetica"
SIZE = 12
MAX_W = 595.28 - 100


class TestFormatPrice:

    @pytest.mark.parametrize("amount,expected", [
        (0, "$0"),
        (750000, "$750,000"),
        (1500000, "$1,500,000"),
        (150000.0, "$150,000"),
        (150000.5, "$150,000.5"),
        (1234.567, "$1,234.57"),
        (0.125, "$0.13"),
        (2.675, "$2.68"),
        (1.005, "$1.01"),
        (-0.125, "-$0.13"),
        (-150000, "-$150,000"),
    ])
    def test_amounts(self, amount, expected):
        assert format_price(amount) == expected


class TestSmallFormatters:

    def test_percent(self):
        assert format_percent(10) == "10"
        assert format_percent(10.0) == "10"
        assert format_percent(12.5) == "12.5"
        assert format_percent(0.1) == "0.1"

    def test_units(self):
        assert format_units(1) == "1 unidad"
        assert format_units(2) == "2 unidades"
        assert format_units(10) == "10 unidades"

    def test_date_no_zero_padding(self):
        assert format_date(date(2026, 3, 5)) == "5/3/2026"
        assert format_date(date(2026, 12, 25)) == "25/12/2026"

    def test_filename_date(self):
        assert filename_date(date(2026, 3, 5)) == "5-3-2026"


class TestCleanFilenamePart:

    @pytest.mark.parametrize("raw,expected", [
        ("José Pérez", "Jose Perez"),
        ("  María   de  la  Cruz ", "Maria de la Cruz"),
        ("Grupo Ñ-Logística, S.A. de C.V.", "Grupo N-Logistica SA de CV"),
        ("O'Brien & Sons", "OBrien Sons"),
        ("Tab\tNew\nLine", "Tab New Line"),
        ("北京", ""),
        ("", ""),
    ])
    def test_cleaning(self, raw, expected):
        assert clean_filename_part(raw) == expected

    def test_idempotent(self):
        once = clean_filename_part("Ángel Güemes!!")
        assert clean_filename_part(once) == once


class TestWrapText:

    def test_short_text_one_line(self):
        assert wrap_text("Entrega inmediata", FONT, SIZE, MAX_W) == ["Entrega inmediata"]

    def test_empty(self):
        assert wrap_text("", FONT, SIZE, MAX_W) == []

    def test_lines_never_exceed_width(self):
        text = " ".join(["palabra"] * 200)
        lines = wrap_text(text, FONT, SIZE, MAX_W)
        assert len(lines) > 1
        for line in lines:
            assert stringWidth(line, FONT, SIZE) <= MAX_W
        assert " ".join(lines) == text

    def test_greedy_fill(self):
        text = " ".join(f"w{i}" for i in range(300))
        lines = wrap_text(text, FONT, SIZE, MAX_W)
        # each line is as full as possible: the next word would not have fit
        for line, nxt in zip(lines, lines[1:]):
            first_next = nxt.split()[0]
            assert stringWidth(f"{line} {first_next}", FONT, SIZE) > MAX_W

    def test_overlong_word_flushed_alone(self):
        huge = "X" * 200
        lines = wrap_text(f"antes {huge} despues", FONT, SIZE, MAX_W)
        assert lines == ["antes", huge, "despues"]

    def test_overlong_word_first(self):
        huge = "Y" * 200
        assert wrap_text(huge, FONT, SIZE, MAX_W) == [huge]

    def test_newlines_start_paragraphs(self):
        assert wrap_text("uno\n\ndos", FONT, SIZE, MAX_W) == ["uno", "", "dos"]

    def test_trailing_blank_lines_dropped(self):
        assert wrap_text("uno\n\n", FONT, SIZE, MAX_W) == ["uno"]

    def test_paragraph_matches_simple_split(self):
        from reportlab.lib.utils import simpleSplit
        text = " ".join(["transporte"] * 80) + " " + "Z" * 200 + " fin"
        assert wrap_text(text, FONT, SIZE, MAX_W) == simpleSplit(text, FONT, SIZE, MAX_W)
