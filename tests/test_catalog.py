"""Tests for cotizador/core/catalog.py: the static truck catalog."""
import pytest

from cotizador.core.catalog import (
    CATALOG, TruckModel, catalog_as_json, missing_spec_files,
)


class TestCatalog:

    def test_five_models(self):
        assert list(CATALOG) == ["L5000", "X5000", "F3000", "H3000", "M3000"]

    def test_prices(self):
        assert {m.id: m.price for m in CATALOG.values()} == {
            "L5000": 750000, "X5000": 1250000, "F3000": 980000,
            "H3000": 1150000, "M3000": 1070000,
        }

    def test_spec_filenames_exact(self):
        assert CATALOG["L5000"].pdf == "SHACMAN-L5000-4X2.pdf"
        assert CATALOG["X5000"].pdf == "Shacman X5000 Ficha Técnica.pdf"

    def test_short_name_strips_brand(self):
        assert [m.short_name for m in CATALOG.values()] == ["L5000", "X5000", "F3000", "H3000", "M3000"]

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            CATALOG["NEW"] = CATALOG["L5000"]

    def test_entries_are_frozen(self):
        with pytest.raises(Exception):
            CATALOG["L5000"].price = 1

    def test_entry_type(self):
        assert all(isinstance(m, TruckModel) for m in CATALOG.values())


class TestSpecAvailability:

    def test_all_missing_in_empty_dir(self, spec_dir):
        assert len(missing_spec_files()) == 5

    def test_present_files(self, make_spec_pdf):
        make_spec_pdf(CATALOG["X5000"].pdf, 2)
        missing = missing_spec_files()
        assert CATALOG["X5000"].pdf not in missing
        assert len(missing) == 4

    def test_json_rows(self, make_spec_pdf):
        make_spec_pdf(CATALOG["L5000"].pdf, 2)
        rows = {r["id"]: r for r in catalog_as_json()}
        assert rows["L5000"] == {"id": "L5000", "name": "SHACMAN L5000", "price": 750000,
                                 "pdf": "SHACMAN-L5000-4X2.pdf", "available": True}
        assert rows["M3000"]["available"] is False
