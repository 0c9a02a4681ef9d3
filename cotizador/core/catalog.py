"""
Truck Catalog — the five SHACMAN models offered by the quotation form.

Loaded once at import time and never mutated. The form page renders this
same table, so the browser preview and the server always price alike.
"""
import os
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

from cotizador.core.paths import spec_path

BRAND = "SHACMAN"


class TruckModel(BaseModel):
    """One catalog entry. ``price`` is whole MXN per unit."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: int
    pdf: str

    @property
    def short_name(self) -> str:
        """Display name without the brand prefix ("SHACMAN L5000" → "L5000")."""
        return self.name.replace(f"{BRAND} ", "")


_MODELS = [
    TruckModel(id="L5000", name="SHACMAN L5000", price=750000, pdf="SHACMAN-L5000-4X2.pdf"),
    TruckModel(id="X5000", name="SHACMAN X5000", price=1250000, pdf="Shacman X5000 Ficha Técnica.pdf"),
    TruckModel(id="F3000", name="SHACMAN F3000", price=980000, pdf="SHACMAN-F3000.pdf"),
    TruckModel(id="H3000", name="SHACMAN H3000", price=1150000, pdf="SHACMAN-H3000.pdf"),
    TruckModel(id="M3000", name="SHACMAN M3000", price=1070000, pdf="SHACMAN-M3000.pdf"),
]

# id → TruckModel, read-only
CATALOG = MappingProxyType({m.id: m for m in _MODELS})


def missing_spec_files(catalog=CATALOG, spec_dir: str = None) -> list:
    """Spec PDF filenames referenced by the catalog but absent on disk."""
    return [m.pdf for m in catalog.values()
            if not os.path.isfile(spec_path(m.pdf, spec_dir))]


def catalog_as_json(catalog=CATALOG, spec_dir: str = None) -> list:
    """Catalog rows for the API and the form page."""
    missing = set(missing_spec_files(catalog, spec_dir))
    return [
        {"id": m.id, "name": m.name, "price": m.price, "pdf": m.pdf,
         "available": m.pdf not in missing}
        for m in catalog.values()
    ]
