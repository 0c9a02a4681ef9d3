"""
Quote request validation at the HTTP boundary.

The form posts Spanish field names (vendedor, cliente, ...). They are
validated and coerced into a QuoteRequest before any pricing or PDF work.

    parse_quote_request(payload) -> QuoteRequest   (raises QuoteValidationError)
    compute_totals(quote, truck) -> {subtotal, discount_amount, total}
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

TRANSMISSIONS = {
    "automatica": "Automática",
    "estandar": "Estándar",
}


class QuoteValidationError(ValueError):
    """Payload rejected before pricing. ``fields`` lists the offending wire names."""

    def __init__(self, message: str, fields=None):
        super().__init__(message)
        self.fields = list(fields or [])


class UnknownModelError(LookupError):
    """``modelo`` does not match any catalog entry."""

    def __init__(self, model_id):
        super().__init__(f"Unknown truck model: {model_id!r}")
        self.model_id = model_id


class QuoteRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True,
                              str_strip_whitespace=True, extra="ignore")

    seller: str = Field(alias="vendedor", min_length=1)
    client: str = Field(alias="cliente", min_length=1)
    company: Optional[str] = Field(default=None, alias="empresa")
    model_id: str = Field(alias="modelo", min_length=1)
    transmission: Optional[Literal["automatica", "estandar"]] = Field(default=None, alias="transmision")
    quantity: int = Field(default=1, alias="cantidad", ge=1)
    discount: float = Field(default=0.0, alias="descuento", ge=0, le=100)
    notes: Optional[str] = Field(default=None, alias="notas")

    @field_validator("company", "transmission", "notes", mode="before")
    @classmethod
    def _blank_is_none(cls, v):
        if isinstance(v, str):
            # Literal fields skip str_strip_whitespace
            v = v.strip()
            return v or None
        return v

    # Numeric strings ("3", "7.5") are accepted as the form may send them;
    # JSON booleans are not numbers here.
    @field_validator("quantity", "discount", mode="before")
    @classmethod
    def _reject_booleans(cls, v):
        if isinstance(v, bool):
            raise ValueError("se esperaba un número")
        return v

    @field_validator("notes", mode="after")
    @classmethod
    def _keep_note_lines(cls, v):
        return v.replace("\r\n", "\n").replace("\r", "\n") if v else v

    @property
    def transmission_label(self) -> str:
        return TRANSMISSIONS.get(self.transmission, "N/A")


def parse_quote_request(payload) -> QuoteRequest:
    """Validate an untyped JSON payload. Raises QuoteValidationError."""
    if not isinstance(payload, dict):
        raise QuoteValidationError("Solicitud inválida: se esperaba un objeto JSON")
    try:
        return QuoteRequest.model_validate(payload)
    except ValidationError as e:
        fields = []
        for err in e.errors():
            loc = err.get("loc") or ("?",)
            name = str(loc[0])
            if name not in fields:
                fields.append(name)
        raise QuoteValidationError(
            f"Datos inválidos: {', '.join(fields)}", fields) from e


def compute_totals(quote: QuoteRequest, truck) -> dict:
    """Subtotal, discount and total — same operation order as the form preview."""
    subtotal = truck.price * quote.quantity
    discount_amount = (subtotal * quote.discount) / 100
    total = subtotal - discount_amount
    return {"subtotal": subtotal, "discount_amount": discount_amount, "total": total}
