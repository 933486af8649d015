"""
Supermatech Backend: Pydantic Request/Response Schemas
========================================================

What:  The API contract of the OrderLine resource.
How:   FastAPI validates request bodies against these models (422 on schema
       failures), serializes responses and generates the OpenAPI docs.

Schemas are kept apart from the SQLAlchemy model so the storage layer can be
swapped (SQL or in-memory) without touching the contract.
"""

from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

# Column limits of the order_line table: INTEGER quantity, NUMERIC(21,2) price
MAX_QUANTITY = 2 ** 31 - 1
MAX_UNIT_PRICE = 10 ** 19


def _check_cents(value: Optional[float]) -> Optional[float]:
    """Reject prices with more than two decimals instead of letting the column round them."""
    if value is not None and Decimal(str(value)).as_tuple().exponent < -2:
        raise ValueError("unit_price must have at most 2 decimal places")
    return value


# ══════════════════════════════════════════════════════════════════════════
# Entity Models
# ══════════════════════════════════════════════════════════════════════════


class OrderLineBody(BaseModel):
    """
    What:  Full OrderLine as sent by clients on POST and PUT.
    Who:   Request body of create and update; input of OrderLineStore.save/update.

    The id is optional at the schema level: create requires it to be absent,
    update requires it to be present. Those checks live in OrderLineService.
    """
    id: Optional[int] = Field(default=None, description="Identifier, null for new order lines")
    product_name: str = Field(min_length=1, max_length=255, description="Ordered product name")
    quantity: int = Field(ge=1, le=MAX_QUANTITY, description="Number of units ordered")
    unit_price: float = Field(ge=0, lt=MAX_UNIT_PRICE, description="Price of one unit, at most 2 decimals")

    model_config = {"from_attributes": True}

    @field_validator("unit_price")
    @classmethod
    def unit_price_in_cents(cls, value: float) -> float:
        return _check_cents(value)


class OrderLineResponse(OrderLineBody):
    """A persisted OrderLine; the identifier is always set."""
    id: int = Field(description="Identifier assigned by storage")


class OrderLinePatch(BaseModel):
    """
    What:  Body of PATCH /api/order-lines/{id}.
    How:   Every domain field is optional. A field that is omitted or null
           leaves the stored value untouched; changes() is the explicit
           field -> new value mapping handed to the store.
    """
    id: Optional[int] = Field(default=None, description="Must equal the path id")
    product_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    quantity: Optional[int] = Field(default=None, ge=1, le=MAX_QUANTITY)
    unit_price: Optional[float] = Field(default=None, ge=0, lt=MAX_UNIT_PRICE)

    @field_validator("unit_price")
    @classmethod
    def unit_price_in_cents(cls, value: Optional[float]) -> Optional[float]:
        return _check_cents(value)

    def changes(self) -> Dict[str, Any]:
        """Non-null domain fields of this patch, keyed by field name."""
        return {
            name: value
            for name, value in self.model_dump(exclude={"id"}).items()
            if value is not None
        }


class CartSummary(BaseModel):
    """
    What:  Totals over every stored order line.
    Who:   Returned by GET /api/order-lines/summary; feeds the cart summary widget.
    """
    line_count: int = Field(description="Number of order lines")
    item_count: int = Field(description="Sum of quantities")
    total_price: float = Field(description="Sum of quantity * unit_price, rounded to cents")


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for every handled exception.

    Fields:
        error: Machine-readable code ("idnull", "not_found", "server_error", ...)
        message: Human-readable description
        details: Extra context (entity name and error key for 400s)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
