from decimal import MAX_EMAX, ROUND_HALF_UP, Decimal, localcontext
from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from . import settings

CENTS = Decimal("0.01")


class ProductKind(str, Enum):
    """Kinds of record the store can hold."""
    GENERAL = "general"
    ELECTRONICS = "electronics"


class Product(BaseModel):
    """
    Defines the data contract for a single stock record.
    Quantity and price are the only fields that can change after creation,
    and assignments are validated so neither can go negative.
    """

    model_config = ConfigDict(validate_assignment=True)

    kind: ClassVar[ProductKind] = ProductKind.GENERAL

    id: int = Field(..., frozen=True)
    name: str = Field(..., frozen=True)
    quantity: int = Field(default=0, ge=0)
    price: Decimal = Field(default=Decimal("0"), ge=0)

    def formatted_price(self) -> str:
        # Precision grows with the amount so quantizing to cents never overflows.
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, self.price.adjusted() + 3)
            ctx.Emax = MAX_EMAX
            cents = self.price.quantize(CENTS, rounding=ROUND_HALF_UP)
        return f"{settings.CURRENCY_SYMBOL}{cents}"

    def render(self) -> str:
        """Text shown for this record in listings and update screens."""
        return (
            f"ID: {self.id}, Name: {self.name}, "
            f"Quantity: {self.quantity}, Price: {self.formatted_price()}"
        )


class Electronics(Product):
    """A product sold with a warranty period, e.g. '1 year' or '6 months'."""

    kind: ClassVar[ProductKind] = ProductKind.ELECTRONICS

    warranty: str = Field(..., frozen=True)

    def render(self) -> str:
        return f"{super().render()}\nWarranty: {self.warranty}"
