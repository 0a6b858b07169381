"""
Procurement Domain - Entities.

Entities owned by the PurchaseOrder aggregate.
"""

from __future__ import annotations
from dataclasses import dataclass

from domain.shared.exceptions import ValidationException, MissingArgumentException
from domain.shared.value_objects import Money

from .value_objects import ProductId


def require_quantity(quantity: int) -> int:
    """Return quantity if it is a positive integer, raise otherwise."""
    if quantity is None:
        raise MissingArgumentException("quantity")
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationException("Quantity must be an integer", "quantity", quantity)
    if quantity <= 0:
        raise ValidationException("Quantity must be greater than zero", "quantity", quantity)
    return quantity


@dataclass(frozen=True)
class PurchaseOrderItem:
    """
    A line of a purchase order: a product, how many, and at what unit price.

    Only ever created by PurchaseOrder.add_item and never shared between orders.
    """

    product_id: ProductId
    quantity: int
    unit_price: Money

    def __post_init__(self):
        if self.product_id is None:
            raise MissingArgumentException("product_id")
        if not isinstance(self.product_id, ProductId):
            raise ValidationException("product_id must be a ProductId", "product_id", self.product_id)
        require_quantity(self.quantity)
        if self.unit_price is None:
            raise MissingArgumentException("unit_price")
        if not isinstance(self.unit_price, Money):
            raise ValidationException("unit_price must be Money", "unit_price", self.unit_price)

    def calculate_item_total(self) -> Money:
        """Unit price times quantity, in the unit price currency."""
        return Money(self.unit_price.amount * self.quantity, self.unit_price.currency)
