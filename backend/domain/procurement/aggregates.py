"""
Procurement Domain - Aggregates.

PurchaseOrder is the aggregate root for the procurement domain.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Tuple

from domain.shared.base_aggregate import AggregateRoot
from domain.shared.events import PurchaseOrderCreated, PurchaseOrderItemAdded
from domain.shared.exceptions import ValidationException, MissingArgumentException
from domain.shared.value_objects import (
    AmountLike,
    Money,
    normalize_currency,
    require_text,
)
from domain.scm.value_objects import SupplierId

from .entities import PurchaseOrderItem, require_quantity
from .value_objects import ProductId


@dataclass(frozen=True, eq=False)
class PurchaseOrder(AggregateRoot):
    """
    Aggregate root for purchase orders.

    Header fields are fixed at construction. The only change an order accepts
    is appending items through add_item(), which prices every item in the
    order currency. Totals are computed on demand.

    The aggregate does no locking; callers sharing an order between threads
    must serialize add_item() themselves.
    """

    order_number: str
    supplier_id: SupplierId
    order_date: datetime
    currency: str

    _items: List[PurchaseOrderItem] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        require_text(self.order_number, "order_number")
        if self.supplier_id is None:
            raise MissingArgumentException("supplier_id")
        if not isinstance(self.supplier_id, SupplierId):
            raise ValidationException(
                "supplier_id must be a SupplierId", "supplier_id", self.supplier_id
            )
        if self.order_date is None:
            raise MissingArgumentException("order_date")
        if not isinstance(self.order_date, datetime):
            raise ValidationException(
                "order_date must be a datetime", "order_date", self.order_date
            )
        object.__setattr__(self, 'currency', normalize_currency(self.currency))

        self.add_domain_event(PurchaseOrderCreated(
            order_number=self.order_number,
            supplier_id=str(self.supplier_id),
            currency=self.currency,
        ))

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def identity(self) -> str:
        return self.order_number

    @property
    def items(self) -> Tuple[PurchaseOrderItem, ...]:
        """Snapshot of the items in insertion order."""
        return tuple(self._items)

    @property
    def item_count(self) -> int:
        return len(self._items)

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def add_item(
        self,
        product_id: ProductId,
        quantity: int,
        unit_price_amount: AmountLike,
    ) -> PurchaseOrder:
        """
        Append an item priced in the order currency.

        Everything is validated before the order is touched, so a rejected
        call leaves the items unchanged.

        Returns:
            This order, so calls can be chained.
        """
        if product_id is None:
            raise MissingArgumentException("product_id")
        require_quantity(quantity)
        unit_price = Money(unit_price_amount, self.currency)

        item = PurchaseOrderItem(product_id, quantity, unit_price)
        self._items.append(item)

        self.add_domain_event(PurchaseOrderItemAdded(
            order_number=self.order_number,
            product_id=product_id.id,
            quantity=quantity,
            unit_price=unit_price.amount,
        ))
        return self

    # =========================================================================
    # QUERIES
    # =========================================================================

    def calculate_order_total(self) -> Money:
        """Sum of every item total, in the order currency."""
        total = sum(
            (item.calculate_item_total().amount for item in self._items),
            Decimal('0.00'),
        )
        return Money(total, self.currency)
