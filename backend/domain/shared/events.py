"""
Domain Events.

Domain events are records of significant business occurrences.
They are used for decoupling and eventual consistency.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """
    Base class for all domain events.

    Domain events are immutable records of something that happened in the domain.
    They are used for:
    - Decoupling bounded contexts
    - Triggering side effects (notifications, recalculations)
    - Audit trail
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=_utcnow)

    @property
    def event_type(self) -> str:
        """Get the event type name."""
        return self.__class__.__name__


# =============================================================================
# SCM EVENTS
# =============================================================================

@dataclass(frozen=True)
class SupplierRegistered(DomainEvent):
    """Event raised when a supplier is created."""

    supplier_id: str
    name: str


# =============================================================================
# PROCUREMENT EVENTS
# =============================================================================

@dataclass(frozen=True)
class PurchaseOrderCreated(DomainEvent):
    """Event raised when a new purchase order is created."""

    order_number: str
    supplier_id: str
    currency: str


@dataclass(frozen=True)
class PurchaseOrderItemAdded(DomainEvent):
    """Event raised when an item is appended to a purchase order."""

    order_number: str
    product_id: UUID
    quantity: int
    unit_price: Decimal
