"""
SCM Domain - Aggregates.

Supplier is the aggregate root for the supply chain domain.
"""

from __future__ import annotations
from dataclasses import dataclass

from domain.shared.base_aggregate import AggregateRoot
from domain.shared.events import SupplierRegistered
from domain.shared.exceptions import ValidationException, MissingArgumentException
from domain.shared.value_objects import Address, require_text

from .value_objects import SupplierId


@dataclass(frozen=True, eq=False)
class Supplier(AggregateRoot):
    """
    Supplier - a company that supplies products.

    Other aggregates never hold a Supplier; they keep its SupplierId.
    """

    identifier: str
    name: str
    address: Address

    def __post_init__(self):
        require_text(self.identifier, "identifier")
        require_text(self.name, "name")
        if self.address is None:
            raise MissingArgumentException("address")
        if not isinstance(self.address, Address):
            raise ValidationException("address must be an Address", "address", self.address)

        self.add_domain_event(SupplierRegistered(
            supplier_id=self.identifier,
            name=self.name,
        ))

    @property
    def identity(self) -> str:
        return self.identifier

    @property
    def supplier_id(self) -> SupplierId:
        return SupplierId(self.identifier)
