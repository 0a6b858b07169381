"""
Procurement Domain - Value Objects.
"""

from __future__ import annotations
from dataclasses import dataclass
from uuid import UUID, uuid4

from domain.shared.exceptions import ValidationException, MissingArgumentException


_NIL_UUID = UUID(int=0)


@dataclass(frozen=True)
class ProductId:
    """
    Identifier of a product referenced by purchase order items.

    Wraps a UUID so product and supplier identifiers cannot be mixed up.
    The nil UUID is rejected.
    """

    id: UUID

    def __post_init__(self):
        if self.id is None:
            raise MissingArgumentException("product_id")
        if not isinstance(self.id, UUID):
            raise ValidationException("Product id must be a UUID", "product_id", self.id)
        if self.id == _NIL_UUID:
            raise ValidationException("Product id cannot be an empty UUID", "product_id", self.id)

    @classmethod
    def new(cls) -> ProductId:
        """Generate a fresh random product id."""
        return cls(uuid4())

    @classmethod
    def from_string(cls, value: str) -> ProductId:
        """
        Create ProductId from its string form.

        Raises:
            ValidationException: If value is not a UUID string
        """
        if value is None:
            raise MissingArgumentException("product_id")
        try:
            return cls(UUID(str(value)))
        except ValueError:
            raise ValidationException(f"Invalid product id: {value}", "product_id", value)

    def __str__(self) -> str:
        return str(self.id)
