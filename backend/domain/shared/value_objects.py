"""
Shared Value Objects used across multiple domains.

Value Objects are immutable objects that describe characteristics of a thing.
Two value objects are equal if all their properties are equal.
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from decimal import Decimal, InvalidOperation
from typing import Any, Union

from .exceptions import ValidationException, MissingArgumentException


AmountLike = Union[Decimal, int, float, str]


# =============================================================================
# GUARDS
# =============================================================================

def require_text(value: Any, field: str) -> str:
    """Return value if it is a non-blank string, raise otherwise."""
    if value is None:
        raise MissingArgumentException(field)
    if not isinstance(value, str):
        raise ValidationException(f"{field} must be a string", field, value)
    if not value.strip():
        raise ValidationException(f"{field} cannot be empty or whitespace", field, value)
    return value


def normalize_currency(currency: Any, field: str = "currency") -> str:
    """
    Validate an ISO 4217 style currency code and return it uppercased.

    A valid code is exactly three non-whitespace characters once uppercased;
    case is ignored. upper() can change the length ("\u00df" -> "SS").
    """
    if currency is None:
        raise MissingArgumentException(field)
    if not isinstance(currency, str):
        raise ValidationException("Currency must be a valid 3-letter ISO code", field, currency)

    code = currency.upper()
    if len(code) != 3 or any(ch.isspace() for ch in code):
        raise ValidationException("Currency must be a valid 3-letter ISO code", field, currency)
    return code


def _to_decimal(amount: Any) -> Decimal:
    if amount is None:
        raise MissingArgumentException("amount")
    if isinstance(amount, bool) or not isinstance(amount, (Decimal, int, float, str)):
        raise ValidationException(f"Invalid amount type: {type(amount).__name__}", "amount", amount)

    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation:
        raise ValidationException(f"Invalid amount format: {amount}", "amount", amount)

    if not value.is_finite():
        raise ValidationException(f"Amount cannot be infinite or NaN: {amount}", "amount", amount)
    return value


# =============================================================================
# VALUE OBJECTS
# =============================================================================

@dataclass(frozen=True)
class Money:
    """
    Value object representing monetary amount.
    Immutable and includes currency.

    Amounts are kept as Decimal so that line and order totals are exact
    (25.99 * 10 == 259.90, never 259.89999...).
    """

    amount: Decimal
    currency: str

    def __post_init__(self):
        amount = _to_decimal(self.amount)
        if amount < 0:
            raise ValidationException("Amount must be a non-negative number", "amount", amount)
        if amount.is_zero():
            amount = amount.copy_abs()

        # Frozen dataclass, normalized values are written through object
        object.__setattr__(self, 'amount', amount)
        object.__setattr__(self, 'currency', normalize_currency(self.currency))

    @classmethod
    def zero(cls, currency: str) -> Money:
        """Create zero money in the given currency."""
        return cls(Decimal('0.00'), currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


@dataclass(frozen=True)
class Address:
    """
    Value object representing a postal address.

    All six parts are required and must not be blank.
    """

    street: str
    number: str
    city: str
    state_or_region: str
    postal_code: str
    country: str

    def __post_init__(self):
        for f in fields(self):
            require_text(getattr(self, f.name), f.name)

    @property
    def full_address(self) -> str:
        """Get full address as a single string."""
        return (
            f"{self.street} {self.number}, {self.city}, "
            f"{self.state_or_region}, {self.postal_code}, {self.country}"
        )

    def __str__(self) -> str:
        return self.full_address
