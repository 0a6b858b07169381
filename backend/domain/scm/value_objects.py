"""
SCM Domain - Value Objects.
"""

from __future__ import annotations
from dataclasses import dataclass

from domain.shared.value_objects import require_text


@dataclass(frozen=True)
class SupplierId:
    """Reference to a supplier held by other aggregates."""

    identifier: str

    def __post_init__(self):
        require_text(self.identifier, "supplier_id")

    def __str__(self) -> str:
        return self.identifier
