"""
Base Entity class for all domain entities.

Entities have identity and lifecycle.
Two entities are equal if they have the same identity.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, eq=False)
class Entity(ABC):
    """
    Base class for all domain entities.

    Entities are objects that have a distinct identity that runs through time
    and different representations. They are defined by their identity, not their attributes.

    Subclasses are frozen dataclasses declared with ``eq=False`` so that the
    identity-based comparison below is kept.
    """

    @property
    @abstractmethod
    def identity(self) -> Any:
        """Value that identifies this entity within its type."""

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return False
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.identity))
