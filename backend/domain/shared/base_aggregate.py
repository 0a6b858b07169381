"""
Base Aggregate Root class.

Aggregates are clusters of domain objects that can be treated as a single unit.
The Aggregate Root is the only entry point to the aggregate.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from .base_entity import Entity
from .events import DomainEvent


@dataclass(frozen=True, eq=False)
class AggregateRoot(Entity):
    """
    Base class for all aggregate roots.

    An aggregate is a cluster of domain objects that can be treated as a single unit.
    The aggregate root is the entry point to the aggregate, and all external references
    should only point to the aggregate root.

    Key responsibilities:
    - Enforce invariants across the aggregate
    - Manage the lifecycle of contained entities
    - Record domain events for significant state changes

    Pending events are kept in memory until a caller pulls them with
    clear_domain_events(); nothing in the domain dispatches them.
    """

    _domain_events: List[DomainEvent] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def add_domain_event(self, event: DomainEvent) -> None:
        """Record a domain event."""
        self._domain_events.append(event)

    def clear_domain_events(self) -> List[DomainEvent]:
        """Clear and return all pending domain events."""
        events = self._domain_events.copy()
        self._domain_events.clear()
        return events

    @property
    def domain_events(self) -> List[DomainEvent]:
        """Get all pending domain events."""
        return self._domain_events.copy()
