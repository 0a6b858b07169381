"""
Domain layer - Pure business logic without infrastructure dependencies.

Bounded contexts:
- procurement/: purchase orders and the items they own
- scm/: suppliers
- shared/: value objects, exceptions and DDD building blocks used by both
"""
