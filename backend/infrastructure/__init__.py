"""
Infrastructure layer - framework glue around the domain.

Registered as a Django app so that its management commands are discovered.
"""
