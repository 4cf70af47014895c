# client_api/adapters/outbound/persistence/repositories/__init__.py

"""
Repositories module.

Exports the repository implementations of the outbound ports.
"""

from client_api.adapters.outbound.persistence.repositories.client_repository import AsyncClientRepository

__all__ = [
    "AsyncClientRepository",
]
