# client_api/application/ports/outbound.py

from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Optional

from client_api.domain.models.client_domain_model import Client


class IClientRepository(ABC):
    """Client repository interface."""

    @abstractmethod
    def stream_all(self) -> AsyncIterator[Client]:
        """Stream all clients."""
        pass

    @abstractmethod
    async def get(self, id: Any) -> Optional[Client]:
        """Get client by ID."""
        pass

    @abstractmethod
    async def get_by_identity_document(self, number: str, document_type: str) -> Optional[Client]:
        """Get the first client with the given identity document."""
        pass

    @abstractmethod
    async def create(self, client: Client) -> Optional[Client]:
        """Create a new client, None if its identity document is taken."""
        pass

    @abstractmethod
    async def update(self, id: Any, client: Client) -> Optional[Client]:
        """Update an existing client, None if it does not exist."""
        pass

    @abstractmethod
    async def delete(self, id: Any) -> Optional[Client]:
        """Delete a client by ID, None if it does not exist."""
        pass
