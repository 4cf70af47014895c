# client_api/application/ports/inbound.py

from abc import ABC, abstractmethod
from typing import AsyncIterator, Optional

from client_api.domain.models.client_domain_model import Client


class IClientService(ABC):
    """
    Interface for client-related use cases.

    Every lookup or write completes with zero or one client: ``None`` means
    the operation produced nothing (not found, refused), never an error.
    Errors are raised.
    """

    @abstractmethod
    def find_all(self) -> AsyncIterator[Client]:
        """Lazily iterate over all clients, in storage order."""
        pass

    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[Client]:
        """Get client by ID."""
        pass

    @abstractmethod
    async def create(self, client: Client) -> Optional[Client]:
        """Create a new client."""
        pass

    @abstractmethod
    async def update(self, id: str, client: Client) -> Optional[Client]:
        """Replace the data of an existing client."""
        pass

    @abstractmethod
    async def delete(self, id: str) -> Optional[Client]:
        """Delete a client, returning the deleted one."""
        pass

    @abstractmethod
    async def find_top_by_identity_document_number_and_identity_document_type(
            self, identity_document_number: str, identity_document_type: str
    ) -> Optional[Client]:
        """Get the first client holding the given identity document."""
        pass
