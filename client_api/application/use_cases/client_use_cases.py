# client_api/application/use_cases/client_use_cases.py

"""
Service for client management.

This module implements the use cases over the Client entity on top of
a client repository port.
"""

import logging
import uuid
from dataclasses import replace
from typing import AsyncIterator, Optional

from client_api.application.ports.inbound import IClientService
from client_api.application.ports.outbound import IClientRepository
from client_api.domain.models.client_domain_model import Client
from client_api.shared.utils.input_validation import InputValidator

logger = logging.getLogger(__name__)


class AsyncClientService(IClientService):
    """
    Service for client management.

    Results follow the zero-or-one contract of IClientService: a refused
    or missing client yields None.
    """

    def __init__(self, client_repository: IClientRepository):
        self.client_repository = client_repository

    async def find_all(self) -> AsyncIterator[Client]:
        async for client in self.client_repository.stream_all():
            yield client

    async def find_by_id(self, id: str) -> Optional[Client]:
        return await self.client_repository.get(id)

    async def create(self, client: Client) -> Optional[Client]:
        """
        Creates a new client with a generated ID.

        Returns None when a client with the same identity document already exists.
        """
        existing = await self.client_repository.get_by_identity_document(
            client.identity_document_number, client.identity_document_type
        )
        if existing:
            logger.warning(
                f"Client with document {client.identity_document_type} "
                f"{client.identity_document_number} already exists: {existing.id}"
            )
            return None

        created = await self.client_repository.create(replace(client, id=uuid.uuid4().hex))
        if not created:
            # Lost a race against a concurrent create of the same document
            logger.warning(
                f"Client with document {client.identity_document_type} "
                f"{client.identity_document_number} was created concurrently"
            )
            return None
        logger.info(f"Client created: {created.id}")
        return created

    async def update(self, id: str, client: Client) -> Optional[Client]:
        """
        Replaces the data of an existing client.

        Returns None when the ID does not exist or when the new identity
        document already belongs to another client.
        """
        current = await self.client_repository.get(id)
        if not current:
            logger.warning(f"Client not found for update: ID {id}")
            return None

        if not current.has_identity_document(client.identity_document_number, client.identity_document_type):
            holder = await self.client_repository.get_by_identity_document(
                client.identity_document_number, client.identity_document_type
            )
            if holder:
                logger.warning(
                    f"Client {id} cannot take document {client.identity_document_type} "
                    f"{client.identity_document_number}, held by {holder.id}"
                )
                return None

        updated = await self.client_repository.update(id, replace(client, id=id))
        if not updated:
            logger.warning(f"Client {id} was not updated")
            return None
        logger.info(f"Client updated: {id}")
        return updated

    async def delete(self, id: str) -> Optional[Client]:
        deleted = await self.client_repository.delete(id)
        if not deleted:
            logger.warning(f"Client not found for deletion: ID {id}")
            return None
        logger.info(f"Client deleted: {id}")
        return deleted

    async def find_top_by_identity_document_number_and_identity_document_type(
            self, identity_document_number: str, identity_document_type: str
    ) -> Optional[Client]:
        return await self.client_repository.get_by_identity_document(
            identity_document_number, InputValidator.normalize_document_type(identity_document_type)
        )
