# client_api/adapters/outbound/persistence/repositories/client_repository.py

"""
Repository for client operations.

This module implements the repository that performs database operations
related to clients, implementing the IClientRepository interface.
"""

import logging
from typing import Any, AsyncIterator, Optional
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.future import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from client_api.adapters.outbound.persistence.database import get_db_context
from client_api.adapters.outbound.persistence.models import Client
from client_api.application.ports.outbound import IClientRepository
from client_api.domain.models.client_domain_model import Client as DomainClient
from client_api.domain.exceptions import DatabaseOperationException

# Columns written from the domain model on create/update
WRITABLE_FIELDS = (
    "first_name",
    "last_name",
    "identity_document_type",
    "identity_document_number",
    "email",
    "phone_number",
)


class AsyncClientRepository(IClientRepository):
    """
    Async SQLAlchemy implementation of the client repository.

    Each operation opens its own session from the session factory;
    stream_all keeps its session open until the iteration ends.
    """

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory
        self.logger = logging.getLogger(f"{__name__}.{Client.__name__}")

    async def stream_all(self) -> AsyncIterator[DomainClient]:
        """
        Stream all clients ordered by creation, using a server-side cursor.

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            async with get_db_context(self.session_factory) as db:
                query = select(Client).order_by(Client.created_at, Client.id)
                result = await db.stream_scalars(query)
                async for record in result:
                    yield self.to_domain(record)
        except SQLAlchemyError as e:
            self.logger.error(f"Error streaming clients: {str(e)}")
            raise DatabaseOperationException(
                detail="Error listing clients",
                original_error=e
            )

    async def get(self, id: Any) -> Optional[DomainClient]:
        """
        Find a client by ID.

        Args:
            id: Client identifier

        Returns:
            Client found or None if it doesn't exist

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            async with get_db_context(self.session_factory) as db:
                record = await db.get(Client, id)
                return self.to_domain(record) if record else None
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching client with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                detail="Error fetching client",
                original_error=e
            )

    async def get_by_identity_document(self, number: str, document_type: str) -> Optional[DomainClient]:
        """
        Find the first client with the given identity document.

        Args:
            number: Identity document number
            document_type: Identity document type

        Returns:
            Oldest matching client or None
        """
        try:
            async with get_db_context(self.session_factory) as db:
                query = (
                    select(Client)
                    .where(
                        Client.identity_document_number == number,
                        Client.identity_document_type == document_type,
                    )
                    .order_by(Client.created_at, Client.id)
                    .limit(1)
                )
                result = await db.execute(query)
                record = result.scalars().first()
                return self.to_domain(record) if record else None
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching client by document {document_type} {number}: {str(e)}")
            raise DatabaseOperationException(
                detail="Error fetching client by identity document",
                original_error=e
            )

    async def create(self, client: DomainClient) -> Optional[DomainClient]:
        """
        Persist a new client.

        Args:
            client: Domain client, with its ID already assigned

        Returns:
            The stored client, with timestamps, or None if its identity
            document is already registered

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            async with get_db_context(self.session_factory) as db:
                record = Client(id=client.id, **{field: getattr(client, field) for field in WRITABLE_FIELDS})
                db.add(record)
                await db.commit()
                await db.refresh(record)
                return self.to_domain(record)
        except IntegrityError as e:
            self.logger.warning(f"Client with ID {client.id} not created, document already registered: {str(e)}")
            return None
        except SQLAlchemyError as e:
            self.logger.error(f"Error creating client: {str(e)}")
            raise DatabaseOperationException(
                detail="Error creating client",
                original_error=e
            )

    async def update(self, id: Any, client: DomainClient) -> Optional[DomainClient]:
        """
        Replace the writable fields of an existing client.

        Returns:
            The updated client, or None if it doesn't exist
            or its new identity document belongs to another client
        """
        try:
            async with get_db_context(self.session_factory) as db:
                record = await db.get(Client, id)
                if not record:
                    return None

                for field in WRITABLE_FIELDS:
                    setattr(record, field, getattr(client, field))

                await db.commit()
                await db.refresh(record)
                return self.to_domain(record)
        except IntegrityError as e:
            self.logger.warning(f"Client with ID {id} not updated, document already registered: {str(e)}")
            return None
        except SQLAlchemyError as e:
            self.logger.error(f"Error updating client with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                detail="Error updating client",
                original_error=e
            )

    async def delete(self, id: Any) -> Optional[DomainClient]:
        """
        Delete a client by ID.

        Returns:
            The deleted client, or None if it doesn't exist
        """
        try:
            async with get_db_context(self.session_factory) as db:
                record = await db.get(Client, id)
                if not record:
                    return None

                deleted = self.to_domain(record)
                await db.delete(record)
                await db.commit()
                return deleted
        except SQLAlchemyError as e:
            self.logger.error(f"Error deleting client with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                detail="Error deleting client",
                original_error=e
            )

    def to_domain(self, db_model: Client) -> DomainClient:
        """
        Convert database model to domain model.

        Args:
            db_model: Client ORM model

        Returns:
            Domain model of client
        """
        return DomainClient(
            id=db_model.id,
            first_name=db_model.first_name,
            last_name=db_model.last_name,
            identity_document_type=db_model.identity_document_type,
            identity_document_number=db_model.identity_document_number,
            email=db_model.email,
            phone_number=db_model.phone_number,
            created_at=db_model.created_at,
            updated_at=db_model.updated_at,
        )
