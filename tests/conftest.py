"""Shared pytest fixtures and in-memory fakes for the test suite."""

from dataclasses import replace
from datetime import datetime, timezone
from typing import AsyncIterator, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from client_api.adapters.configuration.config import Settings
from client_api.adapters.inbound.api.mappers.client_mapper import ClientMapper
from client_api.application.ports.inbound import IClientService
from client_api.application.ports.outbound import IClientRepository
from client_api.domain.models.client_domain_model import Client
from client_api.main import create_app


def make_client(
    id: Optional[str] = "c1",
    identity_document_number: str = "123",
    identity_document_type: str = "DNI",
    **overrides,
) -> Client:
    fields = dict(
        id=id,
        first_name="Ana",
        last_name="Torres",
        identity_document_type=identity_document_type,
        identity_document_number=identity_document_number,
        email="ana.torres@example.com",
        phone_number="+51 999 888 777",
    )
    fields.update(overrides)
    return Client(**fields)


class InMemoryClientService(IClientService):
    """Dict-backed client service.

    Mirrors the contract of AsyncClientService: create and update refuse an
    identity document held by another client, update/delete return None for
    unknown IDs.
    Set ``error`` to make every call raise it.
    """

    def __init__(self) -> None:
        self.clients: Dict[str, Client] = {}
        self.calls: List[str] = []
        self.error: Optional[Exception] = None
        self._sequence = 0

    def add(self, client: Client) -> Client:
        self.clients[client.id] = client
        return client

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.error is not None:
            raise self.error

    async def find_all(self) -> AsyncIterator[Client]:
        self._record("find_all")
        for client in list(self.clients.values()):
            yield client

    async def find_by_id(self, id: str) -> Optional[Client]:
        self._record("find_by_id")
        return self.clients.get(id)

    async def create(self, client: Client) -> Optional[Client]:
        self._record("create")
        if self._find_document(client.identity_document_number, client.identity_document_type):
            return None
        self._sequence += 1
        return self.add(replace(client, id=f"generated-{self._sequence}"))

    async def update(self, id: str, client: Client) -> Optional[Client]:
        self._record("update")
        if id not in self.clients:
            return None
        holder = self._find_document(client.identity_document_number, client.identity_document_type)
        if holder and holder.id != id:
            return None
        return self.add(replace(client, id=id))

    async def delete(self, id: str) -> Optional[Client]:
        self._record("delete")
        return self.clients.pop(id, None)

    async def find_top_by_identity_document_number_and_identity_document_type(
        self, identity_document_number: str, identity_document_type: str
    ) -> Optional[Client]:
        self._record("find_top_by_identity_document")
        return self._find_document(identity_document_number, identity_document_type)

    def _find_document(self, number: str, document_type: str) -> Optional[Client]:
        for client in self.clients.values():
            if client.has_identity_document(number, document_type):
                return client
        return None


class InMemoryClientRepository(IClientRepository):
    """Dict-backed client repository, insertion ordered.

    Like the unique index on the clients table, create and update return
    None when the identity document belongs to another client.
    """

    def __init__(self) -> None:
        self.clients: Dict[str, Client] = {}

    async def stream_all(self) -> AsyncIterator[Client]:
        for client in list(self.clients.values()):
            yield client

    async def get(self, id) -> Optional[Client]:
        return self.clients.get(id)

    async def get_by_identity_document(self, number: str, document_type: str) -> Optional[Client]:
        for client in self.clients.values():
            if client.has_identity_document(number, document_type):
                return client
        return None

    async def create(self, client: Client) -> Optional[Client]:
        if self._taken_by_other(client):
            return None
        stored = replace(client, created_at=datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc))
        self.clients[stored.id] = stored
        return stored

    async def update(self, id, client: Client) -> Optional[Client]:
        current = self.clients.get(id)
        if current is None or self._taken_by_other(replace(client, id=id)):
            return None
        stored = replace(client, id=id, created_at=current.created_at)
        self.clients[id] = stored
        return stored

    async def delete(self, id) -> Optional[Client]:
        return self.clients.pop(id, None)

    def _taken_by_other(self, client: Client) -> bool:
        return any(
            other.id != client.id
            and other.has_identity_document(client.identity_document_number, client.identity_document_type)
            for other in self.clients.values()
        )


@pytest.fixture
def client_mapper() -> ClientMapper:
    return ClientMapper()


@pytest.fixture
def client_factory():
    """Builds domain clients with valid defaults."""
    return make_client


@pytest.fixture
def sample_client() -> Client:
    """Client c1 identified by DNI 123."""
    return make_client()


@pytest.fixture
def client_service() -> InMemoryClientService:
    return InMemoryClientService()


@pytest.fixture
def client_repository() -> InMemoryClientRepository:
    return InMemoryClientRepository()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, APP_NAME="client-service", SERVER_PORT="8080")


@pytest.fixture
def http_client(test_settings: Settings, client_service: InMemoryClientService) -> TestClient:
    app = create_app(settings=test_settings, client_service=client_service)
    with TestClient(app) as client:
        yield client
