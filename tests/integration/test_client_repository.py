"""Tests for AsyncClientRepository against a SQLite database (aiosqlite)."""

import asyncio

import pytest

from client_api.adapters.outbound.persistence.database import (
    build_engine,
    build_session_factory,
    create_tables,
)
from client_api.adapters.outbound.persistence.repositories.client_repository import AsyncClientRepository
from client_api.domain.exceptions import DatabaseOperationException


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'clients.db'}"


@pytest.fixture
def run(database_url):
    """Runs ``scenario(repository)`` on a fresh database and returns its result."""

    def runner(scenario, with_tables: bool = True):
        async def main():
            engine = build_engine(database_url)
            try:
                if with_tables:
                    await create_tables(engine)
                return await scenario(AsyncClientRepository(build_session_factory(engine)))
            finally:
                await engine.dispose()

        return asyncio.run(main())

    return runner


class TestCreateAndGet:
    def test_round_trips_every_field(self, run, sample_client):
        async def scenario(repository):
            created = await repository.create(sample_client)
            return created, await repository.get("c1")

        created, fetched = run(scenario)

        assert fetched == created
        assert fetched.first_name == "Ana"
        assert fetched.email == "ana.torres@example.com"
        assert fetched.created_at is not None

    def test_missing_id_returns_none(self, run):
        async def scenario(repository):
            return await repository.get("missing")

        assert run(scenario) is None


class TestIdentityDocument:
    def test_finds_by_number_and_type(self, run, client_factory):
        async def scenario(repository):
            await repository.create(client_factory(id="c0", identity_document_type="CE"))
            await repository.create(client_factory(id="c1", identity_document_type="DNI"))
            return (
                await repository.get_by_identity_document("123", "DNI"),
                await repository.get_by_identity_document("123", "PASSPORT"),
            )

        found, missing = run(scenario)

        assert found.id == "c1"
        assert missing is None

    def test_duplicate_document_is_not_created(self, run, client_factory):
        async def scenario(repository):
            first = await repository.create(client_factory(id="c1"))
            second = await repository.create(client_factory(id="c2", first_name="Other"))
            return first, second, [client async for client in repository.stream_all()]

        first, second, stored = run(scenario)

        assert first.id == "c1"
        assert second is None
        assert [client.id for client in stored] == ["c1"]

    def test_update_onto_another_clients_document_is_refused(self, run, client_factory):
        async def scenario(repository):
            await repository.create(client_factory(id="c1", identity_document_number="123"))
            await repository.create(client_factory(id="c2", identity_document_number="456"))
            refused = await repository.update("c2", client_factory(id="c2", identity_document_number="123"))
            return refused, await repository.get("c2")

        refused, unchanged = run(scenario)

        assert refused is None
        assert unchanged.identity_document_number == "456"


class TestUpdate:
    def test_replaces_writable_fields(self, run, sample_client, client_factory):
        async def scenario(repository):
            created = await repository.create(sample_client)
            updated = await repository.update("c1", client_factory(id="c1", last_name="Rojas", email=None))
            return created, updated, await repository.get("c1")

        created, updated, fetched = run(scenario)

        assert updated.last_name == "Rojas"
        assert updated.email is None
        assert updated.created_at == created.created_at
        assert updated.updated_at is not None
        assert fetched == updated

    def test_missing_id_returns_none(self, run, sample_client):
        async def scenario(repository):
            return await repository.update("missing", sample_client)

        assert run(scenario) is None


class TestDelete:
    def test_returns_deleted_client_and_removes_it(self, run, sample_client):
        async def scenario(repository):
            await repository.create(sample_client)
            deleted = await repository.delete("c1")
            return deleted, await repository.get("c1")

        deleted, fetched = run(scenario)

        assert deleted.id == "c1"
        assert fetched is None

    def test_missing_id_returns_none(self, run):
        async def scenario(repository):
            return await repository.delete("missing")

        assert run(scenario) is None


class TestStreamAll:
    def test_streams_every_client(self, run, client_factory):
        async def scenario(repository):
            for index in range(3):
                await repository.create(client_factory(id=f"c{index}", identity_document_number=str(index)))
            return [client async for client in repository.stream_all()]

        streamed = run(scenario)

        assert sorted(client.id for client in streamed) == ["c0", "c1", "c2"]

    def test_empty_table(self, run):
        async def scenario(repository):
            return [client async for client in repository.stream_all()]

        assert run(scenario) == []


class TestDatabaseErrors:
    def test_missing_table_raises_database_operation_exception(self, run):
        async def scenario(repository):
            return await repository.get("c1")

        with pytest.raises(DatabaseOperationException):
            run(scenario, with_tables=False)
