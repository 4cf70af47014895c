"""Tests for ClientMapper."""

from client_api.adapters.inbound.api.mappers.client_mapper import ClientMapper
from client_api.application.dtos.client_dto import ClientModel


class TestEntityToModel:
    def test_copies_every_wire_field(self, client_mapper: ClientMapper, sample_client):
        model = client_mapper.entity_to_model(sample_client)

        assert model.id == "c1"
        assert model.first_name == "Ana"
        assert model.last_name == "Torres"
        assert model.identity_document_type == "DNI"
        assert model.identity_document_number == "123"
        assert model.email == "ana.torres@example.com"
        assert model.phone_number == "+51 999 888 777"

    def test_optional_fields_are_left_out_of_the_wire(self, client_mapper, client_factory):
        model = client_mapper.entity_to_model(client_factory(email=None, phone_number=None))

        assert "email" not in model.to_wire()
        assert "phoneNumber" not in model.to_wire()


class TestModelToEntity:
    def test_builds_domain_client(self, client_mapper: ClientMapper):
        model = ClientModel(
            firstName="Luis",
            lastName="Quispe",
            identityDocumentType="DNI",
            identityDocumentNumber="45678912",
            email="luis@example.com",
        )

        client = client_mapper.model_to_entity(model)

        assert client.id is None
        assert client.first_name == "Luis"
        assert client.identity_document_number == "45678912"
        assert client.email == "luis@example.com"
        assert client.phone_number is None
        assert client.created_at is None

    def test_carries_the_model_id(self, client_mapper, sample_client):
        model = client_mapper.entity_to_model(sample_client)

        assert client_mapper.model_to_entity(model).id == "c1"
