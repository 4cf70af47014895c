# client_api/adapters/inbound/api/mappers/client_mapper.py

from client_api.application.dtos.client_dto import ClientModel
from client_api.domain.models.client_domain_model import Client


class ClientMapper:
    """Converts between the domain Client and its wire model."""

    def entity_to_model(self, client: Client) -> ClientModel:
        return ClientModel(
            id=client.id,
            first_name=client.first_name,
            last_name=client.last_name,
            identity_document_type=client.identity_document_type,
            identity_document_number=client.identity_document_number,
            email=client.email,
            phone_number=client.phone_number,
        )

    def model_to_entity(self, model: ClientModel) -> Client:
        return Client(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            identity_document_type=model.identity_document_type,
            identity_document_number=model.identity_document_number,
            email=str(model.email) if model.email else None,
            phone_number=model.phone_number,
        )
