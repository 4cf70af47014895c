# client_api/adapters/inbound/api/v1/endpoints/client_endpoint.py

"""
Endpoints de CRUD de clients.

Este módulo contém o ClientEndpoint, que liga cada rota HTTP a uma operação
do serviço de clients. Nenhuma regra de negócio é aplicada aqui: apenas
binding de parâmetros, escolha do status HTTP e montagem do Location.
"""

import logging
from typing import Any, AsyncIterator, Awaitable, Callable, Dict, List, Tuple

from fastapi import APIRouter, Path, status
from fastapi.responses import JSONResponse, Response, StreamingResponse

from client_api.adapters.inbound.api.mappers.client_mapper import ClientMapper
from client_api.application.dtos.client_dto import ClientModel
from client_api.application.ports.inbound import IClientService
from client_api.domain.models.client_domain_model import Client

logger = logging.getLogger(__name__)

# (method, path, handler, add_api_route options)
Route = Tuple[str, str, Callable[..., Awaitable[Response]], Dict[str, Any]]

EMPTY_RESPONSE = {"description": "Empty body", "content": {}}


class ClientEndpoint:
    """
    HTTP binding of the client operations.

    Args:
        client_service: Service that performs the client operations
        client_mapper: Converts domain clients to/from the wire model
        name: Service name, host part of the Location header
        port: Service port, port part of the Location header
    """

    def __init__(self, client_service: IClientService, client_mapper: ClientMapper, name: str, port: str):
        self.client_service = client_service
        self.client_mapper = client_mapper
        self.name = name
        self.port = port
        self.router = self.build_router()

    def route_table(self) -> List[Route]:
        return [
            ("GET", "", self.get_all, {
                "response_model": List[ClientModel],
                "summary": "Get a list of clients",
                "description": "Get a list of clients registered in the system, streamed as a JSON array.",
            }),
            ("GET", "/{id}", self.get_by_id, {
                "response_model": ClientModel,
                "summary": "Get a client by ID",
                "responses": {404: {"description": "Client not found.", **EMPTY_RESPONSE}},
            }),
            ("POST", "", self.create, {
                "response_model": ClientModel,
                "status_code": status.HTTP_201_CREATED,
                "summary": "Create a client",
                "responses": {
                    400: {"description": "Invalid client data."},
                    404: {"description": "Client was not created.", **EMPTY_RESPONSE},
                },
            }),
            ("PUT", "/{id}", self.update_by_id, {
                "response_model": ClientModel,
                "status_code": status.HTTP_201_CREATED,
                "summary": "Update a client by ID",
                "responses": {400: {"description": "Invalid client data or client was not updated."}},
            }),
            ("DELETE", "/{id}", self.delete_by_id, {
                "summary": "Delete a client by ID",
                "responses": {
                    200: {"description": "Client deleted.", **EMPTY_RESPONSE},
                    404: {"description": "Client not found.", **EMPTY_RESPONSE},
                },
            }),
            ("GET", "/{identityDocumentNumber}/{identityDocumentType}", self.get_by_identity_document, {
                "response_model": ClientModel,
                "summary": "Get a client by identity document",
                "responses": {404: {"description": "Client not found.", **EMPTY_RESPONSE}},
            }),
        ]

    def build_router(self) -> APIRouter:
        router = APIRouter()
        for method, path, handler, options in self.route_table():
            router.add_api_route(path, handler, methods=[method], **options)
        return router

    async def get_all(self) -> Response:
        logger.info("get_all executed")
        return StreamingResponse(
            self._stream_models(self.client_service.find_all()),
            media_type="application/json",
        )

    async def get_by_id(
            self,
            id: str = Path(..., description="ID of the client"),
    ) -> Response:
        logger.info(f"get_by_id executed {id}")
        client = await self.client_service.find_by_id(id)
        if client is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return self._ok(client)

    async def create(self, client_model: ClientModel) -> Response:
        logger.info(f"create executed {client_model!r}")
        client = await self.client_service.create(self.client_mapper.model_to_entity(client_model))
        if client is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return self._created(client)

    async def update_by_id(
            self,
            client_model: ClientModel,
            id: str = Path(..., description="ID of the client to update"),
    ) -> Response:
        logger.info(f"update_by_id executed {id}:{client_model!r}")
        client = await self.client_service.update(id, self.client_mapper.model_to_entity(client_model))
        if client is None:
            return Response(status_code=status.HTTP_400_BAD_REQUEST)
        return self._created(client)

    async def delete_by_id(
            self,
            id: str = Path(..., description="ID of the client to delete"),
    ) -> Response:
        logger.info(f"delete_by_id executed {id}")
        deleted = await self.client_service.delete(id)
        if deleted is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return Response(status_code=status.HTTP_200_OK)

    async def get_by_identity_document(
            self,
            identity_document_number: str = Path(..., alias="identityDocumentNumber"),
            identity_document_type: str = Path(..., alias="identityDocumentType"),
    ) -> Response:
        logger.info(f"get_by_identity_document executed {identity_document_number} {identity_document_type}")
        client = await self.client_service.find_top_by_identity_document_number_and_identity_document_type(
            identity_document_number, identity_document_type
        )
        if client is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return self._ok(client)

    def location(self, id: str) -> str:
        return f"http://{self.name}:{self.port}/client/{id}"

    def _ok(self, client: Client) -> JSONResponse:
        model = self.client_mapper.entity_to_model(client)
        return JSONResponse(status_code=status.HTTP_200_OK, content=model.to_wire())

    def _created(self, client: Client) -> JSONResponse:
        model = self.client_mapper.entity_to_model(client)
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=model.to_wire(),
            headers={"Location": self.location(model.id)},
        )

    async def _stream_models(self, clients: AsyncIterator[Client]) -> AsyncIterator[str]:
        # Emits a JSON array one element at a time
        yield "["
        first = True
        async for client in clients:
            model = self.client_mapper.entity_to_model(client)
            yield model.to_wire_json() if first else "," + model.to_wire_json()
            first = False
        yield "]"
