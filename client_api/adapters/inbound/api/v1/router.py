# client_api/adapters/inbound/api/v1/router.py

from fastapi import APIRouter

from client_api.adapters.inbound.api.v1.endpoints.client_endpoint import ClientEndpoint


def build_api_router(client_endpoint: ClientEndpoint) -> APIRouter:
    api_router = APIRouter()

    # Incluir os routers dos endpoints
    api_router.include_router(client_endpoint.router, prefix="/v1/client", tags=["Client"])

    return api_router
