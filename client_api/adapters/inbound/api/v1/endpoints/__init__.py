# client_api/adapters/inbound/api/v1/endpoints/__init__.py

from client_api.adapters.inbound.api.v1.endpoints.client_endpoint import ClientEndpoint

__all__ = ["ClientEndpoint"]
