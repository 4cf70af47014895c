# client_api/adapters/inbound/api/mappers/__init__.py

from client_api.adapters.inbound.api.mappers.client_mapper import ClientMapper

__all__ = ["ClientMapper"]
