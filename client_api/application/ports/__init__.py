# client_api/application/ports/__init__.py

from client_api.application.ports.inbound import IClientService
from client_api.application.ports.outbound import IClientRepository

__all__ = ["IClientService", "IClientRepository"]
