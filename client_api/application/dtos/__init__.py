# client_api/application/dtos/__init__.py

from client_api.application.dtos.base_dto import CustomBaseModel
from client_api.application.dtos.client_dto import ClientModel

__all__ = ["CustomBaseModel", "ClientModel"]
