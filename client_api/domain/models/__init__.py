# client_api/domain/models/__init__.py

from client_api.domain.models.client_domain_model import Client

__all__ = ["Client"]
