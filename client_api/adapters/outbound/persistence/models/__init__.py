# client_api/adapters/outbound/persistence/models/__init__.py

"""
Módulo de modelos de dados.

Exporta os modelos SQLAlchemy do sistema.
"""

from client_api.adapters.outbound.persistence.database import Base
from client_api.adapters.outbound.persistence.models.client_model import Client

__all__ = [
    "Base",
    "Client",
]
