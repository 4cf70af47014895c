# client_api/domain/__init__.py

"""
Componentes do domínio da aplicação: entidades e exceções.
"""

from client_api.domain.exceptions import DomainException, DatabaseOperationException
from client_api.domain.models import Client

__all__ = [
    "DomainException",
    "DatabaseOperationException",
    "Client",
]
