# client_api/adapters/outbound/persistence/models/client_model.py

"""
Modelo ORM de client.

Este módulo define o modelo Client persistido na tabela ``clients``.
"""

from sqlalchemy import Column, String, DateTime, Index, func
from client_api.adapters.outbound.persistence.database import Base


class Client(Base):
    """
    Modelo que representa um client (cliente) cadastrado.

    Attributes:
        id: Identificador opaco do client
        first_name: Nome
        last_name: Sobrenome
        identity_document_type: Tipo do documento de identidade (ex: DNI)
        identity_document_number: Número do documento de identidade
        email: Email (opcional)
        phone_number: Telefone (opcional)
        created_at: Data e hora de criação
        updated_at: Data e hora da última atualização
    """
    __tablename__ = "clients"
    __table_args__ = (
        Index("ix_clients_identity_document", "identity_document_number", "identity_document_type", unique=True),
    )

    id = Column(String(64), primary_key=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    identity_document_type = Column(String(20), nullable=False)
    identity_document_number = Column(String(20), nullable=False)
    email = Column(String(255), nullable=True)
    phone_number = Column(String(20), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    def __repr__(self) -> str:
        """Representação em string do objeto Client."""
        return (
            f"<Client(id={self.id}, document={self.identity_document_type} "
            f"{self.identity_document_number})>"
        )
