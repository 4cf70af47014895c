# client_api/application/dtos/client_dto.py

"""
Schemas para dados de client (cliente).

Este módulo define o dto Pydantic para validação e serialização
dos dados de client trocados com a API.
"""

from typing import Optional
from pydantic import EmailStr, Field, field_validator

from client_api.application.dtos.base_dto import CustomBaseModel
from client_api.shared.utils.input_validation import InputValidator


class ClientModel(CustomBaseModel):
    """
    Representação de um client na API.

    Usado tanto na entrada (POST/PUT, validado) quanto na saída.
    O ``id`` é ignorado na escrita: vale o id do path ou o gerado na criação.
    """
    id: Optional[str] = Field(None, description="Identificador do client")
    first_name: str = Field(..., min_length=1, max_length=100, description="Nome do client")
    last_name: str = Field(..., min_length=1, max_length=100, description="Sobrenome do client")
    identity_document_type: str = Field(
        ..., min_length=1, max_length=20, description="Tipo do documento de identidade (ex: DNI)"
    )
    identity_document_number: str = Field(
        ..., min_length=1, max_length=20, description="Número do documento de identidade"
    )
    email: Optional[EmailStr] = Field(None, description="Email do client")
    phone_number: Optional[str] = Field(None, max_length=20, description="Telefone do client")

    @field_validator("first_name", "last_name")
    def validate_name_security(cls, v):
        """
        Valida nomes para evitar injeções e normaliza espaços.

        Raises:
            ValueError: Se o nome for inválido
        """
        is_valid, error_msg = InputValidator.validate_name(v)
        if not is_valid:
            raise ValueError(error_msg)
        return InputValidator.sanitize_name(v)

    @field_validator("identity_document_type")
    def normalize_document_type(cls, v):
        v = InputValidator.normalize_document_type(v)
        is_valid, error_msg = InputValidator.validate_document_type(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v

    @field_validator("identity_document_number")
    def validate_document_number(cls, v):
        is_valid, error_msg = InputValidator.validate_document_number(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v

    @field_validator("phone_number")
    def validate_phone_number(cls, v):
        if v is None:
            return v
        is_valid, error_msg = InputValidator.validate_phone(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v
