# client_api/domain/exceptions.py

"""
Exceções de domínio da aplicação.

Exceções puras (sem dependência do FastAPI). O código HTTP de cada uma é
decidido pelo middleware de exceções a partir do ``internal_code``.
"""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """
    Exceção base para todas as exceções do domínio.
    """

    internal_code: str = "DOMAIN_ERROR"

    def __init__(self, detail: str = "Erro de domínio", details: Optional[Dict[str, Any]] = None):
        super().__init__(detail)
        self.detail = detail
        self.details = details or {}


class DatabaseOperationException(DomainException):
    """Erro na operação de banco de dados."""

    internal_code = "DATABASE_OPERATION_ERROR"

    def __init__(self, detail: str = "Erro ao executar operação no banco de dados",
                 original_error: Optional[Exception] = None):
        error_info = f": {str(original_error)}" if original_error else ""
        super().__init__(detail=f"{detail}{error_info}")
        self.original_error = original_error
