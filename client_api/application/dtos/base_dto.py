# client_api/application/dtos/base_dto.py

"""
Classe base para dtos personalizados.

Este módulo define a classe base CustomBaseModel que estende
o BaseModel do Pydantic com funcionalidades adicionais comuns
a todos os dtos da aplicação.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Any, Dict


class CustomBaseModel(BaseModel):
    """
    Modelo base personalizado para todos os dtos da aplicação.

    Os campos são expostos em camelCase no JSON (``identityDocumentNumber``),
    mas também aceitos pelo nome em snake_case na entrada. Campos com valor
    None são omitidos na serialização.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_wire(self) -> Dict[str, Any]:
        """
        Serializa o modelo para um dicionário JSON-compatível.

        Returns:
            Dict[str, Any]: Dicionário com chaves em camelCase, excluindo valores None
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_wire_json(self) -> str:
        """Mesmo que to_wire, já como texto JSON."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
