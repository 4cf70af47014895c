# client_api/shared/utils/input_validation.py

import re
from typing import Optional, Tuple


class InputValidator:
    """
    Classe para validação e sanitização de entradas do usuário,
    complementando as validações do Pydantic.
    """

    # Constantes para limites
    MAX_NAME_LENGTH = 100
    MAX_DOCUMENT_LENGTH = 20
    MAX_PHONE_LENGTH = 20

    # Permite letras (inclusive acentuadas), números, espaços, hífens, apóstrofes e pontos
    NAME_PATTERN = re.compile(r'^[A-Za-zÀ-ÖØ-öø-ÿ0-9\s\-\'\.]+$')
    DOCUMENT_NUMBER_PATTERN = re.compile(r'^[A-Za-z0-9]+$')
    DOCUMENT_TYPE_PATTERN = re.compile(r'^[A-Z0-9]+$')
    PHONE_PATTERN = re.compile(r'^[0-9\s\+\-\(\)]+$')
    # Caracteres potencialmente perigosos em entrada comum
    DANGEROUS_CHARS = re.compile(r'[<>\'";%{}\[\]]')

    @classmethod
    def validate_name(cls, name: str) -> Tuple[bool, Optional[str]]:
        """
        Valida um nome para prevenção de injeção.

        Args:
            name: String a ser validada

        Returns:
            Tupla (válido, mensagem_erro)
        """
        if not name or not name.strip():
            return False, "Name must not be blank"

        if len(name) > cls.MAX_NAME_LENGTH:
            return False, f"Name is too long (max {cls.MAX_NAME_LENGTH} characters)"

        if cls.DANGEROUS_CHARS.search(name):
            return False, "Name contains forbidden characters"

        if not cls.NAME_PATTERN.match(name):
            return False, "Name contains invalid characters"

        return True, None

    @classmethod
    def sanitize_name(cls, name: str) -> str:
        """
        Remove espaços extras de um nome.
        """
        return re.sub(r'\s+', ' ', name.strip())

    @classmethod
    def validate_document_number(cls, number: str) -> Tuple[bool, Optional[str]]:
        """
        Valida o número de um documento de identidade (alfanumérico).
        """
        if not number or not number.strip():
            return False, "Identity document number must not be blank"

        if len(number) > cls.MAX_DOCUMENT_LENGTH:
            return False, f"Identity document number is too long (max {cls.MAX_DOCUMENT_LENGTH} characters)"

        if not cls.DOCUMENT_NUMBER_PATTERN.match(number):
            return False, "Identity document number must be alphanumeric"

        return True, None

    @classmethod
    def normalize_document_type(cls, document_type: str) -> str:
        """
        Forma canônica do tipo de documento (sem espaços, maiúsculas).

        Aplicada tanto na escrita quanto na busca, para que ``dni`` e ``DNI``
        identifiquem o mesmo documento.
        """
        return document_type.strip().upper()

    @classmethod
    def validate_document_type(cls, document_type: str) -> Tuple[bool, Optional[str]]:
        """
        Valida um tipo de documento já normalizado (alfanumérico, pois
        também é usado como segmento de URL).
        """
        if not document_type:
            return False, "Identity document type must not be blank"

        if len(document_type) > cls.MAX_DOCUMENT_LENGTH:
            return False, f"Identity document type is too long (max {cls.MAX_DOCUMENT_LENGTH} characters)"

        if not cls.DOCUMENT_TYPE_PATTERN.match(document_type):
            return False, "Identity document type must be alphanumeric"

        return True, None

    @classmethod
    def validate_phone(cls, phone: str) -> Tuple[bool, Optional[str]]:
        if len(phone) > cls.MAX_PHONE_LENGTH:
            return False, f"Phone number is too long (max {cls.MAX_PHONE_LENGTH} characters)"

        if not cls.PHONE_PATTERN.match(phone):
            return False, "Phone number contains invalid characters"

        return True, None
