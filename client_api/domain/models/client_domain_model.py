# client_api/domain/models/client_domain_model.py

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Client:
    """Domain model for a client (customer) entity."""
    id: Optional[str]  # Opaque identifier, assigned on creation
    first_name: str
    last_name: str
    identity_document_type: str
    identity_document_number: str
    email: Optional[str] = None
    phone_number: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def has_identity_document(self, number: str, document_type: str) -> bool:
        """Check if the client is identified by the given document."""
        return (
            self.identity_document_number == number
            and self.identity_document_type == document_type
        )
