"""
Document models for identity and residency records.
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DocumentType(str, Enum):
    """Document types the dependency analyzer knows about."""

    PASSPORT = "passport"
    UAE_VISA = "uae_visa"
    EMIRATES_ID = "emirates_id"
    EJARI = "ejari"
    HEALTH_INSURANCE = "health_insurance"


class DocumentStatus(str, Enum):
    """Statuses derived for display from a document's expiry date."""

    VALID = "valid"
    WARNING = "warning"
    EXPIRED = "expired"


DOCUMENT_TYPE_NAMES = {
    DocumentType.PASSPORT: "Passport",
    DocumentType.UAE_VISA: "UAE Visa",
    DocumentType.EMIRATES_ID: "Emirates ID",
    DocumentType.EJARI: "Ejari",
    DocumentType.HEALTH_INSURANCE: "Health Insurance",
}


def document_type_name(doc_type: str) -> str:
    """Display name for a document type; unknown types are shown as-is."""
    try:
        return DOCUMENT_TYPE_NAMES[DocumentType(doc_type)]
    except ValueError:
        return doc_type


class Document(BaseModel):
    """
    A single identity or residency document.

    Only ``type`` and ``expiry_date`` feed the dependency analysis; the
    remaining fields are carried for display.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str = Field(..., min_length=1, description="Opaque unique identifier")
    type: str = Field(..., min_length=1, description="Document type identifier")
    expiry_date: date = Field(..., description="Last day the document is valid")
    status: str = Field(
        default=DocumentStatus.VALID.value,
        description="Free-text status hint from the upstream source",
    )

    # Display-only
    number: str | None = None
    holder_name: str | None = None
    issue_date: date | None = None
    issuing_authority: str | None = None

    @property
    def display_name(self) -> str:
        return document_type_name(self.type)

    @property
    def is_known_type(self) -> bool:
        return self.type in {t.value for t in DocumentType}
