"""
Document models mirroring the CRPT "create document" payload.

Field names follow the external API exactly: most keys are snake_case, but
``Description``, ``importRequest`` and ``participantInn`` are not, so those
carry aliases. Values are immutable once built.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class DocType(str, Enum):
    """Document type enumeration."""
    LP_INTRODUCE_GOODS = "LP_INTRODUCE_GOODS"


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


class DocumentDescription(_WireModel):
    """Document description block."""
    participant_inn: Optional[str] = Field(None, alias="participantInn", description="Participant INN")


class DocumentProduct(_WireModel):
    """A single product line of the document."""
    certificate_document: Optional[str] = Field(None, description="Certificate document type")
    certificate_document_date: Optional[str] = Field(None, description="Certificate date")
    certificate_document_number: Optional[str] = Field(None, description="Certificate number")
    owner_inn: Optional[str] = Field(None, description="Owner INN")
    producer_inn: Optional[str] = Field(None, description="Producer INN")
    production_date: Optional[str] = Field(None, description="Production date")
    tnved_code: Optional[str] = Field(None, description="TN VED commodity code")
    uit_code: Optional[str] = Field(None, description="Unique identification code")
    uitu_code: Optional[str] = Field(None, description="Unique transport package code")
    reg_date: Optional[str] = Field(None, description="Registration date")
    reg_number: Optional[str] = Field(None, description="Registration number")


class Document(_WireModel):
    """Goods introduction document."""
    description: Optional[DocumentDescription] = Field(None, alias="Description", description="Description block")
    doc_id: Optional[str] = Field(None, description="Document ID")
    doc_status: Optional[str] = Field(None, description="Document status")
    doc_type: DocType = Field(DocType.LP_INTRODUCE_GOODS, description="Document type")
    import_request: Optional[bool] = Field(None, alias="importRequest", description="Import flag")
    owner_inn: Optional[str] = Field(None, description="Owner INN")
    participant_inn: Optional[str] = Field(None, description="Participant INN")
    producer_inn: Optional[str] = Field(None, description="Producer INN")
    production_date: Optional[str] = Field(None, description="Production date")
    production_type: Optional[str] = Field(None, description="Production type")
    products: Tuple[DocumentProduct, ...] = Field(default=(), description="Products")
