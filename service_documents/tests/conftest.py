"""
Shared fixtures for document submitter tests.
"""

import pytest

from service_documents.app.documents import Document, DocumentDescription, DocumentProduct, DocType


@pytest.fixture
def sample_product():
    """A fully populated product line."""
    return DocumentProduct(
        certificate_document="CONFORMITY_CERTIFICATE",
        certificate_document_date="2024-01-15",
        certificate_document_number="RU-C-001",
        owner_inn="7701234567",
        producer_inn="7707654321",
        production_date="2024-01-10",
        tnved_code="6403990000",
        uit_code="010460123456789021ABC",
        uitu_code=None,
        reg_date="2024-01-20",
        reg_number="REG-42"
    )


@pytest.fixture
def sample_document(sample_product):
    """A goods introduction document."""
    return Document(
        description=DocumentDescription(participant_inn="7701234567"),
        doc_id="doc-001",
        doc_status="DRAFT",
        doc_type=DocType.LP_INTRODUCE_GOODS,
        import_request=True,
        owner_inn="7701234567",
        participant_inn="7701234567",
        producer_inn="7707654321",
        production_date="2024-01-10",
        production_type="OWN_PRODUCTION",
        products=(sample_product,)
    )
