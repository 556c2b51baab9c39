"""
Document schema and wire codec for the CRPT documents API.
"""

from .models import Document, DocumentDescription, DocumentProduct, DocType
from .serializer import DocumentSerializer

__all__ = [
    "Document",
    "DocumentDescription",
    "DocumentProduct",
    "DocType",
    "DocumentSerializer",
]
