"""
JSON codec for CRPT documents.
"""

from typing import Any, Mapping, Union

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from shared.logging import get_logger
from shared.errors import SerializationError
from .models import Document


class DocumentSerializer:
    """Converts documents to and from the CRPT wire payload."""

    def __init__(self):
        self.logger = get_logger("documents.serializer")

    def serialize(self, document: Union[Document, Mapping[str, Any]]) -> bytes:
        """Encode a document as UTF-8 JSON using the API's field names.

        Mappings are validated into a ``Document`` first and may use either
        the wire keys or the Python field names.
        """
        try:
            if not isinstance(document, Document):
                document = Document.model_validate(document)
            return document.model_dump_json(by_alias=True).encode("utf-8")
        except ValidationError as e:
            self.logger.warning("Document failed validation", errors=e.error_count())
            raise SerializationError(
                "Document does not match the wire schema",
                details={"errors": e.errors(include_url=False, include_context=False)}
            ) from e
        except (PydanticSerializationError, TypeError) as e:
            self.logger.warning("Document could not be encoded", error=str(e))
            raise SerializationError(
                f"Document could not be encoded: {e}",
                details={"error": str(e)}
            ) from e

    def deserialize(self, payload: Union[bytes, str]) -> Document:
        """Decode a wire payload back into a ``Document``."""
        try:
            return Document.model_validate_json(payload)
        except ValidationError as e:
            raise SerializationError(
                "Payload is not a valid document",
                details={"errors": e.errors(include_url=False, include_context=False)}
            ) from e
