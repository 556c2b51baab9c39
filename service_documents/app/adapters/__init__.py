"""
Adapters package for the document submitter.

Contains the HTTP client wrapper for the external CRPT API. The adapter
encapsulates:

- The fixed endpoint URI and request shape
- Fire-and-forget dispatch and in-flight bookkeeping

Keep adapters thin and side-effect free outside of explicit calls.
"""

from .crpt_client import CrptApiClient, CRPT_CREATE_DOCUMENT_URL

__all__ = [
    "CrptApiClient",
    "CRPT_CREATE_DOCUMENT_URL",
]
