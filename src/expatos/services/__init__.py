"""
Service layer for ExpatOS.
"""

from expatos.services.document_store import (
    DocumentStore,
    demo_documents,
    get_document_store,
    load_json,
    parse_documents,
)

__all__ = [
    "DocumentStore",
    "demo_documents",
    "get_document_store",
    "load_json",
    "parse_documents",
]
