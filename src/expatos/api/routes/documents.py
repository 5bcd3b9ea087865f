"""
Document store routes.
"""

from typing import Any

import structlog
from fastapi import APIRouter, HTTPException, Query

from expatos.models.api import DocumentListResponse
from expatos.models.document import Document
from expatos.services.document_store import get_document_store

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.get("", response_model=DocumentListResponse)
async def list_documents(
    q: str | None = Query(None, description="Free-text search"),
    type: str | None = Query(None, description="Filter by document type"),
) -> DocumentListResponse:
    """
    List stored documents in insertion order, optionally filtered.
    """
    documents = get_document_store().search(query=q, doc_type=type)
    return DocumentListResponse(documents=documents, total=len(documents))


@router.get("/{document_id}", response_model=Document)
async def get_document(document_id: str) -> Document:
    """
    Get a stored document by ID.
    """
    document = get_document_store().get(document_id)
    if document is None:
        raise HTTPException(status_code=404, detail=f"Document not found: {document_id}")
    return document


@router.post("", response_model=Document, status_code=201)
async def add_document(document: Document) -> Document:
    """
    Add a document, replacing any stored document with the same ID.
    """
    try:
        return get_document_store().add(document)
    except ValueError as e:
        logger.warning("document_rejected", document_id=document.id, error=str(e))
        raise HTTPException(status_code=422, detail=str(e))


@router.delete("/{document_id}")
async def delete_document(document_id: str) -> dict[str, Any]:
    """
    Remove a document from the store.
    """
    if not get_document_store().remove(document_id):
        raise HTTPException(status_code=404, detail=f"Document not found: {document_id}")

    return {
        "document_id": document_id,
        "status": "deleted",
    }
