"""
In-memory document store and JSON document loading.
"""

import json
from datetime import date, timedelta
from functools import lru_cache
from pathlib import Path
from typing import Any

import structlog
from pydantic import TypeAdapter

from expatos.analysis.analyzer import index_documents
from expatos.analysis.dates import to_date, utc_now
from expatos.config import get_settings
from expatos.models.document import Document, DocumentStatus, DocumentType

logger = structlog.get_logger(__name__)

_documents_adapter = TypeAdapter(list[Document])


def parse_documents(payload: Any) -> list[Document]:
    """
    Validate a JSON payload into documents.

    Accepts a bare array or an object with a ``documents`` array.
    """
    if isinstance(payload, dict):
        if "documents" not in payload:
            raise ValueError("Expected a 'documents' array")
        payload = payload["documents"]

    if not isinstance(payload, list):
        raise ValueError(f"Expected a list of documents, got: {type(payload).__name__}")

    return _documents_adapter.validate_python(payload)


def load_json(file_path: Path | str) -> list[Document]:
    """Load documents from a JSON file."""
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Documents file not found: {file_path}")

    try:
        payload = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_path}: {e}") from e

    documents = parse_documents(payload)
    logger.info("documents_loaded", file=str(file_path), count=len(documents))
    return documents


def demo_documents(today: date | None = None) -> list[Document]:
    """
    Demo profile with dates relative to ``today``.

    The visa sits just outside the one-year analysis horizon while the
    passport is short and the health insurance has lapsed.
    """
    today = today or to_date(utc_now())

    def days(n: int) -> date:
        return today + timedelta(days=n)

    holder = "John Smith"
    return [
        Document(
            id="1",
            type=DocumentType.PASSPORT.value,
            number="N1234567",
            holder_name=holder,
            issue_date=days(150 - 5 * 365),
            expiry_date=days(150),
            issuing_authority="US Department of State",
            status=DocumentStatus.WARNING.value,
        ),
        Document(
            id="2",
            type=DocumentType.UAE_VISA.value,
            number="UAE789654",
            holder_name=holder,
            issue_date=days(395 - 2 * 365),
            expiry_date=days(395),
            issuing_authority="UAE Immigration",
            status=DocumentStatus.VALID.value,
        ),
        Document(
            id="3",
            type=DocumentType.EMIRATES_ID.value,
            number="EID123456789",
            holder_name=holder,
            issue_date=days(400 - 2 * 365),
            expiry_date=days(400),
            issuing_authority="Federal Authority for Identity",
            status=DocumentStatus.VALID.value,
        ),
        Document(
            id="4",
            type=DocumentType.EJARI.value,
            number="EJ2024-4567",
            holder_name=holder,
            issue_date=days(400 - 365),
            expiry_date=days(400),
            issuing_authority="Dubai Land Department",
            status=DocumentStatus.VALID.value,
        ),
        Document(
            id="5",
            type=DocumentType.HEALTH_INSURANCE.value,
            number="HI-UAE-9876",
            holder_name=holder,
            issue_date=days(-5 - 365),
            expiry_date=days(-5),
            issuing_authority="Dubai Insurance Company",
            status=DocumentStatus.EXPIRED.value,
        ),
    ]


def _search_text(document: Document) -> str:
    fields = [
        document.id,
        document.type,
        document.display_name,
        document.number,
        document.holder_name,
        document.issuing_authority,
    ]
    return " ".join(f for f in fields if f).lower()


class DocumentStore:
    """
    Insertion-ordered, in-memory document collection.

    Stands in for the upload pipeline; nothing is persisted.
    """

    def __init__(self, reject_duplicate_types: bool = False):
        self.reject_duplicate_types = reject_duplicate_types
        self._documents: dict[str, Document] = {}

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, document_id: str) -> bool:
        return document_id in self._documents

    def list_documents(self) -> list[Document]:
        """Snapshot of the stored documents in insertion order."""
        return list(self._documents.values())

    def search(self, query: str | None = None, doc_type: str | None = None) -> list[Document]:
        """
        Filter stored documents by type and free text.

        ``query`` is matched case-insensitively against the id, type,
        display name, number, holder name and issuing authority.
        """
        results = self.list_documents()

        if doc_type:
            results = [d for d in results if d.type == doc_type]

        if query and query.strip():
            needle = query.strip().lower()
            results = [d for d in results if needle in _search_text(d)]

        return results

    def get(self, document_id: str) -> Document | None:
        return self._documents.get(document_id)

    def add(self, document: Document) -> Document:
        """Add or replace a document by id."""
        if self.reject_duplicate_types:
            others = [d for d in self._documents.values() if d.id != document.id]
            index_documents(others + [document], reject_duplicates=True)

        replaced = document.id in self._documents
        self._documents[document.id] = document
        logger.info(
            "document_stored",
            document_id=document.id,
            document_type=document.type,
            replaced=replaced,
        )
        return document

    def remove(self, document_id: str) -> bool:
        """Remove a document; returns False when it was not stored."""
        removed = self._documents.pop(document_id, None)
        if removed is not None:
            logger.info("document_removed", document_id=document_id)
        return removed is not None

    def replace_all(self, documents: list[Document]) -> None:
        """Swap the whole collection for ``documents``."""
        if self.reject_duplicate_types:
            index_documents(documents, reject_duplicates=True)

        ids = [d.id for d in documents]
        if len(ids) != len(set(ids)):
            raise ValueError("Document ids must be unique")

        self._documents = {d.id: d for d in documents}
        logger.info("documents_replaced", count=len(documents))

    def clear(self) -> int:
        count = len(self._documents)
        self._documents.clear()
        return count


@lru_cache()
def get_document_store() -> DocumentStore:
    """Get cached document store instance, seeded per settings."""
    settings = get_settings()
    store = DocumentStore(reject_duplicate_types=settings.reject_duplicate_types)

    if settings.documents_file is not None:
        store.replace_all(load_json(settings.documents_file))
    elif settings.seed_demo_data:
        store.replace_all(demo_documents())

    return store
