"""Shared pytest fixtures for the ExpatOS test suite."""

from datetime import date, timedelta

import pytest

from expatos.models.document import Document, DocumentType


# Every test runs against this fixed reference date
NOW = date(2025, 1, 15)


# ---------------------------------------------------------------------------
# Singleton cache clearing (autouse)
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clear_singletons():
    """Clear all @lru_cache singletons between tests."""
    from expatos.config import get_settings
    from expatos.services.document_store import get_document_store

    get_settings.cache_clear()
    get_document_store.cache_clear()
    yield
    get_settings.cache_clear()
    get_document_store.cache_clear()


# ---------------------------------------------------------------------------
# Sample data fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_document():
    """Factory for documents expiring ``days`` after the reference date."""
    def _make(doc_type, days, doc_id=None, **kwargs):
        if isinstance(doc_type, DocumentType):
            doc_type = doc_type.value
        return Document(
            id=doc_id or doc_type,
            type=doc_type,
            expiry_date=NOW + timedelta(days=days),
            **kwargs,
        )
    return _make


@pytest.fixture
def reference_documents(make_document):
    """Visa just beyond the one-year horizon; health insurance lapsed."""
    return [
        make_document(DocumentType.PASSPORT, 150),
        make_document(DocumentType.UAE_VISA, 395),
        make_document(DocumentType.HEALTH_INSURANCE, -5),
        make_document(DocumentType.EJARI, 400),
        make_document(DocumentType.EMIRATES_ID, 400),
    ]


@pytest.fixture
def gate_open_documents(make_document):
    """Same profile with the visa inside the horizon (300 days)."""
    return [
        make_document(DocumentType.PASSPORT, 150),
        make_document(DocumentType.UAE_VISA, 300),
        make_document(DocumentType.HEALTH_INSURANCE, -5),
        make_document(DocumentType.EJARI, 400),
        make_document(DocumentType.EMIRATES_ID, 400),
    ]


@pytest.fixture
def healthy_documents(make_document):
    """Visa inside the horizon with every dependency comfortably valid."""
    return [
        make_document(DocumentType.PASSPORT, 1500),
        make_document(DocumentType.UAE_VISA, 200),
        make_document(DocumentType.HEALTH_INSURANCE, 300),
        make_document(DocumentType.EJARI, 250),
        make_document(DocumentType.EMIRATES_ID, 200),
    ]
