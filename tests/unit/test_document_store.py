"""Tests for expatos/services/document_store.py — in-memory store and loaders."""

import json
from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from expatos.models.document import DocumentType
from expatos.services.document_store import (
    DocumentStore, demo_documents, get_document_store, load_json, parse_documents,
)


class TestDocumentStore:

    def test_add_and_get(self, make_document):
        store = DocumentStore()
        doc = make_document(DocumentType.PASSPORT, 100)
        store.add(doc)
        assert store.get("passport") == doc
        assert "passport" in store
        assert len(store) == 1

    def test_insertion_order(self, reference_documents):
        store = DocumentStore()
        for doc in reference_documents:
            store.add(doc)
        assert store.list_documents() == reference_documents

    def test_add_replaces_same_id(self, make_document):
        store = DocumentStore()
        store.add(make_document(DocumentType.PASSPORT, 100))
        store.add(make_document(DocumentType.PASSPORT, 500))
        assert len(store) == 1
        assert store.get("passport").expiry_date.year == 2026

    def test_search_by_text_and_type(self, now):
        store = DocumentStore()
        store.replace_all(demo_documents(now))
        assert [d.id for d in store.search(query="dubai")] == ["4", "5"]
        assert [d.id for d in store.search(query="  EMIRATES id ")] == ["3"]
        assert [d.id for d in store.search(doc_type="ejari")] == ["4"]
        assert store.search(query="dubai", doc_type="passport") == []
        assert len(store.search()) == 5

    def test_remove(self, make_document):
        store = DocumentStore()
        store.add(make_document(DocumentType.EJARI, 100))
        assert store.remove("ejari") is True
        assert store.remove("ejari") is False
        assert store.get("ejari") is None

    def test_clear(self, reference_documents):
        store = DocumentStore()
        store.replace_all(reference_documents)
        assert store.clear() == 5
        assert store.list_documents() == []

    def test_replace_all_rejects_duplicate_ids(self, make_document):
        store = DocumentStore()
        docs = [
            make_document(DocumentType.PASSPORT, 100, doc_id="x"),
            make_document(DocumentType.EJARI, 100, doc_id="x"),
        ]
        with pytest.raises(ValueError, match="unique"):
            store.replace_all(docs)

    def test_reject_duplicate_types(self, make_document):
        store = DocumentStore(reject_duplicate_types=True)
        store.add(make_document(DocumentType.PASSPORT, 100, doc_id="p1"))
        with pytest.raises(ValueError):
            store.add(make_document(DocumentType.PASSPORT, 200, doc_id="p2"))

    def test_reject_duplicate_types_allows_replacing_same_id(self, make_document):
        store = DocumentStore(reject_duplicate_types=True)
        store.add(make_document(DocumentType.PASSPORT, 100, doc_id="p1"))
        store.add(make_document(DocumentType.PASSPORT, 200, doc_id="p1"))
        assert len(store) == 1

    def test_duplicate_types_allowed_by_default(self, make_document):
        store = DocumentStore()
        store.add(make_document(DocumentType.PASSPORT, 100, doc_id="p1"))
        store.add(make_document(DocumentType.PASSPORT, 200, doc_id="p2"))
        assert len(store) == 2


class TestLoaders:

    def test_parse_array(self):
        docs = parse_documents([{"id": "1", "type": "passport", "expiryDate": "2025-03-15"}])
        assert docs[0].expiry_date == date(2025, 3, 15)

    def test_parse_wrapped(self):
        docs = parse_documents({"documents": [{"id": "1", "type": "ejari", "expiryDate": "2025-11-01"}]})
        assert docs[0].type == "ejari"

    def test_parse_rejects_other_shapes(self):
        with pytest.raises(ValueError):
            parse_documents({"items": []})
        with pytest.raises(ValueError):
            parse_documents("passport")

    def test_parse_rejects_bad_dates(self):
        with pytest.raises(ValidationError):
            parse_documents([{"id": "1", "type": "passport", "expiryDate": "soon"}])

    def test_load_json(self, tmp_path):
        path = tmp_path / "docs.json"
        path.write_text(json.dumps([
            {"id": "2", "type": "uae_visa", "expiryDate": "2025-12-01", "status": "valid"},
        ]))
        docs = load_json(path)
        assert len(docs) == 1
        assert docs[0].type == "uae_visa"

    def test_load_json_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_json(tmp_path / "missing.json")

    def test_load_json_invalid(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_json(path)


class TestDemoDocuments:

    def test_relative_dates(self, now):
        docs = {d.type: d for d in demo_documents(now)}
        assert docs["passport"].expiry_date == now + timedelta(days=150)
        assert docs["uae_visa"].expiry_date == now + timedelta(days=395)
        assert docs["health_insurance"].expiry_date == now - timedelta(days=5)
        assert docs["ejari"].expiry_date == now + timedelta(days=400)
        assert docs["emirates_id"].expiry_date == now + timedelta(days=400)

    def test_one_document_per_type(self, now):
        types = [d.type for d in demo_documents(now)]
        assert len(types) == len(set(types)) == 5


class TestGetDocumentStore:

    def test_singleton(self):
        assert get_document_store() is get_document_store()

    def test_seeded_with_demo_data(self):
        assert len(get_document_store()) == 5

    def test_seeding_disabled(self, monkeypatch):
        monkeypatch.setenv("SEED_DEMO_DATA", "false")
        assert len(get_document_store()) == 0

    def test_documents_file(self, tmp_path, monkeypatch):
        path = tmp_path / "docs.json"
        path.write_text(json.dumps([{"id": "a", "type": "ejari", "expiryDate": "2026-01-01"}]))
        monkeypatch.setenv("DOCUMENTS_FILE", str(path))
        store = get_document_store()
        assert [d.id for d in store.list_documents()] == ["a"]
