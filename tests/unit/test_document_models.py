"""Tests for expatos/models — document and API schemas."""

from datetime import date

import pytest
from pydantic import ValidationError

from expatos.models.api import AnalysisResponse, AnalyzeRequest
from expatos.models.document import (
    DOCUMENT_TYPE_NAMES, Document, DocumentStatus, DocumentType, document_type_name,
)


class TestEnums:

    def test_document_type_count(self):
        assert len(DocumentType) == 5

    def test_document_type_values(self):
        assert {t.value for t in DocumentType} == {
            "passport", "uae_visa", "emirates_id", "ejari", "health_insurance",
        }

    def test_status_values(self):
        assert {s.value for s in DocumentStatus} == {"valid", "warning", "expired"}

    def test_every_type_has_a_name(self):
        assert set(DOCUMENT_TYPE_NAMES) == set(DocumentType)


class TestDocument:

    def test_camel_case_input(self):
        doc = Document.model_validate({
            "id": "1", "type": "passport", "expiryDate": "2025-03-15",
            "holderName": "John Smith", "issuingAuthority": "US Department of State",
        })
        assert doc.expiry_date == date(2025, 3, 15)
        assert doc.holder_name == "John Smith"

    def test_snake_case_input(self):
        doc = Document(id="1", type="ejari", expiry_date=date(2025, 11, 1))
        assert doc.status == DocumentStatus.VALID
        assert doc.number is None

    def test_free_text_status_accepted(self):
        doc = Document.model_validate({
            "id": "1", "type": "uae_visa", "expiryDate": "2025-06-01", "status": "critical",
        })
        assert doc.status == "critical"

    def test_malformed_date_rejected(self):
        with pytest.raises(ValidationError):
            Document.model_validate({"id": "1", "type": "passport", "expiryDate": "15/03/2025"})

    def test_missing_expiry_rejected(self):
        with pytest.raises(ValidationError):
            Document.model_validate({"id": "1", "type": "passport"})

    def test_empty_type_rejected(self):
        with pytest.raises(ValidationError):
            Document(id="1", type="", expiry_date=date(2025, 1, 1))

    def test_frozen(self):
        doc = Document(id="1", type="ejari", expiry_date=date(2025, 11, 1))
        with pytest.raises(ValidationError):
            doc.type = "passport"

    def test_dump_by_alias(self):
        doc = Document(id="1", type="ejari", expiry_date=date(2025, 11, 1))
        d = doc.model_dump(mode="json", by_alias=True)
        assert d["expiryDate"] == "2025-11-01"
        assert d["status"] == "valid"

    def test_display_name(self):
        assert Document(id="1", type="uae_visa", expiry_date=date(2025, 1, 1)).display_name == "UAE Visa"

    def test_unknown_type_allowed(self):
        doc = Document(id="1", type="work_permit", expiry_date=date(2025, 1, 1))
        assert doc.is_known_type is False
        assert document_type_name(doc.type) == "work_permit"


class TestApiModels:

    def test_analyze_request_as_of_alias(self):
        req = AnalyzeRequest.model_validate({"documents": None, "asOf": "2025-01-15"})
        assert req.as_of == date(2025, 1, 15)
        assert req.documents is None

    def test_analysis_response_score_bounds(self):
        with pytest.raises(ValidationError):
            AnalysisResponse(health_score=101)
