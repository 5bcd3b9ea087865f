"""
Pydantic models for ExpatOS.

- Document models for identity and residency records
- API models for request/response schemas
"""

from expatos.models.document import (
    DOCUMENT_TYPE_NAMES,
    Document,
    DocumentStatus,
    DocumentType,
    document_type_name,
)
from expatos.models.api import (
    AnalysisResponse,
    AnalyzeRequest,
    DashboardResponse,
    DocumentListResponse,
)

__all__ = [
    # Document models
    "Document",
    "DocumentStatus",
    "DocumentType",
    "DOCUMENT_TYPE_NAMES",
    "document_type_name",
    # API models
    "AnalysisResponse",
    "AnalyzeRequest",
    "DashboardResponse",
    "DocumentListResponse",
]
