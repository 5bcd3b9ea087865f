"""
API request and response models.
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from expatos.models.document import Document


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Analysis Models
# =============================================================================


class AnalyzeRequest(_CamelModel):
    """Request model for an ad-hoc dependency analysis."""

    documents: list[Document] | None = Field(
        default=None, description="Document snapshot; null is treated as empty"
    )
    as_of: date | None = Field(
        default=None, description="Reference date; defaults to today (UTC)"
    )


class DependencyEdgeResponse(_CamelModel):
    """Dependency edge in API response format."""

    parent: str
    requires: str
    status: str
    reason: str
    current_validity: str
    required_validity: str


class CriticalAlertResponse(_CamelModel):
    """Alert in API response format."""

    severity: str
    title: str
    description: str
    affected_documents: list[str]
    action_required: str
    deadline: str
    days_until_deadline: int


class AnalysisResponse(_CamelModel):
    """Response model for a dependency analysis."""

    health_score: int = Field(..., ge=0, le=100)
    critical_alerts: list[CriticalAlertResponse] = Field(default_factory=list)
    dependencies: list[DependencyEdgeResponse] = Field(default_factory=list)


# =============================================================================
# Document Models
# =============================================================================


class DocumentListResponse(_CamelModel):
    """Response model for listing stored documents."""

    documents: list[Document]
    total: int


# =============================================================================
# Dashboard Models
# =============================================================================


class DashboardResponse(_CamelModel):
    """Everything the dashboard renders for the stored documents."""

    as_of: date
    analysis: AnalysisResponse
    stats: dict[str, int]
    health: dict[str, Any]
    timeline: list[dict[str, Any]]
    action_plan: list[dict[str, Any]]
