"""
Dashboard routes.
"""

from datetime import date

from fastapi import APIRouter, Query

from expatos.analysis.action_plan import build_action_plan
from expatos.analysis.analyzer import DependencyAnalyzer
from expatos.analysis.dates import to_date, utc_now
from expatos.analysis.overview import build_timeline, health_label, summarize_documents
from expatos.models.api import AnalysisResponse, DashboardResponse
from expatos.services.document_store import get_document_store

router = APIRouter()


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    as_of: date | None = Query(None, description="Reference date; defaults to today (UTC)"),
) -> DashboardResponse:
    """
    Analysis, statistics, timeline and action plan for the stored documents.
    """
    now = as_of or utc_now()
    documents = get_document_store().list_documents()

    analysis = DependencyAnalyzer().analyze(documents, now=now)

    return DashboardResponse(
        as_of=to_date(now),
        analysis=AnalysisResponse.model_validate(analysis.to_dict()),
        stats=summarize_documents(documents, now).to_dict(),
        health=health_label(analysis.health_score).to_dict(),
        timeline=[e.to_dict() for e in build_timeline(documents, now)],
        action_plan=[a.to_dict() for a in build_action_plan(analysis)],
    )
