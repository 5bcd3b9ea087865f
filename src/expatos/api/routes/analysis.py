"""
Dependency analysis routes.
"""

import structlog
from fastapi import APIRouter, HTTPException

from expatos.analysis.analyzer import DependencyAnalyzer, index_documents
from expatos.analysis.dates import utc_now
from expatos.config import get_settings
from expatos.models.api import AnalysisResponse, AnalyzeRequest

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post("", response_model=AnalysisResponse)
async def analyze(request: AnalyzeRequest) -> AnalysisResponse:
    """
    Analyze a document snapshot supplied in the request body.
    """
    settings = get_settings()
    documents = request.documents or []

    if settings.reject_duplicate_types:
        try:
            index_documents(documents, reject_duplicates=True)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))

    now = request.as_of or utc_now()
    analysis = DependencyAnalyzer().analyze(documents, now=now)

    logger.info(
        "analysis_requested",
        documents=len(documents),
        health_score=analysis.health_score,
    )

    return AnalysisResponse.model_validate(analysis.to_dict())
