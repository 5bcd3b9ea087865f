"""Dashboard overview: per-document status, statistics and expiry timeline."""

from dataclasses import dataclass, field
from datetime import date, datetime

from .dates import days_until_expiry
from .rules import EXPIRY_WARNING_DAYS
from ..models.document import Document, DocumentStatus


# Health score bands (inclusive upper bounds)
CRITICAL_SCORE_MAX = 40
ATTENTION_SCORE_MAX = 70


@dataclass
class DocumentStats:
    """Document counts for the dashboard header."""
    total: int = 0
    valid: int = 0
    expiring_soon: int = 0
    critical: int = 0

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "valid": self.valid,
            "expiringSoon": self.expiring_soon,
            "critical": self.critical,
        }


@dataclass
class HealthLabel:
    """Human-readable band for a health score."""
    score: int
    label: str
    description: str

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "label": self.label,
            "description": self.description,
        }


@dataclass
class TimelineEvent:
    """One document on the expiry timeline."""
    document_id: str
    document_type: str
    title: str
    expiry_date: date
    days_until_expiry: int
    status: DocumentStatus
    details: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "documentId": self.document_id,
            "documentType": self.document_type,
            "title": self.title,
            "expiryDate": self.expiry_date.isoformat(),
            "daysUntilExpiry": self.days_until_expiry,
            "status": self.status.value,
            "details": self.details,
        }


def derive_document_status(document: Document, now: date | datetime) -> DocumentStatus:
    """Status from the expiry date, falling back to the upstream hint.

    Hints other than ``valid`` and ``warning`` (``expired``, ``critical``,
    anything unrecognised) count as expired.
    """
    days_left = days_until_expiry(document.expiry_date, now)
    hint = document.status.strip().lower()

    if days_left <= 0:
        return DocumentStatus.EXPIRED
    elif days_left <= EXPIRY_WARNING_DAYS:
        return DocumentStatus.WARNING
    elif hint == DocumentStatus.VALID.value:
        return DocumentStatus.VALID
    elif hint == DocumentStatus.WARNING.value:
        return DocumentStatus.WARNING
    else:
        return DocumentStatus.EXPIRED


def summarize_documents(documents: list[Document], now: date | datetime) -> DocumentStats:
    """Count documents by derived status."""
    stats = DocumentStats(total=len(documents))
    for document in documents:
        status = derive_document_status(document, now)
        if status == DocumentStatus.VALID:
            stats.valid += 1
        elif status == DocumentStatus.WARNING:
            stats.expiring_soon += 1
        else:
            stats.critical += 1
    return stats


def health_label(score: int) -> HealthLabel:
    """Map a health score to its dashboard band."""
    if score <= CRITICAL_SCORE_MAX:
        return HealthLabel(score, "Critical", "Critical issues require immediate attention")
    elif score <= ATTENTION_SCORE_MAX:
        return HealthLabel(score, "Needs Attention", "Some documents need renewal soon")
    else:
        return HealthLabel(score, "All Good", "All documents are up to date")


def build_timeline(documents: list[Document], now: date | datetime) -> list[TimelineEvent]:
    """Expiry events for every document, soonest first."""
    events = []
    for document in documents:
        details = {}
        if document.number:
            details["number"] = document.number
        if document.issuing_authority:
            details["issuingAuthority"] = document.issuing_authority

        events.append(TimelineEvent(
            document_id=document.id,
            document_type=document.type,
            title=f"{document.display_name} Expires",
            expiry_date=document.expiry_date,
            days_until_expiry=days_until_expiry(document.expiry_date, now),
            status=derive_document_status(document, now),
            details=details,
        ))

    # sort is stable: same-day expiries keep input order
    events.sort(key=lambda e: e.expiry_date)
    return events
