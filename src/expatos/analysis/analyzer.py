"""Document dependency analysis engine.

Locates the UAE visa, evaluates every dependency rule against the
documents the visa renewal relies on, and scores the result with a linear
penalty per alert severity.
"""

from collections.abc import Iterable
from datetime import date, datetime

import structlog

from .dates import days_between, days_until_expiry, format_date, to_date, utc_now
from .rules import (
    ANALYSIS_HORIZON_DAYS,
    BEFORE_VISA_RENEWAL,
    DEPENDENCY_RULES,
    IMMEDIATELY,
    NOT_FOUND,
    REQUIRED,
    DependencyRule,
    RuleContext,
    WindowBase,
)
from .types import (
    AlertSeverity,
    CriticalAlert,
    DependencyAnalysis,
    DependencyEdge,
    EdgeStatus,
)
from ..models.document import Document, DocumentType

logger = structlog.get_logger(__name__)


# Points deducted from a perfect score per alert
SEVERITY_PENALTIES = {
    AlertSeverity.CRITICAL: 30,
    AlertSeverity.WARNING: 10,
    AlertSeverity.INFO: 0,
}

MAX_HEALTH_SCORE = 100


def index_documents(
    documents: Iterable[Document] | None,
    reject_duplicates: bool = False,
) -> dict[str, Document]:
    """Key documents by type.

    The first document of each type in input order wins. With
    ``reject_duplicates`` a second document of the same type raises
    ``ValueError`` instead.
    """
    indexed: dict[str, Document] = {}
    for document in documents or ():
        existing = indexed.get(document.type)
        if existing is None:
            indexed[document.type] = document
            continue

        if reject_duplicates:
            raise ValueError(
                f"Duplicate document type '{document.type}': "
                f"{existing.id} and {document.id}"
            )
        logger.warning(
            "duplicate_document_type",
            document_type=document.type,
            kept=existing.id,
            ignored=document.id,
        )
    return indexed


def calculate_health_score(alerts: list[CriticalAlert]) -> int:
    """Score 0-100: 100 minus the penalty of every alert, floored at 0."""
    penalty = sum(SEVERITY_PENALTIES.get(alert.severity, 0) for alert in alerts)
    return max(0, min(MAX_HEALTH_SCORE, MAX_HEALTH_SCORE - penalty))


class DependencyAnalyzer:
    """Rule-based consistency checker over a document snapshot."""

    def __init__(
        self,
        rules: tuple[DependencyRule, ...] = DEPENDENCY_RULES,
        horizon_days: int = ANALYSIS_HORIZON_DAYS,
    ):
        """Initialize the analyzer.

        Args:
            rules: Ordered rule table; edges and alerts follow this order
            horizon_days: Checks run only when the visa expires within this window
        """
        self.rules = rules
        self.horizon_days = horizon_days

    def analyze(
        self,
        documents: Iterable[Document] | None,
        now: date | datetime | None = None,
    ) -> DependencyAnalysis:
        """Analyze a document snapshot.

        Args:
            documents: Documents to inspect; None is treated as empty
            now: Reference instant; defaults to the current UTC time

        Returns:
            DependencyAnalysis with score, alerts and dependency edges
        """
        if now is None:
            now = utc_now()

        by_type = index_documents(documents)

        # Step 1: Locate the anchor document
        visa = by_type.get(DocumentType.UAE_VISA.value)
        if visa is None:
            logger.info("anchor_document_missing", document_type=DocumentType.UAE_VISA.value)
            return self._missing_anchor()

        alerts: list[CriticalAlert] = []
        edges: list[DependencyEdge] = []

        # Step 2: Applicability gate
        visa_expiry_days = days_until_expiry(visa.expiry_date, now)
        if visa_expiry_days <= self.horizon_days:
            ctx = RuleContext(
                today=to_date(now),
                visa_expiry=visa.expiry_date,
                visa_expiry_days=visa_expiry_days,
            )

            # Step 3: Evaluate each rule in table order
            for rule in self.rules:
                edge, alert = self._evaluate_rule(
                    rule, by_type.get(rule.document_type.value), ctx, now
                )
                if edge is not None:
                    edges.append(edge)
                if alert is not None:
                    alerts.append(alert)
        else:
            logger.debug(
                "dependency_checks_skipped",
                visa_expiry_days=visa_expiry_days,
                horizon_days=self.horizon_days,
            )

        # Step 4: Score
        analysis = DependencyAnalysis(
            health_score=calculate_health_score(alerts),
            critical_alerts=alerts,
            dependencies=edges,
        )

        logger.info(
            "dependency_analysis_complete",
            critical_count=analysis.critical_count,
            warning_count=analysis.warning_count,
            health_score=analysis.health_score,
            edges=len(edges),
        )

        return analysis

    def _missing_anchor(self) -> DependencyAnalysis:
        """Result when no UAE visa is present."""
        return DependencyAnalysis(
            health_score=0,
            critical_alerts=[
                CriticalAlert(
                    severity=AlertSeverity.CRITICAL,
                    title="UAE Visa Not Found",
                    description=(
                        "No UAE visa document found. This is required for "
                        "dependency analysis."
                    ),
                    action_required="Upload your UAE visa document",
                    deadline=IMMEDIATELY,
                    days_until_deadline=0,
                    affected_documents=[],
                )
            ],
            dependencies=[],
        )

    def _evaluate_rule(
        self,
        rule: DependencyRule,
        document: Document | None,
        ctx: RuleContext,
        now: date | datetime,
    ) -> tuple[DependencyEdge | None, CriticalAlert | None]:
        """Evaluate one rule against its document (or its absence)."""
        messages = rule.messages

        if document is None:
            if not rule.required:
                return None, None

            edge = DependencyEdge(
                parent=rule.parent.value,
                requires=rule.requires.value,
                status=EdgeStatus.FAILING,
                reason=messages.missing_reason,
                current_validity=NOT_FOUND,
                required_validity=REQUIRED,
            )
            alert = CriticalAlert(
                severity=AlertSeverity.CRITICAL,
                title=messages.missing_title,
                description=messages.missing_description,
                action_required=messages.missing_action,
                deadline=BEFORE_VISA_RENEWAL,
                days_until_deadline=ctx.visa_expiry_days,
                affected_documents=[rule.document_type.value],
            )
            return edge, alert

        document_days = days_until_expiry(document.expiry_date, now)
        if rule.window_base == WindowBase.VISA_EXPIRY:
            window_days = days_between(ctx.visa_expiry, document.expiry_date)
        else:
            window_days = document_days

        expiry = format_date(document.expiry_date)
        required_validity = rule.required_validity(ctx)

        if not rule.is_breached(window_days):
            edge = DependencyEdge(
                parent=rule.parent.value,
                requires=rule.requires.value,
                status=EdgeStatus.OK,
                reason=messages.ok_reason,
                current_validity=expiry,
                required_validity=required_validity,
            )
            return edge, None

        expired = document_days <= 0
        fields = {
            "expiry": expiry,
            "visa_expiry": format_date(ctx.visa_expiry),
            "required": required_validity,
            "days": document_days,
        }

        if expired:
            status = EdgeStatus.FAILING
            severity = AlertSeverity.CRITICAL
            reason = messages.expired_reason or messages.breach_reason
            title = messages.expired_title or messages.breach_title
            description = messages.expired_description or messages.breach_description
            action = messages.expired_action or messages.breach_action
        else:
            status = EdgeStatus.WARNING
            severity = AlertSeverity.WARNING
            reason = messages.breach_reason
            title = messages.breach_title
            description = messages.breach_description
            action = messages.breach_action

        if expired and rule.immediate_when_expired:
            deadline, deadline_days = IMMEDIATELY, 0
        else:
            deadline, deadline_days = expiry, document_days

        edge = DependencyEdge(
            parent=rule.parent.value,
            requires=rule.requires.value,
            status=status,
            reason=reason.format(**fields),
            current_validity=expiry,
            required_validity=required_validity,
        )
        alert = CriticalAlert(
            severity=severity,
            title=title.format(**fields),
            description=description.format(**fields),
            action_required=action.format(**fields),
            deadline=deadline,
            days_until_deadline=deadline_days,
            affected_documents=list(rule.affected_documents),
        )
        return edge, alert


def analyze_dependencies(
    documents: Iterable[Document] | None,
    now: date | datetime | None = None,
) -> DependencyAnalysis:
    """Convenience function to analyze a document snapshot.

    Args:
        documents: Documents to inspect
        now: Reference instant; defaults to the current UTC time

    Returns:
        DependencyAnalysis with score, alerts and dependency edges
    """
    analyzer = DependencyAnalyzer()
    return analyzer.analyze(documents, now=now)
