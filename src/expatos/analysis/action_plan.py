"""Prioritized action plan derived from analysis alerts.

Turns each critical or warning alert into a renewal task with static
guidance (steps, typical cost, time needed) for the affected document.
"""

from dataclasses import dataclass, field
from enum import Enum

from .types import AlertSeverity, CriticalAlert, DependencyAnalysis
from ..models.document import DocumentType, document_type_name


# Warnings due within this many days are promoted to HIGH
HIGH_PRIORITY_DAYS = 30


class ActionPriority(str, Enum):
    """Action priority levels."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"


PRIORITY_ORDER = {
    ActionPriority.CRITICAL: 0,
    ActionPriority.HIGH: 1,
    ActionPriority.MEDIUM: 2,
}


@dataclass(frozen=True)
class RenewalGuidance:
    """How to renew one document type."""
    title: str
    steps: tuple[str, ...]
    estimated_cost: str
    time_needed: str


RENEWAL_GUIDANCE = {
    DocumentType.PASSPORT.value: RenewalGuidance(
        title="Renew Passport",
        steps=(
            "Book appointment at your embassy or consulate",
            "Gather photos and documents",
            "Submit application (2-3 weeks processing)",
            "Collect new passport",
        ),
        estimated_cost="AED 600",
        time_needed="3-4 weeks",
    ),
    DocumentType.HEALTH_INSURANCE.value: RenewalGuidance(
        title="Renew Health Insurance",
        steps=(
            "Compare insurance providers",
            "Purchase new policy",
            "Upload proof to GDRFA",
        ),
        estimated_cost="AED 600-1200/year",
        time_needed="1-2 days",
    ),
    DocumentType.EJARI.value: RenewalGuidance(
        title="Renew Ejari",
        steps=(
            "Contact landlord for renewal",
            "Gather required documents",
            "Visit Dubai Land Department",
            "Pay renewal fees",
            "Collect new Ejari certificate",
        ),
        estimated_cost="AED 200-400",
        time_needed="1-2 weeks",
    ),
    DocumentType.EMIRATES_ID.value: RenewalGuidance(
        title="Renew Emirates ID",
        steps=(
            "Submit renewal application through ICP",
            "Attend biometrics appointment if requested",
            "Collect new Emirates ID card",
        ),
        estimated_cost="AED 370",
        time_needed="1-2 weeks",
    ),
    DocumentType.UAE_VISA.value: RenewalGuidance(
        title="Renew UAE Visa",
        steps=(
            "Confirm passport, health insurance and Ejari are valid",
            "Complete medical fitness test",
            "Submit renewal application to GDRFA",
        ),
        estimated_cost="AED 1000-3000",
        time_needed="2-3 weeks",
    ),
}


@dataclass
class ActionItem:
    """A single task in the action plan."""
    id: str
    title: str
    priority: ActionPriority
    document_type: str
    deadline: str
    days_until_deadline: int
    reason: str
    steps: list[str] = field(default_factory=list)
    estimated_cost: str = ""
    time_needed: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "priority": self.priority.value,
            "documentType": self.document_type,
            "deadline": self.deadline,
            "daysUntilDeadline": self.days_until_deadline,
            "reason": self.reason,
            "steps": list(self.steps),
            "estimatedCost": self.estimated_cost,
            "timeNeeded": self.time_needed,
        }


def alert_priority(alert: CriticalAlert) -> ActionPriority | None:
    """Priority for an alert; info alerts need no action."""
    if alert.severity == AlertSeverity.CRITICAL:
        return ActionPriority.CRITICAL
    if alert.severity == AlertSeverity.WARNING:
        if alert.days_until_deadline <= HIGH_PRIORITY_DAYS:
            return ActionPriority.HIGH
        return ActionPriority.MEDIUM
    return None


def _action_for_alert(alert: CriticalAlert, priority: ActionPriority) -> ActionItem:
    doc_type = (
        alert.affected_documents[0]
        if alert.affected_documents
        else DocumentType.UAE_VISA.value
    )
    name = document_type_name(doc_type)
    guidance = RENEWAL_GUIDANCE.get(doc_type)

    # missing-document alerts ask for an upload
    if alert.action_required.startswith("Upload"):
        action_id = f"{doc_type}-upload"
        title = f"Upload {name}"
    else:
        action_id = f"{doc_type}-renewal"
        title = guidance.title if guidance else f"Renew {name}"

    return ActionItem(
        id=action_id,
        title=title,
        priority=priority,
        document_type=doc_type,
        deadline=alert.deadline,
        days_until_deadline=alert.days_until_deadline,
        reason=alert.description,
        steps=list(guidance.steps) if guidance else [],
        estimated_cost=guidance.estimated_cost if guidance else "",
        time_needed=guidance.time_needed if guidance else "",
    )


def build_action_plan(analysis: DependencyAnalysis) -> list[ActionItem]:
    """Build the ordered action plan for an analysis.

    Items are ordered by priority, then by days until deadline; ties keep
    the alert order.
    """
    items = []
    for alert in analysis.critical_alerts:
        priority = alert_priority(alert)
        if priority is None:
            continue
        items.append(_action_for_alert(alert, priority))

    items.sort(key=lambda item: (PRIORITY_ORDER[item.priority], item.days_until_deadline))
    return items
