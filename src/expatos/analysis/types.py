"""Data models for document dependency analysis.

Defines the result types produced by the analyzer: dependency edges,
critical alerts, and the aggregate analysis. ``to_dict`` emits the
camelCase keys the dashboard consumes.
"""

from dataclasses import dataclass, field
from enum import Enum


class EdgeStatus(str, Enum):
    """Evaluated state of a dependency edge."""
    OK = "ok"
    WARNING = "warning"
    FAILING = "failing"


class AlertSeverity(str, Enum):
    """Alert severity levels."""
    CRITICAL = "critical"  # Blocks visa renewal
    WARNING = "warning"    # Needs action before renewal
    INFO = "info"          # Informational only


@dataclass
class DependencyEdge:
    """A directed "parent requires dependent" relationship."""
    parent: str
    requires: str
    status: EdgeStatus
    reason: str
    current_validity: str
    required_validity: str

    def to_dict(self) -> dict:
        return {
            "parent": self.parent,
            "requires": self.requires,
            "status": self.status.value,
            "reason": self.reason,
            "currentValidity": self.current_validity,
            "requiredValidity": self.required_validity,
        }


@dataclass
class CriticalAlert:
    """A user-facing finding."""
    severity: AlertSeverity
    title: str
    description: str
    action_required: str
    deadline: str
    days_until_deadline: int  # zero or negative means overdue
    affected_documents: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "title": self.title,
            "description": self.description,
            "affectedDocuments": list(self.affected_documents),
            "actionRequired": self.action_required,
            "deadline": self.deadline,
            "daysUntilDeadline": self.days_until_deadline,
        }


@dataclass
class DependencyAnalysis:
    """Aggregate result of one analysis run."""
    health_score: int  # 0-100, higher = healthier
    critical_alerts: list[CriticalAlert] = field(default_factory=list)
    dependencies: list[DependencyEdge] = field(default_factory=list)

    @property
    def critical_count(self) -> int:
        return sum(1 for a in self.critical_alerts if a.severity == AlertSeverity.CRITICAL)

    @property
    def warning_count(self) -> int:
        return sum(1 for a in self.critical_alerts if a.severity == AlertSeverity.WARNING)

    def edge_for(self, requires: str, parent: str | None = None) -> DependencyEdge | None:
        """Find the edge whose ``requires`` (and optionally ``parent``) matches."""
        for edge in self.dependencies:
            if edge.requires == requires and (parent is None or edge.parent == parent):
                return edge
        return None

    def to_dict(self) -> dict:
        return {
            "healthScore": self.health_score,
            "criticalAlerts": [a.to_dict() for a in self.critical_alerts],
            "dependencies": [d.to_dict() for d in self.dependencies],
        }
