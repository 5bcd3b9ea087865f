"""Document Dependency Analysis Module.

Checks the documents a UAE visa renewal depends on against declarative
validity rules and summarizes the findings as a health score, dependency
edges and user-facing alerts.
"""

from .types import (
    AlertSeverity,
    CriticalAlert,
    DependencyAnalysis,
    DependencyEdge,
    EdgeStatus,
)
from .rules import (
    ANALYSIS_HORIZON_DAYS,
    DEPENDENCY_RULES,
    DependencyRule,
    get_required_types,
    get_rule_for_type,
)
from .analyzer import (
    SEVERITY_PENALTIES,
    DependencyAnalyzer,
    analyze_dependencies,
    calculate_health_score,
    index_documents,
)
from .action_plan import ActionItem, ActionPriority, build_action_plan
from .overview import (
    DocumentStats,
    HealthLabel,
    TimelineEvent,
    build_timeline,
    derive_document_status,
    health_label,
    summarize_documents,
)

__all__ = [
    # Types
    "AlertSeverity",
    "CriticalAlert",
    "DependencyAnalysis",
    "DependencyEdge",
    "EdgeStatus",
    # Rules
    "ANALYSIS_HORIZON_DAYS",
    "DEPENDENCY_RULES",
    "DependencyRule",
    "get_required_types",
    "get_rule_for_type",
    # Analyzer
    "SEVERITY_PENALTIES",
    "DependencyAnalyzer",
    "analyze_dependencies",
    "calculate_health_score",
    "index_documents",
    # Action plan
    "ActionItem",
    "ActionPriority",
    "build_action_plan",
    # Overview
    "DocumentStats",
    "HealthLabel",
    "TimelineEvent",
    "build_timeline",
    "derive_document_status",
    "health_label",
    "summarize_documents",
]
