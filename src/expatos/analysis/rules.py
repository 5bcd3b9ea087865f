"""Dependency rules for UAE visa renewal.

Each rule describes one document the visa renewal depends on: which
validity window is measured, the threshold that breaches it, how the
required validity is displayed, and the messages shown to the user. The
table order is the order edges and alerts are emitted in.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable

from .dates import add_months, format_date
from ..models.document import DocumentType


# Dependency checks only run when the visa expires within this many days
ANALYSIS_HORIZON_DAYS = 365

# Passport must outlive the visa by six months; the gate uses a flat 180 days
PASSPORT_BUFFER_DAYS = 180
PASSPORT_BUFFER_MONTHS = 6

# Health insurance and Emirates ID warn inside this window
EXPIRY_WARNING_DAYS = 90

# Ejari must remain valid three months from today
EJARI_MIN_VALIDITY_DAYS = 90
EJARI_MIN_VALIDITY_MONTHS = 3

IMMEDIATELY = "Immediately"
BEFORE_VISA_RENEWAL = "Before visa renewal"
NOT_FOUND = "Not found"
REQUIRED = "Required"


class WindowBase(str, Enum):
    """Date a rule measures the document's remaining validity from."""
    VISA_EXPIRY = "visa_expiry"
    TODAY = "today"


@dataclass(frozen=True)
class RuleContext:
    """Dates shared by every rule in one analysis run."""
    today: date
    visa_expiry: date
    visa_expiry_days: int


@dataclass(frozen=True)
class RuleMessages:
    """Message templates for a rule.

    Templates may reference ``{expiry}``, ``{visa_expiry}``, ``{required}``
    and ``{days}``. ``expired_*`` override the breach texts when the
    document itself has expired; left as None they fall back to ``breach_*``.
    """
    ok_reason: str
    breach_reason: str
    breach_title: str
    breach_description: str
    breach_action: str
    expired_reason: str | None = None
    expired_title: str | None = None
    expired_description: str | None = None
    expired_action: str | None = None
    missing_reason: str = ""
    missing_title: str = ""
    missing_description: str = ""
    missing_action: str = ""


@dataclass(frozen=True)
class DependencyRule:
    """A declarative dependency check for one document type."""
    document_type: DocumentType
    parent: DocumentType
    requires: DocumentType
    window_base: WindowBase
    threshold_days: int
    inclusive: bool
    required_validity: Callable[[RuleContext], str]
    messages: RuleMessages
    affected_documents: tuple[str, ...]
    required: bool = True  # missing document is itself a finding
    immediate_when_expired: bool = False  # expired => deadline "Immediately", 0 days

    def is_breached(self, window_days: int) -> bool:
        """Whether the measured validity window falls short of the threshold."""
        if self.inclusive:
            return window_days <= self.threshold_days
        return window_days < self.threshold_days


def _passport_required_validity(ctx: RuleContext) -> str:
    """Visa expiry plus six calendar months, clamped to month end (Aug 31 -> Feb 28, not Mar 3)."""
    return format_date(add_months(ctx.visa_expiry, PASSPORT_BUFFER_MONTHS))


def _ejari_required_validity(ctx: RuleContext) -> str:
    return format_date(add_months(ctx.today, EJARI_MIN_VALIDITY_MONTHS))


DEPENDENCY_RULES: tuple[DependencyRule, ...] = (
    DependencyRule(
        document_type=DocumentType.PASSPORT,
        parent=DocumentType.UAE_VISA,
        requires=DocumentType.PASSPORT,
        window_base=WindowBase.VISA_EXPIRY,
        threshold_days=PASSPORT_BUFFER_DAYS,
        inclusive=False,
        required_validity=_passport_required_validity,
        affected_documents=(DocumentType.PASSPORT.value, DocumentType.UAE_VISA.value),
        messages=RuleMessages(
            ok_reason="Passport validity sufficient for visa renewal",
            breach_reason=(
                "Passport expires {expiry}, but visa renewal requires passport "
                "valid until {required}"
            ),
            breach_title="🚨 CRITICAL: Passport Validity Insufficient for Visa Renewal",
            breach_description=(
                "Your passport expires {expiry}, but UAE visa renewal requires your "
                "passport to be valid for at least 6 months AFTER your visa expiry "
                "date ({visa_expiry}). You need to renew your passport IMMEDIATELY "
                "or your visa renewal will be REJECTED."
            ),
            breach_action="Renew passport immediately - visa renewal depends on this",
            missing_reason="No passport document found",
            missing_title="🚨 CRITICAL: Passport Document Missing",
            missing_description=(
                "No passport document found. UAE visa renewal requires a valid passport."
            ),
            missing_action="Upload your passport document",
        ),
    ),
    DependencyRule(
        document_type=DocumentType.HEALTH_INSURANCE,
        parent=DocumentType.UAE_VISA,
        requires=DocumentType.HEALTH_INSURANCE,
        window_base=WindowBase.TODAY,
        threshold_days=EXPIRY_WARNING_DAYS,
        inclusive=True,
        required_validity=lambda ctx: "Active (not expired)",
        affected_documents=(DocumentType.HEALTH_INSURANCE.value, DocumentType.UAE_VISA.value),
        immediate_when_expired=True,
        messages=RuleMessages(
            ok_reason="Health insurance is active",
            breach_reason="Health insurance expires soon",
            breach_title="⚠️ WARNING: Health Insurance Expiring Soon",
            breach_description=(
                "Your health insurance expires on {expiry} ({days} days). Renew it "
                "before your visa renewal to avoid complications."
            ),
            breach_action="Renew health insurance before visa renewal",
            expired_reason="Health insurance has expired",
            expired_title="🚨 CRITICAL: Health Insurance EXPIRED",
            expired_description=(
                "Your health insurance expired on {expiry}. UAE visa renewal requires "
                "active health insurance. You MUST renew your health insurance "
                "immediately or your visa renewal will be REJECTED."
            ),
            expired_action="Renew health insurance immediately",
            missing_reason="No health insurance document found",
            missing_title="🚨 CRITICAL: Health Insurance Document Missing",
            missing_description=(
                "No health insurance document found. UAE visa renewal requires "
                "active health insurance."
            ),
            missing_action="Upload your health insurance document",
        ),
    ),
    DependencyRule(
        document_type=DocumentType.EJARI,
        parent=DocumentType.UAE_VISA,
        requires=DocumentType.EJARI,
        window_base=WindowBase.TODAY,
        threshold_days=EJARI_MIN_VALIDITY_DAYS,
        inclusive=False,
        required_validity=_ejari_required_validity,
        affected_documents=(DocumentType.EJARI.value, DocumentType.UAE_VISA.value),
        messages=RuleMessages(
            ok_reason="Ejari validity sufficient for visa renewal",
            breach_reason=(
                "Ejari expires {expiry}, but visa renewal requires Ejari valid for "
                "at least 3 months"
            ),
            breach_title="🚨 CRITICAL: Ejari Validity Insufficient",
            breach_description=(
                "Your Ejari expires on {expiry} ({days} days left). UAE visa renewal "
                "requires Ejari to be valid for at least 3 months from now. You need "
                "to renew your Ejari IMMEDIATELY."
            ),
            breach_action="Renew Ejari immediately",
            missing_reason="No Ejari document found",
            missing_title="🚨 CRITICAL: Ejari Document Missing",
            missing_description=(
                "No Ejari document found. UAE visa renewal requires a valid Ejari contract."
            ),
            missing_action="Upload your Ejari document",
        ),
    ),
    # Emirates ID is optional: no finding when it is absent
    DependencyRule(
        document_type=DocumentType.EMIRATES_ID,
        parent=DocumentType.EMIRATES_ID,
        requires=DocumentType.UAE_VISA,
        window_base=WindowBase.TODAY,
        threshold_days=EXPIRY_WARNING_DAYS,
        inclusive=True,
        required_validity=lambda ctx: "Active (linked to visa)",
        affected_documents=(DocumentType.EMIRATES_ID.value,),
        required=False,
        immediate_when_expired=True,
        messages=RuleMessages(
            ok_reason="Emirates ID is active",
            breach_reason="Emirates ID expires soon",
            breach_title="⚠️ WARNING: Emirates ID Expiring Soon",
            breach_description=(
                "Your Emirates ID expires on {expiry} ({days} days). Renew it to "
                "maintain your legal status."
            ),
            breach_action="Renew Emirates ID",
            expired_reason="Emirates ID has expired",
            expired_title="🚨 CRITICAL: Emirates ID EXPIRED",
            expired_description=(
                "Your Emirates ID expired on {expiry}. Emirates ID is linked to your "
                "visa validity and must be renewed."
            ),
            expired_action="Renew Emirates ID immediately",
        ),
    ),
)


def get_rule_for_type(doc_type: str) -> DependencyRule | None:
    """Get the dependency rule that inspects a document type."""
    for rule in DEPENDENCY_RULES:
        if rule.document_type == doc_type:
            return rule
    return None


def get_required_types() -> list[str]:
    """Document types whose absence is reported as a finding."""
    return [rule.document_type.value for rule in DEPENDENCY_RULES if rule.required]
