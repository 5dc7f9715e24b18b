"""
Safety & Cancellation Policy

Auto-suspension from report history, cancellation penalty tiering, the
booking eligibility gate, and the report/cancellation record builders that
feed them.

Policy outcomes are values (booleans, BookingDecision), never exceptions.
"""
import logging
from datetime import datetime, timedelta
from typing import Callable, Iterable, Optional, Tuple, Union

from ...exceptions import UnknownCategoryError
from ...models.trust import (
    AUTO_SUSPEND_THRESHOLD, GRACE_PERIOD_HOURS,
    BookingDecision, CancellationPenalty, CancellationRecord, CancelledBy,
    HealerStanding, ParticipantRole, ReportCategory, ReportSeverity,
    ReportStatus, SafetyReport, SeekerStanding, Session,
)
from ...utils import ensure_utc, new_id, utc_now

logger = logging.getLogger(__name__)


# Statuses where a report is still unresolved
UNRESOLVED_STATUSES = frozenset({
    ReportStatus.OPEN,
    ReportStatus.REVIEWING,
    ReportStatus.ESCALATED,
})

SEEKER_SUSPENDED_REASON = "Your account is suspended pending review."
HEALER_SUSPENDED_REASON = "This healer is suspended pending review."
HEALER_BUSY_REASON = "This healer is currently in a session. Please try again later."


# =============================================================================
# AUTO-SUSPEND
# =============================================================================

def should_auto_suspend(reports: Iterable[SafetyReport]) -> bool:
    """
    True when at least AUTO_SUSPEND_THRESHOLD reports are critical AND open.

    Resolved, reviewing and escalated critical reports never count.
    """
    critical_open = sum(
        1 for r in reports
        if r.severity == ReportSeverity.CRITICAL and r.status == ReportStatus.OPEN
    )
    if critical_open >= AUTO_SUSPEND_THRESHOLD:
        logger.warning(f"Auto-suspend triggered: {critical_open} critical open reports")
        return True
    return False


def summarize_reports(reports: Iterable[SafetyReport]) -> Tuple[int, int]:
    """
    Derive (open_reports, critical_reports) for a TrustScoreInput.

    A critical report that is still open shows up in both counts.
    """
    open_reports = 0
    critical_reports = 0
    for report in reports:
        if report.status == ReportStatus.OPEN:
            open_reports += 1
        if report.severity == ReportSeverity.CRITICAL and report.status in UNRESOLVED_STATUSES:
            critical_reports += 1
    return open_reports, critical_reports


def create_safety_report(
    reporter_id: str,
    reported_id: str,
    reporter_role: ParticipantRole,
    category: Union[ReportCategory, str],
    description: str = "",
    severity: ReportSeverity = ReportSeverity.MEDIUM,
    session_id: Optional[str] = None,
    *,
    now: Optional[datetime] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> SafetyReport:
    """
    Create a new report in OPEN status.

    Raises:
        UnknownCategoryError: if category is not one of ReportCategory
    """
    try:
        category = ReportCategory(category)
    except ValueError:
        raise UnknownCategoryError(f"Invalid report category: {category}") from None

    return SafetyReport(
        id=id_factory() if id_factory else new_id("report"),
        reporter_id=reporter_id,
        reported_id=reported_id,
        reporter_role=ParticipantRole(reporter_role),
        category=category,
        severity=ReportSeverity(severity),
        status=ReportStatus.OPEN,
        created_at=now or utc_now(),
        description=description or "",
        session_id=session_id,
    )


# =============================================================================
# CANCELLATION
# =============================================================================

def is_within_grace_period(
    scheduled_at: Union[datetime, str],
    cancelled_at: Union[datetime, str],
) -> bool:
    """True if the cancellation came at least GRACE_PERIOD_HOURS before start."""
    notice = ensure_utc(scheduled_at) - ensure_utc(cancelled_at)
    return notice >= timedelta(hours=GRACE_PERIOD_HOURS)


def build_cancellation_record(
    session: Session,
    cancelled_by: CancelledBy,
    cancelled_at: Optional[datetime] = None,
    reason: Optional[str] = None,
) -> CancellationRecord:
    """Record a cancellation, deriving the grace flag from the session start."""
    cancelled_at = ensure_utc(cancelled_at) if cancelled_at else utc_now()
    return CancellationRecord(
        session_id=session.id,
        cancelled_by=CancelledBy(cancelled_by),
        cancelled_at=cancelled_at,
        within_grace_period=is_within_grace_period(session.scheduled_at, cancelled_at),
        reason=reason,
    )


def get_cancellation_penalty(records: Iterable[CancellationRecord]) -> CancellationPenalty:
    """
    Penalty from late cancellations only.

    Grace-period cancellations are ignored entirely.
        0 -> none | 1-2 -> warning | 3-4 -> cooldown | 5+ -> suspension
    """
    late = sum(1 for r in records if not r.within_grace_period)

    if late == 0:
        return CancellationPenalty.NONE
    if late <= 2:
        return CancellationPenalty.WARNING
    if late <= 4:
        return CancellationPenalty.COOLDOWN
    return CancellationPenalty.SUSPENSION


# =============================================================================
# BOOKING ELIGIBILITY
# =============================================================================

def can_book_session(seeker: SeekerStanding, healer: HealerStanding) -> BookingDecision:
    """
    Gate a booking. First failing check wins:
    seeker suspended, then healer suspended, then healer in session.
    """
    if seeker.is_suspended:
        decision = BookingDecision(allowed=False, reason=SEEKER_SUSPENDED_REASON)
    elif healer.is_suspended:
        decision = BookingDecision(allowed=False, reason=HEALER_SUSPENDED_REASON)
    elif healer.has_active_session:
        decision = BookingDecision(allowed=False, reason=HEALER_BUSY_REASON)
    else:
        return BookingDecision(allowed=True)

    logger.info(f"Booking denied: {decision.reason}")
    return decision
