"""
Session State Machine

Deterministic lifecycle for a bookable session:

    PENDING -> CONFIRMED -> ACTIVE -> COMPLETED
       |           |          |----> REPORTED   (incl. SOS override)
       +-----------+----------+----> CANCELLED

COMPLETED, CANCELLED and REPORTED are terminal. Sessions are never mutated;
every operation returns a new Session. Persisting the result (and guarding
concurrent writers) is the caller's job.
Naive timestamps are taken to be UTC.
"""
import logging
from dataclasses import replace
from types import MappingProxyType
from datetime import datetime, timedelta
from typing import Callable, Iterable, Optional, Tuple

from ...exceptions import InvalidTransitionError, SessionNotActiveError
from ...models.trust import (
    CONFIRMATION_TIMEOUT_MINUTES,
    CancelledBy, HealerAvailability, LocationSnapshot, ParticipantRole,
    SOSEvent, Session, SessionStatus,
)
from ...utils import ensure_utc, new_id, utc_now

logger = logging.getLogger(__name__)


# =============================================================================
# STATE CONFIGURATION
# =============================================================================

STATE_CONFIG = MappingProxyType({
    SessionStatus.PENDING: MappingProxyType({
        "description": "Booked, awaiting healer confirmation",
        "allowed_transitions": (SessionStatus.CONFIRMED, SessionStatus.CANCELLED),
    }),
    SessionStatus.CONFIRMED: MappingProxyType({
        "description": "Confirmed, waiting to start",
        "allowed_transitions": (SessionStatus.ACTIVE, SessionStatus.CANCELLED),
    }),
    SessionStatus.ACTIVE: MappingProxyType({
        "description": "In progress",
        "allowed_transitions": (
            SessionStatus.COMPLETED,
            SessionStatus.CANCELLED,
            SessionStatus.REPORTED,
        ),
    }),
    SessionStatus.COMPLETED: MappingProxyType({
        "description": "Ended normally",
        "allowed_transitions": (),  # Terminal state
    }),
    SessionStatus.CANCELLED: MappingProxyType({
        "description": "Cancelled before completion",
        "allowed_transitions": (),  # Terminal state
    }),
    SessionStatus.REPORTED: MappingProxyType({
        "description": "Ended and flagged for safety review",
        "allowed_transitions": (),  # Terminal state
    }),
})

if set(STATE_CONFIG) != set(SessionStatus):
    raise RuntimeError("STATE_CONFIG must cover every SessionStatus")


# =============================================================================
# INTROSPECTION
# =============================================================================

def allowed_transitions(status: SessionStatus) -> Tuple[SessionStatus, ...]:
    return STATE_CONFIG[SessionStatus(status)]["allowed_transitions"]


def is_terminal(status: SessionStatus) -> bool:
    return not allowed_transitions(status)


def can_transition(from_status: SessionStatus, to_status: SessionStatus) -> Tuple[bool, str]:
    """
    Check if a transition is allowed.

    Returns (allowed, reason)
    """
    from_status = SessionStatus(from_status)
    to_status = SessionStatus(to_status)
    if to_status in allowed_transitions(from_status):
        return True, "Transition allowed"
    return False, f"Cannot transition from {from_status.value} to {to_status.value}"


# =============================================================================
# OPERATIONS
# =============================================================================

def create_session(
    healer_id: str,
    seeker_id: str,
    duration_minutes: int,
    *,
    scheduled_at: Optional[datetime] = None,
    now: Optional[datetime] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> Session:
    """Create a new session in PENDING state."""
    now = ensure_utc(now) if now else utc_now()
    session = Session(
        id=id_factory() if id_factory else new_id("sess"),
        healer_id=healer_id,
        seeker_id=seeker_id,
        status=SessionStatus.PENDING,
        scheduled_at=ensure_utc(scheduled_at) if scheduled_at else now,
        duration_minutes=duration_minutes,
    )
    logger.info(f"Session {session.id} created for healer {healer_id}")
    return session


def transition_session(
    session: Session,
    target: SessionStatus,
    *,
    cancelled_by: Optional[CancelledBy] = None,
    cancellation_reason: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Session:
    """
    Move a session to a new status.

    Sets started_at on ACTIVE and ended_at on COMPLETED/REPORTED. On
    CANCELLED, records who cancelled and why when supplied.

    Raises:
        InvalidTransitionError: if target is not allowed from the current
            status (skipped states and anything out of a terminal state)
    """
    target = SessionStatus(target)
    allowed = allowed_transitions(session.status)
    if target not in allowed:
        raise InvalidTransitionError(session.status, target, allowed)

    now = ensure_utc(now) if now else utc_now()
    changes = {"status": target}

    if target == SessionStatus.ACTIVE:
        changes["started_at"] = now
    elif target in (SessionStatus.COMPLETED, SessionStatus.REPORTED):
        changes["ended_at"] = now
    elif target == SessionStatus.CANCELLED and (cancelled_by or cancellation_reason):
        changes["cancelled_by"] = CancelledBy(cancelled_by) if cancelled_by else None
        changes["cancellation_reason"] = cancellation_reason

    logger.info(f"Session {session.id}: {session.status.value} -> {target.value}")
    return replace(session, **changes)


def trigger_sos(
    session: Session,
    triggered_by: ParticipantRole,
    location_snapshot: Optional[LocationSnapshot] = None,
    *,
    now: Optional[datetime] = None,
) -> Session:
    """
    Emergency override: force an ACTIVE session to REPORTED.

    Bypasses the transition table and attaches an SOSEvent.

    Raises:
        SessionNotActiveError: if the session is not ACTIVE
    """
    if session.status != SessionStatus.ACTIVE:
        raise SessionNotActiveError(
            f"Cannot trigger SOS on a {session.status.value} session. Session must be active."
        )

    now = ensure_utc(now) if now else utc_now()
    sos_event = SOSEvent(
        session_id=session.id,
        triggered_by=ParticipantRole(triggered_by),
        timestamp=now,
        location_snapshot=location_snapshot,
    )

    logger.warning(f"SOS triggered on session {session.id} by {sos_event.triggered_by.value}")
    return replace(session, status=SessionStatus.REPORTED, ended_at=now, sos_event=sos_event)


def is_confirmation_expired(session: Session, *, now: Optional[datetime] = None) -> bool:
    """True if a PENDING session has waited longer than the confirmation timeout."""
    if session.status != SessionStatus.PENDING:
        return False
    now = ensure_utc(now) if now else utc_now()
    return now - ensure_utc(session.scheduled_at) > timedelta(minutes=CONFIRMATION_TIMEOUT_MINUTES)


def get_healer_availability(sessions: Iterable[Session]) -> HealerAvailability:
    """
    BUSY if any session is ACTIVE, otherwise ONLINE.

    OFFLINE is a manual toggle and is never derived here.
    """
    if any(s.status == SessionStatus.ACTIVE for s in sessions):
        return HealerAvailability.BUSY
    return HealerAvailability.ONLINE
