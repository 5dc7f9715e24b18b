"""
Session State Machine Tests

Tests verify:
1. Session creation defaults
2. Transition table (valid paths, skipped states, terminal states)
3. Timestamps and cancellation metadata
4. SOS override from ACTIVE only
5. Healer availability derivation
6. Confirmation timeout
"""
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from holdspace.exceptions import InvalidTransitionError, SessionNotActiveError, StructuralViolationError
from holdspace.models.trust import (
    CancelledBy, HealerAvailability, LocationSnapshot, ParticipantRole, SessionStatus,
)
from holdspace.services.sessions.state_machine import (
    STATE_CONFIG,
    allowed_transitions,
    can_transition,
    create_session,
    get_healer_availability,
    is_confirmation_expired,
    is_terminal,
    transition_session,
    trigger_sos,
)


FIXED_NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
LATER = FIXED_NOW + timedelta(minutes=30)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def pending_session():
    return create_session("healer-1", "seeker-1", 60, now=FIXED_NOW, id_factory=lambda: "sess-1")


@pytest.fixture
def active_session(pending_session):
    confirmed = transition_session(pending_session, SessionStatus.CONFIRMED, now=FIXED_NOW)
    return transition_session(confirmed, SessionStatus.ACTIVE, now=FIXED_NOW)


# =============================================================================
# TEST: CREATION
# =============================================================================

class TestCreateSession:
    """Tests for create_session."""

    def test_new_session_is_pending(self, pending_session):
        assert pending_session.id == "sess-1"
        assert pending_session.status == SessionStatus.PENDING
        assert pending_session.scheduled_at == FIXED_NOW
        assert pending_session.duration_minutes == 60
        assert pending_session.started_at is None
        assert pending_session.sos_event is None

    def test_generated_ids_are_unique(self):
        a = create_session("healer-1", "seeker-1", 30)
        b = create_session("healer-1", "seeker-1", 30)
        assert a.id != b.id
        assert a.id.startswith("sess-")

    def test_uses_current_time_by_default(self):
        with patch("holdspace.services.sessions.state_machine.utc_now", return_value=FIXED_NOW):
            session = create_session("healer-1", "seeker-1", 30)
        assert session.scheduled_at == FIXED_NOW

    def test_explicit_schedule(self):
        start = FIXED_NOW + timedelta(days=2)
        session = create_session("healer-1", "seeker-1", 90, scheduled_at=start, now=FIXED_NOW)
        assert session.scheduled_at == start


# =============================================================================
# TEST: TRANSITIONS
# =============================================================================

class TestTransitionSession:
    """Tests for transition_session."""

    def test_state_config_covers_every_status(self):
        assert set(STATE_CONFIG) == set(SessionStatus)

    def test_state_config_is_read_only(self):
        with pytest.raises(TypeError):
            STATE_CONFIG[SessionStatus.COMPLETED] = {"allowed_transitions": (SessionStatus.ACTIVE,)}
        with pytest.raises(TypeError):
            STATE_CONFIG[SessionStatus.COMPLETED]["allowed_transitions"] = (SessionStatus.ACTIVE,)
        assert is_terminal(SessionStatus.COMPLETED) is True

    def test_full_happy_path(self, active_session):
        assert active_session.status == SessionStatus.ACTIVE
        assert active_session.started_at == FIXED_NOW

        completed = transition_session(active_session, SessionStatus.COMPLETED, now=LATER)
        assert completed.status == SessionStatus.COMPLETED
        assert completed.ended_at == LATER

    def test_original_session_is_unchanged(self, pending_session):
        transition_session(pending_session, SessionStatus.CONFIRMED)
        assert pending_session.status == SessionStatus.PENDING

    def test_pending_to_active_skips_confirmation(self, pending_session):
        with pytest.raises(InvalidTransitionError) as exc_info:
            transition_session(pending_session, SessionStatus.ACTIVE)
        assert exc_info.value.from_status == SessionStatus.PENDING
        assert exc_info.value.to_status == SessionStatus.ACTIVE
        assert "pending -> active" in str(exc_info.value)

    def test_terminal_sessions_reject_everything(self, active_session):
        completed = transition_session(active_session, SessionStatus.COMPLETED)
        for target in SessionStatus:
            with pytest.raises(StructuralViolationError):
                transition_session(completed, target)

    def test_active_to_reported_sets_ended_at(self, active_session):
        reported = transition_session(active_session, SessionStatus.REPORTED, now=LATER)
        assert reported.status == SessionStatus.REPORTED
        assert reported.ended_at == LATER

    def test_cancellation_metadata(self, pending_session):
        cancelled = transition_session(
            pending_session,
            SessionStatus.CANCELLED,
            cancelled_by=CancelledBy.SEEKER,
            cancellation_reason="Schedule conflict",
        )
        assert cancelled.cancelled_by == CancelledBy.SEEKER
        assert cancelled.cancellation_reason == "Schedule conflict"
        assert cancelled.ended_at is None

    def test_cancellation_without_metadata(self, pending_session):
        cancelled = transition_session(pending_session, SessionStatus.CANCELLED)
        assert cancelled.cancelled_by is None
        assert cancelled.cancellation_reason is None

    def test_accepts_string_target(self, pending_session):
        confirmed = transition_session(pending_session, "confirmed")
        assert confirmed.status == SessionStatus.CONFIRMED


class TestIntrospection:
    """Tests for allowed_transitions, can_transition and is_terminal."""

    def test_allowed_from_active(self):
        assert set(allowed_transitions(SessionStatus.ACTIVE)) == {
            SessionStatus.COMPLETED, SessionStatus.CANCELLED, SessionStatus.REPORTED,
        }

    @pytest.mark.parametrize("status,terminal", [
        (SessionStatus.PENDING, False),
        (SessionStatus.CONFIRMED, False),
        (SessionStatus.ACTIVE, False),
        (SessionStatus.COMPLETED, True),
        (SessionStatus.CANCELLED, True),
        (SessionStatus.REPORTED, True),
    ])
    def test_is_terminal(self, status, terminal):
        assert is_terminal(status) is terminal

    def test_can_transition_reason(self):
        allowed, reason = can_transition(SessionStatus.CONFIRMED, SessionStatus.COMPLETED)
        assert allowed is False
        assert reason == "Cannot transition from confirmed to completed"


# =============================================================================
# TEST: SOS
# =============================================================================

class TestTriggerSOS:
    """Tests for trigger_sos."""

    def test_sos_on_pending_raises(self, pending_session):
        with pytest.raises(SessionNotActiveError):
            trigger_sos(pending_session, ParticipantRole.SEEKER)

    def test_sos_on_active_reports_session(self, active_session):
        location = LocationSnapshot(lat=52.52, lng=13.405)
        reported = trigger_sos(active_session, ParticipantRole.SEEKER, location, now=LATER)

        assert reported.status == SessionStatus.REPORTED
        assert reported.ended_at == LATER
        assert reported.sos_event.session_id == active_session.id
        assert reported.sos_event.triggered_by == ParticipantRole.SEEKER
        assert reported.sos_event.timestamp == LATER
        assert reported.sos_event.location_snapshot == location

    def test_sos_without_location(self, active_session):
        reported = trigger_sos(active_session, "healer")
        assert reported.sos_event.triggered_by == ParticipantRole.HEALER
        assert reported.sos_event.location_snapshot is None

    def test_sos_on_reported_session_raises(self, active_session):
        reported = trigger_sos(active_session, ParticipantRole.SEEKER)
        with pytest.raises(SessionNotActiveError):
            trigger_sos(reported, ParticipantRole.SEEKER)


# =============================================================================
# TEST: AVAILABILITY & TIMEOUT
# =============================================================================

class TestHealerAvailability:
    """Tests for get_healer_availability."""

    def test_no_sessions_is_online(self):
        assert get_healer_availability([]) == HealerAvailability.ONLINE

    def test_active_session_is_busy(self, active_session):
        completed = transition_session(active_session, SessionStatus.COMPLETED)
        assert get_healer_availability([completed, active_session]) == HealerAvailability.BUSY

    def test_only_finished_sessions_is_online(self, active_session):
        completed = transition_session(active_session, SessionStatus.COMPLETED)
        assert get_healer_availability([completed]) == HealerAvailability.ONLINE


class TestConfirmationTimeout:
    """Tests for is_confirmation_expired."""

    def test_fresh_pending_not_expired(self, pending_session):
        assert is_confirmation_expired(pending_session, now=FIXED_NOW + timedelta(minutes=5)) is False

    def test_stale_pending_expired(self, pending_session):
        assert is_confirmation_expired(pending_session, now=FIXED_NOW + timedelta(minutes=6)) is True

    def test_confirmed_never_expires(self, pending_session):
        confirmed = transition_session(pending_session, SessionStatus.CONFIRMED)
        assert is_confirmation_expired(confirmed, now=FIXED_NOW + timedelta(days=1)) is False

    def test_naive_schedule_is_taken_as_utc(self):
        session = create_session(
            "healer-1", "seeker-1", 60,
            scheduled_at=datetime(2026, 3, 1, 12, 0, 0),
            now=FIXED_NOW,
        )
        assert session.scheduled_at == FIXED_NOW
        assert session.scheduled_at.tzinfo is not None
        assert is_confirmation_expired(session, now=FIXED_NOW + timedelta(minutes=6)) is True

    def test_naive_now_is_taken_as_utc(self, pending_session):
        assert is_confirmation_expired(pending_session, now=datetime(2026, 3, 1, 12, 4, 0)) is False
        assert is_confirmation_expired(pending_session, now=datetime(2026, 3, 1, 12, 6, 0)) is True

    def test_naive_schedule_against_current_time(self):
        session = create_session("healer-1", "seeker-1", 60, scheduled_at=datetime(2026, 3, 1, 12, 0, 0))
        with patch("holdspace.services.sessions.state_machine.utc_now", return_value=LATER):
            assert is_confirmation_expired(session) is True
