"""
Collaborator Contract Tests

Tests verify:
1. Healer records parse camelCase persisted fields
2. Trust input derivation (account age, report counts)
3. Booking standing derivation
4. Submission validation
"""
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from holdspace.models.trust import (
    ParticipantRole, ReportCategory, ReportSeverity, ReportStatus, SafetyReport,
    SeekerStanding, TrustTier,
)
from holdspace.schemas import HealerRecord, ReviewSubmission, SafetyReportSubmission
from holdspace.services.trust.policy import can_book_session
from holdspace.services.trust.scoring import compute_trust_score


FIXED_NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def healer_row():
    return {
        "id": "healer-1",
        "identityVerified": True,
        "credentialsVerified": True,
        "backgroundCheck": False,
        "totalSessions": 42,
        "avgRating": 4.7,
        "totalReviews": 31,
        "cancellationRate": 0.05,
        "responseTimeMinutes": 12,
        "accountCreatedAt": "2025-03-01T12:00:00Z",
        "isSuspended": False,
        "activeSessionId": None,
    }


class TestHealerRecord:
    """Tests for HealerRecord."""

    def test_parses_camel_case(self, healer_row):
        record = HealerRecord.model_validate(healer_row)
        assert record.total_sessions == 42
        assert record.account_created_at.tzinfo is not None

    def test_accepts_snake_case(self):
        record = HealerRecord(id="healer-2", account_created_at="2026-01-01T00:00:00")
        assert record.account_age_days(FIXED_NOW) == 59

    def test_naive_now_is_taken_as_utc(self):
        record = HealerRecord(id="healer-2", account_created_at="2026-01-01T00:00:00Z")
        assert record.account_age_days(datetime(2026, 3, 1, 12, 0, 0)) == 59

    def test_trust_input(self, healer_row):
        reports = [
            SafetyReport(
                id="report-1",
                reporter_id="seeker-1",
                reported_id="healer-1",
                reporter_role=ParticipantRole.SEEKER,
                category=ReportCategory.NO_SHOW,
                severity=ReportSeverity.LOW,
                status=ReportStatus.OPEN,
                created_at=FIXED_NOW,
            ),
        ]
        trust_input = HealerRecord.model_validate(healer_row).to_trust_input(reports, now=FIXED_NOW)
        assert trust_input.account_age_days == 365
        assert trust_input.open_reports == 1
        assert trust_input.critical_reports == 0
        assert 0 <= compute_trust_score(trust_input) <= 100

    def test_standing_reflects_active_session(self, healer_row):
        healer_row["activeSessionId"] = "sess-9"
        standing = HealerRecord.model_validate(healer_row).to_standing(TrustTier.ESTABLISHED)
        assert standing.has_active_session is True

        seeker = SeekerStanding(trust_tier=TrustTier.NEW, is_suspended=False)
        assert can_book_session(seeker, standing).allowed is False


class TestSubmissions:
    """Tests for request shapes."""

    def test_safety_report_category(self):
        submission = SafetyReportSubmission.model_validate(
            {"healerSlug": "lena-vogel", "category": "no_show"}
        )
        assert submission.category == ReportCategory.NO_SHOW

    def test_safety_report_rejects_unknown_category(self):
        with pytest.raises(ValidationError):
            SafetyReportSubmission.model_validate({"healerSlug": "lena-vogel", "category": "rude"})

    def test_review_rating_bounds(self):
        assert ReviewSubmission(healer_slug="lena-vogel", rating=5).rating == 5
        with pytest.raises(ValidationError):
            ReviewSubmission(healer_slug="lena-vogel", rating=0)

    def test_review_rejects_boolean_rating(self):
        with pytest.raises(ValidationError):
            ReviewSubmission(healer_slug="lena-vogel", rating=True)
        with pytest.raises(ValidationError):
            ReviewSubmission.model_validate({"healerSlug": "lena-vogel", "rating": False})
