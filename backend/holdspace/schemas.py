"""
HoldSpace - Collaborator Contracts

Pydantic models for the records the web layer hands to the engines.
Field names accept the camelCase keys the web layer stores.
"""
from datetime import datetime
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .models.trust import (
    HealerStanding, ReportCategory, SafetyReport, TrustScoreInput, TrustTier,
)
from .services.trust.policy import summarize_reports
from .services.trust.reviews import validate_rating
from .utils import ensure_utc, utc_now


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# HEALER SNAPSHOT
# =============================================================================

class HealerRecord(_CamelModel):
    """Persisted healer fields needed for trust scoring and booking."""
    id: str
    identity_verified: bool = False
    credentials_verified: bool = False
    background_check: bool = False
    total_sessions: int = 0
    avg_rating: float = 0.0
    total_reviews: int = 0
    cancellation_rate: float = Field(0.0, description="0-1")
    response_time_minutes: float = 0.0
    account_created_at: datetime
    is_suspended: bool = False
    active_session_id: Optional[str] = None

    @field_validator("account_created_at", mode="before")
    @classmethod
    def _parse_created_at(cls, value):
        return ensure_utc(value)

    def account_age_days(self, now: Optional[datetime] = None) -> int:
        now = ensure_utc(now) if now else utc_now()
        return (now - self.account_created_at).days

    def to_trust_input(
        self,
        reports: Iterable[SafetyReport] = (),
        now: Optional[datetime] = None,
    ) -> TrustScoreInput:
        open_reports, critical_reports = summarize_reports(reports)
        return TrustScoreInput(
            identity_verified=self.identity_verified,
            credentials_verified=self.credentials_verified,
            background_check=self.background_check,
            total_sessions=self.total_sessions,
            avg_rating=self.avg_rating,
            total_reviews=self.total_reviews,
            open_reports=open_reports,
            critical_reports=critical_reports,
            cancellation_rate=self.cancellation_rate,
            account_age_days=self.account_age_days(now),
            response_time_minutes=self.response_time_minutes,
        )

    def to_standing(self, trust_tier: TrustTier) -> HealerStanding:
        return HealerStanding(
            trust_tier=trust_tier,
            is_suspended=self.is_suspended,
            has_active_session=self.active_session_id is not None,
        )


# =============================================================================
# SUBMISSIONS
# =============================================================================

class SafetyReportSubmission(_CamelModel):
    """Report submitted by a healer or seeker."""
    healer_slug: str = Field(..., min_length=1)
    category: ReportCategory
    description: str = ""
    session_id: Optional[str] = None


class ReviewSubmission(_CamelModel):
    healer_slug: str = Field(..., min_length=1)
    rating: float
    comment: str = ""
    seeker_name: str = "Anonymous"

    @field_validator("rating", mode="before")
    @classmethod
    def _check_rating(cls, value):
        if not validate_rating(value):
            raise ValueError("rating must be between 1 and 5")
        return value
