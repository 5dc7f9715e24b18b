"""
Trust Scoring Engine

Computes a composite 0-100 trust score from six weighted sub-scores:

    verification 25 | session history 20 | rating 20
    safety record 20 | reliability 10    | account age 5

Every sub-score is normalized to 0-100 before weighting. Inputs are clamped,
never rejected: malformed values produce a defined score, not an error.
Stateless and deterministic.
"""
import math
from typing import Any, Dict

from ...models.trust import (
    TrustBreakdown, TrustScoreInput, TrustTier,
    TRUST_TIER_LABELS, TRUST_TIER_THRESHOLDS, TRUST_WEIGHTS,
)
from ...utils import clamp, round_half_up


# =============================================================================
# SUB-SCORES
# =============================================================================

def _verification_score(data: TrustScoreInput) -> int:
    score = 0
    if data.identity_verified:
        score += 40
    if data.credentials_verified:
        score += 35
    if data.background_check:
        score += 25
    return score


def _session_history_score(total_sessions: int) -> int:
    # Logarithmic: 10 sessions -> 40, 100 -> 80, ~316 -> 100
    if total_sessions <= 0:
        return 0
    return int(clamp(round_half_up(math.log10(total_sessions) * 40), 0, 100))


def _rating_score(avg_rating: float, total_reviews: int) -> int:
    if total_reviews <= 0:
        return 0
    normalized = (avg_rating / 5) * 100
    # Full confidence at 50+ reviews
    confidence = min(total_reviews / 50, 1)
    return int(clamp(round_half_up(normalized * confidence), 0, 100))


def _safety_score(open_reports: int, critical_reports: int) -> int:
    # A critical open report is counted in both terms. Intentional.
    penalty = open_reports * 15 + critical_reports * 25
    return int(clamp(100 - penalty, 0, 100))


def _response_time_score(response_time_minutes: float) -> int:
    if response_time_minutes <= 5:
        return 100
    if response_time_minutes <= 15:
        return 80
    if response_time_minutes <= 30:
        return 50
    return 20


def _reliability_score(cancellation_rate: float, response_time_minutes: float) -> int:
    cancel_score = clamp(100 - cancellation_rate * 200, 0, 100)
    response_score = _response_time_score(response_time_minutes)
    return round_half_up((cancel_score + response_score) / 2)


def _account_age_score(account_age_days: int) -> int:
    # Linear ramp, full score at one year
    return int(clamp(round_half_up(account_age_days / 365 * 100), 0, 100))


# =============================================================================
# PUBLIC API
# =============================================================================

def compute_trust_breakdown(data: TrustScoreInput) -> TrustBreakdown:
    """Compute every sub-score and the weighted composite."""
    verification = _verification_score(data)
    session_history = _session_history_score(data.total_sessions)
    rating = _rating_score(data.avg_rating, data.total_reviews)
    safety_record = _safety_score(data.open_reports, data.critical_reports)
    reliability = _reliability_score(data.cancellation_rate, data.response_time_minutes)
    account_age = _account_age_score(data.account_age_days)

    weighted = (
        verification * TRUST_WEIGHTS["verification"]
        + session_history * TRUST_WEIGHTS["session_history"]
        + rating * TRUST_WEIGHTS["rating"]
        + safety_record * TRUST_WEIGHTS["safety_record"]
        + reliability * TRUST_WEIGHTS["reliability"]
        + account_age * TRUST_WEIGHTS["account_age"]
    ) / 100

    return TrustBreakdown(
        verification=verification,
        session_history=session_history,
        rating=rating,
        safety_record=safety_record,
        reliability=reliability,
        account_age=account_age,
        score=int(clamp(round_half_up(weighted), 0, 100)),
    )


def compute_trust_score(data: TrustScoreInput) -> int:
    """Composite trust score, integer in [0, 100]."""
    return compute_trust_breakdown(data).score


def compute_trust_tier(score: int) -> TrustTier:
    """Map a score to its tier. Lower bounds are inclusive."""
    if score >= TRUST_TIER_THRESHOLDS[TrustTier.TRUSTED]:
        return TrustTier.TRUSTED
    if score >= TRUST_TIER_THRESHOLDS[TrustTier.ESTABLISHED]:
        return TrustTier.ESTABLISHED
    if score >= TRUST_TIER_THRESHOLDS[TrustTier.VERIFIED]:
        return TrustTier.VERIFIED
    return TrustTier.NEW


def describe_trust_badge(
    score: int,
    identity_verified: bool,
    credentials_verified: bool,
    background_check: bool,
) -> Dict[str, Any]:
    """
    Display data for a healer's trust badge.

    The tier is always re-derived from the score, never taken from storage.
    """
    tier = compute_trust_tier(score)
    tier_info = TRUST_TIER_LABELS[tier]

    return {
        "tier": tier.value,
        "label": tier_info["label"],
        "icon": tier_info["icon"],
        "color": tier_info["color"],
        "score": score,
        "score_text": f"{score}/100",
        "checks": [
            {"label": "Identity verified", "passed": identity_verified},
            {"label": "Credentials verified", "passed": credentials_verified},
            {"label": "Background check", "passed": background_check},
        ],
    }
