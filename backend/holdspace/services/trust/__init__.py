"""
Trust & Safety Services

Trust scoring, tiering, auto-suspension, cancellation penalties and
booking eligibility. All functions are pure.
"""
from .scoring import (
    compute_trust_score,
    compute_trust_breakdown,
    compute_trust_tier,
    describe_trust_badge,
)
from .policy import (
    should_auto_suspend,
    summarize_reports,
    create_safety_report,
    is_within_grace_period,
    build_cancellation_record,
    get_cancellation_penalty,
    can_book_session,
)
from .reviews import validate_rating, aggregate_ratings

__all__ = [
    'compute_trust_score',
    'compute_trust_breakdown',
    'compute_trust_tier',
    'describe_trust_badge',
    'should_auto_suspend',
    'summarize_reports',
    'create_safety_report',
    'is_within_grace_period',
    'build_cancellation_record',
    'get_cancellation_penalty',
    'can_book_session',
    'validate_rating',
    'aggregate_ratings',
]
