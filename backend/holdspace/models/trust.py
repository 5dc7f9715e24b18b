"""
HoldSpace - Trust, Safety & Session Types

Shared vocabulary for trust scoring, safety reporting, cancellation
policy and the session lifecycle. Constants are process-wide and immutable.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Optional


# =============================================================================
# ENUMS
# =============================================================================

class TrustTier(str, Enum):
    NEW = "new"
    VERIFIED = "verified"
    ESTABLISHED = "established"
    TRUSTED = "trusted"


class ReportCategory(str, Enum):
    INAPPROPRIATE = "inappropriate"
    HARASSMENT = "harassment"
    NO_SHOW = "no_show"
    MISREPRESENTATION = "misrepresentation"
    SAFETY_CONCERN = "safety_concern"


class ReportSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ReportStatus(str, Enum):
    """Moderation lifecycle. Only OPEN is set by the engines."""
    OPEN = "open"
    REVIEWING = "reviewing"
    RESOLVED = "resolved"
    ESCALATED = "escalated"


class ParticipantRole(str, Enum):
    HEALER = "healer"
    SEEKER = "seeker"


class CancelledBy(str, Enum):
    HEALER = "healer"
    SEEKER = "seeker"
    SYSTEM = "system"


class SessionStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    REPORTED = "reported"


class CancellationPenalty(str, Enum):
    NONE = "none"
    WARNING = "warning"
    COOLDOWN = "cooldown"
    SUSPENSION = "suspension"


class HealerAvailability(str, Enum):
    """OFFLINE is only ever set manually by the healer, never derived."""
    ONLINE = "online"
    BUSY = "busy"
    OFFLINE = "offline"


# =============================================================================
# CONSTANTS
# =============================================================================

# Lower bound (inclusive) of each tier
TRUST_TIER_THRESHOLDS = MappingProxyType({
    TrustTier.NEW: 0,
    TrustTier.VERIFIED: 30,
    TrustTier.ESTABLISHED: 60,
    TrustTier.TRUSTED: 85,
})

TRUST_TIER_LABELS = MappingProxyType({
    TrustTier.NEW: MappingProxyType({"label": "New", "icon": "🆕", "color": "#94a3b8"}),
    TrustTier.VERIFIED: MappingProxyType({"label": "Verified", "icon": "✅", "color": "#22c55e"}),
    TrustTier.ESTABLISHED: MappingProxyType({"label": "Established", "icon": "🌿", "color": "#10b981"}),
    TrustTier.TRUSTED: MappingProxyType({"label": "Trusted", "icon": "💎", "color": "#8b5cf6"}),
})

# Percentage weights, sum to 100
TRUST_WEIGHTS = MappingProxyType({
    "verification": 25,      # ID + credentials + background
    "session_history": 20,   # total sessions completed
    "rating": 20,            # avg rating weighted by review count
    "safety_record": 20,     # inverse of reports
    "reliability": 10,       # cancellation rate + response time
    "account_age": 5,        # longevity bonus
})

AUTO_SUSPEND_THRESHOLD = 3          # critical open reports
GRACE_PERIOD_HOURS = 24             # cancellation grace period
CONFIRMATION_TIMEOUT_MINUTES = 5    # pending sessions expire after this


# =============================================================================
# TRUST INPUTS
# =============================================================================

@dataclass(frozen=True)
class TrustScoreInput:
    """Snapshot of a healer's trust signals. Built fresh by the caller."""
    identity_verified: bool = False
    credentials_verified: bool = False
    background_check: bool = False
    total_sessions: int = 0
    avg_rating: float = 0.0
    total_reviews: int = 0
    open_reports: int = 0
    critical_reports: int = 0
    cancellation_rate: float = 0.0  # 0-1
    account_age_days: int = 0
    response_time_minutes: float = 0.0


@dataclass(frozen=True)
class TrustBreakdown:
    """Sub-scores (each 0-100) and the weighted composite."""
    verification: int
    session_history: int
    rating: int
    safety_record: int
    reliability: int
    account_age: int
    score: int


# =============================================================================
# SAFETY & CANCELLATION
# =============================================================================

@dataclass(frozen=True)
class SafetyReport:
    id: str
    reporter_id: str
    reported_id: str
    reporter_role: ParticipantRole
    category: ReportCategory
    severity: ReportSeverity
    status: ReportStatus
    created_at: datetime
    description: str = ""
    session_id: Optional[str] = None


@dataclass(frozen=True)
class CancellationRecord:
    session_id: str
    cancelled_by: CancelledBy
    cancelled_at: datetime
    within_grace_period: bool  # cancelled >= 24h before start, no penalty
    reason: Optional[str] = None


@dataclass(frozen=True)
class SeekerStanding:
    """Seeker status supplied by the identity collaborator."""
    trust_tier: TrustTier
    is_suspended: bool


@dataclass(frozen=True)
class HealerStanding:
    trust_tier: TrustTier
    is_suspended: bool
    has_active_session: bool


@dataclass(frozen=True)
class BookingDecision:
    allowed: bool
    reason: Optional[str] = None


# =============================================================================
# SESSION
# =============================================================================

@dataclass(frozen=True)
class LocationSnapshot:
    lat: float
    lng: float


@dataclass(frozen=True)
class SOSEvent:
    """Created exactly once when SOS fires. Never mutated."""
    session_id: str
    triggered_by: ParticipantRole
    timestamp: datetime
    location_snapshot: Optional[LocationSnapshot] = None


@dataclass(frozen=True)
class Session:
    """Bookable session. Updated only through the state machine."""
    id: str
    healer_id: str
    seeker_id: str
    status: SessionStatus
    scheduled_at: datetime
    duration_minutes: int
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None
    cancelled_by: Optional[CancelledBy] = None
    cancellation_reason: Optional[str] = None
    sos_event: Optional[SOSEvent] = None
