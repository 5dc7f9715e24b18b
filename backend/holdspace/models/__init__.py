"""HoldSpace - Data Models"""
from .trust import (
    # Enums
    TrustTier, ReportCategory, ReportSeverity, ReportStatus, ParticipantRole,
    CancelledBy, SessionStatus, CancellationPenalty, HealerAvailability,
    # Constants
    TRUST_TIER_THRESHOLDS, TRUST_TIER_LABELS, TRUST_WEIGHTS,
    AUTO_SUSPEND_THRESHOLD, GRACE_PERIOD_HOURS, CONFIRMATION_TIMEOUT_MINUTES,
    # Trust & safety
    TrustScoreInput, TrustBreakdown, SafetyReport, CancellationRecord,
    SeekerStanding, HealerStanding, BookingDecision,
    # Session
    LocationSnapshot, SOSEvent, Session,
)
from .onboarding import (
    OnboardingStep, ONBOARDING_STEPS, STEP_META, LegalType, PractitionerType,
    HealerProfile, CredentialEntry, LegalSection, SocialSection,
    HealerApplication, StepValidationResult, ProhibitedTermScan,
)
from .program import (
    ProgramMilestone, ProgramConfig, Program, EnrollmentSession,
    ProgramEnrollment, MilestoneStatus, ProgramProgress,
)

__all__ = [
    "TrustTier", "ReportCategory", "ReportSeverity", "ReportStatus", "ParticipantRole",
    "CancelledBy", "SessionStatus", "CancellationPenalty", "HealerAvailability",
    "TRUST_TIER_THRESHOLDS", "TRUST_TIER_LABELS", "TRUST_WEIGHTS",
    "AUTO_SUSPEND_THRESHOLD", "GRACE_PERIOD_HOURS", "CONFIRMATION_TIMEOUT_MINUTES",
    "TrustScoreInput", "TrustBreakdown", "SafetyReport", "CancellationRecord",
    "SeekerStanding", "HealerStanding", "BookingDecision",
    "LocationSnapshot", "SOSEvent", "Session",
    "OnboardingStep", "ONBOARDING_STEPS", "STEP_META", "LegalType", "PractitionerType",
    "HealerProfile", "CredentialEntry", "LegalSection", "SocialSection",
    "HealerApplication", "StepValidationResult", "ProhibitedTermScan",
    "ProgramMilestone", "ProgramConfig", "Program", "EnrollmentSession",
    "ProgramEnrollment", "MilestoneStatus", "ProgramProgress",
]
