"""
HoldSpace - Onboarding Types

Data structures for the multi-step healer onboarding flow, including the
Germany-specific practitioner classification (Heilpraktiker vs Wellness).
The application is built incrementally by the caller; the engine only
validates and derives from it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import List, Optional


class OnboardingStep(str, Enum):
    PROFILE = "profile"
    MODALITIES = "modalities"
    CREDENTIALS = "credentials"
    LEGAL = "legal"
    SOCIAL = "social"
    REVIEW = "review"


ONBOARDING_STEPS = (
    OnboardingStep.PROFILE,
    OnboardingStep.MODALITIES,
    OnboardingStep.CREDENTIALS,
    OnboardingStep.LEGAL,
    OnboardingStep.SOCIAL,
    OnboardingStep.REVIEW,
)

STEP_META = MappingProxyType({
    OnboardingStep.PROFILE: MappingProxyType({"label": "Profile", "icon": "👤", "description": "Tell seekers about yourself"}),
    OnboardingStep.MODALITIES: MappingProxyType({"label": "Modalities", "icon": "🌿", "description": "What do you offer?"}),
    OnboardingStep.CREDENTIALS: MappingProxyType({"label": "Credentials", "icon": "📜", "description": "Your training & certifications"}),
    OnboardingStep.LEGAL: MappingProxyType({"label": "Legal", "icon": "⚖️", "description": "Practitioner classification"}),
    OnboardingStep.SOCIAL: MappingProxyType({"label": "Social", "icon": "🔗", "description": "Connect your profiles"}),
    OnboardingStep.REVIEW: MappingProxyType({"label": "Review", "icon": "✨", "description": "Review & submit"}),
})


class LegalType(str, Enum):
    """What the healer declared in the legal step."""
    HEILPRAKTIKER = "heilpraktiker"
    WELLNESS_PRACTITIONER = "wellness-practitioner"
    NONE = "none"


class PractitionerType(str, Enum):
    """Derived classification."""
    HEILPRAKTIKER = "heilpraktiker"
    WELLNESS_PRACTITIONER = "wellness-practitioner"
    UNCLASSIFIED = "unclassified"


@dataclass
class HealerProfile:
    full_name: str = ""
    bio: str = ""
    languages: List[str] = field(default_factory=list)
    avatar_url: str = ""


@dataclass
class CredentialEntry:
    name: str
    issuer: str
    year: int


@dataclass
class LegalSection:
    type: LegalType = LegalType.NONE
    hp_license_number: Optional[str] = None
    disclaimer_accepted: bool = False


@dataclass
class SocialSection:
    instagram_handle: Optional[str] = None
    website_url: Optional[str] = None


@dataclass
class HealerApplication:
    profile: HealerProfile = field(default_factory=HealerProfile)
    modalities: List[str] = field(default_factory=list)
    credentials: List[CredentialEntry] = field(default_factory=list)
    legal: LegalSection = field(default_factory=LegalSection)
    social: SocialSection = field(default_factory=SocialSection)


@dataclass
class StepValidationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass
class ProhibitedTermScan:
    clean: bool
    flagged: List[str] = field(default_factory=list)
