"""
Onboarding Validation Engine

Per-step validation, advancement gating, completeness scoring, practitioner
classification, prohibited-term flagging and disclaimer text for the healer
onboarding flow.

Invalid input is an expected outcome: validators return
StepValidationResult values and never raise.
"""
from typing import Optional

from ... import config
from ...models.onboarding import (
    ONBOARDING_STEPS,
    HealerApplication, LegalType, OnboardingStep, PractitionerType,
    ProhibitedTermScan, StepValidationResult,
)
from ...utils import round_half_up
from .prohibited_terms import PROHIBITED_PATTERNS

MIN_BIO_LENGTH = 50

LEGAL_REQUIREMENT_ERROR = (
    "You must either provide an HP license or accept the non-clinical disclaimer"
)

# Steps that must pass before the application can be submitted
REQUIRED_STEPS = (
    OnboardingStep.PROFILE,
    OnboardingStep.MODALITIES,
    OnboardingStep.LEGAL,
)

DISCLAIMER_TEXT = {
    PractitionerType.HEILPRAKTIKER: {
        "de": "Dieser Anbieter ist ein staatlich geprüfter Heilpraktiker.",
        "en": (
            "This practitioner is a state-certified Heilpraktiker "
            "(licensed alternative medicine practitioner)."
        ),
    },
    PractitionerType.WELLNESS_PRACTITIONER: {
        "de": (
            "Dieser Anbieter ist kein Heilpraktiker und bietet keine medizinische "
            "Behandlung an. Die angebotenen Leistungen dienen der Entspannung und "
            "dem Wohlbefinden."
        ),
        "en": (
            "This practitioner is not a licensed Heilpraktiker. Sessions offer "
            "holistic wellness facilitation for personal growth and well-being and "
            "are not medical or psychological services."
        ),
    },
}


# =============================================================================
# HELPERS
# =============================================================================

def _result(errors) -> StepValidationResult:
    return StepValidationResult(valid=not errors, errors=list(errors))


def _has_hp_license(app: HealerApplication) -> bool:
    return app.legal.type == LegalType.HEILPRAKTIKER and bool(app.legal.hp_license_number)


def _has_wellness_disclaimer(app: HealerApplication) -> bool:
    return app.legal.type == LegalType.WELLNESS_PRACTITIONER and app.legal.disclaimer_accepted


# =============================================================================
# STEP VALIDATION
# =============================================================================

def validate_step(app: HealerApplication, step: OnboardingStep) -> StepValidationResult:
    """Validate a single onboarding step."""
    step = OnboardingStep(step)
    errors = []

    if step == OnboardingStep.PROFILE:
        if not app.profile.full_name.strip():
            errors.append("Full name is required")
        if len(app.profile.bio) < MIN_BIO_LENGTH:
            errors.append(f"Bio must be at least {MIN_BIO_LENGTH} characters")
        if not app.profile.languages:
            errors.append("At least one language is required")

    elif step == OnboardingStep.MODALITIES:
        if not app.modalities:
            errors.append("Select at least one modality")

    elif step == OnboardingStep.LEGAL:
        if not (_has_hp_license(app) or _has_wellness_disclaimer(app)):
            errors.append(LEGAL_REQUIREMENT_ERROR)

    elif step == OnboardingStep.REVIEW:
        for required in REQUIRED_STEPS:
            if not validate_step(app, required).valid:
                errors.append(f'Step "{required.value}" is incomplete')

    # CREDENTIALS and SOCIAL are optional and always valid
    return _result(errors)


def can_advance(app: HealerApplication, step: OnboardingStep) -> bool:
    """Review is the last step: there is nothing to advance to."""
    if OnboardingStep(step) == OnboardingStep.REVIEW:
        return False
    return validate_step(app, step).valid


def next_step(step: OnboardingStep) -> Optional[OnboardingStep]:
    index = ONBOARDING_STEPS.index(OnboardingStep(step))
    if index + 1 >= len(ONBOARDING_STEPS):
        return None
    return ONBOARDING_STEPS[index + 1]


def previous_step(step: OnboardingStep) -> Optional[OnboardingStep]:
    index = ONBOARDING_STEPS.index(OnboardingStep(step))
    if index == 0:
        return None
    return ONBOARDING_STEPS[index - 1]


def empty_application() -> HealerApplication:
    return HealerApplication()


# =============================================================================
# DERIVED VALUES
# =============================================================================

def compute_completeness(app: HealerApplication) -> int:
    """
    Percentage of eight equally weighted profile checks.

    Independent of step validity: optional credentials and social links
    still count here.
    """
    checks = [
        bool(app.profile.full_name.strip()),
        len(app.profile.bio) >= MIN_BIO_LENGTH,
        len(app.profile.languages) > 0,
        len(app.modalities) > 0,
        len(app.credentials) > 0,
        app.legal.type != LegalType.NONE,
        bool(app.social.instagram_handle),
        bool(app.social.website_url),
    ]
    return round_half_up(sum(checks) / len(checks) * 100)


def classify_practitioner(app: HealerApplication) -> PractitionerType:
    """Mirrors the legal step condition exactly."""
    if _has_hp_license(app):
        return PractitionerType.HEILPRAKTIKER
    if _has_wellness_disclaimer(app):
        return PractitionerType.WELLNESS_PRACTITIONER
    return PractitionerType.UNCLASSIFIED


def flag_prohibited_terms(text: str) -> ProhibitedTermScan:
    """Advisory scan; the first match of each pattern is reported."""
    flagged = []
    for pattern in PROHIBITED_PATTERNS:
        match = pattern.search(text)
        if match:
            flagged.append(match.group(0))
    return ProhibitedTermScan(clean=not flagged, flagged=flagged)


def scan_bio(app: HealerApplication) -> ProhibitedTermScan:
    """Scan the bio as the healer types; very short bios are not scanned."""
    if len(app.profile.bio) <= config.BIO_SCAN_MIN_LENGTH:
        return ProhibitedTermScan(clean=True, flagged=[])
    return flag_prohibited_terms(app.profile.bio)


def generate_disclaimer_text(
    practitioner_type: PractitionerType,
    locale: Optional[str] = None,
) -> str:
    """Public disclaimer for a healer profile. Empty for unclassified."""
    practitioner_type = PractitionerType(practitioner_type)
    if practitioner_type == PractitionerType.UNCLASSIFIED:
        return ""

    locale = locale or config.DEFAULT_LOCALE
    texts = DISCLAIMER_TEXT[practitioner_type]
    return texts.get(locale, texts["de"])
