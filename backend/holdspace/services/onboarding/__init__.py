"""
Onboarding Services

Healer registration: step validation, completeness, legal classification
and prohibited-term scanning.
"""
from .engine import (
    validate_step,
    can_advance,
    next_step,
    previous_step,
    empty_application,
    compute_completeness,
    classify_practitioner,
    flag_prohibited_terms,
    scan_bio,
    generate_disclaimer_text,
)
from .prohibited_terms import PROHIBITED_TERMS_VERSION, PROHIBITED_PATTERNS

__all__ = [
    'validate_step',
    'can_advance',
    'next_step',
    'previous_step',
    'empty_application',
    'compute_completeness',
    'classify_practitioner',
    'flag_prohibited_terms',
    'scan_bio',
    'generate_disclaimer_text',
    'PROHIBITED_TERMS_VERSION',
    'PROHIBITED_PATTERNS',
]
