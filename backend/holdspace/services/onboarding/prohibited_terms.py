"""
Prohibited Terms (German + English)

Word forms that imply medical claims. Wellness practitioners may not use
them to describe their services. Matching is case-insensitive and bounded
by ASCII word boundaries, so a trailing umlaut or sharp s ends a word.

Bump PROHIBITED_TERMS_VERSION whenever the list changes.
"""
import re

PROHIBITED_TERMS_VERSION = "2025.1"

PROHIBITED_TERMS = (
    r"heil(e|en|t|ung)",
    r"therapie",
    r"therapy",
    r"behandl(e|en|t|ung)",
    r"diagnos(e|en|tik)",
    r"cure[sd]?",
    r"treat(s|ed|ing|ment)?",
    r"diagnos(e[sd]?|ing|is)",
)

PROHIBITED_PATTERNS = tuple(
    re.compile(rf"\b{term}\b", re.IGNORECASE | re.ASCII) for term in PROHIBITED_TERMS
)
