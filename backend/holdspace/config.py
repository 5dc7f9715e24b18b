"""
HoldSpace - Engine Configuration

Deployment-level settings read from the environment.
Business rules (weights, thresholds, term lists) are NOT configurable here;
they live as immutable constants next to the engines that use them.
"""
import os

SUPPORTED_LOCALES = ("de", "en")

# Locale used for disclaimer text when the caller does not pass one
DEFAULT_LOCALE = os.getenv("HOLDSPACE_DEFAULT_LOCALE", "de")
if DEFAULT_LOCALE not in SUPPORTED_LOCALES:
    DEFAULT_LOCALE = "de"

# Bios at or below this length are not scanned for prohibited terms
BIO_SCAN_MIN_LENGTH = int(os.getenv("HOLDSPACE_BIO_SCAN_MIN_LENGTH", "10"))
