"""HoldSpace - Trust, Session, Onboarding and Program Engines"""

__version__ = "1.0.0"
