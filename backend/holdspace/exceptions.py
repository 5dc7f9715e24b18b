"""
HoldSpace - Engine Errors

Structural violations are caller misuse: they are raised immediately and
never silently corrected. Validation failures and policy denials are NOT
errors and are returned as values by the engines.
"""
from typing import Sequence


class StructuralViolationError(ValueError):
    """Base class for hard failures raised by the engines."""
    pass


class InvalidTransitionError(StructuralViolationError):
    """Raised when a session transition is not in the allowed set."""

    def __init__(self, from_status, to_status, allowed: Sequence = ()):
        self.from_status = from_status
        self.to_status = to_status
        self.allowed = tuple(allowed)
        allowed_text = ", ".join(s.value for s in self.allowed)
        super().__init__(
            f"Invalid transition: {from_status.value} -> {to_status.value}. "
            f"Allowed: [{allowed_text}]"
        )


class SessionNotActiveError(StructuralViolationError):
    """Raised when SOS is triggered on a session that is not active."""
    pass


class ProgramStructureError(StructuralViolationError):
    """Raised when a program's session count does not match its milestones."""
    pass


class EnrollmentCompleteError(StructuralViolationError):
    """Raised when advancing an enrollment that already finished."""
    pass


class MilestoneIndexError(StructuralViolationError):
    """Raised when a milestone index is out of bounds."""
    pass


class UnknownCategoryError(StructuralViolationError):
    """Raised when a safety report uses a category outside the closed set."""
    pass
