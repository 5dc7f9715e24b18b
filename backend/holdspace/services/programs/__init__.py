"""Multi-session program services."""
from .engine import (
    create_program,
    publish_program,
    enroll_seeker,
    advance_enrollment,
    record_session_notes,
    compute_progress,
    can_schedule_next_session,
    generate_intention_prompt,
)

__all__ = [
    'create_program',
    'publish_program',
    'enroll_seeker',
    'advance_enrollment',
    'record_session_notes',
    'compute_progress',
    'can_schedule_next_session',
    'generate_intention_prompt',
]
