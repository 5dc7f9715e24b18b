"""Session lifecycle services."""
from .state_machine import (
    STATE_CONFIG,
    allowed_transitions,
    is_terminal,
    can_transition,
    create_session,
    transition_session,
    trigger_sos,
    is_confirmation_expired,
    get_healer_availability,
)

__all__ = [
    'STATE_CONFIG',
    'allowed_transitions',
    'is_terminal',
    'can_transition',
    'create_session',
    'transition_session',
    'trigger_sos',
    'is_confirmation_expired',
    'get_healer_availability',
]
