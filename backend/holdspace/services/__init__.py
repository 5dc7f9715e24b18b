"""
HoldSpace Engine Services

- trust: scoring, tiers, safety & cancellation policy, booking gate
- sessions: session lifecycle state machine and SOS
- onboarding: healer registration validation
- programs: multi-session program progression
"""
