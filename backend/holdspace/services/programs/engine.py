"""
Program Engine

Multi-session healing programs: creation, seeker enrollment, strictly
sequential advancement, progress and milestone prompts.

Structural invariants:
- one milestone per session (session_count == len(milestones))
- enrollment step increases by exactly one per completed session
- a finished enrollment cannot advance
"""
import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

from ...exceptions import EnrollmentCompleteError, MilestoneIndexError, ProgramStructureError
from ...models.program import (
    EnrollmentSession, MilestoneStatus, Program, ProgramConfig,
    ProgramEnrollment, ProgramProgress,
)
from ...utils import new_id, round_half_up, utc_now

logger = logging.getLogger(__name__)


def create_program(
    healer_id: str,
    program_config: ProgramConfig,
    *,
    now: Optional[datetime] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> Program:
    """
    Create an unpublished program from a healer's configuration.

    Raises:
        ProgramStructureError: if session_count != number of milestones
    """
    milestone_count = len(program_config.milestones)
    if program_config.session_count != milestone_count:
        raise ProgramStructureError(
            f"Session count ({program_config.session_count}) must match "
            f"milestones length ({milestone_count})."
        )

    program = Program(
        id=id_factory() if id_factory else new_id("prog"),
        healer_id=healer_id,
        title=program_config.title,
        description=program_config.description,
        modality=program_config.modality,
        session_count=program_config.session_count,
        milestones=tuple(program_config.milestones),
        is_published=False,
        created_at=now or utc_now(),
    )
    logger.info(f"Program {program.id} created with {program.session_count} sessions")
    return program


def publish_program(program: Program) -> Program:
    return replace(program, is_published=True)


def enroll_seeker(
    program: Program,
    seeker_id: str,
    *,
    now: Optional[datetime] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> ProgramEnrollment:
    """Start a fresh enrollment at step 0."""
    return ProgramEnrollment(
        id=id_factory() if id_factory else new_id("enroll"),
        program_id=program.id,
        seeker_id=seeker_id,
        current_step=0,
        started_at=now or utc_now(),
        completed_at=None,
        sessions=(),
    )


def advance_enrollment(
    enrollment: ProgramEnrollment,
    program: Program,
    completed_session_id: str,
    *,
    now: Optional[datetime] = None,
) -> ProgramEnrollment:
    """
    Record a completed session against the current milestone.

    Raises:
        EnrollmentCompleteError: if every session is already completed
    """
    if enrollment.current_step >= program.session_count:
        raise EnrollmentCompleteError("Program already completed. Cannot advance further.")

    now = now or utc_now()
    session = EnrollmentSession(
        session_id=completed_session_id,
        milestone_index=enrollment.current_step,
        completed_at=now,
    )

    next_step = enrollment.current_step + 1
    is_complete = next_step >= program.session_count
    if is_complete:
        logger.info(f"Enrollment {enrollment.id} completed program {program.id}")

    return replace(
        enrollment,
        current_step=next_step,
        sessions=enrollment.sessions + (session,),
        completed_at=now if is_complete else None,
    )


def record_session_notes(
    enrollment: ProgramEnrollment,
    milestone_index: int,
    intention: Optional[str] = None,
    reflection: Optional[str] = None,
) -> ProgramEnrollment:
    """
    Attach a pre-session intention and/or post-session reflection to a
    completed milestone. Notes left as None keep their current value.

    Raises:
        MilestoneIndexError: if no completed session has that milestone index
    """
    sessions = list(enrollment.sessions)
    for i, session in enumerate(sessions):
        if session.milestone_index != milestone_index:
            continue
        sessions[i] = replace(
            session,
            pre_session_intention=intention if intention is not None else session.pre_session_intention,
            post_session_reflection=reflection if reflection is not None else session.post_session_reflection,
        )
        return replace(enrollment, sessions=tuple(sessions))

    raise MilestoneIndexError(f"No completed session for milestone {milestone_index}.")


def compute_progress(enrollment: ProgramEnrollment, program: Program) -> ProgramProgress:
    """Completion percentage plus per-milestone status."""
    total_steps = program.session_count
    completed_steps = len(enrollment.sessions)
    percentage = round_half_up(completed_steps / total_steps * 100) if total_steps else 0

    by_index = {}
    for session in enrollment.sessions:
        by_index.setdefault(session.milestone_index, session)

    milestones = []
    for index, milestone in enumerate(program.milestones):
        session = by_index.get(index)
        milestones.append(MilestoneStatus(
            milestone=milestone,
            completed=session is not None,
            session_id=session.session_id if session else None,
        ))

    return ProgramProgress(
        percentage=percentage,
        completed_steps=completed_steps,
        total_steps=total_steps,
        milestones=milestones,
    )


def can_schedule_next_session(enrollment: ProgramEnrollment, program: Program) -> bool:
    return enrollment.current_step < program.session_count


def generate_intention_prompt(program: Program, milestone_index: int) -> str:
    """
    Prompt stored on a milestone.

    Always returns intention_prompt, even for late integration-phase
    milestones.

    Raises:
        MilestoneIndexError: if the index is out of bounds
    """
    if milestone_index < 0 or milestone_index >= len(program.milestones):
        raise MilestoneIndexError(
            f"Milestone index {milestone_index} is out of bounds "
            f"(0-{len(program.milestones) - 1})."
        )
    return program.milestones[milestone_index].intention_prompt
