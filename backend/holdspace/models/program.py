"""
HoldSpace - Program Types

Structures for multi-session healing programs: milestones with
intention/integration prompts, seeker enrollments, and progress.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class ProgramMilestone:
    step_number: int
    title: str
    description: str
    intention_prompt: str
    integration_prompt: str


@dataclass
class ProgramConfig:
    """Healer-authored program definition, before validation."""
    title: str
    description: str
    modality: str
    session_count: int
    milestones: List[ProgramMilestone] = field(default_factory=list)


@dataclass(frozen=True)
class Program:
    id: str
    healer_id: str
    title: str
    description: str
    modality: str
    session_count: int  # always == len(milestones)
    milestones: Tuple[ProgramMilestone, ...]
    is_published: bool
    created_at: datetime


@dataclass(frozen=True)
class EnrollmentSession:
    session_id: str
    milestone_index: int
    completed_at: Optional[datetime]
    pre_session_intention: Optional[str] = None
    post_session_reflection: Optional[str] = None


@dataclass(frozen=True)
class ProgramEnrollment:
    """current_step only ever increases, one per completed session."""
    id: str
    program_id: str
    seeker_id: str
    current_step: int
    started_at: datetime
    completed_at: Optional[datetime] = None
    sessions: Tuple[EnrollmentSession, ...] = ()


@dataclass(frozen=True)
class MilestoneStatus:
    milestone: ProgramMilestone
    completed: bool
    session_id: Optional[str] = None


@dataclass(frozen=True)
class ProgramProgress:
    percentage: int
    completed_steps: int
    total_steps: int
    milestones: List[MilestoneStatus]
