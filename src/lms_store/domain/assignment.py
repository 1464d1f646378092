from dataclasses import dataclass, field
from enum import Enum


class AssignmentStatus(str, Enum):
    ASSIGNED = "Assigned"
    DUE = "Due"
    SUBMITTED = "Submitted"
    REVIEWED = "Reviewed"
    OVERDUE = "Overdue"


QUIZ_ASSIGNMENT_TYPE = "Quiz"


@dataclass(frozen=True)
class Rubric:
    criterion: str
    points: int


@dataclass(frozen=True)
class ReferenceMaterial:
    label: str
    url: str | None = None


@dataclass(frozen=True)
class Assignment:
    id: str
    title: str
    course: str
    course_id: str
    path_slug: str
    module: str
    module_id: str
    role: str
    type: str
    due_date: str
    due_date_iso: str
    status: AssignmentStatus = AssignmentStatus.ASSIGNED
    description: str | None = None
    instructions: list[str] = field(default_factory=list)
    deliverables: list[str] = field(default_factory=list)
    rubrics: list[Rubric] = field(default_factory=list)
    reference_materials: list[ReferenceMaterial] = field(default_factory=list)
    submission_guidelines: str | None = None
    late_penalty: str | None = None
    attempt_limit: int | None = None
    time_limit_minutes: int | None = None
    # Set by instructor review
    ai_feedback: str | None = None

    @property
    def is_quiz(self) -> bool:
        return self.type == QUIZ_ASSIGNMENT_TYPE
