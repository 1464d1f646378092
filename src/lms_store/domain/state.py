from dataclasses import dataclass, field
from enum import Enum

from lms_store.domain.assignment import Assignment
from lms_store.domain.course import Course
from lms_store.domain.quiz import QuizConfig


class AssessmentKind(str, Enum):
    QUIZ = "quiz"
    ASSIGNMENT = "assignment"


@dataclass(frozen=True, slots=True)
class AvailableAssessment:
    id: str
    title: str
    type: AssessmentKind


@dataclass(frozen=True)
class StoreState:
    courses: list[Course] = field(default_factory=list)
    assignments: list[Assignment] = field(default_factory=list)
    quiz_configs: dict[str, QuizConfig] = field(default_factory=dict)


@dataclass(frozen=True)
class PersistedSnapshot:
    """Stored blob as read back; sections absent from it stay None"""

    courses: list[Course] | None = None
    assignments: list[Assignment] | None = None
    quiz_configs: dict[str, QuizConfig] | None = None
