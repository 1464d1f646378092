from dataclasses import dataclass, field
from enum import Enum


class QuestionType(str, Enum):
    SINGLE = "single"
    MULTI = "multi"
    SCENARIO = "scenario"
    CODE = "code"


@dataclass(frozen=True)
class QuizOption:
    id: str
    text: str
    is_correct: bool = False


@dataclass(frozen=True)
class QuizQuestion:
    id: str
    type: QuestionType
    question: str
    options: list[QuizOption] = field(default_factory=list)
    code_snippet: str | None = None
    scenario: str | None = None
    explanation: str | None = None
    points: int = 1


@dataclass(frozen=True)
class QuizConfig:
    id: str
    assignment_id: str
    title: str
    course: str
    module: str
    question_count: int
    time_limit_minutes: int
    passing_score: int
    attempt_limit: int
    instructions: list[str] = field(default_factory=list)
    questions: list[QuizQuestion] = field(default_factory=list)
