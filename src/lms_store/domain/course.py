from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from lms_store.domain.external_ref import ExternalRef


class CourseStatus(str, Enum):
    DRAFT = "draft"
    PENDING_APPROVAL = "pending_approval"
    PUBLISHED = "published"
    ARCHIVED = "archived"
    REJECTED = "rejected"

    @property
    def is_learner_visible(self) -> bool:
        return self in (CourseStatus.PUBLISHED, CourseStatus.ARCHIVED)


class ContentType(str, Enum):
    VIDEO = "video"
    PDF = "pdf"
    PPT = "ppt"
    LINK = "link"


class CompletionRuleType(str, Enum):
    WATCH_VIDEOS = "watch_videos"
    PASS_QUIZ = "pass_quiz"
    SUBMIT_ASSIGNMENT = "submit_assignment"


@dataclass(frozen=True)
class ContentItem:
    id: str
    type: ContentType
    title: str
    url: str
    order: int
    duration: str | None = None
    published: bool = False


@dataclass(frozen=True)
class CompletionRuleConfig:
    assessment_id: str | None = None
    pass_score: int | None = None


@dataclass(frozen=True)
class CompletionRule:
    type: CompletionRuleType
    config: CompletionRuleConfig | None = None


@dataclass(frozen=True)
class Module:
    id: str
    title: str
    order: int
    chapters: list[ContentItem] = field(default_factory=list)
    completion_rules: list[CompletionRule] = field(default_factory=list)
    attached_quiz_id: str | None = None
    attached_assignment_id: str | None = None
    pass_score: int | None = None


@dataclass(frozen=True)
class Instructor:
    name: str = "Instructor"
    role: str = "Tech Lead"


@dataclass(frozen=True)
class Course:
    id: str
    title: str
    description: str = ""
    backend_id: str | None = None
    video_url: str | None = None
    thumbnail: str | None = None
    estimated_duration: str = "2 weeks"
    status: CourseStatus = CourseStatus.DRAFT
    roles: list[str] = field(default_factory=list)
    phase: str = "Foundation"
    course_order: int = 1
    is_mandatory: bool = False
    prerequisite_course_ids: list[str] = field(default_factory=list)
    modules: list[Module] = field(default_factory=list)
    instructor: Instructor = field(default_factory=Instructor)
    skills: list[str] = field(default_factory=list)
    path_slug: str = "fullstack"
    last_updated: date = field(default_factory=date.today)
    enrolled_count: int = 0
    completion_rate: int = 0
    created_at: date = field(default_factory=date.today)

    @property
    def ref(self) -> ExternalRef:
        return ExternalRef(local_id=self.id, remote_id=self.backend_id)
