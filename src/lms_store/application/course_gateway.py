from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Protocol

from lms_store.domain.course import CourseStatus


@dataclass(frozen=True, slots=True)
class RemoteCourseAuthor:
    id: str
    email: str = ""
    name: str = ""
    role: str = ""


@dataclass(frozen=True, slots=True)
class RemoteCourse:
    """Course record as served by the Course API"""

    id: str
    title: str
    status: CourseStatus
    description: str = ""
    video_url: str | None = None
    tags: list[str] = field(default_factory=list)
    created_by: RemoteCourseAuthor | None = None
    created_at: str | None = None
    updated_at: str | None = None


@dataclass(frozen=True, slots=True)
class RemoteCoursePage:
    items: list[RemoteCourse]
    page: int = 1
    limit: int = 20
    total: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class CourseCreateRequest:
    title: str
    description: str | None = None
    video_url: str | None = None
    thumbnail: str | None = None
    overview: str | None = None
    outcomes: list[str] | None = None
    status: CourseStatus | None = None
    tags: list[str] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CourseUpdateRequest:
    title: str | None = None
    description: str | None = None
    video_url: str | None = None
    thumbnail: str | None = None
    status: CourseStatus | None = None
    tags: list[str] | None = None


class RemoteCourseGateway(Protocol):
    """Client of the remote Course REST API"""

    @abstractmethod
    async def list_courses(
        self,
        page: int = 1,
        limit: int = 20,
        search: str | None = None,
        status: CourseStatus | None = None,
    ) -> RemoteCoursePage:
        raise NotImplementedError

    @abstractmethod
    async def get_course(self, course_id: str) -> RemoteCourse:
        raise NotImplementedError

    @abstractmethod
    async def create_course(self, request: CourseCreateRequest) -> RemoteCourse:
        raise NotImplementedError

    @abstractmethod
    async def update_course(
        self,
        course_id: str,
        request: CourseUpdateRequest,
    ) -> RemoteCourse:
        raise NotImplementedError

    @abstractmethod
    async def delete_course(self, course_id: str) -> None:
        raise NotImplementedError
