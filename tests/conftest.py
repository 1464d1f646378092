from dataclasses import replace

import pytest

from lms_store.application.course_gateway import (
    CourseCreateRequest,
    CourseUpdateRequest,
    RemoteCourse,
    RemoteCourseGateway,
    RemoteCoursePage,
)
from lms_store.application.exceptions.base import (
    RemoteCourseApiError,
    RemoteCourseUnavailableError,
)
from lms_store.domain.course import CourseStatus


class FakeCourseGateway(RemoteCourseGateway):
    """In-memory Course API keyed by remote id"""

    def __init__(self, courses: list[RemoteCourse] | None = None) -> None:
        self.courses: dict[str, RemoteCourse] = {
            course.id: course for course in courses or []
        }
        self.calls: list[tuple[str, str | None]] = []
        self.offline = False
        self._next_id = 100

    def _check_online(self) -> None:
        if self.offline:
            raise RemoteCourseUnavailableError(detail="connection refused")

    async def list_courses(
        self,
        page: int = 1,
        limit: int = 20,
        search: str | None = None,
        status: CourseStatus | None = None,
    ) -> RemoteCoursePage:
        self.calls.append(("list", None))
        self._check_online()
        items = list(self.courses.values())[:limit]
        return RemoteCoursePage(items=items, page=page, limit=limit, total=len(self.courses))

    async def get_course(self, course_id: str) -> RemoteCourse:
        self.calls.append(("get", course_id))
        self._check_online()
        if course_id not in self.courses:
            raise RemoteCourseApiError(status_code=404, detail="Course not found")
        return self.courses[course_id]

    async def create_course(self, request: CourseCreateRequest) -> RemoteCourse:
        self.calls.append(("create", None))
        self._check_online()
        self._next_id += 1
        course = RemoteCourse(
            id=str(self._next_id),
            title=request.title,
            status=request.status or CourseStatus.DRAFT,
            description=request.description or "",
            video_url=request.video_url,
            tags=list(request.tags or []),
        )
        self.courses[course.id] = course
        return course

    async def update_course(
        self,
        course_id: str,
        request: CourseUpdateRequest,
    ) -> RemoteCourse:
        self.calls.append(("update", course_id))
        self._check_online()
        if course_id not in self.courses:
            raise RemoteCourseApiError(status_code=404, detail="Course not found")
        changes = {
            name: value
            for name, value in (
                ("title", request.title),
                ("description", request.description),
                ("video_url", request.video_url),
                ("status", request.status),
                ("tags", request.tags),
            )
            if value is not None
        }
        course = replace(self.courses[course_id], **changes)
        self.courses[course_id] = course
        return course

    async def delete_course(self, course_id: str) -> None:
        self.calls.append(("delete", course_id))
        self._check_online()
        if self.courses.pop(course_id, None) is None:
            raise RemoteCourseApiError(status_code=404, detail="Course not found")


@pytest.fixture
def fake_gateway():
    """Empty, reachable Course API"""
    return FakeCourseGateway()
