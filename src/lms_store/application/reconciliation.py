import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import date

from lms_store.application.course_gateway import RemoteCourse, RemoteCourseGateway
from lms_store.application.exceptions.base import RemoteCourseApiError
from lms_store.domain.common.exceptions import BackendIdConflictError
from lms_store.domain.course import Course, Instructor
from lms_store.domain.external_ref import normalize_ref
from lms_store.domain.learning_path import infer_path_slug

logger = logging.getLogger(__name__)

DEFAULT_SYNC_LIMIT = 100
FALLBACK_ROLE = "General"


@dataclass(frozen=True)
class ReconciliationResult:
    new_courses: list[Course] = field(default_factory=list)
    updated_courses: list[Course] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.new_courses and not self.updated_courses


def remote_date(value: str | None, default: date) -> date:
    """Day part of an ISO timestamp like 2025-01-28T10:00:00.000Z"""
    if not value:
        return default
    try:
        return date.fromisoformat(value.split("T", 1)[0])
    except ValueError:
        logger.debug("Unparseable remote timestamp: %s", value)
        return default


def find_matching_course(courses: Iterable[Course], remote_id: str) -> Course | None:
    for course in courses:
        if course.ref.matches(remote_id):
            return course
    return None


def course_from_remote(remote: RemoteCourse, today: date) -> Course:
    remote_id = normalize_ref(remote.id) or remote.id
    author_name = remote.created_by.name if remote.created_by else ""
    return Course(
        id=remote_id,
        backend_id=remote_id,
        title=remote.title,
        description=remote.description,
        video_url=remote.video_url,
        status=remote.status,
        roles=list(remote.tags) if remote.tags else [FALLBACK_ROLE],
        path_slug=infer_path_slug(remote.tags),
        instructor=Instructor(name=author_name or "Instructor"),
        last_updated=remote_date(remote.updated_at, today),
        created_at=remote_date(remote.created_at, today),
    )


def merge_remote_into(local: Course, remote: RemoteCourse, today: date) -> Course:
    """Remote owns the ordinary fields, local owns what the remote schema lacks"""
    try:
        ref = local.ref.attach(remote.id)
    except BackendIdConflictError as err:
        logger.warning(err.message)
        ref = local.ref

    return replace(
        local,
        backend_id=ref.remote_id,
        title=remote.title,
        description=remote.description,
        video_url=remote.video_url or local.video_url,
        status=remote.status,
        roles=local.roles or list(remote.tags) or [FALLBACK_ROLE],
        last_updated=remote_date(remote.updated_at, today),
    )


def reconcile(
    local_courses: list[Course],
    remote_courses: Iterable[RemoteCourse],
    today: date,
) -> ReconciliationResult:
    new_courses: list[Course] = []
    updated_courses: list[Course] = []

    for remote in remote_courses:
        local = find_matching_course(local_courses, remote.id)
        if local is not None:
            updated_courses.append(merge_remote_into(local, remote, today))
            continue
        # Same remote record listed twice
        if find_matching_course(new_courses, remote.id) is not None:
            continue
        new_courses.append(course_from_remote(remote, today))

    return ReconciliationResult(
        new_courses=new_courses,
        updated_courses=updated_courses,
    )


def append_new_courses(courses: list[Course], new_courses: list[Course]) -> list[Course]:
    appended = [
        course
        for course in new_courses
        if find_matching_course(courses, course.id) is None
    ]
    return [*courses, *appended]


def apply_updates(courses: list[Course], updated_courses: list[Course]) -> list[Course]:
    updates_by_id = {course.id: course for course in updated_courses}
    return [updates_by_id.get(course.id, course) for course in courses]


@dataclass(slots=True, frozen=True)
class CourseReconciler:
    gateway: RemoteCourseGateway
    limit: int = DEFAULT_SYNC_LIMIT

    async def fetch_remote_courses(self) -> list[RemoteCourse]:
        """One page of remote courses across all statuses, empty on failure"""
        try:
            page = await self.gateway.list_courses(limit=self.limit)
        except RemoteCourseApiError as err:
            logger.warning("Failed to fetch remote courses: %s", err.message)
            return []

        logger.info(
            "Fetched %s remote courses (total=%s)",
            len(page.items),
            page.total,
        )
        return page.items
