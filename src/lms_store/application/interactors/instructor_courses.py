import logging
from dataclasses import dataclass, field, replace
from uuid import uuid4

from lms_store.application.canonical_store import CanonicalStore
from lms_store.application.course_gateway import (
    CourseCreateRequest,
    CourseUpdateRequest,
    RemoteCourseGateway,
)
from lms_store.application.exceptions.base import (
    EntityNotFoundError,
    RemoteCourseApiError,
)
from lms_store.domain.course import Course, CourseStatus, Instructor, Module
from lms_store.domain.learning_path import infer_path_slug

logger = logging.getLogger(__name__)

# Statuses the Course API answers with when it does not know the record
UNKNOWN_REMOTE_COURSE_STATUSES = (400, 404)


def _remote_tags(course: Course) -> list[str]:
    return course.roles or ["General"]


@dataclass(slots=True, frozen=True)
class GetInstructorCoursesInteractor:
    store: CanonicalStore

    async def __call__(self) -> list[Course]:
        courses = await self.store.get_courses_for_instructor()
        logger.info("%s instructor courses retrieved", len(courses))
        return courses


@dataclass(frozen=True, slots=True, kw_only=True)
class CreateCourseRequest:
    title: str
    description: str = ""
    video_url: str | None = None
    thumbnail: str | None = None
    status: CourseStatus = CourseStatus.DRAFT
    roles: list[str] = field(default_factory=list)
    modules: list[Module] = field(default_factory=list)
    instructor_name: str = "Instructor"
    sync_to_backend: bool = True


@dataclass(slots=True, frozen=True)
class CreateCourseInteractor:
    store: CanonicalStore
    gateway: RemoteCourseGateway

    async def __call__(self, request_data: CreateCourseRequest) -> Course:
        title = request_data.title.strip()
        description = request_data.description.strip() or title
        roles = request_data.roles or ["General"]
        logger.info("Creating course: %s", title)

        backend_id = None
        if request_data.sync_to_backend:
            remote = await self.gateway.create_course(
                CourseCreateRequest(
                    title=title,
                    description=description,
                    video_url=request_data.video_url,
                    thumbnail=request_data.thumbnail,
                    status=request_data.status,
                    tags=roles,
                ),
            )
            backend_id = remote.id
            course_id = remote.id
        else:
            course_id = f"local-{uuid4().hex[:12]}"

        today = self.store.today()
        course = Course(
            id=course_id,
            backend_id=backend_id,
            title=title,
            description=description,
            video_url=request_data.video_url,
            thumbnail=request_data.thumbnail,
            status=request_data.status,
            roles=roles,
            path_slug=infer_path_slug(roles),
            modules=[
                _reorder(module, index)
                for index, module in enumerate(request_data.modules)
            ],
            instructor=Instructor(name=request_data.instructor_name),
            last_updated=today,
            created_at=today,
        )
        await self.store.add_course(course)

        logger.info("Course created: %s (backend id: %s)", course.id, backend_id)
        return course


def _reorder(module: Module, order: int) -> Module:
    if module.order == order:
        return module
    return replace(module, order=order)


@dataclass(frozen=True, slots=True, kw_only=True)
class UpdateCourseRequest:
    course_id: str
    title: str | None = None
    description: str | None = None
    video_url: str | None = None
    thumbnail: str | None = None
    roles: list[str] | None = None
    phase: str | None = None
    skills: list[str] | None = None
    prerequisite_course_ids: list[str] | None = None
    estimated_duration: str | None = None


@dataclass(slots=True, frozen=True)
class UpdateCourseInteractor:
    store: CanonicalStore

    async def __call__(self, request_data: UpdateCourseRequest) -> Course:
        logger.info("Updating course: %s", request_data.course_id)

        changes = {
            name: value
            for name, value in (
                ("title", request_data.title),
                ("description", request_data.description),
                ("video_url", request_data.video_url),
                ("thumbnail", request_data.thumbnail),
                ("roles", request_data.roles),
                ("phase", request_data.phase),
                ("skills", request_data.skills),
                ("prerequisite_course_ids", request_data.prerequisite_course_ids),
                ("estimated_duration", request_data.estimated_duration),
            )
            if value is not None
        }
        if request_data.roles is not None:
            changes["path_slug"] = infer_path_slug(request_data.roles)

        course = await self.store.update_course(request_data.course_id, **changes)
        if course is None:
            raise EntityNotFoundError(Course, "id", request_data.course_id)
        return course


@dataclass(frozen=True, slots=True, kw_only=True)
class SetCourseModulesRequest:
    course_id: str
    modules: list[Module]


@dataclass(slots=True, frozen=True)
class SetCourseModulesInteractor:
    store: CanonicalStore

    async def __call__(self, request_data: SetCourseModulesRequest) -> Course:
        modules = [
            _reorder(module, index)
            for index, module in enumerate(request_data.modules)
        ]
        course = await self.store.set_course_modules(request_data.course_id, modules)
        if course is None:
            raise EntityNotFoundError(Course, "id", request_data.course_id)

        logger.info("Course %s now has %s modules", course.id, len(modules))
        return course


@dataclass(slots=True, frozen=True)
class PublishCourseInteractor:
    """Publish locally, then push the status to the Course API.

    A course the API does not know yet is created there as published and
    the new backend id is attached to the local course. A course already
    bound to a backend id that the API no longer knows is not recreated:
    the API error is raised and the binding is kept.
    """

    store: CanonicalStore
    gateway: RemoteCourseGateway

    async def __call__(self, course_id: str) -> Course:
        course = await self.store.publish_course(course_id)
        if course is None:
            raise EntityNotFoundError(Course, "id", course_id)

        remote_id = course.backend_id or course.id
        logger.info("Publishing course %s as backend id %s", course.id, remote_id)

        try:
            remote = await self.gateway.update_course(
                remote_id,
                CourseUpdateRequest(
                    title=course.title,
                    description=course.description,
                    video_url=course.video_url,
                    status=CourseStatus.PUBLISHED,
                    tags=_remote_tags(course),
                ),
            )
        except RemoteCourseApiError as err:
            if err.status_code not in UNKNOWN_REMOTE_COURSE_STATUSES:
                raise
            if course.ref.is_synced:
                # Backend id is bound once; a dead record is not replaced
                logger.warning(
                    "Backend record %s of course %s is gone, not recreating",
                    remote_id,
                    course.id,
                )
                raise
            logger.info("Course %s unknown to backend, creating it", course.id)
            remote = await self.gateway.create_course(
                CourseCreateRequest(
                    title=course.title,
                    description=course.description,
                    video_url=course.video_url,
                    status=CourseStatus.PUBLISHED,
                    tags=_remote_tags(course),
                ),
            )

        published = await self.store.attach_backend_id(course.id, remote.id)
        if published is None:
            # Deleted while the remote call was in flight
            raise EntityNotFoundError(Course, "id", course_id)
        return published


@dataclass(slots=True, frozen=True)
class ArchiveCourseInteractor:
    store: CanonicalStore
    gateway: RemoteCourseGateway

    async def __call__(self, course_id: str) -> Course:
        course = await self.store.archive_course(course_id)
        if course is None:
            raise EntityNotFoundError(Course, "id", course_id)

        if course.ref.is_synced:
            await self.gateway.update_course(
                course.backend_id,
                CourseUpdateRequest(status=CourseStatus.ARCHIVED),
            )
            logger.info("Archived course %s on backend", course.backend_id)
        return course


@dataclass(slots=True, frozen=True)
class DeleteCourseInteractor:
    store: CanonicalStore
    gateway: RemoteCourseGateway

    async def __call__(self, course_id: str) -> None:
        course = await self.store.get_course_by_id(course_id)
        if course is None:
            raise EntityNotFoundError(Course, "id", course_id)

        if course.ref.is_synced:
            try:
                await self.gateway.delete_course(course.backend_id)
            except RemoteCourseApiError as err:
                if err.status_code != 404:
                    raise
                logger.info("Course %s already gone on backend", course.backend_id)

        await self.store.delete_course(course.id)
