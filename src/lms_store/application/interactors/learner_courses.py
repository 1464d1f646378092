import logging
from dataclasses import dataclass

from lms_store.application.canonical_store import CanonicalStore
from lms_store.application.exceptions.base import EntityNotFoundError
from lms_store.domain.course import Course

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class GetPathCoursesInteractor:
    store: CanonicalStore

    async def __call__(self, path_slug: str) -> list[Course]:
        courses = await self.store.get_published_courses_for_path(path_slug)
        logger.info("%s published courses on path %s", len(courses), path_slug)
        return courses


@dataclass(slots=True, frozen=True)
class GetCourseInteractor:
    store: CanonicalStore

    async def __call__(self, course_id: str) -> Course:
        course = await self.store.get_course_by_id(course_id)
        if course is None:
            logger.info("Course not found: %s", course_id)
            raise EntityNotFoundError(Course, "id", course_id)
        if not course.status.is_learner_visible:
            logger.info(
                "Course %s is %s, hidden from learners",
                course_id,
                course.status.value,
            )
            raise EntityNotFoundError(Course, "id", course_id)
        return course
