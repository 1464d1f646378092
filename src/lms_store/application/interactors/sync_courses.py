import logging
from dataclasses import dataclass

from lms_store.application.canonical_store import CanonicalStore

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class SyncCoursesResponse:
    courses_before: int
    courses_after: int
    new_courses: int
    updated_courses: int


@dataclass(slots=True, frozen=True)
class SyncCoursesInteractor:
    store: CanonicalStore

    async def __call__(self) -> SyncCoursesResponse:
        before = len((await self.store.get_state()).courses)
        result = await self.store.sync_courses_from_backend()
        after = len((await self.store.get_state()).courses)

        logger.info("Course sync finished: %s -> %s courses", before, after)
        return SyncCoursesResponse(
            courses_before=before,
            courses_after=after,
            new_courses=len(result.new_courses),
            updated_courses=len(result.updated_courses),
        )
