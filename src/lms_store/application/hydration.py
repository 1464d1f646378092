import logging

from lms_store.application.sample_content import SampleContentPolicy
from lms_store.domain.course import Course
from lms_store.domain.state import PersistedSnapshot, StoreState

logger = logging.getLogger(__name__)


def merge_courses(
    persisted: list[Course],
    initial: list[Course],
    policy: SampleContentPolicy,
) -> list[Course]:
    """Persisted courses win; built-in ones missing from the snapshot are appended"""
    initial_by_id = {course.id: course for course in initial}
    merged: list[Course] = []
    seen: set[str] = set()

    for course in persisted:
        builtin = initial_by_id.get(course.id)
        if (
            builtin is not None
            and policy.is_pinned(course.id)
            and not course.modules
        ):
            logger.debug("Refreshing pinned sample course %s", course.id)
            course = builtin
        merged.append(course)
        seen.add(course.id)

    missing = [course for course in initial if course.id not in seen]
    if missing:
        logger.debug("Appending %s built-in courses", len(missing))
    merged.extend(missing)
    return merged


def merge_with_initial(
    snapshot: PersistedSnapshot | None,
    initial: StoreState,
    policy: SampleContentPolicy,
) -> StoreState:
    if snapshot is None:
        return initial

    courses = (
        merge_courses(snapshot.courses, initial.courses, policy)
        if snapshot.courses is not None
        else initial.courses
    )
    assignments = (
        snapshot.assignments
        if snapshot.assignments is not None
        else initial.assignments
    )
    quiz_configs = (
        snapshot.quiz_configs
        if snapshot.quiz_configs is not None
        else initial.quiz_configs
    )
    return StoreState(
        courses=courses,
        assignments=assignments,
        quiz_configs=quiz_configs,
    )
