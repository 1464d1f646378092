"""Single source of truth for courses, modules, assignments and quizzes.

Instructors edit through the mutators, learners read published data only.
State is replaced wholesale on every change, so a reference handed out
before a mutation keeps showing the pre-mutation snapshot.
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, date, datetime
from enum import Enum
from typing import Any

from lms_store.application.exceptions.base import StateStorageError
from lms_store.application.hydration import merge_with_initial
from lms_store.application.reconciliation import (
    CourseReconciler,
    ReconciliationResult,
    append_new_courses,
    apply_updates,
    reconcile,
)
from lms_store.application.sample_content import SampleContentPolicy
from lms_store.application.state_storage import StateStorage
from lms_store.domain.assignment import Assignment
from lms_store.domain.common.exceptions import DuplicateEntityError, ImmutableFieldError
from lms_store.domain.course import Course, CourseStatus, Module
from lms_store.domain.quiz import QuizConfig
from lms_store.domain.state import AssessmentKind, AvailableAssessment, StoreState

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


def utc_today() -> date:
    return datetime.now(UTC).date()


class HydrationPhase(str, Enum):
    UNINITIALIZED = "uninitialized"
    HYDRATING = "hydrating"
    READY = "ready"


class CanonicalStore:
    def __init__(
        self,
        initial_state: Callable[[], StoreState],
        storage: StateStorage | None = None,
        reconciler: CourseReconciler | None = None,
        policy: SampleContentPolicy | None = None,
        clock: Callable[[], date] = utc_today,
    ) -> None:
        self._storage = storage
        self._reconciler = reconciler
        self._policy = policy or SampleContentPolicy()
        self._clock = clock

        self._state = initial_state()
        self._builtin_courses = {course.id: course for course in initial_state().courses}
        self._phase = HydrationPhase.UNINITIALIZED
        self._listeners: dict[int, Listener] = {}
        self._next_listener_id = 0

        self._hydration_lock = asyncio.Lock()
        self._persist_lock = asyncio.Lock()
        self._sync_task: asyncio.Task[int] | None = None

    @property
    def phase(self) -> HydrationPhase:
        return self._phase

    def today(self) -> date:
        return self._clock()

    # Hydration

    async def get_state(self) -> StoreState:
        if self._phase is not HydrationPhase.READY:
            async with self._hydration_lock:
                if self._phase is not HydrationPhase.READY:
                    await self._hydrate()
        return self._state

    async def _hydrate(self) -> None:
        if self._storage is None:
            logger.info("No state storage configured, serving built-in dataset")
            self._phase = HydrationPhase.READY
            return

        self._phase = HydrationPhase.HYDRATING
        try:
            snapshot = await self._storage.load()
        except StateStorageError as err:
            logger.warning("Ignoring unreadable snapshot: %s", err.message)
            snapshot = None

        self._state = merge_with_initial(snapshot, self._state, self._policy)
        self._phase = HydrationPhase.READY
        logger.info(
            "Canonical store hydrated: %s courses, %s assignments, %s quizzes",
            len(self._state.courses),
            len(self._state.assignments),
            len(self._state.quiz_configs),
        )
        self.start_background_sync()

    # State replacement

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        listener_id = self._next_listener_id
        self._next_listener_id += 1
        self._listeners[listener_id] = listener

        def unsubscribe() -> None:
            self._listeners.pop(listener_id, None)

        return unsubscribe

    async def _mutate(
        self,
        transform: Callable[[StoreState], StoreState],
    ) -> StoreState:
        current = await self.get_state()
        new_state = transform(current)
        self._state = new_state
        await self._persist()
        self._notify()
        return new_state

    def _notify(self) -> None:
        for listener in list(self._listeners.values()):
            try:
                listener()
            except Exception:
                logger.exception("Store listener failed")

    async def _persist(self) -> None:
        if self._storage is None:
            return
        async with self._persist_lock:
            # Always write the latest state so saves cannot land out of order
            try:
                await self._storage.save(self._state)
            except StateStorageError as err:
                logger.warning("Keeping unsaved state in memory: %s", err.message)

    # Remote reconciliation

    def start_background_sync(self) -> "asyncio.Task[int] | None":
        """Append unknown remote courses; concurrent callers share one pass"""
        if self._reconciler is None:
            return None
        if self._sync_task is None:
            self._sync_task = asyncio.create_task(
                self._background_sync(),
                name="canonical-store-sync",
            )
            self._sync_task.add_done_callback(self._on_sync_done)
        return self._sync_task

    async def close(self) -> None:
        task = self._sync_task
        if task is None:
            return
        task.cancel()
        await asyncio.gather(task, return_exceptions=True)

    def _on_sync_done(self, task: "asyncio.Task[int]") -> None:
        if self._sync_task is task:
            self._sync_task = None
        if task.cancelled():
            logger.info("Background sync cancelled")
        elif task.exception() is not None:
            logger.error("Background sync failed", exc_info=task.exception())

    async def _background_sync(self) -> int:
        if self._reconciler is None:
            return 0
        remote_courses = await self._reconciler.fetch_remote_courses()
        if not remote_courses:
            return 0

        state = await self.get_state()
        result = reconcile(state.courses, remote_courses, self._clock())
        if not result.new_courses:
            logger.info("Background sync found no new courses")
            return 0

        before = len(state.courses)
        new_state = await self._mutate(
            lambda prev: replace(
                prev,
                courses=append_new_courses(prev.courses, result.new_courses),
            ),
        )
        appended = len(new_state.courses) - before
        logger.info("Background sync appended %s courses", appended)
        return appended

    async def sync_courses_from_backend(self) -> ReconciliationResult:
        """Manual reconciliation: append new courses and refresh known ones"""
        if self._reconciler is None:
            return ReconciliationResult()

        remote_courses = await self._reconciler.fetch_remote_courses()
        if not remote_courses:
            return ReconciliationResult()

        outcome: list[ReconciliationResult] = []

        def transform(prev: StoreState) -> StoreState:
            result = reconcile(prev.courses, remote_courses, self._clock())
            outcome.append(result)
            courses = apply_updates(prev.courses, result.updated_courses)
            return replace(
                prev,
                courses=append_new_courses(courses, result.new_courses),
            )

        await self._mutate(transform)
        logger.info(
            "Manual sync: %s new, %s updated",
            len(outcome[0].new_courses),
            len(outcome[0].updated_courses),
        )
        return outcome[0]

    # Courses

    async def get_courses_for_instructor(self) -> list[Course]:
        # Not filtered by authorship: every instructor sees the whole catalog
        state = await self.get_state()
        return sorted(state.courses, key=lambda c: c.last_updated, reverse=True)

    async def get_published_courses_for_path(self, path_slug: str) -> list[Course]:
        state = await self.get_state()
        return [
            course
            for course in state.courses
            if course.path_slug == path_slug
            and course.status is CourseStatus.PUBLISHED
            and not self._policy.is_retired_title(course.title)
        ]

    async def get_course_by_id(self, course_id: str) -> Course | None:
        state = await self.get_state()
        if self._policy.is_pinned(course_id):
            builtin = self._builtin_courses.get(course_id)
            if builtin is not None and builtin.modules:
                return builtin

        for course in state.courses:
            if course.id == course_id:
                return course
        for course in state.courses:
            if course.ref.matches(course_id):
                return course
        return None

    async def add_course(self, course: Course) -> Course:
        def transform(prev: StoreState) -> StoreState:
            if any(existing.id == course.id for existing in prev.courses):
                raise DuplicateEntityError(Course, course.id)
            return replace(prev, courses=[*prev.courses, course])

        await self._mutate(transform)
        logger.info("Course added: %s", course.id)
        return course

    async def update_course(self, course_id: str, **changes: Any) -> Course | None:
        if changes.get("id", course_id) != course_id:
            raise ImmutableFieldError(Course, course_id, "id")

        updated: list[Course] = []

        def transform(prev: StoreState) -> StoreState:
            courses = []
            for course in prev.courses:
                if course.id == course_id:
                    course = self._apply_course_changes(course, changes)
                    updated.append(course)
                courses.append(course)
            return replace(prev, courses=courses)

        await self._mutate(transform)
        if not updated:
            logger.info("Course not found for update: %s", course_id)
            return None
        return updated[0]

    def _apply_course_changes(self, course: Course, changes: dict[str, Any]) -> Course:
        changes = dict(changes)
        if "backend_id" in changes:
            # Raises on regression or rebinding
            changes["backend_id"] = course.ref.attach(changes["backend_id"]).remote_id
        changes["last_updated"] = self._clock()
        return replace(course, **changes)

    async def set_course_modules(
        self,
        course_id: str,
        modules: list[Module],
    ) -> Course | None:
        return await self.update_course(course_id, modules=list(modules))

    async def attach_backend_id(self, course_id: str, backend_id: str) -> Course | None:
        return await self.update_course(course_id, backend_id=backend_id)

    async def archive_course(self, course_id: str) -> Course | None:
        return await self.update_course(course_id, status=CourseStatus.ARCHIVED)

    async def publish_course(self, course_id: str) -> Course | None:
        return await self.update_course(course_id, status=CourseStatus.PUBLISHED)

    async def delete_course(self, course_id: str) -> bool:
        removed: list[Course] = []

        def transform(prev: StoreState) -> StoreState:
            courses = []
            for course in prev.courses:
                if course.id == course_id:
                    removed.append(course)
                    continue
                courses.append(course)
            return replace(prev, courses=courses)

        await self._mutate(transform)
        logger.info("Course deleted: %s (found=%s)", course_id, bool(removed))
        return bool(removed)

    # Assignments

    async def get_assignments(self) -> list[Assignment]:
        state = await self.get_state()
        return state.assignments

    async def get_assignment_by_id(self, assignment_id: str) -> Assignment | None:
        state = await self.get_state()
        for assignment in state.assignments:
            if assignment.id == assignment_id:
                return assignment
        return None

    async def add_assignment(self, assignment: Assignment) -> Assignment:
        def transform(prev: StoreState) -> StoreState:
            if any(existing.id == assignment.id for existing in prev.assignments):
                raise DuplicateEntityError(Assignment, assignment.id)
            return replace(prev, assignments=[*prev.assignments, assignment])

        await self._mutate(transform)
        logger.info("Assignment added: %s", assignment.id)
        return assignment

    async def update_assignment(
        self,
        assignment_id: str,
        **changes: Any,
    ) -> Assignment | None:
        if changes.get("id", assignment_id) != assignment_id:
            raise ImmutableFieldError(Assignment, assignment_id, "id")

        updated: list[Assignment] = []

        def transform(prev: StoreState) -> StoreState:
            assignments = []
            for assignment in prev.assignments:
                if assignment.id == assignment_id:
                    assignment = replace(assignment, **changes)
                    updated.append(assignment)
                assignments.append(assignment)
            return replace(prev, assignments=assignments)

        await self._mutate(transform)
        return updated[0] if updated else None

    # Quizzes

    async def get_quiz_configs(self) -> dict[str, QuizConfig]:
        state = await self.get_state()
        return state.quiz_configs

    async def get_quiz_config(self, quiz_id: str) -> QuizConfig | None:
        state = await self.get_state()
        return state.quiz_configs.get(quiz_id)

    async def add_or_update_quiz_config(self, config: QuizConfig) -> QuizConfig:
        # Live quizzes stay editable even when learners have attempts
        await self._mutate(
            lambda prev: replace(
                prev,
                quiz_configs={**prev.quiz_configs, config.id: config},
            ),
        )
        logger.info("Quiz config saved: %s", config.id)
        return config

    async def get_available_assessments(self) -> list[AvailableAssessment]:
        state = await self.get_state()
        items = [
            AvailableAssessment(id=quiz_id, title=quiz.title, type=AssessmentKind.QUIZ)
            for quiz_id, quiz in state.quiz_configs.items()
        ]
        items.extend(
            AvailableAssessment(
                id=assignment.id,
                title=assignment.title,
                type=AssessmentKind.ASSIGNMENT,
            )
            for assignment in state.assignments
            if not assignment.is_quiz
        )
        return items
