import logging
from dataclasses import dataclass

from lms_store.application.canonical_store import CanonicalStore
from lms_store.application.exceptions.base import EntityNotFoundError
from lms_store.domain.assignment import Assignment, AssignmentStatus
from lms_store.domain.quiz import QuizConfig
from lms_store.domain.state import AvailableAssessment

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class GetAssignmentsInteractor:
    store: CanonicalStore

    async def __call__(self) -> list[Assignment]:
        return await self.store.get_assignments()


@dataclass(slots=True, frozen=True)
class GetAssignmentInteractor:
    store: CanonicalStore

    async def __call__(self, assignment_id: str) -> Assignment:
        assignment = await self.store.get_assignment_by_id(assignment_id)
        if assignment is None:
            raise EntityNotFoundError(Assignment, "id", assignment_id)
        return assignment


@dataclass(slots=True, frozen=True)
class AddAssignmentInteractor:
    store: CanonicalStore

    async def __call__(self, assignment: Assignment) -> Assignment:
        logger.info("Adding assignment %s to course %s", assignment.id, assignment.course_id)
        return await self.store.add_assignment(assignment)


@dataclass(frozen=True, slots=True, kw_only=True)
class UpdateAssignmentRequest:
    assignment_id: str
    title: str | None = None
    status: AssignmentStatus | None = None
    due_date: str | None = None
    due_date_iso: str | None = None
    description: str | None = None
    ai_feedback: str | None = None


@dataclass(slots=True, frozen=True)
class UpdateAssignmentInteractor:
    store: CanonicalStore

    async def __call__(self, request_data: UpdateAssignmentRequest) -> Assignment:
        changes = {
            name: value
            for name, value in (
                ("title", request_data.title),
                ("status", request_data.status),
                ("due_date", request_data.due_date),
                ("due_date_iso", request_data.due_date_iso),
                ("description", request_data.description),
                ("ai_feedback", request_data.ai_feedback),
            )
            if value is not None
        }
        assignment = await self.store.update_assignment(
            request_data.assignment_id,
            **changes,
        )
        if assignment is None:
            raise EntityNotFoundError(Assignment, "id", request_data.assignment_id)

        logger.info("Assignment %s updated: %s", assignment.id, sorted(changes))
        return assignment


@dataclass(slots=True, frozen=True)
class GetQuizConfigsInteractor:
    store: CanonicalStore

    async def __call__(self) -> list[QuizConfig]:
        configs = await self.store.get_quiz_configs()
        return list(configs.values())


@dataclass(slots=True, frozen=True)
class GetQuizConfigInteractor:
    store: CanonicalStore

    async def __call__(self, quiz_id: str) -> QuizConfig:
        config = await self.store.get_quiz_config(quiz_id)
        if config is None:
            raise EntityNotFoundError(QuizConfig, "id", quiz_id)
        return config


@dataclass(slots=True, frozen=True)
class SaveQuizConfigInteractor:
    store: CanonicalStore

    async def __call__(self, config: QuizConfig) -> QuizConfig:
        return await self.store.add_or_update_quiz_config(config)


@dataclass(slots=True, frozen=True)
class GetAvailableAssessmentsInteractor:
    store: CanonicalStore

    async def __call__(self) -> list[AvailableAssessment]:
        return await self.store.get_available_assessments()
