from dataclasses import replace

from dishka import FromDishka
from dishka.integrations.fastapi import inject
from fastapi import APIRouter
from starlette import status

from lms_store.application.interactors.assessments import (
    AddAssignmentInteractor,
    GetAssignmentInteractor,
    GetAssignmentsInteractor,
    GetAvailableAssessmentsInteractor,
    GetQuizConfigInteractor,
    GetQuizConfigsInteractor,
    SaveQuizConfigInteractor,
    UpdateAssignmentInteractor,
    UpdateAssignmentRequest,
)
from lms_store.domain.assignment import Assignment
from lms_store.domain.quiz import QuizConfig
from lms_store.domain.state import AvailableAssessment
from lms_store.presentation.api.assessments.schema import UpdateAssignmentRequestSchema

assignments_router = APIRouter()
quizzes_router = APIRouter()
assessments_router = APIRouter()


@assignments_router.get(
    "",
    status_code=status.HTTP_200_OK,
)
@inject
async def get_assignments(
    interactor: FromDishka[GetAssignmentsInteractor],
) -> list[Assignment]:
    return await interactor()


@assignments_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
)
@inject
async def add_assignment(
    assignment: Assignment,
    interactor: FromDishka[AddAssignmentInteractor],
) -> Assignment:
    """
    Add an assignment

    Returns 409 if an assignment with the same id exists.
    """
    return await interactor(assignment)


@assignments_router.get(
    "/{assignment_id}",
    status_code=status.HTTP_200_OK,
)
@inject
async def get_assignment(
    assignment_id: str,
    interactor: FromDishka[GetAssignmentInteractor],
) -> Assignment:
    return await interactor(assignment_id)


@assignments_router.patch(
    "/{assignment_id}",
    status_code=status.HTTP_200_OK,
)
@inject
async def update_assignment(
    assignment_id: str,
    request_schema: UpdateAssignmentRequestSchema,
    interactor: FromDishka[UpdateAssignmentInteractor],
) -> Assignment:
    """
    Update assignment by ID

    Updates only provided fields, leaving others unchanged.
    """
    request_data = UpdateAssignmentRequest(
        assignment_id=assignment_id,
        title=request_schema.title,
        status=request_schema.status,
        due_date=request_schema.due_date,
        due_date_iso=request_schema.due_date_iso,
        description=request_schema.description,
        ai_feedback=request_schema.ai_feedback,
    )

    return await interactor(request_data)


@quizzes_router.get(
    "",
    status_code=status.HTTP_200_OK,
)
@inject
async def get_quiz_configs(
    interactor: FromDishka[GetQuizConfigsInteractor],
) -> list[QuizConfig]:
    return await interactor()


@quizzes_router.get(
    "/{quiz_id}",
    status_code=status.HTTP_200_OK,
)
@inject
async def get_quiz_config(
    quiz_id: str,
    interactor: FromDishka[GetQuizConfigInteractor],
) -> QuizConfig:
    return await interactor(quiz_id)


@quizzes_router.put(
    "/{quiz_id}",
    status_code=status.HTTP_200_OK,
)
@inject
async def save_quiz_config(
    quiz_id: str,
    config: QuizConfig,
    interactor: FromDishka[SaveQuizConfigInteractor],
) -> QuizConfig:
    """
    Create or replace a quiz configuration

    The id in the path wins over the id in the body.
    """
    return await interactor(replace(config, id=quiz_id))


@assessments_router.get(
    "",
    status_code=status.HTTP_200_OK,
)
@inject
async def get_available_assessments(
    interactor: FromDishka[GetAvailableAssessmentsInteractor],
) -> list[AvailableAssessment]:
    """
    Quizzes and assignments an instructor can attach to a module
    """
    return await interactor()
