from dishka import FromDishka
from dishka.integrations.fastapi import inject
from fastapi import APIRouter
from starlette import status

from lms_store.application.interactors.learner_courses import (
    GetCourseInteractor,
    GetPathCoursesInteractor,
)
from lms_store.domain.course import Course

learner_router = APIRouter()


@learner_router.get(
    "/paths/{path_slug}/courses",
    status_code=status.HTTP_200_OK,
)
@inject
async def get_path_courses(
    path_slug: str,
    interactor: FromDishka[GetPathCoursesInteractor],
) -> list[Course]:
    """
    Get published courses of a learning path
    """
    return await interactor(path_slug)


@learner_router.get(
    "/courses/{course_id}",
    status_code=status.HTTP_200_OK,
)
@inject
async def get_course(
    course_id: str,
    interactor: FromDishka[GetCourseInteractor],
) -> Course:
    """
    Get course by ID

    Accepts either the course id or its Course API id.
    """
    return await interactor(course_id)
