from dishka import FromDishka
from dishka.integrations.fastapi import inject
from fastapi import APIRouter
from starlette import status

from lms_store.application.interactors.sync_courses import (
    SyncCoursesInteractor,
    SyncCoursesResponse,
)

sync_router = APIRouter()


@sync_router.post(
    "/courses",
    status_code=status.HTTP_200_OK,
)
@inject
async def sync_courses(
    interactor: FromDishka[SyncCoursesInteractor],
) -> SyncCoursesResponse:
    """
    Pull courses from the Course API

    Appends unknown courses and refreshes the ones already known.
    """
    return await interactor()
