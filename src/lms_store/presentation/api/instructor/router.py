from dishka import FromDishka
from dishka.integrations.fastapi import inject
from fastapi import APIRouter
from starlette import status

from lms_store.application.interactors.instructor_courses import (
    ArchiveCourseInteractor,
    CreateCourseInteractor,
    CreateCourseRequest,
    DeleteCourseInteractor,
    GetInstructorCoursesInteractor,
    PublishCourseInteractor,
    SetCourseModulesInteractor,
    SetCourseModulesRequest,
    UpdateCourseInteractor,
    UpdateCourseRequest,
)
from lms_store.domain.course import Course
from lms_store.presentation.api.instructor.schema import (
    CreateCourseRequestSchema,
    SetCourseModulesRequestSchema,
    UpdateCourseRequestSchema,
)

instructor_router = APIRouter()


@instructor_router.get(
    "/courses",
    status_code=status.HTTP_200_OK,
)
@inject
async def get_instructor_courses(
    interactor: FromDishka[GetInstructorCoursesInteractor],
) -> list[Course]:
    """
    Get every course, most recently updated first

    Includes drafts and archived courses.
    """
    return await interactor()


@instructor_router.post(
    "/courses",
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_course(
    request_schema: CreateCourseRequestSchema,
    interactor: FromDishka[CreateCourseInteractor],
) -> Course:
    """
    Create a course

    The course is created on the Course API first and keeps the remote id.
    With sync_to_backend=false it stays a local draft.
    """
    request_data = CreateCourseRequest(
        title=request_schema.title,
        description=request_schema.description,
        video_url=request_schema.video_url,
        thumbnail=request_schema.thumbnail,
        status=request_schema.status,
        roles=request_schema.roles,
        modules=request_schema.modules,
        instructor_name=request_schema.instructor_name,
        sync_to_backend=request_schema.sync_to_backend,
    )

    return await interactor(request_data)


@instructor_router.patch(
    "/courses/{course_id}",
    status_code=status.HTTP_200_OK,
)
@inject
async def update_course(
    course_id: str,
    request_schema: UpdateCourseRequestSchema,
    interactor: FromDishka[UpdateCourseInteractor],
) -> Course:
    request_data = UpdateCourseRequest(
        course_id=course_id,
        title=request_schema.title,
        description=request_schema.description,
        video_url=request_schema.video_url,
        thumbnail=request_schema.thumbnail,
        roles=request_schema.roles,
        phase=request_schema.phase,
        skills=request_schema.skills,
        prerequisite_course_ids=request_schema.prerequisite_course_ids,
        estimated_duration=request_schema.estimated_duration,
    )

    return await interactor(request_data)


@instructor_router.put(
    "/courses/{course_id}/modules",
    status_code=status.HTTP_200_OK,
)
@inject
async def set_course_modules(
    course_id: str,
    request_schema: SetCourseModulesRequestSchema,
    interactor: FromDishka[SetCourseModulesInteractor],
) -> Course:
    """
    Replace the module list of a course

    Module order follows the list order.
    """
    request_data = SetCourseModulesRequest(
        course_id=course_id,
        modules=request_schema.modules,
    )

    return await interactor(request_data)


@instructor_router.post(
    "/courses/{course_id}/publish",
    status_code=status.HTTP_200_OK,
)
@inject
async def publish_course(
    course_id: str,
    interactor: FromDishka[PublishCourseInteractor],
) -> Course:
    return await interactor(course_id)


@instructor_router.post(
    "/courses/{course_id}/archive",
    status_code=status.HTTP_200_OK,
)
@inject
async def archive_course(
    course_id: str,
    interactor: FromDishka[ArchiveCourseInteractor],
) -> Course:
    return await interactor(course_id)


@instructor_router.delete(
    "/courses/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
@inject
async def delete_course(
        course_id: str,
        interactor: FromDishka[DeleteCourseInteractor],
) -> None:
    """
    Delete course by ID

    Removes the course from the Course API when it was synced there.
    Returns 404 if the course is not found.
    """
    await interactor(course_id)
