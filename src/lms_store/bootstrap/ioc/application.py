from dishka import Provider, Scope, provide_all

from lms_store.application.interactors.assessments import (
    AddAssignmentInteractor,
    GetAssignmentInteractor,
    GetAssignmentsInteractor,
    GetAvailableAssessmentsInteractor,
    GetQuizConfigInteractor,
    GetQuizConfigsInteractor,
    SaveQuizConfigInteractor,
    UpdateAssignmentInteractor,
)
from lms_store.application.interactors.instructor_courses import (
    ArchiveCourseInteractor,
    CreateCourseInteractor,
    DeleteCourseInteractor,
    GetInstructorCoursesInteractor,
    PublishCourseInteractor,
    SetCourseModulesInteractor,
    UpdateCourseInteractor,
)
from lms_store.application.interactors.learner_courses import (
    GetCourseInteractor,
    GetPathCoursesInteractor,
)
from lms_store.application.interactors.sync_courses import SyncCoursesInteractor


class ApplicationProvider(Provider):
    instructor_interactors = provide_all(
        GetInstructorCoursesInteractor,
        CreateCourseInteractor,
        UpdateCourseInteractor,
        SetCourseModulesInteractor,
        PublishCourseInteractor,
        ArchiveCourseInteractor,
        DeleteCourseInteractor,
        SyncCoursesInteractor,
        scope=Scope.REQUEST,
    )

    learner_interactors = provide_all(
        GetPathCoursesInteractor,
        GetCourseInteractor,
        scope=Scope.REQUEST,
    )

    assessment_interactors = provide_all(
        GetAssignmentsInteractor,
        GetAssignmentInteractor,
        AddAssignmentInteractor,
        UpdateAssignmentInteractor,
        GetQuizConfigsInteractor,
        GetQuizConfigInteractor,
        SaveQuizConfigInteractor,
        GetAvailableAssessmentsInteractor,
        scope=Scope.REQUEST,
    )
