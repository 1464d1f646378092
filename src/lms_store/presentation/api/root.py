from fastapi import APIRouter

from lms_store.presentation.api.assessments.router import (
    assessments_router,
    assignments_router,
    quizzes_router,
)
from lms_store.presentation.api.healthcheck.router import healthcheck_router
from lms_store.presentation.api.instructor.router import instructor_router
from lms_store.presentation.api.learner.router import learner_router
from lms_store.presentation.api.sync.router import sync_router

root_router = APIRouter()
root_router.include_router(healthcheck_router)
root_router.include_router(instructor_router, prefix="/instructor", tags=["instructor"])
root_router.include_router(learner_router, prefix="/learner", tags=["learner"])
root_router.include_router(assignments_router, prefix="/assignments", tags=["assignments"])
root_router.include_router(quizzes_router, prefix="/quizzes", tags=["quizzes"])
root_router.include_router(assessments_router, prefix="/assessments", tags=["assessments"])
root_router.include_router(sync_router, prefix="/sync", tags=["sync"])
