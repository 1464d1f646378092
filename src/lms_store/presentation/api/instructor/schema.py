from pydantic import BaseModel, ConfigDict, Field

from lms_store.domain.course import CourseStatus, Module


class CreateCourseRequestSchema(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "title": "Kubernetes Fundamentals",
                    "description": "Pods, deployments and services",
                    "video_url": "https://www.youtube.com/watch?v=X48VuDVv0do",
                    "roles": ["Cloud & DevOps"],
                    "modules": [
                        {
                            "id": "mod-1",
                            "title": "Cluster basics",
                            "order": 0,
                            "chapters": [
                                {
                                    "id": "ch-1",
                                    "type": "video",
                                    "title": "What is a pod",
                                    "url": "https://www.youtube.com/watch?v=X48VuDVv0do",
                                    "order": 0,
                                },
                            ],
                        },
                    ],
                    "sync_to_backend": True,
                },
            ],
        },
    )

    title: str = Field(..., min_length=1, description="Course title")
    description: str = Field("", description="Falls back to the title when empty")
    video_url: str | None = None
    thumbnail: str | None = None
    status: CourseStatus = CourseStatus.DRAFT
    roles: list[str] = Field(
        default_factory=list,
        description="Role tags, the learning path is inferred from them",
    )
    modules: list[Module] = Field(default_factory=list)
    instructor_name: str = "Instructor"
    sync_to_backend: bool = Field(
        True,
        description="Create on the Course API first; off keeps a local draft",
    )


class UpdateCourseRequestSchema(BaseModel):
    title: str | None = Field(None, min_length=1)
    description: str | None = None
    video_url: str | None = None
    thumbnail: str | None = None
    roles: list[str] | None = Field(None, min_length=1)
    phase: str | None = None
    skills: list[str] | None = None
    prerequisite_course_ids: list[str] | None = None
    estimated_duration: str | None = None


class SetCourseModulesRequestSchema(BaseModel):
    modules: list[Module]
