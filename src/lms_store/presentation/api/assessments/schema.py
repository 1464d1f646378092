from pydantic import BaseModel, Field

from lms_store.domain.assignment import AssignmentStatus


class UpdateAssignmentRequestSchema(BaseModel):
    title: str | None = Field(None, min_length=1)
    status: AssignmentStatus | None = None
    due_date: str | None = Field(None, description="Display date, e.g. 'Feb 10, 2026'")
    due_date_iso: str | None = Field(None, description="ISO date used for sorting")
    description: str | None = None
    ai_feedback: str | None = Field(None, description="Reviewer feedback shown to the learner")
