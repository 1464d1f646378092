from dataclasses import dataclass
from typing import Any

from lms_store.domain.common.exceptions import AppError


@dataclass(eq=False)
class ApplicationError(AppError):

    @property
    def message(self) -> str:
        return "An application error occurred"


@dataclass(eq=False)
class EntityNotFoundError(ApplicationError):
    """Entity is absent from the canonical store"""

    entity_type: type
    field_name: str | None = None
    field_value: Any = None

    @property
    def message(self) -> str:
        entity_name = self.entity_type.__name__

        if self.field_name is None:
            return f"{entity_name} not found"

        return f"{entity_name} not found by {self.field_name}='{self.field_value}'"  # noqa: E501


@dataclass(eq=False)
class StateStorageError(ApplicationError):
    storage_key: str
    reason: str = ""

    @property
    def message(self) -> str:
        return f"State storage '{self.storage_key}' failed: {self.reason}"


@dataclass(eq=False)
class RemoteCourseApiError(ApplicationError):
    status_code: int | None = None
    detail: str = ""

    @property
    def message(self) -> str:
        if self.status_code is None:
            return f"Course API error: {self.detail}"
        return f"Course API responded {self.status_code}: {self.detail}"


@dataclass(eq=False)
class RemoteCourseUnavailableError(RemoteCourseApiError):

    @property
    def message(self) -> str:
        return f"Course API is unreachable: {self.detail}"


@dataclass(eq=False)
class RemoteCoursePayloadError(RemoteCourseApiError):

    @property
    def message(self) -> str:
        return f"Course API returned a malformed payload: {self.detail}"
