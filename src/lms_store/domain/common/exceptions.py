from dataclasses import dataclass


@dataclass(eq=False)
class AppError(Exception):
    @property
    def message(self) -> str:
        return ""


@dataclass(eq=False)
class DomainError(AppError):

    @property
    def message(self) -> str:
        return "A domain error occurred"


@dataclass(eq=False)
class ImmutableFieldError(DomainError):
    entity_type: type
    entity_id: str
    field_name: str

    @property
    def message(self) -> str:
        entity_name = self.entity_type.__name__
        return f"{entity_name} '{self.entity_id}': field '{self.field_name}' is immutable"  # noqa: E501


@dataclass(eq=False)
class DuplicateEntityError(DomainError):
    entity_type: type
    entity_id: str

    @property
    def message(self) -> str:
        return f"{self.entity_type.__name__} '{self.entity_id}' already exists"


@dataclass(eq=False)
class BackendIdConflictError(DomainError):
    """Course is already bound to another backend record"""

    course_id: str
    current_backend_id: str
    new_backend_id: str | None

    @property
    def message(self) -> str:
        return (
            f"Course '{self.course_id}' is bound to backend id "
            f"'{self.current_backend_id}', cannot rebind to '{self.new_backend_id}'"
        )
