from dataclasses import dataclass
from typing import Any

from course_studio.domain.common.exceptions import AppError


@dataclass(eq=False)
class ApplicationError(AppError):

    @property
    def message(self) -> str:
        return "An application error occurred"


@dataclass(eq=False)
class EntityNotFoundError(ApplicationError):
    """Сущность не найдена"""

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
class InvalidEntityIdError(ApplicationError):
    """Идентификатор в пути не проходит проверку формата"""

    value: str

    @property
    def message(self) -> str:
        return f"Invalid ID format: '{self.value}'"


@dataclass(eq=False)
class InvalidPayloadError(ApplicationError):
    """Тело запроса не проходит структурную проверку"""

    reason: str

    @property
    def message(self) -> str:
        return self.reason


@dataclass(eq=False)
class InvalidSortFieldError(ApplicationError):
    field_name: str
    allowed: tuple[str, ...] = ()

    @property
    def message(self) -> str:
        return (
            f"Cannot sort by '{self.field_name}', "
            f"expected one of: {', '.join(self.allowed)}"
        )


@dataclass(eq=False)
class UnauthenticatedError(ApplicationError):

    @property
    def message(self) -> str:
        return "Unauthorized"


@dataclass(eq=False)
class AccessDeniedError(ApplicationError):
    """Вызывающий не является владельцем агрегата"""

    entity_type: type
    entity_id: str | None = None

    @property
    def message(self) -> str:
        return f"Not authorized to modify this {self.entity_type.__name__.lower()}"


@dataclass(eq=False)
class PersistenceError(ApplicationError):
    operation: str

    @property
    def message(self) -> str:
        return "Server error"
