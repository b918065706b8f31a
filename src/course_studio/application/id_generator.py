from abc import abstractmethod
from typing import Protocol

from course_studio.application.exceptions.base import InvalidEntityIdError


class IdGenerator(Protocol):
    @abstractmethod
    def new_id(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def is_valid(self, value: str) -> bool:
        raise NotImplementedError


def ensure_valid_ids(id_generator: IdGenerator, *values: str) -> None:
    for value in values:
        if not id_generator.is_valid(value):
            raise InvalidEntityIdError(value=value)
