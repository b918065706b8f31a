from abc import abstractmethod
from typing import Protocol


class IdentityProvider(Protocol):
    @abstractmethod
    def get_current_user_id(self) -> str:
        """Return caller id or raise UnauthenticatedError"""
        raise NotImplementedError
