import logging
from dataclasses import dataclass

from starlette.requests import Request

from course_studio.application.exceptions.base import UnauthenticatedError
from course_studio.application.identity import IdentityProvider

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class HeaderIdentityProvider(IdentityProvider):
    """Reads the caller id put into a request header by the auth gateway"""

    request: Request
    header_name: str

    def get_current_user_id(self) -> str:
        user_id = self.request.headers.get(self.header_name, "").strip()

        if not user_id:
            logger.info("Request without caller identity: %s", self.request.url.path)
            raise UnauthenticatedError()

        return user_id
