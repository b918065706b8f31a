import logging

from course_studio.application.exceptions.base import AccessDeniedError
from course_studio.domain.course import Course

logger = logging.getLogger(__name__)


def ensure_owner(course: Course, caller_id: str) -> None:
    """Разрешить изменение только владельцу курса"""
    if course.owner_id != caller_id:
        logger.warning(
            "User %s is not the owner of course %s",
            caller_id,
            course._id,  # noqa: SLF001
        )
        raise AccessDeniedError(entity_type=Course, entity_id=course._id)  # noqa: SLF001
