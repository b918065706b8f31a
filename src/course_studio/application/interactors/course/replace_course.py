import logging
from dataclasses import dataclass

from course_studio.application.access import ensure_owner
from course_studio.application.course_lookup import load_course
from course_studio.application.course_repo import CourseRepository
from course_studio.application.id_generator import IdGenerator, ensure_valid_ids
from course_studio.application.identity import IdentityProvider
from course_studio.application.payloads import CourseFields, apply_course_fields
from course_studio.application.validation import (
    COURSE_TITLE_REQUIRED,
    parse_course_fields,
    require_title,
)
from course_studio.domain.course import Course

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class ReplaceCourseRequest:
    course_id: str
    fields: CourseFields


@dataclass(slots=True, frozen=True)
class ReplaceCourseInteractor:
    """
    Full update of a course.

    Title is mandatory. Optional fields missing from the request keep
    their current values instead of falling back to defaults.
    """

    course_repository: CourseRepository
    identity_provider: IdentityProvider
    id_generator: IdGenerator

    async def __call__(self, request_data: ReplaceCourseRequest) -> Course:
        user_id = self.identity_provider.get_current_user_id()
        ensure_valid_ids(self.id_generator, request_data.course_id)

        logger.info("Replacing course: %s", request_data.course_id)

        course = await load_course(self.course_repository, request_data.course_id)
        ensure_owner(course, user_id)

        fields = request_data.fields
        require_title(fields.title, COURSE_TITLE_REQUIRED)
        fields = parse_course_fields(fields)

        apply_course_fields(course, fields, self.id_generator)
        course.touch()

        await self.course_repository.save(course)

        logger.info(
            "Course replaced: %s, sections=%s",
            request_data.course_id,
            len(course.sections),
        )
        return course
