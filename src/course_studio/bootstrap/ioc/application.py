from dishka import Provider, Scope, provide_all

from course_studio.application.interactors.course.create_course import (
    CreateCourseInteractor,
)
from course_studio.application.interactors.course.delete_course import (
    DeleteCourseInteractor,
)
from course_studio.application.interactors.course.get_course import (
    GetCourseInteractor,
)
from course_studio.application.interactors.course.list_courses import (
    ListCoursesInteractor,
)
from course_studio.application.interactors.course.patch_course import (
    PatchCourseInteractor,
)
from course_studio.application.interactors.course.replace_course import (
    ReplaceCourseInteractor,
)
from course_studio.application.interactors.lesson.create_lesson import (
    CreateLessonInteractor,
)
from course_studio.application.interactors.lesson.delete_lesson import (
    DeleteLessonInteractor,
)
from course_studio.application.interactors.lesson.get_lesson import (
    GetLessonInteractor,
)
from course_studio.application.interactors.lesson.list_lessons import (
    ListLessonsInteractor,
)
from course_studio.application.interactors.lesson.patch_lesson import (
    PatchLessonInteractor,
)
from course_studio.application.interactors.lesson.replace_lesson import (
    ReplaceLessonInteractor,
)
from course_studio.application.interactors.section.create_section import (
    CreateSectionInteractor,
)
from course_studio.application.interactors.section.delete_section import (
    DeleteSectionInteractor,
)
from course_studio.application.interactors.section.get_section import (
    GetSectionInteractor,
)
from course_studio.application.interactors.section.list_sections import (
    ListSectionsInteractor,
)
from course_studio.application.interactors.section.patch_section import (
    PatchSectionInteractor,
)
from course_studio.application.interactors.section.replace_section import (
    ReplaceSectionInteractor,
)
from course_studio.application.interactors.section.replace_sections import (
    ReplaceSectionsInteractor,
)


class ApplicationProvider(Provider):
    interactors = provide_all(
        CreateCourseInteractor,
        GetCourseInteractor,
        ListCoursesInteractor,
        ReplaceCourseInteractor,
        PatchCourseInteractor,
        DeleteCourseInteractor,
        ListSectionsInteractor,
        GetSectionInteractor,
        CreateSectionInteractor,
        ReplaceSectionsInteractor,
        ReplaceSectionInteractor,
        PatchSectionInteractor,
        DeleteSectionInteractor,
        ListLessonsInteractor,
        GetLessonInteractor,
        CreateLessonInteractor,
        ReplaceLessonInteractor,
        PatchLessonInteractor,
        DeleteLessonInteractor,
        scope=Scope.REQUEST,
    )
