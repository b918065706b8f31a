from fastapi import APIRouter

from course_studio.presentation.api.course.router import course_router
from course_studio.presentation.api.healthcheck.router import healthcheck_router
from course_studio.presentation.api.lesson.router import lesson_router
from course_studio.presentation.api.section.router import section_router

root_router = APIRouter()
root_router.include_router(healthcheck_router)
root_router.include_router(course_router)
root_router.include_router(section_router)
root_router.include_router(lesson_router)
