from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from course_studio.application.payloads import LessonData
from course_studio.domain.course import LessonType
from course_studio.presentation.api.base_schema import CamelSchema


class LessonPayloadSchema(CamelSchema):
    """
    Lesson fields accepted from clients, unknown keys are dropped.

    Values are not typed here, the interactor checks them once the
    caller is known to own the course.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "title": "Variables and types",
                    "type": "video",
                    "content": "Intro to Python variables",
                    "videoUrl": "https://videos.example.com/python-1.mp4",
                    "duration": 12,
                    "isPreview": True,
                },
            ],
        },
    )

    lesson_id: Any = Field(None, alias="_id")
    title: Any = None
    type: Any = None
    content: Any = None
    video_url: Any = None
    duration: Any = None
    is_preview: Any = None
    order: Any = None

    def to_data(self) -> LessonData:
        return LessonData(
            lesson_id=self.lesson_id,
            title=self.title,
            type=self.type,
            content=self.content,
            video_url=self.video_url,
            duration=self.duration,
            is_preview=self.is_preview,
            order=self.order,
        )


def lessons_to_data(lessons: Any) -> Any:
    if not isinstance(lessons, list):
        return lessons
    return [
        LessonPayloadSchema.model_validate(lesson).to_data()
        if isinstance(lesson, dict)
        else lesson
        for lesson in lessons
    ]


class LessonSchema(CamelSchema):
    lesson_id: str = Field(alias="_id")
    title: str
    type: LessonType
    content: str
    video_url: str
    duration: float
    is_preview: bool
    order: int


class LessonResponse(BaseModel):
    success: bool = True
    message: str | None = None
    lesson: LessonSchema


class LessonsResponse(BaseModel):
    success: bool = True
    lessons: list[LessonSchema]
