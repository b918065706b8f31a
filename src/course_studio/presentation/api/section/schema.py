from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from course_studio.application.payloads import SectionData
from course_studio.presentation.api.base_schema import CamelSchema
from course_studio.presentation.api.lesson.schema import (
    LessonSchema,
    lessons_to_data,
)


class SectionPayloadSchema(CamelSchema):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "title": "Getting started",
                    "description": "Installing Python and running scripts",
                    "lessons": [
                        {"title": "Installing Python", "type": "text"},
                        {"title": "Hello, world", "duration": 5},
                    ],
                },
            ],
        },
    )

    section_id: Any = Field(None, alias="_id")
    title: Any = None
    description: Any = None
    lessons: Any = None
    order: Any = None

    def to_data(self) -> SectionData:
        return SectionData(
            section_id=self.section_id,
            title=self.title,
            description=self.description,
            lessons=lessons_to_data(self.lessons),
            order=self.order,
        )


def sections_to_data(sections: Any) -> Any:
    if not isinstance(sections, list):
        return sections
    return [
        SectionPayloadSchema.model_validate(section).to_data()
        if isinstance(section, dict)
        else section
        for section in sections
    ]


class SectionsPayloadSchema(BaseModel):
    sections: Any = None

    def to_data(self) -> Any:
        return sections_to_data(self.sections)


class SectionSchema(CamelSchema):
    section_id: str = Field(alias="_id")
    title: str
    description: str
    order: int
    lessons: list[LessonSchema]


class SectionResponse(BaseModel):
    success: bool = True
    message: str | None = None
    section: SectionSchema


class SectionsResponse(BaseModel):
    success: bool = True
    message: str | None = None
    sections: list[SectionSchema]
