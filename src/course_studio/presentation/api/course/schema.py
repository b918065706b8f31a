from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from course_studio.application.payloads import CourseFields
from course_studio.domain.course import CourseLevel, CourseStatus
from course_studio.presentation.api.base_schema import CamelSchema
from course_studio.presentation.api.section.schema import (
    SectionSchema,
    sections_to_data,
)


class CreateCourseRequestSchema(CamelSchema):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "title": "Python Basics",
                    "description": "Learn python from scratch",
                    "price": 19.99,
                    "level": "beginner",
                    "category": "Programming",
                    "tags": ["python", "backend"],
                },
            ],
        },
    )

    title: Any = Field(None, description="Course title, required")
    description: Any = None
    price: Any = None
    thumbnail_url: Any = None
    level: Any = None
    category: Any = None
    tags: Any = None


NULLABLE_FIELDS = ("thumbnail_url",)


class CourseFieldsSchema(CamelSchema):
    """Body of PUT and PATCH, only these keys are applied"""

    title: Any = None
    description: Any = None
    price: Any = None
    thumbnail_url: Any = None
    level: Any = None
    category: Any = None
    tags: Any = None
    status: Any = None
    sections: Any = None

    def to_fields(self) -> CourseFields:
        return CourseFields(
            title=self.title,
            description=self.description,
            price=self.price,
            thumbnail_url=self.thumbnail_url,
            level=self.level,
            category=self.category,
            tags=self.tags,
            status=self.status,
            sections=sections_to_data(self.sections),
            cleared=frozenset(
                name
                for name in NULLABLE_FIELDS
                if name in self.model_fields_set and getattr(self, name) is None
            ),
        )


class RatingsSchema(CamelSchema):
    average: float
    count: int


class CourseSchema(CamelSchema):
    course_id: str = Field(alias="_id")
    title: str
    description: str
    price: float
    thumbnail_url: str | None = None
    level: CourseLevel
    category: str
    tags: list[str]
    status: CourseStatus
    owner_id: str
    sections: list[SectionSchema]
    enrolled_students: int
    ratings: RatingsSchema
    created_at: datetime
    updated_at: datetime


class CourseResponse(BaseModel):
    success: bool = True
    message: str | None = None
    course: CourseSchema


class CoursesResponse(BaseModel):
    success: bool = True
    courses: list[CourseSchema]
    count: int
