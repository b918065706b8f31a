from dishka import FromDishka
from dishka.integrations.fastapi import inject
from fastapi import APIRouter
from starlette import status

from course_studio.application.interactors.section.create_section import (
    CreateSectionInteractor,
    CreateSectionRequest,
)
from course_studio.application.interactors.section.delete_section import (
    DeleteSectionInteractor,
    DeleteSectionRequest,
)
from course_studio.application.interactors.section.get_section import (
    GetSectionInteractor,
    GetSectionRequest,
)
from course_studio.application.interactors.section.list_sections import (
    ListSectionsInteractor,
    ListSectionsRequest,
)
from course_studio.application.interactors.section.patch_section import (
    PatchSectionInteractor,
    PatchSectionRequest,
)
from course_studio.application.interactors.section.replace_section import (
    ReplaceSectionInteractor,
    ReplaceSectionRequest,
)
from course_studio.application.interactors.section.replace_sections import (
    ReplaceSectionsInteractor,
    ReplaceSectionsRequest,
)
from course_studio.presentation.api.base_schema import MessageResponse
from course_studio.presentation.api.section.schema import (
    SectionPayloadSchema,
    SectionResponse,
    SectionSchema,
    SectionsPayloadSchema,
    SectionsResponse,
)

section_router = APIRouter(
    prefix="/courses/{course_id}/sections",
    tags=["sections"],
)


@section_router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model_exclude_none=True,
)
@inject
async def list_sections(
    course_id: str,
    interactor: FromDishka[ListSectionsInteractor],
) -> SectionsResponse:
    sections = await interactor(ListSectionsRequest(course_id=course_id))

    return SectionsResponse(
        sections=[SectionSchema.model_validate(section) for section in sections],
    )


@section_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True,
)
@inject
async def create_section(
    course_id: str,
    request_schema: SectionPayloadSchema,
    interactor: FromDishka[CreateSectionInteractor],
) -> SectionResponse:
    """
    Add section to course

    The new section is appended after the existing ones
    """
    section = await interactor(
        CreateSectionRequest(
            course_id=course_id,
            title=request_schema.title,
            description=request_schema.description,
        ),
    )

    return SectionResponse(
        message="Section added successfully",
        section=SectionSchema.model_validate(section),
    )


@section_router.put(
    "",
    status_code=status.HTTP_200_OK,
    response_model_exclude_none=True,
)
@inject
async def replace_sections(
    course_id: str,
    request_schema: SectionsPayloadSchema,
    interactor: FromDishka[ReplaceSectionsInteractor],
) -> SectionsResponse:
    """
    Replace all sections of a course

    Used for bulk edits and reordering, list position becomes the order.
    Sections sent with an existing _id keep it.
    """
    sections = await interactor(
        ReplaceSectionsRequest(
            course_id=course_id,
            sections=request_schema.to_data(),
        ),
    )

    return SectionsResponse(
        message="Sections updated successfully",
        sections=[SectionSchema.model_validate(section) for section in sections],
    )


@section_router.get(
    "/{section_id}",
    status_code=status.HTTP_200_OK,
    response_model_exclude_none=True,
)
@inject
async def get_section(
    course_id: str,
    section_id: str,
    interactor: FromDishka[GetSectionInteractor],
) -> SectionResponse:
    section = await interactor(
        GetSectionRequest(course_id=course_id, section_id=section_id),
    )

    return SectionResponse(section=SectionSchema.model_validate(section))


@section_router.put(
    "/{section_id}",
    status_code=status.HTTP_200_OK,
    response_model_exclude_none=True,
)
@inject
async def replace_section(
    course_id: str,
    section_id: str,
    request_schema: SectionPayloadSchema,
    interactor: FromDishka[ReplaceSectionInteractor],
) -> SectionResponse:
    data = request_schema.to_data()
    section = await interactor(
        ReplaceSectionRequest(
            course_id=course_id,
            section_id=section_id,
            title=data.title,
            description=data.description,
            lessons=data.lessons,
        ),
    )

    return SectionResponse(
        message="Section updated successfully",
        section=SectionSchema.model_validate(section),
    )


@section_router.patch(
    "/{section_id}",
    status_code=status.HTTP_200_OK,
    response_model_exclude_none=True,
)
@inject
async def patch_section(
    course_id: str,
    section_id: str,
    request_schema: SectionPayloadSchema,
    interactor: FromDishka[PatchSectionInteractor],
) -> SectionResponse:
    """
    Update section by ID

    The section id itself cannot be changed. If lessons are provided
    every one of them must have a title, otherwise nothing is applied.
    """
    data = request_schema.to_data()
    section = await interactor(
        PatchSectionRequest(
            course_id=course_id,
            section_id=section_id,
            title=data.title,
            description=data.description,
            lessons=data.lessons,
            order=data.order,
        ),
    )

    return SectionResponse(
        message="Section updated successfully",
        section=SectionSchema.model_validate(section),
    )


@section_router.delete(
    "/{section_id}",
    status_code=status.HTTP_200_OK,
)
@inject
async def delete_section(
    course_id: str,
    section_id: str,
    interactor: FromDishka[DeleteSectionInteractor],
) -> MessageResponse:
    await interactor(
        DeleteSectionRequest(course_id=course_id, section_id=section_id),
    )

    return MessageResponse(message="Section deleted successfully")
