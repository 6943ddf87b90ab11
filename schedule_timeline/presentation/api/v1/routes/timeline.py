"""Timeline document API endpoints"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from schedule_timeline.application.use_cases import TimelineDocumentService
from schedule_timeline.infrastructure.documents import \
    DefaultDocumentRepository
from schedule_timeline.infrastructure.serialization.schemas import \
    EXAMPLE_DOCUMENT
from schedule_timeline.presentation.api.dependencies import (
    get_default_document_repo, get_document_text, get_timeline_service)
from schedule_timeline.presentation.api.v1.schemas.timeline import (
    DefaultDocumentResponse, LayoutResponse, ValidationResponse)

router = APIRouter()

# Documents the raw JSON body in OpenAPI; the handlers read the body as text
# so that unparseable input reaches the validator instead of a 422.
DOCUMENT_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {
                "schema": {"type": "object", "example": EXAMPLE_DOCUMENT}
            }
        },
    }
}


@router.post("/validate", response_model=ValidationResponse, openapi_extra=DOCUMENT_BODY)
async def validate_document(
    text: Annotated[str | None, Depends(get_document_text)],
    service: Annotated[TimelineDocumentService, Depends(get_timeline_service)],
) -> ValidationResponse:
    """
    Validate a timeline document.

    Always returns 200; every problem found is listed in ``errors`` so a
    single corrected submission can reveal any remaining issues.
    """
    result = service.validate_text(text)
    return ValidationResponse.from_result(result)


@router.post("/normalize", openapi_extra=DOCUMENT_BODY)
async def normalize_document(
    text: Annotated[str | None, Depends(get_document_text)],
    service: Annotated[TimelineDocumentService, Depends(get_timeline_service)],
) -> Response:
    """
    Validate and normalize a timeline document.

    Derives missing end dates from start + durationDays and orders items by
    effective start. Invalid documents are rejected with 422 and the full
    error list.
    """
    normalized = service.normalize_text(text)
    return Response(content=normalized, media_type="application/json")


@router.post("/layout", response_model=LayoutResponse, openapi_extra=DOCUMENT_BODY)
async def layout_document(
    text: Annotated[str | None, Depends(get_document_text)],
    service: Annotated[TimelineDocumentService, Depends(get_timeline_service)],
) -> LayoutResponse:
    """
    Project a timeline document onto its view's time axis.

    Returns axis ticks plus, per lane, each item's offset and width as
    percentages of the axis.
    """
    layout = service.layout_text(text)
    return LayoutResponse.from_layout(layout)


@router.get("/default", response_model=DefaultDocumentResponse)
async def get_default_document(
    repo: Annotated[DefaultDocumentRepository, Depends(get_default_document_repo)],
    service: Annotated[TimelineDocumentService, Depends(get_timeline_service)],
) -> DefaultDocumentResponse:
    """Load the default schedule together with its validation errors"""
    default = await service.load_default(repo)
    return DefaultDocumentResponse.from_default(default)
