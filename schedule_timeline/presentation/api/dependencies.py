"""
FastAPI dependencies for the timeline API.

Services are stateless, so each is built once per process and shared
across requests.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from schedule_timeline.application.services import (LayoutService,
                                                    NormalizationService,
                                                    ValidationService)
from schedule_timeline.application.use_cases import TimelineDocumentService
from schedule_timeline.infrastructure.config.settings import (Settings,
                                                              get_settings)
from schedule_timeline.infrastructure.documents import \
    DefaultDocumentRepository
from schedule_timeline.infrastructure.serialization import DocumentSerializer


@lru_cache
def get_timeline_service() -> TimelineDocumentService:
    """Shared timeline pipeline service"""
    return TimelineDocumentService(
        serializer=DocumentSerializer(),
        validation_service=ValidationService(),
        normalization_service=NormalizationService(),
        layout_service=LayoutService(),
    )


def get_default_document_repo(
    settings: Annotated[Settings, Depends(get_settings)],
) -> DefaultDocumentRepository:
    """Repository for the configured default schedule"""
    return DefaultDocumentRepository(settings.default_document_path)


async def get_document_text(request: Request) -> str | None:
    """
    Raw request body as text.

    Bodies that are not valid UTF-8 are treated like unparseable JSON.
    """
    body = await request.body()
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError:
        return None
