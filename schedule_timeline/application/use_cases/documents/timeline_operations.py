"""
Timeline document use cases.

Orchestrates parse -> validate -> normalize -> layout for raw JSON text.
Validation and normalization stay separate steps so callers that only need
the error list never pay for derived fields.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from schedule_timeline.application.services.validation_service import \
    DOCUMENT_ABSENT_ERROR
from schedule_timeline.domain.exceptions import (DocumentValidationException,
                                                 TimelineException)
from schedule_timeline.shared.telemetry.tracing import traced

if TYPE_CHECKING:
    from schedule_timeline.application.interfaces import (
        IDefaultDocumentSource, IDocumentSerializer)
    from schedule_timeline.application.services.layout_service import (
        LayoutService, TimelineLayout)
    from schedule_timeline.application.services.normalization_service import \
        NormalizationService
    from schedule_timeline.application.services.validation_service import (
        ValidationResult, ValidationService)
    from schedule_timeline.domain.entities import TimelineDocument

logger = logging.getLogger(__name__)

EMPTY_DOCUMENT_TEXT = "{}"
DEFAULT_LOAD_FAILED_ERROR = "Failed to load default JSON. Check server logs for details."


@dataclass(frozen=True)
class DefaultDocument:
    """Default schedule text together with its validation errors"""

    text: str
    errors: tuple[str, ...] = field(default_factory=tuple)


class TimelineDocumentService:
    """
    Runs the timeline pipeline over raw JSON text.

    Responsibilities:
    - Turn parse failures into the absent-document validation case
    - Gate normalization on a successful validation (fail-fast boundary)
    - Load and check the default schedule
    """

    def __init__(
        self,
        serializer: IDocumentSerializer,
        validation_service: ValidationService,
        normalization_service: NormalizationService,
        layout_service: LayoutService,
    ) -> None:
        self.serializer = serializer
        self.validator = validation_service
        self.normalizer = normalization_service
        self.layout = layout_service

    def validate_text(self, text: str | None) -> ValidationResult:
        """Parse and validate; parse failures become the absent-document error"""
        return self.validator.validate(self.serializer.deserialize(text))

    def load_and_validate(self, text: str | None) -> TimelineDocument:
        """
        Parse, validate and normalize a document.

        Raises:
            DocumentValidationException: With every validation error joined
                by newlines when the document is invalid
        """
        document = self.serializer.deserialize(text)
        self.validator.validate(document).ensure_valid()
        if document is None:
            raise DocumentValidationException([DOCUMENT_ABSENT_ERROR])
        return self.normalizer.normalize(document)

    def normalize_text(self, text: str | None) -> str:
        """Normalize a document and encode it back to JSON"""
        return self.serializer.serialize(self.load_and_validate(text))

    def layout_text(self, text: str | None) -> TimelineLayout:
        """Normalize a document and project it onto the view's time axis"""
        return self.layout.build_layout(self.load_and_validate(text))

    @traced("timeline.load_default")
    async def load_default(self, source: IDefaultDocumentSource) -> DefaultDocument:
        """
        Load the default schedule and validate it.

        A missing default yields an empty document with no errors; a read
        failure is logged and reported as a single generic error.
        """
        try:
            text = await source.read_text()
        except TimelineException as e:
            logger.error(
                "Failed to read timeline document from %s: %s", source.location, e.message
            )
            return DefaultDocument(text=EMPTY_DOCUMENT_TEXT, errors=(DEFAULT_LOAD_FAILED_ERROR,))

        if text is None:
            return DefaultDocument(text=EMPTY_DOCUMENT_TEXT)

        result = self.validate_text(text)
        return DefaultDocument(text=text, errors=result.errors)
