"""Timeline document JSON serializer"""
import logging

from pydantic import ValidationError

from schedule_timeline.domain.entities import TimelineDocument
from schedule_timeline.infrastructure.serialization.schemas import \
    TimelineDocumentSchema

logger = logging.getLogger(__name__)


class DocumentSerializer:
    """
    Converts between timeline JSON text and domain documents.

    Parse failures (blank text, malformed JSON, a non-object top level or
    structural values of the wrong JSON type) yield None, the "document
    absent" case the validator reports as a single error. Unparseable date
    strings do not: they reach the validator as InvalidInstant markers.
    """

    def __init__(self, indent: int | None = 2):
        self.indent = indent

    def deserialize(self, text: str | None) -> TimelineDocument | None:
        if text is None or not text.strip():
            return None

        try:
            schema = TimelineDocumentSchema.model_validate_json(text)
        except ValidationError as e:
            logger.debug("Timeline document could not be parsed: %s", e)
            return None

        return schema.to_entity()

    def serialize(self, document: TimelineDocument) -> str:
        """Encode a document as camelCase JSON, omitting absent optional fields"""
        return self.to_schema(document).model_dump_json(
            by_alias=True, exclude_none=True, indent=self.indent
        )

    @staticmethod
    def to_schema(document: TimelineDocument) -> TimelineDocumentSchema:
        return TimelineDocumentSchema.model_validate(document, from_attributes=True)
