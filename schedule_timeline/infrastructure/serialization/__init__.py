from schedule_timeline.infrastructure.serialization.document_serializer import \
    DocumentSerializer
from schedule_timeline.infrastructure.serialization.schemas import (
    TimelineDocumentSchema, TimelineItemSchema, TimelineLaneSchema,
    TimelineRangeSchema, TimelineViewSchema)

__all__ = [
    "DocumentSerializer",
    "TimelineDocumentSchema",
    "TimelineViewSchema",
    "TimelineRangeSchema",
    "TimelineLaneSchema",
    "TimelineItemSchema",
]
