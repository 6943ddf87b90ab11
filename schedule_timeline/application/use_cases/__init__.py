"""Application use cases."""

from schedule_timeline.application.use_cases.documents.timeline_operations import (
    DefaultDocument, TimelineDocumentService)

__all__ = [
    "TimelineDocumentService",
    "DefaultDocument",
]
