"""Domain entities."""

from schedule_timeline.domain.entities.document import (InvalidInstant,
                                                        TimelineDocument,
                                                        TimelineItem,
                                                        TimelineLane,
                                                        TimelineRange,
                                                        TimelineView,
                                                        generate_item_id)

__all__ = [
    "InvalidInstant",
    "TimelineDocument",
    "TimelineView",
    "TimelineRange",
    "TimelineLane",
    "TimelineItem",
    "generate_item_id",
]
