"""
Domain layer - Enterprise Business Rules.

This is the innermost layer containing the timeline document entities,
enumerations and domain exceptions. It has no dependencies on other layers.
"""

from schedule_timeline.domain.entities import (InvalidInstant, TimelineDocument,
                                               TimelineItem, TimelineLane,
                                               TimelineRange, TimelineView)
from schedule_timeline.domain.enums import TimelineViewMode
from schedule_timeline.domain.exceptions import (DocumentValidationException,
                                                 TimelineException,
                                                 ValidationException)

__all__ = [
    # Entities
    "InvalidInstant",
    "TimelineDocument",
    "TimelineView",
    "TimelineRange",
    "TimelineLane",
    "TimelineItem",
    # Enums
    "TimelineViewMode",
    # Exceptions
    "TimelineException",
    "ValidationException",
    "DocumentValidationException",
]
