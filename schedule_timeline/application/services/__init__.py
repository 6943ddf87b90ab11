"""Application services."""

from schedule_timeline.application.services.layout_service import (
    AxisTick, ItemGeometry, LaneRow, LayoutService, TimelineLayout)
from schedule_timeline.application.services.normalization_service import \
    NormalizationService
from schedule_timeline.application.services.validation_service import (
    ValidationResult, ValidationService)

__all__ = [
    "ValidationService",
    "ValidationResult",
    "NormalizationService",
    "LayoutService",
    "TimelineLayout",
    "LaneRow",
    "ItemGeometry",
    "AxisTick",
]
