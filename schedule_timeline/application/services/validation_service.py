"""
Timeline document validation service.

Decides whether a parsed timeline document is well-formed:
1. View section - supported mode and an ordered date range
2. Lanes - at least one, non-blank case-insensitively unique ids, labels
3. Items - known lane references and enough dates to anchor each item

Every violation is collected so callers can show all problems at once.
"""
import logging
import math
from dataclasses import dataclass, field
from datetime import datetime

from schedule_timeline.domain.entities import (InvalidInstant, TimelineDocument,
                                               TimelineItem)
from schedule_timeline.domain.enums import TimelineViewMode
from schedule_timeline.domain.exceptions import DocumentValidationException
from schedule_timeline.shared.telemetry.tracing import add_span_attributes, traced
from schedule_timeline.shared.utils.datetime import add_days
from schedule_timeline.shared.utils.sanitization import is_blank

logger = logging.getLogger(__name__)

DOCUMENT_ABSENT_ERROR = "Document is null or could not be parsed."


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one timeline document."""

    is_valid: bool
    errors: tuple[str, ...] = field(default_factory=tuple)

    def ensure_valid(self) -> None:
        """Raise DocumentValidationException carrying every error when invalid"""
        if not self.is_valid:
            raise DocumentValidationException(list(self.errors))


class ValidationService:
    """
    Validates timeline documents without mutating them.

    Check categories always run in the order view -> lanes -> items because
    item checks depend on the lane ids collected earlier. Data problems never
    raise; they become entries in the result's error list.
    """

    @traced("timeline.validate")
    def validate(self, document: TimelineDocument | None) -> ValidationResult:
        """
        Validate a timeline document.

        Args:
            document: Parsed document, or None when parsing failed

        Returns:
            ValidationResult with every error found, in check order
        """
        if document is None:
            return ValidationResult(is_valid=False, errors=(DOCUMENT_ABSENT_ERROR,))

        errors: list[str] = []
        self._check_view(document, errors)
        lane_ids = self._check_lanes(document, errors)
        self._check_items(document, lane_ids, errors)

        if errors:
            logger.debug("Timeline document failed validation with %d error(s)", len(errors))
        add_span_attributes(**{"timeline.validation_errors": len(errors)})

        return ValidationResult(is_valid=not errors, errors=tuple(errors))

    def _check_view(self, document: TimelineDocument, errors: list[str]) -> None:
        view = document.view
        if view is None:
            errors.append("view section is required.")
            return

        if not TimelineViewMode.is_supported(view.mode):
            allowed = ", ".join(TimelineViewMode.values())
            errors.append(f"view.mode must be one of [{allowed}].")

        start = view.range.start if view.range else None
        end = view.range.end if view.range else None
        if start is None or end is None:
            errors.append(
                "view.range.start and view.range.end are required ISO-8601 date strings."
            )
        elif isinstance(start, InvalidInstant) or isinstance(end, InvalidInstant):
            errors.append("view.range.start and view.range.end must be valid ISO-8601 dates.")
        elif end <= start:
            errors.append("view.range.end must be after view.range.start.")

    def _check_lanes(self, document: TimelineDocument, errors: list[str]) -> set[str]:
        """Check lanes and return the case-folded set of usable lane ids"""
        lanes = document.lanes or ()
        if not lanes:
            errors.append("lanes must include at least one entry.")

        lane_ids: set[str] = set()
        for index, lane in enumerate(lanes):
            if is_blank(lane.id):
                errors.append(f"lanes[{index}].id cannot be empty.")
            else:
                key = lane.id.casefold()
                if key in lane_ids:
                    errors.append(f"Duplicate lane id detected: {lane.id}")
                lane_ids.add(key)

            if is_blank(lane.label):
                name = lane.id if not is_blank(lane.id) else f"lanes[{index}]"
                errors.append(f"Lane '{name}' is missing a label.")

        return lane_ids

    def _check_items(
        self, document: TimelineDocument, lane_ids: set[str], errors: list[str]
    ) -> None:
        if document.items is None:
            errors.append("items must be provided (can be empty array).")
            return

        for item in document.items:
            if is_blank(item.lane_id):
                errors.append(f"Item '{item.id}' must specify a laneId.")
            elif item.lane_id.casefold() not in lane_ids:
                errors.append(f"Item '{item.id}' references unknown lane '{item.lane_id}'.")

            self._check_item_dates(item, errors)

    def _check_item_dates(self, item: TimelineItem, errors: list[str]) -> None:
        unparsed = [
            name
            for name, value in (("start", item.start), ("end", item.end))
            if isinstance(value, InvalidInstant)
        ]
        for name in unparsed:
            errors.append(f"Item '{item.id}' {name} is not a valid ISO-8601 date.")

        # Ordering and sufficiency need both dates parsed
        if not unparsed:
            if item.start is None and item.end is None:
                errors.append(f"Item '{item.id}' needs start/end or start + durationDays.")
            elif item.start is not None and item.end is not None and item.end <= item.start:
                errors.append(f"Item '{item.id}' must have end after start.")
            elif item.start is None and item.end is not None and item.duration_days is None:
                errors.append(f"Item '{item.id}' is missing start date.")

        if item.duration_days is None:
            return
        if not math.isfinite(item.duration_days) or item.duration_days < 0:
            errors.append(f"Item '{item.id}' durationDays must be a non-negative number.")
        elif (
            isinstance(item.start, datetime)
            and item.end is None
            and add_days(item.start, item.duration_days) is None
        ):
            errors.append(f"Item '{item.id}' durationDays is out of range.")
