"""
Wire schemas for the timeline JSON document.

Every field is optional at this level: structural problems such as a
missing view or lanes section are reported by the validator, not by the
parser. Date values that are not ISO-8601 are kept as InvalidInstant markers
for the validator to report; any other value of the wrong JSON type makes
the document unparseable.
"""
from datetime import datetime
from typing import Annotated, Any

from pydantic import (BaseModel, ConfigDict, ValidationError,
                      ValidatorFunctionWrapHandler, WrapValidator)
from pydantic.alias_generators import to_camel

from schedule_timeline.domain.entities import (InvalidInstant, TimelineDocument,
                                               TimelineItem, TimelineLane,
                                               TimelineRange, TimelineView,
                                               generate_item_id)
from schedule_timeline.shared.utils.datetime import ensure_utc

EXAMPLE_DOCUMENT = {
    "view": {
        "mode": "day",
        "range": {"start": "2024-01-01T00:00:00Z", "end": "2024-01-11T00:00:00Z"},
    },
    "lanes": [{"id": "eng", "label": "Engineering", "color": "#3b82f6"}],
    "items": [
        {
            "id": "kickoff",
            "laneId": "eng",
            "label": "Kickoff",
            "start": "2024-01-02T00:00:00Z",
            "durationDays": 3,
            "status": "In Progress",
        }
    ],
}


def parse_instant(
    value: Any, handler: ValidatorFunctionWrapHandler
) -> datetime | InvalidInstant | None:
    """
    Parse an ISO-8601 instant.

    Values without an offset are read as UTC. A value that does not parse
    becomes an InvalidInstant so the validator can report that one field.
    """
    if isinstance(value, InvalidInstant):
        return value

    try:
        parsed = handler(value)
    except ValidationError:
        return InvalidInstant(raw=str(value))

    return ensure_utc(parsed) if parsed is not None else None


Instant = Annotated[datetime | None, WrapValidator(parse_instant)]


class CamelModel(BaseModel):
    """Base schema with camelCase JSON keys"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )


class TimelineRangeSchema(CamelModel):
    start: Instant = None
    end: Instant = None

    def to_entity(self) -> TimelineRange:
        return TimelineRange(start=self.start, end=self.end)


class TimelineViewSchema(CamelModel):
    mode: str | None = None
    range: TimelineRangeSchema | None = None

    def to_entity(self) -> TimelineView:
        time_range = self.range.to_entity() if self.range else TimelineRange()
        return TimelineView(mode=self.mode, range=time_range)


class TimelineLaneSchema(CamelModel):
    id: str | None = None
    label: str | None = None
    color: str | None = None

    def to_entity(self) -> TimelineLane:
        return TimelineLane(id=self.id or "", label=self.label or "", color=self.color)


class TimelineItemSchema(CamelModel):
    id: str | None = None
    lane_id: str | None = None
    label: str | None = None
    start: Instant = None
    end: Instant = None
    duration_days: float | None = None
    status: str | None = None
    description: str | None = None

    def to_entity(self) -> TimelineItem:
        return TimelineItem(
            id=self.id or generate_item_id(),
            lane_id=self.lane_id or "",
            label=self.label or "",
            start=self.start,
            end=self.end,
            duration_days=self.duration_days,
            status=self.status,
            description=self.description,
        )


class TimelineDocumentSchema(CamelModel):
    view: TimelineViewSchema | None = None
    lanes: list[TimelineLaneSchema] | None = None
    items: list[TimelineItemSchema] | None = None

    model_config = ConfigDict(json_schema_extra={"example": EXAMPLE_DOCUMENT})

    def to_entity(self) -> TimelineDocument:
        return TimelineDocument(
            view=self.view.to_entity() if self.view else None,
            lanes=None if self.lanes is None else tuple(lane.to_entity() for lane in self.lanes),
            items=None if self.items is None else tuple(item.to_entity() for item in self.items),
        )
