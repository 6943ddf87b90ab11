"""
Timeline document domain entities.

These represent the schedule document edited by users (view, lanes and
items), independent of how it is encoded as JSON. All entities are
immutable; derived documents are built with ``dataclasses.replace``.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from schedule_timeline.domain.enums import TimelineViewMode
from schedule_timeline.shared.utils.generators import generate_cuid


def generate_item_id() -> str:
    """Generate an identifier for items that were supplied without one"""
    return generate_cuid()


@dataclass(frozen=True)
class InvalidInstant:
    """A date value present in the source document that is not ISO-8601"""

    raw: str


@dataclass(frozen=True)
class TimelineRange:
    """Start/end window displayed by the timeline axis"""

    start: datetime | InvalidInstant | None = None
    end: datetime | InvalidInstant | None = None

    @property
    def span(self) -> timedelta | None:
        if not isinstance(self.start, datetime) or not isinstance(self.end, datetime):
            return None
        return self.end - self.start


@dataclass(frozen=True)
class TimelineView:
    """
    Describes how the timeline should be rendered.

    ``mode`` keeps the raw value from the document so that unsupported
    modes can be reported by the validator instead of failing on parse.
    """

    mode: str | None = TimelineViewMode.DAY.value
    range: TimelineRange = field(default_factory=TimelineRange)

    @property
    def view_mode(self) -> TimelineViewMode:
        """Supported view mode, falling back to day granularity"""
        if self.mode == TimelineViewMode.HOUR.value:
            return TimelineViewMode.HOUR
        return TimelineViewMode.DAY


@dataclass(frozen=True)
class TimelineLane:
    """A named horizontal track that items are grouped into"""

    id: str = ""
    label: str = ""
    color: str | None = None


@dataclass(frozen=True)
class TimelineItem:
    """A time-bounded entry placed on exactly one lane"""

    id: str = field(default_factory=generate_item_id)
    lane_id: str = ""
    label: str = ""
    start: datetime | InvalidInstant | None = None
    end: datetime | InvalidInstant | None = None
    duration_days: float | None = None
    status: str | None = None
    description: str | None = None

    @property
    def display_label(self) -> str:
        return self.label or self.id


@dataclass(frozen=True)
class TimelineDocument:
    """
    Root container mirroring the JSON document.

    ``None`` for a section means it was absent from the source document;
    the validator reports it rather than the parser.
    """

    view: TimelineView | None = field(default_factory=TimelineView)
    lanes: tuple[TimelineLane, ...] | None = ()
    items: tuple[TimelineItem, ...] | None = ()
