"""
Timeline layout service.

Projects a normalized document onto a horizontal time axis spanning the view
range. Rendering consumers receive, per item, an offset and a width expressed
as percentages of the axis, plus the axis tick labels for the view mode.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from schedule_timeline.domain.entities import (TimelineDocument, TimelineItem,
                                               TimelineLane, TimelineView)
from schedule_timeline.domain.enums import TimelineViewMode
from schedule_timeline.domain.exceptions import ValidationException
from schedule_timeline.shared.telemetry.tracing import traced
from schedule_timeline.shared.utils.datetime import (LATEST_INSTANT, add_days,
                                                     shift, utc_now)
from schedule_timeline.shared.utils.sanitization import slugify_status

logger = logging.getLogger(__name__)

MAX_AXIS_TICKS = 12
MIN_RANGE_SPAN = timedelta(milliseconds=1)
DEFAULT_ITEM_SPAN = timedelta(hours=1)
MIN_WIDTH_FRACTION = 0.01

BASE_TICK_STEPS = {
    TimelineViewMode.HOUR: timedelta(hours=1),
    TimelineViewMode.DAY: timedelta(days=1),
}


@dataclass(frozen=True)
class AxisTick:
    """One labelled position on the time axis"""

    at: datetime
    label: str
    offset_pct: float


@dataclass(frozen=True)
class ItemGeometry:
    """An item placed on the axis with its effective span"""

    item: TimelineItem
    start: datetime
    end: datetime
    offset_pct: float
    width_pct: float
    status_slug: str
    range_label: str
    tooltip: str

    @property
    def status_class(self) -> str:
        return f"status-{self.status_slug}"


@dataclass(frozen=True)
class LaneRow:
    """A lane with its items ordered by effective start"""

    lane: TimelineLane
    items: tuple[ItemGeometry, ...]


@dataclass(frozen=True)
class TimelineLayout:
    """Everything a renderer needs to draw one timeline"""

    view: TimelineView
    range_start: datetime
    range_end: datetime
    range_span: timedelta
    ticks: tuple[AxisTick, ...]
    lanes: tuple[LaneRow, ...]
    rendered_at: datetime


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def format_tick_label(moment: datetime, mode: TimelineViewMode) -> str:
    """Format an instant for the axis: hour+minute or month+day"""
    if mode == TimelineViewMode.HOUR:
        return f"{moment:%H:%M}"
    return f"{moment:%b} {moment.day}"


def format_range(start: datetime, end: datetime, mode: TimelineViewMode) -> str:
    return f"{format_tick_label(start, mode)} → {format_tick_label(end, mode)}"


def build_tooltip(item: TimelineItem, start: datetime, end: datetime) -> str:
    """Multi-line hover text: label, effective span, status and description"""
    lines = [
        item.display_label,
        f"{start:%Y-%m-%d %H:%M} → {end:%Y-%m-%d %H:%M}",
        f"Status: {item.status or 'default'}",
    ]
    if item.description:
        lines.append(item.description)
    return "\n".join(lines)


class LayoutService:
    """
    Axis geometry projection for normalized timeline documents.

    Geometry rules:
    - offset = clamp((start - range.start) / span, 0, 1) * 100
    - width = clamp((end - start) / span, 0.01, 1) * 100, reduced so that
      offset + width never exceeds 100
    - items without an end fall back to durationDays, then to one hour
    """

    @traced("timeline.layout")
    def build_layout(self, document: TimelineDocument) -> TimelineLayout:
        """
        Build the render model for a normalized document.

        Args:
            document: Validated and normalized document

        Returns:
            TimelineLayout with axis ticks and one row per lane
        """
        view = document.view
        if view is None or view.range.start is None or view.range.end is None:
            raise ValidationException("view.range is required for layout", field="view")

        ticks = self.build_axis_ticks(view)
        rows = self.group_by_lane(document)

        logger.debug(
            "Built timeline layout: %d lane(s), %d tick(s)", len(rows), len(ticks)
        )
        return TimelineLayout(
            view=view,
            range_start=view.range.start,
            range_end=view.range.end,
            range_span=self.range_span(view),
            ticks=tuple(ticks),
            lanes=tuple(rows),
            rendered_at=utc_now(),
        )

    @staticmethod
    def range_span(view: TimelineView) -> timedelta:
        """Span of the view range, floored at one millisecond"""
        return max(view.range.end - view.range.start, MIN_RANGE_SPAN)

    def project_item(self, item: TimelineItem, view: TimelineView) -> ItemGeometry:
        """Place a single item on the axis of ``view``"""
        range_start = view.range.start
        span = self.range_span(view)

        start = item.start if item.start is not None else range_start
        end = item.end
        # Spans reaching past the representable range end at its upper bound
        if end is None and item.duration_days is not None:
            end = add_days(start, item.duration_days) or LATEST_INSTANT
        if end is None or end <= start:
            end = shift(start, DEFAULT_ITEM_SPAN) or LATEST_INSTANT

        offset = clamp((start - range_start) / span, 0, 1) * 100
        width = clamp((end - start) / span, MIN_WIDTH_FRACTION, 1) * 100
        width = min(width, 100 - offset)

        return ItemGeometry(
            item=item,
            start=start,
            end=end,
            offset_pct=offset,
            width_pct=width,
            status_slug=slugify_status(item.status),
            range_label=format_range(start, end, view.view_mode),
            tooltip=build_tooltip(item, start, end),
        )

    def group_by_lane(self, document: TimelineDocument) -> list[LaneRow]:
        """
        Bucket projected items per lane in lane declaration order.

        Lane ids match case-insensitively, like validation does. Each bucket
        is stably sorted by effective start.
        """
        lanes = document.lanes or ()
        buckets: dict[str, list[ItemGeometry]] = {}
        for lane in lanes:
            buckets.setdefault(lane.id.casefold(), [])

        for item in document.items or ():
            bucket = buckets.get(item.lane_id.casefold())
            if bucket is None:
                logger.warning("Skipping item %s on unknown lane %s", item.id, item.lane_id)
                continue
            bucket.append(self.project_item(item, document.view))

        rows = []
        seen: set[str] = set()
        for lane in lanes:
            key = lane.id.casefold()
            # Duplicate lane ids are a validation error; keep the first row only
            if key in seen:
                continue
            seen.add(key)
            items = sorted(buckets[key], key=lambda geometry: geometry.start)
            rows.append(LaneRow(lane=lane, items=tuple(items)))
        return rows

    def build_axis_ticks(self, view: TimelineView) -> list[AxisTick]:
        """
        Generate axis ticks from range start to range end inclusive.

        The base step (1 hour or 1 day) is doubled until the tick count fits
        MAX_AXIS_TICKS, so ticks stay aligned to the range start.
        """
        mode = view.view_mode
        start, end = view.range.start, view.range.end
        span = self.range_span(view)

        step = BASE_TICK_STEPS[mode]
        while self.tick_count(start, end, step) > MAX_AXIS_TICKS:
            step *= 2

        ticks = []
        for index in range(self.tick_count(start, end, step)):
            moment = start + step * index
            offset = clamp((moment - start) / span, 0, 1) * 100
            ticks.append(AxisTick(at=moment, label=format_tick_label(moment, mode), offset_pct=offset))
        return ticks

    @staticmethod
    def tick_count(start: datetime, end: datetime, step: timedelta) -> int:
        """Number of ticks emitted between start and end inclusive"""
        if end < start:
            return 0
        return (end - start) // step + 1
