from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from schedule_timeline.application.services.layout_service import (
    AxisTick, ItemGeometry, LaneRow, TimelineLayout)
from schedule_timeline.application.services.validation_service import \
    ValidationResult
from schedule_timeline.application.use_cases import DefaultDocument


class CamelResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ValidationResponse(CamelResponse):
    is_valid: bool
    errors: list[str]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "isValid": False,
                "errors": ["lanes must include at least one entry."],
            }
        },
    )

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationResponse":
        return cls(is_valid=result.is_valid, errors=list(result.errors))


class AxisTickResponse(CamelResponse):
    at: datetime
    label: str
    offset_pct: float

    @classmethod
    def from_tick(cls, tick: AxisTick) -> "AxisTickResponse":
        return cls(at=tick.at, label=tick.label, offset_pct=tick.offset_pct)


class ItemGeometryResponse(CamelResponse):
    id: str
    lane_id: str
    label: str
    start: datetime
    end: datetime
    offset_pct: float
    width_pct: float
    status: str | None = None
    status_class: str
    description: str | None = None
    range_label: str
    tooltip: str

    @classmethod
    def from_geometry(cls, geometry: ItemGeometry) -> "ItemGeometryResponse":
        item = geometry.item
        return cls(
            id=item.id,
            lane_id=item.lane_id,
            label=item.display_label,
            start=geometry.start,
            end=geometry.end,
            offset_pct=geometry.offset_pct,
            width_pct=geometry.width_pct,
            status=item.status,
            status_class=geometry.status_class,
            description=item.description,
            range_label=geometry.range_label,
            tooltip=geometry.tooltip,
        )


class LaneRowResponse(CamelResponse):
    id: str
    label: str
    color: str | None = None
    items: list[ItemGeometryResponse]

    @classmethod
    def from_row(cls, row: LaneRow) -> "LaneRowResponse":
        return cls(
            id=row.lane.id,
            label=row.lane.label or row.lane.id,
            color=row.lane.color,
            items=[ItemGeometryResponse.from_geometry(item) for item in row.items],
        )


class LayoutResponse(CamelResponse):
    mode: str
    range_start: datetime
    range_end: datetime
    ticks: list[AxisTickResponse]
    lanes: list[LaneRowResponse]
    rendered_at: datetime

    @classmethod
    def from_layout(cls, layout: TimelineLayout) -> "LayoutResponse":
        return cls(
            mode=layout.view.view_mode.value,
            range_start=layout.range_start,
            range_end=layout.range_end,
            ticks=[AxisTickResponse.from_tick(tick) for tick in layout.ticks],
            lanes=[LaneRowResponse.from_row(row) for row in layout.lanes],
            rendered_at=layout.rendered_at,
        )


class DefaultDocumentResponse(CamelResponse):
    document: str
    is_valid: bool
    errors: list[str]

    @classmethod
    def from_default(cls, default: DefaultDocument) -> "DefaultDocumentResponse":
        return cls(
            document=default.text,
            is_valid=not default.errors,
            errors=list(default.errors),
        )
