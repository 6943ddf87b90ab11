"""Shared test fixtures for pytest"""
import json
from datetime import UTC, datetime, timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from main import app
from schedule_timeline.application.services import (LayoutService,
                                                    NormalizationService,
                                                    ValidationService)
from schedule_timeline.application.use_cases import TimelineDocumentService
from schedule_timeline.domain.entities import (TimelineDocument, TimelineItem,
                                               TimelineLane, TimelineRange,
                                               TimelineView)
from schedule_timeline.infrastructure.documents import \
    DefaultDocumentRepository
from schedule_timeline.infrastructure.serialization import DocumentSerializer
from schedule_timeline.presentation.api.dependencies import \
    get_default_document_repo

RANGE_START = datetime(2024, 1, 1, tzinfo=UTC)
RANGE_END = datetime(2024, 1, 11, tzinfo=UTC)


def day(n: float) -> datetime:
    """Instant ``n`` days after the default range start"""
    return RANGE_START + timedelta(days=n)


def make_document(
    items: list[TimelineItem] | None = None,
    lanes: list[TimelineLane] | None = None,
    mode: str = "day",
    start: datetime | None = RANGE_START,
    end: datetime | None = RANGE_END,
) -> TimelineDocument:
    """Build a document with one "eng" lane unless lanes are given"""
    return TimelineDocument(
        view=TimelineView(mode=mode, range=TimelineRange(start=start, end=end)),
        lanes=tuple(lanes if lanes is not None else [TimelineLane(id="eng", label="Engineering")]),
        items=tuple(items or []),
    )


@pytest.fixture
def document_factory():
    """Builder for in-memory documents, see make_document"""
    return make_document


@pytest.fixture
def at():
    """Instant n days after the range start, see day"""
    return day


@pytest.fixture
def validation_service() -> ValidationService:
    return ValidationService()


@pytest.fixture
def normalization_service() -> NormalizationService:
    return NormalizationService()


@pytest.fixture
def layout_service() -> LayoutService:
    return LayoutService()


@pytest.fixture
def serializer() -> DocumentSerializer:
    return DocumentSerializer()


@pytest.fixture
def timeline_service(
    serializer, validation_service, normalization_service, layout_service
) -> TimelineDocumentService:
    return TimelineDocumentService(
        serializer=serializer,
        validation_service=validation_service,
        normalization_service=normalization_service,
        layout_service=layout_service,
    )


@pytest.fixture
def scenario_document() -> dict:
    """Ten-day range with one lane and one duration-only item"""
    return {
        "view": {
            "mode": "day",
            "range": {"start": "2024-01-01T00:00:00Z", "end": "2024-01-11T00:00:00Z"},
        },
        "lanes": [{"id": "eng", "label": "Engineering"}],
        "items": [
            {
                "id": "build",
                "laneId": "eng",
                "label": "Build",
                "start": "2024-01-02T00:00:00Z",
                "durationDays": 3,
            }
        ],
    }


@pytest.fixture
def scenario_json(scenario_document) -> str:
    return json.dumps(scenario_document)


@pytest.fixture
def default_document_path(tmp_path, scenario_json):
    """Default schedule written to a temporary directory"""
    path = tmp_path / "default-schedule.json"
    path.write_text(scenario_json, encoding="utf-8")
    return path


@pytest.fixture
async def client(default_document_path):
    """HTTP client for API testing"""

    def override_default_document_repo():
        return DefaultDocumentRepository(default_document_path)

    app.dependency_overrides[get_default_document_repo] = override_default_document_repo

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
