"""Tests for DefaultDocumentRepository"""

from pathlib import Path

import pytest

from schedule_timeline.infrastructure.documents import \
    DefaultDocumentRepository
from schedule_timeline.infrastructure.exceptions import DocumentLoadError

SHIPPED_DEFAULT = Path(__file__).parents[3] / "data" / "default-schedule.json"


class TestReadText:
    """Tests for reading the default schedule from disk"""

    @pytest.mark.asyncio
    async def test_reads_existing_file(self, default_document_path, scenario_json):
        repo = DefaultDocumentRepository(default_document_path)

        assert await repo.read_text() == scenario_json

    @pytest.mark.asyncio
    async def test_missing_file_returns_none(self, tmp_path):
        """
        GIVEN a path with no file
        WHEN reading the default document
        THEN None is returned instead of raising
        """
        repo = DefaultDocumentRepository(tmp_path / "absent.json")

        assert await repo.read_text() is None

    @pytest.mark.asyncio
    async def test_directory_is_treated_as_missing(self, tmp_path):
        repo = DefaultDocumentRepository(tmp_path)

        assert await repo.read_text() is None

    @pytest.mark.asyncio
    async def test_undecodable_file_raises_load_error(self, tmp_path):
        """
        GIVEN a file that is not valid UTF-8
        WHEN reading the default document
        THEN DocumentLoadError carries the path and reason
        """
        path = tmp_path / "broken.json"
        path.write_bytes(b"\xff\xfe\x00")
        repo = DefaultDocumentRepository(path)

        with pytest.raises(DocumentLoadError) as exc_info:
            await repo.read_text()

        assert exc_info.value.error_code == "DOCUMENT_LOAD_ERROR"
        assert exc_info.value.details["file_path"] == str(path)
        assert exc_info.value.details["reason"]

    def test_location_is_path_string(self, tmp_path):
        repo = DefaultDocumentRepository(str(tmp_path / "x.json"))

        assert repo.location == str(tmp_path / "x.json")


class TestShippedDefault:
    """Tests for the default schedule bundled with the service"""

    @pytest.mark.asyncio
    async def test_shipped_default_is_valid(self, timeline_service):
        default = await timeline_service.load_default(DefaultDocumentRepository(SHIPPED_DEFAULT))

        assert default.errors == ()
        assert '"lanes"' in default.text
