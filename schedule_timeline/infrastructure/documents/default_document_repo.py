"""
Default timeline document repository.

Reads the schedule shown before any edit from the local filesystem.
"""

import logging
from pathlib import Path

import aiofiles
import aiofiles.os

from schedule_timeline.infrastructure.exceptions import DocumentLoadError

logger = logging.getLogger(__name__)


class DefaultDocumentRepository:
    """
    Filesystem-backed source for the default schedule JSON.

    A missing file is not an error: callers fall back to an empty document.
    """

    def __init__(self, document_path: str | Path, encoding: str = "utf-8") -> None:
        self.document_path = Path(document_path)
        self.encoding = encoding

    @property
    def location(self) -> str:
        return str(self.document_path)

    async def read_text(self) -> str | None:
        """
        Read the default document text.

        Returns:
            File contents, or None when the file does not exist

        Raises:
            DocumentLoadError: If the file exists but cannot be read
        """
        if not await aiofiles.os.path.isfile(self.document_path):
            logger.warning("Timeline document not found at %s", self.document_path)
            return None

        try:
            async with aiofiles.open(self.document_path, "r", encoding=self.encoding) as f:
                return await f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentLoadError(str(self.document_path), str(e)) from e
