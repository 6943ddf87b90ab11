"""
Infrastructure exceptions for the Schedule Timeline application.

This module defines infrastructure-level exceptions related to reading
timeline documents from storage.
"""

from schedule_timeline.domain.exceptions import TimelineException


class DocumentLoadError(TimelineException):
    """Reading a stored timeline document failed."""

    def __init__(self, file_path: str, reason: str):
        super().__init__(
            f"Failed to load timeline document: {file_path}",
            "DOCUMENT_LOAD_ERROR",
            {"file_path": file_path, "reason": reason},
        )
