"""
Service interfaces (ports) for the application layer.

These protocols define the contracts the timeline use cases need from the
infrastructure layer. Following Dependency Inversion Principle (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from schedule_timeline.domain.entities import TimelineDocument


class IDocumentSerializer(Protocol):
    """Protocol for timeline JSON encoding (DIP)"""

    def deserialize(self, text: str | None) -> TimelineDocument | None:
        """Parse JSON text, returning None when it cannot be parsed"""
        ...

    def serialize(self, document: TimelineDocument) -> str:
        """Encode a document as camelCase JSON"""
        ...


class IDefaultDocumentSource(Protocol):
    """Protocol for the default schedule shown before any edit (DIP)"""

    @property
    def location(self) -> str:
        """Human-readable location used in log messages"""
        ...

    async def read_text(self) -> str | None:
        """Return the default document text, or None when none is configured"""
        ...
