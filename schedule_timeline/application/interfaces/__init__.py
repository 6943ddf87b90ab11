"""
Application layer interfaces (ports).

These protocols define the contracts between the application layer
and the infrastructure layer, following the Dependency Inversion Principle.
"""

from schedule_timeline.application.interfaces.services import (
    IDefaultDocumentSource, IDocumentSerializer)

__all__ = [
    "IDocumentSerializer",
    "IDefaultDocumentSource",
]
