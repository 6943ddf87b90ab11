"""
Application layer - Application Business Rules.

This layer contains the timeline pipeline rules, including:
- Interfaces (ports) for infrastructure dependencies
- Services for validation, normalization and axis layout
- Use cases that orchestrate the pipeline over raw JSON text
"""

from schedule_timeline.application.interfaces import (IDefaultDocumentSource,
                                                      IDocumentSerializer)
from schedule_timeline.application.services import (LayoutService,
                                                    NormalizationService,
                                                    TimelineLayout,
                                                    ValidationResult,
                                                    ValidationService)
from schedule_timeline.application.use_cases import (DefaultDocument,
                                                     TimelineDocumentService)

__all__ = [
    # Interfaces
    "IDocumentSerializer",
    "IDefaultDocumentSource",
    # Services
    "ValidationService",
    "ValidationResult",
    "NormalizationService",
    "LayoutService",
    "TimelineLayout",
    # Use Cases
    "TimelineDocumentService",
    "DefaultDocument",
]
