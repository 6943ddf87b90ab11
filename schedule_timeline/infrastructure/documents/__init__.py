from schedule_timeline.infrastructure.documents.default_document_repo import \
    DefaultDocumentRepository

__all__ = ["DefaultDocumentRepository"]
