from .document_store import DocumentStore, MARKDOWN_SUFFIX

__all__ = [
    "DocumentStore",
    "MARKDOWN_SUFFIX",
]
