from .document_store import DocumentStore
from .query_engine import DocumentQueryEngine, SearchHit
from .dispatcher import RequestDispatcher, ServerIdentity

__all__ = [
    "DocumentStore",
    "DocumentQueryEngine",
    "SearchHit",
    "RequestDispatcher",
    "ServerIdentity",
]
