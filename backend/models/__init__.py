"""Models module - Pydantic data models"""

from .compare import CompareEvent, CompareRequest, ComparisonResult, ResultMetadata, SideOutcome
from .diff import DiffKind, DiffLine, DiffRequest, DiffResponse, DiffStatistics
from .query import QueryRequest, QueryResult, SchemaInfo, SchemaListResponse

__all__ = [
    # Diff models
    "DiffKind",
    "DiffLine",
    "DiffRequest",
    "DiffResponse",
    "DiffStatistics",
    # Query models
    "QueryRequest",
    "QueryResult",
    "SchemaInfo",
    "SchemaListResponse",
    # Comparison models
    "CompareEvent",
    "CompareRequest",
    "ComparisonResult",
    "ResultMetadata",
    "SideOutcome",
]
