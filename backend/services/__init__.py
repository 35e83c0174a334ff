"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_generator import DiffGenerator, split_lines
from .query_executor import QueryExecutionCapability, QueryExecutionError, QueryExecutor
from .result_comparator import ComparisonSession, ResultComparator, SessionRegistry
from .schemas import UnknownSchemaError

__all__ = [
    "ConfigManager",
    "DiffGenerator",
    "split_lines",
    "QueryExecutionCapability",
    "QueryExecutionError",
    "QueryExecutor",
    "ComparisonSession",
    "ResultComparator",
    "SessionRegistry",
    "UnknownSchemaError",
]
