"""Query playground data models"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class QueryRequest(BaseModel):
    """Request to execute a query"""

    query: str
    schema_name: str | None = None
    schema_setup: str | None = None  # Raw setup script, overrides schema_name


class QueryResult(BaseModel):
    """Columns and rows returned by a successful execution"""

    columns: list[str] = []
    rows: list[list[Any]] = []
    row_count: int = 0  # Rows returned, at most max_rows
    total_rows: int = 0  # Rows the query produced before the cap
    column_count: int = 0
    execution_time_ms: float = 0.0
    truncated: bool = False


class SchemaInfo(BaseModel):
    """A sample schema learners can query"""

    name: str
    description: str
    tables: list[str]
    setup_script: str


class SchemaListResponse(BaseModel):
    """Available sample schemas"""

    schemas: list[SchemaInfo]
    default: str
