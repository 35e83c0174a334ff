"""Query playground API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from models.query import QueryRequest, QueryResult
from services.config_manager import ConfigManager
from services.query_executor import QueryExecutionError, QueryExecutor
from services.schemas import UnknownSchemaError, resolve_setup

router = APIRouter()


def get_executor() -> QueryExecutor:
    """Build an executor from the current configuration"""
    config = ConfigManager.get_instance().get_config()
    query_config = config.get("query", {})
    return QueryExecutor(
        max_rows=query_config.get("maxRows", 1000),
        timeout_ms=query_config.get("timeoutMs", 5000),
    )


def get_default_schema() -> str | None:
    config = ConfigManager.get_instance().get_config()
    return config.get("query", {}).get("defaultSchema")


def resolve_setup_or_404(
    schema_name: str | None,
    schema_setup: str | None,
    default_schema: str | None,
) -> str | None:
    """Resolve the setup script, mapping unknown schema names to 404"""
    try:
        return resolve_setup(schema_name, schema_setup, default_schema)
    except UnknownSchemaError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/execute", response_model=QueryResult)
async def execute_query(
    request: QueryRequest,
    executor: QueryExecutor = Depends(get_executor),
    default_schema: str | None = Depends(get_default_schema),
) -> QueryResult:
    """Execute a query against a fresh copy of the selected schema"""
    setup = resolve_setup_or_404(request.schema_name, request.schema_setup, default_schema)

    try:
        return await executor.execute(request.query, setup)
    except QueryExecutionError as e:
        raise HTTPException(status_code=400, detail=str(e))
