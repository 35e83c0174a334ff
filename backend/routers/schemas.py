"""Sample schema API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from models.query import SchemaInfo, SchemaListResponse
from routers.query import get_default_schema
from services.schemas import UnknownSchemaError, get_schema, list_schemas

router = APIRouter()


@router.get("", response_model=SchemaListResponse)
async def get_schemas(default_schema: str | None = Depends(get_default_schema)) -> SchemaListResponse:
    """List available sample schemas"""
    return SchemaListResponse(schemas=list_schemas(), default=default_schema or "")


@router.get("/{name}", response_model=SchemaInfo)
async def get_schema_by_name(name: str) -> SchemaInfo:
    """Get one sample schema with its setup script"""
    try:
        return get_schema(name)
    except UnknownSchemaError as e:
        raise HTTPException(status_code=404, detail=str(e))
