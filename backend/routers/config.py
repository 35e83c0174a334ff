"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict

from services.config_manager import ConfigManager
from services.schemas import SCHEMAS

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration.

    CORS origins are applied when the app starts, so they are only editable
    in the config file, not through this endpoint.
    """

    model_config = ConfigDict(extra="forbid")

    server: dict | None = None
    query: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    server: dict
    query: dict
    cors: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        server=config.get("server", {}),
        query=config.get("query", {}),
        cors=config.get("cors", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    if request.query:
        for key in ("maxRows", "timeoutMs"):
            value = request.query.get(key)
            if value is not None and (not isinstance(value, int) or value < 1):
                raise HTTPException(status_code=400, detail=f"query.{key} must be a positive integer")
        default_schema = request.query.get("defaultSchema")
        if default_schema is not None and default_schema not in SCHEMAS:
            raise HTTPException(status_code=400, detail=f"Unknown schema: {default_schema}")

    # Update only provided fields
    if request.server:
        current_config["server"] = {**current_config.get("server", {}), **request.server}
    if request.query:
        current_config["query"] = {**current_config.get("query", {}), **request.query}

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {"status": "success", "message": "Configuration updated"}
