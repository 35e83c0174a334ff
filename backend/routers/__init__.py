"""Routers module - FastAPI route handlers"""

from . import config, diff, query, schemas

__all__ = ["config", "diff", "query", "schemas"]
