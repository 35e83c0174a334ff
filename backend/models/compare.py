"""Result comparison data models"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, model_validator


class ResultMetadata(BaseModel):
    """Execution summary for one side of a comparison"""

    row_count: int
    column_count: int
    execution_time_ms: float


class SideOutcome(BaseModel):
    """Either metadata or an error message for one side, never both"""

    metadata: ResultMetadata | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "SideOutcome":
        if (self.metadata is None) == (self.error is None):
            raise ValueError("SideOutcome requires exactly one of metadata or error")
        return self

    @property
    def ok(self) -> bool:
        return self.metadata is not None


class ComparisonResult(BaseModel):
    """Both sides of a finished comparison, tagged with its generation"""

    generation: int
    left: SideOutcome
    right: SideOutcome


class CompareRequest(BaseModel):
    """Request to compare execution metadata of two queries"""

    left: str
    right: str
    schema_name: str | None = None
    schema_setup: str | None = None


class CompareEvent(BaseModel):
    """SSE stream event"""

    type: Literal["started", "side", "done", "stale", "error"]
    generation: int | None = None
    side: Literal["left", "right"] | None = None
    outcome: SideOutcome | None = None
    result: ComparisonResult | None = None
    error: str | None = None
