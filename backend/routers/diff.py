"""Query diff and result comparison API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from sse_starlette.sse import EventSourceResponse

from models.compare import CompareEvent, CompareRequest, ComparisonResult
from models.diff import DiffRequest, DiffResponse
from routers.query import get_default_schema, get_executor, resolve_setup_or_404
from services.diff_generator import DiffGenerator
from services.query_executor import QueryExecutor
from services.result_comparator import ResultComparator, SessionRegistry

router = APIRouter()
diff_generator = DiffGenerator()

# In-memory comparison sessions (no persistence)
sessions = SessionRegistry()


@router.post("", response_model=DiffResponse)
async def diff_queries(request: DiffRequest) -> DiffResponse:
    """Line-by-line comparison of two query texts"""
    lines = diff_generator.generate_diff(request.left, request.right)

    return DiffResponse(
        left_label=request.left_label,
        right_label=request.right_label,
        lines=lines,
        statistics=diff_generator.statistics(lines),
        unified=diff_generator.render_unified(lines),
    )


@router.post("/compare")
async def compare_results(
    request: CompareRequest,
    session_id: str = "default",
    executor: QueryExecutor = Depends(get_executor),
    default_schema: str | None = Depends(get_default_schema),
) -> dict[str, Any]:
    """Execute both queries and report row/column counts and timing per side"""
    setup = resolve_setup_or_404(request.schema_name, request.schema_setup, default_schema)
    session = sessions.get(session_id, ResultComparator(executor))

    result = await session.compare(request.left, request.right, setup)
    if result is None:
        return {"stale": True, "generation": session.generation}
    return result.model_dump()


@router.post("/compare/stream")
async def compare_results_stream(
    request: CompareRequest,
    session_id: str = "default",
    executor: QueryExecutor = Depends(get_executor),
    default_schema: str | None = Depends(get_default_schema),
):
    """Execute both queries and stream each side's metadata as it completes (SSE)"""
    setup = resolve_setup_or_404(request.schema_name, request.schema_setup, default_schema)
    session = sessions.get(session_id, ResultComparator(executor))

    async def event_generator():
        try:
            async for event in session.compare_stream(request.left, request.right, setup):
                yield {"event": "message", "data": event.model_dump_json()}
        except Exception as e:
            event = CompareEvent(type="error", error=str(e))
            yield {"event": "message", "data": event.model_dump_json()}

    return EventSourceResponse(event_generator())


@router.get("/compare/{session_id}", response_model=ComparisonResult)
async def latest_comparison(session_id: str) -> ComparisonResult:
    """Get the last applied comparison of a session"""
    session = sessions.find(session_id)
    result = session.latest() if session else None
    if result is None:
        raise HTTPException(status_code=404, detail=f"No comparison for session {session_id}")
    return result


@router.delete("/compare/{session_id}")
async def drop_session(session_id: str) -> dict[str, Any]:
    """Forget a comparison session"""
    return {"dropped": sessions.drop(session_id)}
