"""
Result Comparator Service - Side-by-side execution metadata for two queries
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import AsyncIterator

from models.compare import CompareEvent, ComparisonResult, ResultMetadata, SideOutcome
from services.query_executor import QueryExecutionCapability, QueryExecutionError


class ResultComparator:
    """Execute two queries and summarize each side independently"""

    def __init__(self, executor: QueryExecutionCapability):
        self.executor = executor

    async def run_side(self, query: str, schema_setup: str | None = None) -> SideOutcome:
        """Execute one side, turning any failure into an error marker"""
        start = time.perf_counter()
        try:
            result = await self.executor.execute(query, schema_setup)
        except QueryExecutionError as e:
            return SideOutcome(error=str(e))
        except Exception as e:
            print(f"[Comparator] Unexpected execution failure: {e}")
            return SideOutcome(error=f"Query execution failed: {e}")
        elapsed_ms = (time.perf_counter() - start) * 1000

        return SideOutcome(
            metadata=ResultMetadata(
                row_count=max(result.total_rows, len(result.rows)),
                column_count=len(result.columns),
                execution_time_ms=round(elapsed_ms, 3),
            )
        )

    async def compare(
        self,
        left_query: str,
        right_query: str,
        schema_setup: str | None = None,
    ) -> tuple[SideOutcome, SideOutcome]:
        """Run both sides concurrently; one side failing never hides the other"""
        left, right = await asyncio.gather(
            self.run_side(left_query, schema_setup),
            self.run_side(right_query, schema_setup),
        )
        return left, right


class ComparisonSession:
    """Owns the left/right result slots for one client.

    Every comparison is tagged with a generation number when it starts. Only
    the comparison holding the latest tag may write the slots; anything that
    finishes after being superseded is dropped.
    """

    def __init__(self, comparator: ResultComparator):
        self.comparator = comparator
        self.generation = 0
        self.left: SideOutcome | None = None
        self.right: SideOutcome | None = None
        self._applied_generation: int | None = None

    def _next_generation(self) -> int:
        self.generation += 1
        return self.generation

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    def latest(self) -> ComparisonResult | None:
        """Last applied comparison, if any"""
        if self._applied_generation is None or self.left is None or self.right is None:
            return None
        return ComparisonResult(generation=self._applied_generation, left=self.left, right=self.right)

    def _apply(self, generation: int, left: SideOutcome, right: SideOutcome) -> ComparisonResult:
        self.left = left
        self.right = right
        self._applied_generation = generation
        return ComparisonResult(generation=generation, left=left, right=right)

    async def compare(
        self,
        left_query: str,
        right_query: str,
        schema_setup: str | None = None,
    ) -> ComparisonResult | None:
        """Run a comparison. Returns None if a newer one was issued meanwhile."""
        generation = self._next_generation()
        left, right = await self.comparator.compare(left_query, right_query, schema_setup)

        if not self.is_current(generation):
            print(f"[Comparator] Discarding stale comparison #{generation} (latest is #{self.generation})")
            return None
        return self._apply(generation, left, right)

    async def compare_stream(
        self,
        left_query: str,
        right_query: str,
        schema_setup: str | None = None,
    ) -> AsyncIterator[CompareEvent]:
        """Like compare(), but yields each side as soon as it finishes"""
        generation = self._next_generation()
        yield CompareEvent(type="started", generation=generation)

        async def _tagged(side: str, query: str) -> tuple[str, SideOutcome]:
            return side, await self.comparator.run_side(query, schema_setup)

        outcomes: dict[str, SideOutcome] = {}
        tasks = [
            asyncio.create_task(_tagged("left", left_query)),
            asyncio.create_task(_tagged("right", right_query)),
        ]
        try:
            for next_done in asyncio.as_completed(tasks):
                side, outcome = await next_done
                outcomes[side] = outcome
                if not self.is_current(generation):
                    break
                yield CompareEvent(type="side", generation=generation, side=side, outcome=outcome)
        finally:
            for task in tasks:
                task.cancel()

        if not self.is_current(generation) or len(outcomes) < 2:
            yield CompareEvent(type="stale", generation=generation)
            return

        result = self._apply(generation, outcomes["left"], outcomes["right"])
        yield CompareEvent(type="done", generation=generation, result=result)


class SessionRegistry:
    """In-process comparison sessions keyed by client session id"""

    def __init__(self):
        self._sessions: dict[str, ComparisonSession] = {}

    def get(self, session_id: str, comparator: ResultComparator) -> ComparisonSession:
        """Get or create a session; the comparator is refreshed on every lookup"""
        session = self._sessions.get(session_id)
        if session is None:
            session = ComparisonSession(comparator)
            self._sessions[session_id] = session
        else:
            session.comparator = comparator
        return session

    def find(self, session_id: str) -> ComparisonSession | None:
        return self._sessions.get(session_id)

    def drop(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)
