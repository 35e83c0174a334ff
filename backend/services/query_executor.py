"""
Query Executor Service - Run playground queries against an in-memory SQLite database
"""

from __future__ import annotations

import asyncio
import re
import sqlite3
import time
from typing import Protocol

from models.query import QueryResult


class QueryExecutionError(Exception):
    """A query could not be executed; the message is shown to the learner"""


class QueryExecutionCapability(Protocol):
    """Anything that can execute a query against an optional setup script"""

    async def execute(self, query: str, schema_setup: str | None = None) -> QueryResult: ...


def _friendly_message(error: sqlite3.Error, tables: list[str]) -> str:
    """Rewrite SQLite errors into learner-facing messages"""
    message = str(error)

    table_match = re.search(r"no such table: ([\w.]+)", message)
    if table_match:
        available = ", ".join(tables) if tables else "none"
        return f'Table "{table_match.group(1)}" does not exist. Available tables: {available}.'

    column_match = re.search(r"no such column: ([\w.]+)", message)
    if column_match:
        return (
            f'Column "{column_match.group(1)}" does not exist. '
            "Check your table schema or use the correct table alias."
        )

    if "syntax error" in message:
        return f"SQL syntax error: {message}. Please check your query for typos or missing keywords."

    return message


def _strip_literals(query: str) -> str:
    """Blank out quoted strings and identifiers so their contents are not checked"""
    return re.sub(r"'(?:[^']|'')*'|\"(?:[^\"]|\"\")*\"", "''", query)


def check_query_syntax(query: str):
    """Catch common learner mistakes before handing the query to SQLite"""
    bare = _strip_literals(query)

    open_parens = bare.count("(")
    close_parens = bare.count(")")
    if open_parens != close_parens:
        raise QueryExecutionError(
            f"Unbalanced parentheses: {open_parens} opening, {close_parens} closing. "
            "Check your query syntax."
        )

    if re.search(r"\bSELCT\b", bare, re.IGNORECASE):
        raise QueryExecutionError("Did you mean SELECT? Check spelling.")

    if re.search(r"\bFROM\s+WHERE\b", bare, re.IGNORECASE):
        raise QueryExecutionError("Missing table name between FROM and WHERE.")


def _cell(value):
    # BLOBs are not JSON serializable
    if isinstance(value, bytes):
        return value.hex()
    return value


class QueryExecutor:
    """Execute queries, each in a fresh in-memory database"""

    def __init__(self, max_rows: int = 1000, timeout_ms: int = 5000):
        self.max_rows = max_rows
        self.timeout_ms = timeout_ms

    async def execute(self, query: str, schema_setup: str | None = None) -> QueryResult:
        """Execute a query after running the setup script. Raises QueryExecutionError."""
        if not query or not query.strip():
            raise QueryExecutionError("Query cannot be empty. Please enter a SQL statement.")

        normalized = query.strip()
        if normalized.endswith(";"):
            normalized = normalized[:-1]

        check_query_syntax(normalized)
        return await asyncio.to_thread(self._run, normalized, schema_setup)

    def _run(self, query: str, schema_setup: str | None) -> QueryResult:
        start = time.perf_counter()
        conn = sqlite3.connect(":memory:")
        try:
            if schema_setup:
                try:
                    conn.executescript(schema_setup)
                except sqlite3.Error as e:
                    print(f"[QueryExecutor] Schema setup failed: {e}")
                    raise QueryExecutionError(f"Schema setup failed: {e}") from e

            # SQLite calls the handler every N VM instructions; nonzero aborts
            deadline = time.perf_counter() + self.timeout_ms / 1000
            conn.set_progress_handler(lambda: time.perf_counter() > deadline, 1000)

            try:
                cursor = conn.execute(query)
                rows = cursor.fetchmany(self.max_rows)
                total_rows = len(rows) + sum(1 for _ in cursor)
            except sqlite3.OperationalError as e:
                conn.set_progress_handler(None, 0)
                if "interrupted" in str(e):
                    print(f"[QueryExecutor] Query interrupted after {self.timeout_ms}ms")
                    raise QueryExecutionError(
                        f"Query timed out after {self.timeout_ms} ms. "
                        "Check for unbounded recursion or very large joins."
                    ) from e
                raise QueryExecutionError(_friendly_message(e, self._table_names(conn))) from e
            except sqlite3.Error as e:
                conn.set_progress_handler(None, 0)
                raise QueryExecutionError(_friendly_message(e, self._table_names(conn))) from e

            columns = [col[0] for col in cursor.description] if cursor.description else []
            rows = [[_cell(value) for value in row] for row in rows]

            return QueryResult(
                columns=columns,
                rows=rows,
                row_count=len(rows),
                total_rows=total_rows,
                column_count=len(columns),
                execution_time_ms=(time.perf_counter() - start) * 1000,
                truncated=total_rows > len(rows),
            )
        finally:
            conn.close()

    def _table_names(self, conn: sqlite3.Connection) -> list[str]:
        cursor = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name")
        return [row[0] for row in cursor.fetchall()]
