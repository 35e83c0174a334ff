import asyncio
import re

import pytest

from services.query_executor import QueryExecutionError, QueryExecutor, check_query_syntax
from services.schemas import UnknownSchemaError, get_schema, list_schemas, resolve_setup

EMPLOYEES = get_schema("employees").setup_script


def run(coro):
    return asyncio.run(coro)


def test_select_returns_columns_and_rows():
    result = run(QueryExecutor().execute("SELECT id, name FROM departments ORDER BY id", EMPLOYEES))

    assert result.columns == ["id", "name"]
    assert result.rows[0] == [1, "Engineering"]
    assert result.row_count == 5
    assert result.column_count == 2
    assert result.truncated is False
    assert result.execution_time_ms >= 0


def test_trailing_semicolon_is_ignored():
    result = run(QueryExecutor().execute("SELECT COUNT(*) AS n FROM employees;", EMPLOYEES))
    assert result.rows == [[5]]


def test_without_setup_script():
    result = run(QueryExecutor().execute("SELECT 1 + 1 AS two"))
    assert result.columns == ["two"]
    assert result.rows == [[2]]


@pytest.mark.parametrize("query", ["", "   ", "\n\t"])
def test_empty_query_rejected(query):
    with pytest.raises(QueryExecutionError, match="Query cannot be empty"):
        run(QueryExecutor().execute(query, EMPLOYEES))


def test_missing_table_lists_available_tables():
    with pytest.raises(QueryExecutionError) as excinfo:
        run(QueryExecutor().execute("SELECT * FROM staff", EMPLOYEES))

    message = str(excinfo.value)
    assert 'Table "staff" does not exist' in message
    assert "departments, employees" in message


def test_missing_column_message():
    with pytest.raises(QueryExecutionError, match='Column "wage" does not exist'):
        run(QueryExecutor().execute("SELECT wage FROM employees", EMPLOYEES))


def test_syntax_error_message():
    with pytest.raises(QueryExecutionError, match="SQL syntax error"):
        run(QueryExecutor().execute("SELEC name FROM employees", EMPLOYEES))


def test_broken_setup_script():
    with pytest.raises(QueryExecutionError, match="Schema setup failed"):
        run(QueryExecutor().execute("SELECT 1", "CREATE TABLE ("))


def test_rows_capped_at_max_rows():
    result = run(QueryExecutor(max_rows=2).execute("SELECT id FROM employees ORDER BY id", EMPLOYEES))
    assert result.rows == [[1], [2]]
    assert result.row_count == 2
    assert result.total_rows == 5
    assert result.truncated is True


def test_statement_without_result_set():
    result = run(QueryExecutor().execute("DELETE FROM employees WHERE id = 1", EMPLOYEES))
    assert result.columns == []
    assert result.rows == []


def test_each_execution_starts_fresh():
    executor = QueryExecutor()
    run(executor.execute("DELETE FROM employees", EMPLOYEES))
    result = run(executor.execute("SELECT COUNT(*) FROM employees", EMPLOYEES))
    assert result.rows == [[5]]


def test_sample_schemas_load():
    executor = QueryExecutor()
    for schema in list_schemas():
        for table in schema.tables:
            result = run(executor.execute(f"SELECT COUNT(*) FROM {table}", schema.setup_script))
            assert result.rows[0][0] > 0


def test_resolve_setup_precedence():
    assert resolve_setup(None, "CREATE TABLE t (x)") == "CREATE TABLE t (x)"
    assert resolve_setup("orders", None) == get_schema("orders").setup_script
    assert resolve_setup(None, None, "students") == get_schema("students").setup_script
    assert resolve_setup(None, None) is None


def test_unknown_schema():
    with pytest.raises(UnknownSchemaError, match='Schema "nope" not found'):
        resolve_setup("nope", None)


def test_full_result_is_not_truncated():
    result = run(QueryExecutor(max_rows=5).execute("SELECT id FROM employees", EMPLOYEES))
    assert result.total_rows == 5
    assert result.truncated is False


def test_blob_values_are_hex_encoded():
    result = run(QueryExecutor().execute("SELECT x'ff00' AS b, 'text' AS t"))
    assert result.rows == [["ff00", "text"]]


def test_runaway_query_times_out():
    runaway = "WITH RECURSIVE c(x) AS (SELECT 1 UNION ALL SELECT x + 1 FROM c) SELECT COUNT(*) FROM c"
    with pytest.raises(QueryExecutionError, match="Query timed out after 50 ms"):
        run(QueryExecutor(timeout_ms=50).execute(runaway))


def test_executor_usable_after_timeout():
    executor = QueryExecutor(timeout_ms=50)
    with pytest.raises(QueryExecutionError, match="timed out"):
        run(executor.execute("WITH RECURSIVE c(x) AS (SELECT 1 UNION ALL SELECT x FROM c) SELECT MAX(x) FROM c"))
    assert run(executor.execute("SELECT 1")).rows == [[1]]


@pytest.mark.parametrize(
    "query, message",
    [
        ("SELECT COUNT(id FROM employees", "Unbalanced parentheses: 1 opening, 0 closing"),
        ("SELECT MAX(salary)) FROM employees", "Unbalanced parentheses: 1 opening, 2 closing"),
        ("SELCT name FROM employees", "Did you mean SELECT?"),
        ("SELECT name FROM WHERE salary > 1", "Missing table name between FROM and WHERE"),
    ],
)
def test_learner_mistakes_get_hints(query, message):
    with pytest.raises(QueryExecutionError, match=re.escape(message)):
        check_query_syntax(query)
    with pytest.raises(QueryExecutionError, match=re.escape(message)):
        run(QueryExecutor().execute(query, EMPLOYEES))


def test_parentheses_inside_literals_are_ignored():
    check_query_syntax("SELECT name FROM employees WHERE name = 'Alice ('")
    result = run(QueryExecutor().execute("SELECT ':-(' AS face"))
    assert result.rows == [[":-("]]
