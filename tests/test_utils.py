import pytest
from fastapi import HTTPException

from resultcharts.charts import ChartRenderingError
from resultcharts.exceptions import (
    DatabaseError, DatabaseFileNotFoundError, DatabaseNotOpenError, QueryExecutionError, SchemaError
)
from resultcharts.utils import handle_database_error, handle_error, validate_query


def test_database_not_open():
    """Test that a missing database maps to a conflict."""
    error = handle_database_error(DatabaseNotOpenError("database not opened"))
    assert error.status_code == 409
    assert error.detail == "No database is open"


def test_database_file_not_found():
    error = handle_database_error(DatabaseFileNotFoundError("Database file not found: /x.db"))
    assert error.status_code == 404
    assert error.detail == "Database file not found: /x.db"


def test_schema_errors():
    """Test schema error mapping."""
    assert handle_database_error(SchemaError("Table does not exist: t")).status_code == 404
    error = handle_database_error(SchemaError("failed to get table schema: locked"))
    assert error.status_code == 422


@pytest.mark.parametrize("message,detail", [
    ("query execution error: no such table: nope", "Table does not exist"),
    ('query execution error: near "SELEC": syntax error', "Invalid SQL syntax"),
    ("query execution error: database is locked", "query execution error: database is locked"),
])
def test_query_execution_errors(message, detail):
    error = handle_database_error(QueryExecutionError(message))
    assert error.status_code == 422
    assert error.detail == detail


def test_generic_database_error():
    error = handle_database_error(DatabaseError("boom"))
    assert error.status_code == 422
    assert error.detail == "Database error"


def test_handle_error():
    """Test general error mapping."""
    original = HTTPException(status_code=418, detail="teapot")
    assert handle_error(original) is original
    assert handle_error(DatabaseNotOpenError("x")).status_code == 409
    assert handle_error(ChartRenderingError("No data to display")).status_code == 422
    assert handle_error(ValueError("bad")).status_code == 422

    error = handle_error(RuntimeError("crash"))
    assert error.status_code == 500
    assert error.detail == "Unexpected error: crash"


@pytest.mark.parametrize("query", [None, "", "   \n"])
def test_validate_query_rejects_empty(query):
    with pytest.raises(HTTPException) as exc_info:
        validate_query(query)
    assert exc_info.value.status_code == 422
    assert exc_info.value.detail == "Query cannot be empty"


def test_validate_query_accepts_sql():
    validate_query("SELECT 1")
