from fastapi import HTTPException
from typing import Optional

from ..charts.exceptions import ChartGenerationError
from ..exceptions import (
    DatabaseError, DatabaseFileNotFoundError, DatabaseNotOpenError, QueryExecutionError, SchemaError
)


def handle_database_error(error: Exception) -> HTTPException:
    """Handle database-related errors and return appropriate HTTP exceptions."""
    error_msg = str(error).lower()

    if isinstance(error, DatabaseNotOpenError):
        return HTTPException(
            status_code=409,
            detail="No database is open"
        )
    elif isinstance(error, DatabaseFileNotFoundError):
        return HTTPException(
            status_code=404,
            detail=str(error)
        )
    elif isinstance(error, SchemaError):
        if "does not exist" in error_msg:
            return HTTPException(
                status_code=404,
                detail="Table does not exist"
            )
        return HTTPException(
            status_code=422,
            detail=str(error)
        )
    elif isinstance(error, QueryExecutionError):
        if "no such table" in error_msg:
            return HTTPException(
                status_code=422,
                detail="Table does not exist"
            )
        elif "syntax error" in error_msg:
            return HTTPException(
                status_code=422,
                detail="Invalid SQL syntax"
            )
        return HTTPException(
            status_code=422,
            detail=str(error)
        )
    else:
        return HTTPException(
            status_code=422,
            detail="Database error"
        )


def handle_error(error: Exception) -> HTTPException:
    """Handle general application errors and return appropriate HTTP exceptions."""
    if isinstance(error, HTTPException):
        return error
    elif isinstance(error, DatabaseError):
        return handle_database_error(error)
    elif isinstance(error, ChartGenerationError):
        return HTTPException(
            status_code=422,
            detail=str(error)
        )
    elif isinstance(error, ValueError):
        return HTTPException(
            status_code=422,
            detail=str(error)
        )
    else:
        return HTTPException(
            status_code=500,
            detail=f"Unexpected error: {str(error)}"
        )


def validate_query(query: Optional[str]) -> None:
    """Validate the query string."""
    if not query or not isinstance(query, str) or not query.strip():
        raise HTTPException(
            status_code=422,
            detail="Query cannot be empty"
        )
