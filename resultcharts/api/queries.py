"""
Query API Endpoints

Database session endpoints: open a SQLite file, browse tables and schemas,
and execute SQL with chart analysis of the results.
"""

from typing import Optional, Dict, Any, List
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
import logging

from ..charts.preferences import PreferencesStore
from ..database import SQLiteDatabase, get_database, generate_select_statement
from ..exceptions import DatabaseError
from ..utils.error_handling import handle_error, validate_query
from .charts import build_orchestrator, get_preferences_store

logger = logging.getLogger(__name__)

# Create router for query endpoints
router = APIRouter(prefix="", tags=["queries"])


class OpenDatabaseRequest(BaseModel):
    """Request model for opening a database file."""
    path: str = Field(description="Path to a SQLite database file")


class OpenDatabaseResponse(BaseModel):
    """Response model for opening a database file."""
    path: str
    tables: List[str]


class QueryRequest(BaseModel):
    """Request model for query endpoint."""
    query: str
    analyze: bool = Field(
        default=True,
        description="Whether to analyze the result for charting and auto-configure a chart"
    )


class QueryResponse(BaseModel):
    """Response model for query endpoint."""
    columns: List[str] = Field(default_factory=list, description="Column names in result order")
    rows: List[List[Any]] = Field(default_factory=list, description="Rows aligned positionally to columns")
    analysis: Optional[Dict[str, Any]] = Field(default=None, description="Graphability analysis of the result")
    chart_config: Optional[Dict[str, Any]] = Field(default=None, description="Auto-configured chart, when the result is graphable")


@router.post("/db/open", response_model=OpenDatabaseResponse)
async def open_database(request: OpenDatabaseRequest, database: SQLiteDatabase = Depends(get_database)):
    """Open a SQLite file and list its tables."""
    try:
        tables = database.open(request.path)
    except DatabaseError as e:
        raise handle_error(e)
    return OpenDatabaseResponse(path=str(database.path), tables=tables)


@router.get("/db/tables")
async def list_tables(database: SQLiteDatabase = Depends(get_database)):
    """List the tables of the open database."""
    try:
        return {"tables": database.list_tables()}
    except DatabaseError as e:
        raise handle_error(e)


@router.get("/db/tables/{table_name}/schema")
async def get_table_schema(table_name: str, database: SQLiteDatabase = Depends(get_database)):
    """Get column information for a table."""
    try:
        columns = database.get_table_schema(table_name)
    except DatabaseError as e:
        raise handle_error(e)
    return {"table": table_name, "columns": [column.to_dict() for column in columns]}


@router.get("/db/tables/{table_name}/select")
async def get_select_statement(table_name: str, limit: int = 100):
    """Generate a SELECT statement for browsing a table."""
    return {"query": generate_select_statement(table_name, limit)}


@router.post("/query", response_model=QueryResponse)
async def execute_query(
    request: QueryRequest,
    database: SQLiteDatabase = Depends(get_database),
    preferences: PreferencesStore = Depends(get_preferences_store)
):
    """
    Execute SQL against the open database.

    When analysis is enabled, the result is classified for charting and a
    default chart configuration is returned for graphable results.
    """
    validate_query(request.query)

    try:
        result_set = database.execute_query(request.query)
    except DatabaseError as e:
        logger.error(f"Query endpoint error: {str(e)}")
        raise handle_error(e)

    response = QueryResponse(columns=result_set.columns, rows=result_set.rows)

    if request.analyze:
        orchestrator = build_orchestrator(preferences)
        graphable = orchestrator.load_result_set(result_set)
        response.analysis = graphable.to_dict()
        if graphable.can_graph:
            response.chart_config = orchestrator.chart_config.to_dict()

    return response
