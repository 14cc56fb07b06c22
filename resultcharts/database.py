"""
SQLite database session.

Opens a SQLite file, lists its tables, introspects table schemas and executes
arbitrary SQL, returning untyped result sets for the chart engine.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

from sqlalchemy import create_engine, inspect, text, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.types import NullType

from .charts.models import ResultSet
from .exceptions import (
    DatabaseError, DatabaseFileNotFoundError, DatabaseNotOpenError, QueryExecutionError, SchemaError
)

logger = logging.getLogger(__name__)

LIST_TABLES_SQL = "SELECT name FROM sqlite_master WHERE type='table' ORDER BY name"


def quote_identifier(name: str) -> str:
    """Quote a SQLite identifier so names with spaces, quotes or keywords are safe."""
    escaped = name.replace('"', '""')
    return f'"{escaped}"'


def generate_select_statement(table_name: str, limit: int = 100) -> str:
    """Generate a safe SELECT statement for a table."""
    return f"SELECT * FROM {quote_identifier(table_name)} LIMIT {int(limit)};"


@dataclass
class TableColumn:
    """Column of a table as declared in the schema."""
    name: str
    declared_type: str
    nullable: bool
    is_primary_key: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'declared_type': self.declared_type,
            'nullable': self.nullable,
            'is_primary_key': self.is_primary_key
        }


def _normalize_value(value: Any) -> Any:
    # Blobs and other driver-specific values are handed on as text
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


class SQLiteDatabase:
    """One open SQLite file."""

    def __init__(self):
        self.path: Optional[Path] = None
        self.engine: Optional[Engine] = None

    @property
    def is_open(self) -> bool:
        return self.engine is not None

    def open(self, path: str) -> List[str]:
        """
        Open a SQLite file, replacing any database already open.

        Returns:
            Table names in alphabetical order

        Raises:
            DatabaseFileNotFoundError: If the file does not exist
            DatabaseError: If the file is not a readable SQLite database
        """
        db_path = Path(path).expanduser()
        if not db_path.is_file():
            raise DatabaseFileNotFoundError(f"Database file not found: {db_path}")

        engine = create_engine(f"sqlite:///{db_path}")
        try:
            with engine.connect() as conn:
                tables = list(conn.execute(text(LIST_TABLES_SQL)).scalars())
        except SQLAlchemyError as e:
            engine.dispose()
            logger.error(f"Error opening database {db_path}: {str(e)}")
            raise DatabaseError(f"Failed to open database: {e}")

        self.close()
        self.engine = engine
        self.path = db_path
        logger.info(f"Opened database {db_path} with {len(tables)} tables")
        return tables

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            logger.info(f"Closed database {self.path}")
        self.engine = None
        self.path = None

    def _require_engine(self) -> Engine:
        if self.engine is None:
            raise DatabaseNotOpenError("database not opened")
        return self.engine

    def list_tables(self) -> List[str]:
        engine = self._require_engine()
        try:
            with engine.connect() as conn:
                return list(conn.execute(text(LIST_TABLES_SQL)).scalars())
        except SQLAlchemyError as e:
            raise SchemaError(f"Failed to list tables: {e}")

    def get_table_schema(self, table_name: str) -> List[TableColumn]:
        """
        Return column information for a table.

        Raises:
            SchemaError: If the table does not exist or cannot be inspected
        """
        engine = self._require_engine()
        try:
            inspector = inspect(engine)
            if not inspector.has_table(table_name):
                raise SchemaError(f"Table does not exist: {table_name}")
            columns = inspector.get_columns(table_name)
            primary_key = inspector.get_pk_constraint(table_name).get("constrained_columns") or []
        except SQLAlchemyError as e:
            raise SchemaError(f"failed to get table schema: {e}")

        return [
            TableColumn(
                name=column["name"],
                declared_type="" if isinstance(column["type"], NullType) else str(column["type"]),
                nullable=column.get("nullable", True),
                is_primary_key=column["name"] in primary_key
            )
            for column in columns
        ]

    def execute_query(self, query: str) -> ResultSet:
        """
        Execute a SQL statement and return its rows.

        The statement is passed to the driver untouched. Statements that return
        no rows yield an empty ResultSet.

        Raises:
            QueryExecutionError: If the statement fails
        """
        engine = self._require_engine()
        try:
            with engine.begin() as conn:
                result = conn.exec_driver_sql(query)
                if not result.returns_rows:
                    return ResultSet()
                columns = list(result.keys())
                rows = [[_normalize_value(value) for value in row] for row in result]
        except SQLAlchemyError as e:
            detail = getattr(e, "orig", None) or e
            logger.error(f"Query execution error: {detail}")
            raise QueryExecutionError(f"query execution error: {detail}")

        logger.debug(f"Query returned {len(rows)} rows with {len(columns)} columns")
        return ResultSet(columns=columns, rows=rows)


# Global database session
_database: Optional[SQLiteDatabase] = None


def get_database() -> SQLiteDatabase:
    """Get or create the database session."""
    global _database
    if _database is None:
        _database = SQLiteDatabase()
    return _database


__all__ = [
    'SQLiteDatabase', 'TableColumn', 'get_database', 'quote_identifier', 'generate_select_statement'
]
