"""Custom exceptions for the database layer."""


class DatabaseError(Exception):
    """Raised when a database operation fails."""
    pass


class DatabaseNotOpenError(DatabaseError):
    """Raised when an operation needs an open database and none is open."""
    pass


class DatabaseFileNotFoundError(DatabaseError):
    """Raised when the database file to open does not exist."""
    pass


class QueryExecutionError(DatabaseError):
    """Raised when a query fails to execute."""
    pass


class SchemaError(DatabaseError):
    """Raised when there is an error reading the database schema."""
    pass
