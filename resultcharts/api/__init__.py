"""
API Package - FastAPI Route Modules

Organized API endpoints for the result browser backend.
Separates database session endpoints from chart endpoints.
"""

from .queries import router as queries_router
from .charts import router as charts_router

__all__ = ['charts_router', 'queries_router']
