import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from resultcharts.api.charts import get_preferences_store
from resultcharts.charts import ChartSettings, InMemoryPreferencesStore, ResultSet
from resultcharts.database import SQLiteDatabase, get_database
from resultcharts.server import app


@pytest.fixture
def settings():
    return ChartSettings()


@pytest.fixture
def sales_records():
    """Small category/value result set."""
    return [
        {"region": "North", "revenue": 120, "orders": 10},
        {"region": "South", "revenue": 80, "orders": 7},
        {"region": "East", "revenue": 95, "orders": 9},
        {"region": "West", "revenue": 60, "orders": 4},
    ]


@pytest.fixture
def sales_result_set():
    return ResultSet(
        columns=["region", "revenue", "orders"],
        rows=[
            ["North", 120, 10],
            ["South", 80, 7],
            ["East", 95, 9],
            ["West", 60, 4],
        ]
    )


@pytest.fixture
def preferences():
    return InMemoryPreferencesStore()


@pytest.fixture
def sqlite_path(tmp_path):
    """A SQLite file with a couple of tables."""
    path = tmp_path / "shop.db"
    engine = create_engine(f"sqlite:///{path}")
    with engine.begin() as conn:
        conn.exec_driver_sql(
            "CREATE TABLE sales (id INTEGER PRIMARY KEY, region TEXT NOT NULL, amount REAL, note)"
        )
        conn.exec_driver_sql("CREATE TABLE \"order items\" (sku TEXT, qty INTEGER)")
        conn.exec_driver_sql(
            "INSERT INTO sales (region, amount, note) VALUES "
            "('North', 10.5, NULL), ('South', 20, 'late'), ('North', 4.5, X'6869')"
        )
    engine.dispose()
    return path


@pytest.fixture
def database():
    db = SQLiteDatabase()
    yield db
    db.close()


@pytest.fixture
def client(database, preferences):
    """Test client with an isolated database session and preferences store."""
    app.dependency_overrides[get_database] = lambda: database
    app.dependency_overrides[get_preferences_store] = lambda: preferences
    yield TestClient(app)
    app.dependency_overrides = {}
