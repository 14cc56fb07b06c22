"""
Chart API Endpoints

Chart analysis, configuration, validation, transformation and rendering over
result sets posted by the client. Every request is analyzed from scratch.
"""

from typing import List, Any, Optional
from fastapi import APIRouter, HTTPException, status, Depends
from pydantic import BaseModel, Field
import logging

from ..charts import (
    ChartOrchestrator, ChartConfig, ChartConfigValidator, ChartType, ChartSettings, ResultSet,
    InMemoryPreferencesStore, JSONFilePreferencesStore
)
from ..charts.preferences import (
    PreferencesStore, VIEW_MODES, load_chart_preferences, save_chart_preferences,
    load_view_mode, save_view_mode
)
from ..config import get_config
from ..utils.error_handling import handle_error

logger = logging.getLogger(__name__)

# Create router for chart endpoints
router = APIRouter(prefix="/charts", tags=["charts"])

# Global preferences store
_preferences_store: Optional[PreferencesStore] = None


def get_preferences_store() -> PreferencesStore:
    """Get or create the preferences store."""
    global _preferences_store
    if _preferences_store is None:
        _preferences_store = JSONFilePreferencesStore(get_config().PREFERENCES_PATH)
    return _preferences_store


def build_orchestrator(preferences: PreferencesStore) -> ChartOrchestrator:
    """Create a fresh orchestrator for one request."""
    settings = ChartSettings()
    settings.max_chart_points = get_config().MAX_CHART_POINTS
    return ChartOrchestrator(settings, preferences)


# Request/Response models specific to chart endpoints
class ResultSetPayload(BaseModel):
    """Columns and positional rows of a query result."""
    columns: List[str] = Field(default_factory=list, description="Column names in display order")
    rows: List[List[Any]] = Field(default_factory=list, description="Rows aligned positionally to columns")

    def to_result_set(self) -> ResultSet:
        return ResultSet(columns=list(self.columns), rows=[list(row) for row in self.rows])


class ChartConfigPayload(BaseModel):
    """Chart configuration as edited by the user."""
    chart_type: ChartType = Field(default=ChartType.BAR, description="bar, line, pie, area or scatter")
    x_axis: str = Field(default="", description="X-axis column")
    y_axis: List[str] = Field(default_factory=list, description="Y-axis columns")
    show_legend: bool = True
    show_grid: bool = True
    group_by: Optional[str] = None

    def to_config(self) -> ChartConfig:
        return ChartConfig(
            chart_type=self.chart_type,
            x_axis=self.x_axis,
            y_axis=list(self.y_axis),
            show_legend=self.show_legend,
            show_grid=self.show_grid,
            group_by=self.group_by
        )


class ChartValidationRequest(ResultSetPayload):
    """Request model for axis validation."""
    x_axis: Optional[str] = None
    y_axis: Optional[List[str]] = None


class ChartRenderRequest(ResultSetPayload):
    """Request model for transformation and rendering."""
    config: Optional[ChartConfigPayload] = Field(default=None, description="Chart configuration; auto-configured when omitted")
    max_points: Optional[int] = Field(default=None, ge=1, description="Maximum number of chart points")


class ChartValidationResponse(BaseModel):
    """Response model for axis validation."""
    valid: bool
    error: Optional[str] = None


class ChartPreferencesPayload(BaseModel):
    """Persisted chart preferences. Axis bindings are not persisted."""
    chart_type: ChartType = ChartType.BAR
    show_legend: bool = True
    show_grid: bool = True
    view_mode: str = "table"


def _load(request: ResultSetPayload, preferences: PreferencesStore) -> ChartOrchestrator:
    orchestrator = build_orchestrator(preferences)
    orchestrator.load_result_set(request.to_result_set())
    return orchestrator


@router.post("/analyze")
async def analyze_result_set(request: ResultSetPayload, preferences: PreferencesStore = Depends(get_preferences_store)):
    """
    Analyze a result set for chart potential.

    Returns graphability, numeric and categorical columns, the recommended
    chart type and the per-column analyses.
    """
    try:
        orchestrator = _load(request, preferences)
        return orchestrator.graphable.to_dict()
    except Exception as e:
        logger.error(f"Chart analysis error: {str(e)}")
        raise handle_error(e)


@router.post("/configure")
async def configure_chart(request: ResultSetPayload, preferences: PreferencesStore = Depends(get_preferences_store)):
    """Return the auto-generated chart configuration for a result set."""
    orchestrator = _load(request, preferences)
    if not orchestrator.graphable.can_graph:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Result set has no numeric columns to chart"
        )
    return {
        "config": orchestrator.chart_config.to_dict(),
        "analysis": orchestrator.graphable.to_dict()
    }


@router.post("/validate", response_model=ChartValidationResponse)
async def validate_chart_config(request: ChartValidationRequest):
    """Validate axis selections against a result set."""
    result_set = request.to_result_set()
    result = ChartConfigValidator().validate(
        result_set.to_records(), result_set.columns, request.x_axis, request.y_axis
    )
    return ChartValidationResponse(valid=result.valid, error=result.error)


@router.post("/transform")
async def transform_chart_data(request: ChartRenderRequest, preferences: PreferencesStore = Depends(get_preferences_store)):
    """
    Transform rows into chart records without rendering.

    Validation failures are returned as 422 with the validation message.
    """
    outcome = _render(request, preferences)
    return {
        "chart_data": outcome.chart_data,
        "total_points": outcome.total_points,
        "was_limited": outcome.was_limited,
        "notice": outcome.notice
    }


@router.post("/render")
async def render_chart(request: ChartRenderRequest, preferences: PreferencesStore = Depends(get_preferences_store)):
    """Validate, transform, sample and render a chart as Plotly JSON."""
    outcome = _render(request, preferences)
    return outcome.to_dict()


def _render(request: ChartRenderRequest, preferences: PreferencesStore):
    orchestrator = _load(request, preferences)
    if request.max_points:
        orchestrator.configure_settings(max_chart_points=request.max_points)

    config = request.config.to_config() if request.config else orchestrator.chart_config
    outcome = orchestrator.render(config)

    if outcome.status in ("empty", "invalid"):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=outcome.error
        )
    if outcome.status == "error":
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=outcome.error
        )
    return outcome


@router.get("/capabilities")
async def get_chart_capabilities():
    """
    Get information about chart capabilities.

    Returns supported chart types, thresholds and view modes.
    """
    orchestrator = build_orchestrator(InMemoryPreferencesStore())
    return orchestrator.get_chart_capabilities()


@router.get("/preferences", response_model=ChartPreferencesPayload)
async def get_chart_preferences(preferences: PreferencesStore = Depends(get_preferences_store)):
    """Get the persisted chart type, display toggles and view mode."""
    config = load_chart_preferences(preferences)
    return ChartPreferencesPayload(
        chart_type=config.chart_type,
        show_legend=config.show_legend,
        show_grid=config.show_grid,
        view_mode=load_view_mode(preferences)
    )


@router.put("/preferences", response_model=ChartPreferencesPayload)
async def update_chart_preferences(request: ChartPreferencesPayload, preferences: PreferencesStore = Depends(get_preferences_store)):
    """Persist chart type, display toggles and view mode."""
    if request.view_mode not in VIEW_MODES:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown view mode: {request.view_mode}"
        )
    save_chart_preferences(preferences, ChartConfig(
        chart_type=request.chart_type,
        show_legend=request.show_legend,
        show_grid=request.show_grid
    ))
    save_view_mode(preferences, request.view_mode)
    return request
