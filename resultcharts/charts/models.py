"""
Chart Engine Data Models

Internal data models for the result-set analysis and chart recommendation engine.
These are separate from API models to maintain clean separation of concerns.
"""

from typing import Dict, List, Any, Optional
from enum import Enum
from dataclasses import dataclass, field


class ChartType(str, Enum):
    """Supported chart types."""
    BAR = "bar"
    LINE = "line"
    PIE = "pie"
    AREA = "area"
    SCATTER = "scatter"


@dataclass
class ResultSet:
    """Columns plus positional rows, as returned by the query engine."""
    columns: List[str] = field(default_factory=list)
    rows: List[List[Any]] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.columns or not self.rows

    def to_records(self) -> List[Dict[str, Any]]:
        """Convert positional rows to one dict per row.

        Columns past the end of a short row are left out of that record.
        """
        return [
            {column: row[index] for index, column in enumerate(self.columns) if index < len(row)}
            for row in self.rows
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'columns': list(self.columns),
            'rows': [list(row) for row in self.rows]
        }


@dataclass
class ColumnAnalysis:
    """Semantic kind and summary of a single column."""
    name: str
    is_numeric: bool = False
    is_categorical: bool = False
    is_date_time: bool = False
    unique_value_count: int = 0
    sample_values: List[Any] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'name': self.name,
            'is_numeric': self.is_numeric,
            'is_categorical': self.is_categorical,
            'is_date_time': self.is_date_time,
            'unique_value_count': self.unique_value_count,
            'sample_values': list(self.sample_values)
        }


@dataclass
class GraphableData:
    """Aggregate verdict on whether and how a result set can be charted."""
    has_numeric_columns: bool = False
    numeric_columns: List[str] = field(default_factory=list)
    categorical_columns: List[str] = field(default_factory=list)
    recommended_chart_type: ChartType = ChartType.BAR
    can_graph: bool = False
    column_analyses: List[ColumnAnalysis] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API response."""
        return {
            'has_numeric_columns': self.has_numeric_columns,
            'numeric_columns': list(self.numeric_columns),
            'categorical_columns': list(self.categorical_columns),
            'recommended_chart_type': self.recommended_chart_type.value,
            'can_graph': self.can_graph,
            'column_analyses': [analysis.to_dict() for analysis in self.column_analyses]
        }


@dataclass
class ChartConfig:
    """Chart type, axis bindings and display toggles."""
    chart_type: ChartType = ChartType.BAR
    x_axis: str = ""
    y_axis: List[str] = field(default_factory=list)
    show_legend: bool = True
    show_grid: bool = True
    group_by: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'chart_type': self.chart_type.value,
            'x_axis': self.x_axis,
            'y_axis': list(self.y_axis),
            'show_legend': self.show_legend,
            'show_grid': self.show_grid,
            'group_by': self.group_by
        }

    def to_preferences(self) -> Dict[str, Any]:
        """The persisted subset. Axis bindings depend on the data and are never stored."""
        return {
            'type': self.chart_type.value,
            'showLegend': self.show_legend,
            'showGrid': self.show_grid
        }


@dataclass
class ValidationResult:
    """Outcome of checking a chart configuration against a result set."""
    valid: bool
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'valid': self.valid,
            'error': self.error
        }


@dataclass
class ChartResult:
    """Rendered chart."""
    chart_type: ChartType
    plotly_json: Dict[str, Any]
    data_summary: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API response."""
        return {
            'chart_type': self.chart_type.value,
            'plotly_json': self.plotly_json,
            'data_summary': self.data_summary
        }


@dataclass
class RenderOutcome:
    """Result of one pass through validate, transform, limit and render."""
    status: str
    error: Optional[str] = None
    chart_data: List[Dict[str, Any]] = field(default_factory=list)
    total_points: int = 0
    was_limited: bool = False
    notice: Optional[str] = None
    chart: Optional[ChartResult] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'status': self.status,
            'error': self.error,
            'chart_data': self.chart_data,
            'total_points': self.total_points,
            'was_limited': self.was_limited,
            'notice': self.notice,
            'chart': self.chart.to_dict() if self.chart else None
        }


class ChartSettings:
    """Policy thresholds for classification, recommendation and sampling."""

    def __init__(self):
        # Column classification
        self.sample_size = 100
        self.numeric_threshold = 0.8
        self.boolean_threshold = 0.8
        self.max_categorical_unique = 20
        self.categorical_ratio = 0.5
        self.sample_value_count = 5

        # Chart type recommendation
        self.max_pie_rows = 15
        self.max_pie_categories = 10
        self.min_sequential_rows = 5
        self.sequential_tolerance = 0.5

        # Auto-configuration
        self.max_default_series = 3

        # Transformation and sampling
        self.max_chart_points = 1000
        self.max_label_length = 50

    def to_dict(self) -> Dict[str, Any]:
        return dict(vars(self))
