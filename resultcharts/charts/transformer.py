"""
Chart Data Transformer

Reshapes row records into the flat records a chart renderer consumes:
per-series records, part-of-whole aggregation, and point-count sampling.
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Optional
import math
import logging

import pandas as pd

from .classifier import is_number, parse_numeric_text
from .exceptions import DataTransformationError
from .models import ChartConfig, ChartType, ChartSettings

logger = logging.getLogger(__name__)

MISSING_LABEL = "N/A"
ELLIPSIS = "..."


def format_axis_value(value: Any, max_length: int = 50) -> Any:
    """Format a value for use as an axis label. Numbers pass through unchanged."""
    if value is None:
        return MISSING_LABEL

    if is_number(value):
        return value

    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")

    if isinstance(value, str):
        if len(value) > max_length:
            return value[:max_length - len(ELLIPSIS)] + ELLIPSIS
        return value

    return str(value)


def coerce_number(value: Any, default: Optional[float] = 0) -> Optional[float]:
    """Coerce a cell to a number for plotting, using ``default`` for anything unusable."""
    if isinstance(value, bool):
        return int(value)
    if is_number(value):
        if isinstance(value, float) and math.isnan(value):
            return default
        return value
    if isinstance(value, str):
        if not value.strip():
            return default
        parsed = parse_numeric_text(value)
        return default if parsed is None else parsed
    return default


def format_number(value: float) -> str:
    """Format large numbers for axis labels (1.5M, 2.3K, 12.00)."""
    if abs(value) >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if abs(value) >= 1_000:
        return f"{value / 1_000:.1f}K"
    return f"{value:.2f}"


class ChartDataTransformer:
    """Turns validated row records into renderer-facing chart data."""

    def __init__(self, settings: ChartSettings = None):
        self.settings = settings or ChartSettings()

    def transform(self, data: Optional[List[Dict[str, Any]]], config: ChartConfig) -> List[Dict[str, Any]]:
        """
        Transform records for the configured chart type.

        Pie charts are aggregated by category; every other type gets one
        record per row with Y values copied verbatim.

        Raises:
            DataTransformationError: If a row is not a mapping
        """
        if not data:
            return []

        if config.chart_type == ChartType.PIE:
            value_column = config.y_axis[0] if config.y_axis else None
            return self.aggregate_for_pie_chart(data, config.x_axis, value_column)

        records = []
        for index, row in enumerate(data):
            self._check_row(row, index, config)
            record = {"name": self.format_axis_value(row.get(config.x_axis))}
            for column in config.y_axis:
                record[column] = row.get(column)
            if config.group_by and row.get(config.group_by):
                record["group"] = row.get(config.group_by)
            records.append(record)
        return records

    def aggregate_for_pie_chart(
        self,
        data: List[Dict[str, Any]],
        category_column: str,
        value_column: Optional[str]
    ) -> List[Dict[str, Any]]:
        """Sum values per category, keeping categories in first-seen order."""
        if not data:
            return []

        names = []
        values = []
        for index, row in enumerate(data):
            self._check_row(row, index)
            names.append(str(self.format_axis_value(row.get(category_column))))
            values.append(coerce_number(row.get(value_column)) if value_column else 0)

        # Object dtype keeps Python ints, which do not wrap at 64 bits
        frame = pd.DataFrame({"name": names, "value": pd.Series(values, dtype=object)})
        totals = frame.groupby("name", sort=False)["value"].sum()

        return [
            {"name": name, "value": total.item() if hasattr(total, "item") else total}
            for name, total in totals.items()
        ]

    def limit_data_points(self, data: List[Dict[str, Any]], max_points: int = None) -> List[Dict[str, Any]]:
        """
        Sample records evenly down to ``max_points``.

        Keeps every ``len // max_points``-th record starting at index 0 and then
        truncates, so the result is deterministic for a given input.
        """
        max_points = max_points or self.settings.max_chart_points
        if len(data) <= max_points:
            return data

        step = len(data) // max_points
        limited = data[::step][:max_points]
        logger.debug(f"Sampled {len(limited)} of {len(data)} chart points (step {step})")
        return limited

    def format_axis_value(self, value: Any) -> Any:
        return format_axis_value(value, self.settings.max_label_length)

    def _check_row(self, row: Any, index: int, config: ChartConfig = None) -> None:
        if not isinstance(row, Mapping):
            chart_type = config.chart_type.value if config else None
            raise DataTransformationError(
                f"row {index} is a {type(row).__name__}, expected a mapping",
                chart_type=chart_type
            )
