"""
Chart Type Detector

Picks a default chart type from column-kind counts, row count and the
characteristics of the first categorical column.
"""

from typing import Any, List
import re
import logging

import numpy as np

from .classifier import is_number
from .models import ChartType, ColumnAnalysis, ChartSettings

logger = logging.getLogger(__name__)

MONTH_PATTERN = re.compile(r"jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec")
YEAR_PATTERN = re.compile(r"^\d{4}$")


class ChartTypeDetector:
    """Deterministic chart type recommendation. First matching rule wins."""

    def __init__(self, settings: ChartSettings = None):
        self.settings = settings or ChartSettings()

    def recommend(
        self,
        numeric_count: int,
        categorical_count: int,
        row_count: int,
        column_analyses: List[ColumnAnalysis]
    ) -> ChartType:
        """
        Recommend the default chart type for a result set.

        Args:
            numeric_count: Number of numeric columns
            categorical_count: Number of categorical columns
            row_count: Number of rows in the result set
            column_analyses: Per-column analyses in column order

        Returns:
            The recommended ChartType
        """
        # Nothing to plot; callers never render this
        if numeric_count == 0:
            return ChartType.BAR

        if numeric_count >= 1 and any(col.is_date_time for col in column_analyses):
            logger.debug("Datetime column present, recommending line chart")
            return ChartType.LINE

        first_categorical = next((col for col in column_analyses if col.is_categorical), None)

        if categorical_count >= 1 and row_count <= self.settings.max_pie_rows:
            if first_categorical and first_categorical.unique_value_count <= self.settings.max_pie_categories:
                logger.debug(f"Few categories in '{first_categorical.name}', recommending pie chart")
                return ChartType.PIE

        if numeric_count >= 2 and categorical_count == 0:
            return ChartType.SCATTER

        if categorical_count >= 1 and row_count >= self.settings.min_sequential_rows:
            if first_categorical and self.is_sequential_data(first_categorical.sample_values):
                logger.debug(f"Column '{first_categorical.name}' looks sequential, recommending line chart")
                return ChartType.LINE

        return ChartType.BAR

    def is_sequential_data(self, values: List[Any]) -> bool:
        """Check if values look like an ordered sequence (evenly spaced numbers, months, years)."""
        if len(values) < 2:
            return False

        if all(is_number(value) for value in values):
            differences = np.diff(np.sort(np.asarray(values, dtype=float)))
            average = differences.mean()
            if average == 0 or not np.isfinite(average):
                return False
            deviation = np.abs(differences - average) / average
            return bool(np.all(deviation < self.settings.sequential_tolerance))

        text_values = [value.lower() for value in values if isinstance(value, str)]
        has_months = any(MONTH_PATTERN.search(value) for value in text_values)
        has_years = any(YEAR_PATTERN.match(value) for value in text_values)
        return has_months or has_years
