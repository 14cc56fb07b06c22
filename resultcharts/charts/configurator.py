"""
Chart Auto-Configurator

Selects default axis bindings so a chart can be shown without user input.
"""

from typing import List
import logging

from .models import ChartConfig, ChartType, ChartSettings, GraphableData

logger = logging.getLogger(__name__)


class ChartAutoConfigurator:
    """Builds the default ChartConfig for freshly analyzed data."""

    def __init__(self, settings: ChartSettings = None):
        self.settings = settings or ChartSettings()

    def auto_configure(
        self,
        columns: List[str],
        numeric_columns: List[str],
        categorical_columns: List[str],
        recommended_type: ChartType
    ) -> ChartConfig:
        """
        Generate a chart configuration from analyzed data.

        Args:
            columns: All column names in display order
            numeric_columns: Numeric column names in display order
            categorical_columns: Categorical column names in display order
            recommended_type: Chart type suggested by the detector

        Returns:
            ChartConfig with legend and grid shown
        """
        config = ChartConfig(chart_type=ChartType(recommended_type))

        # Prefer a categorical X axis, fall back to the first column
        if categorical_columns:
            config.x_axis = categorical_columns[0]
        elif columns:
            config.x_axis = columns[0]

        if numeric_columns:
            if config.chart_type == ChartType.SCATTER and len(numeric_columns) >= 2:
                config.x_axis = numeric_columns[0]
                config.y_axis = [numeric_columns[1]]
            elif config.chart_type == ChartType.PIE:
                config.y_axis = [numeric_columns[0]]
            else:
                config.y_axis = list(numeric_columns[:self.settings.max_default_series])

        logger.debug(
            f"Auto-configured {config.chart_type.value} chart: x={config.x_axis!r}, y={config.y_axis}"
        )
        return config

    def configure_for(self, columns: List[str], graphable: GraphableData) -> ChartConfig:
        """Convenience wrapper taking the analyzer's output directly."""
        return self.auto_configure(
            columns,
            graphable.numeric_columns,
            graphable.categorical_columns,
            graphable.recommended_chart_type
        )
