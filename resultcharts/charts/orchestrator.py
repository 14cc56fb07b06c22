"""
Chart Orchestrator

Main coordinator for one results panel. Analyzes each new result set,
auto-configures the chart, and runs validation, transformation, sampling and
rendering on every render.
"""

from dataclasses import replace
from typing import Dict, List, Any, Optional
import logging

from .models import (
    ChartConfig, ChartSettings, ChartType, GraphableData, RenderOutcome, ResultSet
)
from .analyzer import GraphabilityAnalyzer
from .configurator import ChartAutoConfigurator
from .validator import ChartConfigValidator
from .transformer import ChartDataTransformer
from .generator import ChartGenerator
from .exceptions import ChartRenderingError, DataTransformationError
from .preferences import (
    PreferencesStore, InMemoryPreferencesStore, VIEW_MODES,
    load_chart_preferences, save_chart_preferences, load_view_mode, save_view_mode
)

logger = logging.getLogger(__name__)


class ChartOrchestrator:
    """Holds the state of a results panel and drives the chart pipeline."""

    def __init__(self, settings: ChartSettings = None, preferences: PreferencesStore = None):
        self.settings = settings or ChartSettings()
        self.preferences = preferences if preferences is not None else InMemoryPreferencesStore()
        self.analyzer = GraphabilityAnalyzer(self.settings)
        self.configurator = ChartAutoConfigurator(self.settings)
        self.validator = ChartConfigValidator()
        self.transformer = ChartDataTransformer(self.settings)
        self.generator = ChartGenerator()

        self.result_set = ResultSet()
        self.records: List[Dict[str, Any]] = []
        self.graphable = GraphableData()
        self.chart_config = load_chart_preferences(self.preferences)
        self.view_mode = load_view_mode(self.preferences)

    def load_result_set(self, result_set: ResultSet) -> GraphableData:
        """
        Replace the current data and recompute everything derived from it.

        A graphable result set replaces the chart config with the
        auto-configured one. A non-graphable one forces the table view.
        """
        self.result_set = result_set or ResultSet()
        self.records = self.result_set.to_records()
        self.graphable = self.analyzer.analyze(self.result_set.columns, self.records)

        if self.graphable.can_graph:
            self.chart_config = self.configurator.configure_for(self.result_set.columns, self.graphable)
            logger.info(
                f"Auto-configured {self.chart_config.chart_type.value} chart for "
                f"{self.result_set.row_count} rows"
            )
        elif self.view_mode == "chart":
            logger.info("Result set cannot be charted, switching to table view")
            self.view_mode = "table"

        return self.graphable

    def update_chart_config(self, **changes) -> ChartConfig:
        """
        Apply a user edit to the chart config and persist the preferences.

        Args:
            **changes: ChartConfig fields to replace (chart_type, x_axis, y_axis,
                show_legend, show_grid, group_by)
        """
        if "chart_type" in changes:
            changes["chart_type"] = ChartType(changes["chart_type"])
        if "y_axis" in changes:
            changes["y_axis"] = list(changes["y_axis"] or [])

        try:
            self.chart_config = replace(self.chart_config, **changes)
        except TypeError as e:
            raise ValueError(f"Unknown chart setting: {e}")

        save_chart_preferences(self.preferences, self.chart_config)
        return self.chart_config

    def set_view_mode(self, mode: str) -> str:
        """Switch between table and chart view. Chart view needs graphable data."""
        if mode not in VIEW_MODES:
            raise ValueError(f"Unknown view mode: {mode}")
        if mode == "chart" and not self.graphable.can_graph:
            logger.info("Chart view requested for non-graphable data, staying on table view")
            mode = "table"
        self.view_mode = mode
        save_view_mode(self.preferences, mode)
        return self.view_mode

    def render(self, config: Optional[ChartConfig] = None) -> RenderOutcome:
        """
        Validate, transform, sample and render the current data.

        Returns:
            RenderOutcome whose status is ``ok``, ``empty`` (no data),
            ``invalid`` (configuration error) or ``error`` (transformation or
            rendering failure).
        """
        config = config or self.chart_config

        if not self.records or not self.result_set.columns:
            return RenderOutcome(status="empty", error="No data to graph")

        validation = self.validator.validate_config(self.records, self.result_set.columns, config)
        if not validation.valid:
            return RenderOutcome(status="invalid", error=validation.error)

        try:
            chart_data = self.transformer.transform(self.records, config)
            limited = self.transformer.limit_data_points(chart_data, self.settings.max_chart_points)
            chart = self.generator.render(limited, config)
        except DataTransformationError as e:
            logger.error(f"Error transforming data for {config.chart_type.value} chart: {str(e)}")
            return RenderOutcome(status="error", error=str(e))
        except ChartRenderingError as e:
            logger.error(f"Error rendering {config.chart_type.value} chart: {str(e)}")
            return RenderOutcome(status="error", error=str(e))

        was_limited = len(limited) < len(chart_data)
        notice = None
        if was_limited:
            notice = (
                f"Showing {len(limited)} of {len(chart_data)} data points. "
                "Large datasets are sampled for better performance."
            )

        return RenderOutcome(
            status="ok",
            chart_data=limited,
            total_points=len(chart_data),
            was_limited=was_limited,
            notice=notice,
            chart=chart
        )

    def get_chart_capabilities(self) -> Dict[str, Any]:
        """
        Get information about chart capabilities.

        Returns:
            Dictionary with capability information
        """
        return {
            "supported_chart_types": self.generator.get_supported_chart_types(),
            "settings": self.settings.to_dict(),
            "view_modes": list(VIEW_MODES),
        }

    def configure_settings(self, **kwargs) -> None:
        """
        Update chart engine settings.

        Args:
            **kwargs: Settings to update
        """
        for key, value in kwargs.items():
            if hasattr(self.settings, key):
                setattr(self.settings, key, value)
                logger.info(f"Updated setting {key} to {value}")
            else:
                logger.warning(f"Unknown setting: {key}")
