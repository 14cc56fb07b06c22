"""
Chart Generator

Renders transformed chart data into Plotly figures. Dispatch is a closed
mapping over ChartType.
"""

from typing import Dict, List, Any, Callable
import json
import logging

import plotly.graph_objects as go

from .models import ChartType, ChartConfig, ChartResult
from .exceptions import ChartRenderingError
from .transformer import coerce_number, format_number

logger = logging.getLogger(__name__)

CHART_COLORS = [
    '#3273dc',  # primary blue
    '#48c774',  # success green
    '#ffdd57',  # warning yellow
    '#f14668',  # danger red
    '#00d1b2',  # info cyan
    '#b86bff',  # purple
    '#ff6b9d',  # pink
    '#4ecdc4',  # teal
    '#ff8c42',  # orange
    '#95e1d3',  # mint
]


def get_chart_color(index: int) -> str:
    """Get a color from the palette by index."""
    return CHART_COLORS[index % len(CHART_COLORS)]


class ChartGenerator:
    """Generates Plotly chart figures from renderer-facing chart data."""

    def __init__(self):
        self._builders: Dict[ChartType, Callable[[List[Dict[str, Any]], ChartConfig], go.Figure]] = {
            ChartType.BAR: self._build_bar_chart,
            ChartType.LINE: self._build_line_chart,
            ChartType.AREA: self._build_area_chart,
            ChartType.SCATTER: self._build_scatter_chart,
            ChartType.PIE: self._build_pie_chart,
        }

    def render(self, chart_data: List[Dict[str, Any]], config: ChartConfig) -> ChartResult:
        """
        Render chart data with the given configuration.

        Args:
            chart_data: Records produced by the transformer
            config: Chart configuration

        Returns:
            ChartResult with the Plotly figure JSON

        Raises:
            ChartRenderingError: If there is nothing to draw or Plotly fails
        """
        if not chart_data:
            raise ChartRenderingError("No data to display", chart_type=config.chart_type.value)

        builder = self._builders.get(config.chart_type)
        if builder is None:
            raise ChartRenderingError(f"Unsupported chart type: {config.chart_type}")

        try:
            fig = builder(chart_data, config)
            fig.update_layout(
                height=400,
                plot_bgcolor='white',
                font=dict(size=12),
                showlegend=config.show_legend,
            )
            if config.chart_type != ChartType.PIE:
                fig.update_xaxes(showgrid=config.show_grid)
                fig.update_yaxes(showgrid=config.show_grid)
            plotly_json = json.loads(fig.to_json())
        except ChartRenderingError:
            raise
        except Exception as e:
            logger.error(f"Error rendering {config.chart_type.value} chart: {str(e)}")
            raise ChartRenderingError(str(e), chart_type=config.chart_type.value)

        return ChartResult(
            chart_type=config.chart_type,
            plotly_json=plotly_json,
            data_summary=self._summarize(chart_data, config)
        )

    def get_supported_chart_types(self) -> List[str]:
        """Get list of supported chart types."""
        return [chart_type.value for chart_type in self._builders]

    def _series_keys(self, config: ChartConfig) -> List[str]:
        return ['value'] if config.chart_type == ChartType.PIE else list(config.y_axis)

    def _build_bar_chart(self, data: List[Dict[str, Any]], config: ChartConfig) -> go.Figure:
        fig = go.Figure()
        names = [item.get('name') for item in data]
        for index, key in enumerate(config.y_axis):
            fig.add_trace(go.Bar(
                x=names,
                y=[coerce_number(item.get(key), default=None) for item in data],
                name=key,
                marker_color=get_chart_color(index)
            ))
        fig.update_layout(barmode='group', xaxis_tickangle=-45)
        return fig

    def _build_line_chart(self, data: List[Dict[str, Any]], config: ChartConfig) -> go.Figure:
        fig = go.Figure()
        names = [item.get('name') for item in data]
        for index, key in enumerate(config.y_axis):
            fig.add_trace(go.Scatter(
                x=names,
                y=[coerce_number(item.get(key), default=None) for item in data],
                name=key,
                mode='lines+markers',
                line=dict(color=get_chart_color(index), width=2)
            ))
        return fig

    def _build_area_chart(self, data: List[Dict[str, Any]], config: ChartConfig) -> go.Figure:
        fig = go.Figure()
        names = [item.get('name') for item in data]
        for index, key in enumerate(config.y_axis):
            fig.add_trace(go.Scatter(
                x=names,
                y=[coerce_number(item.get(key), default=None) for item in data],
                name=key,
                mode='lines',
                fill='tozeroy',
                line=dict(color=get_chart_color(index))
            ))
        return fig

    def _build_scatter_chart(self, data: List[Dict[str, Any]], config: ChartConfig) -> go.Figure:
        fig = go.Figure()
        # Each Y column becomes its own series; unusable coordinates plot at 0
        for index, key in enumerate(config.y_axis):
            fig.add_trace(go.Scatter(
                x=[coerce_number(item.get('name')) for item in data],
                y=[coerce_number(item.get(key)) for item in data],
                name=key,
                mode='markers',
                marker=dict(color=get_chart_color(index), size=8)
            ))
        fig.update_layout(xaxis_title=config.x_axis)
        return fig

    def _build_pie_chart(self, data: List[Dict[str, Any]], config: ChartConfig) -> go.Figure:
        fig = go.Figure(go.Pie(
            labels=[item.get('name') for item in data],
            values=[coerce_number(item.get('value')) for item in data],
            marker=dict(
                colors=[get_chart_color(index) for index in range(len(data))],
                line=dict(color='#FFFFFF', width=2)
            ),
            textinfo='percent+label',
            hovertemplate='<b>%{label}</b><br>Value: %{value}<br>Percentage: %{percent}<extra></extra>'
        ))
        return fig

    def _summarize(self, data: List[Dict[str, Any]], config: ChartConfig) -> Dict[str, Any]:
        series = self._series_keys(config)
        total = sum(
            coerce_number(item.get(key))
            for item in data
            for key in series
        )
        return {
            "points": len(data),
            "series": series,
            "total_value": total,
            "total_value_label": format_number(total),
        }
