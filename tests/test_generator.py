import pytest

from resultcharts.charts import ChartConfig, ChartGenerator, ChartRenderingError, ChartType
from resultcharts.charts.generator import CHART_COLORS, get_chart_color

SERIES_DATA = [
    {"name": "North", "revenue": 120, "orders": 10},
    {"name": "South", "revenue": 80, "orders": None},
    {"name": "East", "revenue": "95", "orders": 9},
]


@pytest.fixture
def generator():
    return ChartGenerator()


@pytest.mark.parametrize("chart_type,trace_type", [
    (ChartType.BAR, "bar"),
    (ChartType.LINE, "scatter"),
    (ChartType.AREA, "scatter"),
    (ChartType.SCATTER, "scatter"),
])
def test_one_trace_per_series(generator, chart_type, trace_type):
    config = ChartConfig(chart_type=chart_type, x_axis="region", y_axis=["revenue", "orders"])
    result = generator.render(SERIES_DATA, config)
    traces = result.plotly_json["data"]
    assert [trace["type"] for trace in traces] == [trace_type, trace_type]
    assert [trace["name"] for trace in traces] == ["revenue", "orders"]
    assert result.chart_type == chart_type


def test_line_and_area_modes(generator):
    line = generator.render(SERIES_DATA, ChartConfig(chart_type=ChartType.LINE, x_axis="r", y_axis=["revenue"]))
    area = generator.render(SERIES_DATA, ChartConfig(chart_type=ChartType.AREA, x_axis="r", y_axis=["revenue"]))
    assert line.plotly_json["data"][0]["mode"] == "lines+markers"
    assert area.plotly_json["data"][0]["fill"] == "tozeroy"


def test_pie_chart(generator):
    data = [{"name": "A", "value": 15}, {"name": "B", "value": 3}]
    result = generator.render(data, ChartConfig(chart_type=ChartType.PIE, x_axis="cat", y_axis=["v"]))
    trace = result.plotly_json["data"][0]
    assert trace["type"] == "pie"
    assert list(trace["labels"]) == ["A", "B"]
    assert result.data_summary["series"] == ["value"]
    assert result.data_summary["total_value"] == 18


def test_scatter_with_text_coordinates_renders(generator):
    data = [{"name": "abc", "y": "oops"}, {"name": 2, "y": 4}]
    result = generator.render(data, ChartConfig(chart_type=ChartType.SCATTER, x_axis="x", y_axis=["y"]))
    assert result.plotly_json["data"][0]["mode"] == "markers"
    assert result.data_summary["total_value"] == 4


def test_display_toggles(generator):
    config = ChartConfig(
        chart_type=ChartType.BAR, x_axis="r", y_axis=["revenue"], show_legend=False, show_grid=False
    )
    layout = generator.render(SERIES_DATA, config).plotly_json["layout"]
    assert layout["showlegend"] is False
    assert layout["xaxis"]["showgrid"] is False
    assert layout["yaxis"]["showgrid"] is False


def test_empty_data_raises(generator):
    with pytest.raises(ChartRenderingError):
        generator.render([], ChartConfig(x_axis="a", y_axis=["b"]))


def test_data_summary(generator):
    config = ChartConfig(chart_type=ChartType.BAR, x_axis="r", y_axis=["revenue", "orders"])
    summary = generator.render(SERIES_DATA, config).data_summary
    assert summary["points"] == 3
    assert summary["series"] == ["revenue", "orders"]
    assert summary["total_value"] == 314
    assert summary["total_value_label"] == "314.00"


def test_to_dict(generator):
    config = ChartConfig(chart_type=ChartType.BAR, x_axis="r", y_axis=["revenue"])
    payload = generator.render(SERIES_DATA, config).to_dict()
    assert payload["chart_type"] == "bar"
    assert "data" in payload["plotly_json"]


def test_supported_chart_types(generator):
    assert sorted(generator.get_supported_chart_types()) == ["area", "bar", "line", "pie", "scatter"]


def test_chart_colors_wrap():
    assert get_chart_color(0) == CHART_COLORS[0]
    assert get_chart_color(len(CHART_COLORS) + 1) == CHART_COLORS[1]
