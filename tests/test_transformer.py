import pytest

from resultcharts.charts import ChartConfig, ChartDataTransformer, ChartType, DataTransformationError
from resultcharts.charts.transformer import coerce_number, format_axis_value, format_number


@pytest.fixture
def transformer():
    return ChartDataTransformer()


def test_format_axis_value():
    assert format_axis_value(None) == "N/A"
    assert format_axis_value(42) == 42
    assert format_axis_value(2.5) == 2.5
    assert format_axis_value("short") == "short"
    assert format_axis_value(b"raw") == "raw"
    assert format_axis_value(True) == "True"


def test_long_labels_are_truncated():
    label = "x" * 60
    formatted = format_axis_value(label)
    assert len(formatted) == 50
    assert formatted == "x" * 47 + "..."
    assert format_axis_value("y" * 50) == "y" * 50


@pytest.mark.parametrize("value,expected", [
    (5, 5),
    (2.5, 2.5),
    ("2.5", 2.5),
    (" 7 ", 7.0),
    ("abc", 0),
    ("", 0),
    (None, 0),
    (True, 1),
    (float("nan"), 0),
])
def test_coerce_number(value, expected):
    assert coerce_number(value) == expected


def test_coerce_number_custom_default():
    assert coerce_number("abc", default=None) is None


def test_format_number():
    assert format_number(1_500_000) == "1.5M"
    assert format_number(2_300) == "2.3K"
    assert format_number(12) == "12.00"


def test_transform_copies_y_values(transformer):
    data = [
        {"region": "North", "revenue": 120, "orders": "10"},
        {"region": None, "revenue": 80, "orders": None},
    ]
    config = ChartConfig(chart_type=ChartType.BAR, x_axis="region", y_axis=["revenue", "orders"])
    assert transformer.transform(data, config) == [
        {"name": "North", "revenue": 120, "orders": "10"},
        {"name": "N/A", "revenue": 80, "orders": None},
    ]


def test_transform_group_by(transformer):
    data = [
        {"month": "Jan", "sales": 1, "store": "A"},
        {"month": "Feb", "sales": 2, "store": ""},
    ]
    config = ChartConfig(chart_type=ChartType.LINE, x_axis="month", y_axis=["sales"], group_by="store")
    records = transformer.transform(data, config)
    assert records[0]["group"] == "A"
    assert "group" not in records[1]


def test_transform_empty(transformer):
    assert transformer.transform([], ChartConfig(x_axis="a", y_axis=["b"])) == []


def test_pie_sums_by_category_in_first_seen_order(transformer):
    data = [
        {"cat": "A", "v": 10},
        {"cat": "B", "v": 3},
        {"cat": "A", "v": 5},
    ]
    config = ChartConfig(chart_type=ChartType.PIE, x_axis="cat", y_axis=["v"])
    assert transformer.transform(data, config) == [
        {"name": "A", "value": 15},
        {"name": "B", "value": 3},
    ]


def test_pie_coerces_values_and_labels(transformer):
    data = [
        {"cat": None, "v": "2.5"},
        {"cat": "B", "v": "oops"},
        {"cat": None, "v": 1},
    ]
    records = transformer.aggregate_for_pie_chart(data, "cat", "v")
    assert records == [
        {"name": "N/A", "value": 3.5},
        {"name": "B", "value": 0},
    ]


def test_pie_numeric_categories_become_strings(transformer):
    data = [{"year": 2023, "v": 1}, {"year": 2024, "v": 2}, {"year": 2023, "v": 4}]
    records = transformer.aggregate_for_pie_chart(data, "year", "v")
    assert records == [{"name": "2023", "value": 5}, {"name": "2024", "value": 2}]


def test_pie_total_is_preserved(transformer):
    data = [{"cat": f"c{i % 4}", "v": i} for i in range(20)]
    records = transformer.aggregate_for_pie_chart(data, "cat", "v")
    assert sum(record["value"] for record in records) == sum(range(20))


def test_limit_data_points_samples_evenly(transformer):
    data = [{"name": i} for i in range(2500)]
    limited = transformer.limit_data_points(data, 1000)
    assert len(limited) == 1000
    assert limited[0]["name"] == 0
    assert limited[1]["name"] == 2
    assert limited[-1]["name"] == 1998


def test_limit_data_points_truncates_with_step_one(transformer):
    data = [{"name": i} for i in range(1500)]
    limited = transformer.limit_data_points(data, 1000)
    assert len(limited) == 1000
    assert limited[-1]["name"] == 999


def test_limit_data_points_keeps_small_input(transformer):
    data = [{"name": i} for i in range(10)]
    assert transformer.limit_data_points(data, 1000) is data


def test_limit_data_points_uses_settings(settings):
    settings.max_chart_points = 5
    transformer = ChartDataTransformer(settings)
    assert len(transformer.limit_data_points([{"name": i} for i in range(12)])) == 5


def test_non_mapping_row_raises(transformer):
    config = ChartConfig(chart_type=ChartType.BAR, x_axis="a", y_axis=["b"])
    with pytest.raises(DataTransformationError) as exc_info:
        transformer.transform([{"a": 1, "b": 2}, ["bad", "row"]], config)
    assert exc_info.value.chart_type == "bar"
    assert "row 1" in str(exc_info.value)


def test_pie_sums_large_integers_without_wrapping(transformer):
    big = 2 ** 62
    data = [{"cat": "A", "v": big}, {"cat": "A", "v": big}, {"cat": "B", "v": 1}]
    records = transformer.aggregate_for_pie_chart(data, "cat", "v")
    assert records == [{"name": "A", "value": 2 * big}, {"name": "B", "value": 1}]
    assert records[0]["value"] > 0


def test_coerce_number_reads_hex_text():
    assert coerce_number("0x10") == 16
