import pytest

from resultcharts.charts import ChartType, ColumnAnalysis
from resultcharts.charts.detector import ChartTypeDetector


@pytest.fixture
def detector():
    return ChartTypeDetector()


def categorical(name, unique, samples=None):
    return ColumnAnalysis(
        name=name, is_categorical=True, unique_value_count=unique, sample_values=samples or []
    )


def numeric(name):
    return ColumnAnalysis(name=name, is_numeric=True, unique_value_count=10)


def test_no_numeric_columns_defaults_to_bar(detector):
    assert detector.recommend(0, 1, 10, [categorical("a", 3)]) == ChartType.BAR


def test_datetime_wins_over_pie(detector):
    """A datetime column with a numeric one is a line chart even when few categories exist."""
    analyses = [
        ColumnAnalysis(name="day", is_date_time=True, unique_value_count=4),
        categorical("region", 2),
        numeric("sales"),
    ]
    assert detector.recommend(1, 1, 4, analyses) == ChartType.LINE


def test_pie_for_few_rows_and_categories(detector):
    analyses = [categorical("region", 4), numeric("revenue")]
    assert detector.recommend(1, 1, 15, analyses) == ChartType.PIE


def test_pie_uses_first_categorical_column(detector):
    analyses = [categorical("customer", 12), categorical("region", 3), numeric("revenue")]
    assert detector.recommend(1, 2, 12, analyses) == ChartType.BAR


def test_no_pie_beyond_row_limit(detector):
    analyses = [categorical("region", 4), numeric("revenue")]
    assert detector.recommend(1, 1, 16, analyses) == ChartType.BAR


def test_scatter_for_numeric_only(detector):
    analyses = [numeric("height"), numeric("weight")]
    assert detector.recommend(2, 0, 50, analyses) == ChartType.SCATTER


def test_single_numeric_column_is_bar(detector):
    assert detector.recommend(1, 0, 50, [numeric("value")]) == ChartType.BAR


def test_month_labels_give_line(detector):
    analyses = [categorical("month", 12, ["Jan", "Feb", "Mar", "Apr", "May"]), numeric("sales")]
    assert detector.recommend(1, 1, 24, analyses) == ChartType.LINE


def test_sequential_check_needs_minimum_rows(detector, settings):
    settings.max_pie_rows = 0
    detector = ChartTypeDetector(settings)
    analyses = [categorical("year", 4, ["2020", "2021", "2022", "2023"]), numeric("sales")]
    assert detector.recommend(1, 1, 4, analyses) == ChartType.BAR
    assert detector.recommend(1, 1, 5, analyses) == ChartType.LINE


def test_unordered_labels_give_bar(detector):
    analyses = [categorical("name", 18, ["alpha", "beta", "gamma", "delta", "omega"]), numeric("score")]
    assert detector.recommend(1, 1, 40, analyses) == ChartType.BAR


@pytest.mark.parametrize("values,expected", [
    ([1, 2, 3, 4, 5], True),
    ([5, 1, 3, 2, 4], True),
    ([10, 20, 31, 40], True),
    ([1, 2, 10], False),
    ([7], False),
    ([], False),
    ([1.0, 1.0], False),
    (["2021", "2022"], True),
    (["Q1", "q2"], False),
    (["March", "April"], True),
    (["december report"], False),
    ([1, "x"], False),
])
def test_is_sequential_data(detector, values, expected):
    assert detector.is_sequential_data(values) is expected
