"""
Graphability Analyzer

Analyzes a result set to determine whether it can be charted, which columns
are numeric or categorical, and which chart type to suggest.
"""

from typing import Dict, List, Any, Optional
import logging

from .models import GraphableData, ChartSettings, ResultSet
from .classifier import ColumnClassifier
from .detector import ChartTypeDetector

logger = logging.getLogger(__name__)


class GraphabilityAnalyzer:
    """Analyzes result sets to determine if they are suitable for charts."""

    def __init__(self, settings: ChartSettings = None):
        self.settings = settings or ChartSettings()
        self.classifier = ColumnClassifier(self.settings)
        self.detector = ChartTypeDetector(self.settings)

    def analyze(self, columns: Optional[List[str]], data: Optional[List[Dict[str, Any]]]) -> GraphableData:
        """
        Analyze row records to determine chart eligibility.

        Args:
            columns: Column names in display order
            data: One dict per row, keyed by column name

        Returns:
            GraphableData with the verdict. Empty input yields a non-graphable result.
        """
        if not data or not columns:
            return GraphableData()

        analyses = [self.classifier.classify_records(data, column) for column in columns]

        numeric_columns = [analysis.name for analysis in analyses if analysis.is_numeric]
        categorical_columns = [analysis.name for analysis in analyses if analysis.is_categorical]

        has_numeric_columns = len(numeric_columns) > 0
        recommended = self.detector.recommend(
            len(numeric_columns),
            len(categorical_columns),
            len(data),
            analyses
        )

        logger.debug(
            f"Analyzed {len(columns)} columns over {len(data)} rows: "
            f"numeric={numeric_columns}, categorical={categorical_columns}, recommended={recommended.value}"
        )

        return GraphableData(
            has_numeric_columns=has_numeric_columns,
            numeric_columns=numeric_columns,
            categorical_columns=categorical_columns,
            recommended_chart_type=recommended,
            can_graph=has_numeric_columns,
            column_analyses=analyses
        )

    def analyze_result_set(self, result_set: ResultSet) -> GraphableData:
        """Analyze a positional ResultSet."""
        if result_set is None or result_set.is_empty:
            return GraphableData()
        return self.analyze(result_set.columns, result_set.to_records())
