"""
Chart Engine Exceptions

Custom exceptions for the chart engine. Configuration problems are reported as
ValidationResult values, not exceptions; these cover the failures that remain.
"""


class ChartGenerationError(Exception):
    """Base exception for chart engine errors."""

    def __init__(self, message: str, chart_type: str = None, data_size: int = None):
        super().__init__(message)
        self.chart_type = chart_type
        self.data_size = data_size


class ChartConfigurationError(ChartGenerationError):
    """Raised when a chart configuration cannot be built or applied."""

    def __init__(self, message: str, chart_type: str = None):
        super().__init__(f"Chart configuration error: {message}", chart_type=chart_type)


class DataTransformationError(ChartGenerationError):
    """Raised when rows cannot be reshaped into chart records."""

    def __init__(self, message: str, chart_type: str = None, data_size: int = None):
        super().__init__(f"Data transformation failed: {message}", chart_type=chart_type, data_size=data_size)


class ChartRenderingError(ChartGenerationError):
    """Raised when chart rendering fails."""

    def __init__(self, message: str, chart_type: str = None):
        super().__init__(f"Chart rendering failed: {message}", chart_type=chart_type)
