"""
Charts Package - Result Set Analysis and Chart Recommendation

This package inspects untyped query results, decides whether and how they can
be charted, and prepares data for rendering.

Core Components:
- ChartOrchestrator: Main interface for a results panel
- ColumnClassifier: Infers the semantic kind of each column
- GraphabilityAnalyzer: Determines if a result set can be charted
- ChartTypeDetector: Recommends a default chart type
- ChartAutoConfigurator: Picks default axis bindings
- ChartConfigValidator: Checks user-chosen axis bindings
- ChartDataTransformer: Reshapes, aggregates and samples rows
- ChartGenerator: Creates Plotly figures

Usage:
    from resultcharts.charts import ChartOrchestrator

    orchestrator = ChartOrchestrator()
    orchestrator.load_result_set(result_set)
    outcome = orchestrator.render()
"""

from .orchestrator import ChartOrchestrator
from .classifier import ColumnClassifier
from .analyzer import GraphabilityAnalyzer
from .detector import ChartTypeDetector
from .configurator import ChartAutoConfigurator
from .validator import ChartConfigValidator
from .transformer import ChartDataTransformer
from .generator import ChartGenerator
from .models import (
    ChartType, ChartConfig, ChartResult, ChartSettings, ColumnAnalysis,
    GraphableData, RenderOutcome, ResultSet, ValidationResult
)
from .exceptions import (
    ChartGenerationError, ChartConfigurationError, ChartRenderingError, DataTransformationError
)
from .preferences import InMemoryPreferencesStore, JSONFilePreferencesStore

__all__ = [
    'ChartOrchestrator',
    'ColumnClassifier',
    'GraphabilityAnalyzer',
    'ChartTypeDetector',
    'ChartAutoConfigurator',
    'ChartConfigValidator',
    'ChartDataTransformer',
    'ChartGenerator',
    'ChartType',
    'ChartConfig',
    'ChartResult',
    'ChartSettings',
    'ColumnAnalysis',
    'GraphableData',
    'RenderOutcome',
    'ResultSet',
    'ValidationResult',
    'ChartGenerationError',
    'ChartConfigurationError',
    'ChartRenderingError',
    'DataTransformationError',
    'InMemoryPreferencesStore',
    'JSONFilePreferencesStore'
]
