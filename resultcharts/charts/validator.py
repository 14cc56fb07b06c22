"""
Chart Config Validator

Checks a user-chosen chart configuration against the current result set.
"""

from typing import Any, Dict, List, Optional
import logging

from .classifier import is_number
from .models import ChartConfig, ValidationResult

logger = logging.getLogger(__name__)


class ChartConfigValidator:
    """Structural check of axis selections. First failure wins."""

    def validate(
        self,
        data: Optional[List[Dict[str, Any]]],
        columns: Optional[List[str]],
        x_axis: Optional[str],
        y_axis: Optional[List[str]]
    ) -> ValidationResult:
        """
        Validate that the data can be graphed with the given axes.

        Only the first row is inspected when checking that Y columns are
        numeric. A column that turns non-numeric further down passes here and
        is coerced later by the transformer and renderer.
        """
        if not data:
            return ValidationResult(valid=False, error="No data to graph")

        if not x_axis:
            return ValidationResult(valid=False, error="X-axis column not selected")

        if not y_axis:
            return ValidationResult(valid=False, error="Y-axis column(s) not selected")

        columns = columns or []
        if x_axis not in columns:
            return ValidationResult(valid=False, error=f'X-axis column "{x_axis}" not found in results')

        missing = next((column for column in y_axis if column not in columns), None)
        if missing is not None:
            return ValidationResult(valid=False, error=f'Y-axis column "{missing}" not found in results')

        first_row = data[0] if isinstance(data[0], dict) else {}
        non_numeric = next(
            (
                column for column in y_axis
                if first_row.get(column) is not None and not is_number(first_row.get(column))
            ),
            None
        )
        if non_numeric is not None:
            return ValidationResult(valid=False, error=f'Y-axis column "{non_numeric}" does not contain numeric data')

        return ValidationResult(valid=True)

    def validate_config(self, data: List[Dict[str, Any]], columns: List[str], config: ChartConfig) -> ValidationResult:
        """Validate a ChartConfig instance."""
        result = self.validate(data, columns, config.x_axis, config.y_axis)
        if not result.valid:
            logger.debug(f"Chart configuration rejected: {result.error}")
        return result
