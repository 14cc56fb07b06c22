"""
Column Classifier

Infers the semantic kind of a column (numeric, boolean-leaning, datetime,
categorical) from a sample of its untyped values.
"""

from typing import Any, Dict, Iterable, List, Optional
import math
import numbers
import re
import warnings
import logging

import pandas as pd

from .models import ColumnAnalysis, ChartSettings

logger = logging.getLogger(__name__)

BOOLEAN_STRINGS = {"true", "false", "yes", "no", "1", "0"}

RADIX_PREFIXES = ("0x", "0o", "0b")

DATE_PATTERNS = [
    re.compile(r"^\d{4}[-/]\d{2}[-/]\d{2}"),               # YYYY-MM-DD or YYYY/MM/DD
    re.compile(r"^\d{2}[-/]\d{2}[-/]\d{4}"),               # DD-MM-YYYY or MM-DD-YYYY
    re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}"),   # ISO 8601
    re.compile(r"^\d{4}-\d{2}-\d{2}\s\d{2}:\d{2}:\d{2}"),  # SQL datetime
]


def is_number(value: Any) -> bool:
    """True for genuine numeric values. Booleans are not numbers here."""
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def parse_numeric_text(text: str) -> Optional[float]:
    """Parse a trimmed string as a number, or return None."""
    trimmed = text.strip()
    if not trimmed or "_" in trimmed:
        return None
    # Unsigned 0x/0o/0b literals only; a sign makes them non-numeric
    if trimmed[:2].lower() in RADIX_PREFIXES:
        try:
            return float(int(trimmed, 0))
        except (ValueError, OverflowError):
            return None
    try:
        parsed = float(trimmed)
    except ValueError:
        return None
    if math.isnan(parsed):
        return None
    unsigned = trimmed.lstrip("+-")
    if math.isinf(parsed) and unsigned.lower().startswith("inf") and unsigned != "Infinity":
        return None
    return parsed


def is_numeric_value(value: Any) -> bool:
    if is_number(value):
        return True
    if isinstance(value, str):
        return parse_numeric_text(value) is not None
    return False


def is_boolean_value(value: Any) -> bool:
    if isinstance(value, bool):
        return True
    return isinstance(value, str) and value.lower() in BOOLEAN_STRINGS


def is_date_time_string(value: Any) -> bool:
    """Check if a string looks like a date/time and parses to a real one."""
    if not value or not isinstance(value, str):
        return False

    if not any(pattern.match(value) for pattern in DATE_PATTERNS):
        return False

    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        try:
            parsed = pd.to_datetime(value, errors="coerce")
        except (ValueError, TypeError, OverflowError):
            return False
    return not pd.isna(parsed)


def _identity(value: Any):
    # 1 and 1.0 compare equal as numbers; True and "1" stay apart from them
    if is_number(value):
        kind = "number"
    else:
        kind = type(value).__name__
    try:
        hash(value)
    except TypeError:
        return kind, repr(value)
    return kind, value


def distinct_values(values: Iterable[Any]) -> List[Any]:
    """Distinct values in first-seen order."""
    seen = set()
    distinct = []
    for value in values:
        key = _identity(value)
        if key in seen:
            continue
        seen.add(key)
        distinct.append(value)
    return distinct


class ColumnClassifier:
    """Classifies one column from its sampled values."""

    def __init__(self, settings: ChartSettings = None):
        self.settings = settings or ChartSettings()

    def classify(self, name: str, samples: Iterable[Any]) -> ColumnAnalysis:
        """
        Determine the kind and summary statistics of a column.

        Args:
            name: Column name
            samples: Raw column values; only the first ``sample_size`` are used

        Returns:
            ColumnAnalysis for the column. Never raises on bad input.
        """
        sample = list(samples or [])[:self.settings.sample_size]
        values = [value for value in sample if value is not None]

        if not values:
            return ColumnAnalysis(name=name)

        total = len(values)
        numeric_count = sum(1 for value in values if is_numeric_value(value))
        is_numeric = numeric_count / total > self.settings.numeric_threshold

        boolean_count = sum(1 for value in values if is_boolean_value(value))
        is_boolean = boolean_count / total > self.settings.boolean_threshold

        is_date_time = (
            not is_numeric
            and not is_boolean
            and any(is_date_time_string(value) for value in values)
        )

        unique = distinct_values(values)
        unique_count = len(unique)

        is_categorical = (not is_numeric and not is_date_time) and (
            is_boolean
            or unique_count <= self.settings.max_categorical_unique
            or unique_count / total < self.settings.categorical_ratio
        )

        return ColumnAnalysis(
            name=name,
            is_numeric=is_numeric,
            is_categorical=is_categorical,
            is_date_time=is_date_time,
            unique_value_count=unique_count,
            sample_values=unique[:self.settings.sample_value_count]
        )

    def classify_records(self, records: List[Dict[str, Any]], column: str) -> ColumnAnalysis:
        """Classify ``column`` from row records, treating absent keys as null."""
        head = records[:self.settings.sample_size] if records else []
        return self.classify(column, [row.get(column) for row in head])

    def get_column_info(self, records: List[Dict[str, Any]], columns: List[str]) -> Dict[str, Any]:
        """Get detailed information about columns for debugging."""
        return {
            column: self.classify_records(records, column).to_dict()
            for column in columns
        }
