"""
Result reporting for the approve engine.

This module provides components for formatting and outputting validation
results. It supports:
- Human-readable string formatting
- Dictionary conversion
- JSON serialization
"""

import json
from typing import Any, Dict

from ...core.models import Result


class ResultReporter:
    """
    Reporter for formatting and outputting validation results.

    This class provides static methods for converting Result instances into
    formats suitable for terminals, logs or API responses.
    """

    @staticmethod
    def format_result(result: Result) -> str:
        """
        Format a result as a human-readable string.

        Errors are listed in insertion order, followed by any extra data
        merged in by the test.

        Args:
            result: Result instance to format

        Returns:
            str: Formatted string representation of the result

        Example:
            >>> result = Result(approved=False, errors=["Name is required"])
            >>> print(ResultReporter.format_result(result))
            Validation failed with the following errors:
              - Name is required
        """
        lines = []

        if result.approved:
            lines.append("Value approved")
        else:
            lines.append("Validation failed with the following errors:")
            for error in result.errors:
                lines.append(f"  - {error}")

        if result.extra:
            lines.append("\nDetails:")
            for key, val in result.extra.items():
                lines.append(f"  {key}: {val}")

        return "\n".join(lines)

    @staticmethod
    def to_dict(result: Result) -> Dict[str, Any]:
        """
        Convert a result to a dictionary.

        Example:
            >>> ResultReporter.to_dict(Result())
            {'approved': True, 'errors': []}
        """
        return result.to_dict()

    @staticmethod
    def to_json(result: Result) -> str:
        """
        Convert a result to JSON.

        Serializes the result, extras included, with indentation. Values
        JSON cannot represent are converted with ``str``.
        """
        return json.dumps(ResultReporter.to_dict(result), indent=2, default=str)
