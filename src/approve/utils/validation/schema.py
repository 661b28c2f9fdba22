"""
Rule set document validation.

Rule sets written as JSON (for the command line or configuration files)
are checked against a JSON schema before use. Rule sets built in Python
need no such check; the dispatcher validates them as it goes.

JSON has no regular expression type, so ``format`` rules loaded from
JSON have their ``regex`` strings compiled here.
"""

import json
import os
import re
from typing import Any, Dict

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from ...core.exceptions import InvalidArgument

RULE_SET_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "message": {"type": "string"},
    },
    "additionalProperties": {
        "anyOf": [
            {"type": ["string", "number", "boolean"]},
            {
                "type": "object",
                "properties": {
                    "message": {"type": "string"},
                    "config": {"type": "object"},
                },
            },
        ]
    },
}


def validate_rule_document(document: Any) -> Dict[str, Any]:
    """
    Validate a rule set document against RULE_SET_SCHEMA.

    Args:
        document: Decoded JSON document

    Returns:
        Dict[str, Any]: The document, unchanged

    Raises:
        InvalidArgument: If the document does not describe a rule set
    """
    try:
        json_validate(instance=document, schema=RULE_SET_SCHEMA)
    except JsonSchemaError as e:
        raise InvalidArgument(f"Rule set does not match schema: {e.message}") from None
    return document


def compile_format_rule(rules: Dict[str, Any]) -> Dict[str, Any]:
    """Compile the ``regex`` string of a ``format`` rule into a pattern."""
    constraint = rules.get("format")
    if not isinstance(constraint, dict) or not isinstance(constraint.get("regex"), str):
        return rules
    try:
        pattern = re.compile(constraint["regex"])
    except re.error as e:
        raise InvalidArgument(f"regex is not a valid regular expression: {e}", rule="format") from None
    return {**rules, "format": {**constraint, "regex": pattern}}


def load_rules(text: str) -> Dict[str, Any]:
    """
    Parse a rule set from a JSON string or a file path prefixed with '@'.

    Args:
        text: JSON text, or ``@path`` naming a JSON file

    Returns:
        Dict[str, Any]: The validated rule set, ready for dispatch

    Raises:
        InvalidArgument: If the file is missing, the JSON is invalid or the
            document is not a rule set

    Example:
        >>> load_rules('{"range": {"min": 5, "max": 20}, "title": "Username"}')
        {'range': {'min': 5, 'max': 20}, 'title': 'Username'}
    """
    if text.startswith("@"):
        file_path = text[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)
        if not os.path.exists(file_path):
            raise InvalidArgument(f"File not found: {file_path}")
        with open(file_path, "r") as f:
            text = f.read()

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidArgument(f"Invalid JSON input: {e}") from None

    return compile_format_rule(validate_rule_document(document))
