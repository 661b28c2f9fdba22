"""
Validation utilities for the approve engine.

Key Components:
- ResultReporter: Formats and outputs validation results
- RULE_SET_SCHEMA: JSON schema describing rule set documents
- validate_rule_document: Schema check for rule sets loaded from JSON
- load_rules: Parses rule sets from JSON strings or @files
"""

from .reporter import ResultReporter
from .schema import RULE_SET_SCHEMA, load_rules, validate_rule_document

__all__ = [
    "ResultReporter",
    "RULE_SET_SCHEMA",
    "load_rules",
    "validate_rule_document",
]
