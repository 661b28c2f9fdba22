"""Command Line Interface for the approve validation engine.

This module provides a CLI for validating values from the shell and for
inspecting the test catalog.

The CLI supports the following commands:
    - check: Validate a value against a rule set
    - list: Display all registered tests
    - describe: Show a test's message template and expected parameters

Rule sets can be provided either as a direct JSON string or as a file path
prefixed with '@'.

Example Usage:
    python -m approve cli check "abc" '{"min": 5, "title": "Username"}'
    python -m approve cli check "s3cret" @rules/password.json --json
    python -m approve cli list
    python -m approve cli describe range
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import ApproveConfig, configure_logging
from .core.dispatcher import Approver
from .core.exceptions import ApproveError
from .utils.validation import ResultReporter, load_rules

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(description="Value validation CLI")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    check = subparsers.add_parser("check", help="Validate a value against a rule set")
    check.add_argument("value", help="Value to validate")
    check.add_argument("rules", help="JSON string or @filename containing the rule set")
    check.add_argument("--json", action="store_true", help="Print the result as JSON")

    subparsers.add_parser("list", help="List all registered tests")

    describe = subparsers.add_parser("describe", help="Describe a registered test")
    describe.add_argument("name", help="Name of the test")

    return parser


def check_value(approver: Approver, value: str, rules_text: str, as_json: bool = False) -> int:
    """Validate a value and print the result.

    Args:
        approver (Approver): The approver to dispatch with.
        value (str): The value to validate.
        rules_text (str): JSON rule set or @filename.
        as_json (bool): Print JSON instead of text.

    Returns:
        int: 0 when the value is approved, 1 otherwise.
    """
    result = approver.value(value, load_rules(rules_text))
    if as_json:
        print(ResultReporter.to_json(result))
    else:
        print(ResultReporter.format_result(result))
    return 0 if result.approved else 1


def list_tests(approver: Approver) -> None:
    """Display all registered test names."""
    for name in approver.catalog.names():
        print(name)


def describe_test(approver: Approver, name: str) -> None:
    """Display a test's default message and expected parameters."""
    test = approver.catalog.lookup(name)
    print(f"{name}")
    print(f"  Message: {test.message}")
    print(f"  Expects: {', '.join(test.expects) if test.expects else 'nothing'}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Handles command-line argument parsing and executes the requested command.

    Returns:
        int: Process exit status.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 2

    try:
        config = ApproveConfig.from_env()
        configure_logging(config)
        approver = Approver(config=config)

        if args.command == "check":
            return check_value(approver, args.value, args.rules, args.json)
        elif args.command == "list":
            list_tests(approver)
        elif args.command == "describe":
            describe_test(approver, args.name)
    except ApproveError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0
