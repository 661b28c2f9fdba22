"""
Rule dispatch for the approve validation engine.

The Approver resolves a rule set against its catalog, runs the selected
test and normalizes the outcome into a Result:

    value -> first rule key -> catalog lookup -> argument extraction
          -> validate -> outcome normalization -> message formatting

Only the first rule key of a rule set (ignoring the reserved ``title`` and
``message`` keys) is evaluated per call. Callers wanting several
constraints on one value issue one call per rule.
"""

import logging
from typing import Any, List, Mapping, Optional

from ..config import ApproveConfig
from .arguments import TestParams, extract_args, format_context
from .catalog import TestCatalog
from .exceptions import InvalidArgument
from .formatter import format_message
from .models import Outcome, Result

logger = logging.getLogger(__name__)

TITLE_KEY = "title"
MESSAGE_KEY = "message"
RESERVED_KEYS = (TITLE_KEY, MESSAGE_KEY)


class Approver:
    """
    Validates values against rule sets using a test catalog.

    Attributes:
        catalog (TestCatalog): Registry the rule names are resolved against
        config (ApproveConfig): Engine settings
    """

    def __init__(
        self,
        catalog: Optional[TestCatalog] = None,
        config: Optional[ApproveConfig] = None,
    ):
        """
        Initialize an approver.

        Args:
            catalog: Catalog to dispatch against; a catalog holding the
                built-in tests is created when omitted
            config: Engine settings; defaults are used when omitted
        """
        self.config = config or ApproveConfig()
        self.catalog = catalog if catalog is not None else TestCatalog.with_builtins(self.config)

    def value(self, value: Any, rules: Mapping[str, Any]) -> Result:
        """
        Validate a value against a rule set.

        Args:
            value: The value to test
            rules: Mapping of rule name to constraint, plus an optional
                ``title`` used in messages and an optional ``message``
                replacing the default error message

        Returns:
            Result: ``approved`` plus formatted ``errors`` and any extra data
            produced by the test

        Raises:
            InvalidArgument: If ``rules`` is not a mapping
            TestNotDefined: If the rule name has no registered test
            MissingParameter: If the constraint lacks a parameter the test needs

        Example:
            >>> result = Approver().value("", {"required": True, "title": "Name"})
            >>> result.approved
            False
            >>> result.errors
            ['Name is required']
        """
        if not isinstance(rules, Mapping):
            raise InvalidArgument("rules is not a valid mapping")

        rule_names: List[str] = [name for name in rules if name not in RESERVED_KEYS]
        if not rule_names:
            logger.debug("Rule set has no rules, approving")
            return Result()
        if len(rule_names) > 1:
            logger.debug(f"Only the first rule is evaluated, ignoring: {rule_names[1:]}")

        rule = rule_names[0]
        title = rules.get(TITLE_KEY, "")
        test = self.catalog.lookup(rule)
        params = TestParams(
            constraint=rules[rule],
            rule=rule,
            title="" if title is None else str(title),
            test=test,
            value=value,
        )
        return self.run_test(params, rules.get(MESSAGE_KEY))

    def run_test(self, params: TestParams, override: Optional[str] = None) -> Result:
        """
        Run a single test and normalize its outcome into a Result.

        Args:
            params: The parameter bundle for the rule
            override: Rule-set level message replacing the default one

        Returns:
            Result: The normalized result

        Raises:
            MissingParameter: If argument extraction fails
            InvalidTestReturn: If the test returns an unsupported value
        """
        result = Result()
        args = extract_args(params, self.config.shorthand_pattern)
        outcome = Outcome.coerce(params.test.run(params.value, args), params.rule)
        logger.debug(f"Test {params.rule} returned valid={outcome.valid}")

        if not outcome.valid:
            result.approved = False
        if outcome.structured:
            context = format_context(params, self.config.shorthand_pattern)
            result.errors.extend(self.format(template, context) for template in outcome.messages)
            result.merge(outcome.data)
        if not result.approved and not outcome.messages:
            result.errors.append(self.select_message(params, override))
        return result

    def select_message(self, params: TestParams, override: Optional[str] = None) -> str:
        """
        Choose the error message for a failed rule.

        A ``message`` on the constraint, or failing that on the rule set, is
        used verbatim. Otherwise the test's default template is formatted
        with the rule's Format Context.
        """
        keyed = params.keyed
        if MESSAGE_KEY in keyed:
            return str(keyed[MESSAGE_KEY])
        if override is not None:
            return str(override)
        context = format_context(params, self.config.shorthand_pattern)
        return self.format(params.test.message, context)

    def format(self, template: str, context: Mapping[str, Any]) -> str:
        return format_message(template, context, strict=self.config.strict_placeholders)

    def add_test(self, test: Any, name: str) -> bool:
        """
        Register a custom test.

        Args:
            test: A TestDescriptor, a mapping or an object exposing
                ``validate``, ``message`` and ``expects``
            name: Rule name for the test

        Returns:
            bool: True if added, False if the name was already registered

        Raises:
            InvalidArgument: If the test is not a well-formed object
        """
        return self.catalog.register(name, test)
