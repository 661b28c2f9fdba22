"""
Password strength test.

Scores a password out of six points and reports which checks it failed:

- 1 point for reaching the minimum length, 2 for reaching the bonus length
- 1 point each for a lower case letter, an upper case letter, a digit and
  a special character

A password scoring more than four points is valid. The score, the
strength percentage and a label are merged onto the Result.

The minimum and bonus lengths and any replacement check messages arrive
with each call and never modify the shared descriptor, so repeated calls
with the same input always produce the same result.
"""

import math
import re
from typing import Any, Dict, List, Mapping, Optional

from ..config import ApproveConfig
from ..core.exceptions import InvalidArgument
from ..core.formatter import fill_placeholders
from ..core.models import Outcome, StrengthScore, TestDescriptor

MAX_SCORE = 6

LOWER_PATTERN = re.compile(r"[a-z]")
UPPER_PATTERN = re.compile(r"[A-Z]")
NUMBER_PATTERN = re.compile(r"\d")
SPECIAL_PATTERN = re.compile(r"[!@#$%^&*?_~(),-]")

CHECK_MESSAGES: Dict[str, str] = {
    "isMinimum": "{title} must be at least {min} characters",
    "hasLower": "{title} must have at least 1 lower case character",
    "hasUpper": "{title} must have at least 1 upper case character",
    "hasNumber": "{title} must have at least 1 number",
    "hasSpecial": "{title} must have at least 1 special character",
}

# Order failed checks are reported in.
CHECK_ORDER = ("isMinimum", "hasLower", "hasUpper", "hasSpecial", "hasNumber")


def score_text(text: str, minimum: int, bonus: int) -> StrengthScore:
    """
    Score a password.

    Args:
        text: The password to score
        minimum: Length required for the minimum-length point
        bonus: Length required for the bonus point

    Returns:
        StrengthScore: The score breakdown
    """
    score = StrengthScore()
    if len(text) >= bonus:
        score.value += 2
        score.isBonus = True
        score.isMinimum = True
    elif len(text) >= minimum:
        score.value += 1
        score.isMinimum = True

    score.hasLower = LOWER_PATTERN.search(text) is not None
    score.hasUpper = UPPER_PATTERN.search(text) is not None
    score.hasNumber = NUMBER_PATTERN.search(text) is not None
    score.hasSpecial = SPECIAL_PATTERN.search(text) is not None
    score.value += sum((score.hasLower, score.hasUpper, score.hasNumber, score.hasSpecial))
    score.strength = math.ceil(score.value / MAX_SCORE * 100)
    return score


def length_setting(args: Dict[str, Any], name: str, default: int) -> int:
    """Read a length parameter, falling back to ``default`` when it is falsy."""
    raw = args.get(name) or default
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise InvalidArgument(f"{name} must be an integer, got {raw!r}", rule="strength") from None


def check_messages(config: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Merge per-call message overrides from ``config["messages"]`` over the defaults."""
    messages = dict(CHECK_MESSAGES)
    if isinstance(config, Mapping) and isinstance(config.get("messages"), Mapping):
        messages.update(
            (name, str(text)) for name, text in config["messages"].items() if name in messages
        )
    return messages


def strength_test(config: Optional[ApproveConfig] = None) -> TestDescriptor:
    """
    Build the strength test.

    Args:
        config: Settings supplying default lengths and strength labels

    Returns:
        TestDescriptor: The strength test, expecting ``min`` and ``bonus``
    """
    config = config or ApproveConfig()
    labels = dict(config.strength_labels)

    def validate(value: Any, args: Dict[str, Any]) -> Outcome:
        minimum = length_setting(args, "min", config.strength_min)
        bonus = length_setting(args, "bonus", config.strength_bonus)
        lengths = {"min": minimum, "bonus": bonus}
        messages = check_messages(args.get("config"))

        score = score_text("" if value is None else str(value), minimum, bonus)
        checks = score.to_dict()
        errors: List[str] = [
            fill_placeholders(messages[name], lengths) for name in CHECK_ORDER if not checks[name]
        ]
        valid = score.value > 4
        return Outcome(
            valid=valid,
            messages=tuple(errors),
            data={
                "valid": valid,
                "message": labels.get(score.value, ""),
                "score": checks,
            },
        )

    return TestDescriptor(
        validate=validate,
        message="{title} did not pass the strength test.",
        expects=("min", "bonus"),
    )
