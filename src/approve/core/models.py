"""
Core data models for the approve validation engine.

This module provides the shapes that flow through a validation call:
- TestDescriptor: the registered definition of a test
- Outcome: the tagged result a test produces (pass or fail, plus extra data)
- Result: the uniform result returned to callers
- StrengthScore: the score breakdown produced by the strength test
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from .exceptions import InvalidArgument, InvalidTestReturn

Validator = Callable[[Any, Dict[str, Any]], Any]


@dataclass(frozen=True)
class TestDescriptor:
    """
    Registered definition of a validation test.

    Descriptors are immutable. Any state a test needs (compiled patterns,
    default labels) is captured when the descriptor is built and everything
    that varies per call arrives through the argument bundle.

    Attributes:
        validate: Callable taking ``(value, args)`` and returning a bool, an
            Outcome or a mapping with a ``valid`` key
        message: Default message template with ``{placeholder}`` tokens
        expects: Ordered names of the parameters the test needs, empty when
            the test takes none
    """

    __test__ = False

    validate: Validator
    message: str
    expects: Tuple[str, ...] = ()

    def __post_init__(self):
        if not callable(self.validate):
            raise InvalidArgument("validate must be callable")
        if not isinstance(self.message, str):
            raise InvalidArgument("message must be a string")
        expects = self.expects
        if expects is None or expects is False:
            expects = ()
        elif isinstance(expects, str) or not isinstance(expects, Sequence):
            raise InvalidArgument("expects must be false or a sequence of parameter names")
        if not all(isinstance(name, str) and name for name in expects):
            raise InvalidArgument("expected parameter names must be non-empty strings")
        object.__setattr__(self, "expects", tuple(expects))

    @classmethod
    def from_object(cls, obj: Any) -> "TestDescriptor":
        """
        Build a descriptor from a descriptor, a mapping or a duck-typed object.

        Custom tests may be supplied in any of three shapes: an existing
        TestDescriptor, a mapping with ``validate``/``message``/``expects``
        keys, or any object exposing those attributes.

        Args:
            obj: The test definition to normalize

        Returns:
            TestDescriptor: The normalized, immutable descriptor

        Raises:
            InvalidArgument: If the object does not describe a test

        Example:
            >>> TestDescriptor.from_object({
            ...     "validate": lambda value, args: value == "yes",
            ...     "message": "{title} must be yes",
            ...     "expects": False,
            ... })
        """
        if isinstance(obj, cls):
            return obj
        if isinstance(obj, Mapping):
            if "validate" not in obj:
                raise InvalidArgument("test object has no validate function")
            return cls(
                validate=obj["validate"],
                message=obj.get("message", ""),
                expects=obj.get("expects", ()),
            )
        if obj is None or isinstance(obj, (str, bytes, int, float, bool)):
            raise InvalidArgument("test is not a valid object")
        if not callable(getattr(obj, "validate", None)):
            raise InvalidArgument("test object has no validate function")
        return cls(
            validate=obj.validate,
            message=getattr(obj, "message", ""),
            expects=getattr(obj, "expects", ()),
        )

    def run(self, value: Any, args: Dict[str, Any]) -> Any:
        """Invoke the validate function."""
        return self.validate(value, args)


@dataclass(frozen=True)
class Outcome:
    """
    Tagged outcome of a single test run.

    Attributes:
        valid: Whether the value passed the test
        messages: Unformatted message templates describing the failures
        data: Extra properties merged onto the Result (e.g. ``score``)
        structured: False when the outcome came from a plain boolean
    """

    valid: bool
    messages: Tuple[str, ...] = ()
    data: Mapping[str, Any] = field(default_factory=dict)
    structured: bool = True

    @classmethod
    def passed(cls, **data: Any) -> "Outcome":
        """Create a passing outcome carrying optional extra data."""
        return cls(valid=True, data=data)

    @classmethod
    def failed(cls, messages: Sequence[str] = (), **data: Any) -> "Outcome":
        """Create a failing outcome with message templates and optional extra data."""
        return cls(valid=False, messages=tuple(messages), data=data)

    @classmethod
    def coerce(cls, raw: Any, rule: str) -> "Outcome":
        """
        Normalize whatever a validate function returned into an Outcome.

        Booleans become unstructured outcomes. Mappings are read the way
        structured test results have always been read: a missing or falsy
        ``valid`` key means failure, ``errors`` holds message templates and
        every other key is extra data for the Result.

        Args:
            raw: The validate function's return value
            rule: Rule name, used for error reporting

        Returns:
            Outcome: The normalized outcome

        Raises:
            InvalidTestReturn: If the value is not a bool, Outcome or mapping
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, bool):
            return cls(valid=raw, structured=False)
        if isinstance(raw, Mapping):
            errors = raw.get("errors") or ()
            if isinstance(errors, str):
                errors = (errors,)
            data = {key: val for key, val in raw.items() if key != "errors"}
            return cls(valid=bool(raw.get("valid")), messages=tuple(errors), data=data)
        raise InvalidTestReturn(rule, raw)


@dataclass
class Result:
    """
    Uniform result of a validation call.

    Extra data merged in from a structured outcome is kept in ``extra`` and
    is also readable as attributes or items, so ``result.score`` and
    ``result["score"]`` both work after a strength test.

    Attributes:
        approved: Whether the value passed
        errors: Formatted error messages in insertion order
        extra: Extra properties merged from a structured outcome
    """

    approved: bool = True
    errors: List[str] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        extra = self.__dict__.get("extra")
        if extra is not None and name in extra:
            return extra[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __getitem__(self, key: str) -> Any:
        if key in ("approved", "errors"):
            return getattr(self, key)
        return self.extra[key]

    def merge(self, data: Mapping[str, Any]) -> None:
        """Merge extra properties onto the result."""
        self.extra.update(data)

    def each(self, callback: Optional[Callable[[str], Any]]) -> None:
        """
        Call ``callback`` for every error, most recently added first.

        A callback that is not callable is ignored.
        """
        if not callable(callback):
            return
        for error in reversed(self.errors):
            callback(error)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten the result, extras included, into a plain dictionary."""
        data: Dict[str, Any] = dict(self.extra)
        data["approved"] = self.approved
        data["errors"] = list(self.errors)
        return data


@dataclass
class StrengthScore:
    """
    Score breakdown for a password checked by the strength test.

    Field names mirror the keys callers read from ``result.score``.
    """

    value: int = 0
    isMinimum: bool = False
    hasLower: bool = False
    hasUpper: bool = False
    hasNumber: bool = False
    hasSpecial: bool = False
    isBonus: bool = False
    strength: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
