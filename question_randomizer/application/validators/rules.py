"""Declarative validation rules for commands.

A validator declares, per field, an ordered chain of rules. Running a
validator never raises: it returns every violation found, in declaration
order, as ``ValidationError`` values.

Supported shapes:
    - Field chains: ``rule_for("name").not_empty(...).max_length(100, ...)``
    - Conditional chains: ``.when(lambda cmd: cmd.tags is not None)``
    - Per-element rules: ``rule_for("names").each(lambda item: item.not_empty(...))``
    - Child validators: ``rule_for("questions").each_child(QuestionInputValidator())``

Element and child violations are reported with indexed field paths such
as ``names[2]`` or ``questions[0].answer``.

Usage:
    class CreateCategoryValidator(Validator):
        def define(self) -> None:
            self.rule_for("name").not_empty(
                "Category name is required"
            ).max_length(100, "Category name must not exceed 100 characters")

    violations = CreateCategoryValidator().validate(command)
"""

from collections.abc import Callable, Sized
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Self

from question_randomizer.core.enums import ErrorCode
from question_randomizer.core.errors import ValidationError


@dataclass(frozen=True, slots=True)
class Rule:
    """Single predicate with the message reported when it fails.

    Attributes:
        name: Rule identifier reported with the violation (``not_empty``...).
        check: Returns True when the value is acceptable.
        message: Human-readable failure message.
    """

    name: str
    check: Callable[[Any], bool]
    message: str


def is_empty(value: Any) -> bool:
    """True for None, blank strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Sized):
        return len(value) == 0
    return False


class RuleChain:
    """Ordered rules for one field of a request.

    Every rule in the chain is evaluated (no early exit), so a single field
    can report several violations. Size rules ignore None; pair them with
    ``not_empty`` when the field is required.
    """

    def __init__(self, field: str, getter: Callable[[Any], Any]) -> None:
        self.field = field
        self._getter = getter
        self._rules: list[Rule] = []
        self._condition: Callable[[Any], bool] | None = None
        self._element_chain: RuleChain | None = None
        self._child_validator: Validator | None = None

    def not_empty(self, message: str) -> Self:
        self._rules.append(Rule("not_empty", lambda value: not is_empty(value), message))
        return self

    def max_length(self, limit: int, message: str) -> Self:
        self._rules.append(
            Rule(
                "max_length",
                lambda value: value is None or len(value) <= limit,
                message,
            )
        )
        return self

    def max_count(self, limit: int, message: str) -> Self:
        self._rules.append(
            Rule(
                "max_count",
                lambda value: value is None or len(value) <= limit,
                message,
            )
        )
        return self

    def one_of(self, allowed: set[str] | frozenset[str], message: str) -> Self:
        self._rules.append(
            Rule("one_of", lambda value: value is None or value in allowed, message)
        )
        return self

    def must(self, predicate: Callable[[Any], bool], message: str, name: str = "must") -> Self:
        self._rules.append(Rule(name, predicate, message))
        return self

    def when(self, condition: Callable[[Any], bool]) -> Self:
        """Only evaluate this chain when ``condition(request)`` is true."""
        self._condition = condition
        return self

    def each(self, configure: Callable[["RuleChain"], Any]) -> Self:
        """Apply a rule chain to every element of a list field."""
        element_chain = RuleChain(self.field, lambda element: element)
        configure(element_chain)
        self._element_chain = element_chain
        return self

    def each_child(self, validator: "Validator") -> Self:
        """Validate every element of a list field with another validator."""
        self._child_validator = validator
        return self

    def evaluate(self, request: Any, prefix: str = "") -> list[ValidationError]:
        """Collect violations for this field.

        Args:
            request: Object carrying the field.
            prefix: Path prepended to the field name (for nested validators).

        Returns:
            Violations in rule declaration order, then element violations.
        """
        if self._condition is not None and not self._condition(request):
            return []

        path = f"{prefix}{self.field}"
        value = self._getter(request)
        violations = [
            _violation(path, rule)
            for rule in self._rules
            if not rule.check(value)
        ]

        if value is None:
            return violations

        if self._element_chain is not None:
            for index, element in enumerate(value):
                violations.extend(
                    _violation(f"{path}[{index}]", rule)
                    for rule in self._element_chain._rules
                    if not rule.check(element)
                )

        if self._child_validator is not None:
            for index, element in enumerate(value):
                violations.extend(
                    self._child_validator.validate(element, prefix=f"{path}[{index}].")
                )

        return violations


class Validator:
    """Base class for declarative request validators.

    Subclasses implement ``define()`` and call ``rule_for`` for each field.
    Instances are stateless after construction and safe to share.
    """

    def __init__(self) -> None:
        self._chains: list[RuleChain] = []
        self.define()

    def define(self) -> None:
        """Declare rule chains. Implemented by subclasses."""
        raise NotImplementedError

    def rule_for(
        self, field: str, getter: Callable[[Any], Any] | None = None
    ) -> RuleChain:
        """Start a rule chain for ``field`` (read with attrgetter by default)."""
        chain = RuleChain(field, getter or attrgetter(field))
        self._chains.append(chain)
        return chain

    def validate(self, request: Any, prefix: str = "") -> list[ValidationError]:
        """Run every chain and return all violations (empty list means valid)."""
        violations: list[ValidationError] = []
        for chain in self._chains:
            violations.extend(chain.evaluate(request, prefix))
        return violations


def _violation(field: str, rule: Rule) -> ValidationError:
    return ValidationError(
        code=ErrorCode.VALIDATION_FAILED,
        message=rule.message,
        field=field,
        rule=rule.name,
    )
