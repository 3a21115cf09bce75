"""
Diagnostic rule registry.

Every finding the engine can report belongs to one rule. A rule pairs a
stable code and name with a default severity and the catalog entry used to
word it. ``RuleConfiguration`` lets callers switch individual rules off.

Example:
    config = RuleConfiguration()
    config.allow("missing-semicolon")
    diagnostics = compute_diagnostics(Dialect.JAVA, text, config=config)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from hovererrors.engine.messages import MessageKind


class Severity(Enum):
    """Severity of a diagnostic."""

    ERROR = "error"
    WARNING = "warning"


class RuleCategory(Enum):
    """Categories of rules for listing and filtering."""

    STRUCTURE = "structure"      # Bracket balance
    STYLE = "style"              # Statement terminators
    CORRECTNESS = "correctness"  # Undeclared names
    UNUSED = "unused"            # Declared but never called


@dataclass(frozen=True)
class Rule:
    """
    Definition of a single diagnostic rule.

    Attributes:
        code: Unique rule identifier (e.g., "E0001")
        name: Human-readable rule name, equal to its catalog key
        category: The category this rule belongs to
        kind: Catalog entry used for the message and hint
        severity: Severity of the emitted diagnostics
    """

    code: str
    name: str
    category: RuleCategory
    kind: MessageKind
    severity: Severity = Severity.ERROR

    def __str__(self) -> str:
        return f"{self.code} ({self.name})"


INCOMPLETE_BLOCK = Rule(
    code="E0001",
    name="incomplete-block",
    category=RuleCategory.STRUCTURE,
    kind=MessageKind.INCOMPLETE_BLOCK,
)

MISSING_SEMICOLON = Rule(
    code="E0002",
    name="missing-semicolon",
    category=RuleCategory.STYLE,
    kind=MessageKind.MISSING_SEMICOLON,
)

UNDEFINED_VARIABLE = Rule(
    code="E0003",
    name="undefined-variable",
    category=RuleCategory.CORRECTNESS,
    kind=MessageKind.UNDEFINED_VARIABLE,
)

UNUSED_FUNCTION = Rule(
    code="W0001",
    name="unused-function",
    category=RuleCategory.UNUSED,
    kind=MessageKind.UNUSED_FUNCTION,
    severity=Severity.WARNING,
)


ALL_RULES: dict[str, Rule] = {
    rule.code: rule
    for rule in (INCOMPLETE_BLOCK, MISSING_SEMICOLON, UNDEFINED_VARIABLE, UNUSED_FUNCTION)
}

RULES_BY_NAME: dict[str, Rule] = {rule.name: rule for rule in ALL_RULES.values()}


def get_rule(rule_id: str) -> Optional[Rule]:
    """Get a rule by its code or its name."""
    return ALL_RULES.get(rule_id) or RULES_BY_NAME.get(rule_id)


@dataclass
class RuleConfiguration:
    """
    Which rules are switched off.

    Rules are identified by code or by name; both forms are accepted
    everywhere a rule id is taken.
    """

    disabled: set[str] = field(default_factory=set)

    def is_enabled(self, rule: Rule) -> bool:
        return rule.code not in self.disabled and rule.name not in self.disabled

    def allow(self, rule_id: str) -> None:
        """
        Disable a rule.

        Raises:
            KeyError: If ``rule_id`` names no rule
        """
        rule = get_rule(rule_id)
        if rule is None:
            raise KeyError(rule_id)
        self.disabled.add(rule.code)

    @classmethod
    def from_disabled(cls, rule_ids: list[str]) -> "RuleConfiguration":
        """Build a configuration, ignoring ids that name no rule."""
        config = cls()
        for rule_id in rule_ids:
            if get_rule(rule_id) is not None:
                config.allow(rule_id)
        return config
