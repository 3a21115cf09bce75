"""
Diagnostic assembly.

``compute_diagnostics`` runs every check family a dialect enables over the
full text, words the findings in the requested language and returns them in
a fixed order: bracket errors, missing semicolons, undefined references,
unused functions. The result depends only on the arguments.

A check family that raises is logged and skipped so the others still report.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional, TypeVar

from hovererrors.engine.checks import (
    Finding,
    check_brackets,
    check_semicolons,
    check_undefined_references,
    check_unused_functions,
)
from hovererrors.engine.dialects import Dialect
from hovererrors.engine.messages import Language, hint, render
from hovererrors.engine.rules import Rule, RuleConfiguration, Severity
from hovererrors.engine.text import Range

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Diagnostic:
    """
    A positioned, severity-tagged message.

    Attributes:
        range: Span of the offending text
        message: Text in the active language
        severity: Error or warning
        rule: The rule that produced it
        name: The offending identifier, when the rule names one
    """

    range: Range
    message: str
    severity: Severity
    rule: Rule
    name: Optional[str] = None

    @property
    def code(self) -> str:
        return self.rule.code

    def hint(self, language: Language) -> str:
        """Guidance for fixing this diagnostic."""
        return hint(self.rule.kind, language)

    def __str__(self) -> str:
        start = self.range.start
        return f"[{self.rule.code}] {start.line + 1}:{start.column + 1}: {self.message}"


def run_isolated(name: str, check: Callable[[], T], fallback: T) -> T:
    """Run one check family; log and return ``fallback`` if it raises."""
    try:
        return check()
    except Exception:
        logger.exception("check '%s' failed; continuing without it", name)
        return fallback


def collect_findings(dialect: Dialect, text: str) -> list[Finding]:
    """Run every check family enabled for ``dialect``, in reporting order."""
    profile = dialect.profile
    findings = run_isolated("brackets", lambda: check_brackets(text), [])
    if profile.checks_semicolons:
        findings += run_isolated("semicolons", lambda: check_semicolons(text), [])
    findings += run_isolated(
        "undefined-references", lambda: check_undefined_references(text, profile), []
    )
    if profile.checks_unused_functions:
        findings += run_isolated("unused-functions", lambda: check_unused_functions(text), [])
    return findings


def to_diagnostic(finding: Finding, language: Language) -> Diagnostic:
    """Word a finding in ``language``."""
    return Diagnostic(
        range=finding.range,
        message=render(finding.rule.kind, language, finding.name),
        severity=finding.rule.severity,
        rule=finding.rule,
        name=finding.name,
    )


def compute_diagnostics(
    dialect: Dialect,
    text: str,
    language: Language = Language.EN,
    config: Optional[RuleConfiguration] = None,
) -> list[Diagnostic]:
    """
    Compute the full diagnostic set for a document.

    Args:
        dialect: Dialect of the document
        text: Full document text
        language: Language of the messages
        config: Optional rule configuration; all rules run by default

    Returns:
        Diagnostics in reporting order
    """
    config = config or RuleConfiguration()
    diagnostics = [
        to_diagnostic(finding, language)
        for finding in collect_findings(dialect, text)
        if config.is_enabled(finding.rule)
    ]
    logger.debug("%d diagnostic(s) for %s text", len(diagnostics), dialect.value)
    return diagnostics
