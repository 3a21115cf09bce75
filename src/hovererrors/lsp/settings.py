"""
Client-owned settings for the language server.

The client sends its ``hoverErrors`` section in the initialization options
and again whenever it changes. The server stores the latest values here and
every check reads them at the moment it runs, so a preference change applies
from the next triggering event on.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from hovererrors.engine.messages import Language
from hovererrors.engine.rules import RuleConfiguration

logger = logging.getLogger("hovererrors-lsp")

SETTINGS_SECTION = "hoverErrors"


@dataclass
class ServerSettings:
    """
    Latest settings received from the client.

    Attributes:
        language: Message language preference (``en`` by default)
        disabled_rules: Rule codes or names the user switched off
    """

    language: Language = Language.EN
    disabled_rules: list[str] = field(default_factory=list)

    def rule_configuration(self) -> RuleConfiguration:
        return RuleConfiguration.from_disabled(self.disabled_rules)

    def update(self, payload: Any) -> None:
        """
        Apply a settings payload.

        Accepts either the bare section (``{"language": "hi"}``) or a payload
        wrapping it (``{"hoverErrors": {"language": "hi"}}``). Keys that are
        absent keep their current value.
        """
        if not isinstance(payload, dict):
            return
        section = payload.get(SETTINGS_SECTION, payload)
        if not isinstance(section, dict):
            return

        if "language" in section:
            self.language = Language.from_setting(section["language"])
        if "disabledRules" in section:
            rules = section["disabledRules"] or []
            self.disabled_rules = [str(rule) for rule in rules]

        logger.info(
            f"Settings updated: language={self.language.value}, "
            f"disabled rules={self.disabled_rules or 'none'}"
        )
