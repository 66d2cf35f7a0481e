"""Exceptions raised while building or evaluating rules."""

from __future__ import annotations


class RuleEngineError(Exception):
    """Base class for rule engine failures."""


class MissingTestKey(RuleEngineError):
    """Raised when a rule's test has no ini key to check."""

    def __init__(self, rule_name: str | None = None) -> None:
        msg = "Test key not found"
        if rule_name:
            msg += f" for rule '{rule_name}'"
        super().__init__(msg)
        self.rule_name = rule_name


class InvalidStatus(RuleEngineError, TypeError):
    """Raised when a rule status is set to something other than a bool."""
