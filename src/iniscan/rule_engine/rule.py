"""Rule: one policy check against the effective ini configuration."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from iniscan.rule_engine.defaults import PhpIniDefaults
from iniscan.rule_engine.errors import InvalidStatus, MissingTestKey
from iniscan.rule_engine.models import PolicyDefinition, RuleResult, TestDefinition
from iniscan.rule_engine.operations import OperationRegistry, default_registry
from iniscan.rule_engine.severity import severity_rank
from iniscan.rule_engine.snapshot import ConfigSnapshot, ValueResolver
from iniscan.rule_engine.snapshot import get_section as _section_of

logger = logging.getLogger(__name__)


class Rule:
    """A catalog entry plus its pass/fail status.

    Everything except the status is fixed once the policy definition is
    loaded. Status starts out True, so a rule that was never evaluated
    reads as passing.
    """

    _definition: PolicyDefinition
    _explicit_section: str | None
    _section: str | None
    _status: bool

    def __init__(
        self,
        config: PolicyDefinition | Mapping[str, Any],
        section: str | None = None,
        *,
        registry: OperationRegistry | None = None,
        resolver: ValueResolver | None = None,
    ) -> None:
        self._registry = registry or default_registry
        self._resolver = resolver
        self._status = True
        self._explicit_section = section
        self.set_config(config)

    def set_config(self, config: PolicyDefinition | Mapping[str, Any]) -> None:
        """Load name, description, level, version, section, test and status.

        Raises pydantic.ValidationError for unknown or malformed fields.
        """
        if not isinstance(config, PolicyDefinition):
            config = PolicyDefinition.model_validate(dict(config))
        self._definition = config
        if self._explicit_section is not None:
            self._section = self._explicit_section
        elif config.section is not None:
            self._section = config.section
        elif config.test.key:
            self._section = _section_of(config.test.key)
        else:
            self._section = None
        self._status = config.status

    @property
    def name(self) -> str:
        return self._definition.name

    @property
    def description(self) -> str:
        return self._definition.description

    @property
    def level(self) -> str:
        return self._definition.level

    @property
    def version(self) -> str | None:
        return self._definition.version

    @property
    def test(self) -> TestDefinition:
        return self._definition.test

    @property
    def context(self) -> list[Any] | None:
        return self.test.context

    @property
    def section(self) -> str | None:
        return self._section

    @property
    def status(self) -> bool:
        return self._status

    @property
    def resolver(self) -> ValueResolver:
        if self._resolver is None:
            self._resolver = ValueResolver(PhpIniDefaults())
        return self._resolver

    def get_section(self, path: str | None = None) -> str | None:
        """Stored section, or the section a dotted ini path belongs to."""
        if path is None:
            return self._section
        return _section_of(path)

    def get_test_key(self) -> str:
        key = self.test.key
        if key is None:
            raise MissingTestKey(self.name)
        return key

    def set_status(self, flag: bool) -> None:
        if not isinstance(flag, bool):
            raise InvalidStatus(f"Status must be boolean, got {type(flag).__name__}")
        self._status = flag

    def mark_pass(self) -> None:
        self.set_status(True)

    def mark_fail(self) -> None:
        self.set_status(False)

    def respect_threshold(self, wanted_level: str | None) -> bool:
        """True if this rule is at least as severe as wanted_level."""
        if wanted_level is None:
            return True
        return severity_rank(self.level) >= severity_rank(wanted_level)

    def result(self) -> RuleResult:
        return RuleResult(
            name=self.name,
            description=self.description,
            level=self.level,
            status=self._status,
        )

    def values(self) -> dict[str, Any]:
        return self.result().model_dump()

    def evaluate(self, snapshot: ConfigSnapshot) -> bool:
        """Run the rule's operation against snapshot and record the outcome.

        The snapshot may gain entries for settings that had to be looked up
        as runtime defaults. Lookup errors are raised before the status is
        touched.
        """
        test = self.test
        factory = self._registry.get(test.operation)
        key = self.get_test_key()
        operation = factory(self._section, self.resolver)

        if operation.execute(key, test.value, snapshot):
            self.mark_pass()
        else:
            self.mark_fail()
        logger.debug("Rule %s (%s %s): %s", self.name, test.operation, key, self._status)
        return self._status

    def __repr__(self) -> str:
        return f"Rule(name={self.name!r}, level={self.level!r}, status={self._status!r})"
