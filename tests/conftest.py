"""Shared fixtures for iniscan tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from iniscan.rule_engine.operations import Operation, OperationRegistry
from iniscan.rule_engine.snapshot import ConfigSnapshot, ValueResolver


class EqualsOperation(Operation):
    """Minimal check used by the tests: cast(found) == cast(expected)."""

    def execute(self, key: str, expected: Any, snapshot: ConfigSnapshot) -> bool:
        found = self.cast_value(self.find_value(key, snapshot))
        return found == self.cast_value(expected)


def _policy(**overrides: Any) -> dict:
    policy: dict[str, Any] = {
        "name": "allow-url-fopen",
        "description": "Do not allow remote file access",
        "level": "warning",
        "version": "5.4",
        "test": {"operation": "equals", "key": "k", "value": "5"},
    }
    policy.update(overrides)
    return policy


@pytest.fixture
def make_policy():
    return _policy


@pytest.fixture
def registry() -> OperationRegistry:
    reg = OperationRegistry()
    reg.register("equals", EqualsOperation)
    return reg


@pytest.fixture
def provider() -> MagicMock:
    """Default provider whose call count the tests can inspect."""
    mock = MagicMock()
    mock.get_default.side_effect = lambda key: {"x": "bar"}.get(key)
    return mock


@pytest.fixture
def resolver(provider: MagicMock) -> ValueResolver:
    return ValueResolver(provider)
