"""Operation contract and the closed registry that maps names to checks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from iniscan.rule_engine.casting import cast_value
from iniscan.rule_engine.errors import RuleEngineError
from iniscan.rule_engine.snapshot import ConfigSnapshot, ValueResolver


class UnknownOperation(RuleEngineError):
    """Raised when a rule names an operation nobody registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Invalid operation "{name}"')
        self.name = name


class Operation(ABC):
    """A named boolean check over one ini setting.

    Operations are built per evaluation with the rule's section and the
    resolver the rule was given, so implementations can look up and cast
    values themselves.
    """

    def __init__(self, section: str | None, resolver: ValueResolver) -> None:
        self.section = section
        self.resolver = resolver

    def find_value(self, path: str, snapshot: ConfigSnapshot) -> Any:
        return self.resolver.find_value(path, snapshot)

    def cast_value(self, value: Any) -> Any:
        return cast_value(value)

    @abstractmethod
    def execute(self, key: str, expected: Any, snapshot: ConfigSnapshot) -> bool: ...


OperationFactory = Callable[[str | None, ValueResolver], Operation]


def canonical_name(name: str) -> str:
    """Normalize an operation name: "booleanTrue " -> "BOOLEANTRUE"."""
    return name.strip().upper()


class OperationRegistry:
    _factories: dict[str, OperationFactory]

    def __init__(self) -> None:
        self._factories = {}

    def register(
        self, name: str, factory: OperationFactory | None = None
    ) -> Callable[[OperationFactory], OperationFactory] | OperationFactory:
        """Register factory under name. Without a factory, acts as a decorator."""
        key = canonical_name(name)
        if not key:
            raise ValueError("Operation name must not be empty")

        def _add(f: OperationFactory) -> OperationFactory:
            if key in self._factories:
                raise ValueError(f"Operation '{key}' is already registered")
            self._factories[key] = f
            return f

        if factory is None:
            return _add
        return _add(factory)

    def unregister(self, name: str) -> None:
        self._factories.pop(canonical_name(name), None)

    def get(self, name: str) -> OperationFactory:
        factory = self._factories.get(canonical_name(name))
        if factory is None:
            raise UnknownOperation(name)
        return factory

    def create(self, name: str, section: str | None, resolver: ValueResolver) -> Operation:
        return self.get(name)(section, resolver)

    def names(self) -> list[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and canonical_name(name) in self._factories

    def __len__(self) -> int:
        return len(self._factories)


# Process-wide registry; plug-ins register here at import time.
default_registry = OperationRegistry()
