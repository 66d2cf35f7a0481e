"""Pydantic models for policy definitions and evaluation results."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class TestDefinition(BaseModel):
    """What a rule checks: operation name, ini key, expected value."""

    __test__ = False  # not a pytest test class

    model_config = ConfigDict(frozen=True, extra="forbid")

    operation: str
    key: str | None = None
    value: Any = None
    context: list[Any] | None = None


class PolicyDefinition(BaseModel):
    """One rule catalog entry. Unknown fields are rejected."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    description: str = ""
    level: str = ""
    version: str | None = None
    section: str | None = None
    test: TestDefinition
    status: StrictBool = True


class RuleResult(BaseModel):
    name: str
    description: str = ""
    level: str = ""
    status: bool = True


class ScanError(BaseModel):
    rule_name: str
    error_type: str
    message: str = ""


class ScanReport(BaseModel):
    results: list[RuleResult] = Field(default_factory=list)
    errors: list[ScanError] = Field(default_factory=list)
    evaluated: int = 0

    @property
    def passed(self) -> list[RuleResult]:
        return [r for r in self.results if r.status]

    @property
    def failed(self) -> list[RuleResult]:
        return [r for r in self.results if not r.status]
