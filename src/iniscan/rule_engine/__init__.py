"""Rule engine: policy rules, value resolution and operation dispatch."""

from iniscan.rule_engine.casting import cast_powers, cast_value
from iniscan.rule_engine.config import AuditConfig, load_audit_config
from iniscan.rule_engine.defaults import PhpIniDefaults, StaticDefaults
from iniscan.rule_engine.errors import InvalidStatus, MissingTestKey, RuleEngineError
from iniscan.rule_engine.models import (
    PolicyDefinition,
    RuleResult,
    ScanError,
    ScanReport,
    TestDefinition,
)
from iniscan.rule_engine.operations import (
    Operation,
    OperationRegistry,
    UnknownOperation,
    canonical_name,
    default_registry,
)
from iniscan.rule_engine.rule import Rule
from iniscan.rule_engine.scanner import scan, scan_with_config
from iniscan.rule_engine.severity import LEVEL_RANKS, Severity, severity_rank
from iniscan.rule_engine.snapshot import (
    DEFAULT_SECTION,
    ConfigSnapshot,
    DefaultProvider,
    ValueResolver,
    find_value,
    get_section,
)

__all__ = [
    "DEFAULT_SECTION",
    "LEVEL_RANKS",
    "AuditConfig",
    "ConfigSnapshot",
    "DefaultProvider",
    "InvalidStatus",
    "MissingTestKey",
    "Operation",
    "OperationRegistry",
    "PhpIniDefaults",
    "PolicyDefinition",
    "Rule",
    "RuleEngineError",
    "RuleResult",
    "ScanError",
    "ScanReport",
    "Severity",
    "StaticDefaults",
    "TestDefinition",
    "UnknownOperation",
    "ValueResolver",
    "canonical_name",
    "cast_powers",
    "cast_value",
    "default_registry",
    "find_value",
    "get_section",
    "load_audit_config",
    "scan",
    "scan_with_config",
    "severity_rank",
]
