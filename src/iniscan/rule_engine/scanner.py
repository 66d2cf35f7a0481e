"""Evaluate a set of rules against one shared snapshot."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from iniscan.rule_engine.config import AuditConfig
from iniscan.rule_engine.errors import RuleEngineError
from iniscan.rule_engine.models import ScanError, ScanReport
from iniscan.rule_engine.rule import Rule
from iniscan.rule_engine.snapshot import ConfigSnapshot

logger = logging.getLogger(__name__)


def scan(
    rules: Iterable[Rule],
    snapshot: ConfigSnapshot,
    *,
    threshold: str | None = None,
    fail_fast: bool = False,
) -> ScanReport:
    """Evaluate every rule and collect results at or above threshold.

    Rules below the threshold are still evaluated so their lookups warm the
    snapshot. A rule that raises is recorded in ``errors`` and left out of
    ``results``; with fail_fast the exception propagates instead.
    """
    report = ScanReport()
    for rule in rules:
        try:
            rule.evaluate(snapshot)
        except RuleEngineError as e:
            if fail_fast:
                raise
            logger.warning("Rule %s could not be evaluated: %s", rule.name, e)
            report.errors.append(
                ScanError(rule_name=rule.name, error_type=type(e).__name__, message=str(e))
            )
            continue
        report.evaluated += 1
        if rule.respect_threshold(threshold):
            report.results.append(rule.result())
    return report


def scan_with_config(
    rules: Iterable[Rule], snapshot: ConfigSnapshot, config: AuditConfig
) -> ScanReport:
    """scan() using the threshold and fail_fast settings from config."""
    return scan(rules, snapshot, threshold=config.threshold, fail_fast=config.fail_fast)
