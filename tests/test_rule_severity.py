"""Tests for rule_engine/severity.py — severity labels and ranks."""

from __future__ import annotations

from iniscan.rule_engine.severity import LEVEL_RANKS, Severity, severity_rank


class TestSeverityEnum:
    def test_has_three_values(self):
        assert len(Severity) == 3

    def test_is_str_enum(self):
        from enum import StrEnum

        assert issubclass(Severity, StrEnum)

    def test_string_comparison(self):
        assert Severity.WARNING == "warning"
        assert str(Severity.FATAL) == "fatal"


class TestSeverityRank:
    def test_known_levels(self):
        assert severity_rank("warning") == 10
        assert severity_rank("error") == 20
        assert severity_rank("fatal") == 30

    def test_case_insensitive(self):
        assert severity_rank("WARNING") == 10
        assert severity_rank("Error") == 20

    def test_unknown_level_is_zero(self):
        assert severity_rank("notice") == 0
        assert severity_rank("") == 0

    def test_none_is_zero(self):
        assert severity_rank(None) == 0

    def test_ordering(self):
        assert severity_rank("warning") < severity_rank("error") < severity_rank("fatal")

    def test_table_covers_every_enum_member(self):
        assert set(LEVEL_RANKS) == {s.value for s in Severity}
