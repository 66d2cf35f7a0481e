"""Tests for rule_engine/defaults.py — runtime default providers."""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock, patch

from iniscan.rule_engine.config import AuditConfig
from iniscan.rule_engine.defaults import PhpIniDefaults, StaticDefaults


def _make_proc(stdout: str = "", returncode: int = 0, stderr: str = "") -> MagicMock:
    proc = MagicMock()
    proc.stdout = stdout
    proc.returncode = returncode
    proc.stderr = stderr
    return proc


class TestStaticDefaults:
    def test_known_key(self):
        assert StaticDefaults({"expose_php": "1"}).get_default("expose_php") == "1"

    def test_unknown_key_is_none(self):
        assert StaticDefaults().get_default("expose_php") is None

    def test_copies_mapping(self):
        source = {"a": "1"}
        provider = StaticDefaults(source)
        source["a"] = "2"
        assert provider.get_default("a") == "1"


class TestPhpIniDefaults:
    def test_runs_ini_get_with_key_as_argument(self):
        provider = PhpIniDefaults(AuditConfig(php_binary="/opt/php", lookup_timeout=3))
        with patch("iniscan.rule_engine.defaults.subprocess.run") as mock_run:
            mock_run.return_value = _make_proc(stdout='"1"')
            assert provider.get_default("expose_php") == "1"
        mock_run.assert_called_once_with(
            ["/opt/php", "-r", "echo json_encode(ini_get($argv[1]));", "--", "expose_php"],
            capture_output=True,
            text=True,
            timeout=3,
        )

    def test_empty_string_value(self):
        provider = PhpIniDefaults()
        with patch("iniscan.rule_engine.defaults.subprocess.run") as mock_run:
            mock_run.return_value = _make_proc(stdout='""')
            assert provider.get_default("open_basedir") == ""

    def test_unknown_setting_is_none(self):
        provider = PhpIniDefaults()
        with patch("iniscan.rule_engine.defaults.subprocess.run") as mock_run:
            mock_run.return_value = _make_proc(stdout="false")
            assert provider.get_default("no_such_setting") is None

    def test_unparseable_output_is_none(self):
        provider = PhpIniDefaults()
        with patch("iniscan.rule_engine.defaults.subprocess.run") as mock_run:
            mock_run.return_value = _make_proc(stdout="PHP Warning: oops")
            assert provider.get_default("x") is None

    def test_nonzero_exit_is_none(self):
        provider = PhpIniDefaults()
        with patch("iniscan.rule_engine.defaults.subprocess.run") as mock_run:
            mock_run.return_value = _make_proc(returncode=255, stderr="fatal")
            assert provider.get_default("x") is None

    def test_missing_binary_is_none(self):
        provider = PhpIniDefaults()
        with patch("iniscan.rule_engine.defaults.subprocess.run") as mock_run:
            mock_run.side_effect = FileNotFoundError("php")
            assert provider.get_default("x") is None

    def test_timeout_is_none(self):
        provider = PhpIniDefaults()
        with patch("iniscan.rule_engine.defaults.subprocess.run") as mock_run:
            mock_run.side_effect = subprocess.TimeoutExpired(cmd="php", timeout=5)
            assert provider.get_default("x") is None

    def test_is_available(self):
        provider = PhpIniDefaults()
        with patch("iniscan.rule_engine.defaults.subprocess.run") as mock_run:
            mock_run.return_value = _make_proc(stdout="PHP 8.3.0")
            assert provider.is_available() is True

    def test_is_available_when_binary_missing(self):
        provider = PhpIniDefaults()
        with patch("iniscan.rule_engine.defaults.subprocess.run") as mock_run:
            mock_run.side_effect = FileNotFoundError("php")
            assert provider.is_available() is False
