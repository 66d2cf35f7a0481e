"""Providers for runtime default values of settings missing from a snapshot."""

from __future__ import annotations

import json
import logging
import subprocess
from collections.abc import Mapping
from typing import Any

from iniscan.rule_engine.config import AuditConfig

logger = logging.getLogger(__name__)

# ini_get() returns false for unknown settings; json_encode keeps strings intact
_INI_GET_SNIPPET = "echo json_encode(ini_get($argv[1]));"


class StaticDefaults:
    """Defaults served from an in-memory mapping. Unknown keys resolve to None."""

    def __init__(self, defaults: Mapping[str, Any] | None = None) -> None:
        self._defaults = dict(defaults or {})

    def get_default(self, key: str) -> Any:
        return self._defaults.get(key)


class PhpIniDefaults:
    """Ask the PHP interpreter for the value it would use for a setting."""

    def __init__(self, config: AuditConfig | None = None) -> None:
        self._config = config or AuditConfig()

    def is_available(self) -> bool:
        """Check if the php binary exists and is runnable."""
        try:
            result = subprocess.run(
                [self._config.php_binary, "--version"],
                capture_output=True,
                text=True,
                timeout=self._config.lookup_timeout,
            )
            return result.returncode == 0
        except (FileNotFoundError, subprocess.TimeoutExpired):
            return False

    def get_default(self, key: str) -> str | None:
        """Return ini_get(key), or None when PHP cannot answer."""
        cmd = [self._config.php_binary, "-r", _INI_GET_SNIPPET, "--", key]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self._config.lookup_timeout,
            )
        except FileNotFoundError:
            logger.warning("php binary not found: %s", self._config.php_binary)
            return None
        except subprocess.TimeoutExpired:
            logger.warning("ini_get(%s) timed out", key)
            return None

        if result.returncode != 0:
            logger.warning("ini_get(%s) failed: %s", key, result.stderr.strip())
            return None
        return self._parse_output(result.stdout)

    @staticmethod
    def _parse_output(output: str) -> str | None:
        try:
            value = json.loads(output.strip())
        except json.JSONDecodeError:
            return None
        if value is False or value is None:
            return None
        return str(value)
