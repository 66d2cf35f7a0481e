"""AuditConfig dataclass and loader for rule engine settings."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class AuditConfig:
    threshold: str | None = None
    php_binary: str = "php"
    lookup_timeout: int = 5
    fail_fast: bool = False


def load_audit_config(path: Path | None = None) -> AuditConfig:
    """Load audit config from .iniscan.json."""
    config = AuditConfig()
    if path and path.exists():
        try:
            text = path.read_text()
            if text.strip():
                data = json.loads(text)
                section = data.get("audit", {})
                if isinstance(section, dict):
                    _apply(config, section)
        except (json.JSONDecodeError, OSError):
            pass
    if env_val := os.environ.get("INISCAN_THRESHOLD"):
        config.threshold = env_val
    if env_val := os.environ.get("INISCAN_PHP_BINARY"):
        config.php_binary = env_val
    if env_val := os.environ.get("INISCAN_LOOKUP_TIMEOUT"):
        try:
            config.lookup_timeout = int(env_val)
        except ValueError:
            pass
    if env_val := os.environ.get("INISCAN_FAIL_FAST"):
        config.fail_fast = env_val.lower() in ("true", "1", "yes")
    return config


def _apply(cfg: AuditConfig, data: dict[str, object]) -> None:
    if "threshold" in data and isinstance(data["threshold"], str):
        cfg.threshold = data["threshold"]
    if "php_binary" in data and isinstance(data["php_binary"], str):
        cfg.php_binary = data["php_binary"]
    timeout = data.get("lookup_timeout")
    if isinstance(timeout, int) and not isinstance(timeout, bool):
        cfg.lookup_timeout = timeout
    if "fail_fast" in data and isinstance(data["fail_fast"], bool):
        cfg.fail_fast = data["fail_fast"]
