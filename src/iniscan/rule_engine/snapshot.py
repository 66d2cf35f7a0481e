"""ConfigSnapshot cache and the value resolver built on top of it."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator, Mapping
from typing import Any, Protocol

logger = logging.getLogger(__name__)

DEFAULT_SECTION = "PHP"


class DefaultProvider(Protocol):
    def get_default(self, key: str) -> Any: ...


def get_section(path: str) -> str:
    """Section a dotted setting path belongs to.

    "session.cookie_secure" -> "session"; "allow_url_fopen" -> "PHP".
    """
    head, sep, _ = path.partition(".")
    return head if sep else DEFAULT_SECTION


class ConfigSnapshot:
    """Section -> key -> value view of the effective configuration.

    The snapshot doubles as a cache for runtime defaults: get_or_default()
    stores whatever it computes, so the snapshot grows as rules look up
    settings that were not in the parsed file. One snapshot is meant to be
    shared by every rule in a scan.
    """

    def __init__(self, data: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        self._data: dict[str, dict[str, Any]] = {
            section: dict(values) for section, values in (data or {}).items()
        }
        self._lock = threading.Lock()
        self._pending: dict[tuple[str, str], threading.Lock] = {}

    def get(self, section: str, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._data.get(section, {}).get(key, default)

    def has(self, section: str, key: str) -> bool:
        with self._lock:
            return key in self._data.get(section, {})

    def set(self, section: str, key: str, value: Any) -> None:
        with self._lock:
            self._data.setdefault(section, {})[key] = value

    def get_or_default(self, section: str, key: str, compute: Callable[[str], Any]) -> Any:
        """Return the stored value, or compute it, store it and return it.

        Mutates the snapshot on a miss. compute is called at most once per
        (section, key) for the lifetime of the snapshot. Misses on different
        keys compute concurrently; misses on the same key wait for the first.
        """
        with self._lock:
            values = self._data.get(section, {})
            if key in values:
                return values[key]
            key_lock = self._pending.setdefault((section, key), threading.Lock())

        with key_lock:
            with self._lock:
                values = self._data.get(section, {})
                if key in values:
                    return values[key]
            value = compute(key)
            with self._lock:
                self._data.setdefault(section, {})[key] = value
                self._pending.pop((section, key), None)
        logger.debug("Memoized default for %s.%s: %r", section, key, value)
        return value

    def sections(self) -> list[str]:
        with self._lock:
            return list(self._data)

    def as_dict(self) -> dict[str, dict[str, Any]]:
        with self._lock:
            return {section: dict(values) for section, values in self._data.items()}

    def __contains__(self, section: object) -> bool:
        with self._lock:
            return section in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self.sections())

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ConfigSnapshot):
            return self.as_dict() == other.as_dict()
        if isinstance(other, Mapping):
            return self.as_dict() == {k: dict(v) for k, v in other.items()}
        return NotImplemented

    def __repr__(self) -> str:
        return f"ConfigSnapshot({self.as_dict()!r})"


class ValueResolver:
    """Resolve setting paths against a snapshot, falling back to live defaults."""

    def __init__(self, provider: DefaultProvider) -> None:
        self._provider = provider

    @property
    def provider(self) -> DefaultProvider:
        return self._provider

    def find_value(self, path: str, snapshot: ConfigSnapshot) -> Any:
        """Return the effective value for path. May enlarge snapshot in place."""
        return snapshot.get_or_default(get_section(path), path, self._provider.get_default)


def find_value(path: str, snapshot: ConfigSnapshot, provider: DefaultProvider) -> Any:
    """Functional form of ValueResolver.find_value."""
    return ValueResolver(provider).find_value(path, snapshot)
