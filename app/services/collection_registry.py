"""
Collection registry.

A collection is an operator-defined alias for a group of subreddits, e.g.
``ai=singularity+claude``. All aliases come from one setting
(REDLIB_COLLECTIONS) in the form ``alias=target;alias=target``, parsed once
per process and never modified afterwards.

Malformed entries (no '=', empty alias, empty target) are dropped without
raising: a typo in one alias must not stop the app from starting.

Usage:
    from app.services import collection_registry

    target = collection_registry.resolve("ai")   # "singularity+claude" or None
    for c in collection_registry.all_collections():
        print(c.name, c.target)
"""

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

from app.config import get_setting
from app.constants import CollectionFormat, SettingKeys

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Collection:
    """A single collection alias and the subreddit expression it stands for."""

    name: str
    target: str


@dataclass
class CollectionParseReport:
    """Outcome of parsing a collections string, including what was dropped."""

    accepted: list[tuple[str, str]] = field(default_factory=list)
    dropped: list[tuple[str, str]] = field(default_factory=list)  # (raw entry, reason)

    def to_map(self) -> dict[str, str]:
        # Later duplicates overwrite earlier ones
        return dict(self.accepted)


# -----------------------------------------------------------------------------
# Parsing
# -----------------------------------------------------------------------------


def inspect_collection_string(value: Optional[str]) -> CollectionParseReport:
    """
    Parse a collections string and record why each rejected entry was dropped.

    Entries are split on ';' and then on the first '=' only, so targets may
    themselves contain '='. Whitespace around entries, aliases and targets
    is trimmed.
    """
    report = CollectionParseReport()
    if value is None:
        return report

    for entry in value.split(CollectionFormat.ENTRY_SEPARATOR):
        trimmed = entry.strip()
        if not trimmed:
            continue

        alias, sep, target = trimmed.partition(CollectionFormat.ALIAS_SEPARATOR)
        if not sep:
            report.dropped.append((trimmed, "missing '='"))
            continue

        alias = alias.strip()
        target = target.strip()
        if not alias:
            report.dropped.append((trimmed, "empty alias"))
            continue
        if not target:
            report.dropped.append((trimmed, "empty target"))
            continue

        report.accepted.append((alias, target))

    return report


def parse_collection_map(value: Optional[str]) -> dict[str, str]:
    """Parse a collections string into an alias -> target dict."""
    report = inspect_collection_string(value)
    for entry, reason in report.dropped:
        logger.debug(f"Ignoring collection entry {entry!r}: {reason}")
    return report.to_map()


# -----------------------------------------------------------------------------
# Registry
# -----------------------------------------------------------------------------


class CollectionRegistry:
    """
    Read-only alias -> target lookup.

    Safe to share between threads: the mapping is frozen at construction.
    """

    def __init__(self, mapping: Mapping[str, str]):
        self._map = MappingProxyType(dict(mapping))

    @classmethod
    def from_string(cls, value: Optional[str]) -> "CollectionRegistry":
        return cls(parse_collection_map(value))

    def all(self) -> list[Collection]:
        """Return every collection sorted case-insensitively by name."""
        entries = [Collection(name=name, target=target) for name, target in self._map.items()]
        entries.sort(key=lambda c: c.name.lower())
        return entries

    def resolve(self, name: str) -> Optional[str]:
        """Look up the target for an alias (case-sensitive). None if unknown."""
        return self._map.get(name)

    def is_empty(self) -> bool:
        return not self._map

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, name: object) -> bool:
        return name in self._map


# -----------------------------------------------------------------------------
# Process-wide instance
# -----------------------------------------------------------------------------

_registry: Optional[CollectionRegistry] = None
_registry_lock = threading.Lock()


def get_collection_registry() -> CollectionRegistry:
    """
    Get or build the process-wide registry.

    The first caller parses REDLIB_COLLECTIONS; concurrent first callers
    wait on the lock and receive the same instance.
    """
    global _registry

    registry = _registry
    if registry is not None:
        return registry

    with _registry_lock:
        if _registry is None:
            _registry = CollectionRegistry.from_string(get_setting(SettingKeys.COLLECTIONS))
            logger.info(
                f"Collections loaded: {len(_registry)} configured",
                extra={"event": "collections_loaded", "collection_count": len(_registry)},
            )
        return _registry


def set_collection_registry(registry: CollectionRegistry) -> None:
    """
    Install an explicitly built registry (startup injection or tests).
    """
    global _registry
    with _registry_lock:
        _registry = registry


def reset_collection_registry() -> None:
    """
    Reset the registry singleton (for testing).
    """
    global _registry
    with _registry_lock:
        _registry = None


def all_collections() -> list[Collection]:
    """Sorted list of all configured collections."""
    return get_collection_registry().all()


def resolve(name: str) -> Optional[str]:
    """Target expression for a collection alias, or None."""
    return get_collection_registry().resolve(name)


def is_empty() -> bool:
    """Whether no collections are configured."""
    return get_collection_registry().is_empty()
