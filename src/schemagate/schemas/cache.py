"""Compiled schema cache with mtime-based hot reload."""

import logging
import threading
from dataclasses import dataclass

from schemagate.config import SchemaSettings
from schemagate.schemas.compiler import CompiledSchema, compile_schema
from schemagate.schemas.source import SchemaSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """One published schema.

    ``location`` is the key the caller asked for; ``effective_location`` is
    where the schema was actually read from (the fallback when the primary
    could not be resolved). Staleness probes use ``effective_location``.
    """

    location: str
    effective_location: str
    schema: CompiledSchema
    last_modified: float


class SchemaCache:
    """Owns compiled schemas keyed by location string.

    Entries and the recorded modification times live in two dicts guarded
    by one lock. The lock only covers dict access: resolving and compiling
    happen outside it, so two callers may both rebuild a stale entry, but
    each finished entry is published in a single assignment.
    """

    def __init__(self, settings: SchemaSettings, source: SchemaSource | None = None):
        self.settings = settings
        self.source = source or SchemaSource()
        self._entries: dict[str, CacheEntry] = {}
        self._last_modified: dict[str, float] = {}
        self._lock = threading.Lock()

    def get(self, location: str) -> CompiledSchema:
        """Return the compiled schema for ``location``, reloading it when stale.

        Raises:
            SchemaLoadError: If the schema has to be loaded and cannot be.
        """
        with self._lock:
            entry = self._entries.get(location)

        if entry is not None and not self.is_stale(location, entry):
            return entry.schema

        if entry is not None:
            logger.info("Schema stale, reloading: %s", entry.effective_location)
            with self._lock:
                if self._entries.get(location) is entry:
                    del self._entries[location]

        return self._load(location).schema

    def is_stale(self, location: str, entry: CacheEntry | None = None) -> bool:
        """Apply the reload policy to the entry cached for ``location``."""
        if not self.settings.cache_enabled:
            return True
        if self.settings.reload_interval <= 0:
            return False

        if entry is None:
            with self._lock:
                entry = self._entries.get(location)
        probe_location = entry.effective_location if entry is not None else location
        with self._lock:
            recorded = self._last_modified.get(probe_location)
        if recorded is None:
            return True
        return self.source.last_modified(probe_location) > recorded

    def _load(self, location: str) -> CacheEntry:
        resolved = self.source.resolve(location, self.settings.fallback_location)
        schema = compile_schema(resolved.document, resolved.location)
        probed = self.source.last_modified(resolved.location)

        with self._lock:
            recorded = max(probed, self._last_modified.get(resolved.location, probed))
            self._last_modified[resolved.location] = recorded
            entry = CacheEntry(
                location=location,
                effective_location=resolved.location,
                schema=schema,
                last_modified=recorded,
            )
            self._entries[location] = entry

        logger.info("Schema loaded: %s", resolved.location)
        return entry

    def invalidate(self) -> None:
        """Drop every entry and recorded modification time."""
        with self._lock:
            self._entries.clear()
            self._last_modified.clear()
        logger.info("Schema cache cleared")

    def entry(self, location: str) -> CacheEntry | None:
        with self._lock:
            return self._entries.get(location)

    def stats(self) -> dict:
        """Snapshot of the cache for diagnostics."""
        with self._lock:
            entries = list(self._entries.values())
        return {
            "entries": len(entries),
            "cache_enabled": self.settings.cache_enabled,
            "reload_interval": self.settings.reload_interval,
            "locations": [
                {
                    "location": e.location,
                    "effective_location": e.effective_location,
                    "last_modified": e.last_modified,
                }
                for e in entries
            ],
        }
