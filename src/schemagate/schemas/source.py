"""Schema source resolution across bundled, file-URL and filesystem locations."""

import json
import logging
import os
import time
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

from schemagate.errors.exceptions import SchemaLoadError

logger = logging.getLogger(__name__)

BUNDLED_PREFIX = "classpath:"
FILE_URL_PREFIX = "file:"
BUNDLED_PACKAGE = "schemagate.resources"


@dataclass(frozen=True)
class ResolvedSchema:
    """Schema document together with the location that actually produced it."""

    location: str
    document: dict | bool


def is_bundled(location: str) -> bool:
    return location.startswith(BUNDLED_PREFIX)


def is_file_url(location: str) -> bool:
    return location.startswith(FILE_URL_PREFIX)


def file_url_to_path(location: str) -> Path:
    """Convert ``file:/abs/path`` or ``file:///abs/path`` to a filesystem path."""
    parsed = urlparse(location)
    path = parsed.path if parsed.netloc in ("", "localhost") else f"//{parsed.netloc}{parsed.path}"
    return Path(url2pathname(path))


def _bundled_resource(location: str):
    rel = location[len(BUNDLED_PREFIX):].lstrip("/")
    return resources.files(BUNDLED_PACKAGE).joinpath(*rel.split("/"))


class SchemaSource:
    """Turns schema location strings into parsed schema documents.

    Three location kinds are understood, dispatched on prefix:

    - ``classpath:<path>``: a resource bundled in ``schemagate.resources``.
    - ``file:<url>``: a file URL.
    - anything else: a plain filesystem path.

    Read or parse failures for one candidate are logged and treated as
    "not found" so that resolution can move on to the fallback.
    """

    def __init__(self, clock=time.time):
        self._clock = clock

    def read(self, location: str | None) -> bytes | None:
        """Return the raw bytes at ``location`` or None if it cannot be read."""
        if not location:
            return None
        try:
            if is_bundled(location):
                resource = _bundled_resource(location)
                if resource.is_file():
                    logger.debug("Loading bundled schema: %s", location)
                    return resource.read_bytes()
            elif is_file_url(location):
                path = file_url_to_path(location)
                if path.exists():
                    logger.debug("Loading schema from file URL: %s", location)
                    return path.read_bytes()
            else:
                path = Path(location)
                if path.exists() and path.is_file():
                    logger.debug("Loading schema from filesystem: %s", location)
                    return path.read_bytes()
        except (OSError, ValueError) as exc:
            logger.warning("Failed to read schema at %s: %s", location, exc)
            return None

        logger.debug("Schema not found at %s", location)
        return None

    def load(self, location: str | None) -> dict | bool | None:
        """Read and parse one candidate location, None when unusable."""
        raw = self.read(location)
        if raw is None:
            return None
        try:
            document = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Schema at %s is not valid JSON: %s", location, exc)
            return None
        if not isinstance(document, (dict, bool)):
            logger.warning("Schema at %s is not a JSON object", location)
            return None
        return document

    def resolve(self, primary: str, fallback: str | None = None) -> ResolvedSchema:
        """Load the primary location, falling back to ``fallback`` if configured.

        Raises:
            SchemaLoadError: If neither location yields a schema document.
        """
        document = self.load(primary)
        if document is not None:
            return ResolvedSchema(location=primary, document=document)

        if fallback:
            logger.warning("Primary schema location unavailable, trying fallback: %s", fallback)
            document = self.load(fallback)
            if document is not None:
                return ResolvedSchema(location=fallback, document=document)

        tried = ", ".join(loc for loc in (primary, fallback) if loc)
        raise SchemaLoadError(f"Schema file not found: {tried}", location=fallback or primary)

    def last_modified(self, location: str) -> float:
        """Current modification time of ``location`` in epoch seconds.

        Bundled resources report the current wall-clock time on every probe.
        Filesystem and file-URL locations report their mtime, or 0.0 when the
        file cannot be stat'ed.
        """
        if is_bundled(location):
            return self._clock()
        try:
            path = file_url_to_path(location) if is_file_url(location) else Path(location)
            return os.stat(path).st_mtime
        except (OSError, ValueError):
            logger.debug("Could not stat schema location: %s", location)
            return 0.0
