"""Immutable, versioned generations of the index and their publication."""

import logging
import threading
import time
from dataclasses import dataclass, field

from navindex.errors import StaleSnapshotError
from navindex.global_index import GlobalIndex
from navindex.search_index import SearchIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """One fully built generation: global index plus its search index."""

    version: int
    global_index: GlobalIndex
    search_index: SearchIndex = field(compare=False)
    config_hash: str = ""
    created_at: float = field(default_factory=time.time, compare=False)

    @classmethod
    def create(
        cls,
        global_index: GlobalIndex,
        version: int = 0,
        config_hash: str = "",
        separator: str = "::",
    ) -> "Snapshot":
        """Derive the search index and wrap both in a snapshot."""
        return cls(
            version=version,
            global_index=global_index,
            search_index=SearchIndex.build(global_index, separator),
            config_hash=config_hash,
        )


class SnapshotStore:
    """Holds the live snapshot; readers never lock, publishers swap atomically."""

    def __init__(self, initial: Snapshot | None = None) -> None:
        """Optionally start with an already built snapshot."""
        self._lock = threading.Lock()
        self._current = initial
        self._last_version = initial.version if initial else 0

    def current(self) -> Snapshot | None:
        """Return the live snapshot (None until the first publish)."""
        return self._current

    def next_version(self) -> int:
        """Version number the next published snapshot should carry."""
        with self._lock:
            return self._last_version + 1

    def publish(self, snapshot: Snapshot) -> Snapshot | None:
        """Make ``snapshot`` live and return the one it replaced."""
        with self._lock:
            if snapshot.version <= self._last_version:
                raise StaleSnapshotError(snapshot.version, self._last_version)
            previous = self._current
            self._current = snapshot
            self._last_version = snapshot.version
        logger.info(
            "Published snapshot v%d (%d items)",
            snapshot.version,
            len(snapshot.global_index),
        )
        return previous
