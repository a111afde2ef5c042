"""Logic for summarizing a generation run as a JSON report."""

import json
import time
from pathlib import Path
from typing import Any

from navindex.index_store import CURRENT_SCHEMA_VERSION
from navindex.snapshot import Snapshot


class BuildReport:
    """Collects statistics about one generation run."""

    def __init__(self, config_hash: str) -> None:
        """Start the run clock."""
        self.config_hash = config_hash
        self.start_time = time.time()
        self.failures: list[str] = []

    def add_failure(self, message: str) -> None:
        """Record a module or run failure."""
        self.failures.append(message)

    def build(self, snapshot: Snapshot | None) -> dict[str, Any]:
        """Return the report as plain data."""
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "schema_version": CURRENT_SCHEMA_VERSION,
                "snapshot_version": snapshot.version if snapshot else None,
                "succeeded": snapshot is not None and not self.failures,
            },
            "failures": list(self.failures),
            "stats": self._compute_stats(snapshot) if snapshot else {},
        }

    def generate_report(self, path: str, snapshot: Snapshot | None) -> None:
        """Write the report to a JSON file."""
        Path(path).write_text(
            json.dumps(self.build(snapshot), indent=2), encoding="utf-8"
        )

    def _compute_stats(self, snapshot: Snapshot) -> dict[str, Any]:
        index = snapshot.global_index
        nodes = list(index.module_tree.walk())
        namespace_only = [n for n in nodes if not n.documented]
        largest = max(
            (
                (sum(len(items) for items in buckets.values()), "::".join(module))
                for module, buckets in index.module_items.items()
            ),
            default=(0, ""),
        )
        return {
            "total_modules": len(nodes),
            "documented_modules": len(nodes) - len(namespace_only),
            "namespace_only_modules": len(namespace_only),
            "total_items": len(index),
            "kind_counts": dict(sorted(index.kind_counts().items())),
            "searchable_names": len(snapshot.search_index),
            "largest_module": {"module": largest[1], "items": largest[0]},
            "max_depth": max((len(n.path) for n in nodes), default=0),
        }
