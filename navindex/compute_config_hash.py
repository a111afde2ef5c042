"""Fingerprint of the configuration keys that shape a generated index."""

import hashlib
import json
from typing import Any

# Worker count, search limits and output filenames do not change index content.
INDEX_KEYS = ("path_separator", "exclude_modules", "summary")


def compute_config_hash(config: dict[str, Any]) -> str:
    """SHA-256 over the canonical JSON form of the index-affecting keys.

    ``exclude_modules`` is compared as a set so that reordering the list does
    not produce a new fingerprint. Keys missing from ``config`` hash as absent.
    """
    relevant = {key: config[key] for key in INDEX_KEYS if key in config}
    if "exclude_modules" in relevant:
        relevant["exclude_modules"] = sorted(set(relevant["exclude_modules"]))
    canonical = json.dumps(relevant, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
