"""Persisting a global index between the build and the query service."""

import json
import logging
from pathlib import Path
from typing import Any

from navindex.aggregate import aggregate
from navindex.build_module_payload import build_module_payload
from navindex.errors import IndexSchemaError
from navindex.global_index import GlobalIndex
from navindex.item_record import ItemRecord
from navindex.kind import Kind

logger = logging.getLogger(__name__)

CURRENT_SCHEMA_VERSION = 1


def index_to_dict(index: GlobalIndex, config_hash: str = "") -> dict[str, Any]:
    """Plain-data form of every documented module in the index."""
    modules = []
    for module_path in index.module_items:
        payload = index.payload_for(module_path)
        modules.append(
            {
                "path": list(module_path),
                "origin": payload.origin,
                "items": payload.to_sidebar_dict(),
            }
        )
    return {
        "meta": {
            "schema_version": CURRENT_SCHEMA_VERSION,
            "config_hash": config_hash,
            "total_items": len(index),
        },
        "modules": modules,
    }


def index_from_dict(data: dict[str, Any]) -> GlobalIndex:
    """Rebuild a global index, re-running the same integrity checks as a build."""
    schema_ver = data.get("meta", {}).get("schema_version", 0)
    if schema_ver != CURRENT_SCHEMA_VERSION:
        msg = f"Schema version mismatch ({schema_ver} != {CURRENT_SCHEMA_VERSION})"
        raise IndexSchemaError(msg)

    payloads = []
    for module in data.get("modules", []):
        module_path = tuple(module["path"])
        records = [
            ItemRecord(
                name=name,
                kind=Kind.from_token(token),
                summary=summary,
                module_path=module_path,
            )
            for token, pairs in module.get("items", {}).items()
            for name, summary in pairs
        ]
        payloads.append(
            build_module_payload(module_path, records, origin=module.get("origin"))
        )
    return aggregate(payloads)


def save_index(index: GlobalIndex, path: Path, config_hash: str = "") -> None:
    """Write the index as JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(index_to_dict(index, config_hash), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    logger.info("Saved index with %d items to %s", len(index), path)


def load_index(path: Path) -> tuple[GlobalIndex, str]:
    """Load an index written by ``save_index``; returns it with its config hash."""
    data = json.loads(path.read_text(encoding="utf-8"))
    index = index_from_dict(data)
    return index, data.get("meta", {}).get("config_hash", "")
