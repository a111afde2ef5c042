"""Tests for persisting the global index."""

import json
from pathlib import Path

import pytest

from navindex.errors import IndexSchemaError
from navindex.index_store import (
    CURRENT_SCHEMA_VERSION,
    index_from_dict,
    index_to_dict,
    load_index,
    save_index,
)
from navindex.item_record import ItemRecord
from navindex.run_generation import run_generation


def test_save_and_load(tmp_path: Path, workspace_records: list[ItemRecord]) -> None:
    """Verify a saved index loads back structurally identical."""
    index = run_generation(workspace_records, {}).global_index
    path = tmp_path / "out" / "navindex.json"
    save_index(index, path, "hash123")

    loaded, config_hash = load_index(path)
    assert config_hash == "hash123"
    assert loaded == index

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["meta"]["schema_version"] == CURRENT_SCHEMA_VERSION
    assert data["meta"]["total_items"] == len(workspace_records)


def test_namespace_only_modules_are_not_stored(
    workspace_records: list[ItemRecord],
) -> None:
    """Verify only documented modules are written; the tree is rebuilt on load."""
    index = run_generation(workspace_records, {}).global_index
    data = index_to_dict(index)
    stored = {tuple(m["path"]) for m in data["modules"]}
    assert ("application",) not in stored
    assert index_from_dict(data).module_tree.contains(("application",))


def test_schema_mismatch() -> None:
    """Verify indexes from another schema version are refused."""
    with pytest.raises(IndexSchemaError):
        index_from_dict({"meta": {"schema_version": 999}, "modules": []})
