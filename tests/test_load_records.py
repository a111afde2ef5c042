"""Tests for loading analyzer output."""

import json
from pathlib import Path

import pytest
import yaml

from navindex.errors import InvalidRecordError, UnknownKindError
from navindex.kind import Kind
from navindex.load_records import load_records

RAW = [
    {
        "name": "Rule",
        "kind": "struct",
        "summary": "Configured auto moderation rule.\n\nDiscord docs.",
        "module_path": "guild::automod",
    },
    {"name": "Action", "kind": "enum", "module_path": ["guild", "automod"]},
]


def test_load_json(tmp_path: Path) -> None:
    """Verify JSON lists of records are loaded and normalized."""
    path = tmp_path / "items.json"
    path.write_text(json.dumps(RAW), encoding="utf-8")
    records = load_records(path)
    assert [r.name for r in records] == ["Rule", "Action"]
    assert records[0].summary == "Configured auto moderation rule."
    assert records[1].kind is Kind.ENUM


def test_load_yaml_items_document(tmp_path: Path) -> None:
    """Verify YAML documents with an items key are accepted."""
    path = tmp_path / "items.yml"
    path.write_text(yaml.dump({"items": RAW}), encoding="utf-8")
    records = load_records(path, max_summary_length=10)
    assert records[0].module_path == ("guild", "automod")
    assert records[0].summary == "Configured…"


def test_custom_separator(tmp_path: Path) -> None:
    """Verify the module path separator is configurable."""
    path = tmp_path / "items.json"
    path.write_text(
        json.dumps([{"name": "f", "kind": "fn", "module_path": "a.b"}]),
        encoding="utf-8",
    )
    assert load_records(path, separator=".")[0].module_path == ("a", "b")


@pytest.mark.parametrize(
    ("payload", "error"),
    [
        ({"something": "else"}, InvalidRecordError),
        (["not a mapping"], InvalidRecordError),
        ([{"name": "A", "kind": "class", "module_path": "m"}], UnknownKindError),
    ],
)
def test_invalid_documents(tmp_path: Path, payload: object, error: type) -> None:
    """Verify malformed analyzer output is rejected."""
    path = tmp_path / "items.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(error):
        load_records(path)


@pytest.mark.parametrize(
    ("filename", "content"),
    [
        ("items.json", '[{"name": "Rule",'),
        ("items.yaml", "- name: [Rule\n"),
        ("missing.json", None),
    ],
)
def test_unreadable_documents(
    tmp_path: Path, filename: str, content: str | None
) -> None:
    """Verify syntax errors and missing files surface as record errors."""
    path = tmp_path / filename
    if content is not None:
        path.write_text(content, encoding="utf-8")
    with pytest.raises(InvalidRecordError, match="cannot read analyzer output"):
        load_records(path)
