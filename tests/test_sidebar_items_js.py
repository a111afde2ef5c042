"""Tests for the sidebar-items.js wire format."""

import pytest
from conftest import AUTOMOD, AUTOMOD_FRAGMENT

from navindex.build_module_payload import build_module_payload
from navindex.errors import SidebarFormatError, UnknownKindError
from navindex.item_record import ItemRecord
from navindex.kind import Kind
from navindex.sidebar_items_js import parse_sidebar_js, to_sidebar_js


def test_automod_fragment_is_byte_identical(automod_records: list[ItemRecord]) -> None:
    """Verify the serialized payload matches the generated site's fragment."""
    payload = build_module_payload(AUTOMOD, automod_records)
    assert to_sidebar_js(payload) == AUTOMOD_FRAGMENT


def test_regeneration_is_stable(automod_records: list[ItemRecord]) -> None:
    """Verify unchanged input produces identical output in any order."""
    a = to_sidebar_js(build_module_payload(AUTOMOD, automod_records))
    b = to_sidebar_js(build_module_payload(AUTOMOD, list(reversed(automod_records))))
    assert a == b


def test_parse_fragment(automod_records: list[ItemRecord]) -> None:
    """Verify an existing fragment parses into the same payload."""
    payload = parse_sidebar_js(AUTOMOD_FRAGMENT, AUTOMOD)
    assert payload == build_module_payload(AUTOMOD, automod_records)
    assert payload.buckets[Kind.STRUCT][1].summary == "Configured auto moderation rule."


def test_parse_tolerates_whitespace_and_missing_summary() -> None:
    """Verify formatting variations of the assignment are accepted."""
    payload = parse_sidebar_js(
        'window.SIDEBAR_ITEMS={"fn":[["run"]],"mod":[]}\n', ("app",)
    )
    assert payload.buckets[Kind.FUNCTION][0].summary == ""
    assert to_sidebar_js(payload) == 'window.SIDEBAR_ITEMS = {"fn":[["run",""]]};'


def test_empty_module() -> None:
    """Verify a module with no items serializes to an empty object."""
    assert to_sidebar_js(build_module_payload(("a",), [])) == "window.SIDEBAR_ITEMS = {};"


@pytest.mark.parametrize(
    "text",
    [
        "var x = 1;",
        "window.SIDEBAR_ITEMS = {not json};",
        'window.SIDEBAR_ITEMS = {"enum": "Action"};',
        'window.SIDEBAR_ITEMS = {"enum": [["Action", 3]]};',
        'window.SIDEBAR_ITEMS = {"enum": [["A"], ["A"]]};',
        'window.SIDEBAR_ITEMS = {"struct": [["", "x"]]};',
        'window.SIDEBAR_ITEMS = {"struct": [["A", "x\\ny"]]};',
    ],
)
def test_malformed_fragments(text: str) -> None:
    """Verify malformed input is reported rather than guessed at."""
    with pytest.raises(SidebarFormatError):
        parse_sidebar_js(text, AUTOMOD)


def test_unknown_kind_in_fragment() -> None:
    """Verify an undeclared kind key is rejected."""
    with pytest.raises(UnknownKindError):
        parse_sidebar_js('window.SIDEBAR_ITEMS = {"class":[["A",""]]};', AUTOMOD)
