"""Reading and writing the ``sidebar-items.js`` wire format."""

import json
import re
from collections.abc import Sequence

from navindex.build_module_payload import build_module_payload
from navindex.errors import InvalidRecordError, NavIndexError, SidebarFormatError
from navindex.item_record import ItemRecord
from navindex.kind import Kind
from navindex.module_payload import ModulePayload

SIDEBAR_GLOBAL = "window.SIDEBAR_ITEMS"
SIDEBAR_RE = re.compile(r"^\s*window\.SIDEBAR_ITEMS\s*=\s*(\{.*\})\s*;?\s*$", re.DOTALL)


def to_sidebar_js(payload: ModulePayload) -> str:
    """Serialize a payload exactly as the generated site expects it."""
    body = json.dumps(
        payload.to_sidebar_dict(),
        separators=(",", ":"),
        sort_keys=True,
        ensure_ascii=False,
    )
    return f"{SIDEBAR_GLOBAL} = {body};"


def parse_sidebar_js(text: str, module_path: Sequence[str]) -> ModulePayload:
    """Parse a fragment back into a payload for ``module_path``."""
    m = SIDEBAR_RE.match(text)
    if not m:
        msg = f"Not a {SIDEBAR_GLOBAL} assignment"
        raise SidebarFormatError(msg)
    try:
        data = json.loads(m.group(1))
    except json.JSONDecodeError as e:
        msg = f"Invalid sidebar JSON: {e}"
        raise SidebarFormatError(msg) from e
    if not isinstance(data, dict):
        msg = "Sidebar payload must be an object"
        raise SidebarFormatError(msg)

    module = tuple(module_path)
    records = []
    for token, pairs in data.items():
        if not isinstance(pairs, list):
            msg = f"Bucket {token!r} must be a list"
            raise SidebarFormatError(msg)
        kind = Kind.from_token(token)
        for pair in pairs:
            records.append(_record_from_pair(pair, kind, module))

    try:
        return build_module_payload(module, records)
    except NavIndexError as e:
        raise SidebarFormatError(str(e)) from e


def _record_from_pair(pair: object, kind: Kind, module: tuple[str, ...]) -> ItemRecord:
    if (
        not isinstance(pair, list)
        or not 1 <= len(pair) <= 2  # noqa: PLR2004
        or not all(isinstance(x, str) for x in pair)
    ):
        msg = f"Malformed {kind.value} entry: {pair!r}"
        raise SidebarFormatError(msg)
    summary = pair[1] if len(pair) == 2 else ""  # noqa: PLR2004
    try:
        return ItemRecord(name=pair[0], kind=kind, summary=summary, module_path=module)
    except InvalidRecordError as e:
        raise SidebarFormatError(str(e)) from e
